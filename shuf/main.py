from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence, TextIO

from dotenv import load_dotenv

from .application import ShufConfig, create_workflow
from .application.metrics.logger import configure_metrics_logger
from .domain import MAX_LINES, ShufError, SourceMode, UsageError
from .infrastructure import parse_unsigned
from .infrastructure.metrics import metrics

PROG = "shuf"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Randomly permute lines.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-e",
        "--echo",
        action="store_true",
        help="Treat ARGs as lines",
    )
    source.add_argument(
        "-i",
        "--input-range",
        metavar="LO-HI",
        help="Treat numbers LO..HI as lines",
    )
    parser.add_argument(
        "-n",
        "--head-count",
        metavar="NUM",
        help="Output at most NUM lines",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Write to FILE, not standard output",
    )
    parser.add_argument(
        "-z",
        "--zero-terminated",
        action="store_true",
        help="NUL terminated output",
    )
    parser.add_argument("operands", nargs="*", metavar="FILE | ARG")
    return parser


def load_config(args: argparse.Namespace) -> ShufConfig:
    if args.echo:
        mode = SourceMode.ARGUMENTS
    elif args.input_range is not None:
        mode = SourceMode.RANGE
    else:
        mode = SourceMode.FILE
    head_count = None
    if args.head_count is not None:
        head_count = parse_unsigned(args.head_count, MAX_LINES)
    return ShufConfig(
        mode=mode,
        operands=tuple(args.operands),
        input_range=args.input_range,
        head_count=head_count,
        output=args.output,
        zero_terminated=args.zero_terminated,
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        metrics_log=os.getenv("SHUF_METRICS_LOG", "").strip() or None,
    )


def inherited_stream(stream: TextIO, *, newline: str) -> TextIO:
    """Switch an inherited stdio stream to the same text settings as named files."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8", errors="surrogateescape", newline=newline)
    return stream


def describe_os_error(exc: OSError) -> str:
    reason = exc.strerror or str(exc)
    if exc.filename is None:
        return reason
    return f"can't open '{exc.filename}': {reason}"


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    try:
        config = load_config(args)
    except ShufError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if config.metrics_log:
        metrics.configure(configure_metrics_logger(config.metrics_log))
    logger.debug(
        "Config loaded: mode=%s, operands=%s, head_count=%s, output=%s, zero_terminated=%s",
        config.mode.value,
        len(config.operands),
        config.head_count,
        config.output or "stdout",
        config.zero_terminated,
    )

    workflow = create_workflow(
        config,
        stdin=stdin if stdin is not None else inherited_stream(sys.stdin, newline="\n"),
        stdout=stdout if stdout is not None else inherited_stream(sys.stdout, newline=""),
    )
    try:
        written = workflow.run()
    except UsageError as exc:
        parser.error(str(exc))
    except ShufError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{PROG}: {describe_os_error(exc)}", file=sys.stderr)
        return 1
    logger.debug("Wrote %s lines", written)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
