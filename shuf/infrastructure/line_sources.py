from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Sequence, TextIO

from ..domain import (
    MAX_LINES,
    MAX_RANGE_VALUE,
    BadRangeError,
    InvalidNumberError,
    LineSequence,
    RangeSpec,
    SourceMode,
    UsageError,
)

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"

_DIGITS = re.compile(r"[0-9]+")


def parse_unsigned(text: str, limit: int) -> int:
    """Parse a plain decimal number in ``0..limit``; no sign, spaces or other bases."""
    if not _DIGITS.fullmatch(text):
        raise InvalidNumberError(text)
    value = int(text)
    if value > limit:
        raise InvalidNumberError(text)
    return value


def parse_range(text: str) -> RangeSpec:
    lo_text, dash, hi_text = text.partition("-")
    if not dash:
        raise BadRangeError(text)
    lo = parse_unsigned(lo_text, MAX_RANGE_VALUE)
    hi = parse_unsigned(hi_text, MAX_RANGE_VALUE)
    if hi < lo:
        raise BadRangeError(text)
    if hi - lo >= MAX_LINES:
        raise BadRangeError(text)
    return RangeSpec(lo=lo, hi=hi)


def lines_from_arguments(operands: Sequence[str]) -> LineSequence:
    return LineSequence(mode=SourceMode.ARGUMENTS, lines=list(operands))


def lines_from_range(spec: RangeSpec) -> LineSequence:
    return LineSequence(mode=SourceMode.RANGE, lines=list(range(spec.count)), range=spec)


def read_lines(stream: TextIO) -> list[str]:
    return [line[:-1] if line.endswith("\n") else line for line in stream]


@contextmanager
def open_input(name: Optional[str], stdin: TextIO) -> Iterator[TextIO]:
    """Yield the named file, or ``stdin`` for no name or ``-``. Only files are closed."""
    if name is None or name == STDIN_MARKER:
        yield stdin
        return
    with Path(name).open("r", encoding="utf-8", errors="surrogateescape", newline="\n") as stream:
        yield stream


def lines_from_file(operands: Sequence[str], stdin: TextIO) -> LineSequence:
    if len(operands) > 1:
        raise UsageError(f"extra operand '{operands[1]}'")
    name = operands[0] if operands else None
    with open_input(name, stdin) as stream:
        lines = read_lines(stream)
    return LineSequence(mode=SourceMode.FILE, lines=lines)


def resolve(
    mode: SourceMode,
    operands: Sequence[str],
    *,
    input_range: Optional[str] = None,
    stdin: Optional[TextIO] = None,
) -> LineSequence:
    if mode is SourceMode.ARGUMENTS:
        if input_range is not None:
            raise UsageError("cannot combine -e and -i options")
        sequence = lines_from_arguments(operands)
    elif mode is SourceMode.RANGE:
        if input_range is None:
            raise UsageError("range mode requires -i LO-HI")
        if operands:
            raise UsageError(f"extra operand '{operands[0]}'")
        sequence = lines_from_range(parse_range(input_range))
    else:
        if stdin is None:
            raise ValueError("stdin stream is required for file mode")
        sequence = lines_from_file(operands, stdin)

    logger.debug("Resolved %s lines from %s source", sequence.numlines, mode.value)
    return sequence
