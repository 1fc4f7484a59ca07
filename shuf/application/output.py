from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO

from ..domain import LineSequence, SourceMode

logger = logging.getLogger(__name__)


def render_line(sequence: LineSequence, handle) -> str:
    if sequence.mode is SourceMode.RANGE:
        return str(sequence.range.value_of(handle))
    return handle


def selected(sequence: LineSequence, outlines: int) -> list:
    """Handles of the shuffled sample: the trailing ``outlines`` slots."""
    return sequence.lines[sequence.numlines - outlines:]


@contextmanager
def open_output(path: Optional[str], stdout: TextIO) -> Iterator[TextIO]:
    if path is None:
        yield stdout
        return
    logger.debug("Writing output to %s", path)
    with Path(path).open("w", encoding="utf-8", errors="surrogateescape", newline="") as stream:
        yield stream


def write_lines(stream: TextIO, lines: Iterable[str], *, eol: str) -> int:
    written = 0
    for line in lines:
        stream.write(line)
        stream.write(eol)
        written += 1
    stream.flush()
    return written
