from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from ..domain import Shuffler
from ..infrastructure import resolve
from ..infrastructure.metrics import metrics
from .output import open_output, render_line, selected, write_lines

if TYPE_CHECKING:
    from .container import ShufConfig

logger = logging.getLogger(__name__)


@dataclass
class ShufWorkflow:
    """Resolve the lines, shuffle them, then write the requested sample."""

    config: ShufConfig
    shuffler: Shuffler
    stdin: TextIO
    stdout: TextIO

    def output_count(self, numlines: int) -> int:
        head_count = self.config.head_count
        if head_count is None:
            return numlines
        if head_count > numlines:
            logger.debug("Clamping head count %s to %s available lines", head_count, numlines)
            return numlines
        return head_count

    def run(self) -> int:
        config = self.config
        with metrics.span("resolve", mode=config.mode.value) as record:
            sequence = resolve(
                config.mode,
                config.operands,
                input_range=config.input_range,
                stdin=self.stdin,
            )
            record["numlines"] = sequence.numlines

        numlines = sequence.numlines
        outlines = self.output_count(numlines)
        with metrics.span("shuffle", numlines=numlines, outlines=outlines):
            self.shuffler.shuffle(sequence.lines, numlines, outlines)

        # Output is opened only after the input was fully read.
        with metrics.span("write", nul=config.zero_terminated) as record:
            with open_output(config.output, self.stdout) as stream:
                rendered = (render_line(sequence, handle) for handle in selected(sequence, outlines))
                record["written"] = write_lines(stream, rendered, eol=config.eol)
        return record["written"]
