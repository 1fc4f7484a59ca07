from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, TextIO

from ..domain import Randomizer, Shuffler, SourceMode
from ..infrastructure.random import SystemRandomizer
from .workflow import ShufWorkflow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShufConfig:
    mode: SourceMode = SourceMode.FILE
    operands: tuple[str, ...] = ()
    input_range: Optional[str] = None
    head_count: Optional[int] = None
    output: Optional[str] = None
    zero_terminated: bool = False
    log_level: str = "WARNING"
    metrics_log: Optional[str] = None

    @property
    def eol(self) -> str:
        return "\0" if self.zero_terminated else "\n"


def create_workflow(
    config: ShufConfig,
    *,
    stdin: TextIO,
    stdout: TextIO,
    randomizer: Randomizer | None = None,
) -> ShufWorkflow:
    randomizer = randomizer or SystemRandomizer()
    logger.debug("Using %s (max_value=%s)", type(randomizer).__name__, randomizer.max_value)
    return ShufWorkflow(
        config,
        shuffler=Shuffler(randomizer),
        stdin=stdin,
        stdout=stdout,
    )
