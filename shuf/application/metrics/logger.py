from __future__ import annotations

import logging
from pathlib import Path

from ...infrastructure.metrics import METRICS_LOGGER


def configure_metrics_logger(path: str, *, logger_name: str = METRICS_LOGGER) -> logging.Logger:
    """
    Route run metrics to ``path``, one JSON object per line.
    Each invocation appends its records; an existing handler for the same file is reused.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    for handler in logger.handlers[:]:
        if getattr(handler, "baseFilename", None) == str(target.absolute()):
            return logger
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(target, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
