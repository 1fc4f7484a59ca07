from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

METRICS_LOGGER = "metrics.actions"


class MetricsClient:
    """Times the phases of a run and logs each as a JSON line."""

    def __init__(self):
        self._logger = logging.getLogger(METRICS_LOGGER)

    def configure(self, logger: logging.Logger | None = None) -> None:
        if logger:
            self._logger = logger

    @contextmanager
    def span(self, action: str, **fields: Any) -> Iterator[dict[str, Any]]:
        """
        Yield a dict of fields for the record; the block may add results to it
        (e.g. line counts known only once the phase finished).
        """
        start = time.perf_counter()
        record: dict[str, Any] = dict(fields)
        success = True
        try:
            yield record
        except Exception:
            success = False
            raise
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            payload = {
                "ts": datetime.now(timezone.utc).isoformat(),
                "action": action,
                "duration_ms": round(duration_ms, 3),
                "success": success,
                **record,
            }
            self._logger.info(json.dumps(payload, ensure_ascii=False))


metrics = MetricsClient()
