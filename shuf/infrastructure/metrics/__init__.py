from .jsonl import METRICS_LOGGER, MetricsClient, metrics

__all__ = ["METRICS_LOGGER", "MetricsClient", "metrics"]
