from . import names
from .base import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
