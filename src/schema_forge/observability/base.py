import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MetricsHook(Protocol):
    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Writes every metric as a DEBUG log record.

    Useful for CLI runs where no metrics backend is wired in.
    """

    def __init__(self, level: int = logging.DEBUG) -> None:
        self._level = level

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "metric %s=%.1fms labels=%s", name, value_ms, labels or {})

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "metric %s+=%d labels=%s", name, value, labels or {})
