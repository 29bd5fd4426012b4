# src/ini_kit/observability/base.py

from collections import defaultdict
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for parser and loader metrics.

    Implementations forward to a real backend (Prometheus, StatsD, ...).
    Names come from ``ini_kit.observability.names``.
    """

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

    def record_gauge(
        self,
        name: str,
        value: float,
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

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class InMemoryMetricsHook:
    """
    Keeps metrics in process.
    - counters add up per (name, labels)
    - gauges keep the last value per (name, labels)
    - latencies keep every sample per name
    """

    def __init__(self) -> None:
        self.counters: dict[tuple[str, tuple], int] = defaultdict(int)
        self.gauges: dict[tuple[str, tuple], float] = {}
        self.latencies: dict[str, list[float]] = defaultdict(list)

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies[name].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[(name, _label_key(labels))] += value

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges[(name, _label_key(labels))] = value

    def count(self, name: str, labels: dict[str, str] | None = None) -> int:
        return self.counters.get((name, _label_key(labels)), 0)

    def gauge(self, name: str, labels: dict[str, str] | None = None) -> float | None:
        return self.gauges.get((name, _label_key(labels)))


def _label_key(labels: dict[str, str] | None) -> tuple:
    return tuple(sorted((labels or {}).items()))
