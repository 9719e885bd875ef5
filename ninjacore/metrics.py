"""Timing statistics for debugging: named metrics, scoped timers, a stopwatch."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import TextIO

__all__ = [
    "Metric",
    "ScopedMetric",
    "Metrics",
    "Stopwatch",
    "get_time_millis",
]


def _now_micros() -> int:
    return time.monotonic_ns() // 1000


@dataclass
class Metric:
    """A single tracked code path: how often it ran and for how long."""

    name: str
    count: int = 0
    sum: int = 0
    """Total time spent, in microseconds."""


class ScopedMetric:
    """Context manager that adds the time spent in its body to a metric.

    With no metric it does nothing.
    """

    def __init__(self, metric: Metric | None) -> None:
        self._metric = metric
        self._start = 0

    def __enter__(self) -> ScopedMetric:
        if self._metric is not None:
            self._start = _now_micros()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._metric is None:
            return
        self._metric.count += 1
        self._metric.sum += _now_micros() - self._start


class Metrics:
    """Stores metrics and prints a summary report."""

    def __init__(self) -> None:
        self._metrics: list[Metric] = []
        self._by_name: dict[str, Metric] = {}

    def __iter__(self):
        return iter(self._metrics)

    def new_metric(self, name: str) -> Metric:
        """Create, register and return a new metric."""
        metric = Metric(name)
        self._metrics.append(metric)
        self._by_name.setdefault(name, metric)
        return metric

    def record(self, name: str) -> ScopedMetric:
        """Return a timer for the metric called name, creating it on first use."""
        metric = self._by_name.get(name)
        if metric is None:
            metric = self.new_metric(name)
        return ScopedMetric(metric)

    def report(self, stream: TextIO | None = None) -> None:
        """Print a summary table to stream (stdout by default)."""
        out = stream if stream is not None else sys.stdout
        width = max((len(m.name) for m in self._metrics), default=0)
        out.write(
            f"{'metric'.ljust(width)}\t{'count'.ljust(6)}\t"
            f"{'avg (us)'.ljust(9)}\ttotal (ms)\n"
        )
        for metric in self._metrics:
            total = metric.sum / 1000
            if metric.count:
                avg = metric.sum / metric.count
            else:
                avg = float("nan") if metric.sum == 0 else float("inf")
            out.write(
                f"{metric.name.ljust(width)}\t{str(metric.count).ljust(6)}\t"
                f"{f'{avg:.1f}'.ljust(8)}\t{total:.1f}\n"
            )


class Stopwatch:
    """Measures seconds elapsed since the last restart()."""

    def __init__(self) -> None:
        self._started = 0

    def elapsed(self) -> float:
        """Seconds since restart() was called."""
        return 1e-6 * (_now_micros() - self._started)

    def restart(self) -> None:
        self._started = _now_micros()


def get_time_millis() -> int:
    """Current time in milliseconds relative to an arbitrary epoch."""
    return _now_micros() // 1000