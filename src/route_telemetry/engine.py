"""Routing telemetry engine: bounded event retention plus on-demand stats."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from route_telemetry.config import TelemetryConfig
from route_telemetry.events.log import EventLog
from route_telemetry.obs.tracing import TelemetryObserver, Timer
from route_telemetry.stats.aggregator import compute_stats
from route_telemetry.types import AggregateStats, ExecutionEvent, TelemetryNotice


def _epoch_ms() -> float:
    return time.time() * 1000.0


class RouteTelemetry:
    """Collects routed-query events and reports per-route statistics.

    Construct one instance per process and hand it to every producer and
    consumer. Writes and snapshots share one lock; aggregation runs on the
    snapshot outside it, so a reader never sees the log mid-eviction.
    """

    def __init__(
        self,
        config: TelemetryConfig | None = None,
        *,
        observer: TelemetryObserver | None = None,
        clock: Callable[[], float] = _epoch_ms,
    ) -> None:
        self.config = config or TelemetryConfig()
        self._log = EventLog(self.config.capacity)
        self._lock = threading.Lock()
        self._observer = observer
        self._clock = clock
        self._last_timestamp = 0.0

    @property
    def capacity(self) -> int:
        return self._log.capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._log)

    def set_observer(self, observer: TelemetryObserver | None) -> None:
        """Set an optional callback invoked after each record and stats read."""
        self._observer = observer

    def record(
        self,
        route: str,
        latency_ms: float,
        success: bool,
        query: str | None = None,
        confidence: float | None = None,
        model: str | None = None,
    ) -> None:
        with self._lock:
            # Wall clocks can step backwards; keep insertion order non-decreasing.
            timestamp = max(self._clock(), self._last_timestamp)
            self._last_timestamp = timestamp
            event = ExecutionEvent(
                route=route,
                latency_ms=latency_ms,
                success=success,
                timestamp=timestamp,
                query=query or "",
                confidence=confidence,
                model=model,
            )
            self._log.append(event)
            size = len(self._log)

        if self._observer is not None:
            self._observer(TelemetryNotice(action="recorded", log_size=size, event=event))

    def log(self, query: str, route: str, latency_ms: float) -> None:
        """Record a successful execution of `query` on `route`."""
        self.record(route, latency_ms, True, query)

    def get_stats(self) -> AggregateStats:
        with self._lock:
            events = self._log.snapshot()

        if self._observer is not None:
            self._observer(TelemetryNotice(action="stats", log_size=len(events)))
        return compute_stats(events, percentile=self.config.percentile)

    def recent(self, limit: int = 20) -> list[ExecutionEvent]:
        """Most recent raw events, oldest first. Route names are not normalized."""
        with self._lock:
            return list(self._log.tail(limit))

    @contextmanager
    def track(
        self,
        route: str,
        *,
        query: str | None = None,
        confidence: float | None = None,
        model: str | None = None,
    ) -> Iterator[Timer]:
        """Time the enclosed block and record it against `route`.

        The event is marked failed when the block raises; the exception is
        re-raised after recording.
        """

        success = False
        timer = Timer()
        try:
            with timer:
                yield timer
            success = True
        finally:
            self.record(route, timer.elapsed_ms, success, query, confidence, model)
