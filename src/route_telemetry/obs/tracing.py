"""Timing and observer hooks for the telemetry engine."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from route_telemetry.types import TelemetryNotice

TelemetryObserver = Callable[[TelemetryNotice], None]


class Timer:
    """Simple context timer used around routed operations."""

    def __init__(self) -> None:
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0


def logging_observer(logger: logging.Logger | None = None) -> TelemetryObserver:
    """Build an observer that writes one DEBUG line per engine notice."""

    target = logger or logging.getLogger("route_telemetry.engine")

    def _observe(notice: TelemetryNotice) -> None:
        event = notice.event
        if event is None:
            target.debug("%s requested size=%d", notice.action, notice.log_size)
            return
        target.debug(
            "%s route=%s latency_ms=%.0f success=%s size=%d query=%r",
            notice.action,
            event.route,
            event.latency_ms,
            event.success,
            notice.log_size,
            event.query[:50],
        )

    return _observe
