"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class ExecutionEvent:
    """One observation of a routed query."""

    route: str
    latency_ms: float
    success: bool
    timestamp: float
    query: str = ""
    confidence: float | None = None
    model: str | None = None


@dataclass(slots=True, frozen=True)
class RouteStats:
    """Per-route statistics derived from one canonical bucket."""

    count: int
    avg_latency: float
    success_rate: float
    p95_latency: float

    def to_dict(self) -> dict[str, float | int]:
        return {
            "count": self.count,
            "avgLatency": self.avg_latency,
            "successRate": self.success_rate,
            "p95Latency": self.p95_latency,
        }


@dataclass(slots=True, frozen=True)
class AggregateStats:
    """Overall statistics for the current event window.

    `route_breakdown` only holds routes with at least one event, including
    buckets keyed by unrecognized route names. `route_percentages` always
    covers the six named canonical routes.
    """

    total: int
    avg_latency: float
    route_breakdown: dict[str, RouteStats] = field(default_factory=dict)
    route_percentages: dict[str, float] = field(default_factory=dict)

    def ranked_routes(self) -> list[tuple[str, RouteStats]]:
        """Breakdown entries ordered by count, busiest route first."""
        return sorted(
            self.route_breakdown.items(), key=lambda item: item[1].count, reverse=True
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable payload in the dashboard wire shape."""
        return {
            "total": self.total,
            "avgLatency": self.avg_latency,
            "routeBreakdown": {
                route: stats.to_dict() for route, stats in self.route_breakdown.items()
            },
            "routePercentages": dict(self.route_percentages),
        }


@dataclass(slots=True, frozen=True)
class TelemetryNotice:
    """Payload passed to an engine observer after each write or read."""

    action: str
    log_size: int
    event: ExecutionEvent | None = None
