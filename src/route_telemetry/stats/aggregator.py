"""Per-route and overall statistics over an event window."""

from __future__ import annotations

from collections.abc import Sequence
from math import ceil

from route_telemetry.routing.normalizer import CANONICAL_ROUTES, normalize_route
from route_telemetry.types import AggregateStats, ExecutionEvent, RouteStats


def compute_stats(
    events: Sequence[ExecutionEvent], *, percentile: float = 95.0
) -> AggregateStats:
    """Aggregate an ordered event sequence into dashboard statistics.

    Process:
    1. Bucket events by normalized route, in order of first appearance.
    2. Per bucket, compute count, mean latency, success rate (0-100) and the
       nearest-rank latency percentile.
    3. Compute the overall mean latency across every event.
    4. Express each named canonical route as a share of all events.

    Empty input yields zeroed statistics rather than NaN.
    """

    groups: dict[str, list[ExecutionEvent]] = {}
    for event in events:
        groups.setdefault(normalize_route(event.route), []).append(event)

    route_breakdown: dict[str, RouteStats] = {}
    for route, members in groups.items():
        latencies = sorted(member.latency_ms for member in members)
        successful = sum(1 for member in members if member.success)
        route_breakdown[route] = RouteStats(
            count=len(members),
            avg_latency=average(latencies),
            success_rate=(successful / len(members)) * 100.0,
            p95_latency=nearest_rank_percentile(latencies, percentile),
        )

    total = len(events)
    route_percentages = {
        route: _percent(len(groups.get(route, ())), total) for route in CANONICAL_ROUTES
    }

    return AggregateStats(
        total=total,
        avg_latency=average([event.latency_ms for event in events]),
        route_breakdown=route_breakdown,
        route_percentages=route_percentages,
    )


def average(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    count = len(values)
    # Divide before summing so large finite latencies cannot overflow to inf.
    return sum(value / count for value in values)


def nearest_rank_percentile(sorted_values: Sequence[float], percentile: float) -> float:
    """Pick the element at rank ceil(p/100 * n), clamped to the sequence."""
    if not sorted_values:
        return 0.0
    index = ceil((percentile / 100.0) * len(sorted_values)) - 1
    index = min(max(index, 0), len(sorted_values) - 1)
    return sorted_values[index]


def _percent(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return (count / total) * 100.0
