"""Routing telemetry aggregation package."""

from .config import TelemetryConfig
from .engine import RouteTelemetry
from .routing.normalizer import CANONICAL_ROUTES, normalize_route

__all__ = ["CANONICAL_ROUTES", "RouteTelemetry", "TelemetryConfig", "normalize_route"]
