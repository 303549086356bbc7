"""FastAPI entrypoint for event ingestion and dashboard stats polling."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, Query, Request
from pydantic import BaseModel, Field

from route_telemetry.config import ServiceSettings
from route_telemetry.engine import RouteTelemetry
from route_telemetry.obs.logging_setup import configure_logging
from route_telemetry.obs.tracing import logging_observer

logger = logging.getLogger(__name__)


class RecordRequest(BaseModel):
    route: str = Field(min_length=1)
    latency_ms: float = Field(ge=0.0, allow_inf_nan=False)
    success: bool = True
    query: str | None = None
    confidence: float | None = Field(default=None, allow_inf_nan=False)
    model: str | None = None


class LogRequest(BaseModel):
    query: str
    route: str = Field(min_length=1)
    latency_ms: float = Field(ge=0.0, allow_inf_nan=False)


def create_app(
    telemetry: RouteTelemetry | None = None,
    settings: ServiceSettings | None = None,
) -> FastAPI:
    """Build the HTTP app around an explicitly constructed telemetry engine."""

    settings = settings or ServiceSettings()
    engine = telemetry if telemetry is not None else RouteTelemetry(settings.telemetry_config())
    if settings.log_events:
        engine.set_observer(logging_observer())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info(
            "telemetry service started capacity=%d percentile=%.1f",
            engine.capacity,
            engine.config.percentile,
        )
        yield

    app = FastAPI(title=settings.service_name, version="0.1.0", lifespan=lifespan)
    app.state.telemetry = engine

    @app.get("/health")
    def health(request: Request) -> dict[str, Any]:
        telemetry = _telemetry(request)
        return {
            "status": "ok",
            "event_count": len(telemetry),
            "capacity": telemetry.capacity,
        }

    @app.get("/stats")
    def stats(request: Request) -> dict[str, Any]:
        return _telemetry(request).get_stats().to_dict()

    @app.get("/stats/routes")
    def stats_routes(request: Request) -> dict[str, Any]:
        ranked = _telemetry(request).get_stats().ranked_routes()
        return {
            "items": [{"route": route, **route_stats.to_dict()} for route, route_stats in ranked]
        }

    @app.post("/events")
    def record_event(payload: RecordRequest, request: Request) -> dict[str, Any]:
        telemetry = _telemetry(request)
        telemetry.record(
            payload.route,
            payload.latency_ms,
            payload.success,
            query=payload.query,
            confidence=payload.confidence,
            model=payload.model,
        )
        return {"recorded": True, "event_count": len(telemetry)}

    @app.post("/log")
    def log_query(payload: LogRequest, request: Request) -> dict[str, Any]:
        telemetry = _telemetry(request)
        telemetry.log(payload.query, payload.route, payload.latency_ms)
        return {"recorded": True, "event_count": len(telemetry)}

    @app.get("/events")
    def recent_events(request: Request, limit: int = Query(default=20, ge=1, le=1000)) -> dict[str, Any]:
        events = _telemetry(request).recent(limit=limit)
        return {"items": [asdict(event) for event in events]}

    return app


def _telemetry(request: Request) -> RouteTelemetry:
    return request.app.state.telemetry


app = create_app()
