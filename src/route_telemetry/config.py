"""Configuration models for the telemetry engine and its HTTP surface."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CAPACITY = 1000


class TelemetryConfig(BaseModel):
    """Configures event retention and the latency percentile."""

    capacity: int = Field(default=CAPACITY, ge=1)
    percentile: float = Field(default=95.0, gt=0.0, le=100.0)


class ServiceSettings(BaseSettings):
    """Environment-driven settings for the telemetry service."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_TELEMETRY_", env_file=".env", extra="ignore"
    )

    service_name: str = "route-telemetry"
    log_level: str = "INFO"
    log_events: bool = False
    capacity: int = Field(default=CAPACITY, ge=1)
    percentile: float = Field(default=95.0, gt=0.0, le=100.0)

    def telemetry_config(self) -> TelemetryConfig:
        return TelemetryConfig(capacity=self.capacity, percentile=self.percentile)
