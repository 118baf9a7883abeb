"""Centralized configuration for line-search using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


class Settings(BaseSettings):
    """Typed configuration loaded from ``LINE_SEARCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LINE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="info", description="Root logging level")
    json_logs: bool = Field(default=True, description="Emit structured JSON log lines")

    # Search
    default_results_count: int = Field(
        default=10, ge=0, description="Number of lines returned when the caller does not ask for a count"
    )

    # Tracing
    tracing_enabled: bool = Field(default=False, description="Wrap index builds and searches in OpenTelemetry spans")
    service_name: str = Field(default="line-search", description="service.name resource attribute for traces")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'. Available: {sorted(_LOG_LEVELS)}")
        return normalized
