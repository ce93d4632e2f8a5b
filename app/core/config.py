from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.errors import InvalidSettingsError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Optional environment variables (defaults provided).
    # The listen address is fixed in app.core.server.
    app_name: str = "health-api"
    environment: str = "production"
    log_level: str = "INFO"
    filter_health_access_logs: bool = Field(
        default=True,
        description="Drop uvicorn access log lines for /health probes",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'")
        return level


def validate_settings() -> Settings:
    """Validate settings and collect every invalid field.

    Raises:
        InvalidSettingsError: If any environment variable has an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        invalid_fields: list[tuple[str, str]] = []
        for error in e.errors():
            field_path = ".".join(str(part) for part in error.get("loc", []))
            message = error.get("msg", "Invalid value")
            invalid_fields.append((field_path.upper() or "UNKNOWN", message))
        raise InvalidSettingsError(invalid_fields) from e


# Validate settings at import time.
# Exceptions will propagate to the importing module (e.g., app/main.py)
settings = validate_settings()
