"""
Application configuration.

Settings are grouped by concern and read from TOOLBOX_* environment
variables, falling back to the defaults in core.constants.
"""

import os
from functools import lru_cache
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from core.constants import APIConstants, HistoryConstants, SystemConstants

ENV_PREFIX = "TOOLBOX_"


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


class APIConfig(BaseModel):
    """HTTP server settings"""

    host: str = SystemConstants.DEFAULT_HOST
    port: int = Field(SystemConstants.DEFAULT_PORT, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = Field(
        default_factory=lambda: list(SystemConstants.DEFAULT_CORS_ORIGINS)
    )


class SystemConfig(BaseModel):
    """Runtime settings"""

    debug: bool = False
    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class HistoryConfig(BaseModel):
    """Codec history settings"""

    buffer_size: int = Field(
        HistoryConstants.DEFAULT_BUFFER_SIZE,
        ge=HistoryConstants.MIN_BUFFER_SIZE,
        le=HistoryConstants.MAX_BUFFER_SIZE,
    )


class ImageConfig(BaseModel):
    """Image conversion settings"""

    max_upload_mb: int = Field(APIConstants.DEFAULT_MAX_UPLOAD_MB, gt=0)

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


class Settings(BaseModel):
    """Top-level application settings"""

    environment: str = "development"
    api: APIConfig = Field(default_factory=APIConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    image: ImageConfig = Field(default_factory=ImageConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict used as app.state.config."""
        return self.model_dump()


def load_settings() -> Settings:
    """Build settings from the environment."""
    origins = _env("CORS_ORIGINS", "")
    api_kwargs: Dict[str, Any] = {
        "host": _env("HOST", SystemConstants.DEFAULT_HOST),
        "port": int(_env("PORT", str(SystemConstants.DEFAULT_PORT))),
        "cors_enabled": _env_bool("CORS_ENABLED", True),
    }
    if origins:
        api_kwargs["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

    return Settings(
        environment=_env("ENV", "development"),
        api=APIConfig(**api_kwargs),
        system=SystemConfig(
            debug=_env_bool("DEBUG", False),
            log_level=_env("LOG_LEVEL", SystemConstants.LOG_LEVEL_DEFAULT),
        ),
        history=HistoryConfig(
            buffer_size=int(_env("HISTORY_SIZE", str(HistoryConstants.DEFAULT_BUFFER_SIZE)))
        ),
        image=ImageConfig(
            max_upload_mb=int(_env("MAX_UPLOAD_MB", str(APIConstants.DEFAULT_MAX_UPLOAD_MB)))
        ),
    )


@lru_cache()
def get_settings() -> Settings:
    """Cached application settings."""
    return load_settings()
