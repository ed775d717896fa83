"""Pydantic v2 configuration schema with strict validation."""

import logging

from pydantic import BaseModel, Field, field_validator

from dayweather.config.defaults import (
    DEFAULT_HOURLY_VARIABLE,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    ERA5_ARCHIVE_URL,
)


class ArchiveConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = ERA5_ARCHIVE_URL
    latitude: float = Field(default=DEFAULT_LATITUDE, ge=-90.0, le=90.0)
    longitude: float = Field(default=DEFAULT_LONGITUDE, ge=-180.0, le=180.0)
    hourly_variable: str = DEFAULT_HOURLY_VARIABLE
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        name = v.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {v}")
        return name


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    archive: ArchiveConfig = ArchiveConfig()
    logging: LoggingConfig = LoggingConfig()
