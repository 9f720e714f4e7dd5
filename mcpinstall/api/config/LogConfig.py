"""Logging configuration."""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogConfig(BaseModel):
    """Rotating log file settings."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", description="Logging level name")
    max_bytes: int = Field(default=5 * 1024 * 1024, gt=0)
    backup_count: int = Field(default=3, ge=0)

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level
