"""Logging configuration."""

import logging
import os

from pydantic import BaseModel, Field, field_validator

from agent_projection.env import LOG_LEVEL_ENV

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogConfig(BaseModel):
    """Config for logging."""

    level: str = Field(
        default_factory=lambda: os.getenv(LOG_LEVEL_ENV, "INFO"),
        validate_default=True,
    )
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    @field_validator("level")
    @classmethod
    def check_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {v}")
        return level

    def setup(self) -> None:
        """Configure the root logger."""
        logging.basicConfig(level=self.level, format=self.format)
