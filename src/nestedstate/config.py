"""Environment-driven settings and logging setup."""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from pydantic import BaseModel, Field, field_validator

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


class Settings(BaseModel):
    log_level: str = "WARNING"
    # 0 disables edit history
    history_limit: int = Field(default=100, ge=0)

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


_settings: Optional[Settings] = None


def load_settings() -> Settings:
    """Build settings from NESTEDSTATE_* environment variables."""
    return Settings(
        log_level=os.getenv("NESTEDSTATE_LOG_LEVEL", "WARNING"),
        history_limit=os.getenv("NESTEDSTATE_HISTORY_LIMIT", "100"),
    )


def get_settings(reload: bool = False) -> Settings:
    """Get or create the process-wide settings instance."""
    global _settings

    if _settings is None or reload:
        _settings = load_settings()
    return _settings


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
    )


__all__ = ["Settings", "load_settings", "get_settings", "configure_logging"]
