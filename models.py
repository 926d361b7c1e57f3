"""
Pydantic models for the lazy list library settings.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LazyListSettings(BaseModel):
    """Tunables shared by the lazy list module, logging setup and the demo"""
    log_level: str = Field(
        "INFO",
        description="Logging level name applied by configure_logging",
        examples=["DEBUG", "INFO", "WARNING"]
    )
    log_format: str = Field(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        description="Format string handed to logging.basicConfig"
    )
    repr_limit: int = Field(
        20,
        gt=0,
        description="Number of elements rendered by repr() before truncating with '...'"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "log_level": "DEBUG",
                "log_format": "%(levelname)s %(message)s",
                "repr_limit": 10
            }
        }
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate the level is one the logging module knows about"""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Log level cannot be empty")
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


settings = LazyListSettings()


def get_settings() -> LazyListSettings:
    """Return the active settings"""
    return settings


def update_settings(**overrides: Any) -> LazyListSettings:
    """Validate overrides on top of the active settings and make them active"""
    global settings
    settings = LazyListSettings(**{**settings.model_dump(), **overrides})
    return settings


def reset_settings() -> LazyListSettings:
    """Restore the default settings"""
    global settings
    settings = LazyListSettings()
    return settings
