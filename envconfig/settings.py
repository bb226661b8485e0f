# ============================================================================
# LOADER SETTINGS - The loader's own knobs, read from the process environment
# ============================================================================

"""
Settings that control how the loader logs, as opposed to the service
configuration it produces.

RESPONSIBILITY:
- How envconfig logs (LOG_LEVEL, LOG_FORMAT)

These are read from the process environment only. The .env file is the
service configuration's source and is parsed by loader.py, never here.

USAGE:
from envconfig import get_loader_settings

settings = get_loader_settings()
level = settings.log_level
"""

from typing import Literal, Optional
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class LoaderSettings(BaseSettings):
    """Loader settings with aliases matching the environment variable names."""

    model_config = SettingsConfigDict(
        env_file=None,
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )

    log_format: Literal["json", "text"] = Field(
        default="text",
        alias="LOG_FORMAT",
        description="Logging format: json or text",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalize_log_format(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


# ============================================================================
# CACHED INSTANCE
# ============================================================================

_settings_instance: Optional[LoaderSettings] = None

def get_loader_settings() -> LoaderSettings:
    """
    Get or create the cached LoaderSettings instance.

    Only the loader's logging knobs are cached here. Service
    configuration is never cached: every new_config() call builds a fresh
    ServiceConfig.
    """
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = LoaderSettings()
        logger.debug("Loader settings initialized from environment")

    return _settings_instance

def reset_loader_settings() -> None:
    """Reset the cached instance (for testing purposes)."""
    global _settings_instance
    _settings_instance = None
