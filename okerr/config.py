"""
Configuration for okerr.

Settings are read from ``OKERR_``-prefixed environment variables (or a ``.env``
file) and only affect the ambient concerns: logging and deprecation warnings.
The value type and combinators have no configuration.
"""

from enum import Enum
from functools import lru_cache
from typing import Any, Dict

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidConfigurationError


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class OkerrSettings(BaseSettings):
    """Library settings."""

    model_config = SettingsConfigDict(
        env_prefix="OKERR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_enabled: bool = False
    log_level: LogLevel = LogLevel.WARNING
    log_serialize: bool = False

    # Deprecated API
    deprecation_warnings: bool = True

    def summary(self) -> Dict[str, Any]:
        """Get a plain dict view of the settings."""
        return {
            "log_enabled": self.log_enabled,
            "log_level": self.log_level.value,
            "log_serialize": self.log_serialize,
            "deprecation_warnings": self.deprecation_warnings,
        }


@lru_cache()
def get_settings() -> OkerrSettings:
    """Get cached settings instance with validation."""
    try:
        return OkerrSettings()
    except ValidationError as e:
        raise InvalidConfigurationError(str(e)) from e
