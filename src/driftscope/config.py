"""Environment-based configuration."""

from __future__ import annotations

import codecs
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

from driftscope.constants import (
    DEFAULT_FILE_ENCODING,
    DEFAULT_MAX_FILE_SIZE_BYTES,
    UNRESOLVED_FILE_PLACEHOLDER,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Reads from .env file and DRIFTSCOPE_* environment variables."""

    # Logging
    log_level: str = "INFO"

    # File reading
    file_encoding: str = DEFAULT_FILE_ENCODING
    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES

    # Display
    unresolved_file_placeholder: str = UNRESOLVED_FILE_PLACEHOLDER

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @field_validator("max_file_size_bytes")
    @classmethod
    def _validate_max_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_file_size_bytes must be positive")
        return v

    @field_validator("file_encoding")
    @classmethod
    def _validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown file encoding: {v}") from None
        if v.lower().replace("-", "").replace("_", "") != "utf8":
            logger.warning(
                "Non UTF-8 file encoding configured: %s", v
            )
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "DRIFTSCOPE_",
        "extra": "ignore",
    }


def default_settings() -> Settings:
    """Built-in defaults; ignores DRIFTSCOPE_* variables and any .env file.

    Library code falls back to this so that only entry points read the
    environment, once, via ``Settings()``.
    """
    return Settings.model_construct()
