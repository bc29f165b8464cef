"""Application configuration management using Pydantic Settings.

This module defines the `Settings` class, which loads configuration parameters
from environment variables and a `.env` file. Reconciliation itself is a pure
function and takes explicit arguments; settings only tune the CLI surface and
the diagnostics emitted around it.

The `get_settings` function provides a cached, singleton instance of the
configuration, ensuring consistent settings throughout the application.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """Defines all application configuration parameters.

    Values come from environment variables or a `.env` file. Unknown keys are
    ignored so the tool can share an environment file with the wider
    application management deployment.
    """

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Logging & runtime behavior
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    DEBUG: bool = Field(
        default=False,
        description="Enable verbose debug logging (overridden by an explicit --debug/--no-debug)",
    )

    # ---------------- Output -----------------
    OUTPUT_INDENT: int = Field(
        default=2,
        description="JSON indent used when writing the updated service provider (0 = compact)",
    )

    # ---------------- Diagnostics -----------------
    # Role configurations naming an IdP that is not part of the attribute step
    # are dropped by reconciliation. This only controls whether that is logged.
    WARN_UNMATCHED_ROLE_CONFIGS: bool = Field(
        default=True,
        description=(
            "If true, log a warning listing role configurations whose idp does not "
            "appear among the attribute step's federated identity providers."
        ),
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Upper-case and validate the configured log level name.

        Blank values fall back to INFO.
        """
        if v is None:
            return "INFO"
        level = str(v).strip().upper()
        if not level:
            return "INFO"
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}; got {v!r}")
        return level

    @field_validator("OUTPUT_INDENT")
    @classmethod
    def non_negative_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError("OUTPUT_INDENT must be >= 0")
        return v

    def effective_log_level(self) -> int:
        """Return the numeric level, honouring DEBUG."""
        if self.DEBUG:
            return logging.DEBUG
        return logging.getLevelName(self.LOG_LEVEL)


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # pragma: no cover - trivial
    """Return a cached, singleton instance of the application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
