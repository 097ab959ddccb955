# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for cascade bounds, input defaults and logging.
Every field can be set through a MULTIHASHER_-prefixed environment variable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from multihasher.core.models import (
    Encoding,
    HARD_MAX_LEVELS,
    HARD_MAX_REPETITIONS,
)


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MULTIHASHER_",
        extra="ignore",
    )

    # === Cascade bounds ===
    max_levels: int = HARD_MAX_LEVELS
    max_repetitions: int = HARD_MAX_REPETITIONS

    # === Input defaults ===
    default_levels: str = "1"
    default_repetitions: str = "1"
    default_encoding: Encoding = "512-Bit"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("log_retention")
    @classmethod
    def validate_log_retention(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ValueError("log_retention must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> Settings:
        """Cascade bounds must stay inside the hard limits."""
        errors: list[str] = []

        if not 1 <= self.max_levels <= HARD_MAX_LEVELS:
            errors.append(
                f"MAX_LEVELS must be between 1 and {HARD_MAX_LEVELS}"
            )
        if not 1 <= self.max_repetitions <= HARD_MAX_REPETITIONS:
            errors.append(
                f"MAX_REPETITIONS must be between 1 and {HARD_MAX_REPETITIONS}"
            )

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-run config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If a cascade bound exceeds its hard limit.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
