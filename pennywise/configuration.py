"""Mini README: Centralised configuration models and helpers for Pennywise.

Structure:
    * PennywiseSettings - pydantic-settings model describing runtime options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``PENNYWISE_*`` environment variables
    (or a local ``.env`` file). Budget trackers read the near-limit ratio
    from here and accounts read the self-transfer policy, unless callers
    pass explicit overrides. The configuration is cached so validation
    runs once per process.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class PennywiseSettings(BaseSettings):
    """Runtime configuration for the Pennywise ledger and budget tracker."""

    model_config = SettingsConfigDict(
        env_prefix="PENNYWISE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied the first time a logger is requested.",
    )
    near_limit_ratio: Decimal = Field(
        Decimal("0.8"),
        description="Share of the budget limit at which spending counts as near the limit.",
        ge=0,
        le=1,
    )
    allow_self_transfer: bool = Field(
        False,
        description="Permit transfers whose source and target are the same account.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts in rendered history lines and reports.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing but only standard level names."""

        normalised = value.strip().upper()
        if normalised not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return normalised


@lru_cache()
def get_settings() -> PennywiseSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PennywiseSettings()
