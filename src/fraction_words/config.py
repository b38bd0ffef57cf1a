"""Configuration via environment variables with FRACTION_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Fraction parser configuration.

    All settings are read from environment variables prefixed with ``FRACTION_``.
    """

    model_config = SettingsConfigDict(env_prefix="FRACTION_")

    # Locale used when a caller does not pass a grammar
    default_locale: str = Field(default="en", min_length=1)

    # Logging
    log_level: str = "INFO"
