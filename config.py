"""
PICOTS Assistant - Configuration Management
===========================================
Centralized configuration using pydantic-settings for type safety and validation.
"""

import logging
from typing import Optional
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.i18n import SUPPORTED_LANGUAGES


class Settings(BaseSettings):
    """Application settings loaded from environment variables (PICOTS_*)."""

    # Logging
    log_level: str = Field(default="INFO")

    # Localisation of finding and band texts
    language: str = Field(default="en")

    # Re-run pitfall analysis on every edit once the framework was analyzed
    auto_reanalyze: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="PICOTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("language")
    @classmethod
    def _check_language(cls, value: str) -> str:
        if value not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language {value!r}; expected one of {sorted(SUPPORTED_LANGUAGES)}"
            )
        return value


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# Convenience function for quick access
settings = get_settings()
