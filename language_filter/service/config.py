# language_filter/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

import logging
from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from language_filter.core.definitions import Category, ReplacementPolicy


class Settings(BaseSettings):
    """Global filter settings.

    Loads values from environment variables (prefix 'LANGUAGE_FILTER_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LANGUAGE_FILTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_category: Category = Field(
        default=Category.PROFANITY,
        description="Built-in list used as the matchlist when none is given.",
    )

    replacement: ReplacementPolicy = Field(
        default=ReplacementPolicy.STARS,
        description="Redaction style applied by sanitize.",
    )

    creative_letters: bool = Field(
        default=False,
        description="Match leetspeak and look-alike spellings.",
    )

    exceptionlist_path: Optional[Path] = Field(
        default=None,
        description="Optional newline-delimited exception list file.",
    )

    log_level: str = Field(default="INFO", description="Root logging level.")

    filter_log_level: Optional[str] = Field(
        default=None,
        description="Level for the language_filter loggers; inherits log_level if unset.",
    )

    @field_validator("exceptionlist_path")
    @classmethod
    def validate_exceptionlist_path(cls, v: Optional[Path]) -> Optional[Path]:
        """Ensure a configured exception list file exists."""
        if v is not None and not v.is_file():
            raise ValueError(f"Exception list file not found: {v}")
        return v

    @field_validator("log_level", "filter_log_level")
    @classmethod
    def validate_log_level(cls, v: Optional[str]) -> Optional[str]:
        """Ensure the level is a standard logging level name."""
        if v is None:
            return v
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


# Singleton settings instance
settings = Settings()
