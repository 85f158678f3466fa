"""
Configuration management using Pydantic Settings.

The domain itself has no configuration: every business limit (maximum price,
maximum quantity, opening-hour range) is a module constant next to the rule
that uses it. Settings only control how results are reported.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables (no prefix)
- Type validation via Pydantic

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    if settings.use_json_output:
        ...
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Reporting settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum reported level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Force JSON (true) or console (false) output. "
        "Unset means: console in development, JSON everywhere else.",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Uppercase level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        normalized = v.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return normalized

    @property
    def log_level_value(self) -> int:
        """
        Numeric logging level.

        Returns:
            int: Level as understood by the logging module.
        """
        return logging.getLevelNamesMapping()[self.log_level]

    @property
    def use_json_output(self) -> bool:
        """
        Whether reports are rendered as JSON lines.

        Returns:
            bool: Explicit ``log_json`` if set, otherwise derived from environment.
        """
        if self.log_json is not None:
            return self.log_json
        return self.environment.prefers_json

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
