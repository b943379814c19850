"""CLI configuration using Pydantic settings.

Configuration is loaded from:
1. Environment variables (ULIDKIT_* prefix)
2. .env file in current directory
3. Default values
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OutputFormat = Literal["text", "hex", "int"]


class UlidkitConfig(BaseSettings):
    """Configuration for the ulidkit CLI.

    Environment variables are prefixed with ULIDKIT_.
    """

    model_config = SettingsConfigDict(
        env_prefix="ULIDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    debug: bool = False
    log_level: str = "WARNING"

    # Generation defaults
    output_format: OutputFormat = "text"
    max_count: int = Field(default=10_000, ge=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            msg = f"Invalid log level: {v}. Must be one of {valid_levels}"
            raise ValueError(msg)
        return upper

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug override."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_config() -> UlidkitConfig:
    """Get the global configuration.

    Configuration is cached after first load.

    Returns:
        UlidkitConfig instance.
    """
    return UlidkitConfig()


def clear_config_cache() -> None:
    """Clear the configuration cache (for testing)."""
    get_config.cache_clear()
