"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: CORRMATRIX_
    """

    model_config = SettingsConfigDict(
        env_prefix="CORRMATRIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Sufficiency gate
    min_complete_rows: int = Field(
        default=2,
        ge=1,
        description="Rows with data in every column required before computing the matrix",
    )

    # Matrix
    undefined_fill: float = Field(
        default=0.0,
        allow_inf_nan=False,
        description="Value stored for pairs whose coefficient is undefined",
    )

    # Descriptions and error messages
    language: Literal["en", "ru"] = Field(default="en")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["console", "json"] = Field(default="console")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
