"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_dir() -> Path:
    """Find the config directory by walking up from the package location.

    Falls back to relative Path("config") if not found.
    """
    # config.py -> core/ -> datacheck/ -> src/ -> root/
    package_dir = Path(__file__).resolve().parent.parent.parent.parent
    candidate = package_dir / "config"
    if candidate.is_dir():
        return candidate

    return Path("config")


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: DATACHECK_
    """

    model_config = SettingsConfigDict(
        env_prefix="DATACHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log output format: console for development, json for production",
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (expectation suites)",
    )

    # Evaluation
    max_examples: int = Field(
        default=5,
        ge=0,
        description="Number of offending values/indices kept in result details",
    )
    max_workers: int = Field(
        default=1,
        ge=1,
        description="Worker threads for evaluating expectations (1 = sequential)",
    )

    # Profiling
    type_sample_size: int = Field(
        default=100,
        ge=1,
        description="Number of non-null values sampled for column type inference",
    )
    outlier_method: Literal["iqr", "zscore"] = Field(
        default="iqr",
        description="Outlier detection method used by detailed profiles",
    )
    zscore_threshold: float = Field(
        default=3.0,
        gt=0,
        description="Absolute z-score above which a value is an outlier",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
