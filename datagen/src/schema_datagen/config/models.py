"""
Configuration models for the schema data generator.

These models define the structure and validation for the config.json file.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "SCHEMA_DATAGEN_SEED"


class RealtimeConfig(BaseModel):
    """Configuration for the live feed (periodic generation of moving entities)."""

    interval_seconds: float = Field(
        5.0, gt=0, description="Seconds between two live feed ticks"
    )
    docs_per_tick: int = Field(
        1, gt=0, description="Number of documents generated on each tick"
    )
    default_speed_kmh: float = Field(
        500.0,
        gt=0,
        description="Speed used for geo_path rules that do not declare one",
    )


class GeneratorConfig(BaseModel):
    """Main configuration model for the schema data generator."""

    seed: int | None = Field(
        None,
        ge=0,
        le=2**32 - 1,
        validate_default=True,
        description="Random seed for reproducible generation (None = entropy)",
    )
    locale: str = Field("en_US", min_length=2, description="Faker locale")
    default_count: int = Field(
        100, gt=0, description="Documents generated when no count is given"
    )
    max_count: int = Field(
        100_000, gt=0, description="Upper bound on documents per API request"
    )
    default_lookback_hours: float = Field(
        24.0,
        gt=0,
        description="Width of the default date window ending now",
    )
    chunk_size: int = Field(
        1000, ge=1, le=10_000, description="Documents per bulk chunk"
    )
    geohash_precision: int = Field(
        7, ge=1, le=12, description="Default geohash length"
    )
    realtime: RealtimeConfig = Field(
        default_factory=RealtimeConfig,
        description="Live feed configuration",
    )
    log_level: str = Field("INFO", description="Root log level")

    @field_validator("seed", mode="before")
    @classmethod
    def load_seed_from_env(cls, v: int | str | None) -> int | None:
        """Let SCHEMA_DATAGEN_SEED override the configured seed."""
        env_value = os.getenv(SEED_ENV_VAR, "").strip()
        if env_value:
            try:
                return int(env_value)
            except ValueError:
                logger.warning(
                    f"Ignoring non-integer {SEED_ENV_VAR}={env_value!r}"
                )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_file(cls, file_path: str | Path) -> "GeneratorConfig":
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the configuration JSON file

        Returns:
            GeneratorConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the JSON is invalid or doesn't match the schema
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            with path.open("r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}")

        return cls(**data)

    def to_file(self, file_path: str | Path) -> None:
        """
        Save configuration to a JSON file.

        Args:
            file_path: Path where to save the configuration file
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w") as f:
            json.dump(self.model_dump(), f, indent=2)
