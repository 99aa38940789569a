"""Application configuration via Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ClimbDetectionSettings(BaseSettings):
    """Climb segmentation thresholds."""

    model_config = SettingsConfigDict(env_prefix="CLIMB_")

    gradient_threshold: float = 3.0
    min_climb_length_km: float = 0.5
    min_elevation_gain_m: float = 30.0
    peak_lookahead_points: int = 20
    peak_drop_tolerance_m: float = 10.0
    min_samples: int = 10


class SmoothingSettings(BaseSettings):
    """Moving averages applied to elevations.

    ``window_size`` is the detector's pass before gradient analysis.
    ``profile_window_size`` is the coarser pass applied when a profile is
    built from GPS track points.
    """

    model_config = SettingsConfigDict(env_prefix="SMOOTHING_")

    window_size: int = Field(default=3, ge=1)
    min_points: int = 5
    profile_window_size: int = Field(default=5, ge=1)
    profile_min_points: int = 3


class MergeSettings(BaseSettings):
    """Consolidation of nearby climbs."""

    model_config = SettingsConfigDict(env_prefix="MERGE_")

    min_distance_between_climbs_km: float = 2.0


class NamingSettings(BaseSettings):
    """Words used when generating climb display names."""

    model_config = SettingsConfigDict(env_prefix="NAMING_")

    high_pass: str = "Col"
    mountain: str = "Mont"
    steep: str = "Montée"
    long: str = "Col"
    default: str = "Côte"


class LoggingSettings(BaseSettings):
    """Log level and optional log file for the CLI."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: LogLevel = "INFO"
    file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    climb: ClimbDetectionSettings = Field(default_factory=ClimbDetectionSettings)
    smoothing: SmoothingSettings = Field(default_factory=SmoothingSettings)
    merge: MergeSettings = Field(default_factory=MergeSettings)
    naming: NamingSettings = Field(default_factory=NamingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings read from the environment and ``.env``.

    Used by the command-line entry point.
    """
    return Settings()


@lru_cache
def default_settings() -> Settings:
    """Get cached settings built from field defaults only.

    Neither environment variables nor ``.env`` are consulted, so library
    calls made without explicit settings behave the same everywhere.
    """
    return Settings.model_construct(
        climb=ClimbDetectionSettings.model_construct(),
        smoothing=SmoothingSettings.model_construct(),
        merge=MergeSettings.model_construct(),
        naming=NamingSettings.model_construct(),
        logging=LoggingSettings.model_construct(),
    )
