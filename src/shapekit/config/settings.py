"""Configuration settings for Shapekit."""

from pathlib import Path

from pydantic import BaseModel, Field


class FlatteningConfig(BaseModel):
    """Configuration for adaptive curve flattening.

    The buffer settings only tune allocation; they never change the
    emitted segments.
    """

    flatness: float = Field(
        default=0.1,
        ge=0.0,
        description="Maximum distance between a curve and its line approximation",
    )
    subdivision_limit: int = Field(
        default=16,
        ge=0,
        description="Maximum midpoint subdivision depth per source segment",
    )
    buffer_initial_capacity: int = Field(
        default=16,
        gt=0,
        description="Initial subdivision buffer size in floats",
    )
    buffer_growth_increment: int = Field(
        default=16,
        gt=0,
        description="Floats added each time the subdivision buffer fills up",
    )


class CrossingConfig(BaseModel):
    """Configuration for crossing-number hit testing.

    Curved segments are flattened with these settings before their
    crossings are counted.
    """

    internal_flatness: float = Field(
        default=0.01,
        ge=0.0,
        description="Flatness used when flattening curves for hit testing",
    )
    internal_subdivision_limit: int = Field(
        default=16,
        ge=0,
        description="Subdivision limit used when flattening curves for hit testing",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ShapekitSettings(BaseModel):
    """Main application settings."""

    flattening: FlatteningConfig = Field(default_factory=FlatteningConfig)
    crossing: CrossingConfig = Field(default_factory=CrossingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapekitSettings:
    """Get default application settings."""
    return ShapekitSettings()
