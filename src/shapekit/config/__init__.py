"""Configuration management for shapekit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FlatteningConfig: Curve flattening tolerance and buffer tuning
- CrossingConfig: Internal flattening used by hit testing
- LoggingConfig: Logging settings
- ShapekitSettings: Main application settings
"""

from shapekit.config.settings import (
    CrossingConfig,
    FlatteningConfig,
    LoggingConfig,
    ShapekitSettings,
    get_default_settings,
)

__all__ = [
    "CrossingConfig",
    "FlatteningConfig",
    "LoggingConfig",
    "ShapekitSettings",
    "get_default_settings",
]
