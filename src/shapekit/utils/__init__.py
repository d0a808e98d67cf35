"""Utility functions for shapekit.

This module provides:

- Logging setup and configuration
- Query statistics for the CLI
"""

from shapekit.utils.logging import (
    QueryLogger,
    QueryStats,
    configure_logging,
)

__all__ = [
    "QueryLogger",
    "QueryStats",
    "configure_logging",
]
