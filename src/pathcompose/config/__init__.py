"""Configuration management for pathcompose.

This module provides configuration management using Pydantic models.

Key classes:
- GeometryConfig: Overlap threshold and contour closing options
- LoggingConfig: Logging settings
- ComposerSettings: Main application settings
"""

from pathcompose.config.settings import (
    ComposerSettings,
    GeometryConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "ComposerSettings",
    "GeometryConfig",
    "LoggingConfig",
    "get_default_settings",
]
