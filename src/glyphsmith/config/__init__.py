"""Configuration management for glyphsmith.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: SVG output settings
- LoggingConfig: Logging settings
- GlyphsmithSettings: Main application settings
"""

from glyphsmith.config.settings import (
    GlyphsmithSettings,
    LoggingConfig,
    LogLevel,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "GlyphsmithSettings",
    "LogLevel",
    "LoggingConfig",
    "RenderConfig",
    "get_default_settings",
]
