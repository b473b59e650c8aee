"""Configuration settings for Glyphsmith."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class RenderConfig(BaseModel):
    """Configuration for SVG document output."""

    stroke_color: str = Field(
        default="currentColor",
        min_length=1,
        description="Stroke paint for every glyph path",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphsmithSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphsmithSettings:
    """Get default application settings."""
    return GlyphsmithSettings()
