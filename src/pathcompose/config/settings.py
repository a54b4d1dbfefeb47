"""Configuration settings for pathcompose."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometric thresholds and engine options."""

    overlap_epsilon: float = Field(
        default=1e-10,
        gt=0.0,
        le=1.0,
        description="Minimum width and height of an intersection to count as overlap",
    )
    fuse_on_close: bool = Field(
        default=False,
        description="Merge a closing point that coincides with the contour start",
    )
    close_group: int = Field(
        default=-1,
        description="Segment group passed to the engine when closing a contour",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file output when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ComposerSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ComposerSettings:
    """Get default application settings."""
    return ComposerSettings()
