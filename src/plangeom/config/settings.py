"""Configuration settings for plangeom."""

from pathlib import Path

from pydantic import BaseModel, Field


class ClipConfig(BaseModel):
    """Configuration for the integer-grid clipping pipeline.

    Coordinates are multiplied by ``clip_scale`` before they reach the clipping
    library, so ``1 / clip_scale`` is the finest distance the pipeline can
    tell apart. ``offset`` is measured in scaled units.
    """

    model_config = {"frozen": True}

    clip_scale: float = Field(
        default=100.0,
        gt=0.0,
        description="Factor mapping float coordinates onto the integer clipping grid",
    )
    offset: float = Field(
        default=0.01,
        gt=0.0,
        description="Outward miter offset applied before clipping and removed after (scaled units)",
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


class PlangeomSettings(BaseModel):
    """Main application settings."""

    clip: ClipConfig = Field(default_factory=ClipConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CLIP_CONFIG = ClipConfig()


def get_default_settings() -> PlangeomSettings:
    """Get default application settings."""
    return PlangeomSettings()
