"""Configuration management for plangeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ClipConfig: Scale and offset used by the boolean operation pipeline
- LoggingConfig: Logging settings
- PlangeomSettings: Main application settings
"""

from plangeom.config.settings import (
    DEFAULT_CLIP_CONFIG,
    ClipConfig,
    LoggingConfig,
    PlangeomSettings,
    get_default_settings,
)

__all__ = [
    "DEFAULT_CLIP_CONFIG",
    "ClipConfig",
    "LoggingConfig",
    "PlangeomSettings",
    "get_default_settings",
]
