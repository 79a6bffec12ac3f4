"""Configuration management for svg2librepcb.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or constructed directly.

Key classes:
- MetadataConfig: Name, author and other element metadata
- GeometryConfig: Flattening and normalization settings
- LayerConfig: Layer variant selection
- UuidOverrides: Caller-supplied UUIDs
- LoggingConfig: Logging settings
- ConversionSettings: Main application settings
"""

from svg2librepcb.config.settings import (
    MM_PER_USER_UNIT,
    Alignment,
    ConversionSettings,
    GeometryConfig,
    LayerConfig,
    LoggingConfig,
    MetadataConfig,
    UuidOverrides,
    build_settings,
)

__all__ = [
    "MM_PER_USER_UNIT",
    "Alignment",
    "ConversionSettings",
    "GeometryConfig",
    "LayerConfig",
    "LoggingConfig",
    "MetadataConfig",
    "UuidOverrides",
    "build_settings",
]
