"""Utility functions for svg2librepcb.

This module provides utility functions including:

- Logging setup and configuration
- Conversion statistics
"""

from svg2librepcb.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
]
