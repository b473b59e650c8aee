"""Utility functions for glyphsmith.

This module provides utility functions including:

- Logging setup and configuration
- Stylization statistics
"""

from glyphsmith.utils.logging import (
    StylizeLogger,
    StylizeStats,
    configure_logging,
    reset_logging,
)

__all__ = [
    "StylizeLogger",
    "StylizeStats",
    "configure_logging",
    "reset_logging",
]
