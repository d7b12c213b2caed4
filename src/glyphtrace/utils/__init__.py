"""Utility functions for glyphtrace.

This module provides utility functions including:

- Logging setup and configuration
- Extraction statistics tracking
"""

from glyphtrace.utils.logging import (
    ExtractionLogger,
    ExtractionStats,
    configure_logging,
)

__all__ = [
    "ExtractionLogger",
    "ExtractionStats",
    "configure_logging",
]
