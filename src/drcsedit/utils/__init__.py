"""Utility functions for drcsedit.

This module provides utility functions including:

- Logging setup and configuration
- Edit session statistics
"""

from drcsedit.utils.logging import (
    SessionLogger,
    SessionStats,
    configure_logging,
)

__all__ = [
    "SessionLogger",
    "SessionStats",
    "configure_logging",
]
