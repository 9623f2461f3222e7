"""Configuration management for drcsedit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- DocumentDefaults: Parameters and charset used for new fonts
- DisplayConfig: Terminal layout used when rendering the canvas
- LoggingConfig: Logging settings
- EditorSettings: Main application settings
"""

from drcsedit.config.settings import (
    DEFAULT_CHARSET_ID,
    DEFAULT_PARAMETERS,
    DisplayConfig,
    DocumentDefaults,
    EditorSettings,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_CHARSET_ID",
    "DEFAULT_PARAMETERS",
    "DisplayConfig",
    "DocumentDefaults",
    "EditorSettings",
    "LoggingConfig",
    "get_default_settings",
]
