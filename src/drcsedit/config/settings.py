"""Configuration settings for drcsedit."""

from pathlib import Path

from pydantic import BaseModel, Field

# Pfn;Pcn;Pe;Pcmw;Pss;Pu;Pcmh;Pcss for a full-cell 10x16 font on an 80x24 screen
DEFAULT_PARAMETERS: tuple[int, ...] = (0, 0, 0, 10, 0, 2, 16, 0)
DEFAULT_CHARSET_ID = " @"


class DocumentDefaults(BaseModel):
    """Defaults applied when a new, empty font is created."""

    parameters: list[int] = Field(
        default_factory=lambda: list(DEFAULT_PARAMETERS),
        max_length=8,
        description="Positional DECDLD parameters (Pfn;Pcn;Pe;Pcmw;Pss;Pu;Pcmh;Pcss)",
    )
    charset_id: str = Field(
        default=DEFAULT_CHARSET_ID,
        min_length=1,
        max_length=3,
        description="Dscs character set identifier",
    )


class DisplayConfig(BaseModel):
    """Terminal layout used when drawing the pixel canvas."""

    screen_width: int = Field(
        default=80,
        ge=20,
        le=255,
        description="Terminal width in columns",
    )
    screen_height: int = Field(
        default=24,
        ge=10,
        le=72,
        description="Terminal height in lines",
    )
    double_width: bool = Field(
        default=False,
        description="Draw each pixel twice as wide",
    )
    reverse_video: bool = Field(
        default=False,
        description="Use the light colour scheme",
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


class EditorSettings(BaseModel):
    """Main application settings."""

    document: DocumentDefaults = Field(default_factory=DocumentDefaults)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> EditorSettings:
    """Get default application settings."""
    return EditorSettings()
