"""Logging utilities for drcsedit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class SessionStats:
    """Statistics from an editing session."""

    documents_loaded: int = 0
    documents_saved: int = 0
    glyphs_flushed: int = 0
    load_failures: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("drcsedit")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SessionLogger:
    """Logger for tracking document loads, saves and glyph check-ins."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SessionStats()

    def log_document_loaded(
        self,
        path: str,
        charset_id: str,
        glyph_count: int,
        cell_size: tuple[int, int],
    ) -> None:
        """Log a successfully parsed font file."""
        self._logger.info(
            "Font loaded",
            path=path,
            charset=charset_id,
            glyphs=glyph_count,
            cell_width=cell_size[0],
            cell_height=cell_size[1],
        )
        self._stats.documents_loaded += 1

    def log_load_failed(self, path: str, error: Exception) -> None:
        """Log a font file that could not be opened or parsed."""
        self._logger.warning(
            "Font load failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.load_failures += 1
        self._stats.errors.append((path, str(error)))

    def log_document_saved(self, path: str, size_bytes: int) -> None:
        """Log a font file written to disk."""
        self._logger.info("Font saved", path=path, size=size_bytes)
        self._stats.documents_saved += 1

    def log_document_cleared(self, charset_id: str, parameters: str) -> None:
        """Log creation of a new, empty font."""
        self._logger.debug("Font cleared", charset=charset_id, parameters=parameters)

    def log_glyph_flushed(self, index: int) -> None:
        """Log a glyph written back into the document."""
        self._logger.debug("Glyph flushed", index=index)
        self._stats.glyphs_flushed += 1

    @property
    def stats(self) -> SessionStats:
        """Get current session statistics."""
        return self._stats
