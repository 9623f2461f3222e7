"""Shared fixtures for drcsedit tests."""

from pathlib import Path

import pytest

# 10x16 full-cell font, glyph 1 has columns 2-3 set on rows 0-11, glyph 2 is blank
SAMPLE_FONT = (
    b"Soft font for testing\r\n"
    b"\x1bP0;1;2;10;0;2;16;0{ @\n"
    b"??~~??????/??~~??????/??????????;\n"
    b"??????????/??????????/??????????\n"
    b"\x1b\\\r\n"
)


@pytest.fixture
def sample_font_bytes() -> bytes:
    """Contents of a small 7-bit font file."""
    return SAMPLE_FONT


@pytest.fixture
def sample_font_path(tmp_path: Path) -> Path:
    """Path to a small 7-bit font file."""
    path = tmp_path / "sample.fnt"
    path.write_bytes(SAMPLE_FONT)
    return path
