"""Cell dimension inference.

Font-definition sequences rarely state their cell size unambiguously.
The declared matrix size may be a VT2xx shorthand, may only describe the
used part of a text font, or may be missing entirely. The inference
walks through the terminal families that could have produced the font,
from the screen size code down to the extent the glyph data actually
covers, and always settles on a concrete (width, height, aspect) triple.

The pixel aspect ratio is height over width, scaled by 100.
"""

from collections.abc import Iterable
from typing import NamedTuple

from drcsedit.domain import Glyph, ParameterSet
from drcsedit.domain.codec import SIXEL_BITS

MAX_WIDTH = 16
MAX_HEIGHT = 32


class CellDimensions(NamedTuple):
    """Concrete cell size and pixel aspect ratio (x100)."""

    width: int
    height: int
    aspect: int


class ScreenProperties(NamedTuple):
    """Page geometry implied by a screen size code."""

    columns: int
    lines: int
    cell_aspect: int


SCREEN_PROPERTIES: dict[int, ScreenProperties] = {
    0: ScreenProperties(80, 24, 200),
    2: ScreenProperties(132, 24, 334),
    11: ScreenProperties(80, 36, 125),
    12: ScreenProperties(132, 36, 209),
    21: ScreenProperties(80, 48, 100),
    22: ScreenProperties(132, 48, 167),
}

# Candidate cells tried in order when only glyph data can decide. The
# first entry (VT2xx) is only chosen when no size was declared at all.
_PROFILES_80: tuple[CellDimensions, ...] = (
    CellDimensions(8, 10, 200),  # VT2xx, 2:1
    CellDimensions(15, 12, 250),  # VT320, 2.5:1
    CellDimensions(10, 16, 125),  # VT420 and VT5xx, 1.25:1
    CellDimensions(10, 20, 100),  # VT340, 1:1
    CellDimensions(12, 30, 80),  # VT382, 0.8:1
)
_PROFILES_132: tuple[CellDimensions, ...] = (
    CellDimensions(6, 10, 200),
    CellDimensions(9, 12, 250),
    CellDimensions(6, 16, 125),
    CellDimensions(6, 20, 100),
    CellDimensions(7, 30, 80),
)


def screen_properties(pss: int | None) -> ScreenProperties:
    """Map a screen size code to its page geometry (80x24 if unknown)."""
    return SCREEN_PROPERTIES.get(pss or 0, SCREEN_PROPERTIES[0])


def detect_dimensions(params: ParameterSet, glyphs: Iterable[Glyph]) -> CellDimensions:
    """Infer the cell size of a font.

    Args:
        params: The font's parameter set
        glyphs: The font's glyphs, used when the parameters are not decisive

    Returns:
        Cell width, cell height and pixel aspect ratio
    """
    columns, lines, cell_aspect = screen_properties(params.pss)
    declared_width = params.pcmw or 0
    declared_height = params.pcmh or 0

    # Pcmw 2-4 is a VT2xx matrix size, not a pixel width. This overlaps
    # with genuine 2-4 pixel wide fonts, which are read as 5-8 wide.
    if 2 <= declared_width <= 4:
        if columns == 80 or declared_width == 4:
            return CellDimensions(8, 10, 200)
        if declared_width == 3:
            return CellDimensions(6, 10, 200)
        return CellDimensions(5, 10, 200)

    text_usage = params.pu != 2

    def text_adjust(full_width: int) -> int:
        if text_usage and declared_width:
            return min(declared_width, full_width)
        return full_width

    if lines != 24:
        # VT420/VT5xx page sizes, 1.25:1 pixels
        cell_width = 6 if columns == 132 else 10
        cell_height = 8 if lines == 48 else 10
        if declared_width <= cell_width and declared_height <= cell_height:
            return CellDimensions(text_adjust(cell_width), cell_height, 125)

    if declared_width and declared_height and not text_usage:
        aspect = declared_width * cell_aspect // declared_height
        return CellDimensions(declared_width, declared_height, aspect)

    used_width = 0
    used_height = 0
    for glyph in glyphs:
        used_width = max(used_width, glyph.used_width)
        used_height = max(used_height, glyph.used_height)

    def in_range(cell_width: int, cell_height: int) -> bool:
        sixel_height = (cell_height + SIXEL_BITS - 1) // SIXEL_BITS * SIXEL_BITS
        if declared_height:
            height_ok = declared_height <= cell_height
        else:
            height_ok = used_height <= sixel_height
        if declared_width:
            width_ok = declared_width <= cell_width
        else:
            width_ok = used_width <= cell_width
        return height_ok and width_ok

    unspecified_size = declared_width == 0 and declared_height == 0
    profiles = _PROFILES_80 if columns == 80 else _PROFILES_132

    legacy = profiles[0]
    if unspecified_size and in_range(legacy.width, legacy.height):
        return legacy
    for profile in profiles[1:]:
        if in_range(profile.width, profile.height):
            return CellDimensions(text_adjust(profile.width), profile.height, profile.aspect)
    return CellDimensions(text_adjust(MAX_WIDTH), MAX_HEIGHT, 100)
