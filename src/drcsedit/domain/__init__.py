"""Domain models for drcsedit.

This module contains the core domain models representing soft font
data. All models are independent of file handling and rendering:

Key classes:
- ParameterSet: The eight positional DECDLD parameters
- Glyph: A single glyph's sixel text with its used extent
- Coord, Extent, PixelRange: Canvas positions and selections
- Charset: A designatable character set

The ``codec`` module packs and unpacks glyph pixels to and from sixels.
"""

from drcsedit.domain import charsets, codec
from drcsedit.domain.charsets import Charset
from drcsedit.domain.codec import PixelBuffer
from drcsedit.domain.geometry import Coord, Extent, PixelRange
from drcsedit.domain.glyph import Glyph
from drcsedit.domain.parameters import PARAMETER_NAMES, ParameterSet

__all__: list[str] = [
    # Modules
    "charsets",
    "codec",
    # Core types
    "Charset",
    "Coord",
    "Extent",
    "Glyph",
    "PARAMETER_NAMES",
    "ParameterSet",
    "PixelBuffer",
    "PixelRange",
]
