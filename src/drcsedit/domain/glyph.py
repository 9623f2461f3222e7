"""Glyph representation.

This module defines the glyph domain model: the sixel text of one soft
font character together with the extent its sixel data covers.
"""

from dataclasses import dataclass, field

from drcsedit.domain import codec
from drcsedit.domain.codec import PixelBuffer


@dataclass
class Glyph:
    """A single soft font glyph stored as sixel text.

    The text is kept exactly as read so that unedited glyphs are written
    back byte for byte. Pixel access goes through the codec.

    Attributes:
        sixels: Glyph body text (sixel rows separated by ``/``)
        used_width: Widest sixel row, in columns
        used_height: Number of sixel rows times six
    """

    sixels: str = ""
    used_width: int = field(default=0, init=False)
    used_height: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self._measure()

    def _measure(self) -> None:
        self.used_width = codec.used_width(self.sixels)
        self.used_height = codec.used_height(self.sixels)

    @property
    def used(self) -> bool:
        """True if the glyph has at least one pixel set."""
        return codec.is_used(self.sixels)

    def pixels(self, cell_width: int, cell_height: int) -> PixelBuffer:
        """Decode the glyph into a pixel buffer of the given cell size.

        Args:
            cell_width: Cell width in pixels
            cell_height: Cell height in pixels

        Returns:
            Row-major pixel buffer
        """
        return codec.decode(self.sixels, cell_width, cell_height)

    def set_pixels(self, cell_width: int, cell_height: int, pixels: PixelBuffer) -> None:
        """Replace the glyph's sixel data, keeping its surrounding whitespace.

        Args:
            cell_width: Cell width in pixels
            cell_height: Cell height in pixels
            pixels: Row-major pixel buffer
        """
        self.sixels = codec.encode(pixels, cell_width, cell_height, self.sixels)
        self._measure()
