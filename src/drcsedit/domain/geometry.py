"""Cell coordinate types.

Positions on the pixel canvas are (row, column) pairs. A selection is a
focus coordinate plus a signed extent; normalizing the pair gives an
inclusive rectangle.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coord:
    """A pixel position within a cell.

    Attributes:
        y: Row, 0 at the top
        x: Column, 0 at the left
    """

    y: int = 0
    x: int = 0


@dataclass(frozen=True, slots=True)
class Extent:
    """Signed selection size relative to the focus.

    A zero extent means nothing beyond the focus pixel is selected.

    Attributes:
        h: Row delta from the focus to the opposite corner
        w: Column delta from the focus to the opposite corner
    """

    h: int = 0
    w: int = 0

    def is_empty(self) -> bool:
        """True if the extent selects only the focus pixel."""
        return self.h == 0 and self.w == 0


@dataclass(frozen=True, slots=True)
class PixelRange:
    """Normalized, inclusive rectangle of pixels.

    Attributes:
        top: First row
        bottom: Last row
        left: First column
        right: Last column
    """

    top: int
    bottom: int
    left: int
    right: int

    @classmethod
    def from_selection(cls, origin: Coord, extent: Extent) -> "PixelRange":
        """Normalize a focus and signed extent into a rectangle.

        Args:
            origin: Focus coordinate
            extent: Signed extent from the focus

        Returns:
            Rectangle with top <= bottom and left <= right
        """
        y1, y2 = sorted((origin.y, origin.y + extent.h))
        x1, x2 = sorted((origin.x, origin.x + extent.w))
        return cls(top=y1, bottom=y2, left=x1, right=x2)

    @property
    def origin(self) -> Coord:
        """Top-left corner."""
        return Coord(self.top, self.left)

    @property
    def extent(self) -> Extent:
        """Non-negative extent from the top-left corner."""
        return Extent(self.bottom - self.top, self.right - self.left)

    def contains(self, pos: Coord) -> bool:
        """Check whether a pixel lies inside the rectangle."""
        return self.top <= pos.y <= self.bottom and self.left <= pos.x <= self.right

    def contains_cell(self, y: int, x: int) -> bool:
        """Check whether row ``y``, column ``x`` lies inside the rectangle."""
        return self.top <= y <= self.bottom and self.left <= x <= self.right
