"""Incremental canvas redraw.

Each canvas cell is displayed in one of four states, the product of
whether its pixel is set and whether it lies inside the focused
rectangle. RenderDiffer compares two displayed states of the canvas and
produces the smallest list of paint commands that turns the first into
the second.

Set pixels draw in a flat colour, so a row of adjacent set pixels with
the same focus state is painted as one run. Empty pixels draw the grid
background, whose colour alternates in a checkerboard, so they are
always painted one at a time.
"""

from dataclasses import dataclass
from enum import Enum

from drcsedit.domain import PixelBuffer, PixelRange


class CellStyle(Enum):
    """Displayed state of a canvas cell."""

    SET_FOCUSED = "set_focused"
    SET = "set"
    EMPTY_FOCUSED = "empty_focused"
    EMPTY = "empty"

    @classmethod
    def of(cls, is_set: bool, focused: bool) -> "CellStyle":
        """Style for a pixel value and focus state."""
        if is_set:
            return cls.SET_FOCUSED if focused else cls.SET
        return cls.EMPTY_FOCUSED if focused else cls.EMPTY


@dataclass(frozen=True, slots=True)
class PaintCommand:
    """Paint a horizontal run of cells in one style.

    Attributes:
        row: Cell row
        col: First cell column
        length: Number of cells in the run
        is_set: Whether the cells' pixels are set
        focused: Whether the cells are inside the focused rectangle
    """

    row: int
    col: int
    length: int
    is_set: bool
    focused: bool

    @property
    def style(self) -> CellStyle:
        return CellStyle.of(self.is_set, self.focused)

    @property
    def parity(self) -> int:
        """Checkerboard parity of the first cell (0 or 1)."""
        return (self.row + self.col) % 2


class RenderDiffer:
    """Turns canvas state changes into paint commands.

    Example:
        differ = RenderDiffer(cell_width=10, cell_height=16)
        commands = differ.diff(old_pixels, old_focus, new_pixels, new_focus)
    """

    def __init__(self, cell_width: int, cell_height: int) -> None:
        """Initialize the differ for a cell size.

        Args:
            cell_width: Cell width in pixels
            cell_height: Cell height in pixels
        """
        self.cell_width = cell_width
        self.cell_height = cell_height

    def render_all(self, pixels: PixelBuffer, focused: PixelRange) -> list[PaintCommand]:
        """Commands to draw a canvas over a freshly drawn, empty grid.

        Args:
            pixels: Row-major pixel buffer
            focused: Focused rectangle

        Returns:
            Paint commands for every set pixel and every focused empty pixel
        """
        commands: list[PaintCommand] = []
        for y in range(self.cell_height):
            row = y * self.cell_width
            x = 0
            while x < self.cell_width:
                in_focus = focused.contains_cell(y, x)
                if pixels[row + x]:
                    x2 = x + 1
                    while (
                        x2 < self.cell_width
                        and pixels[row + x2]
                        and focused.contains_cell(y, x2) == in_focus
                    ):
                        x2 += 1
                    commands.append(PaintCommand(y, x, x2 - x, True, in_focus))
                    x = x2
                    continue
                if in_focus:
                    commands.append(PaintCommand(y, x, 1, False, True))
                x += 1
        return commands

    def diff(
        self,
        old_pixels: PixelBuffer,
        old_focused: PixelRange,
        new_pixels: PixelBuffer,
        new_focused: PixelRange,
    ) -> list[PaintCommand]:
        """Commands that redraw only the cells whose displayed state changed.

        Args:
            old_pixels: Pixel buffer currently on display
            old_focused: Focused rectangle currently on display
            new_pixels: Pixel buffer to display
            new_focused: Focused rectangle to display

        Returns:
            Paint commands in row-major order
        """
        commands: list[PaintCommand] = []
        for y in range(self.cell_height):
            row = y * self.cell_width
            run: PaintCommand | None = None
            for x in range(self.cell_width):
                is_set = bool(new_pixels[row + x])
                in_focus = new_focused.contains_cell(y, x)
                changed = (
                    bool(old_pixels[row + x]) != is_set
                    or old_focused.contains_cell(y, x) != in_focus
                )
                if (
                    run is not None
                    and changed
                    and is_set
                    and run.focused == in_focus
                ):
                    run = PaintCommand(y, run.col, run.length + 1, True, in_focus)
                    continue
                if run is not None:
                    commands.append(run)
                    run = None
                if not changed:
                    continue
                if is_set:
                    run = PaintCommand(y, x, 1, True, in_focus)
                else:
                    commands.append(PaintCommand(y, x, 1, False, in_focus))
            if run is not None:
                commands.append(run)
        return commands
