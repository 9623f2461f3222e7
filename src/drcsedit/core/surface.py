"""Drawing surfaces for the pixel canvas.

A surface receives the grid and paint commands produced while editing.
VtSurface draws on a DEC VT terminal (VT420 or later) using rectangular
area operations; TextSurface keeps a character grid in memory for
previews and tests.
"""

from dataclasses import dataclass
from typing import Protocol, TextIO

from drcsedit.config import DisplayConfig
from drcsedit.core.render import CellStyle, PaintCommand

CSI = "\x1b["


class DrawingSurface(Protocol):
    """Anything that can display the pixel canvas."""

    def draw_grid(self, cell_height: int, cell_width: int) -> None:
        """Draw an empty grid for a cell of the given size."""
        ...

    def paint(self, command: PaintCommand) -> None:
        """Paint a run of cells."""
        ...

    def write(self, text: str) -> None:
        """Write literal text."""
        ...


@dataclass(frozen=True)
class ColorScheme:
    """Palette indices used to draw the canvas.

    Attributes:
        grid: Background colours of even and odd checkerboard cells
        grid_focus: Offset added to the grid colour inside the focus
        pixel: Colour of set pixels
        pixel_focus: Colour of set pixels inside the focus
        grid_init: SGR attributes the grid is drawn with
    """

    grid: tuple[int, int]
    grid_focus: int
    pixel: int
    pixel_focus: int
    grid_init: tuple[int, ...]


DARK_SCHEME = ColorScheme(grid=(0, 1), grid_focus=2, pixel=7, pixel_focus=5, grid_init=(0, 31, 40))
LIGHT_SCHEME = ColorScheme(grid=(7, 6), grid_focus=-2, pixel=0, pixel_focus=2, grid_init=(0, 36, 47))

# Fill characters approximating one pixel row per screen row at each aspect ratio
_PIXEL_PATTERNS: tuple[tuple[int, str], ...] = (
    (250, "##^  "),
    (200, "##  "),
    (125, '#"_+ '),
    (100, "# "),
    (80, "82641735"),
)
_MIN_PATTERN = (50, "^^")


@dataclass(frozen=True)
class Viewport:
    """Screen placement of the canvas.

    Attributes:
        top: First screen row (1-based)
        left: First screen column (1-based)
        pixel_ar: Screen rows per 100 pixel rows
        pixel_width: Screen columns per pixel
        render_height: Screen rows covered
        render_width: Screen columns covered
        pattern: Grid fill characters, one per screen row
    """

    top: int
    left: int
    pixel_ar: int
    pixel_width: int
    render_height: int
    render_width: int
    pattern: str

    @classmethod
    def layout(
        cls,
        cell_width: int,
        cell_height: int,
        pixel_aspect_ratio: int,
        display: DisplayConfig,
    ) -> "Viewport":
        """Centre a cell on the screen.

        Cells too tall for the screen are drawn at half scale.

        Args:
            cell_width: Cell width in pixels
            cell_height: Cell height in pixels
            pixel_aspect_ratio: Pixel aspect ratio (x100)
            display: Screen size and drawing options

        Returns:
            Computed viewport
        """
        free_height = (display.screen_height - 4) * 100
        scale_down = cell_height * pixel_aspect_ratio > free_height
        pixel_ar = pixel_aspect_ratio >> 1 if scale_down else pixel_aspect_ratio

        pixel_ar, pattern = next(
            ((ar, pattern) for ar, pattern in _PIXEL_PATTERNS if pixel_ar >= ar),
            _MIN_PATTERN,
        )
        pixel_width = (2 if display.double_width else 1) * (1 if scale_down else 2)
        render_height = (cell_height * pixel_ar + 99) // 100
        render_width = cell_width * pixel_width
        return cls(
            top=max((display.screen_height - render_height) // 2 + 1, 1),
            left=max((display.screen_width - render_width) // 2 + 1, 1),
            pixel_ar=pixel_ar,
            pixel_width=pixel_width,
            render_height=render_height,
            render_width=render_width,
            pattern=pattern,
        )

    def rows_of(self, cell_row: int) -> tuple[int, int]:
        """Screen rows spanned by a pixel row."""
        top = cell_row * self.pixel_ar // 100 + self.top
        bottom = ((cell_row + 1) * self.pixel_ar - 1) // 100 + self.top
        return top, bottom

    def columns_of(self, cell_col: int, length: int = 1) -> tuple[int, int]:
        """Screen columns spanned by a run of pixels."""
        left = cell_col * self.pixel_width + self.left
        return left, left + self.pixel_width * length - 1


class VtSurface:
    """Draws the canvas with DEC rectangular area operations.

    Pixels are painted by changing the attributes of the screen cells
    they cover (DECCARA); the grid itself is filled with pattern
    characters (DECFRA).
    """

    def __init__(self, stream: TextIO, viewport: Viewport, reverse_video: bool = False) -> None:
        self._stream = stream
        self.viewport = viewport
        self.scheme = LIGHT_SCHEME if reverse_video else DARK_SCHEME

    def _csi(self, *params: int, final: str) -> None:
        self._stream.write(CSI + ";".join(str(p) for p in params) + final)

    def attribute(self, command: PaintCommand) -> int:
        """SGR colour attribute for a paint command."""
        scheme = self.scheme
        if command.is_set:
            color = scheme.pixel_focus if command.focused else scheme.pixel
        else:
            color = scheme.grid[command.parity]
            if command.focused:
                color += scheme.grid_focus
        # Pattern rows alternate between foreground and background coverage
        return color + (40 if command.row % 2 else 30)

    def draw_grid(self, cell_height: int, cell_width: int) -> None:
        vp = self.viewport
        self._csi(*self.scheme.grid_init, final="m")
        right = vp.left + vp.render_width - 1
        for offset in range(vp.render_height):
            row = vp.top + offset
            ch = vp.pattern[offset % len(vp.pattern)]
            self._csi(ord(ch), row, vp.left, row, right, final="$x")
        for y in range(cell_height):
            for x in range(cell_width):
                self.paint(PaintCommand(y, x, 1, False, False))

    def paint(self, command: PaintCommand) -> None:
        top, bottom = self.viewport.rows_of(command.row)
        left, right = self.viewport.columns_of(command.col, command.length)
        self._csi(top, left, bottom, right, self.attribute(command), final="$r")

    def write(self, text: str) -> None:
        self._stream.write(text)

    def flush(self) -> None:
        self._stream.flush()


class TextSurface:
    """In-memory character rendering of the canvas.

    Example:
        surface = TextSurface()
        surface.draw_grid(2, 3)
        surface.paint(PaintCommand(0, 0, 2, True, False))
        surface.lines()  # ["##.", "..."]
    """

    GLYPHS = {
        CellStyle.SET_FOCUSED: "@",
        CellStyle.SET: "#",
        CellStyle.EMPTY_FOCUSED: "+",
        CellStyle.EMPTY: ".",
    }

    def __init__(self, checkerboard: bool = False) -> None:
        self.checkerboard = checkerboard
        self._cells: list[list[str]] = []
        self.messages: list[str] = []

    def _empty(self, y: int, x: int) -> str:
        if self.checkerboard and (y + x) % 2:
            return ":"
        return self.GLYPHS[CellStyle.EMPTY]

    def draw_grid(self, cell_height: int, cell_width: int) -> None:
        self._cells = [[self._empty(y, x) for x in range(cell_width)] for y in range(cell_height)]

    def paint(self, command: PaintCommand) -> None:
        row = self._cells[command.row]
        for x in range(command.col, command.col + command.length):
            if command.style == CellStyle.EMPTY:
                row[x] = self._empty(command.row, x)
            else:
                row[x] = self.GLYPHS[command.style]

    def write(self, text: str) -> None:
        self.messages.append(text)

    def lines(self) -> list[str]:
        """Current grid, one string per pixel row."""
        return ["".join(row) for row in self._cells]
