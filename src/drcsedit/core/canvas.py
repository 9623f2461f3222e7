"""Pixel canvas editing model.

CanvasModel checks one glyph out of a FontDocument and edits its pixels:
focus and selection, clipboard, fill/invert/flip transforms and undo.
Every change is drawn on the attached surface through RenderDiffer, so
only cells whose displayed state changed are repainted.

The editable area is the active selection: the focused rectangle when
something beyond the focus pixel is selected, otherwise the whole cell.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from drcsedit.core.document import FontDocument
from drcsedit.core.keys import Key
from drcsedit.core.render import PaintCommand, RenderDiffer
from drcsedit.core.status import StatusSink
from drcsedit.core.surface import DrawingSurface
from drcsedit.domain import Coord, Extent, PixelBuffer, PixelRange

logger = structlog.get_logger(__name__)

# Focus y, focus x, selection h, selection w
_SNAPSHOT_HEADER = 4


class CanvasModel:
    """Editing state for the glyph currently on the canvas.

    Undo history is a flat list of snapshots, each holding the focus,
    the selection and the full pixel buffer. Switching glyphs discards
    it.

    Example:
        canvas = CanvasModel(document, surface=TextSurface())
        canvas.refresh()
        canvas.select(Coord(0, 0), Extent(3, 3))
        canvas.fill_selection(1)
        canvas.undo()
    """

    def __init__(
        self,
        document: FontDocument,
        surface: DrawingSurface | None = None,
        status: StatusSink | None = None,
    ) -> None:
        """Initialize the canvas for a document.

        Args:
            document: Font the glyphs are checked out from
            surface: Where changes are drawn (nothing is drawn if None)
            status: Receiver of glyph index and dirty notifications
        """
        self._document = document
        self._surface = surface
        self._status = status
        self._cell_width = document.cell_width
        self._cell_height = document.cell_height
        self._differ = RenderDiffer(self._cell_width, self._cell_height)
        self._focus = Coord()
        self._selection = Extent()
        self._pixels: PixelBuffer = [0] * (self._cell_width * self._cell_height)
        self._history: list[int] = []
        self._clipboard: list[int] = []
        self._clipboard_extent = Extent()
        self._glyph_index: int | None = None
        self._dirty = False

    @property
    def cell_width(self) -> int:
        return self._cell_width

    @property
    def cell_height(self) -> int:
        return self._cell_height

    @property
    def glyph_index(self) -> int | None:
        """Index of the glyph being edited, None before the first load."""
        return self._glyph_index

    @property
    def focus(self) -> Coord:
        return self._focus

    @property
    def selection(self) -> Extent:
        return self._selection

    @property
    def pixels(self) -> PixelBuffer:
        """Copy of the pixel buffer."""
        return list(self._pixels)

    @property
    def clipboard_extent(self) -> Extent:
        return self._clipboard_extent

    @property
    def is_dirty(self) -> bool:
        """True if the glyph has changes not yet flushed to the document."""
        return self._dirty

    @property
    def focused_range(self) -> PixelRange:
        """Rectangle spanned by the focus and the selection."""
        return PixelRange.from_selection(self._focus, self._selection)

    @property
    def active_range(self) -> PixelRange:
        """Rectangle edit operations apply to."""
        if self._selection.is_empty():
            return PixelRange(0, self._cell_height - 1, 0, self._cell_width - 1)
        return self.focused_range

    def pixel(self, y: int, x: int) -> int:
        """Value of the pixel at row ``y``, column ``x``."""
        return self._pixels[y * self._cell_width + x]

    def can_undo(self) -> bool:
        return len(self._history) >= self._snapshot_size

    def can_paste(self) -> bool:
        return bool(self._clipboard)

    @property
    def _snapshot_size(self) -> int:
        return _SNAPSHOT_HEADER + self._cell_width * self._cell_height

    # Glyph checkout

    def refresh(self) -> None:
        """Adopt the document's current cell size and load its first glyph.

        Used after the document has been replaced or cleared; the
        previous glyph is dropped without being flushed.
        """
        self._cell_width = self._document.cell_width
        self._cell_height = self._document.cell_height
        self._differ = RenderDiffer(self._cell_width, self._cell_height)
        self._focus = Coord()
        self._selection = Extent()
        self._pixels = [0] * (self._cell_width * self._cell_height)
        self._glyph_index = None
        self._clear_history()
        self._load(self._document.first_index, 0)

    def load(self, index: int) -> None:
        """Check out the glyph at ``index`` (clamped to the valid range)."""
        self._load(index, 0)

    def next_glyph(self, only_used: bool = False) -> None:
        """Move to the following glyph, optionally skipping empty ones."""
        start = self._glyph_index if self._glyph_index is not None else self._document.min_index - 1
        self._load(start, +1, only_used)

    def prev_glyph(self, only_used: bool = False) -> None:
        """Move to the preceding glyph, optionally skipping empty ones."""
        start = self._glyph_index if self._glyph_index is not None else self._document.max_index + 1
        self._load(start, -1, only_used)

    def _load(self, start: int, increment: int, only_used: bool = False) -> None:
        min_index = self._document.min_index
        max_index = self._document.max_index
        index = start
        while True:
            index = min(max(index + increment, min_index), max_index)
            if index in (min_index, max_index):
                break
            if not only_used or self._document.is_used(index):
                break

        if index == self._glyph_index:
            return
        self.flush()
        self._clear_history()
        self._pixels = self._document.get_pixels(index)
        self._glyph_index = index
        self._focus = Coord()
        self._selection = Extent()
        logger.debug("Glyph checked out", index=index)
        self.render()
        if self._status is not None:
            self._status.index(index)

    def flush(self) -> bool:
        """Write the edited pixels back into the document.

        Returns:
            True if there were changes to write
        """
        if self._glyph_index is None or not self._dirty:
            return False
        self._document.set_pixels(self._glyph_index, list(self._pixels))
        self._dirty = False
        logger.debug("Glyph checked in", index=self._glyph_index)
        return True

    # Drawing

    def render(self) -> None:
        """Redraw the whole canvas."""
        if self._surface is None:
            return
        self._surface.draw_grid(self._cell_height, self._cell_width)
        self._paint(self._differ.render_all(self._pixels, self.focused_range))

    def _paint(self, commands: list[PaintCommand]) -> None:
        if self._surface is None:
            return
        for command in commands:
            self._surface.paint(command)

    @contextmanager
    def _redraw_changes(self) -> Iterator[None]:
        old_pixels = list(self._pixels)
        old_range = self.focused_range
        yield
        self._paint(self._differ.diff(old_pixels, old_range, self._pixels, self.focused_range))

    # Focus and selection

    def _set_selection(self, origin: Coord, extent: Extent) -> None:
        y = min(max(origin.y, 0), self._cell_height - 1)
        x = min(max(origin.x, 0), self._cell_width - 1)
        h = min(max(extent.h, -y), self._cell_height - y - 1)
        w = min(max(extent.w, -x), self._cell_width - x - 1)
        self._focus = Coord(y, x)
        self._selection = Extent(h, w)

    def select(self, origin: Coord, extent: Extent = Extent()) -> None:
        """Place the focus and selection, clamped to the cell."""
        with self._redraw_changes():
            self._set_selection(origin, extent)

    def select_all(self) -> None:
        self.select(Coord(0, 0), Extent(self._cell_height - 1, self._cell_width - 1))

    def move_focus(self, dy: int, dx: int) -> None:
        """Move the focus, collapsing the selection to the focus pixel."""
        self.select(Coord(self._focus.y + dy, self._focus.x + dx))

    def resize_selection(self, dh: int, dw: int) -> None:
        """Grow or shrink the selection, keeping the focus in place."""
        self.select(self._focus, Extent(self._selection.h + dh, self._selection.w + dw))

    # Edits

    def _save_history(self) -> None:
        self._dirty = True
        if self._status is not None:
            self._status.dirty(True)
        self._history.extend(
            (self._focus.y, self._focus.x, self._selection.h, self._selection.w)
        )
        self._history.extend(self._pixels)

    def _clear_history(self) -> None:
        self._dirty = False
        self._history = []

    def _cells(self, area: PixelRange) -> Iterator[int]:
        for y in range(area.top, area.bottom + 1):
            for x in range(area.left, area.right + 1):
                yield y * self._cell_width + x

    def toggle_pixel(self, pos: Coord | None = None) -> None:
        """Flip one pixel (the focus pixel by default)."""
        pos = self._focus if pos is None else pos
        with self._redraw_changes():
            self._save_history()
            self._pixels[pos.y * self._cell_width + pos.x] ^= 1

    def fill_selection(self, value: int) -> None:
        """Set every pixel of the active selection to ``value``."""
        with self._redraw_changes():
            self._save_history()
            for offset in self._cells(self.active_range):
                self._pixels[offset] = value

    def delete_selection(self) -> None:
        self.fill_selection(0)

    def invert(self) -> None:
        """Invert every pixel of the active selection."""
        with self._redraw_changes():
            self._save_history()
            for offset in self._cells(self.active_range):
                self._pixels[offset] ^= 1

    def flip_horizontal(self) -> None:
        """Mirror the active selection left to right."""
        area = self.active_range
        width = area.right - area.left
        with self._redraw_changes():
            self._save_history()
            for y in range(area.top, area.bottom + 1):
                row = y * self._cell_width
                for x in range((width + 1) // 2):
                    left = row + area.left + x
                    right = row + area.right - x
                    self._pixels[left], self._pixels[right] = self._pixels[right], self._pixels[left]

    def flip_vertical(self) -> None:
        """Mirror the active selection top to bottom."""
        area = self.active_range
        height = area.bottom - area.top
        with self._redraw_changes():
            self._save_history()
            for y in range((height + 1) // 2):
                top = (area.top + y) * self._cell_width
                bottom = (area.bottom - y) * self._cell_width
                for x in range(area.left, area.right + 1):
                    self._pixels[top + x], self._pixels[bottom + x] = (
                        self._pixels[bottom + x],
                        self._pixels[top + x],
                    )

    # Clipboard

    def copy(self) -> None:
        """Copy the active selection and select exactly what was copied."""
        area = self.active_range
        self._clipboard = [self._pixels[offset] for offset in self._cells(area)]
        self._clipboard_extent = area.extent
        self.select(area.origin, area.extent)

    def cut(self) -> None:
        self.copy()
        self.fill_selection(0)

    def paste(self) -> None:
        """Draw the clipboard's set pixels at the focus and select them.

        Clear clipboard pixels leave the canvas untouched, and anything
        falling outside the cell is dropped.
        """
        if not self.can_paste():
            return
        origin = self.focused_range.origin
        extent = self._clipboard_extent
        with self._redraw_changes():
            self._save_history()
            bits = iter(self._clipboard)
            for y in range(origin.y, origin.y + extent.h + 1):
                for x in range(origin.x, origin.x + extent.w + 1):
                    if next(bits) and y < self._cell_height and x < self._cell_width:
                        self._pixels[y * self._cell_width + x] = 1
            self._set_selection(origin, extent)

    def undo(self) -> None:
        """Restore the state saved before the most recent edit."""
        if not self.can_undo():
            return
        offset = len(self._history) - self._snapshot_size
        snapshot = self._history[offset:]
        del self._history[offset:]
        with self._redraw_changes():
            self._focus = Coord(snapshot[0], snapshot[1])
            self._selection = Extent(snapshot[2], snapshot[3])
            self._pixels = snapshot[_SNAPSHOT_HEADER:]

    # Keyboard

    def process_key(self, key: Key) -> bool:
        """Handle a canvas key.

        Returns:
            True if the key was handled
        """
        if key == Key.HOME:
            self._load(self._document.min_index - 1, 0)
        elif key == Key.END:
            self._load(self._document.max_index + 1, 0)
        elif key == Key.UP:
            self.move_focus(-1, 0)
        elif key == Key.DOWN:
            self.move_focus(+1, 0)
        elif key == Key.LEFT:
            self.move_focus(0, -1)
        elif key == Key.RIGHT:
            self.move_focus(0, +1)
        elif key == Key.ALT_UP:
            self.resize_selection(-1, 0)
        elif key == Key.ALT_DOWN:
            self.resize_selection(+1, 0)
        elif key == Key.ALT_LEFT:
            self.resize_selection(0, -1)
        elif key == Key.ALT_RIGHT:
            self.resize_selection(0, +1)
        elif key == Key.SPACE:
            if self._selection.is_empty():
                self.toggle_pixel(self._focus)
            else:
                self.fill_selection(1)
        else:
            return False
        return True
