"""Status reporting for the editor.

The canvas and session report the current glyph, the dirty state, the
file name and the character set to a status sink. EditorStatus is the
in-memory sink; it also works out which character the current glyph
replaces, so a status line can show it.
"""

from typing import Protocol

from drcsedit.domain import charsets

DEL = "\x7f"


class StatusSink(Protocol):
    """Receiver of editor status changes."""

    def filename(self, name: str) -> None:
        ...

    def character_set(self, charset_id: str, size: int) -> None:
        ...

    def index(self, index: int) -> None:
        ...

    def dirty(self, dirty: bool) -> None:
        ...


class EditorStatus:
    """Tracks what a status line would show.

    Attributes:
        current_filename: Name of the open file
        is_dirty: Whether there are unsaved changes
        current_index: Index of the glyph being edited, or None
    """

    def __init__(self) -> None:
        self.current_filename = ""
        self.is_dirty = False
        self.current_index: int | None = None
        self._char_values = ""
        self.character_set("B", 94)

    def filename(self, name: str) -> None:
        self.current_filename = name

    def character_set(self, charset_id: str, size: int) -> None:
        cs = charsets.find(charset_id, size) or charsets.ASCII
        values = cs.glyphs
        if cs.size == 94:
            values = " " + values + DEL
        self._char_values = values
        self.current_index = None

    def index(self, index: int) -> None:
        self.current_index = index

    def dirty(self, dirty: bool) -> None:
        self.is_dirty = dirty

    @property
    def character(self) -> str | None:
        """Character the current glyph stands in for."""
        if self.current_index is None or not 0 <= self.current_index < len(self._char_values):
            return None
        return self._char_values[self.current_index]

    @property
    def character_label(self) -> str:
        """Printable label for the current character (``SP``/``DEL`` for controls)."""
        ch = self.character
        if ch is None:
            return ""
        if ch == DEL:
            return "DEL"
        if ch in (" ", "\xa0"):
            return "SP"
        return ch

    @property
    def character_code(self) -> str:
        """Code of the current glyph's position, e.g. ``0x41``."""
        if self.current_index is None:
            return ""
        return f"0x{0x20 + self.current_index:02X}"
