"""Editing session orchestration.

EditorSession ties a FontDocument, the CanvasModel editing it, the
status sink and the file on disk together. It is the surface an
interactive front end drives: file commands, properties, and key
presses that are not canvas-local.
"""

from collections.abc import Callable, Sequence
from pathlib import Path

from drcsedit.config import EditorSettings
from drcsedit.core import CanvasModel, DrawingSurface, EditorStatus, FontDocument, Key
from drcsedit.exceptions import FontError
from drcsedit.io import FontReader, FontWriter
from drcsedit.io.writer import DEFAULT_FILENAME
from drcsedit.utils import SessionLogger, configure_logging

UNTITLED = "Untitled"


class EditorSession:
    """One open font and its editing state.

    Example:
        session = EditorSession()
        session.open(Path("font.fnt"))
        session.process_key(Key.SPACE)
        session.save()
    """

    def __init__(
        self,
        settings: EditorSettings | None = None,
        surface: DrawingSurface | None = None,
        status: EditorStatus | None = None,
        logger: SessionLogger | None = None,
    ) -> None:
        """Initialize a session holding a new, empty font.

        Args:
            settings: Application settings (defaults if None)
            surface: Drawing surface handed to the canvas
            status: Status sink (a fresh EditorStatus if None)
            logger: Session logger (configured from settings if None)
        """
        self.settings = settings or EditorSettings()
        if logger is None:
            logger = SessionLogger(
                configure_logging(
                    log_file=self.settings.logging.log_file,
                    console_level=self.settings.logging.log_level,
                    file_level=self.settings.logging.file_log_level,
                    quiet=True,
                )
            )
        self.logger = logger
        self.status = status or EditorStatus()
        self.document = FontDocument()
        self.canvas = CanvasModel(self.document, surface=surface, status=self.status)
        self.filepath: Path | None = None

        self._shortcuts: dict[Key, Callable[[], None]] = {
            Key.CTRL_Z: self.canvas.undo,
            Key.CTRL_X: self.canvas.cut,
            Key.SHIFT_DEL: self.canvas.cut,
            Key.CTRL_C: self.canvas.copy,
            Key.CTRL_INS: self.canvas.copy,
            Key.CTRL_V: self.canvas.paste,
            Key.SHIFT_INS: self.canvas.paste,
            Key.DEL: self.canvas.delete_selection,
            Key.CTRL_A: self.canvas.select_all,
            Key.PGDN: self.canvas.next_glyph,
            Key.PGUP: self.canvas.prev_glyph,
            Key.CTRL_PGDN: lambda: self.canvas.next_glyph(only_used=True),
            Key.CTRL_PGUP: lambda: self.canvas.prev_glyph(only_used=True),
        }
        self.new()

    @property
    def is_dirty(self) -> bool:
        """True if the font has unsaved changes."""
        return self.status.is_dirty or self.canvas.is_dirty

    def flush(self) -> None:
        """Check the glyph on the canvas back into the document."""
        index = self.canvas.glyph_index
        if self.canvas.flush() and index is not None:
            self.logger.log_glyph_flushed(index)

    def _reset_view(self, filename: str) -> None:
        self.status.filename(filename)
        self.status.character_set(self.document.charset_id, self.document.size)
        self.status.dirty(False)
        self.canvas.refresh()

    def new(
        self,
        params: Sequence[int | None] | None = None,
        charset_id: str | None = None,
    ) -> None:
        """Replace the font with an empty one.

        Args:
            params: Parameter values (the configured defaults if None)
            charset_id: Dscs identifier (the configured default if None)
        """
        defaults = self.settings.document
        self.document.clear(
            params if params is not None else defaults.parameters,
            charset_id if charset_id is not None else defaults.charset_id,
        )
        self.filepath = None
        self.logger.log_document_cleared(self.document.charset_id, self.document.params.text)
        self._reset_view(UNTITLED)

    def open(self, path: Path) -> None:
        """Load a font file, replacing the current font.

        Raises:
            FontLoadError: If the file cannot be read
            FontFormatError: If the file holds no font definition
        """
        self.flush()
        try:
            FontReader(path).load_into(self.document)
        except FontError as e:
            self.logger.log_load_failed(str(path), e)
            raise
        self.filepath = path
        self.logger.log_document_loaded(
            str(path),
            self.document.charset_id,
            self.document.glyph_count,
            (self.document.cell_width, self.document.cell_height),
        )
        self._reset_view(path.name)

    def save(self, path: Path | None = None) -> Path:
        """Write the font to disk.

        Args:
            path: Destination (the open file, or ``Untitled.fnt``, if None)

        Returns:
            Path that was written

        Raises:
            FontSaveError: If the file cannot be written
        """
        self.flush()
        target = path or self.filepath or Path(DEFAULT_FILENAME)
        size = FontWriter(self.document, target).save()
        self.logger.log_document_saved(str(target), size)
        if target != self.filepath:
            self.filepath = target
            self.status.filename(target.name)
        self.status.dirty(False)
        return target

    def update_properties(
        self,
        charset_id: str | None = None,
        pfn: int | None = None,
        pe: int | None = None,
        c1_8bit: bool | None = None,
    ) -> bool:
        """Change font-level properties.

        Arguments left as None are not changed. The C1 format can only be
        changed when the file uses one of the two control forms.

        Returns:
            True if anything changed
        """
        changed = False
        document = self.document
        if charset_id is not None and charset_id != document.charset_id:
            document.charset_id = charset_id
            index = self.status.current_index
            self.status.character_set(document.charset_id, document.size)
            if index is not None:
                self.status.index(index)
            changed = True
        if pfn is not None and pfn != (document.params.pfn or 0):
            document.params.pfn = pfn
            changed = True
        if pe is not None and pe != (document.params.pe or 0):
            document.params.pe = pe
            changed = True
        if (
            c1_8bit is not None
            and document.c1_controls is not None
            and c1_8bit != document.c1_controls
        ):
            document.c1_controls = c1_8bit
            changed = True
        if changed:
            self.status.dirty(True)
        return changed

    def process_key(self, key: Key) -> bool:
        """Handle an editor shortcut, or pass the key to the canvas.

        Returns:
            True if the key was handled
        """
        action = self._shortcuts.get(key)
        if action is not None:
            action()
            return True
        return self.canvas.process_key(key)
