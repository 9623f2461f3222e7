"""Unit tests for EditorSession."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from drcsedit.config import DocumentDefaults, EditorSettings
from drcsedit.core import Key
from drcsedit.domain import Coord
from drcsedit.exceptions import FontFormatError, FontLoadError
from drcsedit.io.writer import DEFAULT_FILENAME
from drcsedit.session import EditorSession


@pytest.fixture
def logger() -> Mock:
    return Mock()


@pytest.fixture
def session(logger: Mock) -> EditorSession:
    return EditorSession(logger=logger)


class TestNew:
    """Tests for creating fonts."""

    def test_starts_with_empty_font(self, session: EditorSession) -> None:
        """Test the state of a fresh session."""
        assert session.filepath is None
        assert session.status.current_filename == "Untitled"
        assert session.document.glyph_count == 0
        assert session.canvas.glyph_index == 1
        assert not session.is_dirty

    def test_new_with_parameters(self, session: EditorSession) -> None:
        """Test creating a font with explicit parameters."""
        session.new([0, 0, 0, 12, 0, 2, 30, 1], "A")
        assert session.document.size == 96
        assert session.canvas.glyph_index == 0
        assert (session.canvas.cell_width, session.canvas.cell_height) == (12, 30)

    def test_new_uses_settings(self, logger: Mock) -> None:
        """Test that configured defaults are applied."""
        defaults = DocumentDefaults(parameters=[0, 1, 0, 10, 0, 2, 20, 0], charset_id="B")
        settings = EditorSettings(document=defaults)
        session = EditorSession(settings, logger=logger)
        assert session.document.params.text == "0;1;0;10;0;2;20;0"
        assert session.document.charset_id == "B"
        logger.log_document_cleared.assert_called_with("B", "0;1;0;10;0;2;20;0")


class TestOpenSave:
    """Tests for file commands."""

    def test_open(self, session: EditorSession, sample_font_path: Path, logger: Mock) -> None:
        """Test opening a font file."""
        session.open(sample_font_path)
        assert session.filepath == sample_font_path
        assert session.status.current_filename == "sample.fnt"
        assert session.canvas.glyph_index == 1
        assert session.canvas.pixel(0, 2) == 1
        logger.log_document_loaded.assert_called_once_with(
            str(sample_font_path), " @", 2, (10, 16)
        )

    def test_open_missing(self, session: EditorSession, tmp_path: Path, logger: Mock) -> None:
        """Test that load failures are logged and raised."""
        with pytest.raises(FontLoadError):
            session.open(tmp_path / "missing.fnt")
        logger.log_load_failed.assert_called_once()
        assert session.filepath is None

    def test_open_invalid_keeps_font(self, session: EditorSession, tmp_path: Path) -> None:
        """Test that an unusable file does not replace the font."""
        path = tmp_path / "bad.fnt"
        path.write_text("nothing here")
        session.process_key(Key.SPACE)
        with pytest.raises(FontFormatError):
            session.open(path)
        assert session.document.is_used(1)

    def test_save_round_trip(
        self, session: EditorSession, sample_font_path: Path, sample_font_bytes: bytes
    ) -> None:
        """Test that an unedited font is written back unchanged."""
        session.open(sample_font_path)
        session.save()
        assert sample_font_path.read_bytes() == sample_font_bytes

    def test_save_flushes(self, session: EditorSession, tmp_path: Path, logger: Mock) -> None:
        """Test that pending canvas edits are saved."""
        session.process_key(Key.SPACE)
        assert session.is_dirty
        path = session.save(tmp_path / "new.fnt")
        assert path == tmp_path / "new.fnt"
        assert session.filepath == path
        assert session.status.current_filename == "new.fnt"
        assert not session.is_dirty
        assert path.read_bytes() == (
            b"\x1bP0;0;0;10;0;2;16;0{ @;@?????????/??????????/??????????\x1b\\"
        )
        logger.log_glyph_flushed.assert_called_once_with(1)
        logger.log_document_saved.assert_called_once()

    def test_save_untitled(
        self, session: EditorSession, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the default file name."""
        monkeypatch.chdir(tmp_path)
        path = session.save()
        assert path == Path(DEFAULT_FILENAME)
        assert (tmp_path / DEFAULT_FILENAME).exists()

    def test_reopen_saved_font(self, session: EditorSession, tmp_path: Path, logger: Mock) -> None:
        """Test that a saved font loads with its edits."""
        session.canvas.select(Coord(0, 0))
        session.process_key(Key.SPACE)
        path = session.save(tmp_path / "edit.fnt")

        other = EditorSession(logger=logger)
        other.open(path)
        assert other.document.is_used(1)
        assert other.canvas.pixel(0, 0) == 1


class TestProperties:
    """Tests for update_properties()."""

    def test_charset_change(self, session: EditorSession) -> None:
        """Test changing the charset identifier."""
        assert session.update_properties(charset_id="B")
        assert session.document.charset_id == "B"
        assert session.status.is_dirty
        assert session.status.current_index == 1

    def test_no_change(self, session: EditorSession) -> None:
        """Test that unchanged values leave the font clean."""
        assert not session.update_properties(charset_id=" @", pfn=0, pe=0, c1_8bit=False)
        assert not session.status.is_dirty

    def test_parameters_and_controls(self, session: EditorSession) -> None:
        """Test changing Pfn, Pe and the control format."""
        assert session.update_properties(pfn=1, pe=2, c1_8bit=True)
        assert session.document.params.text == "1;0;2;10;0;2;16;0"
        assert session.document.c1_controls is True

    def test_source_form_controls_unchanged(self, session: EditorSession, tmp_path: Path) -> None:
        """Test that a source literal keeps its framing."""
        path = tmp_path / "font.h"
        path.write_bytes(b'R"(0;1;0;10;0;2;16;0{ @~~)";')
        session.open(path)
        assert not session.update_properties(c1_8bit=True)
        assert session.document.c1_controls is None


class TestKeys:
    """Tests for editor shortcuts."""

    def test_undo(self, session: EditorSession) -> None:
        session.process_key(Key.SPACE)
        assert session.process_key(Key.CTRL_Z)
        assert session.canvas.pixel(0, 0) == 0

    def test_copy_paste(self, session: EditorSession) -> None:
        session.process_key(Key.SPACE)
        session.process_key(Key.ALT_RIGHT)
        session.process_key(Key.CTRL_C)
        session.process_key(Key.DOWN)
        session.process_key(Key.DOWN)
        session.process_key(Key.SHIFT_INS)
        assert session.canvas.pixel(2, 0) == 1
        assert session.canvas.pixel(2, 1) == 0

    def test_cut_and_delete(self, session: EditorSession) -> None:
        session.process_key(Key.CTRL_A)
        session.process_key(Key.SPACE)
        session.process_key(Key.SHIFT_DEL)
        assert sum(session.canvas.pixels) == 0
        session.process_key(Key.CTRL_V)
        assert sum(session.canvas.pixels) == 160
        session.process_key(Key.DEL)
        assert sum(session.canvas.pixels) == 0

    def test_navigation(self, session: EditorSession) -> None:
        session.process_key(Key.PGDN)
        session.process_key(Key.PGDN)
        assert session.canvas.glyph_index == 3
        session.process_key(Key.PGUP)
        assert session.canvas.glyph_index == 2
        session.process_key(Key.CTRL_PGDN)
        assert session.canvas.glyph_index == 94
        session.process_key(Key.CTRL_PGUP)
        assert session.canvas.glyph_index == 1

    def test_canvas_keys_delegated(self, session: EditorSession) -> None:
        assert session.process_key(Key.RIGHT)
        assert session.canvas.focus == Coord(0, 1)
