"""Unit tests for RenderDiffer."""

from drcsedit.core import CellStyle, PaintCommand, RenderDiffer
from drcsedit.domain import PixelRange

NO_FOCUS = PixelRange(0, -1, 0, -1)


class TestPaintCommand:
    """Tests for PaintCommand."""

    def test_style(self) -> None:
        """Test the four displayed states."""
        assert PaintCommand(0, 0, 1, True, True).style == CellStyle.SET_FOCUSED
        assert PaintCommand(0, 0, 1, True, False).style == CellStyle.SET
        assert PaintCommand(0, 0, 1, False, True).style == CellStyle.EMPTY_FOCUSED
        assert PaintCommand(0, 0, 1, False, False).style == CellStyle.EMPTY

    def test_parity(self) -> None:
        """Test the checkerboard parity of a cell."""
        assert PaintCommand(0, 0, 1, False, False).parity == 0
        assert PaintCommand(0, 1, 1, False, False).parity == 1
        assert PaintCommand(3, 5, 1, False, False).parity == 0


class TestRenderAll:
    """Tests for RenderDiffer.render_all()."""

    def test_blank_cell(self) -> None:
        """Test that a blank, unfocused cell needs no commands."""
        differ = RenderDiffer(4, 2)
        assert differ.render_all([0] * 8, NO_FOCUS) == []

    def test_runs_and_focus(self) -> None:
        """Test set runs split at the focus boundary."""
        differ = RenderDiffer(4, 2)
        pixels = [1, 1, 1, 0, 0, 0, 0, 0]
        focus = PixelRange(0, 1, 2, 3)
        assert differ.render_all(pixels, focus) == [
            PaintCommand(0, 0, 2, True, False),
            PaintCommand(0, 2, 1, True, True),
            PaintCommand(0, 3, 1, False, True),
            PaintCommand(1, 2, 1, False, True),
            PaintCommand(1, 3, 1, False, True),
        ]


class TestDiff:
    """Tests for RenderDiffer.diff()."""

    def test_no_change(self) -> None:
        """Test that identical states produce nothing."""
        differ = RenderDiffer(3, 3)
        pixels = [1, 0, 1, 0, 1, 0, 1, 0, 1]
        focus = PixelRange(1, 1, 1, 1)
        assert differ.diff(pixels, focus, list(pixels), focus) == []

    def test_set_cells_coalesce(self) -> None:
        """Test that newly set neighbours become one run."""
        differ = RenderDiffer(5, 1)
        old = [0, 0, 0, 0, 0]
        new = [0, 1, 1, 1, 0]
        assert differ.diff(old, NO_FOCUS, new, NO_FOCUS) == [PaintCommand(0, 1, 3, True, False)]

    def test_unchanged_cell_breaks_run(self) -> None:
        """Test that a run stops at a cell that was already set."""
        differ = RenderDiffer(3, 1)
        old = [0, 1, 0]
        new = [1, 1, 1]
        assert differ.diff(old, NO_FOCUS, new, NO_FOCUS) == [
            PaintCommand(0, 0, 1, True, False),
            PaintCommand(0, 2, 1, True, False),
        ]

    def test_cleared_cells_are_single(self) -> None:
        """Test that empty cells are painted one at a time."""
        differ = RenderDiffer(3, 1)
        old = [1, 1, 0]
        new = [0, 0, 0]
        assert differ.diff(old, NO_FOCUS, new, NO_FOCUS) == [
            PaintCommand(0, 0, 1, False, False),
            PaintCommand(0, 1, 1, False, False),
        ]

    def test_focus_move(self) -> None:
        """Test that only cells whose focus changed are repainted."""
        differ = RenderDiffer(3, 2)
        pixels = [0, 0, 1, 0, 0, 0]
        old_focus = PixelRange(0, 0, 0, 0)
        new_focus = PixelRange(0, 0, 1, 2)
        assert differ.diff(pixels, old_focus, pixels, new_focus) == [
            PaintCommand(0, 0, 1, False, False),
            PaintCommand(0, 1, 1, False, True),
            PaintCommand(0, 2, 1, True, True),
        ]

    def test_focus_splits_runs(self) -> None:
        """Test that set runs do not cross a focus boundary."""
        differ = RenderDiffer(4, 1)
        old = [0, 0, 0, 0]
        new = [1, 1, 1, 1]
        focus = PixelRange(0, 0, 2, 3)
        assert differ.diff(old, NO_FOCUS, new, focus) == [
            PaintCommand(0, 0, 2, True, False),
            PaintCommand(0, 2, 2, True, True),
        ]

    def test_runs_end_at_row(self) -> None:
        """Test that runs never wrap to the next row."""
        differ = RenderDiffer(2, 2)
        old = [0, 0, 0, 0]
        new = [1, 1, 1, 1]
        assert differ.diff(old, NO_FOCUS, new, NO_FOCUS) == [
            PaintCommand(0, 0, 2, True, False),
            PaintCommand(1, 0, 2, True, False),
        ]
