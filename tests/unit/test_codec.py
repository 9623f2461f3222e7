"""Unit tests for the sixel glyph codec and the Glyph model."""

import random

import pytest

from drcsedit.domain import Glyph, codec


class TestDecode:
    """Tests for codec.decode()."""

    def test_single_column(self) -> None:
        """Test that bit 0 of a sixel is the top pixel."""
        # 'A' = 0x41 = '?' + 0b000010
        assert codec.decode("A", 1, 6) == [0, 1, 0, 0, 0, 0]

    def test_rows_are_stacked(self) -> None:
        """Test that '/' starts the next six pixel rows."""
        pixels = codec.decode("@/@", 1, 12)
        assert pixels == [1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0]

    def test_formatting_is_ignored(self) -> None:
        """Test that whitespace inside a body carries no pixels."""
        assert codec.decode(" ~\r\n", 1, 6) == [1] * 6

    def test_data_beyond_cell_is_dropped(self) -> None:
        """Test that columns and rows outside the cell are discarded."""
        pixels = codec.decode("~~~/~~~", 2, 4)
        assert pixels == [1, 1] * 4

    def test_missing_data_is_clear(self) -> None:
        """Test that a short body leaves the rest of the cell clear."""
        pixels = codec.decode("~", 3, 8)
        assert pixels[0] == 1
        assert sum(pixels) == 6

    def test_empty_body(self) -> None:
        """Test that an empty body decodes to an empty cell."""
        assert codec.decode("", 4, 4) == [0] * 16


class TestEncode:
    """Tests for codec.encode()."""

    def test_two_pixel_column(self) -> None:
        """Test encoding pixels at rows 0 and 5 of column 0."""
        pixels = [0] * 12
        pixels[0 * 2 + 0] = 1
        pixels[5 * 2 + 0] = 1
        raw = codec.encode(pixels, 2, 6)
        assert raw == chr(0x3F + 0b100001) + "?"
        assert raw == "`?"

    def test_row_groups_round_up(self) -> None:
        """Test that a partial last group of rows is still encoded."""
        raw = codec.encode([1] * 8, 1, 8)
        assert raw == "~/B"

    def test_whitespace_is_preserved(self) -> None:
        """Test that formatting around the old body is kept."""
        raw = codec.encode([1, 0, 0, 0, 0, 0], 1, 6, "\r\n  ~~\n")
        assert raw == "\r\n  @\n"

    def test_only_whitespace_is_preserved(self) -> None:
        """Test that row separators around the old body are not copied."""
        raw = codec.encode([0] * 6, 1, 6, "/~/")
        assert raw == "?"

    def test_round_trip_with_existing_formatting(self) -> None:
        """Test that decode(encode(pixels)) returns the pixels."""
        rng = random.Random(1234)
        for width, height, existing in [
            (10, 16, ""),
            (8, 10, "\n??/??\n"),
            (15, 12, "  ~~~~;"),
            (16, 32, "\t"),
        ]:
            pixels = [rng.randint(0, 1) for _ in range(width * height)]
            raw = codec.encode(pixels, width, height, existing)
            assert codec.decode(raw, width, height) == pixels


class TestMeasurements:
    """Tests for used extent helpers."""

    def test_used_width(self) -> None:
        """Test that the widest row counts sixel characters only."""
        assert codec.used_width("??~/?") == 3
        assert codec.used_width(" ? ?\n/???? ") == 4

    def test_used_height(self) -> None:
        """Test that height is six pixels per row."""
        assert codec.used_height("") == 6
        assert codec.used_height("a/b/c") == 18

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("", False), ("??/??", False), ("? \n?", False), ("??@", True), ("~", True)],
    )
    def test_is_used(self, raw: str, expected: bool) -> None:
        """Test detection of bodies with pixels set."""
        assert codec.is_used(raw) is expected


class TestGlyph:
    """Tests for Glyph model."""

    def test_measures_on_creation(self) -> None:
        """Test that used extent is computed from the sixel text."""
        glyph = Glyph("~~/~~~")
        assert glyph.used_width == 3
        assert glyph.used_height == 12
        assert glyph.used

    def test_blank_glyph(self) -> None:
        """Test an empty glyph."""
        glyph = Glyph()
        assert glyph.sixels == ""
        assert not glyph.used
        assert glyph.pixels(2, 2) == [0, 0, 0, 0]

    def test_set_pixels_remeasures(self) -> None:
        """Test that writing pixels updates text and extent."""
        glyph = Glyph("\n?\n")
        glyph.set_pixels(2, 12, [1] * 24)
        assert glyph.sixels == "\n~~/~~\n"
        assert glyph.used_width == 2
        assert glyph.used_height == 12
        assert glyph.pixels(2, 12) == [1] * 24
