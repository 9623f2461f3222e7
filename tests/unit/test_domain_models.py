"""Unit tests for domain models.

Tests for ParameterSet, the coordinate types and the charset registry.
"""

from drcsedit.domain import Coord, Extent, ParameterSet, PixelRange, charsets


class TestParameterSet:
    """Tests for ParameterSet."""

    def test_parse_values(self) -> None:
        """Test reading positional values with empty slots."""
        params = ParameterSet.parse("1;1;2;;;2")
        assert params.values() == (1, 1, 2, None, None, 2, None, None)
        assert params.serialized_length == 6
        assert params.text == "1;1;2;;;2"

    def test_parse_keeps_text_verbatim(self) -> None:
        """Test that stray characters survive until the set is modified."""
        params = ParameterSet.parse("0; 1\n;x2")
        assert params.text == "0; 1\n;x2"
        assert params.pfn == 0
        assert params.pcn == 1
        assert params.pe == 2

    def test_clearing_value_keeps_length(self) -> None:
        """Test that a cleared slot is emitted empty."""
        params = ParameterSet.parse("1;1;2;;;2")
        params.pe = None
        assert params.text == "1;1;;;;2"

    def test_setting_value_extends_length(self) -> None:
        """Test that storing past the end grows the serialized length."""
        params = ParameterSet.parse("")
        assert params.values() == (None,) * 8
        params.pcss = 1
        assert params.serialized_length == 8
        assert params.text == ";;;;;;;1"

    def test_length_never_shrinks(self) -> None:
        """Test that trailing empty slots are kept."""
        params = ParameterSet.parse("0;0;0;;")
        params.pfn = 3
        assert params.text == "3;0;0;;"

    def test_overflow_slots_are_carried(self) -> None:
        """Test that values past the eighth slot are written back."""
        params = ParameterSet.parse("1;2;3;4;5;6;7;8;9")
        assert params.pcss == 8
        params.pfn = 0
        assert params.text == "0;2;3;4;5;6;7;8;9"

    def test_from_values(self) -> None:
        """Test building a set from a list."""
        params = ParameterSet.from_values([0, 0, 0, 10])
        assert params.text == "0;0;0;10"
        assert params.pcmw == 10
        assert params.pcmh is None

    def test_named_accessors(self) -> None:
        """Test that each name maps to its position."""
        params = ParameterSet.from_values([1, 2, 3, 4, 5, 6, 7, 8])
        assert (
            params.pfn,
            params.pcn,
            params.pe,
            params.pcmw,
            params.pss,
            params.pu,
            params.pcmh,
            params.pcss,
        ) == (1, 2, 3, 4, 5, 6, 7, 8)
        params.set(4, 22)
        assert params.get(4) == 22
        assert params.text == "1;2;3;4;22;6;7;8"

    def test_equality(self) -> None:
        """Test equality compares text and values."""
        assert ParameterSet.parse("1;2") == ParameterSet.from_values([1, 2])
        assert ParameterSet.parse("1;2") != ParameterSet.parse("1;2;")


class TestPixelRange:
    """Tests for selection normalization."""

    def test_positive_extent(self) -> None:
        """Test a selection extending down and right."""
        area = PixelRange.from_selection(Coord(1, 2), Extent(3, 4))
        assert area == PixelRange(top=1, bottom=4, left=2, right=6)

    def test_negative_extent(self) -> None:
        """Test a selection extending up and left."""
        area = PixelRange.from_selection(Coord(5, 5), Extent(-2, -3))
        assert area == PixelRange(top=3, bottom=5, left=2, right=5)
        assert area.origin == Coord(3, 2)
        assert area.extent == Extent(2, 3)

    def test_contains(self) -> None:
        """Test inclusive bounds."""
        area = PixelRange(0, 1, 0, 1)
        assert area.contains(Coord(1, 1))
        assert not area.contains(Coord(2, 0))
        assert area.contains_cell(0, 1)
        assert not area.contains_cell(0, 2)

    def test_empty_extent(self) -> None:
        """Test detection of a collapsed selection."""
        assert Extent().is_empty()
        assert not Extent(0, 1).is_empty()


class TestCharsets:
    """Tests for the charset registry."""

    def test_registry_size(self) -> None:
        """Test that all known sets are registered."""
        assert len(charsets.ALL_CHARSETS) == 31
        assert len(charsets.names()) == 31
        assert len(charsets.names(94)) + len(charsets.names(96)) == 31

    def test_repertoire_lengths(self) -> None:
        """Test that every repertoire fills its set."""
        for cs in charsets.ALL_CHARSETS:
            assert len(cs.glyphs) in (0, cs.size), cs.name

    def test_find(self) -> None:
        """Test lookup by identifier and size."""
        assert charsets.find("B", 94) is charsets.ASCII
        assert charsets.find("B", 96).name == "Latin-2 (ISO)"
        assert charsets.find("~", 94) is None

    def test_unregistered_has_no_repertoire(self) -> None:
        """Test that find() skips sets without characters."""
        assert charsets.find(" @", 94) is None

    def test_index_round_trip(self) -> None:
        """Test index_of() and from_index() agree."""
        index = charsets.index_of("A", 96)
        assert index is not None
        assert charsets.from_index(index, 96).id == "A"
        assert charsets.from_index(999) is None

    def test_find_by_name(self) -> None:
        """Test case-insensitive lookup by name."""
        assert charsets.find_by_name("ascii") is charsets.ASCII
        assert charsets.find_by_name("no such set") is None
