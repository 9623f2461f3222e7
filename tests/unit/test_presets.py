"""Unit tests for new-font presets."""

import pytest

from drcsedit.core import (
    FontUsage,
    ScreenSize,
    TargetDevice,
    build_parameters,
    detect_dimensions,
    supported_screens,
)
from drcsedit.domain import ParameterSet, charsets
from drcsedit.exceptions import PresetError

LATIN_1 = charsets.find("A", 96)


class TestScreenSize:
    """Tests for ScreenSize."""

    def test_geometry(self) -> None:
        """Test columns and lines of each size."""
        assert (ScreenSize.COLS80_LINES24.columns, ScreenSize.COLS80_LINES24.lines) == (80, 24)
        assert (ScreenSize.COLS132_LINES48.columns, ScreenSize.COLS132_LINES48.lines) == (132, 48)
        assert ScreenSize.COLS80_LINES36.code == 11

    def test_from_label(self) -> None:
        """Test lookup by label."""
        assert ScreenSize.from_label("132x24") is ScreenSize.COLS132_LINES24
        with pytest.raises(PresetError, match="unknown screen size"):
            ScreenSize.from_label("100x30")


class TestSupportedScreens:
    """Tests for supported_screens()."""

    def test_vt420_supports_all(self) -> None:
        assert supported_screens(TargetDevice.VT420) == list(ScreenSize)

    def test_custom_is_80x24_only(self) -> None:
        assert supported_screens(TargetDevice.CUSTOM) == [ScreenSize.COLS80_LINES24]

    def test_others_are_24_lines(self) -> None:
        assert supported_screens(TargetDevice.VT340) == [
            ScreenSize.COLS80_LINES24,
            ScreenSize.COLS132_LINES24,
        ]


class TestBuildParameters:
    """Tests for build_parameters()."""

    def test_vt420_full_cell(self) -> None:
        """Test the default VT420 font."""
        params = build_parameters(
            TargetDevice.VT420, ScreenSize.COLS80_LINES24, FontUsage.FULL_CELL, charsets.ASCII
        )
        assert params == [0, 0, 0, 10, 0, 2, 16, 0]

    def test_vt420_text_132x48(self) -> None:
        """Test narrowing, shortening and text width together."""
        params = build_parameters(
            TargetDevice.VT420, ScreenSize.COLS132_LINES48, FontUsage.TEXT, LATIN_1
        )
        assert params == [0, 0, 0, 5, 22, 0, 8, 1]

    def test_36_line_page(self) -> None:
        """Test the reduced height on 36 line pages."""
        params = build_parameters(
            TargetDevice.VT420, ScreenSize.COLS80_LINES36, FontUsage.FULL_CELL, charsets.ASCII
        )
        assert params == [0, 0, 0, 10, 11, 2, 10, 0]

    def test_vt2x0_matrix_shorthand(self) -> None:
        """Test that VT2x0 fonts use the short form."""
        params = build_parameters(
            TargetDevice.VT2X0, ScreenSize.COLS80_LINES24, FontUsage.TEXT, charsets.ASCII
        )
        assert params == [0, 0, 0, 4, 0, 0]
        params = build_parameters(
            TargetDevice.VT2X0, ScreenSize.COLS132_LINES24, FontUsage.TEXT, charsets.ASCII
        )
        assert params == [0, 0, 0, 2, 2, 0]

    @pytest.mark.parametrize(
        ("device", "screen", "usage", "charset"),
        [
            (TargetDevice.VT340, ScreenSize.COLS80_LINES36, FontUsage.FULL_CELL, charsets.ASCII),
            (TargetDevice.CUSTOM, ScreenSize.COLS132_LINES24, FontUsage.TEXT, charsets.ASCII),
            (TargetDevice.VT2X0, ScreenSize.COLS80_LINES24, FontUsage.FULL_CELL, charsets.ASCII),
            (TargetDevice.VT2X0, ScreenSize.COLS132_LINES24, FontUsage.TEXT, LATIN_1),
        ],
    )
    def test_invalid_combinations(
        self,
        device: TargetDevice,
        screen: ScreenSize,
        usage: FontUsage,
        charset: charsets.Charset,
    ) -> None:
        """Test combinations a device cannot use."""
        with pytest.raises(PresetError):
            build_parameters(device, screen, usage, charset)

    @pytest.mark.parametrize("device", [d for d in TargetDevice if d != TargetDevice.VT2X0])
    def test_full_cell_dimensions_detected(self, device: TargetDevice) -> None:
        """Test that a new font's cell is detected as the device cell."""
        params = build_parameters(
            device, ScreenSize.COLS80_LINES24, FontUsage.FULL_CELL, charsets.ASCII
        )
        dims = detect_dimensions(ParameterSet.from_values(params), [])
        assert (dims.width, dims.height) == (device.width, device.height)
