"""Parameter presets for new fonts.

A new font is described by the terminal it targets, the screen size it
is meant for, whether it is a text or full-cell font, and its character
set. This module turns those choices into the DECDLD parameter list.
"""

from enum import Enum

from drcsedit.domain import Charset
from drcsedit.exceptions import PresetError


class TargetDevice(Enum):
    """Terminal families with their full-size cell at 80 columns, 24 lines."""

    VT420 = ("VT5xx/VT420", 10, 16)
    VT382 = ("VT382", 12, 30)
    VT340 = ("VT340", 10, 20)
    VT320 = ("VT320", 15, 12)
    VT2X0 = ("VT2x0", 10, 10)
    CUSTOM = ("Non-standard", 16, 32)

    def __init__(self, label: str, width: int, height: int) -> None:
        self.label = label
        self.width = width
        self.height = height


class ScreenSize(Enum):
    """Screen sizes and their Pss codes."""

    COLS80_LINES24 = ("80x24", 0)
    COLS132_LINES24 = ("132x24", 2)
    COLS80_LINES36 = ("80x36", 11)
    COLS132_LINES36 = ("132x36", 12)
    COLS80_LINES48 = ("80x48", 21)
    COLS132_LINES48 = ("132x48", 22)

    def __init__(self, label: str, code: int) -> None:
        self.label = label
        self.code = code

    @property
    def columns(self) -> int:
        return 132 if self.label.startswith("132") else 80

    @property
    def lines(self) -> int:
        return int(self.label.split("x")[1])

    @classmethod
    def from_label(cls, label: str) -> "ScreenSize":
        """Look up a screen size by its ``COLSxLINES`` label."""
        for size in cls:
            if size.label == label:
                return size
        raise PresetError(f"unknown screen size '{label}'")


class FontUsage(Enum):
    """Whether glyphs fill the whole cell or leave room for spacing."""

    TEXT = "text"
    FULL_CELL = "full"


def supported_screens(device: TargetDevice) -> list[ScreenSize]:
    """Screen sizes a device can display soft fonts on."""
    if device == TargetDevice.VT420:
        return list(ScreenSize)
    if device == TargetDevice.CUSTOM:
        return [ScreenSize.COLS80_LINES24]
    return [ScreenSize.COLS80_LINES24, ScreenSize.COLS132_LINES24]


def build_parameters(
    device: TargetDevice,
    screen: ScreenSize,
    usage: FontUsage,
    charset: Charset,
) -> list[int]:
    """Build the parameter list for an empty font.

    The cell is the device's full cell, narrowed for 132 columns and
    shortened for 36 and 48 lines. Text fonts declare 80% of the width.
    VT2x0 fonts use the matrix shorthand and omit Pcmh and Pcss.

    Args:
        device: Target terminal family
        screen: Target screen size
        usage: Text or full-cell font
        charset: Character set the font is designated as

    Returns:
        Parameter values Pfn;Pcn;Pe;Pcmw;Pss;Pu[;Pcmh;Pcss]

    Raises:
        PresetError: If the device cannot use the requested combination
    """
    if screen not in supported_screens(device):
        raise PresetError(f"{device.label} does not support {screen.label} screens")
    if device == TargetDevice.VT2X0:
        if screen == ScreenSize.COLS80_LINES24 and usage == FontUsage.FULL_CELL:
            raise PresetError("VT2x0 only supports text fonts at 80x24")
        if charset.size != 94:
            raise PresetError("VT2x0 only supports 94-character sets")

    pcmw = device.width
    pcmh = device.height
    if screen.columns == 132:
        pcmw = pcmw * 80 // 132
    if screen.lines == 36:
        pcmh = 10
    elif screen.lines == 48:
        pcmh = 8
    if usage == FontUsage.TEXT:
        pcmw = (pcmw * 8 + 5) // 10

    params = [
        0,  # pfn
        0,  # pcn
        0,  # pe
        pcmw >> 1 if device == TargetDevice.VT2X0 else pcmw,
        screen.code,
        2 if usage == FontUsage.FULL_CELL else 0,
    ]
    if device != TargetDevice.VT2X0:
        params.append(pcmh)
        params.append(1 if charset.size == 96 else 0)
    return params
