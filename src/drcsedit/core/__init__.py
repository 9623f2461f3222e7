"""Core soft font algorithms for drcsedit.

This module contains:

- Envelope scanning (locating a DECDLD sequence in a byte stream)
- Cell dimension inference from parameters and glyph data
- The font document model (parse, serialize, glyph checkout)
- The pixel canvas editing model (selection, clipboard, transforms, undo)
- Incremental redraw (paint commands for changed cells)

Key functions:
- scan: Find and split a font-definition sequence
- detect_dimensions: Infer cell width, height and pixel aspect ratio
- build_parameters: Parameter list for a new font

Key classes:
- FontDocument: A complete soft font
- CanvasModel: Editing state of the glyph on the canvas
- RenderDiffer: Turns state changes into paint commands
- VtSurface, TextSurface: Drawing surfaces
- EditorStatus: In-memory status sink
"""

from drcsedit.core.canvas import CanvasModel
from drcsedit.core.dimensions import CellDimensions, detect_dimensions, screen_properties
from drcsedit.core.document import FontDocument
from drcsedit.core.keys import Key
from drcsedit.core.presets import (
    FontUsage,
    ScreenSize,
    TargetDevice,
    build_parameters,
    supported_screens,
)
from drcsedit.core.render import CellStyle, PaintCommand, RenderDiffer
from drcsedit.core.scanner import Envelope, scan
from drcsedit.core.status import EditorStatus, StatusSink
from drcsedit.core.surface import DrawingSurface, TextSurface, Viewport, VtSurface

__all__ = [
    # Document classes
    "CanvasModel",
    "CellDimensions",
    "CellStyle",
    "DrawingSurface",
    "EditorStatus",
    "Envelope",
    "FontDocument",
    "FontUsage",
    "Key",
    "PaintCommand",
    "RenderDiffer",
    "ScreenSize",
    "StatusSink",
    "TargetDevice",
    "TextSurface",
    "Viewport",
    "VtSurface",
    # Functions
    "build_parameters",
    "detect_dimensions",
    "scan",
    "screen_properties",
    "supported_screens",
]
