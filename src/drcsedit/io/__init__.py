"""Font I/O layer for drcsedit.

This module handles reading and writing soft font files. Files are read
and written whole; all interpretation happens in FontDocument.

Key classes:
- FontReader: Load a font file into a FontDocument
- FontWriter: Save a FontDocument to a font file
"""

from drcsedit.io.reader import FontReader
from drcsedit.io.writer import FontWriter

__all__ = [
    "FontReader",
    "FontWriter",
]
