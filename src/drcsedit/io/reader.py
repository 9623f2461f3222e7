"""Font reader for loading soft font files.

This module provides the FontReader class for loading font files into
FontDocument models.
"""

from pathlib import Path

from drcsedit.core.document import FontDocument
from drcsedit.exceptions import FontFormatError, FontLoadError

UNSUPPORTED_FORMAT = "not a valid font file or its format is not currently supported"


class FontReader:
    """Loads soft font files.

    Example:
        reader = FontReader(Path("font.fnt"))
        document = reader.load()
        print(document.cell_width, document.cell_height)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the font file
        """
        self._font_path = font_path

    @property
    def path(self) -> Path:
        return self._font_path

    def read_bytes(self) -> bytes:
        """Read the raw file contents.

        Raises:
            FontLoadError: If the file does not exist or cannot be read
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")
        try:
            return self._font_path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def load_into(self, document: FontDocument) -> None:
        """Parse the file into an existing document.

        The document is left untouched if the file cannot be used.

        Raises:
            FontLoadError: If the file cannot be read
            FontFormatError: If no font definition is found in the file
        """
        if not document.parse(self.read_bytes()):
            raise FontFormatError(str(self._font_path), UNSUPPORTED_FORMAT)

    def load(self) -> FontDocument:
        """Parse the file into a new document.

        Returns:
            Loaded FontDocument

        Raises:
            FontLoadError: If the file cannot be read
            FontFormatError: If no font definition is found in the file
        """
        document = FontDocument()
        self.load_into(document)
        return document
