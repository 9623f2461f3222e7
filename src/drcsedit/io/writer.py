"""Font writer for saving soft font files.

This module provides the FontWriter class for writing a FontDocument
back to disk.
"""

from pathlib import Path

from drcsedit.core.document import FontDocument
from drcsedit.exceptions import FontSaveError

DEFAULT_FILENAME = "Untitled.fnt"


class FontWriter:
    """Writes a FontDocument to a file.

    No validation is done; the document is written exactly as it
    serializes.

    Example:
        writer = FontWriter(document, Path("font.fnt"))
        writer.save()
    """

    def __init__(self, document: FontDocument, output_path: Path) -> None:
        """Initialize the font writer.

        Args:
            document: The document to write
            output_path: Path where the font will be saved
        """
        self._document = document
        self._output_path = output_path

    def save(self) -> int:
        """Save the document to the output path.

        Returns:
            Number of bytes written

        Raises:
            FontSaveError: If the file cannot be written
        """
        contents = self._document.serialize()
        try:
            self._output_path.write_bytes(contents)
        except OSError as e:
            raise FontSaveError(str(self._output_path), str(e)) from e
        return len(contents)

    @staticmethod
    def get_converted_path(input_path: Path, tag: str) -> Path:
        """Generate an output path with a tag before the extension.

        Converts: font.fnt -> font-8bit.fnt

        Args:
            input_path: Original font file path
            tag: Tag to append to the file stem

        Returns:
            Path with ``-{tag}`` suffix before the extension
        """
        return input_path.parent / f"{input_path.stem}-{tag}{input_path.suffix}"
