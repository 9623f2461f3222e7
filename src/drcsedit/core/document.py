"""Font document model.

FontDocument owns every glyph of a soft font together with the
parameters, charset identifier and framing of the font-definition
sequence. It parses and serializes the complete byte stream and keeps
everything it does not interpret (text around the sequence, whitespace
inside it) so an unedited document is written back byte for byte.
"""

from collections.abc import Sequence

import structlog

from drcsedit.config.settings import DEFAULT_CHARSET_ID, DEFAULT_PARAMETERS
from drcsedit.core import scanner
from drcsedit.core.dimensions import CellDimensions, detect_dimensions
from drcsedit.domain import Glyph, ParameterSet, PixelBuffer

logger = structlog.get_logger(__name__)

# Bytes outside the sequence are arbitrary, so they are carried as latin-1 text
_ENCODING = "latin-1"


class FontDocument:
    """A soft font: parameters, charset identity and glyphs.

    Glyph indices are character positions within the character set:
    ``0..95`` for a 96-character set, ``1..94`` for a 94-character set.
    The stored glyphs cover ``[first_index, first_index + glyph_count)``;
    reading outside that range gives a blank cell and writing outside it
    grows the range.

    Example:
        document = FontDocument()
        document.parse(Path("font.fnt").read_bytes())
        pixels = document.get_pixels(33)
        pixels[0] = 1
        document.set_pixels(33, pixels)
        Path("font.fnt").write_bytes(document.serialize())
    """

    def __init__(self) -> None:
        self._prefix = b""
        self._suffix = b""
        self._introducer = scanner.INTRODUCER_7BIT
        self._terminator = scanner.TERMINATOR_7BIT
        self._charset_id = DEFAULT_CHARSET_ID
        self._glyph_prefix = ""
        self._glyph_suffix = ""
        self._params = ParameterSet.from_values(DEFAULT_PARAMETERS)
        self._glyphs: list[Glyph] = []
        self._size = 94
        self._first_index = 1
        self._dimensions = CellDimensions(10, 16, 125)
        self.clear()

    def clear(
        self,
        params: Sequence[int | None] | None = None,
        charset_id: str | None = None,
    ) -> None:
        """Reset to an empty font.

        Args:
            params: Leading parameter values (defaults to a 10x16 full-cell font)
            charset_id: Dscs identifier (defaults to ``" @"``)
        """
        self.c1_controls = False
        self._prefix = b""
        self._suffix = b""
        self._charset_id = DEFAULT_CHARSET_ID if charset_id is None else charset_id
        self._glyph_prefix = ""
        self._glyph_suffix = ""
        self._params = ParameterSet.from_values(DEFAULT_PARAMETERS if params is None else params)
        self._glyphs = []
        self._update_layout()

    def parse(self, data: bytes) -> bool:
        """Load a font from the contents of a font file.

        Args:
            data: Whole file contents

        Returns:
            True if a font-definition sequence was found. On False the
            document is left untouched.
        """
        envelope = scanner.scan(data)
        if envelope is None:
            logger.debug("No font definition found", size=len(data))
            return False

        self._prefix = envelope.prefix
        self._suffix = envelope.suffix
        self._introducer = envelope.introducer
        self._terminator = envelope.terminator
        self._params = ParameterSet.parse(envelope.params.decode(_ENCODING))
        self._charset_id = envelope.charset_id.decode(_ENCODING)
        self._glyph_prefix = envelope.glyph_prefix.decode(_ENCODING)
        self._glyph_suffix = envelope.glyph_suffix.decode(_ENCODING)
        bodies = envelope.glyph_bodies if envelope.body else []
        self._glyphs = [Glyph(body.decode(_ENCODING)) for body in bodies]
        self._update_layout()
        logger.debug(
            "Font definition parsed",
            glyphs=len(self._glyphs),
            parameters=self._params.text,
            charset=self._charset_id,
            cell_width=self.cell_width,
            cell_height=self.cell_height,
            aspect=self.pixel_aspect_ratio,
        )
        return True

    def serialize(self) -> bytes:
        """Produce the complete font file contents."""
        text = "".join(
            (
                self._params.text,
                "{",
                self._charset_id,
                self._glyph_prefix,
                ";".join(glyph.sixels for glyph in self._glyphs),
                self._glyph_suffix,
            )
        )
        return b"".join(
            (
                self._prefix,
                self._introducer,
                text.encode(_ENCODING),
                self._terminator,
                self._suffix,
            )
        )

    def _update_layout(self) -> None:
        self._size = 96 if self._params.pcss == 1 else 94
        if self._params.pcn is not None:
            self._first_index = self._params.pcn
        else:
            self._first_index = 0 if self._size == 96 else 1
        self._dimensions = detect_dimensions(self._params, self._glyphs)

    @property
    def params(self) -> ParameterSet:
        """The font's parameter set."""
        return self._params

    @property
    def charset_id(self) -> str:
        """Dscs character set identifier."""
        return self._charset_id

    @charset_id.setter
    def charset_id(self, value: str) -> None:
        self._charset_id = value

    @property
    def c1_controls(self) -> bool | None:
        """True for 8-bit, False for 7-bit framing, None if neither."""
        if self._introducer == scanner.INTRODUCER_8BIT:
            return True
        if self._introducer == scanner.INTRODUCER_7BIT:
            return False
        return None

    @c1_controls.setter
    def c1_controls(self, c1_8bit: bool) -> None:
        if c1_8bit:
            self._introducer = scanner.INTRODUCER_8BIT
            self._terminator = scanner.TERMINATOR_8BIT
        else:
            self._introducer = scanner.INTRODUCER_7BIT
            self._terminator = scanner.TERMINATOR_7BIT

    @property
    def size(self) -> int:
        """Character set size, 94 or 96."""
        return self._size

    @property
    def min_index(self) -> int:
        """Lowest valid glyph index."""
        return 0 if self._size == 96 else 1

    @property
    def max_index(self) -> int:
        """Highest valid glyph index."""
        return 95 if self._size == 96 else 94

    @property
    def first_index(self) -> int:
        """Index of the first stored glyph."""
        return self._first_index

    @property
    def glyph_count(self) -> int:
        """Number of stored glyphs."""
        return len(self._glyphs)

    @property
    def glyphs(self) -> tuple[Glyph, ...]:
        """Stored glyphs, starting at ``first_index``."""
        return tuple(self._glyphs)

    @property
    def dimensions(self) -> CellDimensions:
        """Detected cell size and pixel aspect ratio."""
        return self._dimensions

    @property
    def cell_width(self) -> int:
        return self._dimensions.width

    @property
    def cell_height(self) -> int:
        return self._dimensions.height

    @property
    def pixel_aspect_ratio(self) -> int:
        return self._dimensions.aspect

    def _glyph_at(self, index: int) -> Glyph | None:
        internal_index = index - self._first_index
        if 0 <= internal_index < len(self._glyphs):
            return self._glyphs[internal_index]
        return None

    def is_used(self, index: int) -> bool:
        """Check whether the glyph at ``index`` has any pixel set."""
        glyph = self._glyph_at(index)
        return glyph is not None and glyph.used

    def used_count(self) -> int:
        """Number of stored glyphs with at least one pixel set."""
        return sum(1 for glyph in self._glyphs if glyph.used)

    def get_pixels(self, index: int) -> PixelBuffer:
        """Decode a glyph at the current cell size.

        Args:
            index: Glyph index

        Returns:
            Row-major pixel buffer; all zero for glyphs that are not stored
        """
        glyph = self._glyph_at(index)
        if glyph is None:
            return [0] * (self.cell_width * self.cell_height)
        return glyph.pixels(self.cell_width, self.cell_height)

    def set_pixels(self, index: int, pixels: PixelBuffer) -> None:
        """Encode pixels into the glyph at ``index``.

        Blank glyphs are added as needed so that ``index`` is stored.
        Growing below ``first_index`` also moves the Pcn parameter.

        Args:
            index: Glyph index
            pixels: Row-major pixel buffer at the current cell size
        """
        while index < self._first_index:
            self._glyphs.insert(0, Glyph(""))
            self._first_index -= 1
            self._params.pcn = self._first_index
        internal_index = index - self._first_index
        while internal_index >= len(self._glyphs):
            self._glyphs.append(Glyph(""))
        self._glyphs[internal_index].set_pixels(self.cell_width, self.cell_height, pixels)
