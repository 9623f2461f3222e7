"""Sixel glyph codec.

A glyph body is a sequence of sixel rows separated by ``/``. Each sixel
character in the range ``?`` to ``~`` encodes six vertically stacked
pixels, least significant bit at the top. Everything else in a glyph
body (whitespace, line breaks) is formatting and carries no pixels.

Pixel buffers are flat row-major lists of 0/1 values with
``cell_width * cell_height`` entries.
"""

SIXEL_ZERO = "?"
SIXEL_MAX = "~"
ROW_SEPARATOR = "/"
SIXEL_BITS = 6

_WHITESPACE = " \t\n\v\f\r"

PixelBuffer = list[int]


def is_sixel_char(ch: str) -> bool:
    """Return True if ``ch`` carries sixel data (blank or not)."""
    return SIXEL_ZERO <= ch <= SIXEL_MAX


def is_non_blank_sixel_char(ch: str) -> bool:
    """Return True if ``ch`` has at least one pixel set."""
    return SIXEL_ZERO < ch <= SIXEL_MAX


def decode(raw: str, cell_width: int, cell_height: int) -> PixelBuffer:
    """Unpack a glyph body into a pixel buffer.

    Pixels beyond the cell are dropped and pixels missing from the body
    are left clear.

    Args:
        raw: Glyph body text
        cell_width: Cell width in pixels
        cell_height: Cell height in pixels

    Returns:
        Row-major pixel buffer of ``cell_width * cell_height`` entries
    """
    pixels = [0] * (cell_width * cell_height)
    for row, sixel_row in enumerate(raw.split(ROW_SEPARATOR)):
        y = row * SIXEL_BITS
        if y >= cell_height:
            break
        x = 0
        for ch in sixel_row:
            if not is_sixel_char(ch):
                continue
            if x >= cell_width:
                break
            value = ord(ch) - ord(SIXEL_ZERO)
            for i in range(min(SIXEL_BITS, cell_height - y)):
                pixels[(y + i) * cell_width + x] = (value >> i) & 1
            x += 1
    return pixels


def encode(
    pixels: PixelBuffer,
    cell_width: int,
    cell_height: int,
    existing_raw: str = "",
) -> str:
    """Pack a pixel buffer into a glyph body.

    Whitespace surrounding the sixel data in ``existing_raw`` is kept
    around the new body so hand-formatted files keep their layout.

    Args:
        pixels: Row-major pixel buffer
        cell_width: Cell width in pixels
        cell_height: Cell height in pixels
        existing_raw: Current glyph body whose formatting is preserved

    Returns:
        New glyph body text
    """
    prefix, suffix = _surrounding_whitespace(existing_raw)
    rows = []
    for y in range(0, cell_height, SIXEL_BITS):
        row = []
        for x in range(cell_width):
            value = 0
            for i in range(min(SIXEL_BITS, cell_height - y)):
                if pixels[(y + i) * cell_width + x]:
                    value |= 1 << i
            row.append(chr(ord(SIXEL_ZERO) + value))
        rows.append("".join(row))
    return prefix + ROW_SEPARATOR.join(rows) + suffix


def _surrounding_whitespace(raw: str) -> tuple[str, str]:
    """Split off the leading and trailing whitespace of a glyph body."""
    stripped = raw.lstrip(_WHITESPACE)
    prefix = raw[: len(raw) - len(stripped)]
    if not stripped:
        return prefix, ""
    body = stripped.rstrip(_WHITESPACE)
    return prefix, stripped[len(body):]


def used_width(raw: str) -> int:
    """Return the widest row of a glyph body, in sixel columns."""
    return max(
        sum(1 for ch in sixel_row if is_sixel_char(ch))
        for sixel_row in raw.split(ROW_SEPARATOR)
    )


def used_height(raw: str) -> int:
    """Return the height covered by a glyph body's sixel rows, in pixels."""
    return SIXEL_BITS * len(raw.split(ROW_SEPARATOR))


def is_used(raw: str) -> bool:
    """Return True if any pixel is set in a glyph body."""
    return any(is_non_blank_sixel_char(ch) for ch in raw)
