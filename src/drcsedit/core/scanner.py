"""Font-definition envelope scanner.

Locates the first DECDLD sequence in a byte stream and splits it into
its parts without losing a single byte:

    [prefix][introducer][params]{[charset id][ws][glyphs][ws][terminator][suffix]

Three introducer forms are recognised: 7-bit ``ESC P``, 8-bit ``DCS``
(0x90) and ``R"(``, the opening of a C++ raw string literal that wraps
the sequence in source code. Any of the matching terminators ``ESC``
(optionally followed by ``\\``), ``ST`` (0x9C) or ``)";`` ends any of
them.
"""

from dataclasses import dataclass

INTRODUCER_7BIT = b"\x1bP"
INTRODUCER_8BIT = b"\x90"
INTRODUCER_SOURCE = b'R"('
TERMINATOR_7BIT = b"\x1b\\"
TERMINATOR_8BIT = b"\x9c"
TERMINATOR_SOURCE = b')";'

INTRODUCERS: tuple[bytes, ...] = (INTRODUCER_7BIT, INTRODUCER_8BIT, INTRODUCER_SOURCE)

_ESC = 0x1B
_WHITESPACE = frozenset(b" \t\n\v\f\r")
_DIGITS = frozenset(b"0123456789")
_OPEN_BRACE = ord("{")


@dataclass(frozen=True)
class Envelope:
    """The parts of a font-definition sequence, as raw bytes.

    Concatenating the fields in declaration order (with ``{`` after
    ``params`` and ``glyph_bodies`` joined by ``;``) reproduces the
    scanned input exactly.
    """

    prefix: bytes
    introducer: bytes
    params: bytes
    charset_id: bytes
    glyph_prefix: bytes
    body: bytes
    glyph_suffix: bytes
    terminator: bytes
    suffix: bytes

    @property
    def glyph_bodies(self) -> list[bytes]:
        """The body split into individual glyphs."""
        return self.body.split(b";")


def _is_param_byte(byte: int) -> bool:
    return byte in _DIGITS or byte in _WHITESPACE or byte == ord(";")


def _is_intermediate(byte: int) -> bool:
    return byte in _WHITESPACE or 0x21 <= byte <= 0x2F


def _is_final(byte: int) -> bool:
    return 0x30 <= byte <= 0x7E


def _is_body_byte(byte: int) -> bool:
    return byte in _WHITESPACE or byte in b"/;" or 0x3F <= byte <= 0x7E


def _match_terminator(data: bytes, pos: int) -> bytes | None:
    if data.startswith(TERMINATOR_SOURCE, pos):
        return TERMINATOR_SOURCE
    if data.startswith(TERMINATOR_8BIT, pos):
        return TERMINATOR_8BIT
    if pos < len(data) and data[pos] == _ESC:
        return TERMINATOR_7BIT if data.startswith(TERMINATOR_7BIT, pos) else data[pos : pos + 1]
    return None


def _match_at(data: bytes, start: int, introducer: bytes) -> Envelope | None:
    """Try to read a complete envelope whose introducer begins at ``start``."""
    pos = start + len(introducer)
    end = len(data)

    params_start = pos
    while pos < end and _is_param_byte(data[pos]):
        pos += 1
    params = data[params_start:pos]
    if pos >= end or data[pos] != _OPEN_BRACE:
        return None
    pos += 1

    id_start = pos
    while pos < end and _is_intermediate(data[pos]):
        pos += 1
    if pos >= end or not _is_final(data[pos]):
        return None
    pos += 1
    charset_id = data[id_start:pos]

    run_start = pos
    while pos < end and _is_body_byte(data[pos]):
        pos += 1
    run = data[run_start:pos]
    terminator = _match_terminator(data, pos)
    if terminator is None:
        return None

    glyph_prefix, body, glyph_suffix = _split_whitespace(run)
    return Envelope(
        prefix=data[:start],
        introducer=introducer,
        params=params,
        charset_id=charset_id,
        glyph_prefix=glyph_prefix,
        body=body,
        glyph_suffix=glyph_suffix,
        terminator=terminator,
        suffix=data[pos + len(terminator):],
    )


def _split_whitespace(run: bytes) -> tuple[bytes, bytes, bytes]:
    """Split leading and trailing whitespace off a glyph run.

    The body always keeps at least one byte of a non-empty run, so a
    run made only of whitespace leaves its last byte as the body.
    """
    if not run:
        return b"", b"", b""
    lead = 0
    while lead < len(run) and run[lead] in _WHITESPACE:
        lead += 1
    if lead == len(run):
        return run[:-1], run[-1:], b""
    tail = len(run)
    while run[tail - 1] in _WHITESPACE:
        tail -= 1
    return run[:lead], run[lead:tail], run[tail:]


def scan(data: bytes) -> Envelope | None:
    """Find the first well-formed font-definition sequence in ``data``.

    Candidate introducers are tried in order of position; the first one
    that leads to a complete sequence wins.

    Args:
        data: Whole file contents

    Returns:
        The envelope parts, or None if no sequence was found
    """
    for start in range(len(data)):
        for introducer in INTRODUCERS:
            if data.startswith(introducer, start):
                envelope = _match_at(data, start, introducer)
                if envelope is not None:
                    return envelope
    return None
