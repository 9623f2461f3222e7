"""drcsedit - Edit DEC soft fonts stored as font-definition sequences.

drcsedit loads, edits and saves Dynamically Redefinable Character Sets
(DRCS). A soft font is a DECDLD control sequence: a parameter list, a
character set identifier and one sixel-encoded bitmap per glyph.

Example:
    $ drcsedit info myfont.fnt

This prints the detected cell size, character set and glyph usage.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
