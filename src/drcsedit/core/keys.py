"""Logical key events understood by the editor."""

from enum import Enum


class Key(str, Enum):
    """A decoded key press, modifiers included."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ALT_UP = "alt+up"
    ALT_DOWN = "alt+down"
    ALT_LEFT = "alt+left"
    ALT_RIGHT = "alt+right"
    SPACE = "space"
    HOME = "home"
    END = "end"
    PGUP = "pgup"
    PGDN = "pgdn"
    CTRL_PGUP = "ctrl+pgup"
    CTRL_PGDN = "ctrl+pgdn"
    DEL = "del"
    SHIFT_DEL = "shift+del"
    CTRL_INS = "ctrl+ins"
    SHIFT_INS = "shift+ins"
    CTRL_A = "ctrl+a"
    CTRL_C = "ctrl+c"
    CTRL_V = "ctrl+v"
    CTRL_X = "ctrl+x"
    CTRL_Z = "ctrl+z"
