"""Key types, their names, and the key-press message."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class KeyType(IntEnum):
    """The kind of key pressed: a control key, a special key, or runes."""

    # Control keys; the values are the C0 control codes.
    CTRL_AT = 0
    CTRL_A = 1
    CTRL_B = 2
    CTRL_C = 3
    CTRL_D = 4
    CTRL_E = 5
    CTRL_F = 6
    CTRL_G = 7
    CTRL_H = 8
    TAB = 9
    CTRL_J = 10
    CTRL_K = 11
    CTRL_L = 12
    ENTER = 13
    CTRL_N = 14
    CTRL_O = 15
    CTRL_P = 16
    CTRL_Q = 17
    CTRL_R = 18
    CTRL_S = 19
    CTRL_T = 20
    CTRL_U = 21
    CTRL_V = 22
    CTRL_W = 23
    CTRL_X = 24
    CTRL_Y = 25
    CTRL_Z = 26
    ESC = 27
    CTRL_BACKSLASH = 28
    CTRL_CLOSE_BRACKET = 29
    CTRL_CARET = 30
    CTRL_UNDERSCORE = 31
    BACKSPACE = 127

    # Aliases for control keys.
    NULL = 0
    BREAK = 3
    ESCAPE = 27
    CTRL_I = 9
    CTRL_M = 13
    CTRL_OPEN_BRACKET = 27
    CTRL_QUESTION_MARK = 127

    # Other keys.
    RUNES = -1
    UP = -2
    DOWN = -3
    RIGHT = -4
    LEFT = -5
    SHIFT_TAB = -6
    HOME = -7
    END = -8
    PG_UP = -9
    PG_DOWN = -10
    CTRL_PG_UP = -11
    CTRL_PG_DOWN = -12
    DELETE = -13
    INSERT = -14
    SPACE = -15
    CTRL_UP = -16
    CTRL_DOWN = -17
    CTRL_RIGHT = -18
    CTRL_LEFT = -19
    CTRL_HOME = -20
    CTRL_END = -21
    SHIFT_UP = -22
    SHIFT_DOWN = -23
    SHIFT_RIGHT = -24
    SHIFT_LEFT = -25
    SHIFT_HOME = -26
    SHIFT_END = -27
    CTRL_SHIFT_UP = -28
    CTRL_SHIFT_DOWN = -29
    CTRL_SHIFT_LEFT = -30
    CTRL_SHIFT_RIGHT = -31
    CTRL_SHIFT_HOME = -32
    CTRL_SHIFT_END = -33
    F1 = -34
    F2 = -35
    F3 = -36
    F4 = -37
    F5 = -38
    F6 = -39
    F7 = -40
    F8 = -41
    F9 = -42
    F10 = -43
    F11 = -44
    F12 = -45
    F13 = -46
    F14 = -47
    F15 = -48
    F16 = -49
    F17 = -50
    F18 = -51
    F19 = -52
    F20 = -53

    def __str__(self) -> str:
        return key_type_name(self)

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_KEY_NAMES: dict[int, str] = {
    # Control keys.
    KeyType.CTRL_AT: "ctrl+@",
    KeyType.CTRL_A: "ctrl+a",
    KeyType.CTRL_B: "ctrl+b",
    KeyType.CTRL_C: "ctrl+c",
    KeyType.CTRL_D: "ctrl+d",
    KeyType.CTRL_E: "ctrl+e",
    KeyType.CTRL_F: "ctrl+f",
    KeyType.CTRL_G: "ctrl+g",
    KeyType.CTRL_H: "ctrl+h",
    KeyType.TAB: "tab",
    KeyType.CTRL_J: "ctrl+j",
    KeyType.CTRL_K: "ctrl+k",
    KeyType.CTRL_L: "ctrl+l",
    KeyType.ENTER: "enter",
    KeyType.CTRL_N: "ctrl+n",
    KeyType.CTRL_O: "ctrl+o",
    KeyType.CTRL_P: "ctrl+p",
    KeyType.CTRL_Q: "ctrl+q",
    KeyType.CTRL_R: "ctrl+r",
    KeyType.CTRL_S: "ctrl+s",
    KeyType.CTRL_T: "ctrl+t",
    KeyType.CTRL_U: "ctrl+u",
    KeyType.CTRL_V: "ctrl+v",
    KeyType.CTRL_W: "ctrl+w",
    KeyType.CTRL_X: "ctrl+x",
    KeyType.CTRL_Y: "ctrl+y",
    KeyType.CTRL_Z: "ctrl+z",
    KeyType.ESC: "esc",
    KeyType.CTRL_BACKSLASH: "ctrl+\\",
    KeyType.CTRL_CLOSE_BRACKET: "ctrl+]",
    KeyType.CTRL_CARET: "ctrl+^",
    KeyType.CTRL_UNDERSCORE: "ctrl+_",
    KeyType.BACKSPACE: "backspace",
    # Other keys.
    KeyType.RUNES: "runes",
    KeyType.UP: "up",
    KeyType.DOWN: "down",
    KeyType.RIGHT: "right",
    KeyType.SPACE: " ",
    KeyType.LEFT: "left",
    KeyType.SHIFT_TAB: "shift+tab",
    KeyType.HOME: "home",
    KeyType.END: "end",
    KeyType.CTRL_HOME: "ctrl+home",
    KeyType.CTRL_END: "ctrl+end",
    KeyType.SHIFT_HOME: "shift+home",
    KeyType.SHIFT_END: "shift+end",
    KeyType.CTRL_SHIFT_HOME: "ctrl+shift+home",
    KeyType.CTRL_SHIFT_END: "ctrl+shift+end",
    KeyType.PG_UP: "pgup",
    KeyType.PG_DOWN: "pgdown",
    KeyType.CTRL_PG_UP: "ctrl+pgup",
    KeyType.CTRL_PG_DOWN: "ctrl+pgdown",
    KeyType.DELETE: "delete",
    KeyType.INSERT: "insert",
    KeyType.CTRL_UP: "ctrl+up",
    KeyType.CTRL_DOWN: "ctrl+down",
    KeyType.CTRL_RIGHT: "ctrl+right",
    KeyType.CTRL_LEFT: "ctrl+left",
    KeyType.SHIFT_UP: "shift+up",
    KeyType.SHIFT_DOWN: "shift+down",
    KeyType.SHIFT_RIGHT: "shift+right",
    KeyType.SHIFT_LEFT: "shift+left",
    KeyType.CTRL_SHIFT_UP: "ctrl+shift+up",
    KeyType.CTRL_SHIFT_DOWN: "ctrl+shift+down",
    KeyType.CTRL_SHIFT_LEFT: "ctrl+shift+left",
    KeyType.CTRL_SHIFT_RIGHT: "ctrl+shift+right",
    **{getattr(KeyType, f"F{n}"): f"f{n}" for n in range(1, 21)},
}


def key_type_name(key_type: int) -> str:
    """Friendly name of a key type, or an empty string if it is unknown."""
    return _KEY_NAMES.get(int(key_type), "")


@dataclass(frozen=True)
class Key:
    """A key press.

    ``runes`` holds the typed characters for ``KeyType.RUNES`` (and the space
    for ``KeyType.SPACE``); ``paste`` marks text that arrived in a bracketed
    paste.
    """

    type: int = KeyType.CTRL_AT
    runes: str = ""
    alt: bool = False
    paste: bool = False

    def __str__(self) -> str:
        prefix = "alt+" if self.alt else ""
        if self.type == KeyType.RUNES:
            # Pastes are bracketed so they never match a key binding.
            if self.paste:
                return f"{prefix}[{self.runes}]"
            return prefix + self.runes
        name = key_type_name(self.type)
        if name:
            return prefix + name
        return ""