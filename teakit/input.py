"""Decoding of raw terminal input into key, mouse and focus messages."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple

from teakit.keys import Key, KeyType
from teakit.messages import BlurMsg, FocusMsg
from teakit.mouse import parse_sgr_mouse_event, parse_x10_mouse_event

__all__ = [
    "InputError",
    "UnknownInputByteMsg",
    "UnknownCSISequenceMsg",
    "detect_sequence",
    "detect_bracketed_paste",
    "detect_report_focus",
    "detect_one_msg",
    "read_ansi_inputs",
    "read_inputs",
]

_READ_SIZE = 256
_ESC = 0x1B
_US = 0x1F
_DEL = 0x7F
_RUNE_ERROR = "\ufffd"

_UNKNOWN_CSI_RE = re.compile(rb"\x1b\[[\x30-\x3f]*[\x20-\x2f]*[\x40-\x7e]")
_MOUSE_SGR_RE = re.compile(rb"(\d+);(\d+);(\d+)([Mm])")

_BP_START = b"\x1b[200~"
_BP_END = b"\x1b[201~"
_X10_MOUSE_LEN = 6


class InputError(Exception):
    """Raised when reading terminal input fails."""


@dataclass(frozen=True)
class UnknownInputByteMsg:
    """An input byte that is not valid UTF-8 nor part of a known sequence."""

    value: int

    def __str__(self) -> str:
        return f"?{self.value:#x}?"


@dataclass(frozen=True)
class UnknownCSISequenceMsg:
    """A well-formed but unrecognised CSI sequence."""

    data: bytes

    def __str__(self) -> str:
        body = " ".join(str(b) for b in self.data[2:])
        return f"?CSI[{body}]?"


def _key(key_type: KeyType, alt: bool = False) -> Key:
    return Key(type=key_type, alt=alt)


K = KeyType

_SEQUENCES: dict[bytes, Key] = {
    # Arrow keys
    b"\x1b[A": _key(K.UP),
    b"\x1b[B": _key(K.DOWN),
    b"\x1b[C": _key(K.RIGHT),
    b"\x1b[D": _key(K.LEFT),
    b"\x1b[1;2A": _key(K.SHIFT_UP),
    b"\x1b[1;2B": _key(K.SHIFT_DOWN),
    b"\x1b[1;2C": _key(K.SHIFT_RIGHT),
    b"\x1b[1;2D": _key(K.SHIFT_LEFT),
    b"\x1b[OA": _key(K.SHIFT_UP),  # DECCKM
    b"\x1b[OB": _key(K.SHIFT_DOWN),
    b"\x1b[OC": _key(K.SHIFT_RIGHT),
    b"\x1b[OD": _key(K.SHIFT_LEFT),
    b"\x1b[a": _key(K.SHIFT_UP),  # urxvt
    b"\x1b[b": _key(K.SHIFT_DOWN),
    b"\x1b[c": _key(K.SHIFT_RIGHT),
    b"\x1b[d": _key(K.SHIFT_LEFT),
    b"\x1b[1;3A": _key(K.UP, True),
    b"\x1b[1;3B": _key(K.DOWN, True),
    b"\x1b[1;3C": _key(K.RIGHT, True),
    b"\x1b[1;3D": _key(K.LEFT, True),
    b"\x1b[1;4A": _key(K.SHIFT_UP, True),
    b"\x1b[1;4B": _key(K.SHIFT_DOWN, True),
    b"\x1b[1;4C": _key(K.SHIFT_RIGHT, True),
    b"\x1b[1;4D": _key(K.SHIFT_LEFT, True),
    b"\x1b[1;5A": _key(K.CTRL_UP),
    b"\x1b[1;5B": _key(K.CTRL_DOWN),
    b"\x1b[1;5C": _key(K.CTRL_RIGHT),
    b"\x1b[1;5D": _key(K.CTRL_LEFT),
    b"\x1b[Oa": _key(K.CTRL_UP, True),  # urxvt
    b"\x1b[Ob": _key(K.CTRL_DOWN, True),
    b"\x1b[Oc": _key(K.CTRL_RIGHT, True),
    b"\x1b[Od": _key(K.CTRL_LEFT, True),
    b"\x1b[1;6A": _key(K.CTRL_SHIFT_UP),
    b"\x1b[1;6B": _key(K.CTRL_SHIFT_DOWN),
    b"\x1b[1;6C": _key(K.CTRL_SHIFT_RIGHT),
    b"\x1b[1;6D": _key(K.CTRL_SHIFT_LEFT),
    b"\x1b[1;7A": _key(K.CTRL_UP, True),
    b"\x1b[1;7B": _key(K.CTRL_DOWN, True),
    b"\x1b[1;7C": _key(K.CTRL_RIGHT, True),
    b"\x1b[1;7D": _key(K.CTRL_LEFT, True),
    b"\x1b[1;8A": _key(K.CTRL_SHIFT_UP, True),
    b"\x1b[1;8B": _key(K.CTRL_SHIFT_DOWN, True),
    b"\x1b[1;8C": _key(K.CTRL_SHIFT_RIGHT, True),
    b"\x1b[1;8D": _key(K.CTRL_SHIFT_LEFT, True),
    # Miscellaneous keys
    b"\x1b[Z": _key(K.SHIFT_TAB),
    b"\x1b[2~": _key(K.INSERT),
    b"\x1b[3;2~": _key(K.INSERT, True),
    b"\x1b[3~": _key(K.DELETE),
    b"\x1b[3;3~": _key(K.DELETE, True),
    b"\x1b[5~": _key(K.PG_UP),
    b"\x1b[5;3~": _key(K.PG_UP, True),
    b"\x1b[5;5~": _key(K.CTRL_PG_UP),
    b"\x1b[5^": _key(K.CTRL_PG_UP),  # urxvt
    b"\x1b[5;7~": _key(K.CTRL_PG_UP, True),
    b"\x1b[6~": _key(K.PG_DOWN),
    b"\x1b[6;3~": _key(K.PG_DOWN, True),
    b"\x1b[6;5~": _key(K.CTRL_PG_DOWN),
    b"\x1b[6^": _key(K.CTRL_PG_DOWN),  # urxvt
    b"\x1b[6;7~": _key(K.CTRL_PG_DOWN, True),
    b"\x1b[1~": _key(K.HOME),
    b"\x1b[H": _key(K.HOME),  # xterm, lxterm
    b"\x1b[1;3H": _key(K.HOME, True),
    b"\x1b[1;5H": _key(K.CTRL_HOME),
    b"\x1b[1;7H": _key(K.CTRL_HOME, True),
    b"\x1b[1;2H": _key(K.SHIFT_HOME),
    b"\x1b[1;4H": _key(K.SHIFT_HOME, True),
    b"\x1b[1;6H": _key(K.CTRL_SHIFT_HOME),
    b"\x1b[1;8H": _key(K.CTRL_SHIFT_HOME, True),
    b"\x1b[4~": _key(K.END),
    b"\x1b[F": _key(K.END),  # xterm, lxterm
    b"\x1b[1;3F": _key(K.END, True),
    b"\x1b[1;5F": _key(K.CTRL_END),
    b"\x1b[1;7F": _key(K.CTRL_END, True),
    b"\x1b[1;2F": _key(K.SHIFT_END),
    b"\x1b[1;4F": _key(K.SHIFT_END, True),
    b"\x1b[1;6F": _key(K.CTRL_SHIFT_END),
    b"\x1b[1;8F": _key(K.CTRL_SHIFT_END, True),
    b"\x1b[7~": _key(K.HOME),  # urxvt
    b"\x1b[7^": _key(K.CTRL_HOME),
    b"\x1b[7$": _key(K.SHIFT_HOME),
    b"\x1b[7@": _key(K.CTRL_SHIFT_HOME),
    b"\x1b[8~": _key(K.END),  # urxvt
    b"\x1b[8^": _key(K.CTRL_END),
    b"\x1b[8$": _key(K.SHIFT_END),
    b"\x1b[8@": _key(K.CTRL_SHIFT_END),
    # Function keys, Linux console
    b"\x1b[[A": _key(K.F1),
    b"\x1b[[B": _key(K.F2),
    b"\x1b[[C": _key(K.F3),
    b"\x1b[[D": _key(K.F4),
    b"\x1b[[E": _key(K.F5),
    # Function keys, X11
    b"\x1bOP": _key(K.F1),
    b"\x1bOQ": _key(K.F2),
    b"\x1bOR": _key(K.F3),
    b"\x1bOS": _key(K.F4),
    b"\x1b[1;3P": _key(K.F1, True),
    b"\x1b[1;3Q": _key(K.F2, True),
    b"\x1b[1;3R": _key(K.F3, True),
    b"\x1b[1;3S": _key(K.F4, True),
    b"\x1b[11~": _key(K.F1),  # urxvt
    b"\x1b[12~": _key(K.F2),
    b"\x1b[13~": _key(K.F3),
    b"\x1b[14~": _key(K.F4),
    b"\x1b[15~": _key(K.F5),
    b"\x1b[15;3~": _key(K.F5, True),
    b"\x1b[17~": _key(K.F6),
    b"\x1b[18~": _key(K.F7),
    b"\x1b[19~": _key(K.F8),
    b"\x1b[20~": _key(K.F9),
    b"\x1b[21~": _key(K.F10),
    b"\x1b[17;3~": _key(K.F6, True),
    b"\x1b[18;3~": _key(K.F7, True),
    b"\x1b[19;3~": _key(K.F8, True),
    b"\x1b[20;3~": _key(K.F9, True),
    b"\x1b[21;3~": _key(K.F10, True),
    b"\x1b[23~": _key(K.F11),
    b"\x1b[24~": _key(K.F12),
    b"\x1b[23;3~": _key(K.F11, True),
    b"\x1b[24;3~": _key(K.F12, True),
    b"\x1b[1;2P": _key(K.F13),
    b"\x1b[1;2Q": _key(K.F14),
    b"\x1b[25~": _key(K.F13),
    b"\x1b[26~": _key(K.F14),
    b"\x1b[25;3~": _key(K.F13, True),
    b"\x1b[26;3~": _key(K.F14, True),
    b"\x1b[1;2R": _key(K.F15),
    b"\x1b[1;2S": _key(K.F16),
    b"\x1b[28~": _key(K.F15),
    b"\x1b[29~": _key(K.F16),
    b"\x1b[28;3~": _key(K.F15, True),
    b"\x1b[29;3~": _key(K.F16, True),
    b"\x1b[15;2~": _key(K.F17),
    b"\x1b[17;2~": _key(K.F18),
    b"\x1b[18;2~": _key(K.F19),
    b"\x1b[19;2~": _key(K.F20),
    b"\x1b[31~": _key(K.F17),
    b"\x1b[32~": _key(K.F18),
    b"\x1b[33~": _key(K.F19),
    b"\x1b[34~": _key(K.F20),
    # Powershell sequences.
    b"\x1bOA": _key(K.UP),
    b"\x1bOB": _key(K.DOWN),
    b"\x1bOC": _key(K.RIGHT),
    b"\x1bOD": _key(K.LEFT),
}

del K


def _control_codes() -> Iterator[int]:
    yield from range(1, _US + 1)
    yield _DEL


def _build_ext_sequences() -> dict[bytes, Key]:
    """Sequences, their escape-prefixed alt forms, control chars and space.

    NUL is absent on purpose; ``detect_one_msg`` handles it.
    """
    table: dict[bytes, Key] = {}
    for seq, key in _SEQUENCES.items():
        table[seq] = key
        if not key.alt:
            table[b"\x1b" + seq] = Key(type=key.type, runes=key.runes, alt=True)
    for code in _control_codes():
        if code == _ESC:
            continue
        table[bytes([code])] = Key(type=KeyType(code))
        table[bytes([_ESC, code])] = Key(type=KeyType(code), alt=True)
    table[b" "] = Key(type=KeyType.SPACE, runes=" ")
    table[b"\x1b "] = Key(type=KeyType.SPACE, runes=" ", alt=True)
    table[b"\x1b\x1b"] = Key(type=KeyType.ESCAPE, alt=True)
    return table


_EXT_SEQUENCES = _build_ext_sequences()
_SEQ_LENGTHS = sorted({len(seq) for seq in _EXT_SEQUENCES}, reverse=True)


def _utf8_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode_rune(data: bytes) -> Tuple[str, int]:
    """Decode the first UTF-8 character; invalid input yields U+FFFD, width 1."""
    if not data:
        return _RUNE_ERROR, 0
    size = _utf8_length(data[0])
    if size == 0 or size > len(data):
        return _RUNE_ERROR, 1
    try:
        return data[:size].decode("utf-8"), size
    except UnicodeDecodeError:
        return _RUNE_ERROR, 1


def detect_sequence(data: bytes) -> Optional[Tuple[int, object]]:
    """Longest-prefix match of a known sequence or an unknown CSI sequence.

    Returns ``(width, message)`` or ``None`` when nothing matches.
    """
    data = bytes(data)
    for size in _SEQ_LENGTHS:
        if size > len(data):
            continue
        key = _EXT_SEQUENCES.get(data[:size])
        if key is not None:
            return size, key
    match = _UNKNOWN_CSI_RE.match(data)
    if match is not None:
        end = match.end()
        return end, UnknownCSISequenceMsg(data[:end])
    return None


def detect_bracketed_paste(data: bytes) -> Optional[Tuple[int, Optional[Key]]]:
    """Detect a bracketed paste.

    Returns ``None`` when the input does not start a paste, ``(0, None)`` when
    the end marker has not arrived yet, and ``(width, key)`` otherwise.
    """
    data = bytes(data)
    if not data.startswith(_BP_START):
        return None
    rest = data[len(_BP_START):]
    idx = rest.find(_BP_END)
    if idx == -1:
        return 0, None

    paste = rest[:idx]
    runes = []
    while paste:
        rune, width = _decode_rune(paste)
        if rune != _RUNE_ERROR:
            runes.append(rune)
        paste = paste[width:]

    width = len(_BP_START) + idx + len(_BP_END)
    return width, Key(type=KeyType.RUNES, runes="".join(runes), paste=True)


def detect_report_focus(data: bytes) -> Optional[Tuple[int, object]]:
    """Detect a focus or blur report, which must make up the whole input."""
    data = bytes(data)
    if data == b"\x1b[I":
        return 3, FocusMsg()
    if data == b"\x1b[O":
        return 3, BlurMsg()
    return None


def detect_one_msg(data: bytes, can_have_more_data: bool) -> Tuple[int, object]:
    """Decode one message from the start of ``data``.

    Returns ``(width, message)``; a width of 0 means more input is needed.
    """
    data = bytes(data)
    if not data:
        raise ValueError("no input to decode")

    if len(data) >= _X10_MOUSE_LEN and data[0] == _ESC and data[1] == ord("["):
        if data[2] == ord("M"):
            return _X10_MOUSE_LEN, parse_x10_mouse_event(data)
        if data[2] == ord("<"):
            match = _MOUSE_SGR_RE.search(data, 3)
            if match is not None:
                return match.end(), parse_sgr_mouse_event(data)

    for detector in (detect_report_focus, detect_bracketed_paste, detect_sequence):
        found = detector(data)
        if found is not None:
            return found

    alt = data[0] == _ESC
    i = 1 if alt else 0

    if i < len(data) and data[i] == 0:
        return i + 1, Key(type=KeyType.NULL, alt=alt)

    runes = []
    while i < len(data):
        rune, width = _decode_rune(data[i:])
        code = ord(rune)
        if rune == _RUNE_ERROR or code <= _US or code == _DEL or rune == " ":
            # Control characters and spaces are left for the next call.
            break
        runes.append(rune)
        i += width
        if alt:
            # Only a single rune follows an escape alt modifier.
            break

    if i >= len(data) and can_have_more_data:
        return 0, None

    if runes:
        text = "".join(runes)
        key_type = KeyType.SPACE if text == " " else KeyType.RUNES
        return i, Key(type=key_type, runes=text, alt=alt)

    if alt and len(data) == 1:
        return 1, Key(type=KeyType.ESCAPE)

    return 1, UnknownInputByteMsg(data[0])


def read_ansi_inputs(stream: BinaryIO) -> Iterator[object]:
    """Read a binary stream until end of input, yielding decoded messages."""
    read = getattr(stream, "read1", None) or stream.read
    leftover = b""
    while True:
        try:
            chunk = read(_READ_SIZE)
        except OSError as exc:
            raise InputError(f"error reading input: {exc}") from exc
        if not chunk:
            return

        data = leftover + bytes(chunk)
        leftover = b""
        # A full read may have cut the last message short.
        can_have_more_data = len(chunk) == _READ_SIZE

        i = 0
        while i < len(data):
            width, msg = detect_one_msg(data[i:], can_have_more_data)
            if width == 0:
                leftover = data[i:]
                break
            yield msg
            i += width


def read_inputs(stream: BinaryIO) -> Iterator[object]:
    """Read terminal input from ``stream``, yielding decoded messages."""
    return read_ansi_inputs(stream)