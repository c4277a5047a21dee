"""Mouse events and the parsers for X10 and SGR mouse reports."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import IntEnum


class MouseAction(IntEnum):
    """The action that happened in a mouse event."""

    PRESS = 0
    RELEASE = 1
    MOTION = 2


class MouseButton(IntEnum):
    """The button involved in a mouse event, after X11 button codes."""

    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5
    WHEEL_LEFT = 6
    WHEEL_RIGHT = 7
    BACKWARD = 8
    FORWARD = 9
    BUTTON_10 = 10
    BUTTON_11 = 11


class MouseEventType(IntEnum):
    """Legacy mouse event kind; prefer action and button."""

    UNKNOWN = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 3
    RELEASE = 4
    WHEEL_UP = 5
    WHEEL_DOWN = 6
    WHEEL_LEFT = 7
    WHEEL_RIGHT = 8
    BACKWARD = 9
    FORWARD = 10
    MOTION = 11


_ACTION_NAMES = {
    MouseAction.PRESS: "press",
    MouseAction.RELEASE: "release",
    MouseAction.MOTION: "motion",
}

_BUTTON_NAMES = {
    MouseButton.NONE: "none",
    MouseButton.LEFT: "left",
    MouseButton.MIDDLE: "middle",
    MouseButton.RIGHT: "right",
    MouseButton.WHEEL_UP: "wheel up",
    MouseButton.WHEEL_DOWN: "wheel down",
    MouseButton.WHEEL_LEFT: "wheel left",
    MouseButton.WHEEL_RIGHT: "wheel right",
    MouseButton.BACKWARD: "backward",
    MouseButton.FORWARD: "forward",
    MouseButton.BUTTON_10: "button 10",
    MouseButton.BUTTON_11: "button 11",
}

_WHEEL_BUTTONS = frozenset(
    {
        MouseButton.WHEEL_UP,
        MouseButton.WHEEL_DOWN,
        MouseButton.WHEEL_LEFT,
        MouseButton.WHEEL_RIGHT,
    }
)

_MOUSE_SGR_RE = re.compile(rb"(\d+);(\d+);(\d+)([Mm])")
_X10_BYTE_OFFSET = 32

_BIT_SHIFT = 0b0000_0100
_BIT_ALT = 0b0000_1000
_BIT_CTRL = 0b0001_0000
_BIT_MOTION = 0b0010_0000
_BIT_WHEEL = 0b0100_0000
_BIT_ADD = 0b1000_0000
_BITS_MASK = 0b0000_0011


@dataclass(frozen=True)
class MouseEvent:
    """A mouse click, wheel movement, cursor movement or a combination."""

    x: int = 0
    y: int = 0
    shift: bool = False
    alt: bool = False
    ctrl: bool = False
    action: MouseAction = MouseAction.PRESS
    button: MouseButton = MouseButton.NONE
    type: MouseEventType = MouseEventType.UNKNOWN

    def is_wheel(self) -> bool:
        """Whether this is a wheel event."""
        return self.button in _WHEEL_BUTTONS

    def __str__(self) -> str:
        parts = []
        if self.ctrl:
            parts.append("ctrl+")
        if self.alt:
            parts.append("alt+")
        if self.shift:
            parts.append("shift+")

        if self.button == MouseButton.NONE:
            if self.action in (MouseAction.MOTION, MouseAction.RELEASE):
                parts.append(_ACTION_NAMES[self.action])
            else:
                parts.append("unknown")
        elif self.is_wheel():
            parts.append(_BUTTON_NAMES[self.button])
        else:
            parts.append(_BUTTON_NAMES.get(self.button, ""))
            action = _ACTION_NAMES.get(self.action, "")
            if action:
                parts.append(" " + action)
        return "".join(parts)


def _legacy_type(button: MouseButton, action: MouseAction) -> MouseEventType:
    if action == MouseAction.PRESS:
        pressed = {
            MouseButton.LEFT: MouseEventType.LEFT,
            MouseButton.MIDDLE: MouseEventType.MIDDLE,
            MouseButton.RIGHT: MouseEventType.RIGHT,
            MouseButton.WHEEL_UP: MouseEventType.WHEEL_UP,
            MouseButton.WHEEL_DOWN: MouseEventType.WHEEL_DOWN,
            MouseButton.WHEEL_LEFT: MouseEventType.WHEEL_LEFT,
            MouseButton.WHEEL_RIGHT: MouseEventType.WHEEL_RIGHT,
            MouseButton.BACKWARD: MouseEventType.BACKWARD,
            MouseButton.FORWARD: MouseEventType.FORWARD,
        }
        return pressed.get(button, MouseEventType.UNKNOWN)
    if button == MouseButton.NONE and action == MouseAction.RELEASE:
        return MouseEventType.RELEASE
    if action == MouseAction.MOTION:
        moving = {
            MouseButton.LEFT: MouseEventType.LEFT,
            MouseButton.MIDDLE: MouseEventType.MIDDLE,
            MouseButton.RIGHT: MouseEventType.RIGHT,
            MouseButton.BACKWARD: MouseEventType.BACKWARD,
            MouseButton.FORWARD: MouseEventType.FORWARD,
        }
        return moving.get(button, MouseEventType.MOTION)
    return MouseEventType.UNKNOWN


def parse_mouse_button(b: int, is_sgr: bool) -> MouseEvent:
    """Decode a mouse button code into an event at position (0, 0)."""
    e = b if is_sgr else b - _X10_BYTE_OFFSET
    low = e & _BITS_MASK
    action = MouseAction.PRESS

    if e & _BIT_ADD:
        button = MouseButton(MouseButton.BACKWARD + low)
    elif e & _BIT_WHEEL:
        button = MouseButton(MouseButton.WHEEL_UP + low)
    else:
        button = MouseButton(MouseButton.LEFT + low)
        # X10 reports a button release as 0b11.
        if low == _BITS_MASK:
            action = MouseAction.RELEASE
            button = MouseButton.NONE

    if e & _BIT_MOTION and button not in _WHEEL_BUTTONS:
        action = MouseAction.MOTION

    return MouseEvent(
        alt=bool(e & _BIT_ALT),
        ctrl=bool(e & _BIT_CTRL),
        shift=bool(e & _BIT_SHIFT),
        action=action,
        button=button,
        type=_legacy_type(button, action),
    )


def parse_sgr_mouse_event(buf: bytes) -> MouseEvent:
    """Parse an SGR mouse report: ESC [ < Cb ; Cx ; Cy (M or m)."""
    match = _MOUSE_SGR_RE.search(bytes(buf[3:]))
    if match is None:
        raise ValueError(f"invalid SGR mouse event: {bytes(buf)!r}")

    event = parse_mouse_button(int(match.group(1)), True)
    release = match.group(4) == b"m"

    # Wheel buttons have no release; some terminals report motion as release.
    if event.action != MouseAction.MOTION and not event.is_wheel() and release:
        event = replace(event, action=MouseAction.RELEASE, type=MouseEventType.RELEASE)

    # (1,1) is the upper left; normalise to (0,0).
    return replace(event, x=int(match.group(2)) - 1, y=int(match.group(3)) - 1)


def parse_x10_mouse_event(buf: bytes) -> MouseEvent:
    """Parse an X10 mouse report: ESC [ M Cb Cx Cy."""
    if len(buf) < 6:
        raise ValueError(f"X10 mouse event too short: {bytes(buf)!r}")
    code, cx, cy = buf[3], buf[4], buf[5]
    event = parse_mouse_button(code, False)
    return replace(
        event,
        x=cx - _X10_BYTE_OFFSET - 1,
        y=cy - _X10_BYTE_OFFSET - 1,
    )