"""Terminal messages and the commands that produce them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FocusMsg:
    """Sent when the terminal gains focus."""


@dataclass(frozen=True)
class BlurMsg:
    """Sent when the terminal loses focus."""


@dataclass(frozen=True)
class WindowSizeMsg:
    """Reports the terminal size, initially and after every resize."""

    width: int
    height: int


@dataclass(frozen=True)
class ClearScreenMsg:
    """Asks the program to clear the screen before the next update."""


@dataclass(frozen=True)
class EnterAltScreenMsg:
    """Asks the program to enter the alternate screen buffer."""


@dataclass(frozen=True)
class ExitAltScreenMsg:
    """Asks the program to leave the alternate screen buffer."""


@dataclass(frozen=True)
class EnableMouseCellMotionMsg:
    """Asks the program to listen for cell-motion mouse events."""


@dataclass(frozen=True)
class EnableMouseAllMotionMsg:
    """Asks the program to listen for all-motion mouse events."""


@dataclass(frozen=True)
class DisableMouseMsg:
    """Asks the program to stop listening for mouse events."""


@dataclass(frozen=True)
class HideCursorMsg:
    """Asks the program to hide the cursor."""


@dataclass(frozen=True)
class ShowCursorMsg:
    """Asks the program to show the cursor."""


@dataclass(frozen=True)
class EnableBracketedPasteMsg:
    """Asks the program to accept bracketed paste input."""


@dataclass(frozen=True)
class DisableBracketedPasteMsg:
    """Asks the program to stop accepting bracketed paste input."""


@dataclass(frozen=True)
class EnableReportFocusMsg:
    """Asks the program to report focus events."""


@dataclass(frozen=True)
class DisableReportFocusMsg:
    """Asks the program to stop reporting focus events."""


def clear_screen() -> ClearScreenMsg:
    """Command that clears the screen before the next update."""
    return ClearScreenMsg()


def enter_alt_screen() -> EnterAltScreenMsg:
    """Command that enters the alternate screen buffer."""
    return EnterAltScreenMsg()


def exit_alt_screen() -> ExitAltScreenMsg:
    """Command that exits the alternate screen buffer."""
    return ExitAltScreenMsg()


def enable_mouse_cell_motion() -> EnableMouseCellMotionMsg:
    """Command that enables click, release, wheel and drag mouse events."""
    return EnableMouseCellMotionMsg()


def enable_mouse_all_motion() -> EnableMouseAllMotionMsg:
    """Command that enables all mouse events, including hover motion."""
    return EnableMouseAllMotionMsg()


def disable_mouse() -> DisableMouseMsg:
    """Command that stops listening for mouse events."""
    return DisableMouseMsg()


def hide_cursor() -> HideCursorMsg:
    """Command that hides the cursor."""
    return HideCursorMsg()


def show_cursor() -> ShowCursorMsg:
    """Command that shows the cursor."""
    return ShowCursorMsg()


def enable_bracketed_paste() -> EnableBracketedPasteMsg:
    """Command that enables bracketed paste."""
    return EnableBracketedPasteMsg()


def disable_bracketed_paste() -> DisableBracketedPasteMsg:
    """Command that disables bracketed paste."""
    return DisableBracketedPasteMsg()


def enable_report_focus() -> EnableReportFocusMsg:
    """Command that enables focus reporting."""
    return EnableReportFocusMsg()


def disable_report_focus() -> DisableReportFocusMsg:
    """Command that disables focus reporting."""
    return DisableReportFocusMsg()