# teakit

Building blocks for terminal user interfaces: decode what the keyboard and
mouse send to a terminal, describe the control messages an interface passes
around, and send logging to a file while the terminal is busy.

The package has no dependencies beyond the standard library.

## Installation

```
pip install teakit
```

## What is inside

- `teakit.keys`: `Key` and `KeyType`. `str(key)` gives names such as
  `"enter"`, `"ctrl+c"` or `"alt+up"`; typed characters come back as
  themselves, and pasted text is wrapped in brackets (`"[pasted text]"`) so it
  never matches a key binding. `key_type_name` gives the name of a `KeyType`,
  or `""` for an unknown one.
- `teakit.mouse`: `MouseEvent`, `MouseButton`, `MouseAction` and the legacy
  `MouseEventType`, with parsers for X10 and SGR mouse reports
  (`parse_x10_mouse_event`, `parse_sgr_mouse_event`) and the button-code
  decoder `parse_mouse_button`. Coordinates are normalised so the upper left
  cell is `(0, 0)`.
- `teakit.input`: turns raw terminal bytes into messages.
  - `detect_one_msg(data, can_have_more_data)` decodes one event from the start
    of a buffer and returns `(width, message)`; a width of 0 means more input
    is needed.
  - `detect_sequence`, `detect_bracketed_paste` and `detect_report_focus` are
    the individual detectors it uses.
  - `read_ansi_inputs(stream)` (and `read_inputs`, which uses it) reads a binary
    stream to its end and yields key, mouse, paste and focus messages. A failed
    read raises `InputError`.
  - Bytes that are not valid UTF-8 come back as `UnknownInputByteMsg`;
    well-formed but unrecognised CSI sequences as `UnknownCSISequenceMsg`.
- `teakit.messages`: `FocusMsg`, `BlurMsg`, `WindowSizeMsg`, and control
  messages with the commands that produce them: `clear_screen()`,
  `enter_alt_screen()`, `exit_alt_screen()`, `enable_mouse_cell_motion()`,
  `enable_mouse_all_motion()`, `disable_mouse()`, `hide_cursor()`,
  `show_cursor()`, `enable_bracketed_paste()`, `disable_bracketed_paste()`,
  `enable_report_focus()` and `disable_report_focus()`.
- `teakit.logfile`: `log_to_file(path, prefix)` sends the root logger's output
  to a file, and `log_to_file_with(path, prefix, logger)` does the same for a
  given logger. A space is added after a prefix that does not already end in
  whitespace.

## Decoding input

```python
import io
from teakit.input import read_ansi_inputs

for msg in read_ansi_inputs(io.BytesIO(b"a\x1b[A\r")):
    print(str(msg))
# a
# up
# enter
```

## Mouse reports

```python
from teakit.mouse import parse_sgr_mouse_event

event = parse_sgr_mouse_event(b"\x1b[<0;33;17M")
print(event.x, event.y, str(event))
# 32 16 left press
```

## Logging while the interface runs

```python
import logging
from teakit.logfile import log_to_file

with log_to_file("debug.log", "debug"):
    logging.warning("something happened")
# debug.log now holds: "debug something happened"
```

The returned file is an ordinary file object; close it (or use it in a `with`
block) when you are done.

## What the package does not do

teakit decodes input and defines messages, but it does not draw anything and
does not run an interface. There is no renderer that paints frames to the
terminal, no program loop that feeds messages to a model, no program options,
and no way to hand the terminal over to another program such as an editor.
Nothing here switches the terminal into raw mode either: bring your own
terminal handling and output, and use teakit to make sense of what comes in.

## Running the tests

```
pip install -e ".[test]"
pytest
```