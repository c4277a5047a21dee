"""Building blocks for terminal user interfaces: key, mouse and focus input decoding, control messages and logging to a file."""

__version__ = "0.1.0"

__all__ = [
    "input",
    "keys",
    "logfile",
    "messages",
    "mouse",
]