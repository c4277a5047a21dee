"""Sending log output to a file while the terminal is in use."""

from __future__ import annotations

import logging
import os
from typing import TextIO

__all__ = ["log_to_file", "log_to_file_with"]


class _PrefixedFileHandler(logging.StreamHandler):
    """Writes records to a log file; stays silent once the file is closed."""

    def emit(self, record: logging.LogRecord) -> None:
        if self.stream.closed:
            return
        super().emit(record)


def log_to_file(path: str | os.PathLike, prefix: str) -> TextIO:
    """Send the root logger's output to ``path``, creating it if needed.

    The caller is responsible for closing the returned file.
    """
    return log_to_file_with(path, prefix, logging.getLogger())


def log_to_file_with(
    path: str | os.PathLike, prefix: str, logger: logging.Logger
) -> TextIO:
    """Send ``logger``'s output to ``path`` with every line starting with ``prefix``.

    A space is added after a non-empty prefix that does not already end in
    whitespace. A file set up earlier by this function on the same logger is
    replaced. The caller is responsible for closing the returned file.
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o600)
    except OSError as exc:
        raise OSError(
            exc.errno, f"error opening file for logging: {exc.strerror}", str(path)
        ) from exc
    stream = os.fdopen(fd, "a", encoding="utf-8")

    if prefix and not prefix[-1].isspace():
        prefix += " "

    for old in [h for h in logger.handlers if isinstance(h, _PrefixedFileHandler)]:
        logger.removeHandler(old)

    handler = _PrefixedFileHandler(stream)
    handler.setFormatter(logging.Formatter(prefix.replace("%", "%%") + "%(message)s"))
    logger.addHandler(handler)
    return stream