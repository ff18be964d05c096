"""Severity levels used by the logger."""

from __future__ import annotations

from enum import IntEnum

_RESET = "\033[0m"

_LABELS = {
    0: "TRACE",
    1: "DEBUG",
    2: "INFO",
    3: "WARNING",
    4: "ERROR",
    5: "CRITICAL",
}

_COLORS = {
    0: "\033[35m",  # purple
    1: "\033[34m",  # blue
    2: "\033[32m",  # green
    3: "\033[33m",  # yellow
    4: "\033[31m",  # red
    5: "\033[97;41m",  # white on red
    6: _RESET,
}


class LoggerSeverity(IntEnum):
    """Ordered severity levels; ``NONE`` sits above every real level."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6

    def label(self) -> str:
        """Return the text shown for this level in a log line.

        Raises ValueError for ``NONE``, which has no label.
        """
        try:
            return _LABELS[int(self)]
        except KeyError:
            raise ValueError(f"severity {self.name} has no label") from None

    def color(self) -> str:
        """Return the ANSI escape sequence used to colour this level."""
        return _COLORS[int(self)]