"""The logger: formats messages and sends them to streams and callbacks."""

from __future__ import annotations

import inspect
import sys
import threading
from datetime import datetime
from typing import Callable, List, Optional, TextIO

from .options import LoggerOptions, get_global_options
from .severity import LoggerSeverity

LogCallback = Callable[[str], None]

_thread_state = threading.local()
_write_lock = threading.Lock()


def current_thread_name() -> str:
    """Return the logger name bound to the calling thread, or "" if unset."""
    return getattr(_thread_state, "name", "")


def _format_timestamp(moment: datetime) -> str:
    # Seconds carry seven fractional digits (100 ns ticks).
    return f"{moment:%Y-%m-%d %H:%M:%S}.{moment.microsecond * 10:07d}"


class Logger:
    """Writes formatted, coloured log lines to registered streams.

    The first logger created in a thread names that thread; later loggers
    in the same thread keep the existing name.
    """

    def __init__(
        self,
        thread_name: str = "Main",
        options: Optional[LoggerOptions] = None,
    ) -> None:
        if not current_thread_name():
            _thread_state.name = thread_name

        opts = options if options is not None else get_global_options()
        self.severity_threshold = LoggerSeverity.TRACE
        self._streams: List[TextIO] = []
        self._callbacks: List[LogCallback] = []
        self._time_provider = opts.time_provider

        if opts.output_console:
            self.register_output_stream(sys.stdout)

        if opts.output_file:
            if opts.file_stream is not None:
                self.register_output_stream(opts.file_stream)
            else:
                warning = self._format(
                    LoggerSeverity.WARNING,
                    f"The file {opts.file_name} can't be open.",
                )
                sys.stdout.write(warning + "\n")
                sys.stdout.flush()

    def _format(self, severity: LoggerSeverity, message: str) -> str:
        return "| [{}] [{}] [{}] {} |".format(
            severity.label(),
            _format_timestamp(self._time_provider()),
            current_thread_name(),
            message,
        )

    def log(self, severity: LoggerSeverity, message: str) -> None:
        """Record a message if its severity reaches the threshold."""
        if severity < self.severity_threshold:
            return

        with _write_lock:
            formatted = self._format(severity, message)
            line = f"{severity.color()}{formatted}{LoggerSeverity.NONE.color()}\n"
            for stream in self._streams:
                stream.write(line)
                stream.flush()
            for callback in self._callbacks:
                callback(formatted)

    def register_output_stream(self, stream: TextIO) -> None:
        """Add a text stream that receives every coloured log line."""
        self._streams.append(stream)

    def register_log_callback(self, callback: LogCallback) -> None:
        """Add a callable that receives each formatted line without colours."""
        self._callbacks.append(callback)

    def caller(self) -> None:
        """Log at debug level the name of the function that called this."""
        frame = inspect.currentframe()
        try:
            outer = frame.f_back if frame is not None else None
            if outer is None:
                name = "<unknown>"
            else:
                code = outer.f_code
                name = getattr(code, "co_qualname", code.co_name)
        finally:
            del frame
        self.log(LoggerSeverity.DEBUG, f"{name} is called")

    def trace(self, message: str) -> None:
        self.log(LoggerSeverity.TRACE, message)

    def debug(self, message: str) -> None:
        self.log(LoggerSeverity.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LoggerSeverity.INFO, message)

    def warning(self, message: str) -> None:
        self.log(LoggerSeverity.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LoggerSeverity.ERROR, message)

    def critical(self, message: str) -> None:
        self.log(LoggerSeverity.CRITICAL, message)