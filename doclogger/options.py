"""Logger configuration and its builder."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Optional, TextIO, Union

TimeProvider = Callable[[], datetime]

DEFAULT_LOG_DIR = "rLogs"


def default_time_provider() -> datetime:
    """Return the current time in the local time zone."""
    return datetime.now().astimezone()


class LoggerOptions:
    """Settings shared by loggers: outputs, log file and clock.

    When file output is enabled the log file is opened at construction;
    an existing file of the same name is first renamed with a
    ``-previous`` suffix.
    """

    def __init__(
        self,
        output_console: bool = True,
        output_file: bool = True,
        file_name: str = "",
        time_provider: Optional[TimeProvider] = None,
        log_dir: Union[str, Path] = DEFAULT_LOG_DIR,
    ) -> None:
        self._output_console = output_console
        self._output_file = output_file
        self._file_name = file_name
        self._time_provider = time_provider or default_time_provider
        self._log_dir = Path(log_dir)
        self._file_stream: Optional[TextIO] = None

        if output_file:
            if not self._file_name:
                now = self._time_provider().replace(microsecond=0)
                self._file_name = now.strftime("%Y-%m-%d_%H-%M-%S")

            self._log_dir.mkdir(parents=True, exist_ok=True)
            path = self.file_path
            if path.exists():
                path.replace(self._log_dir / f"{self._file_name}-previous.log")
            self._file_stream = open(path, "w", encoding="utf-8")

    @property
    def output_console(self) -> bool:
        return self._output_console

    @property
    def output_file(self) -> bool:
        return self._output_file

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def log_dir(self) -> Path:
        return self._log_dir

    @property
    def file_path(self) -> Path:
        """Path of the log file these options write to."""
        return self._log_dir / f"{self._file_name}.log"

    @property
    def file_stream(self) -> Optional[TextIO]:
        """The open log file, or None when file output is off or closed."""
        return self._file_stream

    @property
    def time_provider(self) -> TimeProvider:
        return self._time_provider

    def close(self) -> None:
        """Close the log file if one is open."""
        if self._file_stream is not None:
            self._file_stream.close()
            self._file_stream = None

    def __enter__(self) -> "LoggerOptions":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class OptionsBuilder:
    """Fluent builder for LoggerOptions with sensible defaults."""

    def __init__(self) -> None:
        self._output_console = True
        self._output_file = True
        self._file_name = ""
        self._time_provider: TimeProvider = default_time_provider
        self._log_dir: Union[str, Path] = DEFAULT_LOG_DIR

    def output_console(self, enabled: bool) -> "OptionsBuilder":
        self._output_console = enabled
        return self

    def output_file(self, enabled: bool) -> "OptionsBuilder":
        self._output_file = enabled
        return self

    def file_name(self, name: str) -> "OptionsBuilder":
        self._file_name = name
        return self

    def time_provider(self, provider: TimeProvider) -> "OptionsBuilder":
        self._time_provider = provider
        return self

    def log_dir(self, path: Union[str, Path]) -> "OptionsBuilder":
        self._log_dir = path
        return self

    def build(self) -> LoggerOptions:
        """Create LoggerOptions from the current settings."""
        return LoggerOptions(
            self._output_console,
            self._output_file,
            self._file_name,
            self._time_provider,
            self._log_dir,
        )


_registry: Dict[str, Optional[LoggerOptions]] = {"options": None}


def set_global_options(options: Optional[LoggerOptions]) -> None:
    """Install the options used by loggers created without explicit options.

    Passing None clears the installed options.
    """
    if options is not None and not isinstance(options, LoggerOptions):
        raise TypeError(
            f"expected LoggerOptions or None, got {type(options).__name__}"
        )
    _registry["options"] = options


def get_global_options() -> LoggerOptions:
    """Return the installed options; raise RuntimeError if none are set."""
    options = _registry["options"]
    if options is None:
        raise RuntimeError("logger options have not been set")
    return options