"""Thread-aware logger with coloured console output, log files, callbacks and a log viewer."""

__version__ = "0.1.0"
__all__ = ["severity", "options", "logger", "viewer"]