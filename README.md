# doclogger

A small logger for applications that want coloured log lines on the console,
a log file per run, and callbacks that receive each formatted message. Each
line carries the severity, a timestamp and the name of the thread that wrote
it:

```
| [INFO] [2024-05-01 12:30:00.0000000] [Main] Server started |
```

The timestamp is `YYYY-mm-dd HH:MM:SS` followed by seven fractional digits.

## Installation

```
pip install doclogger
```

## Configuring

`doclogger.options.OptionsBuilder` builds a `LoggerOptions`. It starts from
these defaults: console output on, file output on, log directory `rLogs`,
and `default_time_provider()` (the current local time) as the clock. When
no file name is given, one is taken from the clock in the form
`YYYY-mm-dd_HH-MM-SS`.

```python
from doclogger.options import OptionsBuilder, set_global_options

options = (
    OptionsBuilder()
    .output_console(True)
    .output_file(True)
    .file_name("server")
    .log_dir("rLogs")
    .build()
)
set_global_options(options)
```

`LoggerOptions` can also be created directly with the same settings as
keyword arguments (`output_console`, `output_file`, `file_name`,
`time_provider`, `log_dir`). Its settings are read through properties of
the same names, plus `file_path` and `file_stream`.

With file output on, the log is opened for writing at
`<log_dir>/<file_name>.log` when the options are built. The directory is
created if it is missing. If a file with that name already exists, it is
first renamed to `<file_name>-previous.log`, replacing any older one.

`LoggerOptions` owns the open log file. Call `close()` when you are done, or
use it as a context manager:

```python
with OptionsBuilder().file_name("job").build() as options:
    ...
```

`set_global_options()` installs the options that loggers use when none are
passed to them; it accepts a `LoggerOptions` or `None` (to clear) and raises
`TypeError` for anything else. `get_global_options()` returns them, and
raises `RuntimeError` if none have been set.

## Logging

```python
from doclogger.logger import Logger
from doclogger.severity import LoggerSeverity

log = Logger()            # thread name defaults to "Main"
log.info("Server started")
log.warning("Disk almost full")
log.log(LoggerSeverity.ERROR, "Request failed")
```

A logger can also be given its options directly:
`Logger("Main", options=options)`. Without them it uses the global options.

With console output on, lines go to standard output. With file output on,
they also go to the options' log file; if that file has been closed, the
logger instead prints a warning line to standard output when it is created.

Messages below `log.severity_threshold` (by default `LoggerSeverity.TRACE`)
are dropped:

```python
log.severity_threshold = LoggerSeverity.WARNING
```

Each thread has its own name. The first `Logger` created in a thread sets
the name; later loggers in the same thread keep it. `current_thread_name()`
returns the name for the calling thread, or `""` if none is set.

```python
import threading

def worker():
    Logger("Worker").debug("Working")

threading.Thread(target=worker).start()
```

Writes from all loggers are serialised by one lock, so lines from different
threads are not interleaved.

`caller()` writes a debug line `"<function> is called"` naming the function
that called it (its qualified name on Python 3.11 and later).

## Severities

`LoggerSeverity` is an `IntEnum` running from lowest to highest: `TRACE` (0),
`DEBUG` (1), `INFO` (2), `WARNING` (3), `ERROR` (4), `CRITICAL` (5). `NONE`
(6) only marks the colour reset. `label()` returns the text shown in a line
(`NONE` has none and raises `ValueError`); `color()` returns the ANSI escape
sequence: purple, blue, green, yellow, red, and white on red, with `NONE`
being the reset code.

## Extra outputs

Any text stream can be added as a further output. Lines written to streams
are wrapped in the severity's ANSI colour and followed by a newline:

```python
import io

buffer = io.StringIO()
log.register_output_stream(buffer)
```

A callback receives each formatted message without colour codes or newline:

```python
messages = []
log.register_log_callback(messages.append)
```

## Viewing a log

To print a log file to the terminal, so that its colours are shown:

```
doclogger-view rLogs/server.log
```

Without an argument it prints a usage message and exits with status 1; if the
file cannot be opened it prints `Can't open : <file>` and exits with status 1.
When run from an interactive terminal it waits for Enter before exiting.