"""Print a log file to the console."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence


def _pause() -> None:
    if sys.stdin is not None and sys.stdin.isatty():
        try:
            input("Press Enter to continue . . .")
        except EOFError:
            pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every line of the file named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "doclogger-viewer"
        sys.stderr.write(f"Usage: {prog} <file>\n")
        return 1

    path = args[0]
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                sys.stdout.write(line.rstrip("\n") + "\n")
    except OSError:
        sys.stderr.write(f"Can't open : {path}\n")
        return 1
    sys.stdout.flush()

    _pause()
    return 0


if __name__ == "__main__":
    sys.exit(main())