"""Console logger whose normal output can be silenced when stdout carries image data."""

from __future__ import annotations

import sys
import threading
from typing import Any, TextIO

RED_COLOR = "\033[31m"
RESET_COLOR = "\033[0m"


def _sprint(args: tuple[Any, ...]) -> str:
    """Join operands, adding a space only between two operands that are not strings."""
    parts: list[str] = []
    previous_is_str = True
    for position, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if position and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(str(arg))
        previous_is_str = is_str
    return "".join(parts)


class Logger:
    """Writes informational lines to stdout and errors in red to stderr."""

    def __init__(
        self,
        quiet: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._out = out
        self._err = err
        self.quiet = quiet

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def set_quiet(self, quiet: bool) -> None:
        """Suppress or re-enable informational output."""
        with self._lock:
            self.quiet = quiet

    def info(self, *args: Any) -> None:
        """Print the arguments, space separated, unless quiet."""
        with self._lock:
            if not self.quiet:
                print(*args, file=self.out)

    def error(self, *args: Any) -> None:
        """Print a red error message to stderr, even when quiet."""
        with self._lock:
            print(f"{RED_COLOR}{_sprint(args)}{RESET_COLOR}", file=self.err)

    def fatal(self, *args: Any) -> None:
        """Print a red error message and exit with status 1."""
        self.error(*args)
        raise SystemExit(1)


_default = Logger()


def set_quiet(quiet: bool) -> None:
    """Set the quiet state of the shared logger."""
    _default.set_quiet(quiet)


def is_quiet() -> bool:
    """Return whether the shared logger is quiet."""
    return _default.quiet


def info(*args: Any) -> None:
    """Log through the shared logger to stdout."""
    _default.info(*args)


def error(*args: Any) -> None:
    """Log an error through the shared logger to stderr."""
    _default.error(*args)


def fatal(*args: Any) -> None:
    """Log an error through the shared logger and exit with status 1."""
    _default.fatal(*args)