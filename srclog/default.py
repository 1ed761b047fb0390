"""Process-wide base logger and the package-level functions bound to it.

Every function here forwards to one shared `Logger` built at import time.
Level and output changes made through any of them are visible process-wide.
"""

from __future__ import annotations

from typing import Any, TextIO

from srclog.formatting import sprint, sprintln
from srclog.levels import Level
from srclog.logger import CALLER_STACKLEVEL, Engine, Logger, exit_engine, new_engine

engine: Engine = new_engine()
_base = Logger(engine)


def base() -> Logger:
    return _base


def new() -> Logger:
    """Return a fresh logger with no fields, sharing the base engine."""
    return Logger(engine)


def set_level(level: Level | int) -> None:
    _base.set_level(level)


def set_out(out: TextIO) -> TextIO | None:
    return _base.set_out(out)


def with_field(key: str, value: Any) -> Logger:
    return _base.with_field(key, value)


def with_fields(**fields: Any) -> Logger:
    return _base.with_fields(**fields)


def with_error(err: BaseException) -> Logger:
    return _base.with_error(err)


# The functions below call `_base._sourced()` directly rather than the
# matching method so the caller stays exactly two frames above it.


def debug(*args: Any) -> None:
    _base._sourced().log(Level.DEBUG, sprint(args), stacklevel=CALLER_STACKLEVEL)


def debugln(*args: Any) -> None:
    _base._sourced().log(Level.DEBUG, sprintln(args), stacklevel=CALLER_STACKLEVEL)


def info(*args: Any) -> None:
    _base._sourced().log(Level.INFO, sprint(args), stacklevel=CALLER_STACKLEVEL)


def infoln(*args: Any) -> None:
    _base._sourced().log(Level.INFO, sprintln(args), stacklevel=CALLER_STACKLEVEL)


def warn(*args: Any) -> None:
    _base._sourced().log(Level.WARN, sprint(args), stacklevel=CALLER_STACKLEVEL)


def warnln(*args: Any) -> None:
    _base._sourced().log(Level.WARN, sprintln(args), stacklevel=CALLER_STACKLEVEL)


def error(*args: Any) -> None:
    _base._sourced().log(Level.ERROR, sprint(args), stacklevel=CALLER_STACKLEVEL)


def errorln(*args: Any) -> None:
    _base._sourced().log(Level.ERROR, sprintln(args), stacklevel=CALLER_STACKLEVEL)


def fatal(*args: Any) -> None:
    """Log at FATAL on the base logger, then exit with status 1."""
    _base._sourced().log(Level.FATAL, sprint(args), stacklevel=CALLER_STACKLEVEL)
    exit_engine(engine, 1)


def fatalln(*args: Any) -> None:
    """Log at FATAL on the base logger, then exit with status 1."""
    _base._sourced().log(Level.FATAL, sprintln(args), stacklevel=CALLER_STACKLEVEL)
    exit_engine(engine, 1)
