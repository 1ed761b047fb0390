from __future__ import annotations

import enum
import logging


class InvalidLevelError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"not a valid log level: {name!r}")
        self.name = name


class Level(enum.IntEnum):
    """Log severity, from most to least urgent.

    Values are the `logging` module's own numeric levels so they can be
    handed to a `logging.Logger` unchanged. PANIC sits above CRITICAL and is
    registered with `logging.addLevelName` on import.
    """

    PANIC = 60
    FATAL = logging.FATAL
    ERROR = logging.ERROR
    WARN = logging.WARN
    INFO = logging.INFO
    DEBUG = logging.DEBUG

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Level.PANIC: "panic",
    Level.FATAL: "fatal",
    Level.ERROR: "error",
    Level.WARN: "warning",
    Level.INFO: "info",
    Level.DEBUG: "debug",
}

_ALIASES = {
    "warn": Level.WARN,
    "critical": Level.FATAL,
}

_BY_VALUE = {level.value: level for level in Level}

logging.addLevelName(Level.PANIC, "PANIC")


def parse_level(name: str) -> Level:
    """Return the Level for a name such as 'info', 'WARNING' or 'critical'."""
    key = name.strip().lower()
    for level, display in _DISPLAY_NAMES.items():
        if key == display:
            return level
    if key in _ALIASES:
        return _ALIASES[key]
    candidate: object = logging.getLevelName(key.upper())
    if isinstance(candidate, int) and candidate in _BY_VALUE:
        return _BY_VALUE[candidate]
    raise InvalidLevelError(name)


def display_name(levelno: int) -> str:
    if levelno in _BY_VALUE:
        return str(_BY_VALUE[levelno])
    return logging.getLevelName(levelno).lower()
