from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Any, Callable, MutableMapping, TextIO

from srclog.formatting import LogfmtFormatter, sprint, sprintln
from srclog.levels import Level

ERROR_KEY = "error"
SOURCE_KEY = "source"
SOURCE_FUNC_KEY = "source_func"

_UNKNOWN_FILE = "<???>"
_UNKNOWN_LINE = 1
_UNKNOWN_FUNC = "(unknown)"

# Passed to the engine so LogRecord.pathname/lineno/funcName name the caller
# of the public logging call, matching the `source` fields.
CALLER_STACKLEVEL = 2


def exit_process(code: int) -> None:
    """Terminate the process: `sys.exit` on the main thread, `os._exit` elsewhere.

    `sys.exit` in any other thread only ends that thread.
    """
    if threading.current_thread() is threading.main_thread():
        sys.exit(code)
    os._exit(code)


class Engine(logging.Logger):
    """A `logging.Logger` that lives outside the global logger manager.

    The threshold is read on every call; there is no enabled-for cache.
    `exit_func` is what the fatal calls use to end the process; replace it on
    an engine to intercept exits.
    """

    def __init__(self, name: str, level: int = logging.NOTSET) -> None:
        super().__init__(name, level)
        self.exit_func: Callable[[int], Any] = exit_process

    def isEnabledFor(self, level: int) -> bool:
        if self.disabled or self.manager.disable >= level:
            return False
        return level >= self.getEffectiveLevel()

    def exit(self, code: int) -> None:
        for handler in self.handlers:
            handler.flush()
        self.exit_func(code)


def exit_engine(engine: logging.Logger, code: int) -> None:
    if isinstance(engine, Engine):
        engine.exit(code)
        return
    for handler in engine.handlers:
        handler.flush()
    exit_process(code)


def new_engine(
    out: TextIO | None = None,
    level: Level | int = Level.INFO,
    name: str = "srclog",
) -> Engine:
    """Build a standalone engine with one stream handler.

    The engine is not registered with `logging.getLogger`, so it shares no
    state with the root logger or any other engine.
    """
    engine = Engine(name)
    engine.propagate = False
    engine.setLevel(level)

    handler = logging.StreamHandler(out if out is not None else sys.stderr)
    handler.setLevel(logging.NOTSET)
    handler.setFormatter(LogfmtFormatter())
    engine.addHandler(handler)
    return engine


def _sink_handler(engine: logging.Logger) -> logging.StreamHandler:
    for handler in engine.handlers:
        if isinstance(handler, logging.StreamHandler):
            return handler
    raise LookupError(f"engine {engine.name!r} has no stream handler")


class Entry(logging.LoggerAdapter):
    """An engine bound to a fixed set of fields.

    Fields ride on each record as `record.fields`.
    """

    def __init__(self, engine: logging.Logger, fields: dict[str, Any] | None = None) -> None:
        super().__init__(engine, dict(fields or {}))

    def with_field(self, key: str, value: Any) -> Entry:
        fields = dict(self.extra)
        fields[key] = value
        return Entry(self.logger, fields)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {"fields": dict(self.extra)}
        return msg, kwargs


def caller_source(depth: int) -> tuple[str, int, str]:
    """Return (basename, lineno, qualified function name) of the frame `depth` above the caller."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return _UNKNOWN_FILE, _UNKNOWN_LINE, _UNKNOWN_FUNC
    code = frame.f_code
    module = frame.f_globals.get("__name__")
    func = f"{module}.{code.co_qualname}" if module else code.co_qualname
    return os.path.basename(code.co_filename), frame.f_lineno, func


class Logger:
    """Leveled logger with immutable field chaining and call-site fields.

    Level and sink live on the engine and are shared by every Logger built
    on it; fields are per instance. No locking is added here: concurrent use
    is as safe as the engine's handlers make it.
    """

    __slots__ = ("_entry",)

    def __init__(self, engine: logging.Logger | Entry) -> None:
        self._entry = engine if isinstance(engine, Entry) else Entry(engine)

    @property
    def engine(self) -> logging.Logger:
        return self._entry.logger

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._entry.extra)

    @property
    def level(self) -> Level | int:
        value = self.engine.level
        try:
            return Level(value)
        except ValueError:
            return value

    def set_level(self, level: Level | int) -> None:
        self.engine.setLevel(level)

    def set_out(self, out: TextIO) -> TextIO | None:
        """Swap the engine's sink. Returns the previous stream, or None if unchanged."""
        return _sink_handler(self.engine).setStream(out)

    def with_field(self, key: str, value: Any) -> Logger:
        return Logger(self._entry.with_field(key, value))

    def with_fields(self, **fields: Any) -> Logger:
        entry = self._entry
        for key, value in fields.items():
            entry = entry.with_field(key, value)
        return Logger(entry)

    def with_error(self, err: BaseException) -> Logger:
        return Logger(self._entry.with_field(ERROR_KEY, str(err)))

    def debug(self, *args: Any) -> None:
        self._sourced().log(Level.DEBUG, sprint(args), stacklevel=CALLER_STACKLEVEL)

    def debugln(self, *args: Any) -> None:
        self._sourced().log(Level.DEBUG, sprintln(args), stacklevel=CALLER_STACKLEVEL)

    def info(self, *args: Any) -> None:
        self._sourced().log(Level.INFO, sprint(args), stacklevel=CALLER_STACKLEVEL)

    def infoln(self, *args: Any) -> None:
        self._sourced().log(Level.INFO, sprintln(args), stacklevel=CALLER_STACKLEVEL)

    def warn(self, *args: Any) -> None:
        self._sourced().log(Level.WARN, sprint(args), stacklevel=CALLER_STACKLEVEL)

    def warnln(self, *args: Any) -> None:
        self._sourced().log(Level.WARN, sprintln(args), stacklevel=CALLER_STACKLEVEL)

    def error(self, *args: Any) -> None:
        self._sourced().log(Level.ERROR, sprint(args), stacklevel=CALLER_STACKLEVEL)

    def errorln(self, *args: Any) -> None:
        self._sourced().log(Level.ERROR, sprintln(args), stacklevel=CALLER_STACKLEVEL)

    def fatal(self, *args: Any) -> None:
        """Log at FATAL, then exit the process with status 1.

        Exits even when the FATAL record itself is filtered out. Never call
        this on a path where termination is unwanted.
        """
        self._sourced().log(Level.FATAL, sprint(args), stacklevel=CALLER_STACKLEVEL)
        exit_engine(self.engine, 1)

    def fatalln(self, *args: Any) -> None:
        """Like `fatal`, joining args print-style."""
        self._sourced().log(Level.FATAL, sprintln(args), stacklevel=CALLER_STACKLEVEL)
        exit_engine(self.engine, 1)

    def _sourced(self) -> Entry:
        # Two frames up: this helper, then the public logging call.
        file, line, func = caller_source(2)
        return self._entry.with_field(SOURCE_KEY, f"{file}:{line}").with_field(SOURCE_FUNC_KEY, func)

    def __repr__(self) -> str:
        return f"<Logger engine={self.engine.name!r} fields={self.fields!r}>"
