from __future__ import annotations

import os
import weakref
from dataclasses import dataclass
from pathlib import Path

from srclog.default import base
from srclog.levels import parse_level
from srclog.logger import Logger

# Log files opened by configure_from_env; only these are closed when replaced.
_opened_streams: weakref.WeakSet = weakref.WeakSet()


@dataclass(frozen=True)
class LoggingContract:
    env_prefix: str

    @property
    def env_log_level(self) -> str:
        return f"{self.env_prefix}_LOG_LEVEL"

    @property
    def env_log_file(self) -> str:
        return f"{self.env_prefix}_LOG_FILE"


def configure_from_env(env_prefix: str, logger: Logger | None = None) -> Logger:
    """Apply `<PREFIX>_LOG_LEVEL` and `<PREFIX>_LOG_FILE` to a logger's engine.

    Unset or empty variables leave the engine as it is. An unknown level
    name raises `InvalidLevelError`, and a log file that cannot be opened
    raises `OSError`; either way the engine is left untouched. Returns the
    configured logger, which is the base logger unless one is given.
    """
    contract = LoggingContract(env_prefix=env_prefix)
    target = logger if logger is not None else base()

    level_name = (os.getenv(contract.env_log_level) or "").strip()
    level = parse_level(level_name) if level_name else None

    stream = None
    log_file = (os.getenv(contract.env_log_file) or "").strip()
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        stream = path.open("a", encoding="utf-8")

    if level is not None:
        target.set_level(level)
    if stream is not None:
        _opened_streams.add(stream)
        previous = target.set_out(stream)
        if previous is not None and previous in _opened_streams:
            previous.close()

    return target
