"""Structured logging facade with call-site attribution.

    import srclog

    srclog.set_level(srclog.Level.DEBUG)
    log = srclog.with_field("worker", 3)
    log.info("starting")   # ... msg="starting" source="jobs.py:12" source_func=jobs.run worker=3
"""

__all__ = [
    "__version__",
    "base",
    "configure_from_env",
    "debug",
    "debugln",
    "Engine",
    "Entry",
    "error",
    "errorln",
    "exit_process",
    "fatal",
    "fatalln",
    "info",
    "infoln",
    "InvalidLevelError",
    "Level",
    "LogfmtFormatter",
    "Logger",
    "new",
    "new_engine",
    "parse_level",
    "set_level",
    "set_out",
    "warn",
    "warnln",
    "with_error",
    "with_field",
    "with_fields",
]

try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("srclog")
except Exception:  # pragma: no cover
    __version__ = "0.0.0"

from srclog.config import configure_from_env  # noqa: E402  (intentional re-export)
from srclog.default import (  # noqa: E402
    base,
    debug,
    debugln,
    error,
    errorln,
    fatal,
    fatalln,
    info,
    infoln,
    new,
    set_level,
    set_out,
    warn,
    warnln,
    with_error,
    with_field,
    with_fields,
)
from srclog.formatting import LogfmtFormatter  # noqa: E402
from srclog.levels import InvalidLevelError, Level, parse_level  # noqa: E402
from srclog.logger import Engine, Entry, Logger, exit_process, new_engine  # noqa: E402
