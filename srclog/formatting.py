from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Iterable

from srclog.levels import display_name

_BARE_VALUE = re.compile(r"[A-Za-z0-9\-._/@^+]+")


def sprint(args: Iterable[Any]) -> str:
    """Concatenate args, adding a space between operands only when neither is a str."""
    parts: list[str] = []
    previous_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index > 0 and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(str(arg))
        previous_is_str = is_str
    return "".join(parts)


def sprintln(args: Iterable[Any]) -> str:
    """Join args with single spaces, print-style. No trailing newline."""
    return " ".join(str(arg) for arg in args)


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def format_value(value: Any) -> str:
    text = value if isinstance(value, str) else str(value)
    if _BARE_VALUE.fullmatch(text):
        return text
    return _quote(text)


class LogfmtFormatter(logging.Formatter):
    """Render a record as `time=... level=... msg="..." key=value ...`.

    Fields come from `record.fields` and are written sorted by key.
    """

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{int(record.msecs):03d}Z"

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        parts = [
            f"time={self.formatTime(record, self.datefmt)}",
            f"level={display_name(record.levelno)}",
            f"msg={_quote(record.getMessage())}",
        ]
        fields: dict[str, Any] = getattr(record, "fields", None) or {}
        for key in sorted(fields):
            parts.append(f"{key}={format_value(fields[key])}")
        if record.exc_info:
            parts.append(f"exc_info={_quote(self.formatException(record.exc_info))}")
        return " ".join(parts)
