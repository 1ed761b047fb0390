from __future__ import annotations

import io
import logging

import pytest

import srclog
from srclog import Level, Logger, new_engine


class RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def engine(sink):
    return new_engine(out=sink, level=Level.DEBUG, name="srclog.test")


@pytest.fixture()
def logger(engine) -> Logger:
    return Logger(engine)


@pytest.fixture()
def recorder(engine) -> RecordingHandler:
    handler = RecordingHandler()
    engine.addHandler(handler)
    return handler


@pytest.fixture()
def base_engine():
    """Point the process-wide engine at a buffer, restoring level and stream after."""
    engine = srclog.default.engine
    handler = engine.handlers[0]
    buffer = io.StringIO()
    previous_level = engine.level
    previous_stream = handler.setStream(buffer)
    recorder = RecordingHandler()
    engine.addHandler(recorder)

    try:
        yield buffer, recorder
    finally:
        engine.removeHandler(recorder)
        if previous_stream is not None:
            handler.setStream(previous_stream)
        engine.setLevel(previous_level)
