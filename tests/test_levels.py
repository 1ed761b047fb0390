import logging

import pytest

from srclog import InvalidLevelError, Level, parse_level


def test_six_levels_in_urgency_order():
    assert [level.name for level in sorted(Level, reverse=True)] == [
        "PANIC",
        "FATAL",
        "ERROR",
        "WARN",
        "INFO",
        "DEBUG",
    ]


def test_values_pass_through_to_logging():
    assert Level.FATAL == logging.CRITICAL
    assert Level.ERROR == logging.ERROR
    assert Level.WARN == logging.WARNING
    assert Level.INFO == logging.INFO
    assert Level.DEBUG == logging.DEBUG
    assert logging.getLevelName(int(Level.PANIC)) == "PANIC"


def test_display_names():
    assert [str(level) for level in Level] == ["panic", "fatal", "error", "warning", "info", "debug"]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("info", Level.INFO),
        ("INFO", Level.INFO),
        (" Debug ", Level.DEBUG),
        ("warning", Level.WARN),
        ("warn", Level.WARN),
        ("critical", Level.FATAL),
        ("fatal", Level.FATAL),
        ("panic", Level.PANIC),
        ("error", Level.ERROR),
    ],
)
def test_parse_level(name, expected):
    assert parse_level(name) is expected


@pytest.mark.parametrize("name", ["", "verbose", "notset", "trace"])
def test_parse_level_rejects_unknown_names(name):
    with pytest.raises(InvalidLevelError) as exc:
        parse_level(name)
    assert exc.value.name == name
    assert isinstance(exc.value, ValueError)
