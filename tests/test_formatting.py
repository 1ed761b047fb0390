import logging

import pytest

from srclog.formatting import LogfmtFormatter, format_value, sprint, sprintln


@pytest.mark.parametrize(
    "args, expected",
    [
        (("starting", "worker", 1), "startingworker1"),
        ((1, 2, "x", 3), "1 2x3"),
        ((1, 2.5, True), "1 2.5 True"),
        (("only",), "only"),
        ((), ""),
    ],
)
def test_sprint(args, expected):
    assert sprint(args) == expected


def test_sprintln():
    assert sprintln(("starting", "worker", 1)) == "starting worker 1"
    assert sprintln(()) == ""


@pytest.mark.parametrize(
    "value, expected",
    [
        ("abc", "abc"),
        ("pkg.mod.func", "pkg.mod.func"),
        (42, "42"),
        ("two words", '"two words"'),
        ("app.py:12", '"app.py:12"'),
        ("", '""'),
        ('say "hi"', '"say \\"hi\\""'),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def _record(msg: str, level: int = logging.INFO, **fields) -> logging.LogRecord:
    record = logging.LogRecord("srclog.test", level, __file__, 1, msg, (), None)
    record.created = 0
    record.msecs = 0
    record.fields = fields
    return record


def test_logfmt_formatter_sorts_fields():
    line = LogfmtFormatter().format(_record("hi", b=1, a="x y"))
    assert line == 'time=1970-01-01T00:00:00.000Z level=info msg="hi" a="x y" b=1'


def test_logfmt_formatter_without_fields():
    line = LogfmtFormatter().format(_record("line\nbreak", level=60))
    assert line == 'time=1970-01-01T00:00:00.000Z level=panic msg="line\\nbreak"'


def test_logfmt_formatter_unknown_level_name():
    line = LogfmtFormatter().format(_record("odd", level=25))
    assert "level=level 25" in line
