import io

import pytest

from .core.exceptions import PushbackError
from .streams.line_source import PushbackLineSource, strip_line_terminator


def test_push_back_round_trips():
    source = PushbackLineSource(["first", "second"])
    line = source.pull_line()
    source.push_back(line)
    assert source.pull_line() == "first"
    assert source.pull_line() == "second"


def test_pushed_line_need_not_come_from_the_source():
    source = PushbackLineSource(["a"])
    source.push_back("x")
    assert source.has_pushback
    assert source.pull_line() == "x"
    assert not source.has_pushback
    assert source.pull_line() == "a"


def test_second_push_back_is_rejected():
    source = PushbackLineSource([])
    source.push_back("one")
    with pytest.raises(PushbackError) as exc_info:
        source.push_back("two")
    assert exc_info.value.error_code == "PUSHBACK_OCCUPIED"
    assert source.pull_line() == "one"


def test_exhausted_source_keeps_returning_none():
    source = PushbackLineSource(["only"])
    assert source.pull_line() == "only"
    assert source.pull_line() is None
    assert source.pull_line() is None


def test_push_back_after_end_of_stream():
    source = PushbackLineSource([])
    assert source.pull_line() is None
    source.push_back("late")
    assert source.pull_line() == "late"
    assert source.pull_line() is None


def test_file_lines_lose_their_terminators():
    stream = io.StringIO("A.java:1: x\r\n    ^\nlast")
    assert list(PushbackLineSource(stream)) == ["A.java:1: x", "    ^", "last"]


def test_from_text():
    assert list(PushbackLineSource.from_text("a\n\tb\n")) == ["a", "\tb"]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("text\n", "text"),
        ("text\r\n", "text"),
        ("text\r", "text"),
        ("  text  ", "  text  "),
        ("\n", ""),
    ],
)
def test_strip_line_terminator(line, expected):
    assert strip_line_terminator(line) == expected


def test_from_text_splits_on_line_terminators_only():
    source = PushbackLineSource.from_text("a\x0cb\r\nc\rd e\n")
    assert list(source) == ["a\x0cb", "c", "d e"]
