import pytest

from oracompat.dbms_output import (
    BUFSIZE_MIN,
    BufferOverflowError,
    DbmsOutput,
)


def test_put_line_and_get_line():
    out = DbmsOutput()
    out.enable()
    out.put_line("hello")
    assert out.get_line() == ("hello", 0)
    assert out.get_line() == (None, 1)


def test_disabled_buffer_ignores_output():
    out = DbmsOutput()
    out.put_line("lost")
    assert out.get_line() == (None, 1)


def test_put_accumulates_partial_line():
    out = DbmsOutput()
    out.enable()
    out.put("ab")
    out.put("cd")
    assert out.get_line() == ("abcd", 0)


def test_get_lines_with_new_line():
    out = DbmsOutput()
    out.enable()
    out.put("x")
    out.new_line()
    out.put_line("y")
    out.put_line("z")
    assert out.get_lines(2) == (["x", "y"], 2)
    assert out.get_lines(10) == (["z"], 1)
    assert out.get_lines(10) == ([], 0)


def test_write_after_read_discards_old_content():
    out = DbmsOutput()
    out.enable()
    out.put_line("first")
    out.put_line("second")
    assert out.get_line() == ("first", 0)
    out.put_line("third")
    assert out.get_lines(10) == (["third"], 1)


def test_overflow_raises():
    out = DbmsOutput()
    out.enable(BUFSIZE_MIN)
    out.put("a" * BUFSIZE_MIN)
    with pytest.raises(BufferOverflowError):
        out.put("b")


def test_small_limit_is_raised_with_warning():
    out = DbmsOutput()
    with pytest.warns(UserWarning):
        out.enable(10)
    out.put("a" * BUFSIZE_MIN)
    with pytest.raises(BufferOverflowError):
        out.new_line()


def test_disable_drops_buffer():
    out = DbmsOutput()
    out.enable()
    out.put_line("gone")
    out.disable()
    assert out.get_line() == (None, 1)


def test_serveroutput_sends_lines_to_sink():
    sent = []
    out = DbmsOutput(sink=sent.append)
    out.serveroutput(True)
    out.put_line("a")
    out.put_line("b")
    assert sent == ["a", "b"]
    assert out.get_line() == (None, 1)


def test_serveroutput_flushes_buffered_lines_together():
    sent = []
    out = DbmsOutput(sink=sent.append)
    out.enable()
    out.put_line("a")
    out.put_line("b")
    out.serveroutput(True)
    out.put_line("c")
    assert sent == ["a\nb\nc"]


def test_serveroutput_off_keeps_lines():
    sent = []
    out = DbmsOutput(sink=sent.append)
    out.serveroutput(True)
    out.serveroutput(False)
    out.put_line("kept")
    assert sent == []
    assert out.get_line() == ("kept", 0)