"""
LineSource reading semantics.
"""

import io

import pytest

from cipherforge.parsers.line_source import LineSource


def test_next_int_takes_first_token_and_discards_rest():
    source = LineSource(io.StringIO("12 abc\nnext\n"))
    assert source.next_int() == 12
    assert source.next_line() == "next"


@pytest.mark.parametrize("line", ["\n", "   \n", "abc\n", "3.5\n", "x 3\n"])
def test_next_int_signals_non_integer(line):
    assert LineSource(io.StringIO(line)).next_int() is None


def test_next_int_accepts_signed():
    source = LineSource(io.StringIO("-3\n  +4  \n"))
    assert source.next_int() == -3
    assert source.next_int() == 4


def test_next_line_strip_on_demand():
    source = LineSource(io.StringIO("  padded  \n  padded  \n"))
    assert source.next_line() == "padded"
    assert source.next_line(strip=False) == "  padded  "
    assert source.lines_read == 2


def test_last_line_without_newline():
    source = LineSource(io.StringIO("HELLO"))
    assert source.next_line() == "HELLO"


def test_eof_raises():
    source = LineSource(io.StringIO(""))
    with pytest.raises(EOFError):
        source.next_line()
    with pytest.raises(EOFError):
        source.next_int()
