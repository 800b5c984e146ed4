import io

import pytest

from decho.ingest.stdin import collect_text, read_stdin, strip_ansi, text_from_args
from decho.util.errors import InputError


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_strip_ansi_removes_color_codes():
    assert strip_ansi("\x1b[31mHello\x1b[0m") == "Hello"
    assert strip_ansi("\x1b[1;32mok\x1b[m done") == "ok done"


def test_strip_ansi_keeps_other_escapes():
    # cursor movement is not an SGR sequence
    assert strip_ansi("\x1b[2Kline") == "\x1b[2Kline"


def test_read_stdin_colored_line():
    assert read_stdin(io.StringIO("\x1b[31mHello\x1b[0m")) == "Hello\n"


def test_read_stdin_appends_newline_per_line():
    assert read_stdin(io.StringIO("a\nb\r\nc")) == "a\nb\nc\n"


def test_read_stdin_empty_stream():
    assert read_stdin(io.StringIO("")) == ""


def test_read_stdin_skips_terminal():
    assert read_stdin(FakeTTY("should not be read\n")) == ""


def test_read_stdin_closed_stream():
    stream = io.StringIO("x")
    stream.close()
    with pytest.raises(InputError):
        read_stdin(stream)


def test_text_from_args():
    assert text_from_args(["hello", "world"]) == "hello world"
    assert text_from_args([]) == ""
    assert text_from_args(None) == ""


def test_collect_text_only_filters_piped_part():
    text = collect_text(io.StringIO("\x1b[32mbuild ok\x1b[0m\n"), ["\x1b[31mliteral"])
    assert text == "build ok\n\x1b[31mliteral"
