import io

import pytest

from console.io import (
    BufferLineSink,
    ScriptedLineSource,
    StdinLineSource,
    StdoutLineSink,
    parse_index,
    parse_insert_request,
)
from domain.errors import ParseError


@pytest.mark.parametrize("text, expected", [("0", 0), ("3", 3), (" 12\n", 12), ("007", 7)])
def test_parse_index_accepts_unsigned_integers(text, expected):
    assert parse_index(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "-1", "+2", "3.5", "three", "1 2", "٣", None])
def test_parse_index_rejects_everything_else(text):
    with pytest.raises(ParseError):
        parse_index(text)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_index("x")


def test_parse_insert_request_splits_index_and_value():
    assert parse_insert_request("3 Mango", "Kiwi") == (3, "Mango")
    assert parse_insert_request("  2   Strawberry Tree Berry ", "Kiwi") == (2, "Strawberry Tree Berry")
    assert parse_insert_request("4", "Kiwi") == (4, "Kiwi")


@pytest.mark.parametrize("text", [None, "", "Mango 3"])
def test_parse_insert_request_rejects_bad_index(text):
    with pytest.raises(ParseError):
        parse_insert_request(text, "Kiwi")


def test_scripted_source_records_prompts_and_signals_eof():
    source = ScriptedLineSource(["first"])

    assert source.read_line("> ") == "first"
    assert source.read_line("? ") is None
    assert source.prompts == ["> ", "? "]


def test_stdin_source_returns_none_on_eof(monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert StdinLineSource().read_line("prompt") is None

    monkeypatch.setattr("builtins.input", lambda prompt="": "5")
    assert StdinLineSource().read_line("prompt") == "5"


def test_sinks_collect_written_text():
    stream = io.StringIO()
    StdoutLineSink(stream).write("hello\n")
    assert stream.getvalue() == "hello\n"

    buffer = BufferLineSink()
    buffer.write("a\n")
    buffer.write("b\n")
    assert buffer.getvalue() == "a\nb\n"
    assert buffer.lines() == ["a", "b"]
