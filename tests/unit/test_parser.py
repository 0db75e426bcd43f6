"""Unit tests for tolerant row parsing."""

import csv

import pytest

from csvtable.core.errors import RowParseError
from csvtable.core.parser import parse_line, parse_lines


@pytest.fixture
def small_field_limit():
    """Shrink the csv field size limit so long fields fail to parse."""
    previous = csv.field_size_limit(10)
    yield
    csv.field_size_limit(previous)


def test_parse_simple_line():
    assert parse_line("a,b,c\n", ",") == ["a", "b", "c"]


def test_parse_strips_crlf():
    assert parse_line("a;b\r\n", ";") == ["a", "b"]


def test_parse_quoted_separator():
    assert parse_line('"Smith, John",42\n', ",") == ["Smith, John", "42"]


def test_parse_doubled_quotes():
    assert parse_line('"say ""hi""",x', ",") == ['say "hi"', "x"]


def test_parse_stray_quote_is_kept():
    assert parse_line('a,b"c,d', ",") == ["a", 'b"c', "d"]


def test_parse_space_before_quoted_field():
    assert parse_line('a, "b,c"', ",") == ["a", "b,c"]


def test_parse_custom_quotechar():
    assert parse_line("'a|b'|c", "|", quotechar="'") == ["a|b", "c"]


def test_parse_blank_line():
    assert parse_line("\n", ",") == []
    assert parse_line("", ",") == []


def test_parse_failure_raises_row_parse_error(small_field_limit):
    with pytest.raises(RowParseError) as excinfo:
        parse_line("x" * 50, ",")
    assert excinfo.value.line == "x" * 50


def test_parse_lines_drops_failing_lines(small_field_limit):
    skipped = []
    lines = ["a,b\n", "y" * 50 + "\n", "c,d\n"]
    rows = list(parse_lines(lines, ",", skipped=skipped))
    assert rows == [(1, ["a", "b"]), (3, ["c", "d"])]
    assert skipped == [2]


def test_parse_lines_numbering_starts_where_asked():
    rows = list(parse_lines(["a\n", "b\n"], ",", start=10))
    assert [lineno for lineno, _ in rows] == [10, 11]
