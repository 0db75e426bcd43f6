"""Unit tests for delimiter sniffing."""

import pytest

from csvtable.core.sniffer import (
    choose_separator,
    count_candidates,
    read_sample,
    sniff,
)


def _sniff(lines, **kwargs):
    return sniff(iter(lines), **kwargs).separator


@pytest.mark.parametrize("sep", ["\t", ";", "|", ","])
def test_uniform_single_separator_is_chosen(sep):
    lines = [sep.join(["a", "b", "c"]) + "\n", sep.join(["1", "2", "3"]) + "\n"]
    assert _sniff(lines) == sep


def test_decimal_commas_do_not_make_comma_the_separator():
    lines = ["name;price\n", "a;1,5\n", "b;2,75\n"]
    assert _sniff(lines) == ";"


def test_thousands_commas_do_not_make_comma_the_separator():
    lines = ["x|y\n", "1,234,567|a\n", "12,000|b\n"]
    assert _sniff(lines) == "|"


def test_real_commas_survive_the_numeric_penalty():
    lines = ["name,desc\n", "foo,a;b\n", "bar,c\n"]
    assert _sniff(lines) == ","


def test_colon_is_noise_next_to_another_separator():
    lines = ["time,value\n", "12:30,5\n", "13:45,6\n"]
    assert _sniff(lines) == ","


def test_colon_alone_is_a_separator():
    assert _sniff(["a:b\n", "c:d\n"]) == ":"


def test_tab_wins_over_higher_counts():
    lines = ["a,b,c,d\tx\n", "1,2,3,4\ty\n"]
    assert _sniff(lines) == "\t"


def test_default_is_comma_when_nothing_observed():
    assert _sniff(["abc\n", "def\n"]) == ","
    assert _sniff([]) == ","


def test_override_skips_detection_but_buffers():
    result = sniff(iter(["a;b\n", "c;d\n"]), override="|")
    assert result.separator == "|"
    assert result.lines == ["a;b\n", "c;d\n"]


def test_choose_separator_tie_breaks_by_candidate_order():
    assert choose_separator({";": 2, "|": 2, ",": 0, ":": 0, "\t": 0}) == ";"
    assert choose_separator({";": 1, "|": 3, ",": 0, ":": 0, "\t": 0}) == "|"


def test_choose_separator_drops_comma_when_fully_offset():
    counts = {",": 2, ";": 1, "|": 0, ":": 0, "\t": 0}
    assert choose_separator(counts, numeric_commas=2) == ";"
    assert choose_separator(counts, numeric_commas=1) == ","


def test_choose_separator_keeps_comma_when_alone():
    # The numeric penalty applies only when another candidate competes
    assert choose_separator({",": 2}, numeric_commas=5) == ","


def test_count_candidates_ignores_line_terminators():
    counts = count_candidates(["a;b\r\n", "c;d\n"])
    assert counts[";"] == 2
    assert counts["\t"] == 0


def test_read_sample_respects_limit_and_leaves_stream_positioned():
    stream = iter(f"{i}\n" for i in range(5))
    lines, exhausted = read_sample(stream, 2)
    assert lines == ["0\n", "1\n"]
    assert exhausted is False
    assert next(stream) == "2\n"


def test_read_sample_unbounded():
    lines, exhausted = read_sample(iter(["a\n", "b\n"]), 0)
    assert lines == ["a\n", "b\n"]
    assert exhausted is True


def test_sniff_reports_exhausted_input():
    assert sniff(iter(["a,b\n"]), limit=10).exhausted is True
    assert sniff(iter(["a,b\n", "c,d\n"]), limit=1).exhausted is False


def test_sniff_verbose_reports_to_stderr(capsys):
    sniff(iter(["a;b\n"]), verbose=True)
    err = capsys.readouterr().err
    assert "separator=';'" in err
