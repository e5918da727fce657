import io

import pytest

from sysprogkit.replace import main, replace_line, replace_stream


def test_replace_line_pinned():
    assert replace_line("abcabc", "bc", "X") == ("aXaX", 2)


def test_empty_from_leaves_line_alone():
    assert replace_line("hello\n", "", "zzz") == ("hello\n", 0)


def test_no_match():
    assert replace_line("hello\n", "xyz", "q") == ("hello\n", 0)


def test_non_overlapping_occurrences():
    text, count = replace_line("aaaa", "aa", "b")
    assert count == 2
    assert text == "bb"


@pytest.mark.parametrize(
    "line,old,new",
    [("one two one", "one", "1"), ("x", "x", ""), ("abab", "ab", "abab")],
)
def test_count_matches_occurrences(line, old, new):
    text, count = replace_line(line, old, new)
    assert count == line.count(old)
    assert old not in text or old in new


def test_replace_stream_totals():
    out = io.StringIO()
    total = replace_stream(["cat cat\n", "dog\n", "cat\n"], "cat", "cow", out)
    assert total == 3
    assert out.getvalue() == "cow cow\ndog\ncow\n"


def test_main_wrong_argument_count(capsys):
    assert main(["only"]) == 1
    assert "usage:" in capsys.readouterr().err


def test_main_filters_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("foo bar\nfoo\n"))
    assert main(["foo", "baz"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "baz bar\nbaz\n"
    assert captured.err == "2 replacements\n"


def test_main_empty_from(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("keep\n"))
    assert main(["", "x"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "keep\n"
    assert captured.err == "0 replacements\n"