from __future__ import annotations

from unified_log_decoder.core.formats import (
    UNTERMINATED_BRACKET,
    UNTERMINATED_QUOTE,
    split_segments,
)


def test_split_segments_basic() -> None:
    scan = split_segments('[2018/12/15 14:20:11.015 +08:00] [INFO] [tikv-server.rs:13] ["TiKV Started"]')
    assert scan.segments == (
        "2018/12/15 14:20:11.015 +08:00",
        "INFO",
        "tikv-server.rs:13",
        '"TiKV Started"',
    )
    assert scan.problem is None


def test_split_segments_brackets_inside_quotes() -> None:
    scan = split_segments('[t] [INFO] [a.rs:1] ["got ] and [ here"] [k="v]"]')
    assert scan.segments == ("t", "INFO", "a.rs:1", '"got ] and [ here"', 'k="v]"')
    assert scan.problem is None


def test_split_segments_escaped_quote_keeps_quote_open() -> None:
    scan = split_segments(r'[msg="say \"]\" now"] [x=1]')
    assert scan.segments == (r'msg="say \"]\" now"', "x=1")


def test_split_segments_escaped_backslash_before_quote() -> None:
    scan = split_segments(r'[path="C:\\"] [x=1]')
    assert scan.segments == (r'path="C:\\"', "x=1")


def test_split_segments_literal_newline_sequence() -> None:
    scan = split_segments(r'[stack="at foo\n  at bar"]')
    assert scan.segments == (r'stack="at foo\n  at bar"',)


def test_split_segments_nested_brackets_outside_quotes() -> None:
    scan = split_segments("[ids=[1,2,[3]]] [next=ok]")
    assert scan.segments == ("ids=[1,2,[3]]", "next=ok")


def test_split_segments_drops_text_between_segments() -> None:
    scan = split_segments("noise [a]  junk\t[b] tail")
    assert scan.segments == ("a", "b")


def test_split_segments_unterminated_bracket() -> None:
    scan = split_segments("[a] [b] [partial")
    assert scan.segments == ("a", "b", "partial")
    assert scan.problem == UNTERMINATED_BRACKET


def test_split_segments_unterminated_quote() -> None:
    scan = split_segments('[a] ["never closed] [b]')
    assert scan.segments == ("a", '"never closed] [b]')
    assert scan.problem == UNTERMINATED_QUOTE


def test_split_segments_empty_line() -> None:
    scan = split_segments("")
    assert scan.segments == ()
    assert scan.problem is None
