"""Tests for match highlighting."""

from __future__ import annotations

import html

import pytest

from chatsearch.models import Match
from chatsearch.rendering.highlight import highlight


def test_highlight_wraps_every_term() -> None:
    matches = [Match(idx=0, str="MEGA"), Match(idx=1, str="input")]
    assert (
        highlight("Example MEGA string as input.", matches)
        == "Example <strong>MEGA</strong> string as <strong>input</strong>."
    )


@pytest.mark.parametrize(
    ("text", "term", "count"),
    [
        ("no hits here", "zzz", 0),
        ("Chat chat CHAT", "chat", 3),
        ("aaaa", "aa", 2),
        ("release notes", "Release", 1),
    ],
)
def test_highlight_wraps_each_occurrence(text: str, term: str, count: int) -> None:
    highlighted = highlight(text, [Match(idx=0, str=term)])
    assert highlighted.count("<strong>") == count
    assert highlighted.count("</strong>") == count
    if count == 0:
        assert highlighted == text


def test_highlight_preserves_original_case() -> None:
    assert highlight("Hello World", [Match(str="world")]) == "Hello <strong>World</strong>"


def test_highlight_without_matches_returns_text() -> None:
    assert highlight("plain", None) == "plain"
    assert highlight("plain", []) == "plain"


def test_highlight_empty_text_is_noop() -> None:
    assert highlight("", [Match(str="x")]) == ""


def test_highlight_treats_terms_literally() -> None:
    assert highlight("cost is $5 (approx)", [Match(str="(approx)")]) == (
        "cost is $5 <strong>(approx)</strong>"
    )
    assert highlight("a.b axb", [Match(str="a.b")]) == "<strong>a.b</strong> axb"


def test_highlight_merges_overlapping_terms() -> None:
    matches = [Match(idx=0, str="search"), Match(idx=1, str="arch")]
    assert highlight("research", matches) == "re<strong>search</strong>"

    partial = [Match(idx=0, str="abc"), Match(idx=1, str="cde")]
    assert highlight("abcdef", partial) == "<strong>abcde</strong>f"


def test_highlight_never_matches_its_own_markup() -> None:
    matches = [Match(idx=0, str="stro"), Match(idx=1, str="strong")]
    assert highlight("strong tea", matches) == "<strong>strong</strong> tea"


def test_highlight_ignores_empty_terms() -> None:
    assert highlight("text", [Match(str="")]) == "text"


def test_highlight_escapes_each_piece_after_matching() -> None:
    matches = [Match(idx=0, str="<"), Match(idx=1, str="lt")]
    assert highlight("a<b", matches, escape=html.escape) == "a<strong>&lt;</strong>b"
    assert highlight("a<b", None, escape=html.escape) == "a&lt;b"
