"""Emphasis markup for matched search terms."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from chatsearch.models.search import Match

_OPEN = "<strong>"
_CLOSE = "</strong>"


def _verbatim(value: str) -> str:
    return value


def highlight(
    text: str,
    matches: Sequence[Match] | None,
    escape: Callable[[str], str] = _verbatim,
) -> str:
    """Wrap every case-insensitive occurrence of each match term in ``<strong>``.

    Spans of all terms are located on the raw text and overlapping spans are
    merged before wrapping, so a region is never wrapped twice.  ``escape`` is
    applied to every piece of text between and inside the emphasis tags; by
    default the text is emitted verbatim.

    >>> highlight("Example MEGA string as input.", [Match(str="MEGA"), Match(str="input", idx=1)])
    'Example <strong>MEGA</strong> string as <strong>input</strong>.'
    """
    if not text:
        return text
    if not matches:
        return escape(text)

    spans = _merge_spans(_find_spans(text, matches))
    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(escape(text[cursor:start]))
        parts.append(f"{_OPEN}{escape(text[start:end])}{_CLOSE}")
        cursor = end
    parts.append(escape(text[cursor:]))
    return "".join(parts)


def _find_spans(text: str, matches: Sequence[Match]) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    for match in matches:
        if not match.term:
            continue
        pattern = re.compile(re.escape(match.term), re.IGNORECASE)
        spans.extend(found.span() for found in pattern.finditer(text))
    return spans


def _merge_spans(spans: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping spans; touching spans stay separate."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(spans):
        if merged and start < merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
            continue
        merged.append((start, end))
    return merged
