# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Dictionary matching and highlighting.

Highlighting is done in two passes: every occurrence is first widened to the
run of letters it sits in, overlapping spans are merged, and only then are
markers written. Markers therefore never feed back into later term scans.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Iterable

from .schemas import MatchRecord

HIGHLIGHT_OPEN = '<span style="color:red;">'
HIGHLIGHT_CLOSE = "</span>"


@dataclass(frozen=True, slots=True)
class MatchOutcome:
    matches: list[MatchRecord]
    positions: list[int]
    highlighted_plain: str
    highlighted_html: str


def merge_terms(*groups: Iterable[str]) -> list[str]:
    """Trim, drop empties and deduplicate terms, keeping first-seen order."""
    merged: list[str] = []
    seen: set[str] = set()
    for group in groups:
        for raw in group:
            term = str(raw or "").strip()
            if term and term not in seen:
                seen.add(term)
                merged.append(term)
    return merged


def _widen_to_word(text: str, start: int, end: int) -> tuple[int, int]:
    while start > 0 and text[start - 1].isalpha():
        start -= 1
    while end < len(text) and text[end].isalpha():
        end += 1
    return start, end


def _merge_spans(spans: list[tuple[int, int]]) -> list[tuple[int, int]]:
    merged: list[tuple[int, int]] = []
    for start, end in sorted(spans):
        if merged and start < merged[-1][1]:
            prev_start, prev_end = merged[-1]
            merged[-1] = (prev_start, max(prev_end, end))
        else:
            merged.append((start, end))
    return merged


def render_highlight(text: str, spans: list[tuple[int, int]], *, escape: bool = False) -> str:
    """Wrap spans of the sanitized text in markers.

    ``escape=True`` HTML-escapes the text between markers; the markup of the
    original input is not preserved, since ``text`` is already tag-stripped.
    """
    def _part(value: str) -> str:
        return html.escape(value, quote=False) if escape else value

    out: list[str] = []
    cursor = 0
    for start, end in _merge_spans(spans):
        out.append(_part(text[cursor:start]))
        out.append(f"{HIGHLIGHT_OPEN}{_part(text[start:end])}{HIGHLIGHT_CLOSE}")
        cursor = end
    out.append(_part(text[cursor:]))
    return "".join(out)


def match_terms(text: str, terms: Iterable[str]) -> MatchOutcome:
    counts: dict[str, int] = {}
    positions: list[int] = []
    spans: list[tuple[int, int]] = []

    for term in merge_terms(terms):
        pattern = re.compile(re.escape(term), flags=re.IGNORECASE)
        for found in pattern.finditer(text):
            if found.end() == found.start():
                continue
            positions.append(found.start())
            counts[term] = counts.get(term, 0) + 1
            spans.append(_widen_to_word(text, found.start(), found.end()))

    positions.sort()
    return MatchOutcome(
        matches=[MatchRecord(term=term, count=count) for term, count in counts.items()],
        positions=positions,
        highlighted_plain=render_highlight(text, spans),
        highlighted_html=render_highlight(text, spans, escape=True),
    )
