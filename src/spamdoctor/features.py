# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re

SCRIPT_RE = re.compile(r"<script(.*?)>(.*?)</script>", flags=re.IGNORECASE | re.DOTALL)
STYLE_RE = re.compile(r"<\s*style.+?<\s*/\s*style.*?>", flags=re.IGNORECASE | re.DOTALL)
TAG_RE = re.compile(r"<[^>]+>")
BLANK_RE = re.compile(r"[ \t]+")
MULTI_SPACE_RE = re.compile(r"\s{2,}")
NON_WORD_RE = re.compile(r"\W+")

MIN_LEARNED_TERM_LENGTH = 5


def _safe_text(value: object) -> str:
    return str(value or "")


def strip_html(html: str) -> str:
    text = SCRIPT_RE.sub("", _safe_text(html))
    text = STYLE_RE.sub("", text)
    return TAG_RE.sub("", text)


def sanitize_text(text: str, *, is_html: bool = False) -> str:
    """Turn raw (optionally HTML) input into the plain text every later stage works on.

    Horizontal blanks collapse to one space, any remaining run of two or more
    whitespace characters becomes a single newline, and the result is trimmed.
    Applying it twice gives the same text as applying it once, including on
    input that sanitizes to an empty string.
    """
    value = _safe_text(text)
    if is_html:
        value = strip_html(value)
    value = BLANK_RE.sub(" ", value)
    value = MULTI_SPACE_RE.sub("\n", value)
    return value.strip()


def word_tokens(text: str) -> list[str]:
    return [token for token in NON_WORD_RE.split(_safe_text(text).lower()) if token]


def candidate_terms(text: str, known_terms: set[str]) -> list[str]:
    seen: set[str] = set()
    candidates: list[str] = []
    for token in word_tokens(text):
        token = token.strip()
        if len(token) < MIN_LEARNED_TERM_LENGTH or token in known_terms or token in seen:
            continue
        seen.add(token)
        candidates.append(token)
    return candidates
