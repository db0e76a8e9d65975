# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pytest

from spamdoctor.features import candidate_terms, sanitize_text, word_tokens


def test_plain_text_is_trimmed_and_blanks_collapsed() -> None:
    assert sanitize_text("  Meeting \t\t scheduled   for tomorrow  ") == "Meeting scheduled for tomorrow"


def test_multi_whitespace_becomes_single_newline() -> None:
    assert sanitize_text("first line\n\n\nsecond line") == "first line\nsecond line"
    assert sanitize_text("first \n second") == "first\nsecond"


def test_html_drops_script_style_and_tags() -> None:
    html = (
        "<html><head><style type='text/css'>body { color: red; }</style>"
        "<script>alert('x')</script></head>"
        "<body><p>Win a <b>FREE</b> prize</p></body></html>"
    )
    assert sanitize_text(html, is_html=True) == "Win a FREE prize"


def test_html_flag_off_keeps_markup() -> None:
    assert sanitize_text("<b>bold</b>") == "<b>bold</b>"


@pytest.mark.parametrize(
    "raw",
    [
        "  URGENT!   You have won \t $1000000!  ",
        "line one\n\n\n\tline two   \n  line three",
        "<div>\n  <p>Hello</p>\n\n  <p>World</p>\n</div>",
        "a \t\n \t b",
        "   ",
        "<p> </p>",
    ],
)
def test_sanitize_is_idempotent(raw: str) -> None:
    once = sanitize_text(raw, is_html=True)
    assert sanitize_text(once) == once
    assert sanitize_text(once, is_html=True) == once


def test_blank_or_markup_only_text_sanitizes_to_empty() -> None:
    assert sanitize_text("") == ""
    assert sanitize_text("   \t  ") == ""
    assert sanitize_text("<p> </p>", is_html=True) == ""


def test_word_tokens_split_on_non_word_and_lowercase() -> None:
    assert word_tokens("Click HERE, now!! winner_2024") == ["click", "here", "now", "winner_2024"]


def test_candidate_terms_keep_long_unknown_words_once() -> None:
    text = "Claim your PRIZE now, claim the prize money immediately"
    assert candidate_terms(text, {"money"}) == ["claim", "prize", "immediately"]
