# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
from pathlib import Path

import pytest

from spamdoctor.errors import StorageError, ValidationError
from spamdoctor.lexicon import SpamLexicon, flatten_terms
from spamdoctor.training.vocabulary import learn_vocabulary


def test_missing_file_reads_as_empty(lexicon: SpamLexicon) -> None:
    assert lexicon.items() == []
    assert lexicon.terms() == set()


def test_add_trims_and_deduplicates(lexicon: SpamLexicon) -> None:
    assert lexicon.add("  urgent ") is True
    assert lexicon.add("urgent") is False
    assert lexicon.add("   ") is False
    assert lexicon.add("Urgent") is True
    assert lexicon.items() == ["urgent", "Urgent"]
    assert lexicon.path.read_text(encoding="utf-8") == "urgent,Urgent"


def test_add_is_exact_match_not_substring(lexicon: SpamLexicon) -> None:
    lexicon.add("wonderful")
    assert lexicon.add("won") is True
    assert "won" in lexicon


def test_terms_with_separator_are_refused(lexicon: SpamLexicon) -> None:
    assert lexicon.add("cheap,pills") is False
    assert lexicon.items() == []


def test_existing_file_with_blanks_and_duplicates_is_normalized(lexicon: SpamLexicon) -> None:
    lexicon.path.parent.mkdir(parents=True)
    lexicon.path.write_text(",free, ,winner,free,", encoding="utf-8")
    assert lexicon.items() == ["free", "winner"]
    assert lexicon.add("prize") is True
    assert lexicon.path.read_text(encoding="utf-8") == "free,winner,prize"


def test_flatten_handles_arbitrary_depth() -> None:
    data = ["a", ["b", ["c", ["d", ["e", ["f"]]]]], {"k": ["g", {"z": "h"}]}, 7, None, True]
    assert list(flatten_terms(data)) == ["a", "b", "c", "d", "e", "f", "g", "h", "7"]


def test_flatten_survives_very_deep_nesting() -> None:
    data: list = ["leaf"]
    for _ in range(5000):
        data = [data]
    assert list(flatten_terms(data)) == ["leaf"]


def test_teach_rejects_json_nested_past_decoder_limit(lexicon: SpamLexicon) -> None:
    payload = "[" * 100000 + json.dumps("deep") + "]" * 100000
    with pytest.raises(ValidationError, match="nesting too deep"):
        lexicon.teach(payload)
    assert lexicon.items() == []


def test_teach_counts_only_new_terms(lexicon: SpamLexicon) -> None:
    lexicon.add("casino")
    payload = json.dumps(["casino", ["bitcoin", ["crypto", ["bitcoin", " lottery "]]], ""])
    assert lexicon.teach(payload) == 3
    assert lexicon.items() == ["casino", "bitcoin", "crypto", "lottery"]
    assert lexicon.teach(payload) == 0


def test_teach_accepts_decoded_structures(lexicon: SpamLexicon) -> None:
    assert lexicon.teach([["viagra"], ("pharmacy",)]) == 2


@pytest.mark.parametrize("bad", ["", None, [], "not json", '"just a string"', "42"])
def test_teach_rejects_empty_or_unparsable_input(lexicon: SpamLexicon, bad) -> None:
    with pytest.raises(ValidationError):
        lexicon.teach(bad)


def test_lexicon_never_holds_duplicates_or_blanks(lexicon: SpamLexicon) -> None:
    lexicon.teach(["x", " x", "x ", "", "  ", ["y", ["x", "y"]]])
    lexicon.add("y")
    lexicon.add("")
    items = lexicon.items()
    assert len(items) == len(set(items))
    assert all(item and item == item.strip() for item in items)


def test_learn_vocabulary_adds_long_lowercased_words(lexicon: SpamLexicon) -> None:
    lexicon.add("money")
    added = learn_vocabulary("Make MONEY fast! Claim your money prize, claim now", lexicon)
    assert added == ["claim", "prize"]
    assert lexicon.items() == ["money", "claim", "prize"]
    assert learn_vocabulary("claim prize", lexicon) == []


def test_unwritable_lexicon_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    lexicon = SpamLexicon(blocker / "spam_data.txt")
    with pytest.raises(StorageError):
        lexicon.add("urgent")
