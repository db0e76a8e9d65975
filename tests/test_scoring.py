# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pytest

from spamdoctor.scoring import combine_scores, fallback_probability, lexicon_score


def test_weighted_blend() -> None:
    assert combine_scores(1.0, 0) == pytest.approx(0.7)
    assert combine_scores(0.0, 3) == pytest.approx(0.09)
    assert combine_scores(0.5, 2) == pytest.approx(0.35 + 0.06)


def test_lexicon_part_saturates_at_ten_terms() -> None:
    assert lexicon_score(10) == pytest.approx(1.0)
    assert lexicon_score(250) == pytest.approx(1.0)
    assert combine_scores(1.0, 50) == pytest.approx(1.0)


@pytest.mark.parametrize("probability", [0.0, 0.2, 0.5, 0.8, 1.0, -0.3, 1.7])
@pytest.mark.parametrize("matches", [0, 1, 5, 10, 99])
def test_combined_score_stays_in_unit_interval(probability: float, matches: int) -> None:
    assert 0.0 <= combine_scores(probability, matches) <= 1.0


def test_fallback_probabilities() -> None:
    assert fallback_probability(True) == 0.8
    assert fallback_probability(False) == 0.2
