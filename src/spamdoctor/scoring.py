# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

ML_WEIGHT = 0.7
LEXICON_WEIGHT = 0.3
SCORE_PER_MATCH = 0.1

FALLBACK_SPAM_PROBABILITY = 0.8
FALLBACK_HAM_PROBABILITY = 0.2


def lexicon_score(match_count: int) -> float:
    return min(max(int(match_count), 0) * SCORE_PER_MATCH, 1.0)


def combine_scores(ml_probability: float, match_count: int) -> float:
    """Blend classifier probability with lexicon density; ``match_count`` counts distinct terms."""
    ml_score = max(0.0, min(1.0, float(ml_probability)))
    combined = ML_WEIGHT * ml_score + LEXICON_WEIGHT * lexicon_score(match_count)
    return max(0.0, min(1.0, combined))


def fallback_probability(is_spam: bool) -> float:
    return FALLBACK_SPAM_PROBABILITY if is_spam else FALLBACK_HAM_PROBABILITY
