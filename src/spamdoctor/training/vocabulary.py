# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging

from ..features import candidate_terms
from ..lexicon import SpamLexicon

LOGGER = logging.getLogger(__name__)


def learn_vocabulary(text: str, lexicon: SpamLexicon) -> list[str]:
    """Grow the lexicon with the long lowercase words of a confirmed spam message."""
    candidates = candidate_terms(text, lexicon.terms())
    if not candidates:
        return []
    added = lexicon.add_many(candidates)
    if added:
        LOGGER.info("Learned %d new spam term(s) from confirmed spam", len(added))
    return added
