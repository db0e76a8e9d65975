# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from ..errors import StorageError, ValidationError
from ..files import exclusive_lock, read_json, write_json_atomic
from ..schemas import HAM_LABEL, LABELS, SPAM_LABEL, TrainingCorpus

LOGGER = logging.getLogger(__name__)

DEFAULT_SPAM_SAMPLES = (
    "URGENT! You have won $1000000! Click here now!",
    "Free money! No strings attached! Act now!",
    "Congratulations! You are our lucky winner!",
    "Limited time offer! Buy now or miss out forever!",
    "Work from home and earn $5000 per week!",
    "Lose weight fast with this miracle pill!",
    "Hot singles in your area want to meet you!",
    "Your account will be closed unless you verify now!",
    "Claim your prize now! Click this link immediately!",
    "Make money fast! No experience needed!",
)

DEFAULT_HAM_SAMPLES = (
    "Meeting scheduled for tomorrow at 2 PM",
    "Thanks for your email, I'll get back to you soon",
    "The project deadline is next Friday",
    "Please review the attached document",
    "Happy birthday! Hope you have a great day",
    "Reminder: Team lunch is at noon today",
    "The weather forecast shows rain tomorrow",
    "Your order has been shipped and will arrive Monday",
    "Conference call moved to 3 PM today",
    "Thanks for the great work on the presentation",
)


def _decode(payload: object, path: Path) -> TrainingCorpus:
    if payload is None:
        return TrainingCorpus()
    if not isinstance(payload, dict):
        raise StorageError("Training corpus is not an object", path=path)
    samples = payload.get("samples") or []
    labels = payload.get("labels") or []
    if not isinstance(samples, list) or not isinstance(labels, list):
        raise StorageError("Training corpus fields must be lists", path=path)
    if len(samples) != len(labels):
        raise StorageError(f"Training corpus is inconsistent ({len(samples)} samples, {len(labels)} labels)", path=path)
    return TrainingCorpus(samples=[str(item) for item in samples], labels=[str(item) for item in labels])


class TrainingCorpusStore:
    def __init__(self, path: Path) -> None:
        self.path = path

    def get_all(self) -> TrainingCorpus:
        return _decode(read_json(self.path), self.path)

    def __len__(self) -> int:
        return len(self.get_all())

    def append(self, text: str, label: str, *, unique: bool = False) -> bool:
        """Append one sample; with ``unique`` an exact duplicate text is skipped."""
        if label not in LABELS:
            raise ValidationError(f"Unknown label {label!r}")
        with exclusive_lock(self.path):
            corpus = self.get_all()
            if unique and text in corpus.samples:
                return False
            corpus.samples.append(text)
            corpus.labels.append(label)
            write_json_atomic(self.path, corpus.to_payload())
        return True

    def seed_defaults(self) -> TrainingCorpus:
        with exclusive_lock(self.path):
            corpus = self.get_all()
            if len(corpus):
                return corpus
            corpus = TrainingCorpus(
                samples=[*DEFAULT_SPAM_SAMPLES, *DEFAULT_HAM_SAMPLES],
                labels=[SPAM_LABEL] * len(DEFAULT_SPAM_SAMPLES) + [HAM_LABEL] * len(DEFAULT_HAM_SAMPLES),
            )
            write_json_atomic(self.path, corpus.to_payload())
        LOGGER.info("Seeded empty training corpus with %d default samples", len(corpus))
        return corpus


def to_dataframe(samples: Sequence[str], labels: Sequence[str]) -> pd.DataFrame:
    return pd.DataFrame({"text": list(samples), "label": list(labels)}, columns=["text", "label"])
