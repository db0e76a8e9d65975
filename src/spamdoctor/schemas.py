# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SPAM_LABEL = "spam"
HAM_LABEL = "ham"
LABELS = (SPAM_LABEL, HAM_LABEL)


def label_for(is_spam: bool) -> str:
    return SPAM_LABEL if is_spam else HAM_LABEL


@dataclass(frozen=True, slots=True)
class TrainingSample:
    text: str
    label: str


@dataclass(slots=True)
class TrainingCorpus:
    samples: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        for text, label in zip(self.samples, self.labels):
            yield TrainingSample(text=text, label=label)

    @property
    def spam_count(self) -> int:
        return sum(1 for label in self.labels if label == SPAM_LABEL)

    @property
    def ham_count(self) -> int:
        return len(self.labels) - self.spam_count

    def to_payload(self) -> dict[str, list[str]]:
        return {"samples": list(self.samples), "labels": list(self.labels)}


@dataclass(frozen=True, slots=True)
class MatchRecord:
    term: str
    count: int


@dataclass(frozen=True, slots=True)
class SpamLogEntry:
    timestamp: str
    text: str


@dataclass(slots=True)
class DetectionResult:
    sanitized_text: str
    ml_probability: float = 0.0
    is_spam_by_classifier: bool = False
    matches: list[MatchRecord] = field(default_factory=list)
    positions: list[int] = field(default_factory=list)
    highlighted_plain: str = ""
    highlighted_html: str = ""
    combined_score: float = 0.0
    learned_terms: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ModelStats:
    total_samples: int
    spam_samples: int
    ham_samples: int
    model_type: str
    confidence_threshold: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_samples": self.total_samples,
            "spam_samples": self.spam_samples,
            "ham_samples": self.ham_samples,
            "model_type": self.model_type,
            "confidence_threshold": self.confidence_threshold,
        }
