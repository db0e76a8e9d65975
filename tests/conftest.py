# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from spamdoctor.doctor import SpamDoctor
from spamdoctor.errors import ClassifierError
from spamdoctor.lexicon import SpamLexicon
from spamdoctor.spam_log import SpamLog
from spamdoctor.training.corpus import TrainingCorpusStore


class FakeClassifier:
    """Flags any text containing one of ``spam_words``; records training calls."""

    model_type = "fake"

    def __init__(self, spam_words: Sequence[str] = ("urgent", "won", "free"), probability: float | None = 0.9) -> None:
        self.spam_words = [word.lower() for word in spam_words]
        self.probability = probability
        self.trained: list[tuple[list[str], list[str]]] = []

    def train(self, samples: Sequence[str], labels: Sequence[str]) -> None:
        self.trained.append((list(samples), list(labels)))

    def predict(self, text: str) -> str:
        lowered = text.lower()
        return "spam" if any(word in lowered for word in self.spam_words) else "ham"

    def predict_probability(self, text: str) -> float | None:
        if self.probability is None:
            return None
        return self.probability if self.predict(text) == "spam" else 1.0 - self.probability


class BrokenClassifier:
    model_type = "broken"

    def train(self, samples: Sequence[str], labels: Sequence[str]) -> None:
        raise ClassifierError("cannot train")

    def predict(self, text: str) -> str:
        raise ClassifierError("cannot predict")

    def predict_probability(self, text: str) -> float | None:
        raise ClassifierError("cannot predict")


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def lexicon(data_dir: Path) -> SpamLexicon:
    return SpamLexicon(data_dir / "spam_data.txt")


@pytest.fixture
def corpus(data_dir: Path) -> TrainingCorpusStore:
    return TrainingCorpusStore(data_dir / "training_data.json")


@pytest.fixture
def spam_log(data_dir: Path) -> SpamLog:
    return SpamLog(data_dir / "collected_spam.txt")


@pytest.fixture
def fake_classifier() -> FakeClassifier:
    return FakeClassifier()


@pytest.fixture
def doctor(lexicon: SpamLexicon, corpus: TrainingCorpusStore, spam_log: SpamLog, fake_classifier: FakeClassifier) -> SpamDoctor:
    return SpamDoctor(lexicon=lexicon, corpus=corpus, spam_log=spam_log, classifier=fake_classifier)
