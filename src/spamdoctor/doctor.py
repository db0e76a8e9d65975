# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from typing import Any, Iterable

from .errors import ClassifierError, ValidationError
from .features import sanitize_text
from .inference.predictor import ClassifierAdapter, SklearnTextClassifier
from .lexicon import SpamLexicon
from .matching import match_terms, merge_terms
from .schemas import SPAM_LABEL, DetectionResult, MatchRecord, ModelStats, label_for
from .scoring import combine_scores, fallback_probability
from .settings import DEFAULT_CONFIDENCE_THRESHOLD, DoctorSettings, clamp_unit
from .spam_log import SpamLog
from .training.corpus import TrainingCorpusStore
from .training.vocabulary import learn_vocabulary

LOGGER = logging.getLogger(__name__)


class SpamDoctor:
    """Runs the check pipeline and keeps the result of the most recent call.

    sanitize -> classify -> match -> combine -> learn (spam verdicts only)
    """

    def __init__(
        self,
        *,
        lexicon: SpamLexicon,
        corpus: TrainingCorpusStore,
        spam_log: SpamLog,
        classifier: ClassifierAdapter,
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    ) -> None:
        self.lexicon = lexicon
        self.corpus = corpus
        self.spam_log = spam_log
        self.classifier = classifier
        self._confidence_threshold = clamp_unit(confidence_threshold)
        self._filter_items: list[str] = []
        self._result: DetectionResult | None = None

    @property
    def model_type(self) -> str:
        return str(getattr(self.classifier, "model_type", "unknown"))

    def check(self, text: str, is_html: bool = False) -> DetectionResult:
        if text is None or text == "":
            raise ValidationError("Text content is missing. Please provide some text to check")
        sanitized = sanitize_text(text, is_html=is_html)
        if not sanitized:
            raise ValidationError("Text content is empty once markup and whitespace are removed")

        is_spam, probability = self._classify(sanitized)

        outcome = match_terms(sanitized, merge_terms(self.lexicon.items(), self._filter_items))
        result = DetectionResult(
            sanitized_text=sanitized,
            ml_probability=probability,
            is_spam_by_classifier=is_spam,
            matches=outcome.matches,
            positions=outcome.positions,
            highlighted_plain=outcome.highlighted_plain,
            highlighted_html=outcome.highlighted_html,
            combined_score=combine_scores(probability, len(outcome.matches)),
        )
        LOGGER.debug(
            "check: spam=%s probability=%.3f matches=%d score=%.3f",
            is_spam,
            probability,
            len(outcome.matches),
            result.combined_score,
        )

        # The verdict comes from the classifier label alone; the stored threshold is informational.
        if is_spam:
            self.spam_log.record(sanitized)
            self.corpus.append(sanitized, SPAM_LABEL, unique=True)
            result.learned_terms = learn_vocabulary(sanitized, self.lexicon)

        self._result = result
        return result

    def _classify(self, text: str) -> tuple[bool, float]:
        try:
            is_spam = self.classifier.predict(text) == SPAM_LABEL
            probability = self.classifier.predict_probability(text)
        except ClassifierError as exc:
            LOGGER.warning("Classifier failed, treating message as ham: %s", exc)
            return False, 0.0
        except Exception as exc:
            LOGGER.warning("Classifier adapter raised %s, treating message as ham: %s", type(exc).__name__, exc)
            return False, 0.0
        if probability is None:
            probability = fallback_probability(is_spam)
        return is_spam, clamp_unit(probability)

    def is_spam(self) -> bool:
        return bool(self._result and self._result.is_spam_by_classifier)

    def get_spam_probability(self) -> float:
        return self._result.ml_probability if self._result else 0.0

    def get_spam_score(self) -> float:
        return self._result.combined_score if self._result else 0.0

    def get_spam_items(self) -> list[MatchRecord]:
        return list(self._result.matches) if self._result else []

    def get_spam_positions(self) -> list[int]:
        return list(self._result.positions) if self._result else []

    def get_highlighted(self, html: bool = False) -> str:
        if self._result is None:
            return ""
        return self._result.highlighted_html if html else self._result.highlighted_plain

    def add_training_sample(self, text: str, is_spam: bool) -> None:
        """Store a caller-labelled sample; duplicates are kept on purpose."""
        self.corpus.append(text, label_for(is_spam))
        if is_spam:
            self.spam_log.record(text)

    def retrain_model(self) -> bool:
        corpus = self.corpus.get_all()
        if not len(corpus):
            corpus = self.corpus.seed_defaults()
        try:
            self.classifier.train(corpus.samples, corpus.labels)
        except ClassifierError as exc:
            LOGGER.warning("Retraining failed, keeping previous model state: %s", exc)
            return False
        LOGGER.info("Model retrained on %d samples", len(corpus))
        return True

    def ensure_model(self) -> bool:
        loader = getattr(self.classifier, "load", None)
        if callable(loader) and loader():
            return True
        return self.retrain_model()

    def set_confidence_threshold(self, value: float) -> None:
        self._confidence_threshold = clamp_unit(value)

    def get_model_stats(self) -> dict[str, Any]:
        corpus = self.corpus.get_all()
        return ModelStats(
            total_samples=len(corpus),
            spam_samples=corpus.spam_count,
            ham_samples=corpus.ham_count,
            model_type=self.model_type,
            confidence_threshold=self._confidence_threshold,
        ).to_dict()

    @property
    def filter_items(self) -> list[str]:
        return list(self._filter_items)

    def set_filter_items(self, items: Iterable[str], append: bool = False) -> None:
        if not items or not isinstance(items, (list, tuple)):
            raise ValidationError("Items must be a non-empty list")
        terms = [str(item) for item in items]
        self._filter_items = self._filter_items + terms if append else terms

    def teach_doctor(self, data: Any) -> int:
        taught = self.lexicon.teach(data)
        LOGGER.info("Taught %d new term(s) to the lexicon", taught)
        return taught


def open_doctor(settings: DoctorSettings | None = None) -> SpamDoctor:
    settings = settings or DoctorSettings.from_env()
    doctor = SpamDoctor(
        lexicon=SpamLexicon(settings.lexicon_path),
        corpus=TrainingCorpusStore(settings.corpus_path),
        spam_log=SpamLog(settings.spam_log_path),
        classifier=SklearnTextClassifier(model_path=settings.model_path, model_type=settings.model_type),
        confidence_threshold=settings.confidence_threshold,
    )
    doctor.lexicon.ensure()
    doctor.ensure_model()
    return doctor


_CACHE: SpamDoctor | None = None


def load_doctor() -> SpamDoctor:
    global _CACHE
    if _CACHE is not None:
        return _CACHE
    _CACHE = open_doctor()
    return _CACHE
