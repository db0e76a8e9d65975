# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol, Sequence

import joblib

from ..errors import ClassifierError
from ..schemas import HAM_LABEL, SPAM_LABEL
from ..settings import validate_model_type
from ..training.trainer import export_model, fit_model

LOGGER = logging.getLogger(__name__)


class ClassifierAdapter(Protocol):
    """What the detector needs from a text classifier; the model itself stays opaque."""

    model_type: str

    def train(self, samples: Sequence[str], labels: Sequence[str]) -> None:
        ...

    def predict(self, text: str) -> str:
        ...

    def predict_probability(self, text: str) -> float | None:
        ...


class SklearnTextClassifier:
    def __init__(self, *, model_path: Path, model_type: str = "naive_bayes") -> None:
        self.model_path = model_path
        self.metadata_path = model_path.with_name("metadata.json")
        self.model_type = validate_model_type(model_type)
        self.model = None
        self.metadata: dict[str, Any] = {}

    @property
    def enabled(self) -> bool:
        return self.model is not None

    def load(self) -> bool:
        if not self.model_path.exists():
            return False
        try:
            self.model = joblib.load(self.model_path)
        except Exception as exc:
            LOGGER.warning("Cannot restore model from %s (%s), a new one will be trained", self.model_path, exc)
            self.model = None
            return False
        if self.metadata_path.exists():
            try:
                self.metadata = json.loads(self.metadata_path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                LOGGER.debug("Ignoring unreadable model metadata %s (%s)", self.metadata_path, exc)
                self.metadata = {}
        return True

    def train(self, samples: Sequence[str], labels: Sequence[str]) -> None:
        try:
            model = fit_model(samples, labels, model_type=self.model_type)
        except Exception as exc:
            raise ClassifierError(f"Training {self.model_type} model failed: {exc}") from exc
        report = export_model(model, self.model_path, model_type=self.model_type, samples=samples, labels=labels)
        self.model = model
        self.metadata = report["metadata"]
        LOGGER.info(
            "Trained %s model on %d samples (f1=%.3f)",
            self.model_type,
            len(samples),
            report["metrics"]["f1"],
        )

    def _require_model(self):
        if self.model is None:
            raise ClassifierError("Model is not trained")
        return self.model

    def predict(self, text: str) -> str:
        model = self._require_model()
        try:
            label = str(model.predict([text])[0])
        except Exception as exc:
            raise ClassifierError(f"Prediction failed: {exc}") from exc
        return SPAM_LABEL if label == SPAM_LABEL else HAM_LABEL

    def predict_probability(self, text: str) -> float | None:
        model = self._require_model()
        if not hasattr(model, "predict_proba"):
            return None
        try:
            row = model.predict_proba([text])[0]
        except Exception as exc:
            raise ClassifierError(f"Probability prediction failed: {exc}") from exc
        classes = [str(item) for item in getattr(model, "classes_", [])]
        if SPAM_LABEL not in classes:
            return 0.0
        return float(row[classes.index(SPAM_LABEL)])
