# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import get_env, get_float_env
from .errors import ValidationError

MODEL_TYPES = ("naive_bayes", "svm")
DEFAULT_MODEL_TYPE = "naive_bayes"
DEFAULT_CONFIDENCE_THRESHOLD = 0.7

LEXICON_FILENAME = "spam_data.txt"
CORPUS_FILENAME = "training_data.json"
SPAM_LOG_FILENAME = "collected_spam.txt"
MODEL_FILENAME = "spam_model.joblib"


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def validate_model_type(model_type: str) -> str:
    normalized = str(model_type or "").strip().lower()
    if normalized not in MODEL_TYPES:
        raise ValidationError(f"Unknown model type {model_type!r}, expected one of {', '.join(MODEL_TYPES)}")
    return normalized


@dataclass(frozen=True, slots=True)
class DoctorSettings:
    data_dir: Path
    model_dir: Path
    model_type: str = DEFAULT_MODEL_TYPE
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD

    @classmethod
    def from_env(cls) -> DoctorSettings:
        data_dir = Path(get_env("SPAMDOCTOR_DATA_DIR", "data") or "data")
        model_dir = Path(get_env("SPAMDOCTOR_MODEL_DIR", str(data_dir / "model")) or str(data_dir / "model"))
        return cls(
            data_dir=data_dir,
            model_dir=model_dir,
            model_type=validate_model_type(get_env("SPAMDOCTOR_MODEL_TYPE", DEFAULT_MODEL_TYPE) or DEFAULT_MODEL_TYPE),
            confidence_threshold=clamp_unit(
                get_float_env("SPAMDOCTOR_CONFIDENCE_THRESHOLD", DEFAULT_CONFIDENCE_THRESHOLD)
            ),
        )

    @classmethod
    def for_directory(cls, data_dir: Path, *, model_type: str = DEFAULT_MODEL_TYPE) -> DoctorSettings:
        return cls(data_dir=data_dir, model_dir=data_dir / "model", model_type=validate_model_type(model_type))

    @property
    def lexicon_path(self) -> Path:
        return self.data_dir / LEXICON_FILENAME

    @property
    def corpus_path(self) -> Path:
        return self.data_dir / CORPUS_FILENAME

    @property
    def spam_log_path(self) -> Path:
        return self.data_dir / SPAM_LOG_FILENAME

    @property
    def model_path(self) -> Path:
        return self.model_dir / MODEL_FILENAME
