# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

import joblib
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics import f1_score, precision_score, recall_score
from sklearn.naive_bayes import MultinomialNB
from sklearn.pipeline import Pipeline
from sklearn.svm import LinearSVC

from ..errors import StorageError
from ..schemas import HAM_LABEL, SPAM_LABEL
from ..settings import validate_model_type
from .corpus import to_dataframe


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _build_vectorizer() -> TfidfVectorizer:
    return TfidfVectorizer(analyzer="word", lowercase=True, ngram_range=(1, 1))


def build_model(model_type: str) -> Pipeline:
    if validate_model_type(model_type) == "svm":
        clf = LinearSVC(C=1.0)
    else:
        clf = MultinomialNB()
    return Pipeline(steps=[("tfidf", _build_vectorizer()), ("clf", clf)])


def fit_model(samples: Sequence[str], labels: Sequence[str], *, model_type: str) -> Pipeline:
    if not samples or len(samples) != len(labels):
        raise ValueError(f"Cannot train on {len(samples)} samples with {len(labels)} labels")
    model = build_model(model_type)
    model.fit(list(samples), list(labels))
    return model


def training_metrics(model: Pipeline, samples: Sequence[str], labels: Sequence[str]) -> dict[str, float]:
    predicted = model.predict(list(samples)).tolist()
    y_true = list(labels)
    return {
        "precision": float(precision_score(y_true, predicted, pos_label=SPAM_LABEL, zero_division=0)),
        "recall": float(recall_score(y_true, predicted, pos_label=SPAM_LABEL, zero_division=0)),
        "f1": float(f1_score(y_true, predicted, pos_label=SPAM_LABEL, zero_division=0)),
        "rows": float(len(y_true)),
    }


def export_model(
    model: Pipeline,
    model_path: Path,
    *,
    model_type: str,
    samples: Sequence[str],
    labels: Sequence[str],
) -> dict[str, Any]:
    metadata_path = model_path.with_name("metadata.json")
    metrics_path = model_path.with_name("metrics.json")
    metrics = training_metrics(model, samples, labels)
    frame = to_dataframe(samples, labels)
    label_counts = frame["label"].value_counts()
    metadata = {
        "model_version": _timestamp_key(),
        "model_type": model_type,
        "rows_total": int(len(frame)),
        "rows_unique": int(len(frame.drop_duplicates())),
        "labels_spam": int(label_counts.get(SPAM_LABEL, 0)),
        "labels_ham": int(label_counts.get(HAM_LABEL, 0)),
        "created_at_utc": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
    }
    try:
        model_path.parent.mkdir(parents=True, exist_ok=True)
        joblib.dump(model, model_path)
        metadata_path.write_text(json.dumps(metadata, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        metrics_path.write_text(json.dumps(metrics, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot save model artifact ({exc})", path=model_path) from exc
    return {
        "metrics": metrics,
        "metadata": metadata,
        "paths": {
            "model": str(model_path),
            "metadata": str(metadata_path),
            "metrics": str(metrics_path),
        },
    }
