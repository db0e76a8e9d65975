# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Spam doctor package."""

from .doctor import SpamDoctor, load_doctor, open_doctor
from .errors import ClassifierError, SpamDoctorError, StorageError, ValidationError
from .schemas import DetectionResult, MatchRecord, TrainingSample
from .settings import DoctorSettings

__all__ = [
    "SpamDoctor",
    "open_doctor",
    "load_doctor",
    "DoctorSettings",
    "DetectionResult",
    "MatchRecord",
    "TrainingSample",
    "SpamDoctorError",
    "ValidationError",
    "ClassifierError",
    "StorageError",
]
