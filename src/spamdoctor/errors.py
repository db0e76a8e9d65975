# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations


class SpamDoctorError(Exception):
    pass


class ValidationError(SpamDoctorError, ValueError):
    """Caller supplied input the detector refuses to work with."""


class ClassifierError(SpamDoctorError):
    """Training or prediction failed inside a classifier adapter."""


class StorageError(SpamDoctorError, OSError):
    """A persisted store could not be read or written."""

    def __init__(self, message: str, *, path: object = None) -> None:
        super().__init__(f"{message}: {path}" if path is not None else message)
        self.path = path
