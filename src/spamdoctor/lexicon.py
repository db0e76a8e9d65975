# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

from .errors import ValidationError
from .files import exclusive_lock, read_text, write_text_atomic

LOGGER = logging.getLogger(__name__)

SEPARATOR = ","


def _parse_terms(raw: str) -> list[str]:
    terms: list[str] = []
    seen: set[str] = set()
    for item in raw.split(SEPARATOR):
        term = item.strip()
        if not term or term in seen:
            continue
        seen.add(term)
        terms.append(term)
    return terms


def flatten_terms(data: Any) -> Iterator[str]:
    """Yield every leaf of an arbitrarily nested list/dict structure, depth first."""
    stack: list[Any] = [iter([data])]
    while stack:
        try:
            value = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        if isinstance(value, dict):
            stack.append(iter(value.values()))
        elif isinstance(value, (list, tuple)):
            stack.append(iter(value))
        elif value is None or isinstance(value, bool):
            continue
        elif isinstance(value, (str, int, float)):
            yield str(value)


def parse_term_data(data: Any) -> Any:
    if data is None or (isinstance(data, (str, bytes, list, tuple, dict)) and not data):
        raise ValidationError("Please provide data in json string format")
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid JSON data: {exc.msg}") from exc
        except RecursionError as exc:
            raise ValidationError("Invalid JSON data: nesting too deep") from exc
    if not isinstance(data, (list, tuple, dict)):
        raise ValidationError("Term data must be a list of terms")
    if not data:
        raise ValidationError("Term data is empty")
    return data


class SpamLexicon:
    """Comma separated, deduplicated list of spam terms kept in a flat file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def items(self) -> list[str]:
        return _parse_terms(read_text(self.path))

    def terms(self) -> set[str]:
        return set(self.items())

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and term.strip() in self.terms()

    def ensure(self) -> None:
        if not self.path.exists():
            write_text_atomic(self.path, "")

    def add(self, term: str) -> bool:
        return bool(self.add_many([term]))

    def add_many(self, terms: Iterable[str]) -> list[str]:
        wanted: list[str] = []
        for raw in terms:
            term = str(raw or "").strip()
            if not term:
                continue
            if SEPARATOR in term:
                LOGGER.debug("Refusing lexicon term containing %r: %s", SEPARATOR, term)
                continue
            wanted.append(term)
        if not wanted:
            return []

        with exclusive_lock(self.path):
            current = self.items()
            known = set(current)
            added: list[str] = []
            for term in wanted:
                if term in known:
                    continue
                known.add(term)
                current.append(term)
                added.append(term)
            if added:
                write_text_atomic(self.path, SEPARATOR.join(current))
        if added:
            LOGGER.debug("Lexicon grew by %d term(s): %s", len(added), ", ".join(added))
        return added

    def teach(self, data: Any) -> int:
        return len(self.add_many(flatten_terms(parse_term_data(data))))
