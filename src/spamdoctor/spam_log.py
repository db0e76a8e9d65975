# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path

from .files import append_line_locked, read_text
from .schemas import SpamLogEntry

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
ENTRY_RE = re.compile(r"^\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] ?(.*)$")


def _timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class SpamLog:
    def __init__(self, path: Path) -> None:
        self.path = path

    def record(self, text: str) -> SpamLogEntry:
        entry = SpamLogEntry(timestamp=_timestamp(), text=str(text))
        append_line_locked(self.path, f"[{entry.timestamp}] {entry.text}")
        return entry

    def entries(self) -> list[SpamLogEntry]:
        rows: list[SpamLogEntry] = []
        for line in read_text(self.path).splitlines():
            match = ENTRY_RE.match(line)
            if match:
                rows.append(SpamLogEntry(timestamp=match.group(1), text=match.group(2)))
            elif rows:
                # Continuation of a multi-line message.
                last = rows[-1]
                rows[-1] = SpamLogEntry(timestamp=last.timestamp, text=f"{last.text}\n{line}")
        return rows
