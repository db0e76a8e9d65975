# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .schemas import DetectionResult

ASCII_BANNER = r"""
 ___                    ___            _
/ __|_ __  __ _ _ __   |   \ ___  __ _| |_ ___ _ _
\__ \ '_ \/ _` | '  \  | |) / _ \/ _|  _/ _ \ '_|
|___/ .__/\__,_|_|_|_| |___/\___/\__|\__\___/_|
    |_|
"""


@dataclass
class MLConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True) if self.enabled else None

    def banner(self) -> None:
        if self._console:
            self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="Spam Doctor", border_style="red"))
            return
        print(ASCII_BANNER)

    def info(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold cyan]INFO[/bold cyan] {escape(text)}")
        else:
            print(f"[INFO] {text}")

    def warn(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}")
        else:
            print(f"[WARN] {text}")

    def success(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold green]OK[/bold green] {escape(text)}")
        else:
            print(f"[OK] {text}")

    def stats_table(self, stats: dict[str, Any], *, title: str) -> None:
        if self._console:
            table = Table(title=title, show_lines=True)
            table.add_column("Metric", style="bold")
            table.add_column("Value", justify="right")
            for key in sorted(stats.keys()):
                table.add_row(key, _format_value(stats[key]))
            self._console.print(table)
            return

        print(title)
        for key in sorted(stats.keys()):
            print(f"- {key}: {_format_value(stats[key])}")

    def detection_report(self, result: DetectionResult) -> None:
        verdict = "SPAM" if result.is_spam_by_classifier else "HAM"
        self.stats_table(
            {
                "verdict": verdict,
                "ml_probability": result.ml_probability,
                "combined_score": result.combined_score,
                "lexicon_matches": len(result.matches),
            },
            title="Detection",
        )
        if result.matches:
            if self._console:
                table = Table(title="Lexicon hits")
                table.add_column("Term", style="bold red")
                table.add_column("Count", justify="right")
                for match in result.matches:
                    table.add_row(escape(match.term), str(match.count))
                self._console.print(table)
            else:
                for match in result.matches:
                    print(f"- {match.term}: {match.count}")
        if result.learned_terms:
            self.info(f"learned terms: {', '.join(result.learned_terms)}")
        self.info(f"highlighted: {result.highlighted_plain}")


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.4f}"
    return escape(str(value))
