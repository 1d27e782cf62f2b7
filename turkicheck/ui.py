#!/usr/bin/env python3
"""
Terminal Output
===============
Rich tables for verdicts, alphabets and batch summaries.
"""

from typing import Iterable, Optional, Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from turkicheck.aggregator import AggregationResult
from turkicheck.alphabet import Alphabet
from turkicheck.classifier import Verdict


def verdict_table(rows: Iterable[Tuple[str, Alphabet, Verdict]]) -> Table:
    """Table of word, alphabet and verdict."""
    table = Table(box=box.SIMPLE)
    table.add_column("Word", style="bold")
    table.add_column("Alphabet")
    table.add_column("Valid", justify="center")
    table.add_column("Reason")

    for word, alphabet, verdict in rows:
        mark = Text("yes", style="green") if verdict.valid else Text("no", style="red")
        table.add_row(word, alphabet.value, mark, verdict.reason)
    return table


def alphabet_table(rows: Iterable[Tuple[str, Alphabet]]) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("Word", style="bold")
    table.add_column("Alphabet")
    for word, alphabet in rows:
        style = "" if alphabet.is_script else "yellow"
        table.add_row(word, Text(alphabet.value, style=style))
    return table


def summary_table(result: AggregationResult) -> Table:
    """Per-reason counts for a batch run."""
    table = Table(box=box.SIMPLE, show_footer=True)
    table.add_column("Reason", footer="total")
    table.add_column("Words", justify="right", footer=str(result.total))

    table.add_row(Text("valid", style="green"), str(len(result.correct)))
    for reason, count in result.reason_counts().most_common():
        table.add_row(Text(reason, style="red"), str(count))
    return table


def print_summary(result: AggregationResult,
                  paths: Optional[Tuple] = None,
                  console: Optional[Console] = None):
    console = console or Console()
    console.print(summary_table(result))
    if result.duplicates:
        console.print(f"{len(result.duplicates)} duplicate word(s) in input", style="yellow")
    if paths:
        for path in paths:
            console.print(f"Wrote {path}", style="dim", soft_wrap=True)
