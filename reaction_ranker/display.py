"""Console output for the ranking run."""

from __future__ import annotations

from typing import IO, Optional

from rich.console import Console

from .types import ScoreEntry


def make_console(file: Optional[IO[str]] = None) -> Console:
    # soft_wrap keeps every message on one physical line regardless of width
    return Console(file=file, highlight=False, emoji=False, soft_wrap=True)


console = make_console()


def format_rank_line(position: int, entry: ScoreEntry) -> str:
    return f"#{position} – {entry.issue_number} with {entry.score} upvotes!"


def print_fetched_count(count: int, out: Console = console) -> None:
    out.print(f"Fetched {count} issues!", markup=False)


def print_gathering(issue_number: int, out: Console = console) -> None:
    out.print(f"Gathering reactions for issue: {issue_number}", markup=False)


def print_ranking(entries: list[ScoreEntry], out: Console = console) -> None:
    """Blank separator line, then one 1-based line per ranked issue."""
    out.print()
    for position, entry in enumerate(entries, start=1):
        out.print(format_rank_line(position, entry), markup=False)
