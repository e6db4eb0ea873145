#!/usr/bin/env python3
"""Slidoku — daily magic-square sliding puzzle.

Usage::

    slidoku                                   # interactive menu, today's puzzle
    slidoku -d 2025-09-01 -l Hard             # a given day and difficulty
    slidoku --show -d 2025-09-01 -l Medium    # print the puzzle as JSON
    slidoku --scores                          # view best scores
"""

from __future__ import annotations

import json
from datetime import date as _date
from datetime import datetime
from typing import Optional

import typer
from rich.console import Console

from slidoku.config import DATA_DIR, LOG_LEVEL
from slidoku.engine.gamegenerator import PuzzleGenerator, daily_seed
from slidoku.log import configure_logging

console = Console()


# -- helpers ------------------------------------------------------------------


def _parse_date(value: Optional[str]) -> str:
    if value is None:
        return daily_seed(_date.today())
    try:
        return daily_seed(datetime.strptime(value, "%Y-%m-%d").date())
    except ValueError as exc:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {value!r}.") from exc


def _print_scores() -> None:
    from slidoku.frontend.cli.rich.app import render_scores_table
    from slidoku.models.highscore import BestScores, open_store

    scores = BestScores(open_store(DATA_DIR / "scores.json"))
    console.print("\n  [bold]=== BEST SCORES ===[/bold]\n")
    console.print(render_scores_table(scores))
    console.print()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    day: Optional[str] = typer.Option(
        None, "-d", "--date",
        help="Puzzle date (YYYY-MM-DD). Defaults to today.",
    ),
    difficulty: str = typer.Option(
        "Easy", "-l", "--difficulty",
        help="Easy, Medium or Hard.",
    ),
    show: bool = typer.Option(
        False, "--show",
        help="Print the puzzle descriptor as JSON and exit.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show best scores and exit.",
    ),
    log_level: str = typer.Option(
        LOG_LEVEL, "--log-level",
        help="Loguru level (DEBUG, INFO, WARNING…).",
    ),
) -> None:
    """Slidoku — slide tiles until every row and column sums to 30."""
    seed_key = _parse_date(day)

    if show:
        configure_logging(log_level.upper())
        puzzle = PuzzleGenerator.generate_puzzle(seed_key, difficulty)
        typer.echo(json.dumps(puzzle.to_dict(), indent=2))
        return

    # Keep log lines off the TUI; stderr only if the data dir is unusable.
    try:
        DATA_DIR.mkdir(parents=True, exist_ok=True)
        configure_logging(log_level.upper(), sink=DATA_DIR / "slidoku.log")
    except OSError:
        configure_logging(log_level.upper())

    if scores:
        _print_scores()
        return

    from slidoku.frontend.cli.rich.app import run

    run(seed_key=seed_key, difficulty=difficulty, data_dir=DATA_DIR)


if __name__ == "__main__":
    app()
