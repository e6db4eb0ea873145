"""Game-wide constants and environment-driven settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import typer

APP_NAME = "slidoku"


def resolve_data_dir(environ: Mapping[str, str] = os.environ) -> Path:
    """``$SLIDOKU_DATA_DIR`` if set, else the per-user app directory."""
    override = environ.get("SLIDOKU_DATA_DIR")
    if override:
        return Path(override).expanduser()
    return Path(typer.get_app_dir(APP_NAME))


DATA_DIR = resolve_data_dir()
LOG_LEVEL = os.environ.get("SLIDOKU_LOG_LEVEL", "INFO").upper()

# -- board --------------------------------------------------------------------

BOARD_SIZE = 4
TARGET_SUM = 30
CENTER_CELLS: tuple[tuple[int, int], ...] = ((1, 1), (1, 2), (2, 1), (2, 2))

# -- generation ---------------------------------------------------------------

SHUFFLE_MOVES = 1000
PUZZLE_NUMBER_RANGE = 10000

# -- hints --------------------------------------------------------------------

HINT_HISTORY_WINDOW = 20
HINT_REPEAT_PENALTY = 1000
