"""Shared fixtures for the slidoku test suite."""

from __future__ import annotations

import pytest
from loguru import logger

from slidoku.engine.gamegenerator import MAGIC_SEEDS
from slidoku.models.board import Board, Position
from slidoku.models.puzzle import PuzzleDescriptor, freeze


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


def _make_puzzle(
    rows,
    fixed: tuple[Position, ...] = (),
    target=MAGIC_SEEDS[0],
    difficulty: str = "Easy",
) -> PuzzleDescriptor:
    """Build a descriptor around a hand-written board."""
    board = Board.from_rows(rows)
    return PuzzleDescriptor(
        initial_board=freeze(board.tiles),
        target_board=freeze([list(r) for r in target]),
        fixed_tiles=tuple(fixed),
        empty_tile=board.blank_pos,
        allow_revealing=True,
        difficulty=difficulty,
        puzzle_number=0,
    )


@pytest.fixture
def make_puzzle():
    return _make_puzzle
