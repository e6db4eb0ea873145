"""Immutable puzzle descriptor handed from the generator to the UI."""

from __future__ import annotations

from dataclasses import dataclass

from slidoku.config import BOARD_SIZE, TARGET_SUM
from slidoku.models.board import Board, Position

Grid = tuple[tuple[int, ...], ...]


def freeze(tiles: list[list[int]]) -> Grid:
    return tuple(tuple(row) for row in tiles)


@dataclass(frozen=True)
class PuzzleDescriptor:
    """Everything a session needs to start playing one puzzle.

    Boards are stored as nested tuples; use ``initial_tiles()`` /
    ``target_tiles()`` to get mutable copies for play state.
    """

    initial_board: Grid
    target_board: Grid
    fixed_tiles: tuple[Position, ...]
    empty_tile: Position
    allow_revealing: bool
    difficulty: str
    puzzle_number: int
    size: int = BOARD_SIZE
    target_sum: int = TARGET_SUM

    def initial_tiles(self) -> list[list[int]]:
        return [list(row) for row in self.initial_board]

    def target_tiles(self) -> list[list[int]]:
        return [list(row) for row in self.target_board]

    def initial(self) -> Board:
        return Board(tiles=self.initial_tiles(), blank_pos=self.empty_tile, size=self.size)

    def target(self) -> Board:
        return Board.from_rows(self.target_board)

    def to_dict(self) -> dict:
        return {
            "size": self.size,
            "initial_board": self.initial_tiles(),
            "target_board": self.target_tiles(),
            "fixed_tiles": [{"row": r, "col": c} for r, c in self.fixed_tiles],
            "empty_tile": {"row": self.empty_tile[0], "col": self.empty_tile[1]},
            "target_sum": self.target_sum,
            "allow_revealing": self.allow_revealing,
            "difficulty": self.difficulty,
            "puzzle_number": self.puzzle_number,
        }
