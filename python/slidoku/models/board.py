"""Board model for the Slidoku puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from slidoku.config import BOARD_SIZE, TARGET_SUM

Position = tuple[int, int]


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the 4×4 Slidoku board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    """

    tiles: list[list[int]]
    blank_pos: Position
    size: int = BOARD_SIZE

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[int], size: int = BOARD_SIZE) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([15, 1, 2, 12, 4, 10, 9, 7, 8, 6, 5, 11, 3, 13, 14, 0])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows([flat[r * size : (r + 1) * size] for r in range(size)])

    @classmethod
    def from_rows(cls, rows) -> Board:
        """Copy any 2D int sequence into a new board and locate the blank."""
        tiles = [list(row) for row in rows]
        blank_pos: Position = (0, 0)
        for r, row in enumerate(tiles):
            for c, v in enumerate(row):
                if v == 0:
                    blank_pos = (r, c)
        return cls(tiles=tiles, blank_pos=blank_pos, size=len(tiles))

    # -- queries --------------------------------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.size and 0 <= c < self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def find(self, value: int) -> Position | None:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == value:
                    return (r, c)
        return None

    def row_sums(self) -> list[int]:
        return [sum(row) for row in self.tiles]

    def col_sums(self) -> list[int]:
        return [sum(row[c] for row in self.tiles) for c in range(self.size)]

    def is_solved(self, target_sum: int = TARGET_SUM) -> bool:
        """Check that every row and every column adds up to *target_sum*."""
        return all(s == target_sum for s in self.row_sums()) and all(
            s == target_sum for s in self.col_sums()
        )

    def as_lists(self) -> list[list[int]]:
        return [row[:] for row in self.tiles]

    def copy(self) -> Board:
        return Board(
            tiles=self.as_lists(),
            blank_pos=self.blank_pos,
            size=self.size,
        )

    # -- mutation -------------------------------------------------------------

    def swap_blank(self, target: Position) -> None:
        """Swap the blank with the tile at *target* (no legality checks)."""
        br, bc = self.blank_pos
        tr, tc = target
        self.tiles[br][bc], self.tiles[tr][tc] = (
            self.tiles[tr][tc],
            self.tiles[br][bc],
        )
        self.blank_pos = (tr, tc)
