"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from collections import deque

from slidoku.config import HINT_HISTORY_WINDOW
from slidoku.models.board import Board, Position
from slidoku.models.puzzle import PuzzleDescriptor


class GameState:
    """Holds the live board, move counter, hint history and elapsed time.

    The descriptor stays frozen; only ``board`` is ever mutated.
    """

    def __init__(self, puzzle: PuzzleDescriptor) -> None:
        self.puzzle = puzzle
        self.board: Board = puzzle.initial()
        self.target: Board = puzzle.target()
        self.fixed_tiles: frozenset[Position] = frozenset(puzzle.fixed_tiles)
        self.target_sum: int = puzzle.target_sum
        self.moves: int = 0
        self.hint_history: deque[Position] = deque(maxlen=HINT_HISTORY_WINDOW)
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def is_fixed(self, pos: Position) -> bool:
        return pos in self.fixed_tiles

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved(self.target_sum)
