"""Core gameplay logic — processes moves and checks the win condition."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from slidoku.engine.gamegenerator import PuzzleGenerator
from slidoku.engine.gameplay.rules import chain_moves, check_win, is_adjacent
from slidoku.engine.gamestate import GameState
from slidoku.models.board import Direction, Position
from slidoku.models.puzzle import PuzzleDescriptor

log = logger.bind(component="gameplay")


@dataclass(frozen=True)
class MoveResult:
    applied: bool
    solved: bool = False


class GamePlay:
    """Orchestrates a single game session.

    Moves take effect immediately; any slide animation is the caller's
    business and happens after the result comes back.
    """

    def __init__(self, seed_key: str, difficulty: str) -> None:
        self.seed_key = seed_key
        self.difficulty = difficulty
        self.puzzle = PuzzleGenerator.generate_puzzle(seed_key, difficulty)
        self.state = GameState(self.puzzle)

    @classmethod
    def from_puzzle(cls, puzzle: PuzzleDescriptor, seed_key: str = "") -> "GamePlay":
        """Create a session from an existing descriptor (e.g. in tests)."""
        obj = object.__new__(cls)
        obj.seed_key = seed_key
        obj.difficulty = puzzle.difficulty
        obj.puzzle = puzzle
        obj.state = GameState(puzzle)
        return obj

    # -- movement -------------------------------------------------------------

    def attempt_move(self, target: Position) -> MoveResult:
        """Slide the tile at *target* into the blank.

        Rejected (no state change) unless *target* is on the board, next
        to the blank, and neither cell is fixed.
        """
        board = self.state.board
        empty = board.blank_pos

        if not board.in_bounds(target):
            log.debug("Rejected move {}: off the board", target)
            return MoveResult(applied=False)
        if not is_adjacent(target, empty):
            log.debug("Rejected move {}: not adjacent to blank {}", target, empty)
            return MoveResult(applied=False)
        if self.state.is_fixed(target) or self.state.is_fixed(empty):
            log.debug("Rejected move {}: fixed tile", target)
            return MoveResult(applied=False)

        board.swap_blank(target)
        self.state.increment_moves()
        return MoveResult(applied=True, solved=check_win(board, self.state.target_sum))

    def attempt_chain_move(self, clicked: Position) -> list[Position]:
        """Slide every tile between *clicked* and the blank, or nothing.

        Returns the tile positions moved, nearest to the blank first.  A
        refused step ends the slide; only the steps already applied are
        returned.
        """
        board = self.state.board
        plan = chain_moves(clicked, board.blank_pos, self.state.fixed_tiles, board.size)
        moved: list[Position] = []
        for pos in plan:
            # Each planned step is adjacent to the blank left by the previous one.
            if not self.attempt_move(pos).applied:
                log.warning("Chain move {} stopped at {}", clicked, pos)
                break
            moved.append(pos)
        return moved

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        br, bc = self.state.board.blank_pos

        # The offset points to the tile that will slide into the blank.
        offsets = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }
        dr, dc = offsets[direction]
        tr, tc = br + dr, bc + dc

        if not self.state.board.in_bounds((tr, tc)):
            return False

        return self.attempt_move((tr, tc)).applied

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return check_win(self.state.board, self.state.target_sum)
