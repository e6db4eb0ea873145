"""One-ply hint search.

This is a greedy heuristic, not a solver: it can stall or cycle, and
callers should present its answer as advice only.
"""

from __future__ import annotations

from collections.abc import Collection

from loguru import logger

from slidoku.config import HINT_REPEAT_PENALTY, TARGET_SUM
from slidoku.engine.gameplay import GamePlay
from slidoku.models.board import Board, Position

log = logger.bind(component="solver")


class Solver:
    """Stateless hint search — all methods are static."""

    @staticmethod
    def find_best_move(
        board: Board,
        target: Board,
        empty: Position,
        fixed_tiles: Collection[Position],
        recent_history: Collection[Position] = (),
        target_sum: int = TARGET_SUM,
    ) -> Position | None:
        """Return the neighbor of *empty* whose tile is best to slide next.

        Each candidate scores the displaced tile's Manhattan-distance gain
        toward its target cell, minus the total row/column sum deviation
        after the slide, minus a large penalty if it was hinted recently.
        Ties go to the first candidate in up, down, left, right order.
        """
        er, ec = empty
        best: Position | None = None
        best_score = float("-inf")

        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            pos = (er + dr, ec + dc)
            if not (0 <= pos[0] < board.size and 0 <= pos[1] < board.size):
                continue
            if pos in fixed_tiles:
                continue

            value = board.get_tile(*pos)
            home = target.find(value)
            gain = 0
            if home is not None:
                before = abs(pos[0] - home[0]) + abs(pos[1] - home[1])
                after = abs(er - home[0]) + abs(ec - home[1])
                gain = before - after

            trial = board.copy()
            trial.blank_pos = empty
            trial.swap_blank(pos)
            deviation = sum(abs(s - target_sum) for s in trial.row_sums()) + sum(
                abs(s - target_sum) for s in trial.col_sums()
            )

            score = gain - deviation
            if pos in recent_history:
                score -= HINT_REPEAT_PENALTY

            if score > best_score:
                best_score = score
                best = pos

        return best

    @staticmethod
    def hint(game: GamePlay) -> Position | None:
        """Suggest the next tile to slide for *game*, or ``None``.

        The suggestion is remembered so repeated hints do not bounce
        between the same two cells.
        """
        state = game.state
        if game.is_won:
            return None

        move = Solver.find_best_move(
            state.board,
            state.target,
            state.board.blank_pos,
            state.fixed_tiles,
            state.hint_history,
            state.target_sum,
        )
        if move is None:
            log.info("No legal hint from blank {}", state.board.blank_pos)
            return None

        state.hint_history.append(move)
        return move
