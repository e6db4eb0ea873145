"""Pure move rules: adjacency, chain planning and the win test."""

from __future__ import annotations

from collections.abc import Collection

from slidoku.config import BOARD_SIZE, TARGET_SUM
from slidoku.models.board import Board, Position


def is_adjacent(a: Position, b: Position) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def check_win(board: Board, target_sum: int = TARGET_SUM) -> bool:
    """True iff all row sums and all column sums equal *target_sum*."""
    return board.is_solved(target_sum)


def chain_moves(
    clicked: Position,
    empty: Position,
    fixed_tiles: Collection[Position],
    size: int = BOARD_SIZE,
) -> list[Position]:
    """Plan a multi-tile slide from *clicked* toward *empty*.

    Returns the tile positions to move one at a time, nearest to the
    blank first.  Returns ``[]`` when *clicked* is off the board, is not
    in line with the blank, is the blank, or when any fixed tile sits in
    the span.
    """
    cr, cc = clicked
    er, ec = empty
    if not (0 <= cr < size and 0 <= cc < size):
        return []
    if clicked == empty or (cr != er and cc != ec):
        return []

    if cr == er:
        step = 1 if cc > ec else -1
        span = [(er, c) for c in range(ec + step, cc + step, step)]
    else:
        step = 1 if cr > er else -1
        span = [(r, ec) for r in range(er + step, cr + step, step)]

    if any(pos in fixed_tiles for pos in span):
        return []
    return span
