"""Move engine: adjacency, single and chain moves, win detection."""

from __future__ import annotations

import random

import pytest

from slidoku.engine.gamegenerator import MAGIC_SEEDS
from slidoku.engine.gameplay import (
    GamePlay,
    MoveResult,
    chain_moves,
    check_win,
    is_adjacent,
)
from slidoku.models.board import Board, Direction

SOLVED = [list(row) for row in MAGIC_SEEDS[0]]  # blank at (3, 3)


# -- helpers ------------------------------------------------------------------


def _one_off() -> list[list[int]]:
    """The solved square with its blank slid one cell left."""
    rows = [row[:] for row in SOLVED]
    rows[3][2], rows[3][3] = rows[3][3], rows[3][2]
    return rows


# -- pure rules ---------------------------------------------------------------


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((0, 0), (0, 1), True),
        ((2, 1), (1, 1), True),
        ((0, 0), (1, 1), False),
        ((0, 0), (0, 2), False),
        ((3, 3), (3, 3), False),
    ],
)
def test_is_adjacent(a, b, expected: bool) -> None:
    assert is_adjacent(a, b) is expected


def test_check_win_on_magic_square() -> None:
    assert check_win(Board.from_rows(SOLVED))


def test_check_win_rejects_row_off_by_one() -> None:
    rows = [row[:] for row in SOLVED]
    rows[2][0] += 1
    assert not check_win(Board.from_rows(rows))


def test_check_win_rejects_column_mismatch() -> None:
    assert not check_win(Board.from_rows(_one_off()))


def test_chain_blocked_by_fixed_tile_in_span() -> None:
    # Row [X, Y, Z, blank] with Y fixed: clicking X does nothing.
    assert chain_moves((3, 0), (3, 3), {(3, 1)}) == []


def test_chain_plans_nearest_first() -> None:
    assert chain_moves((3, 0), (3, 3), set()) == [(3, 2), (3, 1), (3, 0)]
    assert chain_moves((0, 3), (3, 3), set()) == [(2, 3), (1, 3), (0, 3)]
    assert chain_moves((1, 2), (1, 0), set()) == [(1, 1), (1, 2)]


def test_chain_needs_shared_line() -> None:
    assert chain_moves((0, 0), (3, 3), set()) == []
    assert chain_moves((3, 3), (3, 3), set()) == []


# -- session moves ------------------------------------------------------------


def test_adjacent_move_applies(make_puzzle) -> None:
    game = GamePlay.from_puzzle(make_puzzle(SOLVED))
    result = game.attempt_move((2, 3))

    assert result.applied
    assert not result.solved
    assert game.state.board.blank_pos == (2, 3)
    assert game.state.board.tiles[3][3] == 11
    assert game.state.moves == 1


def test_non_adjacent_move_is_a_no_op(make_puzzle) -> None:
    game = GamePlay.from_puzzle(make_puzzle(SOLVED))
    result = game.attempt_move((0, 0))

    assert not result.applied
    assert game.state.board.as_lists() == SOLVED
    assert game.state.moves == 0


def test_move_onto_fixed_tile_is_rejected(make_puzzle) -> None:
    game = GamePlay.from_puzzle(make_puzzle(SOLVED, fixed=((3, 2),)))
    assert not game.attempt_move((3, 2)).applied
    assert game.state.moves == 0


def test_win_reported_by_completing_move(make_puzzle) -> None:
    game = GamePlay.from_puzzle(make_puzzle(_one_off()))
    assert not game.is_won

    result = game.attempt_move((3, 3))
    assert result.applied and result.solved
    assert game.is_won


def test_chain_move_slides_whole_run(make_puzzle) -> None:
    game = GamePlay.from_puzzle(make_puzzle(SOLVED))
    moved = game.attempt_chain_move((3, 0))

    assert moved == [(3, 2), (3, 1), (3, 0)]
    assert game.state.board.tiles[3] == [0, 3, 13, 14]
    assert game.state.board.blank_pos == (3, 0)
    assert game.state.moves == 3


def test_chain_move_is_all_or_nothing(make_puzzle) -> None:
    game = GamePlay.from_puzzle(make_puzzle(SOLVED, fixed=((3, 1),)))
    assert game.attempt_chain_move((3, 0)) == []
    assert game.state.board.as_lists() == SOLVED
    assert game.state.moves == 0


# Each square has its blank on an edge, so the off-board cell next to it
# is one step away.
OFF_BOARD = [
    (MAGIC_SEEDS[1], (-1, 1)),  # blank (0, 1)
    (MAGIC_SEEDS[4], (3, -1)),  # blank (3, 0)
    (MAGIC_SEEDS[0], (4, 3)),  # blank (3, 3)
    (MAGIC_SEEDS[0], (3, 4)),
    (MAGIC_SEEDS[0], (3, 5)),
]


@pytest.mark.parametrize("square, cell", OFF_BOARD)
def test_off_board_move_is_rejected(make_puzzle, square, cell) -> None:
    rows = [list(row) for row in square]
    game = GamePlay.from_puzzle(make_puzzle(rows))
    blank = game.state.board.blank_pos

    result = game.attempt_move(cell)

    assert not result.applied
    assert game.state.board.as_lists() == rows
    assert game.state.board.blank_pos == blank
    assert game.state.moves == 0


@pytest.mark.parametrize(
    "square, cell",
    OFF_BOARD + [(MAGIC_SEEDS[1], (-3, 1)), (MAGIC_SEEDS[0], (6, 3))],
)
def test_off_board_chain_move_is_rejected(make_puzzle, square, cell) -> None:
    rows = [list(row) for row in square]
    game = GamePlay.from_puzzle(make_puzzle(rows))
    blank = game.state.board.blank_pos

    assert chain_moves(cell, blank, set()) == []
    assert game.attempt_chain_move(cell) == []
    assert game.state.board.as_lists() == rows
    assert game.state.board.blank_pos == blank
    assert game.state.moves == 0


def test_chain_move_returns_only_applied_steps(make_puzzle, monkeypatch) -> None:
    game = GamePlay.from_puzzle(make_puzzle(SOLVED))
    real_attempt = game.attempt_move
    monkeypatch.setattr(
        game,
        "attempt_move",
        lambda pos: MoveResult(applied=False) if pos == (3, 1) else real_attempt(pos),
    )

    moved = game.attempt_chain_move((3, 0))

    assert moved == [(3, 2)]
    assert game.state.board.blank_pos == (3, 2)
    assert game.state.moves == 1


def test_keyboard_direction_moves(make_puzzle) -> None:
    game = GamePlay.from_puzzle(make_puzzle(SOLVED))
    assert not game.move(Direction.LEFT)  # nothing right of the blank
    assert game.move(Direction.RIGHT)
    assert game.state.board.blank_pos == (3, 2)


def test_generated_session_starts_from_descriptor() -> None:
    game = GamePlay("2025-09-01", "Hard")
    assert game.state.board.as_lists() == game.puzzle.initial_tiles()
    game.attempt_chain_move((0, game.state.board.blank_pos[1]))
    # The descriptor never changes, whatever happens to the live board.
    assert GamePlay("2025-09-01", "Hard").puzzle == game.puzzle


@pytest.mark.parametrize("level", ["Easy", "Medium", "Hard"])
def test_fixed_tiles_survive_random_play(level: str) -> None:
    game = GamePlay("2025-09-01", level)
    fixed = {pos: game.state.board.get_tile(*pos) for pos in game.puzzle.fixed_tiles}
    rnd = random.Random(level)

    for _ in range(2000):
        cell = (rnd.randrange(4), rnd.randrange(4))
        if rnd.random() < 0.5:
            game.attempt_move(cell)
        else:
            game.attempt_chain_move(cell)
        assert game.state.board.blank_pos not in fixed
        for (r, c), value in fixed.items():
            assert game.state.board.tiles[r][c] == value


def test_board_from_flat_locates_blank() -> None:
    flat = [v for row in SOLVED for v in row]
    board = Board.from_flat(flat)
    assert board.blank_pos == (3, 3)
    assert board.as_lists() == SOLVED


def test_board_from_flat_rejects_wrong_length() -> None:
    with pytest.raises(ValueError, match="Expected 16 tiles"):
        Board.from_flat(list(range(15)))
