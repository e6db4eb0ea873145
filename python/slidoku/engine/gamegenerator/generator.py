"""Generates reproducible, solvable Slidoku puzzles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from loguru import logger

from slidoku.config import (
    BOARD_SIZE,
    CENTER_CELLS,
    PUZZLE_NUMBER_RANGE,
    SHUFFLE_MOVES,
    TARGET_SUM,
)
from slidoku.engine.gamegenerator.catalog import MAGIC_SEEDS
from slidoku.engine.gamegenerator.transform import apply_random_transformations
from slidoku.engine.prng import SeededRandom
from slidoku.models.board import Board, Position
from slidoku.models.difficulty import resolve_profile
from slidoku.models.puzzle import PuzzleDescriptor, freeze

log = logger.bind(component="generator")


@dataclass
class ShuffleResult:
    board: Board
    empty_tile: Position
    # Cells the blank vacated, in order; replay backwards to undo.
    trail: list[Position] = field(default_factory=list)
    skipped: int = 0


def daily_seed(day: date) -> str:
    return day.strftime("%Y-%m-%d")


class PuzzleGenerator:
    """Creates solvable puzzles by shuffling from a magic-square target.

    All methods are static and take the PRNG explicitly, so two calls
    never share random state.
    """

    @staticmethod
    def generate_puzzle(seed_key: str, difficulty: str) -> PuzzleDescriptor:
        """Return the puzzle for (*seed_key*, *difficulty*).

        Same inputs, same puzzle: this is what makes the daily puzzle.
        """
        rng = SeededRandom(f"{seed_key}-{difficulty}")
        profile = resolve_profile(difficulty)
        puzzle_number = rng.next_int(0, PUZZLE_NUMBER_RANGE)

        target = PuzzleGenerator.generate_board(rng)
        fixed_tiles = PuzzleGenerator.randomize_fixed_tiles(
            target, profile.number_of_fixed_tiles, rng
        )
        shuffled = PuzzleGenerator.shuffle_board(
            target,
            fixed_tiles,
            rng,
            moves=SHUFFLE_MOVES,
            preserve_one_edge=profile.preserve_one_edge,
        )

        log.info(
            "Generated puzzle #{} for {} {} (fixed={}, skipped steps={})",
            puzzle_number,
            seed_key,
            difficulty,
            fixed_tiles,
            shuffled.skipped,
        )
        return PuzzleDescriptor(
            initial_board=freeze(shuffled.board.tiles),
            target_board=freeze(target.tiles),
            fixed_tiles=tuple(fixed_tiles),
            empty_tile=shuffled.empty_tile,
            allow_revealing=profile.allow_revealing,
            difficulty=difficulty,
            puzzle_number=puzzle_number,
            size=BOARD_SIZE,
            target_sum=TARGET_SUM,
        )

    @staticmethod
    def generate_board(rng: SeededRandom) -> Board:
        """Pick a catalog square and return a transformed copy (the target)."""
        base = MAGIC_SEEDS[rng.next_int(0, len(MAGIC_SEEDS))]
        grid = apply_random_transformations([list(row) for row in base], rng)
        return Board.from_rows(grid)

    @staticmethod
    def randomize_fixed_tiles(board: Board, count: int, rng: SeededRandom) -> list[Position]:
        """Choose *count* center cells (never the blank) to lock in place."""
        candidates = [pos for pos in CENTER_CELLS if board.get_tile(*pos) != 0]
        return rng.shuffle_copy(candidates)[:count]

    @staticmethod
    def shuffle_board(
        board: Board,
        fixed_tiles: list[Position],
        rng: SeededRandom,
        moves: int = SHUFFLE_MOVES,
        preserve_one_edge: bool = False,
    ) -> ShuffleResult:
        """Random-walk the blank *moves* times from *board* (left untouched).

        Every step is a legal slide, so the result is always solvable
        back to *board*.
        """
        work = board.copy()
        fixed = set(fixed_tiles)
        preserved = (
            PuzzleGenerator._edge_to_preserve(work.blank_pos, work.size)
            if preserve_one_edge
            else None
        )
        result = ShuffleResult(board=work, empty_tile=work.blank_pos)
        last_moved: Position | None = None

        for _ in range(moves):
            neighbors = [
                pos
                for pos in PuzzleGenerator._get_neighbors(work)
                if pos not in fixed
                and not PuzzleGenerator._on_edge(pos, preserved, work.size)
            ]

            if last_moved is not None and len(neighbors) > 1:
                better = [pos for pos in neighbors if pos != last_moved]
                if better:
                    neighbors = better

            if not neighbors:
                result.skipped += 1
                continue

            target = neighbors[rng.next_int(0, len(neighbors))]
            last_moved = work.blank_pos
            result.trail.append(work.blank_pos)
            work.swap_blank(target)

        if result.skipped:
            log.debug("Shuffle skipped {} of {} steps (no legal neighbor)", result.skipped, moves)
        result.empty_tile = work.blank_pos
        return result

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(board: Board) -> list[Position]:
        br, bc = board.blank_pos
        neighbors: list[Position] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if 0 <= nr < board.size and 0 <= nc < board.size:
                neighbors.append((nr, nc))
        return neighbors

    @staticmethod
    def _edge_to_preserve(blank: Position, size: int) -> str:
        """First edge (top, bottom, left, right) the blank is not on."""
        row, col = blank
        if row != 0:
            return "top"
        if row != size - 1:
            return "bottom"
        if col != 0:
            return "left"
        return "right"

    @staticmethod
    def _on_edge(pos: Position, edge: str | None, size: int) -> bool:
        row, col = pos
        if edge == "top":
            return row == 0
        if edge == "bottom":
            return row == size - 1
        if edge == "left":
            return col == 0
        if edge == "right":
            return col == size - 1
        return False
