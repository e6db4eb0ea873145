"""Slidoku — a 4×4 sliding puzzle won by making every row and column sum to 30."""

from slidoku.engine.gamegenerator import PuzzleGenerator, daily_seed
from slidoku.engine.gameplay import GamePlay, MoveResult, chain_moves, check_win, is_adjacent
from slidoku.engine.gamesolver import Solver
from slidoku.models import Board, PuzzleDescriptor

generate_puzzle = PuzzleGenerator.generate_puzzle

__all__ = [
    "Board",
    "GamePlay",
    "MoveResult",
    "PuzzleDescriptor",
    "PuzzleGenerator",
    "Solver",
    "chain_moves",
    "check_win",
    "daily_seed",
    "generate_puzzle",
    "is_adjacent",
]
