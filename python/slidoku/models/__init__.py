from slidoku.models.board import Board, Direction, Position
from slidoku.models.difficulty import DifficultyProfile, resolve_profile
from slidoku.models.highscore import BestScores, JsonFileStore, MemoryStore, open_store
from slidoku.models.puzzle import PuzzleDescriptor

__all__ = [
    "BestScores",
    "Board",
    "DifficultyProfile",
    "Direction",
    "JsonFileStore",
    "MemoryStore",
    "Position",
    "PuzzleDescriptor",
    "open_store",
    "resolve_profile",
]
