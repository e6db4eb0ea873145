from slidoku.engine.gameplay.game import GamePlay, MoveResult
from slidoku.engine.gameplay.rules import chain_moves, check_win, is_adjacent

__all__ = ["GamePlay", "MoveResult", "chain_moves", "check_win", "is_adjacent"]
