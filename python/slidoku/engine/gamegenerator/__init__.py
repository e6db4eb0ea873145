from slidoku.engine.gamegenerator.catalog import (
    MAGIC_SEEDS,
    CatalogIntegrityError,
    validate_catalog,
    validate_magic_square,
)
from slidoku.engine.gamegenerator.generator import PuzzleGenerator, ShuffleResult, daily_seed

__all__ = [
    "MAGIC_SEEDS",
    "CatalogIntegrityError",
    "PuzzleGenerator",
    "ShuffleResult",
    "daily_seed",
    "validate_catalog",
    "validate_magic_square",
]
