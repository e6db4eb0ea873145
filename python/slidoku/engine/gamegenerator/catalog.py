"""Base magic squares every puzzle is derived from.

Each square holds 0–15 exactly once with every row and column summing
to 30; 0 is the blank.  ``validate_catalog`` is run by the test suite.
"""

from __future__ import annotations

from collections.abc import Sequence

from slidoku.config import BOARD_SIZE, TARGET_SUM

MAGIC_SEEDS: tuple[tuple[tuple[int, ...], ...], ...] = (
    (
        (15, 1, 2, 12),
        (4, 10, 9, 7),
        (8, 6, 5, 11),
        (3, 13, 14, 0),
    ),
    (
        (14, 0, 3, 13),
        (1, 15, 12, 2),
        (9, 7, 10, 4),
        (6, 8, 5, 11),
    ),
    (
        (13, 3, 0, 14),
        (2, 12, 15, 1),
        (4, 10, 7, 9),
        (11, 5, 8, 6),
    ),
    (
        (11, 5, 8, 6),
        (4, 10, 7, 9),
        (2, 12, 15, 1),
        (13, 3, 0, 14),
    ),
    (
        (9, 7, 4, 10),
        (6, 8, 11, 5),
        (15, 1, 2, 12),
        (0, 14, 13, 3),
    ),
)


class CatalogIntegrityError(ValueError):
    """A catalog square is not a valid 0–15 magic square."""


def validate_magic_square(grid: Sequence[Sequence[int]], target_sum: int = TARGET_SUM) -> None:
    n = BOARD_SIZE
    if len(grid) != n or any(len(row) != n for row in grid):
        raise CatalogIntegrityError(f"Square must be {n}×{n}.")

    values = sorted(v for row in grid for v in row)
    if values != list(range(n * n)):
        raise CatalogIntegrityError(f"Square must hold 0..{n * n - 1} once each: {values}")

    for r, row in enumerate(grid):
        if sum(row) != target_sum:
            raise CatalogIntegrityError(f"Row {r} sums to {sum(row)}, expected {target_sum}.")

    for c in range(n):
        col = sum(row[c] for row in grid)
        if col != target_sum:
            raise CatalogIntegrityError(f"Column {c} sums to {col}, expected {target_sum}.")


def validate_catalog(catalog: Sequence[Sequence[Sequence[int]]] = MAGIC_SEEDS) -> None:
    for i, square in enumerate(catalog):
        try:
            validate_magic_square(square)
        except CatalogIntegrityError as exc:
            raise CatalogIntegrityError(f"Catalog entry {i}: {exc}") from exc
