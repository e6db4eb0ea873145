"""Sum-preserving symmetries of a magic square.

Rotation, reflection and swapping rows or columns within the pairs
(0, 1) and (2, 3) all keep every row and column sum intact, so a small
catalog yields a much larger set of distinct targets.
"""

from __future__ import annotations

from slidoku.engine.prng import SeededRandom

Grid = list[list[int]]


def rotate90(grid: Grid) -> Grid:
    n = len(grid)
    out = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            out[j][n - i - 1] = grid[i][j]
    return out


def reflect_horizontal(grid: Grid) -> Grid:
    return [row[::-1] for row in grid]


def swap_rows(grid: Grid, a: int, b: int) -> Grid:
    out = [row[:] for row in grid]
    out[a], out[b] = out[b], out[a]
    return out


def swap_columns(grid: Grid, a: int, b: int) -> Grid:
    out = [row[:] for row in grid]
    for row in out:
        row[a], row[b] = row[b], row[a]
    return out


def apply_random_transformations(grid: Grid, rng: SeededRandom) -> Grid:
    """Return a randomly transformed copy of *grid*.

    Draw order is fixed: rotation count, then one coin per optional
    step (reflect, rows 0/1, rows 2/3, cols 0/1, cols 2/3).
    """
    out = [row[:] for row in grid]

    for _ in range(rng.next_int(0, 4)):
        out = rotate90(out)

    if rng.next_float() < 0.5:
        out = reflect_horizontal(out)

    if rng.next_float() < 0.5:
        out = swap_rows(out, 0, 1)
    if rng.next_float() < 0.5:
        out = swap_rows(out, 2, 3)

    if rng.next_float() < 0.5:
        out = swap_columns(out, 0, 1)
    if rng.next_float() < 0.5:
        out = swap_columns(out, 2, 3)

    return out
