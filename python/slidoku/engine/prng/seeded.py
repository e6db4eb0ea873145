"""String-seeded pseudo-random source for reproducible puzzles.

The same seed string yields the same sequence on every platform, which
is what makes the daily puzzle (seeded by date and difficulty) stable.

The generator is the ``frac(sin(n) * 10000)`` trick.  It is NOT
cryptographically secure and has visible short-range correlation; it
is only meant for shuffling puzzle boards.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF


class SeededRandom:
    """Deterministic PRNG derived from an arbitrary string seed."""

    def __init__(self, seed: str) -> None:
        self.seed = seed
        self.state: int = self.hash(seed)

    @staticmethod
    def hash(seed: str) -> int:
        """Fold *seed* into a signed 32-bit integer (``h * 31 + c``).

        Characters are read as UTF-16 code units so non-BMP characters
        hash the same way a browser would hash them.
        """
        data = seed.encode("utf-16-le")
        h = 0
        for i in range(0, len(data), 2):
            unit = data[i] | (data[i + 1] << 8)
            h = ((h << 5) - h + unit) & _MASK32
        return h - (1 << 32) if h & 0x80000000 else h

    def next_float(self) -> float:
        """Return a float in ``[0, 1)`` and advance the state."""
        x = math.sin(self.state) * 10000
        self.state += 1
        return x - math.floor(x)

    def next_int(self, lo: int, hi: int) -> int:
        """Return an int in ``[lo, hi)``."""
        return math.floor(self.next_float() * (hi - lo) + lo)

    def shuffle_copy(self, items: Sequence[T]) -> list[T]:
        """Fisher–Yates shuffle into a new list; *items* is left untouched."""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = self.next_int(0, i + 1)
            out[i], out[j] = out[j], out[i]
        return out
