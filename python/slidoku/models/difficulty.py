"""Difficulty profiles keyed by their display label."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

log = logger.bind(component="generator")


@dataclass(frozen=True)
class DifficultyProfile:
    number_of_fixed_tiles: int
    allow_revealing: bool
    preserve_one_edge: bool


PROFILES: dict[str, DifficultyProfile] = {
    "Easy": DifficultyProfile(
        number_of_fixed_tiles=1, allow_revealing=True, preserve_one_edge=False
    ),
    "Medium": DifficultyProfile(
        number_of_fixed_tiles=1, allow_revealing=False, preserve_one_edge=True
    ),
    "Hard": DifficultyProfile(
        number_of_fixed_tiles=2, allow_revealing=False, preserve_one_edge=False
    ),
}

# Used for any label outside PROFILES.
DEFAULT_PROFILE = DifficultyProfile(
    number_of_fixed_tiles=2, allow_revealing=True, preserve_one_edge=False
)

DIFFICULTIES: tuple[str, ...] = tuple(PROFILES)


def resolve_profile(difficulty: str) -> DifficultyProfile:
    """Return the profile for *difficulty*, or the default with a warning."""
    profile = PROFILES.get(difficulty)
    if profile is None:
        log.warning(
            "Unknown difficulty {!r}; using default profile {}", difficulty, DEFAULT_PROFILE
        )
        return DEFAULT_PROFILE
    return profile
