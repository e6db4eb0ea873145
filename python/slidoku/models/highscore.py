"""Best-score persistence behind a small key-value interface."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from loguru import logger

log = logger.bind(component="scores")

SCORE_PREFIX = "score_"


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def keys(self) -> list[str]: ...


class MemoryStore:
    """Process-local store; used when nothing can be written to disk."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStore:
    """Loads and saves a flat string→string mapping in a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._data: dict[str, str] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        payload = json.loads(self.filepath.read_text())
        if not isinstance(payload, dict):
            raise ValueError(
                f"Expected a JSON object in {self.filepath}, got {type(payload).__name__}."
            )
        self._data = {str(k): str(v) for k, v in payload.items()}

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps(self._data, indent=2, sort_keys=True) + "\n")

    # -- store interface ------------------------------------------------------

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self.save()

    def keys(self) -> list[str]:
        return list(self._data)


def open_store(filepath: Path) -> KeyValueStore:
    """Pick the JSON file store if its directory is usable, else memory.

    The probe runs once, at session start; the rest of the game never
    needs to know which backend won.
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        probe = filepath.parent / ".slidoku-probe"
        probe.write_text("ok")
        probe.unlink()
        return JsonFileStore(filepath)
    except (OSError, ValueError) as exc:
        log.warning("Score file {} unusable ({}); keeping scores in memory", filepath, exc)
        return MemoryStore()


def score_key(date: str, difficulty: str) -> str:
    return f"{SCORE_PREFIX}{date}_{difficulty}"


class BestScores:
    """Minimum move count per (date, difficulty)."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def get_best(self, date: str, difficulty: str) -> int | None:
        raw = self.store.get(score_key(date, difficulty))
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            log.warning("Ignoring corrupt score {!r} for {} {}", raw, date, difficulty)
            return None

    def record(self, date: str, difficulty: str, moves: int) -> bool:
        """Store *moves* if it beats the current best.  Returns True if it did."""
        best = self.get_best(date, difficulty)
        if best is not None and best <= moves:
            return False
        self.store.set(score_key(date, difficulty), str(moves))
        log.info("New best for {} {}: {} moves", date, difficulty, moves)
        return True

    def all_scores(self) -> list[tuple[str, str, int]]:
        """Return ``(date, difficulty, moves)`` for every stored score, sorted."""
        rows: list[tuple[str, str, int]] = []
        for key in self.store.keys():
            if not key.startswith(SCORE_PREFIX):
                continue
            date, _, difficulty = key[len(SCORE_PREFIX) :].rpartition("_")
            best = self.get_best(date, difficulty)
            if date and best is not None:
                rows.append((date, difficulty, best))
        return sorted(rows)
