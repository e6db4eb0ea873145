"""Best-score storage and backend selection."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from slidoku.models.highscore import (
    BestScores,
    JsonFileStore,
    MemoryStore,
    open_store,
    score_key,
)


def test_score_key_format() -> None:
    assert score_key("2025-09-01", "Hard") == "score_2025-09-01_Hard"


def test_best_score_keeps_minimum() -> None:
    scores = BestScores(MemoryStore())
    assert scores.get_best("2025-09-01", "Easy") is None

    assert scores.record("2025-09-01", "Easy", 40)
    assert not scores.record("2025-09-01", "Easy", 55)
    assert scores.record("2025-09-01", "Easy", 31)
    assert scores.get_best("2025-09-01", "Easy") == 31
    assert scores.get_best("2025-09-01", "Hard") is None


def test_json_store_persists(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    BestScores(JsonFileStore(path)).record("2025-09-01", "Medium", 77)

    assert json.loads(path.read_text()) == {"score_2025-09-01_Medium": "77"}
    assert BestScores(JsonFileStore(path)).get_best("2025-09-01", "Medium") == 77


def test_open_store_prefers_file(tmp_path: Path) -> None:
    assert isinstance(open_store(tmp_path / "data" / "scores.json"), JsonFileStore)


def test_open_store_falls_back_to_memory(tmp_path: Path, log_records) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    store = open_store(blocker / "scores.json")

    assert isinstance(store, MemoryStore)
    assert any(r["level"].name == "WARNING" for r in log_records)


def test_corrupt_entry_reads_as_missing() -> None:
    store = MemoryStore()
    store.set(score_key("2025-09-01", "Easy"), "lots")
    scores = BestScores(store)

    assert scores.get_best("2025-09-01", "Easy") is None
    assert scores.record("2025-09-01", "Easy", 12)


def test_all_scores_lists_only_score_keys() -> None:
    store = MemoryStore()
    store.set("theme", "dark")
    scores = BestScores(store)
    scores.record("2025-09-02", "Hard", 90)
    scores.record("2025-09-01", "Easy", 20)

    assert scores.all_scores() == [
        ("2025-09-01", "Easy", 20),
        ("2025-09-02", "Hard", 90),
    ]


@pytest.mark.parametrize("content", ["[]", '"scores"', "42", "{not json"])
def test_unreadable_score_file_falls_back_to_memory(
    tmp_path: Path, log_records, content: str
) -> None:
    path = tmp_path / "scores.json"
    path.write_text(content)

    store = open_store(path)

    assert isinstance(store, MemoryStore)
    assert BestScores(store).all_scores() == []
    assert any(r["level"].name == "WARNING" for r in log_records)


def test_json_store_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("[]")

    with pytest.raises(ValueError, match="Expected a JSON object"):
        JsonFileStore(path)
