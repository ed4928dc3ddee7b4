from __future__ import annotations

from pathlib import Path

import pytest

from mapty.workout.errors import PersistenceUnreadableError
from mapty.workout.storage import WORKOUTS_KEY, JsonFileStore, MemoryStore


def test_json_file_store_set_get_remove(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "nested" / "storage.json")

    assert store.get(WORKOUTS_KEY) is None
    store.set(WORKOUTS_KEY, "[]")
    store.set("other", "keep")

    reopened = JsonFileStore(tmp_path / "nested" / "storage.json")
    assert reopened.get(WORKOUTS_KEY) == "[]"

    reopened.remove(WORKOUTS_KEY)
    reopened.remove(WORKOUTS_KEY)
    assert reopened.get(WORKOUTS_KEY) is None
    assert reopened.get("other") == "keep"


def test_json_file_store_unreadable_file(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{broken", encoding="utf-8")
    store = JsonFileStore(path)

    with pytest.raises(PersistenceUnreadableError):
        store.get(WORKOUTS_KEY)

    store.set(WORKOUTS_KEY, "[]")
    assert store.get(WORKOUTS_KEY) == "[]"


def test_memory_store() -> None:
    store = MemoryStore({"a": "1"})
    store.set(WORKOUTS_KEY, "[]")
    store.remove("a")
    store.remove("missing")
    assert store.get("a") is None
    assert store.get(WORKOUTS_KEY) == "[]"


def test_json_file_store_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_bytes(b"\xff\xfe{bad")

    with pytest.raises(PersistenceUnreadableError):
        JsonFileStore(path).get(WORKOUTS_KEY)


def test_json_file_store_path_is_a_directory(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.mkdir()

    with pytest.raises(PersistenceUnreadableError):
        JsonFileStore(path).get(WORKOUTS_KEY)
