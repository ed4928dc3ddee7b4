"""Local key-value persistence for the workout collection."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from mapty.workout.errors import PersistenceUnreadableError

logger = logging.getLogger(__name__)

WORKOUTS_KEY = "workouts"


def default_store_path() -> Path:
    return Path.home() / ".mapty" / "storage.json"


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Process-local store, mostly for tests and throwaway sessions."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStore:
    """String values kept in a single JSON object on disk.

    Every ``set``/``remove`` rewrites the file before returning.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or default_store_path()

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        items = self._read_for_update()
        items[key] = value
        self._write(items)

    def remove(self, key: str) -> None:
        items = self._read_for_update()
        if key not in items:
            return
        del items[key]
        self._write(items)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            raise PersistenceUnreadableError(f"Unreadable store file {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PersistenceUnreadableError(f"Store file {self.path} must hold an object")
        return data

    def _read_for_update(self) -> dict[str, object]:
        try:
            return self._read()
        except PersistenceUnreadableError as exc:
            logger.warning("Overwriting unreadable store: %s", exc)
            return {}

    def _write(self, items: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items, ensure_ascii=True, indent=2), encoding="utf-8")
