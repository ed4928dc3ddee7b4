"""Flat record schema for persisting workouts."""

from __future__ import annotations

import json
import math
from datetime import datetime
from typing import Any, Iterable

from mapty.workout.errors import PersistenceUnreadableError
from mapty.workout.model import WORKOUT_KINDS, Workout


def to_record(workout: Workout) -> dict[str, Any]:
    record: dict[str, Any] = {
        "kind": workout.kind,
        "id": workout.id,
        "createdAt": workout.created_at.isoformat(),
        "coordinates": [workout.coordinates[0], workout.coordinates[1]],
        "distanceKm": workout.distance_km,
        "durationMin": workout.duration_min,
        "interactionCount": workout.interaction_count,
        "description": workout.description,
    }
    if workout.kind == "running":
        record["cadenceSpm"] = workout.cadence_spm
        record["paceMinPerKm"] = workout.pace_min_per_km
    else:
        record["elevationGainM"] = workout.elevation_gain_m
        record["speedKmPerH"] = workout.speed_km_per_h
    return record


def from_record(record: object, index: int = 0) -> Workout:
    """Rebuild a workout from its stored record.

    Derived fields in the record are checked for presence only; the
    rebuilt workout computes them again from distance and duration.
    """
    if not isinstance(record, dict):
        raise PersistenceUnreadableError(f"Record {index + 1}: must be an object")

    kind = record.get("kind")
    if kind not in WORKOUT_KINDS:
        raise PersistenceUnreadableError(f"Record {index + 1}: unknown kind {kind!r}")

    workout_id = _require(record, "id", str, index)
    description = _require(record, "description", str, index)
    created_raw = _require(record, "createdAt", str, index)
    try:
        created_at = datetime.fromisoformat(created_raw)
    except ValueError as exc:
        raise PersistenceUnreadableError(
            f"Record {index + 1}: invalid createdAt"
        ) from exc

    coords = record.get("coordinates")
    if (
        not isinstance(coords, (list, tuple))
        or len(coords) != 2
        or not all(_is_number(c) for c in coords)
    ):
        raise PersistenceUnreadableError(f"Record {index + 1}: invalid coordinates")

    interactions = record.get("interactionCount", 0)
    if not isinstance(interactions, int) or isinstance(interactions, bool):
        raise PersistenceUnreadableError(f"Record {index + 1}: invalid interactionCount")

    distance_km = _require_positive(record, "distanceKm", index)
    duration_min = _require_positive(record, "durationMin", index)
    if kind == "running":
        _require_number(record, "paceMinPerKm", index)
        cadence = _require_positive(record, "cadenceSpm", index)
        elevation = None
    else:
        _require_number(record, "speedKmPerH", index)
        cadence = None
        elevation = _require_number(record, "elevationGainM", index)

    return Workout(
        kind=kind,
        id=workout_id,
        created_at=created_at,
        coordinates=(float(coords[0]), float(coords[1])),
        distance_km=distance_km,
        duration_min=duration_min,
        description=description,
        cadence_spm=cadence,
        elevation_gain_m=elevation,
        interaction_count=interactions,
    )


def dump_workouts(workouts: Iterable[Workout]) -> str:
    return json.dumps([to_record(w) for w in workouts], ensure_ascii=True)


def load_workouts(payload: str) -> list[Workout]:
    try:
        data = json.loads(payload)
    except (TypeError, json.JSONDecodeError) as exc:
        raise PersistenceUnreadableError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise PersistenceUnreadableError("Stored workouts must be an array")
    return [from_record(raw, i) for i, raw in enumerate(data)]


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _require(record: dict[str, Any], key: str, expected: type, index: int) -> Any:
    value = record.get(key)
    if not isinstance(value, expected):
        raise PersistenceUnreadableError(f"Record {index + 1}: invalid {key}")
    return value


def _require_number(record: dict[str, Any], key: str, index: int) -> float:
    value = record.get(key)
    if not _is_number(value):
        raise PersistenceUnreadableError(f"Record {index + 1}: invalid {key}")
    return float(value)  # type: ignore[arg-type]


def _require_positive(record: dict[str, Any], key: str, index: int) -> float:
    value = _require_number(record, key, index)
    if value <= 0:
        raise PersistenceUnreadableError(f"Record {index + 1}: {key} must be > 0")
    return value
