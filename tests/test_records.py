from __future__ import annotations

import json

import pytest

from mapty.workout.errors import PersistenceUnreadableError
from mapty.workout.model import create_cycling, create_running, record_interaction
from mapty.workout.records import dump_workouts, from_record, load_workouts, to_record


def test_dump_and_load_mixed_collection_keeps_order_and_fields() -> None:
    run = create_running((51.5, -0.12), 5.2, 27, 172)
    ride = create_cycling((45.8, 6.9), 42, 95, 870)
    walk_run = create_running((51.51, -0.1), 3, 20, 160)
    record_interaction(ride)

    loaded = load_workouts(dump_workouts([run, ride, walk_run]))

    assert loaded == [run, ride, walk_run]
    assert loaded[1].interaction_count == 1
    assert loaded[0].pace_min_per_km == run.pace_min_per_km
    assert loaded[1].speed_km_per_h == ride.speed_km_per_h
    assert loaded[2].description == walk_run.description


def test_record_is_flat_with_kind_first_and_derived_fields() -> None:
    ride = create_cycling((10, 20), 20, 60, 150)
    record = to_record(ride)

    assert list(record)[0] == "kind"
    assert record["kind"] == "cycling"
    assert record["speedKmPerH"] == 20
    assert record["coordinates"] == [10.0, 20.0]
    assert "paceMinPerKm" not in record
    json.dumps(record)


def test_from_record_rebuilds_working_workout() -> None:
    run = create_running((1, 2), 10, 55, 168)
    rebuilt = from_record(json.loads(json.dumps(to_record(run))))

    record_interaction(rebuilt)

    assert rebuilt.interaction_count == 1
    assert rebuilt.pace_min_per_km == 5.5


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        '{"kind": "running"}',
        '[{"kind": "swimming"}]',
        '[{"kind": "running", "id": "1", "description": "x", "createdAt": "nope"}]',
        "[42]",
    ],
)
def test_load_workouts_rejects_unreadable_payload(payload: str) -> None:
    with pytest.raises(PersistenceUnreadableError):
        load_workouts(payload)


def test_load_workouts_rejects_missing_derived_field() -> None:
    record = to_record(create_running((1, 2), 4, 24, 150))
    del record["paceMinPerKm"]
    with pytest.raises(PersistenceUnreadableError):
        load_workouts(json.dumps([record]))


def test_load_empty_array() -> None:
    assert load_workouts("[]") == []


@pytest.mark.parametrize(
    ("key", "value"),
    [("distanceKm", 0), ("durationMin", 0), ("distanceKm", -3.5), ("cadenceSpm", 0)],
)
def test_load_workouts_rejects_non_positive_running_fields(key: str, value: float) -> None:
    record = to_record(create_running((1, 2), 4, 24, 150))
    record[key] = value
    with pytest.raises(PersistenceUnreadableError):
        load_workouts(json.dumps([record]))


def test_load_workouts_accepts_negative_elevation_but_not_zero_duration() -> None:
    record = to_record(create_cycling((1, 2), 12, 30, -40))
    assert load_workouts(json.dumps([record]))[0].elevation_gain_m == -40

    record["durationMin"] = 0
    with pytest.raises(PersistenceUnreadableError):
        load_workouts(json.dumps([record]))
