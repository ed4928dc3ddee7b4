"""Workout domain model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

WorkoutKind = Literal["running", "cycling"]
Coordinates = tuple[float, float]

WORKOUT_KINDS: tuple[WorkoutKind, ...] = ("running", "cycling")

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

@dataclass
class Workout:
    """A logged activity.

    Running carries ``cadence_spm``, cycling carries ``elevation_gain_m``;
    the other variant field stays ``None``. Everything but
    ``interaction_count`` is treated as fixed once built.
    """

    kind: WorkoutKind
    id: str
    created_at: datetime
    coordinates: Coordinates
    distance_km: float
    duration_min: float
    description: str
    cadence_spm: float | None = None
    elevation_gain_m: float | None = None
    interaction_count: int = 0

    @property
    def pace_min_per_km(self) -> float | None:
        if self.kind != "running":
            return None
        return pace_min_per_km(self.distance_km, self.duration_min)

    @property
    def speed_km_per_h(self) -> float | None:
        if self.kind != "cycling":
            return None
        return speed_km_per_h(self.distance_km, self.duration_min)

    @property
    def derived_metric(self) -> float:
        return derived_metric(self.kind, self.distance_km, self.duration_min)


def pace_min_per_km(distance_km: float, duration_min: float) -> float:
    return duration_min / distance_km


def speed_km_per_h(distance_km: float, duration_min: float) -> float:
    return distance_km / (duration_min / 60)


def derived_metric(kind: WorkoutKind, distance_km: float, duration_min: float) -> float:
    """Pace (min/km) for running, speed (km/h) for cycling."""
    if kind == "running":
        return pace_min_per_km(distance_km, duration_min)
    if kind == "cycling":
        return speed_km_per_h(distance_km, duration_min)
    raise ValueError(f"Unknown workout kind '{kind}'")


def describe(kind: WorkoutKind, created_at: datetime) -> str:
    return f"{kind.capitalize()} on {MONTHS[created_at.month - 1]} {created_at.day}"


def new_workout_id(created_at: datetime) -> str:
    # Last 10 digits of epoch millis.
    return str(int(created_at.timestamp() * 1000))[-10:]


class WorkoutIds:
    """Ids handed out in one session; a clash moves to the next free millisecond."""

    def __init__(self) -> None:
        self._issued: set[str] = set()

    def __contains__(self, workout_id: object) -> bool:
        return workout_id in self._issued

    def reserve(self, workout_id: str) -> None:
        self._issued.add(workout_id)

    def issue(self, created_at: datetime) -> str:
        millis = int(created_at.timestamp() * 1000)
        candidate = str(millis)[-10:]
        while candidate in self._issued:
            millis += 1
            candidate = str(millis)[-10:]
        self._issued.add(candidate)
        return candidate


def _assign_id(created_at: datetime, ids: WorkoutIds | None) -> str:
    if ids is None:
        return new_workout_id(created_at)
    return ids.issue(created_at)


def _now() -> datetime:
    return datetime.now().astimezone()


def create_running(
    coordinates: Coordinates,
    distance_km: float,
    duration_min: float,
    cadence_spm: float,
    *,
    created_at: datetime | None = None,
    ids: WorkoutIds | None = None,
) -> Workout:
    stamp = created_at or _now()
    return Workout(
        kind="running",
        id=_assign_id(stamp, ids),
        created_at=stamp,
        coordinates=(float(coordinates[0]), float(coordinates[1])),
        distance_km=distance_km,
        duration_min=duration_min,
        description=describe("running", stamp),
        cadence_spm=cadence_spm,
    )


def create_cycling(
    coordinates: Coordinates,
    distance_km: float,
    duration_min: float,
    elevation_gain_m: float,
    *,
    created_at: datetime | None = None,
    ids: WorkoutIds | None = None,
) -> Workout:
    stamp = created_at or _now()
    return Workout(
        kind="cycling",
        id=_assign_id(stamp, ids),
        created_at=stamp,
        coordinates=(float(coordinates[0]), float(coordinates[1])),
        distance_km=distance_km,
        duration_min=duration_min,
        description=describe("cycling", stamp),
        elevation_gain_m=elevation_gain_m,
    )


def record_interaction(workout: Workout) -> None:
    workout.interaction_count += 1
