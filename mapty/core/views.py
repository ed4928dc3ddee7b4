"""Display models for the workout list and map popups."""

from __future__ import annotations

from dataclasses import dataclass

from mapty.workout.model import Workout, WorkoutKind

KIND_ICONS: dict[WorkoutKind, str] = {
    "running": "🏃‍♂️",
    "cycling": "🚴‍♀️",
}


@dataclass(frozen=True)
class WorkoutDetail:
    icon: str
    value: str
    unit: str


@dataclass(frozen=True)
class WorkoutListItem:
    workout_id: str
    kind: WorkoutKind
    title: str
    details: tuple[WorkoutDetail, ...]


def _fmt_value(value: float | None, digits: int | None = None) -> str:
    if value is None:
        return "--"
    if digits is not None:
        return f"{value:.{digits}f}"
    # 5.0 -> "5", 5.25 -> "5.25"
    return f"{value:g}"


def popup_text(workout: Workout) -> str:
    return f"{KIND_ICONS[workout.kind]} {workout.description}"


def marker_style(kind: WorkoutKind) -> str:
    return f"{kind}-popup"


def list_item(workout: Workout) -> WorkoutListItem:
    details = [
        WorkoutDetail(KIND_ICONS[workout.kind], _fmt_value(workout.distance_km), "km"),
        WorkoutDetail("⏱", _fmt_value(workout.duration_min), "min"),
    ]
    if workout.kind == "running":
        details.append(WorkoutDetail("⚡️", _fmt_value(workout.pace_min_per_km, 1), "min/km"))
        details.append(WorkoutDetail("🦶🏼", _fmt_value(workout.cadence_spm), "spm"))
    else:
        details.append(WorkoutDetail("⚡️", _fmt_value(workout.speed_km_per_h, 1), "km/h"))
        details.append(WorkoutDetail("⛰", _fmt_value(workout.elevation_gain_m), "m"))
    return WorkoutListItem(
        workout_id=workout.id,
        kind=workout.kind,
        title=workout.description,
        details=tuple(details),
    )
