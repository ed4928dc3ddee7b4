"""Validation of workout creation inputs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from mapty.workout.errors import InvalidInputError
from mapty.workout.model import WORKOUT_KINDS, WorkoutKind

# Elevation gain may be zero or negative (downhill rides); it only has to be finite.
KIND_SPECIFIC_FIELD: dict[WorkoutKind, str] = {
    "running": "cadence_spm",
    "cycling": "elevation_gain_m",
}


@dataclass(frozen=True)
class CreationInput:
    kind: WorkoutKind
    distance_km: float
    duration_min: float
    kind_specific: float


def parse_number(raw: object) -> float:
    """Convert a raw form value to float; blanks and garbage become NaN."""
    if raw is None or isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def validate_creation(
    kind: str,
    distance_km: float,
    duration_min: float,
    kind_specific: float,
) -> CreationInput:
    if kind not in WORKOUT_KINDS:
        raise InvalidInputError(["kind"])

    failed: list[str] = []
    if not _is_positive(distance_km):
        failed.append("distance_km")
    if not _is_positive(duration_min):
        failed.append("duration_min")
    if kind == "running":
        if not _is_positive(kind_specific):
            failed.append("cadence_spm")
    elif not _is_finite(kind_specific):
        failed.append("elevation_gain_m")
    if failed:
        raise InvalidInputError(failed)

    return CreationInput(
        kind=kind,  # type: ignore[arg-type]
        distance_km=float(distance_km),
        duration_min=float(duration_min),
        kind_specific=float(kind_specific),
    )


def read_creation_input(values: Mapping[str, object]) -> CreationInput:
    """Parse and validate the raw field values of the creation form."""
    kind = str(values.get("kind") or "")
    field = KIND_SPECIFIC_FIELD.get(kind, "")  # type: ignore[call-overload]
    return validate_creation(
        kind,
        parse_number(values.get("distance_km")),
        parse_number(values.get("duration_min")),
        parse_number(values.get(field)),
    )


def _is_finite(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _is_positive(value: object) -> bool:
    return _is_finite(value) and value > 0  # type: ignore[operator]
