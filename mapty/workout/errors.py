"""Errors raised by the workout core."""

from __future__ import annotations

_FIELD_PROBLEMS: dict[str, str] = {
    "kind": "Type must be running or cycling",
    "coordinates": "Pick a location on the map first",
    "distance_km": "Distance has to be a positive number",
    "duration_min": "Duration has to be a positive number",
    "cadence_spm": "Cadence has to be a positive number",
    "elevation_gain_m": "Elevation gain has to be a number",
}


class InvalidInputError(ValueError):
    """Raised when creation inputs fail validation; ``fields`` names the culprits."""

    def __init__(self, fields: tuple[str, ...] | list[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(
            "; ".join(_FIELD_PROBLEMS.get(f, f"Invalid {f}") for f in self.fields)
        )


class GeolocationUnavailableError(RuntimeError):
    """Raised when the current position cannot be obtained."""


class PersistenceUnreadableError(ValueError):
    """Raised when the stored workout collection cannot be decoded."""
