"""Session controller keeping workouts, views and the store in step."""

from __future__ import annotations

import logging

from mapty.core.ports import FormView, ListView, MapView
from mapty.core.views import list_item, marker_style, popup_text
from mapty.workout.errors import InvalidInputError, PersistenceUnreadableError
from mapty.workout.model import (
    Coordinates,
    Workout,
    WorkoutIds,
    WorkoutKind,
    create_cycling,
    create_running,
    record_interaction,
)
from mapty.workout.records import dump_workouts, load_workouts
from mapty.workout.storage import WORKOUTS_KEY, KeyValueStore
from mapty.workout.validation import read_creation_input, validate_creation

logger = logging.getLogger(__name__)


class SessionController:
    """Single owner of the in-memory workout collection.

    The map view is optional at construction: it is attached through
    :meth:`map_ready` once the map has been built, which is when markers
    for restored workouts get drawn.
    """

    def __init__(
        self,
        store: KeyValueStore,
        list_view: ListView,
        form: FormView,
        map_view: MapView | None = None,
    ) -> None:
        self._store = store
        self._list_view = list_view
        self._form = form
        self._map_view = map_view
        self._workouts: list[Workout] = []
        self._pending_coordinates: Coordinates | None = None
        self._ids = WorkoutIds()

    @property
    def workouts(self) -> tuple[Workout, ...]:
        return tuple(self._workouts)

    @property
    def pending_coordinates(self) -> Coordinates | None:
        return self._pending_coordinates

    @property
    def map_attached(self) -> bool:
        return self._map_view is not None

    def initialize(self) -> None:
        try:
            payload = self._store.get(WORKOUTS_KEY)
            restored = load_workouts(payload) if payload is not None else []
        except PersistenceUnreadableError as exc:
            logger.warning("Stored workouts unreadable, starting empty: %s", exc)
            restored = []

        self._workouts = restored
        for workout in self._workouts:
            self._ids.reserve(workout.id)
            self._list_view.append_item(list_item(workout))
        if restored:
            logger.info("Restored %d workout(s)", len(restored))

    def map_ready(self, map_view: MapView) -> None:
        self._map_view = map_view
        for workout in self._workouts:
            self._render_marker(workout)

    def begin_creation(self, focus_coordinates: Coordinates) -> None:
        self._pending_coordinates = (float(focus_coordinates[0]), float(focus_coordinates[1]))
        self._form.show()

    def select_kind(self, kind: WorkoutKind) -> None:
        self._form.toggle_kind_fields(kind)

    def submit_form(self) -> Workout:
        data = read_creation_input(self._form.values())
        return self.submit_creation(
            data.kind, data.distance_km, data.duration_min, data.kind_specific
        )

    def submit_creation(
        self,
        kind: str,
        distance_km: float,
        duration_min: float,
        kind_specific: float,
    ) -> Workout:
        data = validate_creation(kind, distance_km, duration_min, kind_specific)
        coordinates = self._pending_coordinates
        if coordinates is None:
            raise InvalidInputError(["coordinates"])

        if data.kind == "running":
            workout = create_running(
                coordinates,
                data.distance_km,
                data.duration_min,
                data.kind_specific,
                ids=self._ids,
            )
        else:
            workout = create_cycling(
                coordinates,
                data.distance_km,
                data.duration_min,
                data.kind_specific,
                ids=self._ids,
            )

        self._workouts.append(workout)
        self._list_view.append_item(list_item(workout))
        self._render_marker(workout)
        self._pending_coordinates = None
        self._form.hide_and_reset()
        self._persist()
        logger.info("Created %s workout %s", workout.kind, workout.id)
        return workout

    def focus_on_selected_workout(self, identifier: str | None) -> None:
        workout = self.find(identifier)
        if workout is None:
            logger.debug("Ignoring selection of unknown workout %r", identifier)
            return
        record_interaction(workout)
        if self._map_view is not None:
            self._map_view.focus(workout.coordinates)

    def find(self, identifier: str | None) -> Workout | None:
        if identifier is None:
            return None
        for workout in self._workouts:
            if workout.id == identifier:
                return workout
        return None

    def clear_persisted_history(self) -> None:
        # In-memory workouts stay until the next initialize().
        self._store.remove(WORKOUTS_KEY)
        logger.info("Cleared persisted workouts")

    def _render_marker(self, workout: Workout) -> None:
        if self._map_view is None:
            return
        self._map_view.add_marker(
            workout.coordinates, popup_text(workout), marker_style(workout.kind)
        )

    def _persist(self) -> None:
        self._store.set(WORKOUTS_KEY, dump_workouts(self._workouts))
