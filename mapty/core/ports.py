"""Collaborator interfaces the session controller drives."""

from __future__ import annotations

from typing import Mapping, Protocol

from mapty.core.views import WorkoutListItem
from mapty.workout.model import Coordinates, WorkoutKind


class MapView(Protocol):
    def add_marker(self, coordinates: Coordinates, popup_text: str, style_class: str) -> None: ...

    def focus(self, coordinates: Coordinates) -> None: ...


class ListView(Protocol):
    def append_item(self, item: WorkoutListItem) -> None: ...


class FormView(Protocol):
    def show(self) -> None: ...

    def hide_and_reset(self) -> None: ...

    def toggle_kind_fields(self, kind: WorkoutKind) -> None: ...

    def values(self) -> Mapping[str, object]: ...
