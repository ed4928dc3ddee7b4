"""NiceGUI web UI for Mapty."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from nicegui import events, ui

from mapty.core.config import AppConfig
from mapty.core.session import SessionController
from mapty.core.views import WorkoutListItem
from mapty.ui.geolocation import request_position
from mapty.workout.errors import GeolocationUnavailableError, InvalidInputError
from mapty.workout.model import Coordinates, WorkoutKind
from mapty.workout.storage import JsonFileStore

logger = logging.getLogger(__name__)

KIND_OPTIONS: dict[str, str] = {"running": "Running", "cycling": "Cycling"}

_POPUP_OPTIONS: dict[str, Any] = {
    "maxWidth": 250,
    "minWidth": 100,
    "autoClose": False,
    "closeOnClick": False,
}

_HEAD_HTML = """
<style>
  :root {
    --mt-brand-1: #ffb545;
    --mt-brand-2: #00c46a;
    --mt-dark-1: #2d3439;
    --mt-dark-2: #42484d;
    --mt-light: #ececec;
  }
  body {
    background: var(--mt-dark-1);
    color: var(--mt-light);
    font-family: "Manrope", Arial, sans-serif;
  }
  .mt-sidebar {
    background: var(--mt-dark-1);
    height: 100vh;
    overflow-y: auto;
  }
  .mt-card {
    background: var(--mt-dark-2);
    border-radius: 5px;
    cursor: pointer;
  }
  .mt-card--running { border-left: 5px solid var(--mt-brand-2); }
  .mt-card--cycling { border-left: 5px solid var(--mt-brand-1); }
  .mt-unit { color: #aaa; font-size: 0.8rem; text-transform: uppercase; }
  .running-popup .leaflet-popup-content-wrapper { border-left: 5px solid var(--mt-brand-2); }
  .cycling-popup .leaflet-popup-content-wrapper { border-left: 5px solid var(--mt-brand-1); }
</style>
"""


class LeafletMapView:
    def __init__(self, leaflet: ui.leaflet, zoom: int) -> None:
        self._map = leaflet
        self._zoom = zoom

    def add_pin(self, coordinates: Coordinates) -> None:
        self._map.marker(latlng=coordinates)

    def add_marker(self, coordinates: Coordinates, popup_text: str, style_class: str) -> None:
        marker = self._map.marker(latlng=coordinates)
        marker.run_method("bindPopup", popup_text, {**_POPUP_OPTIONS, "className": style_class})
        marker.run_method("openPopup")

    def focus(self, coordinates: Coordinates) -> None:
        self._map.run_map_method(
            "setView",
            [coordinates[0], coordinates[1]],
            self._zoom,
            {"animate": True, "pan": {"duration": 1}},
        )


class WorkoutListView:
    """Workout cards stacked newest first."""

    def __init__(self, container: ui.column, on_select: Callable[[str], None]) -> None:
        self._container = container
        self._on_select = on_select

    def append_item(self, item: WorkoutListItem) -> None:
        with self._container:
            card = ui.card().classes(f"w-full mt-card mt-card--{item.kind}")
            with card:
                ui.label(item.title).classes("text-base font-semibold")
                with ui.row().classes("w-full gap-4"):
                    for detail in item.details:
                        with ui.row().classes("items-baseline gap-1"):
                            ui.label(detail.icon)
                            ui.label(detail.value).classes("font-semibold")
                            ui.label(detail.unit).classes("mt-unit")
        card.move(target_index=0)
        workout_id = item.workout_id
        card.on("click", lambda: self._on_select(workout_id))


class WorkoutFormView:
    def __init__(self) -> None:
        with ui.card().classes("w-full mt-card") as self._card:
            with ui.grid(columns=2).classes("w-full gap-2"):
                self.kind = ui.select(KIND_OPTIONS, value="running", label="Type")
                self.distance = ui.number("Distance (km)", placeholder="km")
                self.duration = ui.number("Duration (min)", placeholder="min")
                self.cadence = ui.number("Cadence (step/min)", placeholder="step/min")
                self.elevation = ui.number("Elev Gain (m)", placeholder="meters")
            self.submit_btn = ui.button("OK").props("color=positive")
        self.toggle_kind_fields("running")
        self._card.set_visibility(False)

    def show(self) -> None:
        self._card.set_visibility(True)
        self.distance.run_method("focus")

    def hide_and_reset(self) -> None:
        for field in (self.distance, self.duration, self.cadence, self.elevation):
            field.value = None
        self._card.set_visibility(False)

    def toggle_kind_fields(self, kind: WorkoutKind) -> None:
        self.cadence.set_visibility(kind == "running")
        self.elevation.set_visibility(kind == "cycling")

    def values(self) -> Mapping[str, object]:
        return {
            "kind": self.kind.value,
            "distance_km": self.distance.value,
            "duration_min": self.duration.value,
            "cadence_spm": self.cadence.value,
            "elevation_gain_m": self.elevation.value,
        }


def build_page(config: AppConfig) -> None:
    @ui.page("/")
    async def index() -> None:
        ui.add_head_html(_HEAD_HTML)
        store = JsonFileStore(config.store_path)

        with ui.row().classes("w-full no-wrap gap-0"):
            with ui.column().classes("w-[420px] p-4 mt-sidebar"):
                ui.label("Mapty").classes("text-2xl font-bold")
                form = WorkoutFormView()
                workouts_box = ui.column().classes("w-full gap-2")
                clear_btn = ui.button("Clear history").props("flat color=grey")
            map_box = ui.column().classes("flex-grow h-screen p-0")

        controller = SessionController(
            store,
            WorkoutListView(workouts_box, lambda wid: controller.focus_on_selected_workout(wid)),
            form,
        )

        def on_submit() -> None:
            try:
                controller.submit_form()
            except InvalidInputError as exc:
                ui.notify(str(exc), color="negative")

        def on_kind_change(e: events.ValueChangeEventArguments) -> None:
            controller.select_kind(e.value)

        def on_clear() -> None:
            controller.clear_persisted_history()
            ui.notify("History cleared. Reload the page to start fresh.", color="positive")

        form.submit_btn.on_click(on_submit)
        form.kind.on_value_change(on_kind_change)
        clear_btn.on_click(on_clear)
        controller.initialize()

        await ui.context.client.connected()
        try:
            position = await request_position(timeout=config.geolocation_timeout_sec)
        except GeolocationUnavailableError as exc:
            logger.info("No map: %s", exc)
            ui.notify("Could not get your position", color="negative")
            return

        with map_box:
            leaflet = ui.leaflet(center=position, zoom=config.map_zoom).classes("w-full h-full")
        leaflet.clear_layers()
        leaflet.tile_layer(
            url_template=config.tile_url,
            options={"attribution": config.tile_attribution},
        )
        await leaflet.initialized()
        map_view = LeafletMapView(leaflet, config.map_zoom)
        controller.map_ready(map_view)

        def on_map_click(e: events.GenericEventArguments) -> None:
            latlng = e.args["latlng"]
            coords = (float(latlng["lat"]), float(latlng["lng"]))
            map_view.add_pin(coords)
            controller.begin_creation(coords)

        leaflet.on("map-click", on_map_click)


def run_web_ui(config: AppConfig | None = None) -> int:
    cfg = config or AppConfig()
    build_page(cfg)
    ui.run(host=cfg.host, port=cfg.port, reload=False, title="Mapty")
    return 0
