"""Command line entrypoint for Mapty."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from mapty.core.config import AppConfig
from mapty.core.session import SessionController
from mapty.core.views import WorkoutListItem
from mapty.workout.errors import PersistenceUnreadableError
from mapty.workout.records import load_workouts
from mapty.workout.storage import WORKOUTS_KEY, JsonFileStore, default_store_path


def build_parser() -> argparse.ArgumentParser:
    defaults = AppConfig()
    parser = argparse.ArgumentParser(description="Mapty workout map")
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help=f"Workout store file (default: {defaults.store_path})",
    )
    parser.add_argument("--list", action="store_true", help="Print stored workouts and exit")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Erase stored workouts and exit",
    )
    parser.add_argument("--host", default=defaults.host, help="Host bind for the web UI")
    parser.add_argument("--port", type=int, default=defaults.port, help="Port for the web UI")
    parser.add_argument("--zoom", type=int, default=defaults.map_zoom, help="Map zoom level")
    parser.add_argument(
        "--geo-timeout",
        type=float,
        default=defaults.geolocation_timeout_sec,
        help="Seconds to wait for the browser position",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        store_path=args.store or default_store_path(),
        map_zoom=args.zoom,
        host=args.host,
        port=args.port,
        geolocation_timeout_sec=args.geo_timeout,
    )


class _NullListView:
    def append_item(self, item: WorkoutListItem) -> None:
        pass


class _NullForm:
    def show(self) -> None:
        pass

    def hide_and_reset(self) -> None:
        pass

    def toggle_kind_fields(self, kind: str) -> None:
        pass

    def values(self) -> dict[str, object]:
        return {}


def run_list(store: JsonFileStore) -> int:
    try:
        payload = store.get(WORKOUTS_KEY)
        if payload is None:
            print("No stored workouts")
            return 0
        workouts = load_workouts(payload)
    except PersistenceUnreadableError as exc:
        print(f"Stored workouts unreadable: {exc}")
        return 1

    for workout in workouts:
        if workout.kind == "running":
            metric = f"{workout.pace_min_per_km:.1f} min/km  {workout.cadence_spm:g} spm"
        else:
            metric = f"{workout.speed_km_per_h:.1f} km/h  {workout.elevation_gain_m:g} m"
        lat, lng = workout.coordinates
        print(
            f"{workout.id}  {workout.description:<22} {workout.distance_km:>6g} km "
            f"{workout.duration_min:>6g} min  {metric}  ({lat:.5f}, {lng:.5f})"
        )
    return 0


def run_reset(store: JsonFileStore) -> int:
    controller = SessionController(store, _NullListView(), _NullForm())
    controller.clear_persisted_history()
    print(f"Cleared stored workouts in {store.path}")
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)
    store = JsonFileStore(config.store_path)

    if args.reset:
        return run_reset(store)
    if args.list:
        return run_list(store)

    from mapty.ui.web_app import run_web_ui

    return run_web_ui(config)


if __name__ == "__main__":
    raise SystemExit(main())
