"""Runtime configuration for the Mapty app."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mapty.workout.storage import default_store_path

DEFAULT_TILE_URL = "https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png"
DEFAULT_TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)


@dataclass(frozen=True)
class AppConfig:
    store_path: Path = field(default_factory=default_store_path)
    map_zoom: int = 17
    tile_url: str = DEFAULT_TILE_URL
    tile_attribution: str = DEFAULT_TILE_ATTRIBUTION
    host: str = "127.0.0.1"
    port: int = 8089
    geolocation_timeout_sec: float = 10.0
