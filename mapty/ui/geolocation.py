"""One-shot browser geolocation through the NiceGUI client."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from nicegui import ui

from mapty.workout.errors import GeolocationUnavailableError
from mapty.workout.model import Coordinates

JavascriptRunner = Callable[..., Awaitable[Any]]

_POSITION_JS = """
return await new Promise((resolve) => {
  if (!navigator.geolocation) {
    resolve(null);
    return;
  }
  navigator.geolocation.getCurrentPosition(
    (pos) => resolve([pos.coords.latitude, pos.coords.longitude]),
    () => resolve(null),
  );
});
"""


def parse_position(result: object) -> Coordinates:
    if (
        not isinstance(result, (list, tuple))
        or len(result) != 2
        or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in result)
    ):
        raise GeolocationUnavailableError("Could not get your position")
    return (float(result[0]), float(result[1]))


async def request_position(
    timeout: float = 10.0,
    run_javascript: JavascriptRunner | None = None,
) -> Coordinates:
    """Ask the connected browser for its position, exactly once."""
    runner = run_javascript or ui.run_javascript
    try:
        result = await runner(_POSITION_JS, timeout=timeout)
    except TimeoutError as exc:
        raise GeolocationUnavailableError("Timed out waiting for position") from exc
    return parse_position(result)
