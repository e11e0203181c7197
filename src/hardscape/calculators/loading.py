"""Loading sand into carriers, rated by excavator size band."""

from __future__ import annotations

from hardscape.core.types import TaskBreakdownItem
from hardscape.reference.excavation import loading_band_for

LOADING_SAND_TASK_NAME = "Loading sand"


def loading_sand_hours(sand_tonnes: float, excavator_size_t: float | None = None) -> float:
    """Hours to load ``sand_tonnes``; hand loading applies without an excavator."""

    if sand_tonnes <= 0:
        return 0.0
    return sand_tonnes * loading_band_for(excavator_size_t).hours_per_tonne


def loading_sand_task(
    sand_tonnes: float, excavator_size_t: float | None = None
) -> TaskBreakdownItem | None:
    """Return a ``Loading sand`` line, or ``None`` when there is nothing to load."""

    hours = loading_sand_hours(sand_tonnes, excavator_size_t)
    if hours <= 0:
        return None
    return TaskBreakdownItem(
        name=LOADING_SAND_TASK_NAME, hours=hours, amount=sand_tonnes, unit="tonnes"
    )


__all__ = ["LOADING_SAND_TASK_NAME", "loading_sand_hours", "loading_sand_task"]
