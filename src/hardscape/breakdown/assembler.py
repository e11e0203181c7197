"""Ordered task-breakdown assembly."""

from __future__ import annotations

from collections.abc import Iterable

from hardscape.core.types import TaskBreakdownItem


def assemble(
    primary: TaskBreakdownItem,
    transport_legs: Iterable[TaskBreakdownItem | None] = (),
    extra_tasks: Iterable[TaskBreakdownItem | None] = (),
) -> tuple[TaskBreakdownItem, ...]:
    """
    Combine a calculator's labour lines into one ordered breakdown.

    The primary task always comes first (even at zero hours), followed by transport legs in the
    order their materials were computed and then any trailing tasks. Legs and trailing tasks that
    are ``None`` or take no time are dropped. Names are not deduplicated.
    """

    items = [primary]
    items.extend(leg for leg in transport_legs if leg is not None and leg.hours > 0)
    items.extend(task for task in extra_tasks if task is not None and task.hours > 0)
    return tuple(items)


__all__ = ["assemble"]
