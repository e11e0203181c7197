"""Tie calculator breakdown lines to catalog templates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from hardscape.config.models import RateTemplate
from hardscape.core.types import TaskBreakdownItem
from hardscape.matching.aliases import CUTTING_SLABS, resolve_task_name
from hardscape.matching.strategies import MatchResult, match_template
from hardscape.reference.excavation import DiggingMethod
from hardscape.telemetry.match_logger import MatchTelemetryLogger


@dataclass(frozen=True)
class ReconciledTask:
    """
    A breakdown line together with its catalog decision.

    Attributes
    ----------
    item:
        The calculator line as emitted.
    resolved_name:
        Name used for matching and persistence (after alias renames).
    match:
        Result of the strategy chain for ``resolved_name``.
    template_id:
        Calculator-supplied template id when present, otherwise the matched template's id.
    estimated_hours_per_unit:
        Rate from the matched template; ``0.0`` when unmatched or unset.
    unit:
        Persisted unit (``slabs`` for cutting tasks, else the item's unit).
    """

    item: TaskBreakdownItem
    resolved_name: str
    match: MatchResult
    template_id: str | None
    estimated_hours_per_unit: float
    unit: str

    @property
    def hours(self) -> float:
        return self.item.hours

    @property
    def persistable(self) -> bool:
        return self.item.hours > 0


def reconcile_task(
    item: TaskBreakdownItem,
    catalog: Sequence[RateTemplate],
    *,
    parent_name: str | None = None,
    digging_method: DiggingMethod | str | None = None,
) -> ReconciledTask:
    resolved = resolve_task_name(item.name, parent_name, digging_method)
    match = match_template(resolved, catalog)
    template = match.template
    hours_per_unit = 0.0
    if template is not None and template.estimated_hours_per_unit is not None:
        hours_per_unit = template.estimated_hours_per_unit
    unit = "slabs" if item.name.strip().lower() == CUTTING_SLABS else item.unit
    return ReconciledTask(
        item=item,
        resolved_name=resolved,
        match=match,
        template_id=item.template_id or match.template_id,
        estimated_hours_per_unit=hours_per_unit,
        unit=unit,
    )


def reconcile_breakdown(
    items: Iterable[TaskBreakdownItem],
    catalog: Sequence[RateTemplate],
    *,
    parent_name: str | None = None,
    digging_method: DiggingMethod | str | None = None,
    telemetry: MatchTelemetryLogger | None = None,
) -> tuple[ReconciledTask, ...]:
    """
    Reconcile every breakdown line against ``catalog``.

    Parameters
    ----------
    items:
        Breakdown lines in calculator order.
    catalog:
        Ordered template snapshot; never mutated.
    parent_name:
        Display name of the owning task, used to pick the cutting variant.
    digging_method:
        Foundation digging method, used to rename ``Foundation Excavation``.
    telemetry:
        Optional logger receiving one record per decision (partial matches are flagged
        ``low_confidence``).

    Returns
    -------
    tuple[ReconciledTask, ...]
        One entry per input line, unmatched lines included.
    """

    catalog = tuple(catalog)
    results: list[ReconciledTask] = []
    for item in items:
        task = reconcile_task(
            item, catalog, parent_name=parent_name, digging_method=digging_method
        )
        if telemetry is not None:
            telemetry.log_decision(task)
        results.append(task)
    return tuple(results)


def persistable_tasks(reconciled: Iterable[ReconciledTask]) -> tuple[ReconciledTask, ...]:
    """Drop lines without positive hours; they are never stored as work done."""

    return tuple(task for task in reconciled if task.persistable)


def unmatched_tasks(reconciled: Iterable[ReconciledTask]) -> tuple[ReconciledTask, ...]:
    """Lines without any template id, i.e. data-quality gaps in the catalog."""

    return tuple(task for task in reconciled if task.template_id is None)


__all__ = [
    "ReconciledTask",
    "reconcile_task",
    "reconcile_breakdown",
    "persistable_tasks",
    "unmatched_tasks",
]
