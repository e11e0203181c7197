"""Tabular (pandas) views over estimates and reconciliation results."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from hardscape.core.types import Estimate
from hardscape.matching.reconcile import ReconciledTask

BREAKDOWN_COLUMNS = ["task", "hours", "amount", "unit", "template_id", "normalized_hours"]
MATERIAL_COLUMNS = ["material", "quantity", "unit", "price_per_unit", "total_price"]
RECONCILED_COLUMNS = [
    "task",
    "resolved_name",
    "strategy",
    "template_id",
    "template_name",
    "estimated_hours_per_unit",
    "hours",
    "amount",
    "unit",
    "low_confidence",
]


def breakdown_dataframe(estimate: Estimate) -> pd.DataFrame:
    """Return the task breakdown in calculator order (one row per line)."""

    rows = [
        {
            "task": item.name,
            "hours": item.hours,
            "amount": item.amount,
            "unit": item.unit,
            "template_id": item.template_id,
            "normalized_hours": item.normalized_hours,
        }
        for item in estimate.task_breakdown
    ]
    if not rows:
        return pd.DataFrame(columns=BREAKDOWN_COLUMNS)
    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def materials_dataframe(estimate: Estimate) -> pd.DataFrame:
    rows = [
        {
            "material": line.name,
            "quantity": line.quantity,
            "unit": line.unit,
            "price_per_unit": line.price_per_unit,
            "total_price": line.total_price,
        }
        for line in estimate.materials
    ]
    if not rows:
        return pd.DataFrame(columns=MATERIAL_COLUMNS)
    return pd.DataFrame(rows, columns=MATERIAL_COLUMNS)


def reconciled_dataframe(reconciled: Iterable[ReconciledTask]) -> pd.DataFrame:
    """Return reconciliation decisions, flagging partial matches as low confidence."""

    rows = []
    for task in reconciled:
        template = task.match.template
        rows.append(
            {
                "task": task.item.name,
                "resolved_name": task.resolved_name,
                "strategy": task.match.strategy.value,
                "template_id": task.template_id,
                "template_name": template.name if template is not None else None,
                "estimated_hours_per_unit": task.estimated_hours_per_unit,
                "hours": task.item.hours,
                "amount": task.item.amount,
                "unit": task.unit,
                "low_confidence": task.match.low_confidence,
            }
        )
    if not rows:
        return pd.DataFrame(columns=RECONCILED_COLUMNS)
    return pd.DataFrame(rows, columns=RECONCILED_COLUMNS)


__all__ = [
    "BREAKDOWN_COLUMNS",
    "MATERIAL_COLUMNS",
    "RECONCILED_COLUMNS",
    "breakdown_dataframe",
    "materials_dataframe",
    "reconciled_dataframe",
]
