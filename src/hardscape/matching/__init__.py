"""Template reconciliation matcher."""

from .aliases import resolve_task_name
from .reconcile import (
    ReconciledTask,
    persistable_tasks,
    reconcile_breakdown,
    reconcile_task,
    unmatched_tasks,
)
from .strategies import (
    MATCH_STRATEGIES,
    MatchResult,
    MatchStrategy,
    domain_specific_match,
    exact_match,
    match_template,
    partial_match,
    word_order_match,
)

__all__ = [
    "resolve_task_name",
    "ReconciledTask",
    "persistable_tasks",
    "reconcile_breakdown",
    "reconcile_task",
    "unmatched_tasks",
    "MATCH_STRATEGIES",
    "MatchResult",
    "MatchStrategy",
    "domain_specific_match",
    "exact_match",
    "match_template",
    "partial_match",
    "word_order_match",
]
