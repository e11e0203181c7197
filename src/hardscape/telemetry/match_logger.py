"""Structured log of template-reconciliation decisions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from .jsonl import append_jsonl

if TYPE_CHECKING:  # pragma: no cover
    from hardscape.matching.reconcile import ReconciledTask


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@dataclass
class MatchTelemetryLogger:
    """Append one JSONL record per reconciled task.

    Parameters
    ----------
    log_path:
        JSONL file receiving ``record_type="match"`` entries.
    context:
        Extra metadata copied into every record (calculator, parent task, input file).
    """

    log_path: Path
    context: Mapping[str, Any] | None = None
    schema_version: str = "1.0"
    session_id: str = field(default_factory=lambda: uuid4().hex, init=False)
    records_written: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.log_path = Path(self.log_path)

    def log_decision(self, task: ReconciledTask) -> None:
        match = task.match
        record = {
            "record_type": "match",
            "schema_version": self.schema_version,
            "session_id": self.session_id,
            "timestamp": _iso_now(),
            "task_name": task.item.name,
            "resolved_name": task.resolved_name,
            "strategy": match.strategy.value,
            "template_id": match.template_id,
            "template_name": match.template.name if match.template is not None else None,
            "assigned_template_id": task.template_id,
            "hours": task.item.hours,
            "low_confidence": match.low_confidence,
            "context": dict(self.context or {}),
        }
        append_jsonl(self.log_path, record)
        self.records_written += 1


__all__ = ["MatchTelemetryLogger"]
