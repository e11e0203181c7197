"""Telemetry helpers."""

from .jsonl import append_jsonl, read_jsonl
from .match_logger import MatchTelemetryLogger

__all__ = ["append_jsonl", "read_jsonl", "MatchTelemetryLogger"]
