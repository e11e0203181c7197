"""Core utilities shared across hardscape modules."""

from .errors import HardscapeValueError
from .types import (
    Estimate,
    MaterialLine,
    QuantityResult,
    TaskBreakdownItem,
    format_amount,
)

__all__ = [
    "HardscapeValueError",
    "Estimate",
    "MaterialLine",
    "QuantityResult",
    "TaskBreakdownItem",
    "format_amount",
]
