"""Hardscape estimation engine: quantities, labour hours and template reconciliation."""

from hardscape.calculators import estimate, parse_inputs
from hardscape.config import EstimationConfig, RateTemplate, default_config
from hardscape.core import (
    Estimate,
    HardscapeValueError,
    MaterialLine,
    QuantityResult,
    TaskBreakdownItem,
)
from hardscape.matching import match_template, reconcile_breakdown
from hardscape.transport import estimate_transport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "estimate",
    "parse_inputs",
    "EstimationConfig",
    "RateTemplate",
    "default_config",
    "Estimate",
    "HardscapeValueError",
    "MaterialLine",
    "QuantityResult",
    "TaskBreakdownItem",
    "match_template",
    "reconcile_breakdown",
    "estimate_transport",
]
