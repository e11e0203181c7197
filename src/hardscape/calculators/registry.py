"""Calculator registry keyed by the input ``kind`` tag."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel

from hardscape.calculators.foundation import estimate_foundation
from hardscape.calculators.inputs import parse_inputs
from hardscape.calculators.kerbs import estimate_kerbs
from hardscape.calculators.material_transport import estimate_material_transport
from hardscape.calculators.mortar import estimate_mortar
from hardscape.calculators.soil_excavation import estimate_soil_excavation
from hardscape.config.models import EstimationConfig, default_config
from hardscape.core.types import Estimate

Calculator = Callable[[Any, EstimationConfig], Estimate]

CALCULATORS: dict[str, Calculator] = {
    "foundation": estimate_foundation,
    "kerbs": estimate_kerbs,
    "mortar": estimate_mortar,
    "soil_excavation": estimate_soil_excavation,
    "material_transport": estimate_material_transport,
}


def get_calculator(kind: str) -> Calculator:
    key = kind.lower()
    if key not in CALCULATORS:
        available = ", ".join(sorted(CALCULATORS))
        raise KeyError(f"Unknown calculator '{kind}'. Available: {available}")
    return CALCULATORS[key]


def list_calculators() -> tuple[str, ...]:
    return tuple(sorted(CALCULATORS))


def estimate(
    inputs: Mapping[str, Any] | BaseModel, config: EstimationConfig | None = None
) -> Estimate:
    """
    Validate ``inputs`` and run the calculator selected by its ``kind``.

    Parameters
    ----------
    inputs:
        A calculator input model or a mapping carrying ``kind`` plus the variant's fields.
    config:
        Explicit configuration; defaults to the bundled rate tables with an empty catalog.
    """

    parsed = parse_inputs(inputs)
    return get_calculator(parsed.kind)(parsed, config or default_config())


__all__ = ["CALCULATORS", "Calculator", "get_calculator", "list_calculators", "estimate"]
