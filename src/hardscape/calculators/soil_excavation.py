"""Bulk soil excavation by machine, rated per tonne."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hardscape.breakdown.assembler import assemble
from hardscape.calculators.common import template_rate, transport_options
from hardscape.calculators.inputs import SoilExcavationInputs, coerce_inputs
from hardscape.config.models import EstimationConfig, RateTemplate
from hardscape.core.errors import HardscapeValueError
from hardscape.core.types import Estimate, MaterialLine, QuantityResult, TaskBreakdownItem
from hardscape.reference.excavation import SOIL_EXCAVATION_DENSITY_T_PER_M3
from hardscape.transport.model import transport_leg


@dataclass(frozen=True)
class SoilExcavationDetails:
    """
    Intermediate quantities behind a soil-excavation estimate.

    Attributes
    ----------
    soil_tonnes:
        Tonnes dug, either entered directly or derived from dimensions at 1.5 t/m³.
    from_dimensions:
        ``True`` when the tonnage came from length × width × depth.
    rate_hours_per_tonne:
        Catalog rate for the chosen excavator (0 when no template matched).
    """

    excavator_name: str
    excavator_size_t: float
    soil_tonnes: float
    from_dimensions: bool
    rate_hours_per_tonne: float
    excavation_hours: float
    template_id: str | None


def soil_tonnes(inputs: SoilExcavationInputs) -> tuple[float, bool]:
    """Return ``(tonnes, from_dimensions)``."""

    if inputs.tonnes is not None:
        return inputs.tonnes, False
    for name in ("length_m", "width_m", "depth_cm"):
        if getattr(inputs, name) is None:
            raise HardscapeValueError(
                f"{name} is required when tonnes is not given", field=name
            )
    volume = inputs.length_m * inputs.width_m * inputs.depth_cm / 100
    return volume * SOIL_EXCAVATION_DENSITY_T_PER_M3, True


def excavation_template_label(excavator_name: str, excavator_size_t: float) -> str:
    return f"Excavation soil with {excavator_name} ({excavator_size_t:g}t)"


def excavation_template(
    excavator_name: str, excavator_size_t: float, config: EstimationConfig
) -> RateTemplate | None:
    """First template naming soil excavation with this excavator and size class."""

    return config.template_containing(
        "excavation soil", excavator_name, f"({excavator_size_t:g}t)"
    )


def estimate_soil_excavation(
    inputs: SoilExcavationInputs | Mapping[str, Any], config: EstimationConfig
) -> Estimate:
    inputs = coerce_inputs(inputs, SoilExcavationInputs)
    warnings: list[str] = []

    tonnes, from_dimensions = soil_tonnes(inputs)
    label = excavation_template_label(inputs.excavator_name, inputs.excavator_size_t)
    template = excavation_template(inputs.excavator_name, inputs.excavator_size_t, config)
    rate, template_id = template_rate(template, f"'{label}'", warnings)
    hours = rate * tonnes

    primary = TaskBreakdownItem(
        name=template.name if template is not None else label,
        hours=hours,
        amount=tonnes,
        unit="tonnes",
        template_id=template_id,
    )
    legs: list[TaskBreakdownItem | None] = []
    options = transport_options(inputs.transport, config)
    if options is not None:
        legs.append(
            transport_leg(
                "transport soil",
                tonnes,
                "tonnes",
                "soil",
                options,
                config.rate_tables,
                warnings=warnings,
            )
        )

    details = SoilExcavationDetails(
        excavator_name=inputs.excavator_name,
        excavator_size_t=inputs.excavator_size_t,
        soil_tonnes=tonnes,
        from_dimensions=from_dimensions,
        rate_hours_per_tonne=rate,
        excavation_hours=hours,
        template_id=template_id,
    )
    return Estimate(
        calculator="soil_excavation",
        quantity=QuantityResult(quantity=tonnes, unit="tonnes"),
        task_breakdown=assemble(primary, legs),
        materials=(MaterialLine(name="Soil", quantity=tonnes, unit="tonnes"),),
        details=details,
        warnings=tuple(warnings),
    )


__all__ = [
    "SoilExcavationDetails",
    "soil_tonnes",
    "excavation_template_label",
    "excavation_template",
    "estimate_soil_excavation",
]
