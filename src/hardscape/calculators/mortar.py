"""Mortar volume and dry-mix quantities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hardscape.breakdown.assembler import assemble
from hardscape.calculators.common import template_rate, transport_options
from hardscape.calculators.inputs import MortarInputs, coerce_inputs
from hardscape.config.models import EstimationConfig
from hardscape.core.errors import HardscapeValueError
from hardscape.core.types import Estimate, MaterialLine, QuantityResult, TaskBreakdownItem
from hardscape.reference.mortar import (
    MORTAR_MIXES,
    MORTAR_TEMPLATE_NAME,
    SLAB_MORTAR_THICKNESS_CM,
    MortarVariant,
    cement_bags,
)
from hardscape.transport.model import transport_leg


@dataclass(frozen=True)
class MortarDetails:
    variant: MortarVariant
    volume_m3: float
    cement_kg: float
    cement_bags: int
    sand_kg: float
    template_id: str | None

    @property
    def sand_tonnes(self) -> float:
        return self.sand_kg / 1000


def mortar_volume(inputs: MortarInputs) -> float:
    """Wet mortar volume in m³; raises when the variant's dimensions are missing."""

    for name in inputs.required_fields():
        if getattr(inputs, name) is None:
            raise HardscapeValueError(
                f"{name} is required for {inputs.variant.value} mortar", field=name
            )
    if inputs.variant is MortarVariant.SLAB:
        return inputs.area_m2 * SLAB_MORTAR_THICKNESS_CM / 100
    return inputs.length_m * inputs.width_m * inputs.thickness_cm / 100


def estimate_mortar(inputs: MortarInputs | Mapping[str, Any], config: EstimationConfig) -> Estimate:
    inputs = coerce_inputs(inputs, MortarInputs)
    warnings: list[str] = []

    volume = mortar_volume(inputs)
    mix = MORTAR_MIXES[inputs.variant]
    cement_kg = volume * mix.cement_kg_per_m3
    sand_kg = volume * mix.sand_kg_per_m3
    bags = cement_bags(cement_kg)

    template = config.template_named(MORTAR_TEMPLATE_NAME)
    rate, template_id = template_rate(template, f"'{MORTAR_TEMPLATE_NAME}'", warnings)
    primary = TaskBreakdownItem(
        name=template.name if template is not None else MORTAR_TEMPLATE_NAME,
        hours=rate * volume,
        amount=volume,
        unit="m³",
        template_id=template_id,
    )

    legs: list[TaskBreakdownItem | None] = []
    options = transport_options(inputs.transport, config)
    if options is not None:
        legs.append(
            transport_leg(
                "transport sand",
                sand_kg / 1000,
                "tonnes",
                "sand",
                options,
                config.rate_tables,
                warnings=warnings,
            )
        )
        legs.append(
            transport_leg(
                "transport cement",
                bags,
                "bags",
                "cement",
                options,
                config.rate_tables,
                warnings=warnings,
            )
        )

    details = MortarDetails(
        variant=inputs.variant,
        volume_m3=volume,
        cement_kg=cement_kg,
        cement_bags=bags,
        sand_kg=sand_kg,
        template_id=template_id,
    )
    return Estimate(
        calculator="mortar",
        quantity=QuantityResult(quantity=volume, unit="m³"),
        task_breakdown=assemble(primary, legs),
        materials=(
            MaterialLine(name="Cement", quantity=bags, unit="bags"),
            MaterialLine(name="Sand", quantity=sand_kg / 1000, unit="tonnes"),
        ),
        details=details,
        warnings=tuple(warnings),
    )


__all__ = ["MortarDetails", "mortar_volume", "estimate_mortar"]
