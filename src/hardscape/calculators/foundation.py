"""Foundation trench excavation (volume, digging hours, spoil and aggregate)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hardscape.breakdown.assembler import assemble
from hardscape.calculators.common import transport_options
from hardscape.calculators.inputs import FoundationInputs, coerce_inputs
from hardscape.config.models import EstimationConfig, RateTemplate
from hardscape.core.types import Estimate, MaterialLine, QuantityResult, TaskBreakdownItem
from hardscape.reference.excavation import (
    CONCRETE_AGGREGATE_KG_PER_M3,
    DIGGING_FALLBACK_MULTIPLIERS,
    DIGGING_TEMPLATE_NAMES,
    DIMENSION_WEIGHTS,
    LEGACY_DIGGING_TEMPLATE_NAMES,
    MANUAL_DIGGING_RATE_M3_PER_HOUR,
    REFERENCE_EXCAVATION,
    SOIL_PROPERTIES,
    DiggingMethod,
    SoilType,
)
from hardscape.transport.model import transport_leg

FOUNDATION_TASK_NAME = "Foundation Excavation"


@dataclass(frozen=True)
class FoundationDetails:
    """
    Intermediate quantities behind a foundation estimate.

    Attributes
    ----------
    volume_m3:
        In-situ trench volume (``length * width * depth``).
    dimension_factor:
        Weighted ratio of the trench to the 15 × 0.6 × 0.6 m reference (1.0 for the reference).
    manual_hours:
        Hand-digging hours at 0.45 m³/h, before the dimension adjustment.
    adjusted_hours:
        ``manual_hours * dimension_factor``.
    excavation_hours:
        Final hours after the digging-method template (or fallback multiplier).
    template_id:
        Catalog template that supplied the method rate, if any.
    soil_tonnes:
        In-situ spoil weight (``volume * density``), the quantity hauled away.
    loose_volume_m3:
        Spoil volume after bulking.
    aggregate_tonnes:
        Concrete aggregate required to refill the trench.
    """

    length_m: float
    width_m: float
    depth_m: float
    soil_type: SoilType
    digging_method: DiggingMethod
    volume_m3: float
    dimension_factor: float
    manual_hours: float
    adjusted_hours: float
    excavation_hours: float
    template_id: str | None
    soil_tonnes: float
    loose_volume_m3: float
    aggregate_tonnes: float


def dimension_factor(length_m: float, width_m: float, depth_m: float) -> float:
    """Weighted size ratio of a trench against the reference excavation."""

    return (
        DIMENSION_WEIGHTS.length * (length_m / REFERENCE_EXCAVATION.length_m)
        + DIMENSION_WEIGHTS.width * (width_m / REFERENCE_EXCAVATION.width_m)
        + DIMENSION_WEIGHTS.depth * (depth_m / REFERENCE_EXCAVATION.depth_m)
    )


def digging_template(method: DiggingMethod, config: EstimationConfig) -> RateTemplate | None:
    template = config.template_named(DIGGING_TEMPLATE_NAMES[method])
    if template is None and method in LEGACY_DIGGING_TEMPLATE_NAMES:
        template = config.template_named(LEGACY_DIGGING_TEMPLATE_NAMES[method])
    return template


def method_hours(
    method: DiggingMethod,
    adjusted_hours: float,
    config: EstimationConfig,
    warnings: list[str],
) -> tuple[float, str | None]:
    """Apply the catalog rate for ``method``; fall back to the fixed speed-up multipliers."""

    template = digging_template(method, config)
    if template is not None and template.positive_hours is not None:
        return adjusted_hours * template.positive_hours, template.id
    multiplier = DIGGING_FALLBACK_MULTIPLIERS[method]
    warnings.append(
        f"No rate template with hours for '{DIGGING_TEMPLATE_NAMES[method]}'; "
        f"using fixed {method.value} multiplier 1/{multiplier:g}."
    )
    return adjusted_hours / multiplier, None


def estimate_foundation(
    inputs: FoundationInputs | Mapping[str, Any], config: EstimationConfig
) -> Estimate:
    """
    Estimate digging hours and materials for a strip foundation.

    Parameters
    ----------
    inputs:
        Trench dimensions (depth in cm), digging method and soil type.
    config:
        Rate tables and catalog; the catalog supplies the per-method digging rate.

    Returns
    -------
    Estimate
        ``Foundation Excavation`` first, then an optional ``transport soil`` leg. Materials list
        the bulked spoil and the concrete aggregate, both in tonnes.
    """

    inputs = coerce_inputs(inputs, FoundationInputs)
    warnings: list[str] = []

    depth_m = inputs.depth_m
    volume = inputs.length_m * inputs.width_m * depth_m
    factor = dimension_factor(inputs.length_m, inputs.width_m, depth_m)
    manual_hours = volume / MANUAL_DIGGING_RATE_M3_PER_HOUR
    adjusted_hours = manual_hours * factor
    hours, template_id = method_hours(inputs.digging_method, adjusted_hours, config, warnings)

    soil = SOIL_PROPERTIES[inputs.soil_type]
    soil_tonnes = volume * soil.density_t_per_m3
    loose_volume = volume * soil.loose_volume_coefficient
    aggregate_tonnes = volume * CONCRETE_AGGREGATE_KG_PER_M3 / 1000

    primary = TaskBreakdownItem(
        name=FOUNDATION_TASK_NAME,
        hours=hours,
        amount=volume,
        unit="m³",
        template_id=template_id,
    )
    legs: list[TaskBreakdownItem | None] = []
    options = transport_options(inputs.transport, config)
    if options is not None:
        legs.append(
            transport_leg(
                "transport soil",
                soil_tonnes,
                "tonnes",
                "soil",
                options,
                config.rate_tables,
                warnings=warnings,
            )
        )

    soil_label = inputs.soil_type.value.capitalize()
    materials = (
        MaterialLine(
            name=f"Excavated {soil_label} Soil (loose volume)",
            quantity=loose_volume * soil.density_t_per_m3,
            unit="tonnes",
        ),
        MaterialLine(name="Aggregate (for concrete)", quantity=aggregate_tonnes, unit="tonnes"),
    )
    details = FoundationDetails(
        length_m=inputs.length_m,
        width_m=inputs.width_m,
        depth_m=depth_m,
        soil_type=inputs.soil_type,
        digging_method=inputs.digging_method,
        volume_m3=volume,
        dimension_factor=factor,
        manual_hours=manual_hours,
        adjusted_hours=adjusted_hours,
        excavation_hours=hours,
        template_id=template_id,
        soil_tonnes=soil_tonnes,
        loose_volume_m3=loose_volume,
        aggregate_tonnes=aggregate_tonnes,
    )
    return Estimate(
        calculator="foundation",
        quantity=QuantityResult(quantity=volume, unit="m³"),
        task_breakdown=assemble(primary, legs),
        materials=materials,
        details=details,
        warnings=tuple(warnings),
    )


__all__ = [
    "FOUNDATION_TASK_NAME",
    "FoundationDetails",
    "dimension_factor",
    "digging_template",
    "method_hours",
    "estimate_foundation",
]
