"""Kerbs, edges and sets: unit counts, bedding/hunch mortar and laying hours."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hardscape.breakdown.assembler import assemble
from hardscape.calculators.common import template_rate, transport_options
from hardscape.calculators.inputs import KerbInputs, coerce_inputs
from hardscape.config.models import EstimationConfig
from hardscape.core.types import Estimate, MaterialLine, QuantityResult, TaskBreakdownItem
from hardscape.reference.kerbs import (
    HUNCH_CONFIGS,
    HUNCH_WIDTH_CM,
    KERB_NAMES,
    KERB_TRANSPORT_MATERIAL,
    LEVELING_TASK_NAME,
    LEVELING_TEMPLATE_NAME,
    HunchConfig,
    HunchType,
    KerbProfile,
    KerbType,
    kerb_profile,
    kerb_units,
)
from hardscape.reference.mortar import (
    KERB_MORTAR_CEMENT_KG_PER_M3,
    KERB_MORTAR_SAND_T_PER_M3,
    cement_bags,
)
from hardscape.transport.model import transport_leg


@dataclass(frozen=True)
class KerbDetails:
    """
    Intermediate quantities behind a kerb estimate.

    Attributes
    ----------
    profile:
        Unit dimensions (cm) used for the mortar bed and hunches.
    hunch:
        Hunch configuration applied to both sides.
    mortar_volume_m3:
        Bedding plus hunch mortar.
    unit_count / unit_label:
        Number of kerbs, pieces or sets needed for the run.
    cement_bags / sand_tonnes:
        Dry mortar ingredients.
    """

    kerb_type: KerbType
    length_m: float
    base_height_cm: float
    rumbled_standing: bool
    profile: KerbProfile
    hunch: HunchConfig
    mortar_volume_m3: float
    unit_count: float
    unit_label: str
    cement_bags: int
    sand_tonnes: float
    template_id: str | None


def hunch_volume_m3(length_m: float, unit_height_cm: float, fraction: float) -> float:
    """Triangular hunch along one side of the run."""

    if fraction <= 0:
        return 0.0
    length_cm = length_m * 100
    return (length_cm * HUNCH_WIDTH_CM * unit_height_cm * fraction) / (2 * 1_000_000)


def kerb_mortar_volume(
    length_m: float, base_height_cm: float, profile: KerbProfile, hunch: HunchType | HunchConfig
) -> float:
    """Bedding mortar under the units plus both hunches, in cubic metres."""

    config = hunch if isinstance(hunch, HunchConfig) else HUNCH_CONFIGS[hunch]
    length_cm = length_m * 100
    volume = (length_cm * profile.width_cm * base_height_cm) / 1_000_000
    volume += hunch_volume_m3(length_m, profile.height_cm, config.left)
    volume += hunch_volume_m3(length_m, profile.height_cm, config.right)
    return volume


def estimate_kerbs(inputs: KerbInputs | Mapping[str, Any], config: EstimationConfig) -> Estimate:
    """
    Estimate materials and hours for a kerb, edging or set run.

    The laying rate comes from the first catalog template whose name contains the kerb display
    name (``KL kerbs``, ``Rumbled kerbs``, ...), multiplied by the run length. Transport legs are
    emitted for the units, the sand and the cement, in that order, followed by the leveling task
    when the catalog carries ``preparing for the wall (leveling)``.
    """

    inputs = coerce_inputs(inputs, KerbInputs)
    warnings: list[str] = []
    length_m = inputs.length_m
    display_name = KERB_NAMES[inputs.kerb_type]

    profile = kerb_profile(inputs.kerb_type, rumbled_standing=inputs.rumbled_standing)
    hunch = HUNCH_CONFIGS[inputs.hunch]
    mortar_volume = kerb_mortar_volume(length_m, inputs.base_height_cm, profile, hunch)
    bags = cement_bags(mortar_volume * KERB_MORTAR_CEMENT_KG_PER_M3)
    sand_tonnes = mortar_volume * KERB_MORTAR_SAND_T_PER_M3
    unit_count, unit_label = kerb_units(
        inputs.kerb_type, length_m, rumbled_standing=inputs.rumbled_standing
    )

    template = config.template_containing(display_name)
    rate, template_id = template_rate(template, f"'{display_name}'", warnings)
    primary = TaskBreakdownItem(
        name=template.name if template is not None else display_name,
        hours=rate * length_m,
        amount=length_m,
        unit="metres",
        template_id=template_id,
    )

    legs: list[TaskBreakdownItem | None] = []
    options = transport_options(inputs.transport, config)
    if options is not None:
        tables = config.rate_tables
        legs.append(
            transport_leg(
                "transport kerbs",
                unit_count,
                unit_label,
                KERB_TRANSPORT_MATERIAL[inputs.kerb_type],
                options,
                tables,
                warnings=warnings,
            )
        )
        legs.append(
            transport_leg(
                "transport sand", sand_tonnes, "tonnes", "sand", options, tables, warnings=warnings
            )
        )
        legs.append(
            transport_leg(
                "transport cement", bags, "bags", "cement", options, tables, warnings=warnings
            )
        )

    extras: list[TaskBreakdownItem] = []
    leveling = config.template_named(LEVELING_TEMPLATE_NAME)
    if leveling is not None and leveling.estimated_hours_per_unit is not None:
        extras.append(
            TaskBreakdownItem(
                name=LEVELING_TASK_NAME,
                hours=length_m * leveling.estimated_hours_per_unit,
                amount=length_m,
                unit="metres",
                template_id=leveling.id,
            )
        )

    materials = (
        MaterialLine(name=display_name, quantity=unit_count, unit=unit_label),
        MaterialLine(name="Cement", quantity=bags, unit="bags"),
        MaterialLine(name="Sand", quantity=sand_tonnes, unit="tonnes"),
    )
    details = KerbDetails(
        kerb_type=inputs.kerb_type,
        length_m=length_m,
        base_height_cm=inputs.base_height_cm,
        rumbled_standing=inputs.rumbled_standing,
        profile=profile,
        hunch=hunch,
        mortar_volume_m3=mortar_volume,
        unit_count=unit_count,
        unit_label=unit_label,
        cement_bags=bags,
        sand_tonnes=sand_tonnes,
        template_id=template_id,
    )
    return Estimate(
        calculator="kerbs",
        quantity=QuantityResult(quantity=length_m, unit="metres"),
        task_breakdown=assemble(primary, legs, extras),
        materials=materials,
        details=details,
        warnings=tuple(warnings),
    )


__all__ = ["KerbDetails", "hunch_volume_m3", "kerb_mortar_volume", "estimate_kerbs"]
