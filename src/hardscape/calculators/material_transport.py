"""Standalone transport estimate for any material."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hardscape.calculators.inputs import MaterialTransportInputs, coerce_inputs
from hardscape.config.models import EstimationConfig
from hardscape.core.types import Estimate, QuantityResult
from hardscape.transport.model import TransportEstimate, estimate_transport, transport_leg


@dataclass(frozen=True)
class MaterialTransportDetails:
    material_type: str
    carrier_size_t: float
    distance_m: float
    transport: TransportEstimate


def estimate_material_transport(
    inputs: MaterialTransportInputs | Mapping[str, Any], config: EstimationConfig
) -> Estimate:
    """
    Estimate hauling ``quantity`` of ``material_type`` to the work area.

    The single breakdown line is named ``transport <material>`` unless ``task_name`` is given; it
    is omitted when the haul takes no time (zero distance).
    Transport options default to the configuration carrier and distance when omitted.
    """

    inputs = coerce_inputs(inputs, MaterialTransportInputs)
    transport = inputs.transport
    options = config.transport_options(
        transport.carrier_size_t if transport else None,
        transport.distance_m if transport else None,
    )
    result = estimate_transport(
        inputs.quantity,
        options.carrier_size_t,
        inputs.material_type,
        options.distance_m,
        config.rate_tables,
    )
    item = transport_leg(
        inputs.task_name or f"transport {inputs.material_type}",
        inputs.quantity,
        inputs.unit,
        inputs.material_type,
        options,
        config.rate_tables,
    )
    details = MaterialTransportDetails(
        material_type=inputs.material_type,
        carrier_size_t=options.carrier_size_t,
        distance_m=options.distance_m,
        transport=result,
    )
    return Estimate(
        calculator="material_transport",
        quantity=QuantityResult(quantity=inputs.quantity, unit=inputs.unit),
        task_breakdown=(item,) if item is not None else (),
        materials=(),
        details=details,
        warnings=result.warnings,
    )


__all__ = ["MaterialTransportDetails", "estimate_material_transport"]
