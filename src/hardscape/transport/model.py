"""Trip-based transport time model shared by every calculator."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from hardscape.core.types import TaskBreakdownItem
from hardscape.reference.rate_tables import RateTables, load_default_rate_tables

REFERENCE_HAUL_DISTANCE_M = 30.0
FALLBACK_CAPACITY_PER_TRIP = 1.0


@dataclass(frozen=True)
class TransportOptions:
    """
    Carrier and haul distance chosen for a transport leg.

    Attributes
    ----------
    carrier_size_t:
        Carrier size class in tonnes (wheelbarrow 0.125, dumper 1, ...).
    distance_m:
        One-way distance between the drop point and the work area.
    """

    carrier_size_t: float
    distance_m: float


@dataclass(frozen=True)
class TransportEstimate:
    """
    Result of moving a quantity of material with one carrier.

    Attributes
    ----------
    trips:
        Round trips required (``ceil(quantity / capacity)``).
    capacity_per_trip:
        Capacity actually used, after any configuration-gap fallback.
    time_per_trip_hours:
        Out-and-back travel time for one trip.
    total_hours:
        ``trips * time_per_trip_hours``.
    normalized_hours:
        The same trips expressed over the 30 m reference haul.
    warnings:
        Fallbacks applied while resolving capacity or speed.
    """

    trips: int
    capacity_per_trip: float
    time_per_trip_hours: float
    total_hours: float
    normalized_hours: float
    warnings: tuple[str, ...] = field(default_factory=tuple)


def resolve_capacity(
    material_type: str, carrier_size_t: float, tables: RateTables
) -> tuple[float, str | None]:
    """
    Return ``(capacity, warning)`` for a material/carrier pair.

    An exact pair wins. Otherwise the nearest configured size class for the same material is
    used (ties go to the smaller class); unknown materials move one unit per trip.
    """

    capacity = tables.material_capacity(material_type, carrier_size_t)
    if capacity is not None:
        return capacity, None
    sizes = tables.capacity_sizes(material_type)
    if not sizes:
        return FALLBACK_CAPACITY_PER_TRIP, (
            f"No capacity configured for material '{material_type}'; "
            f"assuming {FALLBACK_CAPACITY_PER_TRIP:g} per trip."
        )
    nearest = min(sizes, key=lambda size: (abs(size - carrier_size_t), size))
    capacity = tables.material_capacity(material_type, nearest)
    assert capacity is not None
    return capacity, (
        f"No capacity configured for '{material_type}' on a {carrier_size_t:g}t carrier; "
        f"using the {nearest:g}t class ({capacity:g} per trip)."
    )


def estimate_transport(
    quantity: float,
    carrier_size_t: float,
    material_type: str,
    distance_m: float,
    tables: RateTables | None = None,
) -> TransportEstimate:
    """
    Estimate trips and hours needed to move ``quantity`` over ``distance_m`` (one way).

    Parameters
    ----------
    quantity:
        Amount to move, in the unit of the material's capacity table (pieces, bags, tonnes).
    carrier_size_t:
        Carrier size class used for both speed and capacity lookups.
    material_type:
        Capacity-table key (``sand``, ``kerbsSmall``, ...); aliases are honoured.
    distance_m:
        One-way haul distance. Non-positive distances mean transport does not apply.
    tables:
        Rate tables; defaults to the bundled reference tables.

    Returns
    -------
    TransportEstimate
        All zeros when ``quantity <= 0`` or ``distance_m <= 0``.
    """

    if quantity <= 0 or distance_m <= 0:
        return TransportEstimate(
            trips=0,
            capacity_per_trip=0.0,
            time_per_trip_hours=0.0,
            total_hours=0.0,
            normalized_hours=0.0,
        )
    tables = tables or load_default_rate_tables()
    warnings: list[str] = []

    capacity, warning = resolve_capacity(material_type, carrier_size_t, tables)
    if warning:
        warnings.append(warning)
    if not tables.has_carrier(carrier_size_t):
        warnings.append(
            f"No carrier configured for size {carrier_size_t:g}t; "
            f"using {tables.default_speed_m_per_hour:g} m/h."
        )
    speed = tables.carrier_speed(carrier_size_t)

    trips = math.ceil(quantity / capacity)
    time_per_trip = (2 * distance_m) / speed
    total_hours = trips * time_per_trip
    normalized_hours = total_hours * REFERENCE_HAUL_DISTANCE_M / distance_m
    return TransportEstimate(
        trips=trips,
        capacity_per_trip=capacity,
        time_per_trip_hours=time_per_trip,
        total_hours=total_hours,
        normalized_hours=normalized_hours,
        warnings=tuple(warnings),
    )


def transport_leg(
    name: str,
    quantity: float,
    unit: str,
    material_type: str,
    options: TransportOptions,
    tables: RateTables | None = None,
    *,
    warnings: list[str] | None = None,
) -> TaskBreakdownItem | None:
    """
    Build a transport breakdown line, or ``None`` when the leg takes no time.

    Fallback messages are appended to ``warnings`` when a list is supplied.
    """

    estimate = estimate_transport(
        quantity, options.carrier_size_t, material_type, options.distance_m, tables
    )
    if warnings is not None:
        warnings.extend(estimate.warnings)
    if estimate.total_hours <= 0:
        return None
    return TaskBreakdownItem(
        name=name,
        hours=estimate.total_hours,
        amount=quantity,
        unit=unit,
        normalized_hours=estimate.normalized_hours,
    )


__all__ = [
    "REFERENCE_HAUL_DISTANCE_M",
    "FALLBACK_CAPACITY_PER_TRIP",
    "TransportOptions",
    "TransportEstimate",
    "resolve_capacity",
    "estimate_transport",
    "transport_leg",
]
