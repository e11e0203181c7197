"""Transport time model."""

from .model import (
    REFERENCE_HAUL_DISTANCE_M,
    TransportEstimate,
    TransportOptions,
    estimate_transport,
    resolve_capacity,
    transport_leg,
)

__all__ = [
    "REFERENCE_HAUL_DISTANCE_M",
    "TransportEstimate",
    "TransportOptions",
    "estimate_transport",
    "resolve_capacity",
    "transport_leg",
]
