"""Helpers shared by the calculator implementations."""

from __future__ import annotations

from hardscape.calculators.inputs import TransportInputs
from hardscape.config.models import EstimationConfig, RateTemplate
from hardscape.transport.model import TransportOptions


def transport_options(
    transport: TransportInputs | None, config: EstimationConfig
) -> TransportOptions | None:
    """Resolve optional transport inputs against the configuration defaults."""

    if transport is None:
        return None
    return config.transport_options(transport.carrier_size_t, transport.distance_m)


def template_rate(
    template: RateTemplate | None, label: str, warnings: list[str]
) -> tuple[float, str | None]:
    """
    Return ``(hours_per_unit, template_id)`` for a catalog template.

    Missing templates or templates without positive hours yield ``0.0`` and a warning.
    """

    if template is None:
        warnings.append(f"No rate template found for {label}; labour hours set to 0.")
        return 0.0, None
    hours = template.positive_hours
    if hours is None:
        warnings.append(f"Rate template '{template.name}' has no hours; labour hours set to 0.")
        return 0.0, template.id
    return hours, template.id


__all__ = ["transport_options", "template_rate"]
