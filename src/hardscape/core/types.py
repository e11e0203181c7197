"""Result payloads shared by every calculator."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from hardscape.calculators.foundation import FoundationDetails
    from hardscape.calculators.kerbs import KerbDetails
    from hardscape.calculators.material_transport import MaterialTransportDetails
    from hardscape.calculators.mortar import MortarDetails
    from hardscape.calculators.soil_excavation import SoilExcavationDetails

    EstimateDetails = (
        FoundationDetails
        | KerbDetails
        | MortarDetails
        | SoilExcavationDetails
        | MaterialTransportDetails
    )


def format_amount(value: float | str, digits: int = 2) -> str:
    """Return ``value`` rounded for display; strings pass through untouched."""

    if isinstance(value, str):
        return value
    return f"{value:.{digits}f}"


@dataclass(frozen=True)
class QuantityResult:
    """Physical output of a calculator (e.g. cubic metres excavated)."""

    quantity: float
    unit: str

    def display(self) -> str:
        return f"{format_amount(self.quantity)} {self.unit}"


@dataclass(frozen=True)
class TaskBreakdownItem:
    """
    One labour line in a task breakdown.

    Attributes
    ----------
    name:
        Task label emitted by the calculator (later reconciled against the rate catalog).
    hours:
        Estimated labour hours (never negative).
    amount:
        Work quantity; numbers keep full precision, strings are pre-formatted labels.
    unit:
        Unit of ``amount``.
    template_id:
        Rate template identifier, populated once the task is tied to a catalog entry.
    normalized_hours:
        Transport legs only: the same trips expressed over the 30 m reference haul.
    """

    name: str
    hours: float
    amount: float | str
    unit: str
    template_id: str | None = None
    normalized_hours: float | None = None

    def with_template(self, template_id: str | None) -> TaskBreakdownItem:
        return replace(self, template_id=template_id)

    def renamed(self, name: str) -> TaskBreakdownItem:
        return replace(self, name=name)

    def display_amount(self) -> str:
        return f"{format_amount(self.amount)} {self.unit}".strip()


@dataclass(frozen=True)
class MaterialLine:
    """Material requirement; price fields are filled by an external price lookup."""

    name: str
    quantity: float
    unit: str
    price_per_unit: float | None = None
    total_price: float | None = None

    def with_price(self, price_per_unit: float | None) -> MaterialLine:
        """Return a copy priced at ``price_per_unit`` (``None`` clears both price fields)."""

        if price_per_unit is None:
            return replace(self, price_per_unit=None, total_price=None)
        return replace(
            self,
            price_per_unit=price_per_unit,
            total_price=price_per_unit * self.quantity,
        )


@dataclass(frozen=True)
class Estimate:
    """
    Engine output for a single estimation request.

    Attributes
    ----------
    calculator:
        Calculator family that produced the estimate (``foundation``, ``kerbs``, ...).
    quantity:
        Headline physical quantity.
    task_breakdown:
        Ordered labour lines: primary task, transport legs, trailing tasks.
    materials:
        Material requirements in calculation order.
    details:
        Fully-typed per-family payload (intermediate quantities, factors, trips).
    warnings:
        Configuration-gap fallbacks applied while computing the estimate.
    """

    calculator: str
    quantity: QuantityResult
    task_breakdown: tuple[TaskBreakdownItem, ...]
    materials: tuple[MaterialLine, ...]
    details: EstimateDetails
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_hours(self) -> float:
        return sum(item.hours for item in self.task_breakdown)


__all__ = [
    "Estimate",
    "MaterialLine",
    "QuantityResult",
    "TaskBreakdownItem",
    "format_amount",
]
