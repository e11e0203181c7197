"""Pydantic models describing the explicit estimation configuration."""

from __future__ import annotations

import math
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, field_validator

from hardscape.reference.rate_tables import RateTables, load_default_rate_tables
from hardscape.transport.model import TransportOptions

DEFAULT_CARRIER_SIZE_T = 0.125
DEFAULT_DISTANCE_M = 30.0


class RateTemplate(BaseModel):
    """Company rate template (read-only catalog entry).

    Attributes
    ----------
    id:
        Catalog identifier persisted alongside reconciled tasks.
    name:
        Display name matched against calculator task names.
    unit:
        Unit the hours are expressed per (``m3``, ``metres``, ``tonnes``, ...).
    estimated_hours_per_unit:
        Authoritative labour rate; ``None`` when the company has not filled it in.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    unit: str = ""
    estimated_hours_per_unit: float | None = None

    @field_validator("id", "name", mode="before")
    @classmethod
    def _not_blank(cls, value: object) -> str:
        text = "" if value is None else str(value).strip()
        if not text:
            raise ValueError("RateTemplate id/name must be non-empty")
        return text

    @field_validator("unit", mode="before")
    @classmethod
    def _unit_text(cls, value: object) -> str:
        if value is None or (isinstance(value, float) and math.isnan(value)):
            return ""
        return str(value).strip()

    @field_validator("estimated_hours_per_unit", mode="before")
    @classmethod
    def _blank_hours(cls, value: object) -> object:
        # CSV gaps arrive as NaN or empty strings.
        if value is None or value == "":
            return None
        if isinstance(value, float) and math.isnan(value):
            return None
        return value

    @field_validator("estimated_hours_per_unit")
    @classmethod
    def _hours_non_negative(cls, value: float | None) -> float | None:
        if value is not None and value < 0:
            raise ValueError("RateTemplate.estimated_hours_per_unit must be non-negative")
        return value

    @property
    def positive_hours(self) -> float | None:
        """Hours per unit when usable as an authoritative rate, else ``None``."""

        if self.estimated_hours_per_unit is None or self.estimated_hours_per_unit <= 0:
            return None
        return self.estimated_hours_per_unit


class EstimationConfig(BaseModel):
    """Everything a calculator reads besides its own inputs.

    Attributes
    ----------
    rate_tables:
        Carrier speeds and material capacities.
    catalog:
        Ordered rate-template snapshot; order decides ties during matching.
    default_carrier_size_t:
        Carrier used when an input enables transport without choosing one.
    default_distance_m:
        One-way haul distance used when an input omits it.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    rate_tables: RateTables
    catalog: tuple[RateTemplate, ...] = ()
    default_carrier_size_t: float = DEFAULT_CARRIER_SIZE_T
    default_distance_m: float = DEFAULT_DISTANCE_M

    @field_validator("default_carrier_size_t")
    @classmethod
    def _carrier_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("default_carrier_size_t must be > 0")
        return value

    @field_validator("default_distance_m")
    @classmethod
    def _distance_non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("default_distance_m must be non-negative")
        return value

    def template_named(self, name: str) -> RateTemplate | None:
        """First template whose name equals ``name`` (case-insensitive)."""

        target = name.strip().lower()
        for template in self.catalog:
            if template.name.lower() == target:
                return template
        return None

    def template_containing(self, *fragments: str) -> RateTemplate | None:
        """First template whose name contains every fragment (case-insensitive)."""

        needles = [fragment.lower() for fragment in fragments]
        for template in self.catalog:
            lowered = template.name.lower()
            if all(needle in lowered for needle in needles):
                return template
        return None

    def transport_options(
        self, carrier_size_t: float | None = None, distance_m: float | None = None
    ) -> TransportOptions:
        if carrier_size_t is None:
            carrier_size_t = self.default_carrier_size_t
        if distance_m is None:
            distance_m = self.default_distance_m
        return TransportOptions(carrier_size_t=carrier_size_t, distance_m=distance_m)


def default_config(catalog: Sequence[RateTemplate] = ()) -> EstimationConfig:
    """Configuration backed by the bundled rate tables and an optional catalog."""

    return EstimationConfig(rate_tables=load_default_rate_tables(), catalog=tuple(catalog))


__all__ = [
    "DEFAULT_CARRIER_SIZE_T",
    "DEFAULT_DISTANCE_M",
    "RateTemplate",
    "EstimationConfig",
    "default_config",
]
