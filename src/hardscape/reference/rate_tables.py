"""Carrier speed and material capacity tables used by the transport model."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

DATA_PATH = Path(__file__).resolve().parent / "data/rate_tables.json"

DEFAULT_CARRIER_SPEED_M_PER_HOUR = 4000.0


@dataclass(frozen=True)
class CarrierSpec:
    """
    Transport equipment class (wheelbarrow, power barrow, dumper).

    Attributes
    ----------
    size_class_t:
        Nominal capacity class in tonnes; the lookup key for speeds and capacities.
    speed_m_per_hour:
        Average travel speed including loading/tipping manoeuvres (m/h).
    """

    size_class_t: float
    speed_m_per_hour: float


@dataclass(frozen=True)
class RateTables:
    """
    Immutable carrier/material reference data supplied to every estimation request.

    Attributes
    ----------
    carriers:
        Carrier classes in declaration order.
    capacities:
        Mapping of ``material_type`` → ``{size_class_t: capacity_per_trip}``. Capacities use the
        same unit as the quantity being moved (pieces, bags or tonnes).
    default_speed_m_per_hour:
        Speed applied when a size class has no carrier entry.
    aliases:
        Alternative material keys folded onto canonical ones (e.g. ``tape1`` → ``type1``).
    """

    carriers: tuple[CarrierSpec, ...]
    capacities: Mapping[str, Mapping[float, float]]
    default_speed_m_per_hour: float = DEFAULT_CARRIER_SPEED_M_PER_HOUR
    aliases: Mapping[str, str] = field(default_factory=dict)

    def carrier_speed(self, size_class_t: float) -> float:
        """Return the configured speed for an exact size-class match, else the default."""

        size = float(size_class_t)
        for carrier in self.carriers:
            if carrier.size_class_t == size:
                return carrier.speed_m_per_hour
        return self.default_speed_m_per_hour

    def has_carrier(self, size_class_t: float) -> bool:
        size = float(size_class_t)
        return any(carrier.size_class_t == size for carrier in self.carriers)

    def material_capacity(self, material_type: str, size_class_t: float) -> float | None:
        """
        Return the per-trip capacity for an exact ``(material_type, size_class_t)`` pair.

        Returns ``None`` on a configuration gap; callers choose the fallback.
        """

        table = self.capacities.get(self.canonical_material(material_type))
        if table is None:
            return None
        return table.get(float(size_class_t))

    def capacity_sizes(self, material_type: str) -> tuple[float, ...]:
        """Sorted size classes configured for ``material_type`` (empty when unknown)."""

        table = self.capacities.get(self.canonical_material(material_type))
        if not table:
            return ()
        return tuple(sorted(table))

    def canonical_material(self, material_type: str) -> str:
        return self.aliases.get(material_type, material_type)

    def materials(self) -> tuple[str, ...]:
        return tuple(self.capacities)


def build_rate_tables(
    carriers: Iterable[CarrierSpec | Mapping[str, Any]],
    capacities: Mapping[str, Mapping[Any, Any]],
    *,
    default_speed_m_per_hour: float = DEFAULT_CARRIER_SPEED_M_PER_HOUR,
    aliases: Mapping[str, str] | None = None,
) -> RateTables:
    """
    Normalise loosely-typed carrier/capacity payloads into a :class:`RateTables` instance.

    Parameters
    ----------
    carriers:
        ``CarrierSpec`` instances or mappings with ``size_class_t`` and ``speed_m_per_hour``.
    capacities:
        ``material → {size: capacity}``; size keys may be strings (JSON/YAML) or numbers.
    default_speed_m_per_hour:
        Fallback speed for unknown size classes.
    aliases:
        Optional material aliases.
    """

    specs: list[CarrierSpec] = []
    for entry in carriers:
        if isinstance(entry, CarrierSpec):
            spec = entry
        else:
            spec = CarrierSpec(
                size_class_t=float(entry["size_class_t"]),
                speed_m_per_hour=float(entry["speed_m_per_hour"]),
            )
        if spec.size_class_t <= 0:
            raise ValueError("carrier size_class_t must be > 0")
        if spec.speed_m_per_hour <= 0:
            raise ValueError(f"carrier {spec.size_class_t}t speed_m_per_hour must be > 0")
        specs.append(spec)

    tables: dict[str, dict[float, float]] = {}
    for material, per_trip in capacities.items():
        table: dict[float, float] = {}
        for size, capacity in per_trip.items():
            value = float(capacity)
            if value <= 0:
                raise ValueError(f"capacity for {material} @ {size}t must be > 0")
            table[float(size)] = value
        tables[str(material)] = table

    if default_speed_m_per_hour <= 0:
        raise ValueError("default_speed_m_per_hour must be > 0")
    return RateTables(
        carriers=tuple(specs),
        capacities=tables,
        default_speed_m_per_hour=float(default_speed_m_per_hour),
        aliases=dict(aliases or {}),
    )


@lru_cache(maxsize=1)
def load_default_rate_tables() -> RateTables:
    """
    Load the bundled ``reference/data/rate_tables.json`` carrier and capacity tables.

    Raises
    ------
    FileNotFoundError
        If the JSON payload is missing from the installation.
    """

    if not DATA_PATH.exists():
        raise FileNotFoundError(f"Missing rate table data: {DATA_PATH}")
    payload = json.loads(DATA_PATH.read_text(encoding="utf-8"))
    capacities = {
        material: entry["per_trip"] for material, entry in payload["material_capacities"].items()
    }
    return build_rate_tables(
        payload["carriers"],
        capacities,
        default_speed_m_per_hour=float(
            payload.get("default_speed_m_per_hour", DEFAULT_CARRIER_SPEED_M_PER_HOUR)
        ),
        aliases=payload.get("material_aliases"),
    )


def carrier_speed(size_class_t: float, tables: RateTables | None = None) -> float:
    """Return carrier speed (m/h) for ``size_class_t``; 4000 m/h when the class is absent."""

    return (tables or load_default_rate_tables()).carrier_speed(size_class_t)


def material_capacity(
    material_type: str, size_class_t: float, tables: RateTables | None = None
) -> float | None:
    """Return trip capacity for the exact pair, or ``None`` on a configuration gap."""

    return (tables or load_default_rate_tables()).material_capacity(material_type, size_class_t)


__all__ = [
    "DATA_PATH",
    "DEFAULT_CARRIER_SPEED_M_PER_HOUR",
    "CarrierSpec",
    "RateTables",
    "build_rate_tables",
    "load_default_rate_tables",
    "carrier_speed",
    "material_capacity",
]
