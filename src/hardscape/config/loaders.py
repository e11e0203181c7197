"""Configuration loading utilities (YAML metadata + CSV tables)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pandas as pd
import yaml
from pydantic import BaseModel, TypeAdapter, field_validator

from hardscape.config.models import (
    DEFAULT_CARRIER_SIZE_T,
    DEFAULT_DISTANCE_M,
    EstimationConfig,
    RateTemplate,
)
from hardscape.reference.rate_tables import (
    RateTables,
    build_rate_tables,
    load_default_rate_tables,
)

__all__ = [
    "CarrierEntry",
    "CapacityEntry",
    "load_estimation_config",
    "load_catalog",
    "load_inputs",
    "read_csv",
]


class CarrierEntry(BaseModel):
    """Row of a carrier table (``size_class_t``, ``speed_m_per_hour``)."""

    size_class_t: float
    speed_m_per_hour: float

    @field_validator("size_class_t", "speed_m_per_hour")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Carrier size and speed must be > 0")
        return value


class CapacityEntry(BaseModel):
    """Row of a capacity table (``material``, ``size_class_t``, ``capacity``)."""

    material: str
    size_class_t: float
    capacity: float

    @field_validator("material")
    @classmethod
    def _material_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("CapacityEntry.material must be non-empty")
        return value

    @field_validator("size_class_t", "capacity")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Capacity size and value must be > 0")
        return value


def read_csv(path: Path) -> pd.DataFrame:
    """Load a CSV file using pandas with UTF-8 defaults."""
    return pd.read_csv(path)


def _records(frame: pd.DataFrame) -> list[dict[str, Any]]:
    return frame.to_dict("records")


def load_catalog(path: str | Path) -> tuple[RateTemplate, ...]:
    """Read a rate-template CSV (``id``, ``name``, ``unit``, ``estimated_hours_per_unit``)."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    frame = read_csv(path)
    # Identifiers stay textual even when every id in the file is numeric.
    if "id" in frame.columns:
        frame["id"] = frame["id"].astype(str)
    return tuple(TypeAdapter(list[RateTemplate]).validate_python(_records(frame)))


def _rate_tables(meta: dict[str, Any], require: Callable[[str], Path]) -> RateTables:
    data_section = meta.get("data") or {}
    carriers_raw: list[dict[str, Any]] | None = None
    capacities_raw: list[dict[str, Any]] | None = None
    if "carriers" in data_section:
        carriers_raw = _records(read_csv(require("carriers")))
    elif "carriers" in meta:
        carriers_raw = list(meta["carriers"])
    if "capacities" in data_section:
        capacities_raw = _records(read_csv(require("capacities")))
    elif "capacities" in meta:
        capacities_raw = list(meta["capacities"])

    defaults = load_default_rate_tables()
    if carriers_raw is None and capacities_raw is None and "material_aliases" not in meta:
        return defaults

    if carriers_raw is None:
        carriers = list(defaults.carriers)
    else:
        carriers = [
            entry.model_dump()
            for entry in TypeAdapter(list[CarrierEntry]).validate_python(carriers_raw)
        ]
    if capacities_raw is None:
        capacities = {material: dict(table) for material, table in defaults.capacities.items()}
    else:
        capacities = {}
        for entry in TypeAdapter(list[CapacityEntry]).validate_python(capacities_raw):
            capacities.setdefault(entry.material, {})[entry.size_class_t] = entry.capacity
    aliases = dict(defaults.aliases)
    aliases.update(meta.get("material_aliases") or {})
    return build_rate_tables(
        carriers,
        capacities,
        default_speed_m_per_hour=float(
            meta.get("default_speed_m_per_hour", defaults.default_speed_m_per_hour)
        ),
        aliases=aliases,
    )


def load_estimation_config(yaml_path: str | Path) -> EstimationConfig:
    """Load an :class:`EstimationConfig` from YAML metadata plus optional CSV tables.

    Parameters
    ----------
    yaml_path:
        Path to a YAML document. Its ``data`` section may name ``catalog``, ``carriers`` and
        ``capacities`` CSV files relative to the YAML file; the same tables may also be given
        inline under top-level keys of the same name.

    Returns
    -------
    EstimationConfig
        Validated configuration. Carrier or capacity tables that are not supplied come from
        the bundled reference data.

    Raises
    ------
    FileNotFoundError
        If the YAML file or a referenced CSV does not exist.
    pydantic.ValidationError
        If a table row fails validation.
    """
    base_path = Path(yaml_path).resolve()
    if not base_path.exists():
        raise FileNotFoundError(base_path)
    with base_path.open("r", encoding="utf-8") as handle:
        meta = yaml.safe_load(handle) or {}
    if not isinstance(meta, dict):
        raise ValueError(f"{base_path} must contain a YAML mapping")
    root = base_path.parent
    data_section = meta.get("data") or {}

    def require(name: str) -> Path:
        candidate = root / data_section[name]
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        return candidate

    if "catalog" in data_section:
        catalog = load_catalog(require("catalog"))
    else:
        catalog = tuple(TypeAdapter(list[RateTemplate]).validate_python(meta.get("catalog") or []))

    return EstimationConfig(
        rate_tables=_rate_tables(meta, require),
        catalog=catalog,
        default_carrier_size_t=float(meta.get("default_carrier_size_t", DEFAULT_CARRIER_SIZE_T)),
        default_distance_m=float(meta.get("default_distance_m", DEFAULT_DISTANCE_M)),
    )


def load_inputs(yaml_path: str | Path) -> dict[str, Any]:
    """Read a calculator input document (a mapping carrying ``kind``) from YAML."""
    path = Path(yaml_path)
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{path} must contain a YAML mapping")
    return payload
