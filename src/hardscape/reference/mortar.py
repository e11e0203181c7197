"""Mortar mix ratios and bagging constants."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

CEMENT_BAG_KG = 25.0

# Sand/cement screed laid under slabs.
SLAB_MORTAR_THICKNESS_CM = 3.0


class MortarVariant(str, Enum):
    SLAB = "slab"
    GENERAL = "general"


@dataclass(frozen=True)
class MortarMix:
    """Dry ingredients per cubic metre of wet mortar."""

    cement_kg_per_m3: float
    sand_kg_per_m3: float


MORTAR_MIXES: dict[MortarVariant, MortarMix] = {
    MortarVariant.SLAB: MortarMix(cement_kg_per_m3=350.0, sand_kg_per_m3=1200.0),
    MortarVariant.GENERAL: MortarMix(cement_kg_per_m3=400.0, sand_kg_per_m3=1350.0),
}

# Hunch/bedding mortar behind kerbs: cement per m3 and sand density.
KERB_MORTAR_CEMENT_KG_PER_M3 = 350.0
KERB_MORTAR_SAND_T_PER_M3 = 1.6

MORTAR_TEMPLATE_NAME = "Mortar mixing"


def cement_bags(cement_kg: float) -> int:
    """Whole 25 kg bags needed for ``cement_kg`` (never negative)."""

    if cement_kg <= 0:
        return 0
    return math.ceil(cement_kg / CEMENT_BAG_KG)


__all__ = [
    "CEMENT_BAG_KG",
    "SLAB_MORTAR_THICKNESS_CM",
    "MortarVariant",
    "MortarMix",
    "MORTAR_MIXES",
    "KERB_MORTAR_CEMENT_KG_PER_M3",
    "KERB_MORTAR_SAND_T_PER_M3",
    "MORTAR_TEMPLATE_NAME",
    "cement_bags",
]
