"""Kerb, edging and set profiles plus hunch (haunch) configurations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class KerbType(str, Enum):
    KL = "kl"
    RUMBLED = "rumbled"
    FLAT = "flat"
    SETS = "sets"


class HunchType(str, Enum):
    FULL_BOTH = "full-both"
    HALF_BOTH = "half-both"
    SMALL_BOTH = "small-both"
    FULL_HALF = "full-half"
    FULL_SMALL = "full-small"
    HALF_SMALL = "half-small"


@dataclass(frozen=True)
class KerbProfile:
    """Unit dimensions in centimetres."""

    length_cm: float
    height_cm: float
    width_cm: float


@dataclass(frozen=True)
class HunchConfig:
    """Hunch height on each side as a fraction of the unit's standing height."""

    left: float
    right: float
    title: str


KERB_NAMES: dict[KerbType, str] = {
    KerbType.KL: "KL kerbs",
    KerbType.RUMBLED: "Rumbled kerbs",
    KerbType.FLAT: "Flat edges",
    KerbType.SETS: "10x10 sets",
}

KERB_PROFILES: dict[KerbType, KerbProfile] = {
    KerbType.KL: KerbProfile(length_cm=10, height_cm=20, width_cm=10),
    KerbType.FLAT: KerbProfile(length_cm=100, height_cm=15, width_cm=5),
    KerbType.SETS: KerbProfile(length_cm=10, height_cm=5, width_cm=10),
}

RUMBLED_PROFILES: dict[bool, KerbProfile] = {
    False: KerbProfile(length_cm=20, height_cm=15, width_cm=8),
    True: KerbProfile(length_cm=15, height_cm=20, width_cm=8),
}

HUNCH_CONFIGS: dict[HunchType, HunchConfig] = {
    HunchType.FULL_BOTH: HunchConfig(0.8, 0.8, "Full Hunch Both Sides (80%)"),
    HunchType.HALF_BOTH: HunchConfig(0.5, 0.5, "Half Hunch Both Sides (50%)"),
    HunchType.SMALL_BOTH: HunchConfig(0.2, 0.2, "Small Hunch Both Sides (20%)"),
    HunchType.FULL_HALF: HunchConfig(0.8, 0.5, "Full Left, Half Right"),
    HunchType.FULL_SMALL: HunchConfig(0.8, 0.2, "Full Left, Small Right"),
    HunchType.HALF_SMALL: HunchConfig(0.5, 0.2, "Half Left, Small Right"),
}

HUNCH_WIDTH_CM = 15.0

# Capacity-table keys used when moving units to the laying position.
KERB_TRANSPORT_MATERIAL: dict[KerbType, str] = {
    KerbType.KL: "kerbsSmall",
    KerbType.RUMBLED: "kerbsLarge",
    KerbType.FLAT: "kerbsSmall",
    KerbType.SETS: "kerbsSmall",
}

LEVELING_TEMPLATE_NAME = "preparing for the wall (leveling)"
LEVELING_TASK_NAME = "Preparing for kerbs/edges (leveling)"


def kerb_profile(kerb_type: KerbType, *, rumbled_standing: bool = False) -> KerbProfile:
    if kerb_type is KerbType.RUMBLED:
        return RUMBLED_PROFILES[rumbled_standing]
    return KERB_PROFILES[kerb_type]


def kerb_units(
    kerb_type: KerbType, length_m: float, *, rumbled_standing: bool = False
) -> tuple[float, str]:
    """Return ``(unit_count, unit_label)`` needed to cover ``length_m``."""

    if kerb_type is KerbType.KL:
        return length_m * 10, "kerbs"
    if kerb_type is KerbType.RUMBLED:
        if rumbled_standing:
            return float(math.ceil(length_m * 6.67)), "kerbs"
        return length_m * 5, "kerbs"
    if kerb_type is KerbType.FLAT:
        return length_m * 1, "pieces"
    return length_m * 10, "sets"


__all__ = [
    "KerbType",
    "HunchType",
    "KerbProfile",
    "HunchConfig",
    "KERB_NAMES",
    "KERB_PROFILES",
    "RUMBLED_PROFILES",
    "HUNCH_CONFIGS",
    "HUNCH_WIDTH_CM",
    "KERB_TRANSPORT_MATERIAL",
    "LEVELING_TEMPLATE_NAME",
    "LEVELING_TASK_NAME",
    "kerb_profile",
    "kerb_units",
]
