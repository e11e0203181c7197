"""Excavation reference constants (soil behaviour, digging methods, loading rates)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SoilType(str, Enum):
    """Soil classes offered by the excavation calculators."""

    CLAY = "clay"
    SAND = "sand"
    ROCK = "rock"


@dataclass(frozen=True)
class SoilProperties:
    """
    In-situ density and bulking behaviour of a soil class.

    Attributes
    ----------
    density_t_per_m3:
        Bank (undisturbed) density in tonnes per cubic metre.
    loose_volume_coefficient:
        Expansion factor applied once the soil is dug (always >= 1).
    """

    density_t_per_m3: float
    loose_volume_coefficient: float


SOIL_PROPERTIES: dict[SoilType, SoilProperties] = {
    SoilType.CLAY: SoilProperties(density_t_per_m3=1.5, loose_volume_coefficient=1.2),
    SoilType.SAND: SoilProperties(density_t_per_m3=1.6, loose_volume_coefficient=1.025),
    SoilType.ROCK: SoilProperties(density_t_per_m3=2.2, loose_volume_coefficient=1.075),
}


class DiggingMethod(str, Enum):
    SHOVEL = "shovel"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# Catalog names carrying the company's per-method hours for foundation digging.
DIGGING_TEMPLATE_NAMES: dict[DiggingMethod, str] = {
    DiggingMethod.SHOVEL: "Excavating foundation with shovel",
    DiggingMethod.SMALL: "Excavating foundation with small excavator",
    DiggingMethod.MEDIUM: "Excavating foundation with medium excavator",
    DiggingMethod.LARGE: "Excavating foundation with big excavator",
}

# Older catalogs spell the excavator templates with a doubled "with".
LEGACY_DIGGING_TEMPLATE_NAMES: dict[DiggingMethod, str] = {
    DiggingMethod.SMALL: "Excavating foundation with with small excavator",
    DiggingMethod.MEDIUM: "Excavating foundation with with medium excavator",
    DiggingMethod.LARGE: "Excavating foundation with with big excavator",
}

# Speed-up relative to hand digging, used when the catalog has no positive template hours.
DIGGING_FALLBACK_MULTIPLIERS: dict[DiggingMethod, float] = {
    DiggingMethod.SHOVEL: 1.0,
    DiggingMethod.SMALL: 6.0,
    DiggingMethod.MEDIUM: 12.0,
    DiggingMethod.LARGE: 25.0,
}


@dataclass(frozen=True)
class ReferenceExcavation:
    """Trench used to calibrate the manual digging rate."""

    length_m: float = 15.0
    width_m: float = 0.6
    depth_m: float = 0.6

    @property
    def volume_m3(self) -> float:
        return self.length_m * self.width_m * self.depth_m


@dataclass(frozen=True)
class DimensionWeights:
    """Share of digging effort attributed to each trench dimension (sums to 1)."""

    length: float = 0.5
    width: float = 0.3
    depth: float = 0.2


REFERENCE_EXCAVATION = ReferenceExcavation()
DIMENSION_WEIGHTS = DimensionWeights()
MANUAL_DIGGING_RATE_M3_PER_HOUR = 0.45

# Concrete aggregate requirement per cubic metre of foundation.
CONCRETE_AGGREGATE_KG_PER_M3 = 1050.0

# Bulk density assumed by the soil-excavation calculator when working from dimensions.
SOIL_EXCAVATION_DENSITY_T_PER_M3 = 1.5


@dataclass(frozen=True)
class LoadingBand:
    """Excavator size band and its sand loading rate."""

    equipment: str
    size_t: float
    hours_per_tonne: float


LOADING_SAND_BANDS: tuple[LoadingBand, ...] = (
    LoadingBand("Shovel (1 Person)", 0.02, 0.5),
    LoadingBand("Digger 1T", 1.0, 0.18),
    LoadingBand("Digger 2T", 2.0, 0.12),
    LoadingBand("Digger 3-5T", 3.0, 0.08),
    LoadingBand("Digger 6-10T", 6.0, 0.05),
    LoadingBand("Digger 11-20T", 11.0, 0.03),
    LoadingBand("Digger 21-30T", 21.0, 0.02),
    LoadingBand("Digger 31-40T", 31.0, 0.01),
    LoadingBand("Digger 41-50T", 41.0, 0.005),
)


def loading_band_for(excavator_size_t: float | None) -> LoadingBand:
    """
    Return the loading band covering ``excavator_size_t``.

    Sizes below the first mechanised band (or missing) fall back to hand loading; sizes at or
    above the last band use the last band.
    """

    bands = LOADING_SAND_BANDS
    if excavator_size_t is None or excavator_size_t <= 0:
        return bands[0]
    if excavator_size_t >= bands[-1].size_t:
        return bands[-1]
    for lower, upper in zip(bands, bands[1:]):
        if lower.size_t <= excavator_size_t < upper.size_t:
            return lower
    return bands[0]


__all__ = [
    "SoilType",
    "SoilProperties",
    "SOIL_PROPERTIES",
    "DiggingMethod",
    "DIGGING_TEMPLATE_NAMES",
    "LEGACY_DIGGING_TEMPLATE_NAMES",
    "DIGGING_FALLBACK_MULTIPLIERS",
    "ReferenceExcavation",
    "DimensionWeights",
    "REFERENCE_EXCAVATION",
    "DIMENSION_WEIGHTS",
    "MANUAL_DIGGING_RATE_M3_PER_HOUR",
    "CONCRETE_AGGREGATE_KG_PER_M3",
    "SOIL_EXCAVATION_DENSITY_T_PER_M3",
    "LoadingBand",
    "LOADING_SAND_BANDS",
    "loading_band_for",
]
