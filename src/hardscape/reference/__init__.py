"""Reference data loaders and domain constants."""

from .excavation import (
    DIGGING_FALLBACK_MULTIPLIERS,
    DIGGING_TEMPLATE_NAMES,
    DIMENSION_WEIGHTS,
    LOADING_SAND_BANDS,
    MANUAL_DIGGING_RATE_M3_PER_HOUR,
    REFERENCE_EXCAVATION,
    SOIL_PROPERTIES,
    DiggingMethod,
    LoadingBand,
    SoilProperties,
    SoilType,
    loading_band_for,
)
from .kerbs import (
    HUNCH_CONFIGS,
    KERB_NAMES,
    HunchConfig,
    HunchType,
    KerbProfile,
    KerbType,
    kerb_profile,
    kerb_units,
)
from .mortar import MORTAR_MIXES, MortarMix, MortarVariant, cement_bags
from .rate_tables import (
    DEFAULT_CARRIER_SPEED_M_PER_HOUR,
    CarrierSpec,
    RateTables,
    build_rate_tables,
    carrier_speed,
    load_default_rate_tables,
    material_capacity,
)

__all__ = [
    "DEFAULT_CARRIER_SPEED_M_PER_HOUR",
    "CarrierSpec",
    "RateTables",
    "build_rate_tables",
    "carrier_speed",
    "load_default_rate_tables",
    "material_capacity",
    "DIGGING_FALLBACK_MULTIPLIERS",
    "DIGGING_TEMPLATE_NAMES",
    "DIMENSION_WEIGHTS",
    "LOADING_SAND_BANDS",
    "MANUAL_DIGGING_RATE_M3_PER_HOUR",
    "REFERENCE_EXCAVATION",
    "SOIL_PROPERTIES",
    "DiggingMethod",
    "LoadingBand",
    "SoilProperties",
    "SoilType",
    "loading_band_for",
    "HUNCH_CONFIGS",
    "KERB_NAMES",
    "HunchConfig",
    "HunchType",
    "KerbProfile",
    "KerbType",
    "kerb_profile",
    "kerb_units",
    "MORTAR_MIXES",
    "MortarMix",
    "MortarVariant",
    "cement_bags",
]
