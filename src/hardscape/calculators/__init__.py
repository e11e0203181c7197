"""Dimensional quantity and labour calculators."""

from .foundation import FoundationDetails, estimate_foundation
from .inputs import (
    CalculatorInputs,
    FoundationInputs,
    KerbInputs,
    MaterialTransportInputs,
    MortarInputs,
    SoilExcavationInputs,
    TransportInputs,
    parse_inputs,
)
from .kerbs import KerbDetails, estimate_kerbs
from .loading import loading_sand_hours, loading_sand_task
from .material_transport import MaterialTransportDetails, estimate_material_transport
from .mortar import MortarDetails, estimate_mortar
from .registry import CALCULATORS, estimate, get_calculator, list_calculators
from .soil_excavation import SoilExcavationDetails, estimate_soil_excavation

__all__ = [
    "CalculatorInputs",
    "FoundationInputs",
    "KerbInputs",
    "MaterialTransportInputs",
    "MortarInputs",
    "SoilExcavationInputs",
    "TransportInputs",
    "parse_inputs",
    "FoundationDetails",
    "KerbDetails",
    "MaterialTransportDetails",
    "MortarDetails",
    "SoilExcavationDetails",
    "estimate_foundation",
    "estimate_kerbs",
    "estimate_material_transport",
    "estimate_mortar",
    "estimate_soil_excavation",
    "loading_sand_hours",
    "loading_sand_task",
    "CALCULATORS",
    "estimate",
    "get_calculator",
    "list_calculators",
]
