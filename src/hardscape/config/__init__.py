"""Explicit estimation configuration."""

from .loaders import load_catalog, load_estimation_config, load_inputs
from .models import EstimationConfig, RateTemplate, default_config

__all__ = [
    "EstimationConfig",
    "RateTemplate",
    "default_config",
    "load_catalog",
    "load_estimation_config",
    "load_inputs",
]
