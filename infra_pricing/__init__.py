"""
Infrastructure Pricing Engine

Cloud provider pricing, Kubernetes distribution licensing and low-code
platform cost calculators.
"""

from .cli import PricingApp
from .exceptions import ConfigurationError, DataError, PricingEngineError
from .services.config import ConfigManager
from .services.mendix import MendixPricingCalculator
from .services.outsystems import OutSystemsPricingCalculator
from .services.registry import PricingRegistry, get_registry

__version__ = "1.0.0"

__all__ = [
    "PricingApp",
    "ConfigManager",
    "PricingRegistry",
    "get_registry",
    "MendixPricingCalculator",
    "OutSystemsPricingCalculator",
    "PricingEngineError",
    "DataError",
    "ConfigurationError",
]
