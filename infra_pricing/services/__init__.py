"""
Services package for the infrastructure pricing engine.
"""

from .cache import CachedPricingService, PricingCache
from .cloud_pricing import PROVIDER_PROFILES, CloudProviderPricing, ProviderProfile
from .config import ConfigManager, EngineConfig
from .licensing import DistributionLicensing, get_multi_year_discount
from .mendix import MendixPricingCalculator
from .outsystems import OutSystemsPricingCalculator
from .registry import PricingRegistry, get_registry

__all__ = [
    "CachedPricingService",
    "PricingCache",
    "PROVIDER_PROFILES",
    "CloudProviderPricing",
    "ProviderProfile",
    "ConfigManager",
    "EngineConfig",
    "DistributionLicensing",
    "get_multi_year_discount",
    "MendixPricingCalculator",
    "OutSystemsPricingCalculator",
    "PricingRegistry",
    "get_registry",
]
