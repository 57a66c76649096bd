"""
Exception types raised by the pricing engine.

Strategies themselves never raise on unknown keys; they fall back to
default values. These errors mark the few places where the engine cannot
produce a number at all.
"""

from typing import Optional


class PricingEngineError(Exception):
    """Base class for pricing engine errors"""


class DataError(PricingEngineError):
    """Pricing data is missing or malformed"""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} (source: {source})"
        super().__init__(message)


class ConfigurationError(PricingEngineError):
    """An unknown discriminator or invalid engine configuration"""
