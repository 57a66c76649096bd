"""
API request/response models for the pricing engine.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .licensing import LicensingCost
from .mendix import MendixPricingResult
from .outsystems import OutSystemsPricingResult
from .pricing import RegionInfo


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class APIError(BaseModel):
    """Standard API error response"""

    error: str
    code: str
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=_utcnow)


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    timestamp: datetime = Field(default_factory=_utcnow)
    version: str = "1.0.0"
    components: Dict[str, str] = Field(default_factory=dict)


class ProviderSummary(BaseModel):
    provider: str
    default_region: str
    pricing_source: str
    region_count: int = 0


class ProvidersResponse(BaseModel):
    providers: List[ProviderSummary]
    managed_openshift: Dict[str, str] = Field(
        default_factory=dict, description="Alias -> host provider"
    )


class RegionsResponse(BaseModel):
    provider: str
    regions: List[RegionInfo]


class LicensingResponse(BaseModel):
    """Licensing cost with its derived totals"""

    distribution: str
    display_name: str
    vendor: str
    cost: LicensingCost
    total_per_year: Decimal
    total_per_month: Decimal

    @classmethod
    def from_cost(cls, licensing, cost: LicensingCost) -> "LicensingResponse":
        return cls(
            distribution=licensing.distribution.value,
            display_name=licensing.display_name,
            vendor=licensing.vendor,
            cost=cost,
            total_per_year=cost.total_per_year,
            total_per_month=cost.total_per_month,
        )


class MendixQuoteResponse(BaseModel):
    result: MendixPricingResult
    total_per_year: Decimal
    total_per_month: Decimal
    total_three_year: Decimal

    @classmethod
    def from_result(cls, result: MendixPricingResult) -> "MendixQuoteResponse":
        return cls(
            result=result,
            total_per_year=result.total_per_year,
            total_per_month=result.total_per_month,
            total_three_year=result.total_three_year,
        )


class OutSystemsQuoteResponse(BaseModel):
    result: OutSystemsPricingResult
    license_subtotal: Decimal
    add_ons_subtotal: Decimal
    infrastructure_subtotal: Decimal
    services_subtotal: Decimal
    total_per_year: Decimal
    total_per_month: Decimal
    total_three_year: Decimal
    total_five_year: Decimal

    @classmethod
    def from_result(cls, result: OutSystemsPricingResult) -> "OutSystemsQuoteResponse":
        return cls(
            result=result,
            license_subtotal=result.license_subtotal,
            add_ons_subtotal=result.add_ons_subtotal,
            infrastructure_subtotal=result.infrastructure_subtotal,
            services_subtotal=result.services_subtotal,
            total_per_year=result.total_per_year,
            total_per_month=result.total_per_month,
            total_three_year=result.total_three_year,
            total_five_year=result.total_five_year,
        )
