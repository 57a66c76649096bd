"""
Kubernetes distribution licensing models.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from .types import SupportTier

ZERO = Decimal("0")


class LicensingInput(BaseModel):
    """Cluster shape and contract terms used to price a distribution.

    Counts are trusted as given; callers validate sizing upstream.
    """

    node_count: int = 0
    total_cores: int = 0
    total_sockets: int = 0
    master_node_count: int = 0
    worker_node_count: int = 0
    infra_node_count: int = 0
    support_tier: SupportTier = Field(default=SupportTier.STANDARD)
    contract_years: int = Field(default=1, description="Contract length in years")
    is_managed_service: bool = False


class LicensingCost(BaseModel):
    """Annual licensing cost breakdown.

    Amounts are computed from trusted inputs and are not range checked.
    """

    base_license_per_year: Decimal = ZERO
    support_cost_per_year: Decimal = ZERO
    additional_fees_per_year: Decimal = ZERO
    per_node_per_year: Decimal = ZERO
    discount_percent: Decimal = Field(default=ZERO, ge=0, lt=100)
    licensing_model: str = Field(default="", description="Human readable model")

    class Config:
        frozen = True

    @property
    def total_per_year(self) -> Decimal:
        return (
            self.base_license_per_year
            + self.support_cost_per_year
            + self.additional_fees_per_year
        )

    @property
    def total_per_month(self) -> Decimal:
        return self.total_per_year / 12


class SupportTierInfo(BaseModel):
    """Vendor support offering for a distribution"""

    tier: SupportTier
    name: str
    hours: str = ""
    response_sla: str = ""
    cost_multiplier: Decimal = Field(default=Decimal("1.0"), ge=0)
    additional_annual_cost: Decimal = Field(default=ZERO, ge=0)
    includes_tam: bool = False

    class Config:
        frozen = True
