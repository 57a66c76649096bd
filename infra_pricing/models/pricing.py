"""
Pricing value types for cloud provider pricing.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .types import CloudProvider, Currency, PricingType, SupportLevel

HOURS_PER_MONTH = 730
HOURS_PER_YEAR = 8760

ZERO = Decimal("0")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ComputePricing(BaseModel):
    """Hourly compute rates and named instance prices"""

    cpu_per_hour: Decimal = Field(default=ZERO, ge=0)
    ram_gb_per_hour: Decimal = Field(default=ZERO, ge=0)
    managed_control_plane_per_hour: Decimal = Field(default=ZERO, ge=0)
    openshift_service_fee_per_worker_hour: Optional[Decimal] = Field(
        None, ge=0, description="Managed OpenShift worker fee (ROSA/ARO/OSD/ROKS)"
    )
    instance_type_prices: Dict[str, Decimal] = Field(default_factory=dict)

    class Config:
        frozen = True

    @field_validator("instance_type_prices")
    @classmethod
    def prices_not_negative(cls, v):
        negative = [name for name, price in v.items() if price < 0]
        if negative:
            raise ValueError(f"Negative instance prices: {', '.join(negative)}")
        return v

    def calculate_hourly_cost(self, cpu_cores: int, ram_gb: int) -> Decimal:
        return cpu_cores * self.cpu_per_hour + ram_gb * self.ram_gb_per_hour

    def calculate_monthly_cost(self, cpu_cores: int, ram_gb: int) -> Decimal:
        return self.calculate_hourly_cost(cpu_cores, ram_gb) * HOURS_PER_MONTH


class StoragePricing(BaseModel):
    """Per GB-month storage rates"""

    ssd_per_gb_month: Decimal = Field(default=ZERO, ge=0)
    hdd_per_gb_month: Decimal = Field(default=ZERO, ge=0)
    object_storage_per_gb_month: Decimal = Field(default=ZERO, ge=0)
    backup_per_gb_month: Decimal = Field(default=ZERO, ge=0)
    registry_per_gb_month: Decimal = Field(default=ZERO, ge=0)

    class Config:
        frozen = True

    def calculate_monthly_cost(
        self, ssd_gb: int, hdd_gb: int = 0, object_gb: int = 0, backup_gb: int = 0
    ) -> Decimal:
        return (
            ssd_gb * self.ssd_per_gb_month
            + hdd_gb * self.hdd_per_gb_month
            + object_gb * self.object_storage_per_gb_month
            + backup_gb * self.backup_per_gb_month
        )


class NetworkPricing(BaseModel):
    """Network transfer and appliance rates"""

    egress_per_gb: Decimal = Field(default=ZERO, ge=0)
    ingress_per_gb: Decimal = Field(default=ZERO, ge=0)  # free everywhere
    load_balancer_per_hour: Decimal = Field(default=ZERO, ge=0)
    nat_gateway_per_hour: Decimal = Field(default=ZERO, ge=0)
    vpn_per_hour: Decimal = Field(default=ZERO, ge=0)
    public_ip_per_hour: Decimal = Field(default=ZERO, ge=0)

    class Config:
        frozen = True

    def calculate_monthly_cost(
        self, load_balancers: int, egress_gb: int, public_ips: int = 0
    ) -> Decimal:
        return (
            load_balancers * self.load_balancer_per_hour * HOURS_PER_MONTH
            + egress_gb * self.egress_per_gb
            + public_ips * self.public_ip_per_hour * HOURS_PER_MONTH
        )


class LicensePricing(BaseModel):
    """Reference distribution license prices bundled with provider pricing"""

    openshift_per_node_year: Decimal = Field(default=Decimal("2500"))
    rancher_enterprise_per_node_year: Decimal = Field(default=Decimal("1000"))
    tanzu_per_core_year: Decimal = Field(default=Decimal("1500"))
    charmed_k8s_per_node_year: Decimal = Field(default=Decimal("500"))

    class Config:
        frozen = True


class SupportPricing(BaseModel):
    """Cloud support plan prices as a percentage of spend"""

    basic_support_percent: Decimal = Field(default=ZERO)
    developer_support_percent: Decimal = Field(default=Decimal("3"))
    business_support_percent: Decimal = Field(default=Decimal("10"))
    enterprise_support_percent: Decimal = Field(default=Decimal("15"))

    class Config:
        frozen = True

    def get_support_cost(self, base_cost: Decimal, level: SupportLevel) -> Decimal:
        percent = {
            SupportLevel.BASIC: self.basic_support_percent,
            SupportLevel.DEVELOPER: self.developer_support_percent,
            SupportLevel.BUSINESS: self.business_support_percent,
            SupportLevel.ENTERPRISE: self.enterprise_support_percent,
        }.get(SupportLevel(level), ZERO)
        return base_cost * percent / 100


class RegionInfo(BaseModel):
    """Provider region catalog entry"""

    code: str
    display_name: str
    provider: CloudProvider
    location: str = ""
    is_preferred: bool = False

    class Config:
        frozen = True
        use_enum_values = True


class ProviderPricing(BaseModel):
    """Complete pricing bundle for one provider and region"""

    provider: CloudProvider
    region: str
    region_display_name: str
    currency: Currency = Field(default=Currency.USD)
    pricing_type: PricingType = Field(default=PricingType.ON_DEMAND)
    source: str = Field(default="", description="Where the prices come from")
    last_updated: datetime = Field(default_factory=_utcnow)
    is_live: bool = False

    compute: ComputePricing = Field(default_factory=ComputePricing)
    storage: StoragePricing = Field(default_factory=StoragePricing)
    network: NetworkPricing = Field(default_factory=NetworkPricing)
    licenses: LicensePricing = Field(default_factory=LicensePricing)
    support: SupportPricing = Field(default_factory=SupportPricing)

    class Config:
        frozen = True
        use_enum_values = True
