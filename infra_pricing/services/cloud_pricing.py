"""
Cloud provider pricing strategies.

Every provider is described by a ``ProviderProfile`` data record. A single
``CloudProviderPricing`` class interprets any profile, so adding a provider
means adding a table entry, not a subclass.

Rates are 2025 public list prices in USD for the provider's default region.
"""

from decimal import Decimal
from typing import Dict, List, Optional, Tuple

import structlog
from pydantic import BaseModel, Field

from ..models.pricing import (
    HOURS_PER_MONTH,
    ComputePricing,
    LicensePricing,
    NetworkPricing,
    ProviderPricing,
    RegionInfo,
    StoragePricing,
    SupportPricing,
)
from ..models.types import CloudProvider, Currency, PricingType
from .regions import provider_regions

logger = structlog.get_logger(__name__)

ONE = Decimal("1")
ZERO = Decimal("0")


class ProviderProfile(BaseModel):
    """Declarative price table for one cloud provider"""

    provider: CloudProvider
    display_name: str
    default_region: str

    cpu_per_hour: Decimal
    ram_gb_per_hour: Decimal
    instance_prices: Dict[str, Decimal] = Field(default_factory=dict)

    storage: StoragePricing = Field(default_factory=StoragePricing)
    network: NetworkPricing = Field(default_factory=NetworkPricing)

    control_plane_per_hour: Decimal = ZERO
    control_plane_ha_per_hour: Decimal = ZERO
    openshift_worker_fee_per_hour: Optional[Decimal] = None

    # Exact-match region -> multiplier; unknown regions price at 1.0
    regional_multipliers: Dict[str, Decimal] = Field(default_factory=dict)
    multiply_storage: bool = False

    # Surcharge for regions outside the provider's home market
    domestic_region_prefix: Optional[str] = None
    international_surcharge: Decimal = ONE

    sustained_use_discount: Decimal = ZERO
    cross_az_cost_multiplier: Decimal = ONE

    class Config:
        frozen = True


def _rates(table: Dict[str, str]) -> Dict[str, Decimal]:
    return {name: Decimal(price) for name, price in table.items()}


def _storage(ssd, hdd, obj, backup, registry) -> StoragePricing:
    return StoragePricing(
        ssd_per_gb_month=Decimal(ssd),
        hdd_per_gb_month=Decimal(hdd),
        object_storage_per_gb_month=Decimal(obj),
        backup_per_gb_month=Decimal(backup),
        registry_per_gb_month=Decimal(registry),
    )


def _network(egress, lb, nat, vpn, ip) -> NetworkPricing:
    return NetworkPricing(
        egress_per_gb=Decimal(egress),
        load_balancer_per_hour=Decimal(lb),
        nat_gateway_per_hour=Decimal(nat),
        vpn_per_hour=Decimal(vpn),
        public_ip_per_hour=Decimal(ip),
    )


def _multipliers(groups: List[Tuple[str, Tuple[str, ...]]]) -> Dict[str, Decimal]:
    table = {}
    for factor, regions in groups:
        for region in regions:
            table[region] = Decimal(factor)
    return table


PROVIDER_PROFILES: Dict[CloudProvider, ProviderProfile] = {
    CloudProvider.AWS: ProviderProfile(
        provider=CloudProvider.AWS,
        display_name="AWS",
        default_region="us-east-1",
        cpu_per_hour=Decimal("0.048"),
        ram_gb_per_hour=Decimal("0.006"),
        instance_prices=_rates({
            "t3.medium": "0.0416",
            "t3.large": "0.0832",
            "m6i.large": "0.096",
            "m6i.xlarge": "0.192",
            "m6i.2xlarge": "0.384",
            "m6i.4xlarge": "0.768",
            "c6i.xlarge": "0.17",
            "r6i.xlarge": "0.252",
            "m5.xlarge": "0.192",
            "m5.2xlarge": "0.384",
            "m5.4xlarge": "0.768",
        }),
        storage=_storage("0.08", "0.045", "0.023", "0.05", "0.10"),
        network=_network("0.09", "0.0225", "0.045", "0.05", "0.005"),
        # EKS bills the control plane whether or not it is HA
        control_plane_per_hour=Decimal("0.10"),
        control_plane_ha_per_hour=Decimal("0.10"),
        openshift_worker_fee_per_hour=Decimal("0.171"),
        regional_multipliers=_multipliers([
            ("1.0", ("us-east-1", "us-east-2", "us-west-2")),
            ("1.1", ("us-west-1",)),
            ("1.05", ("eu-west-1", "eu-central-1")),
            ("1.08", ("eu-west-2", "eu-west-3")),
            ("1.1", ("ap-southeast-1", "ap-southeast-2")),
            ("1.15", ("ap-northeast-1",)),
            ("0.95", ("ap-south-1",)),
            ("1.2", ("me-south-1", "me-central-1")),
            ("1.25", ("sa-east-1",)),
        ]),
        multiply_storage=True,
    ),
    CloudProvider.AZURE: ProviderProfile(
        provider=CloudProvider.AZURE,
        display_name="Azure",
        default_region="eastus",
        cpu_per_hour=Decimal("0.048"),
        ram_gb_per_hour=Decimal("0.006"),
        instance_prices=_rates({
            "Standard_B2ms": "0.0832",
            "Standard_D2s_v5": "0.096",
            "Standard_D4s_v5": "0.192",
            "Standard_D8s_v5": "0.384",
            "Standard_D16s_v5": "0.768",
            "Standard_F4s_v2": "0.169",
            "Standard_E4s_v5": "0.252",
            "Standard_D4s_v3": "0.192",
            "Standard_D8s_v3": "0.384",
            "Standard_D16s_v3": "0.768",
        }),
        storage=_storage("0.075", "0.04", "0.0184", "0.05", "0.10"),
        network=_network("0.087", "0.025", "0.045", "0.05", "0.004"),
        # AKS free tier; Standard tier (uptime SLA) costs 0.10/h
        control_plane_per_hour=ZERO,
        control_plane_ha_per_hour=Decimal("0.10"),
        openshift_worker_fee_per_hour=Decimal("0.35"),
        regional_multipliers=_multipliers([
            ("1.0", ("eastus", "eastus2", "westus2")),
            ("1.05", ("westus", "westus3")),
            ("1.05", ("westeurope", "northeurope")),
            ("1.08", ("uksouth", "ukwest")),
            ("1.1", ("germanywestcentral",)),
            ("1.1", ("southeastasia", "eastasia")),
            ("1.15", ("japaneast",)),
            ("1.12", ("australiaeast",)),
            ("0.95", ("centralindia",)),
            ("1.2", ("uaenorth",)),
            ("1.25", ("brazilsouth",)),
        ]),
        multiply_storage=True,
        cross_az_cost_multiplier=ZERO,
    ),
    CloudProvider.GCP: ProviderProfile(
        provider=CloudProvider.GCP,
        display_name="GCP",
        default_region="us-central1",
        cpu_per_hour=Decimal("0.0335"),
        ram_gb_per_hour=Decimal("0.0045"),
        instance_prices=_rates({
            "e2-medium": "0.0335",
            "e2-standard-2": "0.067",
            "e2-standard-4": "0.134",
            "e2-standard-8": "0.268",
            "e2-standard-16": "0.536",
            "n2-standard-4": "0.194",
            "n2-standard-8": "0.388",
            "c2-standard-4": "0.209",
            "n2-highmem-4": "0.262",
        }),
        storage=_storage("0.17", "0.04", "0.02", "0.05", "0.10"),
        network=_network("0.12", "0.025", "0.045", "0.05", "0.004"),
        control_plane_per_hour=Decimal("0.10"),
        control_plane_ha_per_hour=Decimal("0.10"),
        openshift_worker_fee_per_hour=Decimal("0.171"),
        regional_multipliers=_multipliers([
            ("1.0", ("us-central1", "us-east1", "us-west1")),
            ("1.05", ("us-east4", "us-west2", "us-west3", "us-west4")),
            ("1.05", ("europe-west1", "europe-west4")),
            ("1.1", ("europe-west2", "europe-west3")),
            ("1.1", ("asia-southeast1", "asia-east1")),
            ("1.2", ("asia-northeast1",)),
            ("1.15", ("australia-southeast1",)),
            ("0.95", ("asia-south1",)),
            ("1.25", ("me-west1",)),
            ("1.3", ("southamerica-east1",)),
        ]),
        multiply_storage=True,
        sustained_use_discount=Decimal("0.20"),
    ),
    CloudProvider.OCI: ProviderProfile(
        provider=CloudProvider.OCI,
        display_name="Oracle Cloud",
        default_region="us-ashburn-1",
        cpu_per_hour=Decimal("0.03"),
        ram_gb_per_hour=Decimal("0.0015"),
        instance_prices=_rates({
            "VM.Standard.E4.Flex.1": "0.03",
            "VM.Standard.E4.Flex.2": "0.06",
            "VM.Standard.E4.Flex.4": "0.12",
            "VM.Standard.E4.Flex.8": "0.24",
            "VM.Standard3.Flex.4": "0.128",
            "VM.Standard3.Flex.8": "0.256",
        }),
        storage=_storage("0.0255", "0.0255", "0.0255", "0.05", "0.0255"),
        network=_network("0.0085", "0.01", "0.03", "0.04", "0"),
        control_plane_ha_per_hour=Decimal("0.10"),
        regional_multipliers=_multipliers([
            ("1.0", ("us-ashburn-1", "us-phoenix-1")),
            ("1.05", ("uk-london-1", "eu-frankfurt-1")),
            ("1.1", ("ap-tokyo-1",)),
            ("1.08", ("ap-sydney-1", "ap-melbourne-1")),
            ("1.15", ("me-dubai-1", "me-jeddah-1")),
            ("1.2", ("sa-saopaulo-1",)),
        ]),
        multiply_storage=True,
    ),
    CloudProvider.IBM: ProviderProfile(
        provider=CloudProvider.IBM,
        display_name="IBM Cloud",
        default_region="us-south",
        cpu_per_hour=Decimal("0.05"),
        ram_gb_per_hour=Decimal("0.007"),
        instance_prices=_rates({
            "bx2-4x16": "0.192",
            "bx2-8x32": "0.384",
            "bx2-16x64": "0.768",
            "cx2-4x8": "0.17",
            "mx2-4x32": "0.25",
        }),
        storage=_storage("0.10", "0.05", "0.022", "0.05", "0.10"),
        network=_network("0.09", "0.025", "0.045", "0.05", "0.004"),
        openshift_worker_fee_per_hour=Decimal("0.20"),
    ),
    CloudProvider.ALIBABA: ProviderProfile(
        provider=CloudProvider.ALIBABA,
        display_name="Alibaba Cloud",
        default_region="cn-hangzhou",
        cpu_per_hour=Decimal("0.04"),
        ram_gb_per_hour=Decimal("0.005"),
        instance_prices=_rates({
            "ecs.g6.large": "0.096",
            "ecs.g6.xlarge": "0.192",
            "ecs.g6.2xlarge": "0.384",
            "ecs.c6.xlarge": "0.17",
            "ecs.r6.xlarge": "0.25",
        }),
        storage=_storage("0.08", "0.04", "0.02", "0.05", "0.08"),
        network=_network("0.12", "0.02", "0.04", "0.05", "0.003"),
        control_plane_ha_per_hour=Decimal("0.10"),
        domestic_region_prefix="cn-",
        international_surcharge=Decimal("1.1"),
    ),
    CloudProvider.HUAWEI: ProviderProfile(
        provider=CloudProvider.HUAWEI,
        display_name="Huawei Cloud",
        default_region="cn-north-4",
        cpu_per_hour=Decimal("0.038"),
        ram_gb_per_hour=Decimal("0.005"),
        instance_prices=_rates({
            "s6.medium.2": "0.05",
            "s6.large.2": "0.08",
            "s6.xlarge.2": "0.16",
            "s6.2xlarge.2": "0.32",
            "c6.xlarge.2": "0.14",
            "m6.xlarge.8": "0.24",
        }),
        storage=_storage("0.08", "0.04", "0.02", "0.04", "0.06"),
        network=_network("0.10", "0.02", "0.04", "0.05", "0.003"),
        control_plane_ha_per_hour=Decimal("0.09"),
        domestic_region_prefix="cn-",
        international_surcharge=Decimal("1.1"),
    ),
    CloudProvider.TENCENT: ProviderProfile(
        provider=CloudProvider.TENCENT,
        display_name="Tencent Cloud",
        default_region="ap-guangzhou",
        cpu_per_hour=Decimal("0.035"),
        ram_gb_per_hour=Decimal("0.005"),
        instance_prices=_rates({
            "S5.MEDIUM4": "0.06",
            "S5.MEDIUM8": "0.08",
            "S5.LARGE8": "0.12",
            "S5.LARGE16": "0.16",
            "S5.2XLARGE16": "0.24",
            "S5.2XLARGE32": "0.32",
        }),
        storage=_storage("0.07", "0.04", "0.02", "0.04", "0.05"),
        network=_network("0.08", "0.02", "0.03", "0.05", "0.003"),
        control_plane_ha_per_hour=Decimal("0.08"),
        domestic_region_prefix="ap-",
        international_surcharge=Decimal("1.15"),
    ),
    CloudProvider.DIGITALOCEAN: ProviderProfile(
        provider=CloudProvider.DIGITALOCEAN,
        display_name="DigitalOcean",
        default_region="nyc1",
        cpu_per_hour=Decimal("0.018"),
        ram_gb_per_hour=Decimal("0.003"),
        instance_prices=_rates({
            "s-2vcpu-4gb": "0.030",
            "s-4vcpu-8gb": "0.065",
            "g-2vcpu-8gb": "0.091",
            "g-4vcpu-16gb": "0.182",
            "g-8vcpu-32gb": "0.364",
            "c-4vcpu-8gb": "0.126",
            "m-2vcpu-16gb": "0.126",
        }),
        storage=_storage("0.10", "0.10", "0.02", "0.05", "0.02"),
        network=_network("0.01", "0.015", "0", "0", "0"),
        control_plane_ha_per_hour=Decimal("0.055"),
    ),
    CloudProvider.LINODE: ProviderProfile(
        provider=CloudProvider.LINODE,
        display_name="Linode (Akamai)",
        default_region="us-east",
        cpu_per_hour=Decimal("0.015"),
        ram_gb_per_hour=Decimal("0.003"),
        instance_prices=_rates({
            "g6-standard-2": "0.018",
            "g6-standard-4": "0.036",
            "g6-standard-6": "0.054",
            "g6-standard-8": "0.072",
            "g6-dedicated-4": "0.054",
            "g6-dedicated-8": "0.108",
            "g6-dedicated-16": "0.216",
        }),
        storage=_storage("0.10", "0.10", "0.02", "0.025", "0"),
        network=_network("0.01", "0.015", "0", "0", "0"),
        control_plane_ha_per_hour=Decimal("0.083"),
    ),
    CloudProvider.VULTR: ProviderProfile(
        provider=CloudProvider.VULTR,
        display_name="Vultr",
        default_region="ewr",
        cpu_per_hour=Decimal("0.012"),
        ram_gb_per_hour=Decimal("0.003"),
        instance_prices=_rates({
            "vc2-1c-2gb": "0.015",
            "vc2-2c-4gb": "0.030",
            "vc2-4c-8gb": "0.060",
            "vc2-6c-16gb": "0.119",
            "vc2-8c-32gb": "0.238",
            "vhf-2c-4gb": "0.036",
            "vhf-4c-8gb": "0.071",
            "vhf-8c-32gb": "0.286",
        }),
        storage=_storage("0.10", "0.10", "0.02", "0.05", "0"),
        network=_network("0.01", "0.015", "0", "0", "0"),
    ),
    CloudProvider.HETZNER: ProviderProfile(
        provider=CloudProvider.HETZNER,
        display_name="Hetzner",
        default_region="fsn1",
        cpu_per_hour=Decimal("0.006"),
        ram_gb_per_hour=Decimal("0.002"),
        instance_prices=_rates({
            "cx11": "0.005",
            "cx21": "0.008",
            "cx31": "0.015",
            "cx41": "0.028",
            "cx51": "0.055",
            "cpx11": "0.006",
            "cpx21": "0.011",
            "cpx31": "0.021",
            "cpx41": "0.041",
            "cpx51": "0.082",
            "ccx13": "0.055",
            "ccx23": "0.082",
            "ccx33": "0.137",
            "ccx43": "0.274",
            "ccx53": "0.548",
        }),
        storage=_storage("0.044", "0.044", "0.02", "0.02", "0"),
        network=_network("0", "0.008", "0", "0", "0.001"),
    ),
    CloudProvider.OVH: ProviderProfile(
        provider=CloudProvider.OVH,
        display_name="OVHcloud",
        default_region="gra",
        cpu_per_hour=Decimal("0.010"),
        ram_gb_per_hour=Decimal("0.003"),
        instance_prices=_rates({
            "b2-7": "0.026",
            "b2-15": "0.052",
            "b2-30": "0.104",
            "b2-60": "0.208",
            "c2-7": "0.032",
            "c2-15": "0.064",
            "r2-30": "0.070",
            "r2-60": "0.140",
        }),
        storage=_storage("0.04", "0.02", "0.01", "0.02", "0.02"),
        network=_network("0.01", "0.012", "0", "0.03", "0"),
    ),
    CloudProvider.SCALEWAY: ProviderProfile(
        provider=CloudProvider.SCALEWAY,
        display_name="Scaleway",
        default_region="fr-par",
        cpu_per_hour=Decimal("0.008"),
        ram_gb_per_hour=Decimal("0.002"),
        instance_prices=_rates({
            "DEV1-S": "0.007",
            "DEV1-M": "0.015",
            "DEV1-L": "0.030",
            "GP1-XS": "0.024",
            "GP1-S": "0.048",
            "GP1-M": "0.096",
            "GP1-L": "0.192",
        }),
        storage=_storage("0.08", "0.04", "0.01", "0.02", "0.02"),
        network=_network("0.01", "0.012", "0.01", "0", "0.002"),
    ),
    CloudProvider.CIVO: ProviderProfile(
        provider=CloudProvider.CIVO,
        display_name="Civo",
        default_region="lon1",
        cpu_per_hour=Decimal("0.0075"),
        ram_gb_per_hour=Decimal("0.0025"),
        instance_prices=_rates({
            "g4s.xsmall": "0.0075",
            "g4s.small": "0.015",
            "g4s.medium": "0.030",
            "g4s.large": "0.060",
            "g4s.xlarge": "0.119",
            "g4s.2xlarge": "0.238",
            "g4p.small": "0.045",
            "g4p.medium": "0.089",
            "g4p.large": "0.179",
        }),
        storage=_storage("0.10", "0.10", "0.02", "0.05", "0"),
        network=_network("0.01", "0.015", "0", "0", "0"),
    ),
    CloudProvider.EXOSCALE: ProviderProfile(
        provider=CloudProvider.EXOSCALE,
        display_name="Exoscale",
        default_region="ch-gva-2",
        cpu_per_hour=Decimal("0.012"),
        ram_gb_per_hour=Decimal("0.003"),
        instance_prices=_rates({
            "micro": "0.008",
            "tiny": "0.015",
            "small": "0.023",
            "medium": "0.046",
            "large": "0.069",
            "extra-large": "0.115",
            "huge": "0.231",
            "mega": "0.462",
            "titan": "0.923",
            "gpu-small": "0.577",
            "gpu-medium": "1.154",
        }),
        storage=_storage("0.08", "0.04", "0.02", "0.03", "0.02"),
        network=_network("0.02", "0.015", "0", "0", "0.003"),
    ),
    # Hardware and labor for on-premises are costed by a separate TCO model
    CloudProvider.ON_PREM: ProviderProfile(
        provider=CloudProvider.ON_PREM,
        display_name="On-Premises",
        default_region="On-Premises",
        cpu_per_hour=ZERO,
        ram_gb_per_hour=ZERO,
    ),
}


class CloudProviderPricing:
    """Pricing strategy for a single provider, driven by its profile"""

    def __init__(self, profile: ProviderProfile):
        self.profile = profile

    @property
    def provider(self) -> CloudProvider:
        return self.profile.provider

    @property
    def default_region(self) -> str:
        return self.profile.default_region

    @property
    def pricing_source(self) -> str:
        return f"Default ({self.profile.display_name} Public Pricing 2025)"

    def _resolve_region(self, region: Optional[str]) -> str:
        return region if region is not None else self.profile.default_region

    def get_regional_multiplier(self, region: Optional[str] = None) -> Decimal:
        """Exact-match multiplier for a region, 1.0 when not listed"""
        region = self._resolve_region(region)
        multiplier = self.profile.regional_multipliers.get(region)
        if multiplier is None:
            if self.profile.regional_multipliers:
                logger.debug(
                    "Unknown region, using base prices",
                    provider=self.provider.value,
                    region=region,
                )
            return ONE
        return multiplier

    def _compute_multiplier(self, region: str) -> Decimal:
        multiplier = self.get_regional_multiplier(region)
        prefix = self.profile.domestic_region_prefix
        if prefix and not region.startswith(prefix):
            multiplier *= self.profile.international_surcharge
        return multiplier

    def get_compute_pricing(self, region: Optional[str] = None) -> ComputePricing:
        region = self._resolve_region(region)
        multiplier = self._compute_multiplier(region)
        return ComputePricing(
            cpu_per_hour=self.profile.cpu_per_hour * multiplier,
            ram_gb_per_hour=self.profile.ram_gb_per_hour * multiplier,
            managed_control_plane_per_hour=self.profile.control_plane_per_hour,
            openshift_service_fee_per_worker_hour=self.profile.openshift_worker_fee_per_hour,
            instance_type_prices={
                name: price * multiplier
                for name, price in self.profile.instance_prices.items()
            },
        )

    def get_storage_pricing(self, region: Optional[str] = None) -> StoragePricing:
        storage = self.profile.storage
        if not self.profile.multiply_storage:
            return storage
        multiplier = self.get_regional_multiplier(region)
        return StoragePricing(
            ssd_per_gb_month=storage.ssd_per_gb_month * multiplier,
            hdd_per_gb_month=storage.hdd_per_gb_month * multiplier,
            object_storage_per_gb_month=storage.object_storage_per_gb_month * multiplier,
            backup_per_gb_month=storage.backup_per_gb_month * multiplier,
            registry_per_gb_month=storage.registry_per_gb_month * multiplier,
        )

    def get_network_pricing(self, region: Optional[str] = None) -> NetworkPricing:
        # Network rates are the same in every region
        return self.profile.network

    def get_control_plane_cost_per_hour(self, is_ha: bool = False) -> Decimal:
        if is_ha:
            return self.profile.control_plane_ha_per_hour
        return self.profile.control_plane_per_hour

    def get_openshift_worker_fee_per_hour(self) -> Optional[Decimal]:
        """Managed OpenShift surcharge (ROSA/ARO/OSD/ROKS), if offered"""
        return self.profile.openshift_worker_fee_per_hour

    def get_sustained_use_discount(self) -> Decimal:
        return self.profile.sustained_use_discount

    def get_cross_az_cost_multiplier(self) -> Decimal:
        return self.profile.cross_az_cost_multiplier

    def get_available_regions(self) -> List[RegionInfo]:
        return provider_regions(self.provider)

    def is_region_supported(self, region: str) -> bool:
        region = region.lower()
        return any(r.code.lower() == region for r in self.get_available_regions())

    def get_license_pricing(self) -> LicensePricing:
        if self.provider == CloudProvider.ON_PREM:
            return LicensePricing(
                openshift_per_node_year=ZERO,
                rancher_enterprise_per_node_year=ZERO,
                tanzu_per_core_year=ZERO,
                charmed_k8s_per_node_year=ZERO,
            )
        return LicensePricing()

    def get_support_pricing(self) -> SupportPricing:
        if self.provider == CloudProvider.ON_PREM:
            return SupportPricing(
                developer_support_percent=ZERO,
                business_support_percent=ZERO,
                enterprise_support_percent=ZERO,
            )
        return SupportPricing()

    def get_pricing(self, region: Optional[str] = None) -> ProviderPricing:
        """Full pricing bundle for a region"""
        region = self._resolve_region(region)
        region_info = next(
            (r for r in self.get_available_regions() if r.code == region), None
        )

        pricing = ProviderPricing(
            provider=self.provider,
            region=region,
            region_display_name=region_info.display_name if region_info else region,
            currency=Currency.USD,
            pricing_type=PricingType.ON_DEMAND,
            source=self.pricing_source,
            is_live=False,
            compute=self.get_compute_pricing(region),
            storage=self.get_storage_pricing(region),
            network=self.get_network_pricing(region),
            licenses=self.get_license_pricing(),
            support=self.get_support_pricing(),
        )

        logger.debug("Built provider pricing", provider=self.provider.value, region=region)
        return pricing

    def get_instance_price(self, instance_type: str, region: Optional[str] = None) -> Decimal:
        """Hourly price for a named instance type.

        Unknown types are priced as four vCPUs at the base CPU rate.
        """
        compute = self.get_compute_pricing(region)
        price = compute.instance_type_prices.get(instance_type)
        if price is None:
            logger.debug(
                "Unknown instance type, estimating from vCPU rate",
                provider=self.provider.value,
                instance_type=instance_type,
            )
            return compute.cpu_per_hour * 4
        return price

    def calculate_monthly_cost(
        self, cpu_cores: int, ram_gb: int, storage_gb: int, region: Optional[str] = None
    ) -> Decimal:
        """Compute + SSD storage + non-HA control plane for one month"""
        compute = self.get_compute_pricing(region)
        storage = self.get_storage_pricing(region)

        compute_cost = compute.calculate_monthly_cost(cpu_cores, ram_gb)
        storage_cost = storage_gb * storage.ssd_per_gb_month
        control_plane_cost = self.get_control_plane_cost_per_hour() * HOURS_PER_MONTH

        return compute_cost + storage_cost + control_plane_cost
