"""
Kubernetes distribution licensing strategies.

Each distribution family describes itself with a flat ``LicensingProfile``;
the shared annual-cost algorithm lives in ``calculate_licensing_cost`` and
is driven entirely by that profile. Families with their own pricing path
(managed OpenShift, vanilla Kubernetes, cloud-managed Kubernetes) override
``calculate_licensing_cost`` on their strategy class.
"""

from decimal import Decimal
from typing import List, Optional

import structlog
from pydantic import BaseModel, Field

from ..models.licensing import LicensingCost, LicensingInput, SupportTierInfo
from ..models.pricing import HOURS_PER_YEAR
from ..models.types import (
    CharmedEdition,
    CloudProvider,
    Distribution,
    LicensingModel,
    RancherEdition,
    Rke2Edition,
    SupportTier,
    TanzuEdition,
)

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")
ONE = Decimal("1")

OPEN_SOURCE_DESCRIPTION = "Open Source - No License Required"

_MULTI_YEAR_DISCOUNTS = {
    1: ZERO,
    2: Decimal("0.05"),
    3: Decimal("0.10"),
}
_MAX_MULTI_YEAR_DISCOUNT = Decimal("0.15")


def get_multi_year_discount(years: int) -> Decimal:
    """Contract discount on the base license: 0/5/10% for 1-3 years, 15% beyond"""
    if years >= 4:
        return _MAX_MULTI_YEAR_DISCOUNT
    return _MULTI_YEAR_DISCOUNTS.get(years, ZERO)


def _tier(tier, name, hours, sla, multiplier="1.0", additional="0", tam=False):
    return SupportTierInfo(
        tier=tier,
        name=name,
        hours=hours,
        response_sla=sla,
        cost_multiplier=Decimal(multiplier),
        additional_annual_cost=Decimal(additional),
        includes_tam=tam,
    )


DEFAULT_SUPPORT_TIERS = [
    _tier(SupportTier.STANDARD, "Standard", "Business hours", "4 hours"),
    _tier(SupportTier.PREMIUM, "Premium", "24x7", "1 hour", "1.5"),
]


class LicensingProfile(BaseModel):
    """Flat description of how a distribution is licensed"""

    distribution: Distribution
    display_name: str
    vendor: str
    requires_license: bool
    licensing_model: LicensingModel

    per_node_year: Decimal = ZERO
    per_core_year: Decimal = ZERO
    per_socket_year: Decimal = ZERO
    cluster_fixed_per_year: Decimal = ZERO
    worker_node_fee_per_hour: Decimal = ZERO

    # Minimum cores billed under per-core licensing
    min_billable_cores: int = 0
    model_description: Optional[str] = None

    support_tiers: List[SupportTierInfo] = Field(
        default_factory=lambda: list(DEFAULT_SUPPORT_TIERS)
    )

    class Config:
        frozen = True

    def find_support_tier(self, tier: SupportTier) -> Optional[SupportTierInfo]:
        tier = SupportTier(tier)
        return next((t for t in self.support_tiers if t.tier == tier), None)

    def describe_model(self) -> str:
        if self.model_description:
            return self.model_description
        model = self.licensing_model
        if model == LicensingModel.PER_NODE:
            return f"Per-node: ${self.per_node_year:,.0f}/node/year"
        if model == LicensingModel.PER_CORE:
            return f"Per-core: ${self.per_core_year:,.0f}/core/year"
        if model == LicensingModel.PER_SOCKET:
            return f"Per-socket: ${self.per_socket_year:,.0f}/socket/year"
        if model == LicensingModel.PER_WORKER_NODE:
            return f"Per-worker: ${self.per_node_year:,.0f}/worker/year"
        if model == LicensingModel.FLAT_RATE:
            return f"Flat rate: ${self.cluster_fixed_per_year:,.0f}/cluster/year"
        return "Custom licensing"


def _base_license_cost(profile: LicensingProfile, licensing_input: LicensingInput) -> Decimal:
    model = profile.licensing_model
    if model == LicensingModel.PER_NODE:
        return licensing_input.node_count * profile.per_node_year
    if model == LicensingModel.PER_CORE:
        cores = max(licensing_input.total_cores, profile.min_billable_cores)
        return cores * profile.per_core_year
    if model == LicensingModel.PER_SOCKET:
        return licensing_input.total_sockets * profile.per_socket_year
    if model == LicensingModel.PER_WORKER_NODE:
        return licensing_input.worker_node_count * profile.per_node_year
    # Flat-rate profiles are priced by cluster_fixed_per_year alone, added once by the caller
    return ZERO


def _support_cost(profile: LicensingProfile, base_cost: Decimal, tier: SupportTier) -> Decimal:
    info = profile.find_support_tier(tier)
    if info is None:
        logger.debug(
            "Support tier not offered, treating as included",
            distribution=profile.distribution.value,
            support_tier=SupportTier(tier).value,
        )
        return ZERO
    # A multiplier below 1 (community tiers) never discounts the license
    uplift = max(info.cost_multiplier - ONE, ZERO)
    return base_cost * uplift + info.additional_annual_cost


def calculate_licensing_cost(
    profile: LicensingProfile, licensing_input: LicensingInput
) -> LicensingCost:
    """Annual licensing cost for a cluster under a distribution profile.

    Open-source profiles carry no license, only the flat add-on cost of the
    requested support tier. Licensed profiles price the base by their model,
    add the cluster fixed fee, take the multi-year discount off the base,
    then add support and, for managed services, hourly worker fees.
    """
    nodes = max(licensing_input.node_count, 1)

    if not profile.requires_license:
        info = profile.find_support_tier(licensing_input.support_tier)
        support_cost = info.additional_annual_cost if info else ZERO
        return LicensingCost(
            support_cost_per_year=support_cost,
            per_node_per_year=support_cost / nodes,
            licensing_model=OPEN_SOURCE_DESCRIPTION,
        )

    base_cost = _base_license_cost(profile, licensing_input)
    base_cost += profile.cluster_fixed_per_year

    discount = get_multi_year_discount(licensing_input.contract_years)
    base_cost *= ONE - discount

    support_cost = _support_cost(profile, base_cost, licensing_input.support_tier)

    additional_fees = ZERO
    if licensing_input.is_managed_service:
        additional_fees = (
            licensing_input.worker_node_count
            * profile.worker_node_fee_per_hour
            * HOURS_PER_YEAR
        )

    cost = LicensingCost(
        base_license_per_year=base_cost,
        support_cost_per_year=support_cost,
        additional_fees_per_year=additional_fees,
        per_node_per_year=(base_cost + support_cost + additional_fees) / nodes,
        discount_percent=discount * 100,
        licensing_model=profile.describe_model(),
    )

    logger.debug(
        "Calculated licensing cost",
        distribution=profile.distribution.value,
        total_per_year=str(cost.total_per_year),
    )
    return cost


class DistributionLicensing:
    """Licensing strategy backed by a profile"""

    def __init__(self, profile: LicensingProfile):
        self.profile = profile

    @property
    def distribution(self) -> Distribution:
        return self.profile.distribution

    @property
    def display_name(self) -> str:
        return self.profile.display_name

    @property
    def vendor(self) -> str:
        return self.profile.vendor

    @property
    def requires_license(self) -> bool:
        return self.profile.requires_license

    @property
    def licensing_model(self) -> LicensingModel:
        return self.profile.licensing_model

    def get_license_cost_per_node_year(self) -> Decimal:
        return self.profile.per_node_year

    def get_license_cost_per_core_year(self) -> Decimal:
        return self.profile.per_core_year

    def get_license_cost_per_socket_year(self) -> Decimal:
        return self.profile.per_socket_year

    def get_cluster_fixed_cost_per_year(self) -> Decimal:
        return self.profile.cluster_fixed_per_year

    def get_worker_node_fee_per_hour(self) -> Decimal:
        return self.profile.worker_node_fee_per_hour

    def get_support_tiers(self) -> List[SupportTierInfo]:
        return list(self.profile.support_tiers)

    def calculate_licensing_cost(self, licensing_input: LicensingInput) -> LicensingCost:
        return calculate_licensing_cost(self.profile, licensing_input)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.display_name!r})"


# --- OpenShift ---

_MANAGED_OPENSHIFT = {
    CloudProvider.AWS: ("ROSA", Decimal("0.171")),
    CloudProvider.ROSA: ("ROSA", Decimal("0.171")),
    CloudProvider.AZURE: ("ARO", Decimal("0.21")),
    CloudProvider.ARO: ("ARO", Decimal("0.21")),
    CloudProvider.GCP: ("Dedicated", Decimal("0.166")),
    CloudProvider.OSD: ("Dedicated", Decimal("0.166")),
    CloudProvider.IBM: ("ROKS", Decimal("0.20")),
    CloudProvider.ROKS: ("ROKS", Decimal("0.20")),
}
_DEFAULT_MANAGED_OPENSHIFT = ("Managed", Decimal("0.171"))

OPENSHIFT_SUPPORT_TIERS = [
    _tier(SupportTier.STANDARD, "Standard", "Business hours (Mon-Fri)",
          "4 business hours (Sev 1)"),
    _tier(SupportTier.PREMIUM, "Premium", "24x7x365", "1 hour (Sev 1)", "1.3"),
    _tier(SupportTier.ENTERPRISE, "Premium Plus (TAM)", "24x7x365 + Dedicated TAM",
          "30 minutes (Sev 1)", "1.5", "50000", tam=True),
]


class OpenShiftLicensing(DistributionLicensing):
    """Red Hat OpenShift, self-managed or as a managed cloud service.

    Passing ``managed_provider`` selects the managed variant (ROSA, ARO,
    OSD or ROKS), which is billed purely by worker-node hours.
    """

    def __init__(
        self, managed_provider: Optional[CloudProvider] = None, per_core: bool = False
    ):
        self.managed_provider = CloudProvider(managed_provider) if managed_provider else None
        variant, worker_fee = _MANAGED_OPENSHIFT.get(
            self.managed_provider, _DEFAULT_MANAGED_OPENSHIFT
        )

        if self.is_managed:
            display_name = f"OpenShift ({variant})"
            model = LicensingModel.USAGE_BASED
        else:
            display_name = "OpenShift Container Platform"
            model = LicensingModel.PER_CORE if per_core else LicensingModel.PER_NODE

        super().__init__(LicensingProfile(
            distribution=Distribution.OPENSHIFT,
            display_name=display_name,
            vendor="Red Hat",
            requires_license=True,
            licensing_model=model,
            per_node_year=Decimal("2500"),
            per_core_year=Decimal("200"),
            worker_node_fee_per_hour=worker_fee,
            support_tiers=OPENSHIFT_SUPPORT_TIERS,
        ))

    @property
    def is_managed(self) -> bool:
        return self.managed_provider is not None

    def calculate_licensing_cost(self, licensing_input: LicensingInput) -> LicensingCost:
        if self.is_managed:
            return self.calculate_managed_licensing_cost(licensing_input)
        return super().calculate_licensing_cost(licensing_input)

    def calculate_managed_licensing_cost(self, licensing_input: LicensingInput) -> LicensingCost:
        """Worker-node hours only; the control plane is part of the service"""
        fee = self.get_worker_node_fee_per_hour()
        worker_fees = licensing_input.worker_node_count * fee * HOURS_PER_YEAR
        nodes = max(licensing_input.node_count, 1)

        return LicensingCost(
            base_license_per_year=worker_fees,
            support_cost_per_year=ZERO,
            additional_fees_per_year=ZERO,
            per_node_per_year=worker_fees / nodes,
            discount_percent=ZERO,
            licensing_model=f"Managed OpenShift: ${fee:.3f}/worker/hour",
        )


# --- VMware Tanzu ---

_TANZU_CORE_PRICES = {
    TanzuEdition.STANDARD: Decimal("1500"),
    TanzuEdition.ADVANCED: Decimal("2000"),
    TanzuEdition.ENTERPRISE: Decimal("2500"),
}

TANZU_SUPPORT_TIERS = [
    _tier(SupportTier.BASIC, "Production", "12x5", "4 business hours"),
    _tier(SupportTier.PREMIUM, "Premier", "24x7", "30 minutes (Sev 1)", "1.25"),
    _tier(SupportTier.ENTERPRISE, "Premier + TAM", "24x7 + Dedicated TAM",
          "15 minutes (Sev 1)", "1.5", "75000", tam=True),
]


class TanzuLicensing(DistributionLicensing):
    """VMware Tanzu, per-core with a 16 core minimum"""

    MIN_BILLABLE_CORES = 16

    def __init__(self, edition: TanzuEdition = TanzuEdition.STANDARD):
        self.edition = TanzuEdition(edition)
        per_core = _TANZU_CORE_PRICES[self.edition]
        super().__init__(LicensingProfile(
            distribution=Distribution.TANZU,
            display_name=f"VMware Tanzu ({self.edition.value})",
            vendor="VMware (Broadcom)",
            requires_license=True,
            licensing_model=LicensingModel.PER_CORE,
            per_core_year=per_core,
            per_node_year=per_core * 8,
            min_billable_cores=self.MIN_BILLABLE_CORES,
            model_description=f"Per-core ({self.edition.value}): ${per_core:,.0f}/core/year",
            support_tiers=TANZU_SUPPORT_TIERS,
        ))


# --- SUSE Rancher family ---

def _suse_support_tiers(prefix: str = "", standard: str = "Standard",
                        premium: str = "Priority", enterprise: str = "Premium"):
    return [
        _tier(SupportTier.STANDARD, prefix + standard, "12x5 (business hours)",
              "4 business hours (Sev 1)"),
        _tier(SupportTier.PREMIUM, prefix + premium, "24x7", "1 hour (Sev 1)", "1.4"),
        _tier(SupportTier.ENTERPRISE, prefix + enterprise, "24x7 + Dedicated SE",
              "15 minutes (Sev 1)", "1.8", "25000", tam=True),
    ]


def _community_tiers(hours: str):
    return [_tier(SupportTier.COMMUNITY, "Community", hours, "Best effort", "0")]


_RANCHER_NODE_PRICES = {
    RancherEdition.COMMUNITY: ZERO,
    RancherEdition.PRIME: Decimal("1000"),
    RancherEdition.GOVERNMENT: Decimal("1500"),
}


class RancherLicensing(DistributionLicensing):
    def __init__(self, edition: RancherEdition = RancherEdition.PRIME):
        self.edition = RancherEdition(edition)
        community = self.edition == RancherEdition.COMMUNITY
        super().__init__(LicensingProfile(
            distribution=Distribution.RANCHER,
            display_name="Rancher (Community)" if community
            else f"SUSE Rancher ({self.edition.value})",
            vendor="SUSE",
            requires_license=not community,
            licensing_model=LicensingModel.OPEN_SOURCE if community else LicensingModel.PER_NODE,
            per_node_year=_RANCHER_NODE_PRICES[self.edition],
            support_tiers=_community_tiers("Community forums") if community
            else _suse_support_tiers(),
        ))


_RKE2_NODE_PRICES = {
    Rke2Edition.COMMUNITY: ZERO,
    Rke2Edition.PRIME: Decimal("750"),
    Rke2Edition.GOVERNMENT: Decimal("1200"),
}

_RKE2_DISPLAY_NAMES = {
    Rke2Edition.COMMUNITY: "RKE2",
    Rke2Edition.PRIME: "RKE2 (SUSE Rancher Prime)",
    Rke2Edition.GOVERNMENT: "RKE2 (SUSE Rancher Government)",
}


class Rke2Licensing(DistributionLicensing):
    def __init__(self, edition: Rke2Edition = Rke2Edition.COMMUNITY):
        self.edition = Rke2Edition(edition)
        community = self.edition == Rke2Edition.COMMUNITY

        if community:
            tiers = _community_tiers("GitHub Issues, Slack")
        elif self.edition == Rke2Edition.GOVERNMENT:
            tiers = _suse_support_tiers("Government ")
        else:
            tiers = _suse_support_tiers(
                "Rancher ", standard="Prime", premium="Priority", enterprise="Premium"
            )

        super().__init__(LicensingProfile(
            distribution=Distribution.RKE2,
            display_name=_RKE2_DISPLAY_NAMES[self.edition],
            vendor="SUSE (Rancher Labs)",
            requires_license=not community,
            licensing_model=LicensingModel.OPEN_SOURCE if community else LicensingModel.PER_NODE,
            per_node_year=_RKE2_NODE_PRICES[self.edition],
            support_tiers=tiers,
        ))


class K3sLicensing(DistributionLicensing):
    """K3s, optionally backed by a SUSE Rancher Prime subscription"""

    def __init__(self, with_rancher_support: bool = False):
        self.with_rancher_support = with_rancher_support
        super().__init__(LicensingProfile(
            distribution=Distribution.K3S,
            display_name="K3s (SUSE Rancher Prime)" if with_rancher_support else "K3s",
            vendor="SUSE (Rancher Labs)",
            requires_license=with_rancher_support,
            licensing_model=LicensingModel.PER_NODE if with_rancher_support
            else LicensingModel.OPEN_SOURCE,
            per_node_year=Decimal("500") if with_rancher_support else ZERO,
            support_tiers=[
                _tier(SupportTier.COMMUNITY, "Community", "GitHub Issues, Slack",
                      "Best effort", "0"),
                _tier(SupportTier.STANDARD, "SUSE Rancher Prime", "12x5",
                      "4 business hours", "1.0", "500"),
                _tier(SupportTier.PREMIUM, "SUSE Rancher Priority", "24x7",
                      "1 hour", "1.4", "700"),
            ],
        ))


# --- Canonical family ---

class MicroK8sLicensing(DistributionLicensing):
    def __init__(self, with_ubuntu_pro: bool = False):
        self.with_ubuntu_pro = with_ubuntu_pro
        super().__init__(LicensingProfile(
            distribution=Distribution.MICROK8S,
            display_name="MicroK8s (Ubuntu Pro)" if with_ubuntu_pro else "MicroK8s",
            vendor="Canonical",
            requires_license=with_ubuntu_pro,
            licensing_model=LicensingModel.PER_NODE if with_ubuntu_pro
            else LicensingModel.OPEN_SOURCE,
            per_node_year=Decimal("225") if with_ubuntu_pro else ZERO,
            support_tiers=[
                _tier(SupportTier.COMMUNITY, "Community", "Community forums",
                      "Best effort", "0"),
                _tier(SupportTier.STANDARD, "Ubuntu Pro (Device)", "10x5",
                      "4 business hours", "1.0", "225"),
                _tier(SupportTier.PREMIUM, "Ubuntu Pro + Support", "24x7",
                      "1 hour", "1.0", "500"),
            ],
        ))


_CHARMED_NODE_PRICES = {
    CharmedEdition.FREE: ZERO,
    CharmedEdition.PRO: Decimal("500"),
    CharmedEdition.PRO_SUPPORT: Decimal("1500"),
}


class CharmedLicensing(DistributionLicensing):
    def __init__(self, edition: CharmedEdition = CharmedEdition.PRO):
        self.edition = CharmedEdition(edition)
        free = self.edition == CharmedEdition.FREE

        if free:
            tiers = _community_tiers("Community forums, Ask Ubuntu")
        else:
            tiers = [
                _tier(SupportTier.STANDARD, "Ubuntu Pro", "10x5", "4 business hours"),
                _tier(SupportTier.PREMIUM, "Ubuntu Pro + 24x7", "24x7",
                      "1 hour (Sev 1)", "2.0"),
                _tier(SupportTier.ENTERPRISE, "Ubuntu Pro + TAM", "24x7 + Dedicated TAM",
                      "15 minutes (Sev 1)", "2.5", "40000", tam=True),
            ]

        super().__init__(LicensingProfile(
            distribution=Distribution.CHARMED,
            display_name=f"Charmed Kubernetes ({self.edition.value})",
            vendor="Canonical",
            requires_license=not free,
            licensing_model=LicensingModel.OPEN_SOURCE if free else LicensingModel.PER_NODE,
            per_node_year=_CHARMED_NODE_PRICES[self.edition],
            support_tiers=tiers,
        ))


# --- Vanilla Kubernetes ---

class VanillaK8sLicensing(DistributionLicensing):
    """Upstream Kubernetes: free, with optional third-party support"""

    def __init__(self):
        super().__init__(LicensingProfile(
            distribution=Distribution.KUBERNETES,
            display_name="Kubernetes (Vanilla)",
            vendor="CNCF (Cloud Native Computing Foundation)",
            requires_license=False,
            licensing_model=LicensingModel.OPEN_SOURCE,
            support_tiers=[
                _tier(SupportTier.COMMUNITY, "Community",
                      "Kubernetes Slack, GitHub, Stack Overflow", "Best effort", "0"),
                _tier(SupportTier.BASIC, "Third-Party Basic", "Business hours",
                      "4 business hours", "1.0", "2000"),
                _tier(SupportTier.PREMIUM, "Third-Party Premium", "24x7",
                      "1 hour", "1.0", "10000"),
            ],
        ))

    def calculate_licensing_cost(self, licensing_input: LicensingInput) -> LicensingCost:
        info = self.profile.find_support_tier(licensing_input.support_tier)
        support_cost = info.additional_annual_cost if info else ZERO
        return LicensingCost(
            support_cost_per_year=support_cost,
            per_node_per_year=support_cost / max(licensing_input.node_count, 1),
            licensing_model="Open Source - CNCF Apache 2.0",
        )


# --- Cloud-managed Kubernetes ---

_CONTROL_PLANE_RATES = {
    CloudProvider.AWS: Decimal("0.10"),
    CloudProvider.GCP: Decimal("0.10"),
}
_PAID_TIER_DEFAULT_RATE = Decimal("0.10")

_MANAGED_K8S_NAMES = {
    Distribution.EKS: "Amazon EKS",
    Distribution.AKS: "Azure AKS",
    Distribution.GKE: "Google GKE",
    Distribution.OKE: "Oracle OKE",
    Distribution.IKS: "IBM IKS",
    Distribution.ACK: "Alibaba ACK",
    Distribution.TKE: "Tencent TKE",
    Distribution.CCE: "Huawei CCE",
    Distribution.DOKS: "DigitalOcean DOKS",
    Distribution.LKE: "Linode LKE",
    Distribution.VKE: "Vultr VKE",
    Distribution.HETZNER_K8S: "Hetzner K8s",
    Distribution.OVH_KUBERNETES: "OVH Kubernetes",
    Distribution.SCALEWAY_KAPSULE: "Scaleway Kapsule",
}

_CLOUD_VENDORS = {
    CloudProvider.AWS: "Amazon Web Services",
    CloudProvider.AZURE: "Microsoft",
    CloudProvider.GCP: "Google Cloud",
    CloudProvider.OCI: "Oracle",
    CloudProvider.IBM: "IBM",
    CloudProvider.ALIBABA: "Alibaba Cloud",
    CloudProvider.TENCENT: "Tencent Cloud",
    CloudProvider.HUAWEI: "Huawei Cloud",
    CloudProvider.DIGITALOCEAN: "DigitalOcean",
    CloudProvider.LINODE: "Akamai (Linode)",
    CloudProvider.VULTR: "Vultr",
    CloudProvider.HETZNER: "Hetzner",
    CloudProvider.OVH: "OVHcloud",
    CloudProvider.SCALEWAY: "Scaleway",
    CloudProvider.CIVO: "Civo",
    CloudProvider.EXOSCALE: "Exoscale",
}

MANAGED_K8S_SUPPORT_TIERS = [
    _tier(SupportTier.BASIC, "Cloud Provider Basic", "Online resources, forums",
          "Best effort", "0"),
    _tier(SupportTier.STANDARD, "Cloud Provider Business", "24x7", "1 hour (critical)"),
    _tier(SupportTier.ENTERPRISE, "Cloud Provider Enterprise", "24x7 + TAM",
          "15 minutes (critical)", tam=True),
]


def get_control_plane_hourly_rate(provider: CloudProvider) -> Decimal:
    """Managed control-plane rate; providers outside the table pay the EKS rate"""
    provider = CloudProvider(provider)
    if provider in _CLOUD_VENDORS:
        return _CONTROL_PLANE_RATES.get(provider, ZERO)
    return _PAID_TIER_DEFAULT_RATE


class ManagedK8sLicensing(DistributionLicensing):
    """Cloud-managed Kubernetes: only the control plane is billed"""

    def __init__(self, distribution: Distribution, provider: CloudProvider):
        self.provider = CloudProvider(provider)
        distribution = Distribution(distribution)
        self.control_plane_hourly_rate = get_control_plane_hourly_rate(self.provider)

        super().__init__(LicensingProfile(
            distribution=distribution,
            display_name=_MANAGED_K8S_NAMES.get(
                distribution, f"{self.provider.value} Managed K8s"
            ),
            vendor=_CLOUD_VENDORS.get(self.provider, "Cloud Provider"),
            requires_license=False,
            licensing_model=LicensingModel.USAGE_BASED,
            cluster_fixed_per_year=self.control_plane_hourly_rate * HOURS_PER_YEAR,
            support_tiers=MANAGED_K8S_SUPPORT_TIERS,
        ))

    def calculate_licensing_cost(self, licensing_input: LicensingInput) -> LicensingCost:
        control_plane_cost = self.get_cluster_fixed_cost_per_year()
        return LicensingCost(
            additional_fees_per_year=control_plane_cost,
            per_node_per_year=control_plane_cost / max(licensing_input.node_count, 1),
            licensing_model=(
                f"Managed K8s - Control plane: ${self.control_plane_hourly_rate:.2f}/hour"
            ),
        )
