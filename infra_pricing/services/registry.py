"""
Lookup from provider and distribution discriminators to pricing strategies.
"""

from decimal import Decimal
from typing import Dict, List, Optional, Union

import structlog

from ..exceptions import ConfigurationError
from ..models.licensing import LicensingCost, LicensingInput
from ..models.pricing import LicensePricing, ProviderPricing
from ..models.types import CloudProvider, Distribution
from .cloud_pricing import PROVIDER_PROFILES, CloudProviderPricing
from .licensing import (
    CharmedLicensing,
    DistributionLicensing,
    K3sLicensing,
    ManagedK8sLicensing,
    MicroK8sLicensing,
    OpenShiftLicensing,
    RancherLicensing,
    Rke2Licensing,
    TanzuLicensing,
    VanillaK8sLicensing,
)

logger = structlog.get_logger(__name__)

# Managed OpenShift aliases and the cloud they run on
MANAGED_OPENSHIFT_HOSTS = {
    CloudProvider.ROSA: CloudProvider.AWS,
    CloudProvider.ARO: CloudProvider.AZURE,
    CloudProvider.OSD: CloudProvider.GCP,
    CloudProvider.ROKS: CloudProvider.IBM,
}

MANAGED_OPENSHIFT_SERVICE_FEES = {
    CloudProvider.ROSA: Decimal("0.171"),
    CloudProvider.ARO: Decimal("0.21"),
    CloudProvider.OSD: Decimal("0.166"),
    CloudProvider.ROKS: Decimal("0.20"),
}

_MANAGED_K8S_PROVIDERS = {
    Distribution.EKS: CloudProvider.AWS,
    Distribution.AKS: CloudProvider.AZURE,
    Distribution.GKE: CloudProvider.GCP,
    Distribution.OKE: CloudProvider.OCI,
    Distribution.IKS: CloudProvider.IBM,
    Distribution.ACK: CloudProvider.ALIBABA,
    Distribution.TKE: CloudProvider.TENCENT,
    Distribution.CCE: CloudProvider.HUAWEI,
    Distribution.DOKS: CloudProvider.DIGITALOCEAN,
    Distribution.LKE: CloudProvider.LINODE,
    Distribution.VKE: CloudProvider.VULTR,
    Distribution.HETZNER_K8S: CloudProvider.HETZNER,
    Distribution.OVH_KUBERNETES: CloudProvider.OVH,
    Distribution.SCALEWAY_KAPSULE: CloudProvider.SCALEWAY,
}

# Cloud-hosted variants of self-managed distributions share the base pricing
_BASE_DISTRIBUTIONS = {
    Distribution.RANCHER_HOSTED: Distribution.RANCHER,
    Distribution.RANCHER_EKS: Distribution.RANCHER,
    Distribution.RANCHER_AKS: Distribution.RANCHER,
    Distribution.RANCHER_GKE: Distribution.RANCHER,
    Distribution.TANZU_CLOUD: Distribution.TANZU,
    Distribution.TANZU_AWS: Distribution.TANZU,
    Distribution.TANZU_AZURE: Distribution.TANZU,
    Distribution.TANZU_GCP: Distribution.TANZU,
    Distribution.CHARMED_AWS: Distribution.CHARMED,
    Distribution.CHARMED_AZURE: Distribution.CHARMED,
    Distribution.CHARMED_GCP: Distribution.CHARMED,
    Distribution.MICROK8S_AWS: Distribution.MICROK8S,
    Distribution.MICROK8S_AZURE: Distribution.MICROK8S,
    Distribution.MICROK8S_GCP: Distribution.MICROK8S,
    Distribution.K3S_AWS: Distribution.K3S,
    Distribution.K3S_AZURE: Distribution.K3S,
    Distribution.K3S_GCP: Distribution.K3S,
    Distribution.RKE2_AWS: Distribution.RKE2,
    Distribution.RKE2_AZURE: Distribution.RKE2,
    Distribution.RKE2_GCP: Distribution.RKE2,
}


def _parse_provider(provider: Union[CloudProvider, str]) -> CloudProvider:
    try:
        return CloudProvider(provider)
    except ValueError:
        raise ConfigurationError(f"Unknown cloud provider: {provider}")


def _parse_distribution(distribution: Union[Distribution, str]) -> Distribution:
    try:
        return Distribution(distribution)
    except ValueError:
        raise ConfigurationError(f"Unknown distribution: {distribution}")


class PricingRegistry:
    """Resolves cloud pricing and licensing strategies"""

    def __init__(self):
        self._cloud_providers: Dict[CloudProvider, CloudProviderPricing] = {
            provider: CloudProviderPricing(profile)
            for provider, profile in PROVIDER_PROFILES.items()
        }
        self._licensing: Dict[Distribution, DistributionLicensing] = {
            Distribution.OPENSHIFT: OpenShiftLicensing(),
            Distribution.KUBERNETES: VanillaK8sLicensing(),
            Distribution.RANCHER: RancherLicensing(),
            Distribution.RKE2: Rke2Licensing(),
            Distribution.K3S: K3sLicensing(),
            Distribution.MICROK8S: MicroK8sLicensing(),
            Distribution.CHARMED: CharmedLicensing(),
            Distribution.TANZU: TanzuLicensing(),
            Distribution.OPENSHIFT_ROSA: OpenShiftLicensing(CloudProvider.ROSA),
            Distribution.OPENSHIFT_ARO: OpenShiftLicensing(CloudProvider.ARO),
            Distribution.OPENSHIFT_DEDICATED: OpenShiftLicensing(CloudProvider.OSD),
            Distribution.OPENSHIFT_IBM: OpenShiftLicensing(CloudProvider.ROKS),
        }
        for distribution, provider in _MANAGED_K8S_PROVIDERS.items():
            self._licensing[distribution] = ManagedK8sLicensing(distribution, provider)

        logger.debug(
            "Pricing registry initialized",
            providers=len(self._cloud_providers),
            distributions=len(self._licensing),
        )

    def get_cloud_provider_pricing(
        self, provider: Union[CloudProvider, str]
    ) -> CloudProviderPricing:
        provider = _parse_provider(provider)
        provider = MANAGED_OPENSHIFT_HOSTS.get(provider, provider)
        pricing = self._cloud_providers.get(provider)
        if pricing is None:
            raise ConfigurationError(f"Unknown cloud provider: {provider.value}")
        return pricing

    def get_pricing(
        self, provider: Union[CloudProvider, str], region: Optional[str] = None
    ) -> ProviderPricing:
        """Pricing bundle, re-labelled for managed OpenShift aliases.

        For ROSA/ARO/OSD/ROKS the OpenShift subscription is part of the
        hourly service fee, so bundled license prices are zeroed.
        """
        provider = _parse_provider(provider)
        pricing = self.get_cloud_provider_pricing(provider).get_pricing(region)

        if provider.is_managed_openshift:
            compute = pricing.compute.model_copy(update={
                "openshift_service_fee_per_worker_hour": MANAGED_OPENSHIFT_SERVICE_FEES[provider],
            })
            pricing = pricing.model_copy(update={
                "provider": provider.value,
                "licenses": LicensePricing(
                    openshift_per_node_year=Decimal("0"),
                    rancher_enterprise_per_node_year=Decimal("0"),
                    tanzu_per_core_year=Decimal("0"),
                    charmed_k8s_per_node_year=Decimal("0"),
                ),
                "compute": compute,
            })
        return pricing

    def get_distribution_licensing(
        self, distribution: Union[Distribution, str]
    ) -> DistributionLicensing:
        distribution = _parse_distribution(distribution)
        distribution = _BASE_DISTRIBUTIONS.get(distribution, distribution)

        licensing = self._licensing.get(distribution)
        if licensing is None:
            logger.debug(
                "No licensing strategy mapped, assuming managed Kubernetes",
                distribution=distribution.value,
            )
            licensing = ManagedK8sLicensing(distribution, CloudProvider.MANUAL)
        return licensing

    def calculate_licensing_cost(
        self, distribution: Union[Distribution, str], licensing_input: LicensingInput
    ) -> LicensingCost:
        return self.get_distribution_licensing(distribution).calculate_licensing_cost(
            licensing_input
        )

    def is_provider_supported(self, provider: Union[CloudProvider, str]) -> bool:
        try:
            provider = CloudProvider(provider)
        except ValueError:
            return False
        return provider in self._cloud_providers or provider in MANAGED_OPENSHIFT_HOSTS

    def is_distribution_supported(self, distribution: Union[Distribution, str]) -> bool:
        try:
            distribution = Distribution(distribution)
        except ValueError:
            return False
        return distribution in self._licensing or distribution in _BASE_DISTRIBUTIONS

    def get_all_cloud_providers(self) -> List[CloudProviderPricing]:
        return list(self._cloud_providers.values())

    def get_all_distribution_licensing(self) -> List[DistributionLicensing]:
        return list(self._licensing.values())


_registry: Optional[PricingRegistry] = None


def get_registry() -> PricingRegistry:
    """Shared registry instance"""
    global _registry
    if _registry is None:
        _registry = PricingRegistry()
    return _registry
