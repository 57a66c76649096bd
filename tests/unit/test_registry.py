"""
Unit tests for the pricing registry.
"""

from decimal import Decimal

import pytest

from infra_pricing.exceptions import ConfigurationError
from infra_pricing.models import CloudProvider, Distribution, LicensingInput
from infra_pricing.services.licensing import (
    ManagedK8sLicensing,
    OpenShiftLicensing,
    TanzuLicensing,
)
from infra_pricing.services.registry import get_registry


class TestCloudProviderLookup:
    """Test provider resolution and managed OpenShift aliases."""

    def test_alias_uses_host_strategy(self, registry):
        assert registry.get_cloud_provider_pricing("ROSA") is registry.get_cloud_provider_pricing("AWS")
        assert (
            registry.get_cloud_provider_pricing(CloudProvider.ROKS)
            is registry.get_cloud_provider_pricing(CloudProvider.IBM)
        )

    def test_rosa_pricing_bundle(self, registry):
        pricing = registry.get_pricing("ROSA")

        assert pricing.provider == "ROSA"
        assert pricing.region == "us-east-1"
        assert pricing.licenses.openshift_per_node_year == 0
        assert pricing.licenses.tanzu_per_core_year == 0
        assert pricing.compute.openshift_service_fee_per_worker_hour == Decimal("0.171")

    def test_aro_service_fee(self, registry):
        pricing = registry.get_pricing(CloudProvider.ARO, "westeurope")

        assert pricing.provider == "ARO"
        assert pricing.region == "westeurope"
        assert pricing.compute.openshift_service_fee_per_worker_hour == Decimal("0.21")

    def test_host_pricing_keeps_licenses(self, registry):
        pricing = registry.get_pricing("AWS")
        assert pricing.provider == "AWS"
        assert pricing.licenses.openshift_per_node_year > 0

    @pytest.mark.parametrize("provider", ["Manual", "Mars", ""])
    def test_unknown_provider(self, registry, provider):
        with pytest.raises(ConfigurationError):
            registry.get_cloud_provider_pricing(provider)

    def test_provider_support(self, registry):
        assert registry.is_provider_supported("OSD")
        assert registry.is_provider_supported(CloudProvider.ON_PREM)
        assert not registry.is_provider_supported("Manual")
        assert not registry.is_provider_supported("Mars")

    def test_all_providers(self, registry):
        assert len(registry.get_all_cloud_providers()) == 17


class TestDistributionLookup:
    """Test licensing strategy resolution."""

    def test_hosted_variant_uses_base_strategy(self, registry):
        assert isinstance(registry.get_distribution_licensing("TanzuAWS"), TanzuLicensing)
        assert registry.get_distribution_licensing(
            Distribution.RANCHER_EKS
        ) is registry.get_distribution_licensing(Distribution.RANCHER)

    def test_managed_openshift_distribution(self, registry):
        licensing = registry.get_distribution_licensing(Distribution.OPENSHIFT_ROSA)
        cost = registry.calculate_licensing_cost(
            "OpenShiftROSA", LicensingInput(node_count=8, worker_node_count=5)
        )

        assert isinstance(licensing, OpenShiftLicensing)
        assert cost.total_per_year == Decimal("7489.8")

    def test_managed_kubernetes(self, registry):
        cost = registry.calculate_licensing_cost(Distribution.EKS, LicensingInput(node_count=3))
        assert cost.total_per_year == Decimal("876")

    def test_every_distribution_resolves(self, registry):
        for distribution in Distribution:
            assert registry.is_distribution_supported(distribution)
            assert registry.get_distribution_licensing(distribution) is not None

    def test_manual_provider_control_plane(self):
        licensing = ManagedK8sLicensing(Distribution.EKS, CloudProvider.MANUAL)
        assert licensing.control_plane_hourly_rate == Decimal("0.10")
        assert licensing.vendor == "Cloud Provider"

    def test_unknown_distribution(self, registry):
        with pytest.raises(ConfigurationError, match="Unknown distribution"):
            registry.get_distribution_licensing("Borg")
        assert not registry.is_distribution_supported("Borg")

    def test_distribution_support(self, registry):
        assert registry.is_distribution_supported("OpenShift")
        assert registry.is_distribution_supported("K3sGCP")


class TestSharedRegistry:
    def test_singleton(self):
        assert get_registry() is get_registry()
