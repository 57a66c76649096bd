"""
Unit tests for data models.
Tests validation, derived totals and serialization.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from infra_pricing.exceptions import DataError
from infra_pricing.models import (
    CloudProvider,
    ComputePricing,
    LicensingCost,
    MendixDeploymentCategory,
    MendixPricingResult,
    NetworkPricing,
    OutSystemsDeploymentConfig,
    OutSystemsDeploymentType,
    OutSystemsEdition,
    OutSystemsFeature,
    OutSystemsPricingResult,
    OutSystemsUserLicenseType,
    OutSystemsUserTier,
    ProviderPricing,
    StoragePricing,
    SupportLevel,
    SupportPricing,
)


class TestCloudPricingModels:
    """Test cloud pricing value types."""

    def test_compute_monthly_cost(self):
        """Monthly compute cost is hourly cost times 730 hours."""
        compute = ComputePricing(cpu_per_hour=Decimal("0.048"), ram_gb_per_hour=Decimal("0.006"))

        assert compute.calculate_hourly_cost(4, 16) == Decimal("0.288")
        assert compute.calculate_monthly_cost(4, 16) == Decimal("210.24")

    def test_negative_instance_price_rejected(self):
        """Instance prices cannot be negative."""
        with pytest.raises(ValidationError):
            ComputePricing(instance_type_prices={"m6i.large": Decimal("-1")})

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError):
            StoragePricing(ssd_per_gb_month=Decimal("-0.01"))

    def test_compute_pricing_json_round_trip(self):
        compute = ComputePricing(
            cpu_per_hour=Decimal("0.0475"),
            ram_gb_per_hour=Decimal("0.00637"),
            managed_control_plane_per_hour=Decimal("0.10"),
            openshift_service_fee_per_worker_hour=Decimal("0.171"),
            instance_type_prices={"m5.xlarge": Decimal("0.192"), "m5.2xlarge": Decimal("0.384")},
        )

        restored = ComputePricing.model_validate_json(compute.model_dump_json())

        assert restored == compute
        assert restored.instance_type_prices["m5.xlarge"] == Decimal("0.192")
        assert restored.calculate_monthly_cost(4, 16) == compute.calculate_monthly_cost(4, 16)

    def test_storage_and_network_defaults_are_zero(self):
        assert StoragePricing().calculate_monthly_cost(100, 100, 100, 100) == 0
        assert NetworkPricing().calculate_monthly_cost(2, 1000, 3) == 0

    def test_network_monthly_cost(self):
        network = NetworkPricing(
            egress_per_gb=Decimal("0.09"),
            load_balancer_per_hour=Decimal("0.0225"),
            public_ip_per_hour=Decimal("0.005"),
        )
        # 2 LBs * 0.0225 * 730 + 100 GB * 0.09 + 1 IP * 0.005 * 730
        assert network.calculate_monthly_cost(2, 100, 1) == Decimal("45.5")

    def test_support_cost_percentages(self):
        support = SupportPricing()
        assert support.get_support_cost(Decimal("1000"), SupportLevel.BUSINESS) == Decimal("100")
        assert support.get_support_cost(Decimal("1000"), SupportLevel.BASIC) == 0

    def test_provider_pricing_is_frozen(self):
        pricing = ProviderPricing(
            provider=CloudProvider.AWS, region="us-east-1", region_display_name="US East"
        )
        with pytest.raises(ValidationError):
            pricing.region = "eu-west-1"

    def test_provider_pricing_stores_enum_values(self):
        pricing = ProviderPricing(
            provider=CloudProvider.AZURE, region="eastus", region_display_name="East US"
        )
        assert pricing.provider == "Azure"
        assert pricing.currency == "USD"


class TestLicensingModels:
    """Test licensing records."""

    def test_licensing_cost_totals(self):
        cost = LicensingCost(
            base_license_per_year=Decimal("24000"),
            support_cost_per_year=Decimal("6000"),
            additional_fees_per_year=Decimal("6000"),
        )
        assert cost.total_per_year == Decimal("36000")
        assert cost.total_per_month == Decimal("3000")

    def test_discount_percent_bounds(self):
        with pytest.raises(ValidationError):
            LicensingCost(discount_percent=Decimal("100"))

    def test_licensing_cost_json_round_trip(self):
        """Decimal amounts survive a JSON round trip unchanged."""
        cost = LicensingCost(
            base_license_per_year=Decimal("27500.50"),
            support_cost_per_year=Decimal("-0.01"),
            per_node_per_year=Decimal("2750.05"),
            discount_percent=Decimal("12.5"),
            licensing_model="Per node: $2,750.05/node/year",
        )

        restored = LicensingCost.model_validate_json(cost.model_dump_json())

        assert restored == cost
        assert restored.base_license_per_year == Decimal("27500.50")
        assert restored.support_cost_per_year == Decimal("-0.01")
        assert restored.total_per_year == cost.total_per_year


class TestLowCodeModels:
    """Test Mendix and OutSystems records."""

    def test_mendix_total_subtracts_discount(self):
        result = MendixPricingResult(
            category=MendixDeploymentCategory.CLOUD,
            platform_license_cost=Decimal("65400"),
            user_license_cost=Decimal("40800"),
            deployment_fee_cost=Decimal("2064"),
            discount_amount=Decimal("10620"),
        )
        assert result.total_per_year == Decimal("97644")
        assert result.total_three_year == Decimal("292932")

    def test_user_tier_max_below_min_rejected(self):
        with pytest.raises(ValidationError):
            OutSystemsUserTier(min_users=100, max_users=50, price_per_pack=1, pack_size=1)

    def test_user_tier_unbounded(self):
        tier = OutSystemsUserTier(min_users=5001, max_users=-1, price_per_pack=3600, pack_size=100)
        assert tier.is_unbounded

    def test_outsystems_config_properties(self):
        config = OutSystemsDeploymentConfig(
            deployment_type=OutSystemsDeploymentType.SELF_MANAGED,
            production_environments=2,
            non_production_environments=2,
            user_license_type=OutSystemsUserLicenseType.UNLIMITED,
            include_ha=True,
            include_dr=True,
        )
        assert config.total_environments == 4
        assert config.is_self_managed
        assert config.uses_unlimited_users
        assert config.requested_features() == [
            OutSystemsFeature.HIGH_AVAILABILITY,
            OutSystemsFeature.DISASTER_RECOVERY,
        ]

    def test_outsystems_result_subtotals(self):
        result = OutSystemsPricingResult(
            edition=OutSystemsEdition.STANDARD,
            deployment_type=OutSystemsDeploymentType.SELF_MANAGED,
            edition_base_cost=Decimal("36300"),
            dr_cost=Decimal("12100"),
            monthly_vm_cost=Decimal("100"),
            expert_days_cost=Decimal("2640"),
        )
        assert result.license_subtotal == Decimal("36300")
        assert result.add_ons_subtotal == Decimal("12100")
        assert result.infrastructure_subtotal == Decimal("1200")
        assert result.services_subtotal == Decimal("2640")
        assert result.total_per_year == Decimal("52240")
        assert result.total_five_year == Decimal("261200")


class TestExceptions:
    def test_data_error_carries_source(self):
        error = DataError("Malformed table", "prices.yaml")
        assert error.source == "prices.yaml"
        assert str(error) == "Malformed table (source: prices.yaml)"

    def test_data_error_without_source(self):
        assert str(DataError("Missing table")) == "Missing table"
