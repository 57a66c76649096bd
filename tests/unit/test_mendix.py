"""
Unit tests for the Mendix pricing calculator.
"""

from decimal import Decimal

import pytest

from infra_pricing.models import (
    MendixCloudType,
    MendixDeploymentCategory,
    MendixDeploymentConfig,
    MendixOtherDeployment,
    MendixPrivateCloudProvider,
    MendixResourcePackSize,
    MendixResourcePackTier,
)


class TestMendixCloud:
    """Test Mendix Cloud quotes."""

    def test_saas_standard_medium(self, mendix_calculator):
        config = MendixDeploymentConfig(
            resource_pack_tier=MendixResourcePackTier.STANDARD,
            resource_pack_size=MendixResourcePackSize.M,
        )
        result = mendix_calculator.calculate_cost(config)

        assert result.deployment_type_name == "Mendix Cloud (SaaS)"
        assert result.platform_license_cost == Decimal("65400")
        assert result.user_license_cost == Decimal("40800")
        assert result.deployment_fee_cost == Decimal("2064")
        assert result.discount_amount == Decimal("10620")
        assert result.total_per_year == Decimal("97644")
        assert result.total_cloud_tokens == 40
        assert result.resource_pack_details == "1x Standard M (4GB RAM, 1 vCPU, 20GB DB)"

    def test_pack_quantity_multiplies_fee_and_tokens(self, mendix_calculator):
        config = MendixDeploymentConfig(
            resource_pack_tier=MendixResourcePackTier.PREMIUM,
            resource_pack_size=MendixResourcePackSize.L,
            resource_pack_quantity=3,
        )
        result = mendix_calculator.calculate_cost(config)

        assert result.deployment_fee_cost == Decimal("18576")
        assert result.total_cloud_tokens == 360

    def test_unknown_pack_has_no_deployment_fee(self, mendix_calculator):
        """XS is not offered in the Premium tier."""
        config = MendixDeploymentConfig(
            resource_pack_tier=MendixResourcePackTier.PREMIUM,
            resource_pack_size=MendixResourcePackSize.XS,
        )
        result = mendix_calculator.calculate_cost(config)

        assert result.deployment_fee_cost == 0
        assert result.resource_pack_details is None

    def test_storage_rounded_up_to_blocks(self, mendix_calculator):
        config = MendixDeploymentConfig(
            additional_file_storage_gb=150, additional_database_storage_gb=100
        )
        result = mendix_calculator.calculate_cost(config)
        assert result.storage_cost == Decimal("492")

    def test_dedicated(self, mendix_calculator):
        config = MendixDeploymentConfig(cloud_type=MendixCloudType.DEDICATED)
        result = mendix_calculator.calculate_cost(config)

        assert result.deployment_type_name == "Mendix Cloud Dedicated"
        assert result.deployment_fee_cost == Decimal("368100")


class TestMendixPrivateCloud:
    """Test Mendix on Azure and Kubernetes."""

    def test_kubernetes_environment_tiers(self, mendix_calculator):
        config = MendixDeploymentConfig(
            category=MendixDeploymentCategory.PRIVATE_CLOUD,
            private_cloud_provider=MendixPrivateCloudProvider.EKS,
            number_of_environments=60,
        )
        result = mendix_calculator.calculate_cost(config)

        assert result.deployment_type_name == "Mendix on Kubernetes (EKS)"
        assert result.deployment_fee_cost == Decimal("6360")
        assert result.environment_cost == Decimal("30456")
        assert result.environment_details == "3 included + 50 @ $552/env + 7 @ $408/env"

    def test_kubernetes_included_environments(self, mendix_calculator):
        config = MendixDeploymentConfig(
            category=MendixDeploymentCategory.PRIVATE_CLOUD,
            private_cloud_provider=MendixPrivateCloudProvider.GKE,
            number_of_environments=3,
        )
        result = mendix_calculator.calculate_cost(config)

        assert result.environment_cost == 0
        assert result.environment_details == "3 environments (3 included in base)"

    def test_free_band_beyond_150(self, mendix_calculator):
        assert mendix_calculator.calculate_k8s_environment_cost(300) == Decimal("60000")

    def test_azure_additional_environments(self, mendix_calculator):
        config = MendixDeploymentConfig(
            category=MendixDeploymentCategory.PRIVATE_CLOUD,
            private_cloud_provider=MendixPrivateCloudProvider.AZURE,
            number_of_environments=5,
        )
        result = mendix_calculator.calculate_cost(config)

        assert result.deployment_type_name == "Mendix on Azure"
        assert result.deployment_fee_cost == Decimal("6612")
        assert result.environment_cost == Decimal("1444.80")
        assert result.total_cloud_tokens == 28
        assert result.environment_details == "3 included + 2 additional @ $722.40/env"

    def test_unsupported_provider_marked_manual(self, mendix_calculator):
        config = MendixDeploymentConfig(
            category=MendixDeploymentCategory.PRIVATE_CLOUD,
            private_cloud_provider=MendixPrivateCloudProvider.RANCHER,
        )
        result = mendix_calculator.calculate_cost(config)
        assert result.deployment_type_name == "Mendix on Kubernetes (Rancher) - Manual Setup"

    def test_supported_providers(self, mendix_calculator):
        assert mendix_calculator.is_supported_provider(MendixPrivateCloudProvider.OPENSHIFT)
        assert not mendix_calculator.is_supported_provider(MendixPrivateCloudProvider.DOCKER)
        assert len(mendix_calculator.get_supported_providers()) == 5


class TestMendixOther:
    """Test server, StackIT and SAP BTP deployments."""

    def test_server_unlimited_apps(self, mendix_calculator):
        config = MendixDeploymentConfig(category=MendixDeploymentCategory.OTHER)
        result = mendix_calculator.calculate_cost(config)

        assert result.deployment_type_name == "Mendix on Server"
        assert result.deployment_fee_cost == Decimal("33060")
        assert result.environment_details == "Unlimited applications"

    def test_per_app_pricing(self, mendix_calculator):
        config = MendixDeploymentConfig(
            category=MendixDeploymentCategory.OTHER,
            other_deployment=MendixOtherDeployment.SAP_BTP,
            is_unlimited_apps=False,
            number_of_apps=2,
        )
        result = mendix_calculator.calculate_cost(config)

        assert result.deployment_type_name == "Mendix on SAP BTP"
        assert result.deployment_fee_cost == Decimal("13224")
        assert result.environment_details == "2 application(s) @ $6612/app"


class TestMendixAddOns:
    def test_users_billed_in_blocks(self, mendix_calculator):
        assert mendix_calculator.calculate_user_license_cost(101, 0) == Decimal("81600")
        assert mendix_calculator.calculate_user_license_cost(0, 250_001) == Decimal("120000")
        assert mendix_calculator.calculate_user_license_cost(0, 0) == 0

    def test_genai_and_knowledge_base(self, mendix_calculator):
        config = MendixDeploymentConfig(
            include_genai=True,
            genai_model_pack_size="M",
            include_genai_knowledge_base=True,
        )
        result = mendix_calculator.calculate_cost(config)

        assert result.genai_cost == Decimal("6192.00")
        assert result.total_cloud_tokens == 120

    def test_customer_enablement_not_discounted(self, mendix_calculator):
        base = mendix_calculator.calculate_cost(MendixDeploymentConfig())
        enabled = mendix_calculator.calculate_cost(
            MendixDeploymentConfig(include_customer_enablement=True)
        )

        assert enabled.discount_amount == base.discount_amount
        assert enabled.total_per_year - base.total_per_year == Decimal("45000")


class TestResourcePackRecommendation:
    @pytest.mark.parametrize(
        "memory,cpu,storage,expected",
        [
            ("3", "1", "10", "M"),
            ("1", "0.25", "5", "XS"),
            ("10", "2", "40", "XL"),
        ],
    )
    def test_cheapest_pack_meeting_minimums(self, mendix_calculator, memory, cpu, storage, expected):
        pack = mendix_calculator.recommend_resource_pack(
            MendixResourcePackTier.STANDARD, Decimal(memory), Decimal(cpu), Decimal(storage)
        )
        assert pack.size == expected

    def test_no_pack_large_enough(self, mendix_calculator):
        pack = mendix_calculator.recommend_resource_pack(
            MendixResourcePackTier.STANDARD, Decimal("512"), Decimal("1"), Decimal("1")
        )
        assert pack is None
