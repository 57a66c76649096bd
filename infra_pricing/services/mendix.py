"""
Mendix platform pricing calculator.
"""

import math
from decimal import Decimal
from typing import List, Optional

import structlog

from ..models.mendix import (
    MendixCloudType,
    MendixDeploymentCategory,
    MendixDeploymentConfig,
    MendixOtherDeployment,
    MendixPricingResult,
    MendixPricingSettings,
    MendixPrivateCloudProvider,
    MendixResourcePackSpec,
    MendixResourcePackTier,
)
from .data_loader import load_mendix_pricing

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")

STORAGE_BLOCK_GB = 100
INTERNAL_USER_BLOCK = 100
EXTERNAL_USER_BLOCK = 250_000

# Private cloud targets with official Mendix support
SUPPORTED_PROVIDERS = [
    MendixPrivateCloudProvider.AZURE,
    MendixPrivateCloudProvider.EKS,
    MendixPrivateCloudProvider.AKS,
    MendixPrivateCloudProvider.GKE,
    MendixPrivateCloudProvider.OPENSHIFT,
]

_OTHER_DEPLOYMENT_NAMES = {
    MendixOtherDeployment.SERVER: "Mendix on Server (VMs/Docker)",
    MendixOtherDeployment.STACKIT: "Mendix on StackIT",
    MendixOtherDeployment.SAP_BTP: "Mendix on SAP BTP",
}


def _blocks(amount: int, block_size: int) -> int:
    return math.ceil(amount / block_size) if amount > 0 else 0


class MendixPricingCalculator:
    """Annual Mendix quote from a deployment configuration"""

    def __init__(self, settings: Optional[MendixPricingSettings] = None):
        self.settings = settings or load_mendix_pricing()

    # Lookups

    def get_available_packs(self, tier: MendixResourcePackTier) -> List[MendixResourcePackSpec]:
        return list(self.settings.resource_packs.get(MendixResourcePackTier(tier), []))

    def get_resource_pack(self, tier, size) -> Optional[MendixResourcePackSpec]:
        return next((p for p in self.get_available_packs(tier) if p.size == size), None)

    def recommend_resource_pack(
        self,
        tier: MendixResourcePackTier,
        memory_gb: Decimal,
        cpu: Decimal,
        db_storage_gb: Decimal,
    ) -> Optional[MendixResourcePackSpec]:
        """Cheapest pack in the tier that meets every minimum"""
        candidates = [
            pack
            for pack in self.get_available_packs(tier)
            if pack.mx_memory_gb >= memory_gb
            and pack.mx_vcpu >= cpu
            and pack.db_storage_gb >= db_storage_gb
        ]
        return min(candidates, key=lambda p: p.price_per_year, default=None)

    def is_supported_provider(self, provider: MendixPrivateCloudProvider) -> bool:
        return MendixPrivateCloudProvider(provider) in SUPPORTED_PROVIDERS

    def get_supported_providers(self) -> List[MendixPrivateCloudProvider]:
        return list(SUPPORTED_PROVIDERS)

    # Environment tiers

    def _walk_k8s_tiers(self, total_environments: int):
        """Yield (tier, count) for environments beyond the included ones"""
        remaining = total_environments - self.settings.k8s_base_environments_included
        tiers = sorted(self.settings.k8s_environment_tiers, key=lambda t: t.min_environments)
        for tier in tiers:
            if remaining <= 0:
                break
            if tier.max_environments == -1:
                count = remaining
            else:
                count = min(tier.max_environments - tier.min_environments + 1, remaining)
            yield tier, count
            remaining -= count

    def calculate_k8s_environment_cost(self, total_environments: int) -> Decimal:
        return sum(
            (tier.price_per_environment * count
             for tier, count in self._walk_k8s_tiers(total_environments)),
            ZERO,
        )

    def _k8s_environment_details(self, total_environments: int) -> str:
        parts = [f"{self.settings.k8s_base_environments_included} included"]
        for tier, count in self._walk_k8s_tiers(total_environments):
            if tier.price_per_environment > 0:
                parts.append(f"{count} @ ${tier.price_per_environment}/env")
            else:
                parts.append(f"{count} free")
        return " + ".join(parts)

    # Deployment categories

    def _cloud_costs(self, config: MendixDeploymentConfig) -> dict:
        settings = self.settings
        costs = {"platform_license_cost": settings.platform_premium_unlimited_per_year}

        if config.cloud_type == MendixCloudType.DEDICATED:
            costs["deployment_type_name"] = "Mendix Cloud Dedicated"
            costs["deployment_fee_cost"] = settings.cloud_dedicated_price_per_year
            return costs

        costs["deployment_type_name"] = "Mendix Cloud (SaaS)"

        if config.resource_pack_tier and config.resource_pack_size:
            pack = self.get_resource_pack(config.resource_pack_tier, config.resource_pack_size)
            if pack is None:
                logger.debug(
                    "Resource pack not offered in tier",
                    tier=MendixResourcePackTier(config.resource_pack_tier).value,
                    size=config.resource_pack_size,
                )
            else:
                quantity = config.resource_pack_quantity
                tier_name = MendixResourcePackTier(config.resource_pack_tier).value
                costs["deployment_fee_cost"] = pack.price_per_year * quantity
                costs["total_cloud_tokens"] = pack.cloud_tokens * quantity
                costs["resource_pack_details"] = (
                    f"{quantity}x {tier_name} {pack.display_name} "
                    f"({pack.mx_memory_gb}GB RAM, {pack.mx_vcpu} vCPU, {pack.db_storage_gb}GB DB)"
                )

        costs["storage_cost"] = (
            _blocks(config.additional_file_storage_gb, STORAGE_BLOCK_GB)
            * settings.additional_file_storage_per_100gb
            + _blocks(config.additional_database_storage_gb, STORAGE_BLOCK_GB)
            * settings.additional_database_storage_per_100gb
        )
        return costs

    def _private_cloud_costs(self, config: MendixDeploymentConfig) -> dict:
        settings = self.settings
        environments = config.number_of_environments
        costs = {"platform_license_cost": settings.platform_premium_unlimited_per_year}

        if config.private_cloud_provider == MendixPrivateCloudProvider.AZURE:
            included = settings.azure_base_environments_included
            costs["deployment_type_name"] = "Mendix on Azure"
            costs["deployment_fee_cost"] = settings.azure_base_price_per_year

            if environments > included:
                additional = environments - included
                price = settings.azure_additional_environment_price
                costs["environment_cost"] = additional * price
                costs["total_cloud_tokens"] = (
                    additional * settings.azure_additional_environment_tokens
                )
                costs["environment_details"] = (
                    f"{included} included + {additional} additional @ ${price}/env"
                )
            else:
                costs["environment_details"] = (
                    f"{environments} environments (up to {included} included)"
                )
            return costs

        provider = config.private_cloud_provider
        provider_name = MendixPrivateCloudProvider(provider).value if provider else "Kubernetes"
        name = f"Mendix on Kubernetes ({provider_name})"
        if not self.is_supported_provider(provider or MendixPrivateCloudProvider.GENERIC_K8S):
            name += " - Manual Setup"

        costs["deployment_type_name"] = name
        costs["deployment_fee_cost"] = settings.k8s_base_price_per_year

        included = settings.k8s_base_environments_included
        if environments > included:
            costs["environment_cost"] = self.calculate_k8s_environment_cost(environments)
            costs["environment_details"] = self._k8s_environment_details(environments)
        else:
            costs["environment_details"] = (
                f"{environments} environments ({included} included in base)"
            )
        return costs

    def _other_costs(self, config: MendixDeploymentConfig) -> dict:
        settings = self.settings
        deployment = (
            MendixOtherDeployment(config.other_deployment) if config.other_deployment else None
        )

        if deployment == MendixOtherDeployment.STACKIT:
            per_app = settings.stackit_per_app_price_per_year
            unlimited = settings.stackit_unlimited_apps_price_per_year
        elif deployment == MendixOtherDeployment.SAP_BTP:
            per_app = settings.sap_btp_per_app_price_per_year
            unlimited = settings.sap_btp_unlimited_apps_price_per_year
        else:
            per_app = settings.server_per_app_price_per_year
            unlimited = settings.server_unlimited_apps_price_per_year

        costs = {
            "platform_license_cost": settings.platform_premium_unlimited_per_year,
            "deployment_type_name": _OTHER_DEPLOYMENT_NAMES.get(deployment, "Mendix on Server"),
        }

        if config.is_unlimited_apps:
            costs["deployment_fee_cost"] = unlimited
            costs["environment_details"] = "Unlimited applications"
        else:
            costs["deployment_fee_cost"] = per_app * config.number_of_apps
            costs["environment_details"] = (
                f"{config.number_of_apps} application(s) @ ${per_app}/app"
            )
        return costs

    # Quote

    def calculate_user_license_cost(self, internal_users: int, external_users: int) -> Decimal:
        return (
            _blocks(internal_users, INTERNAL_USER_BLOCK)
            * self.settings.internal_users_per_100_per_year
            + _blocks(external_users, EXTERNAL_USER_BLOCK)
            * self.settings.external_users_per_250k_per_year
        )

    def calculate_cost(self, config: MendixDeploymentConfig) -> MendixPricingResult:
        settings = self.settings
        category = MendixDeploymentCategory(config.category)

        if category == MendixDeploymentCategory.CLOUD:
            costs = self._cloud_costs(config)
        elif category == MendixDeploymentCategory.PRIVATE_CLOUD:
            costs = self._private_cloud_costs(config)
        else:
            costs = self._other_costs(config)

        tokens = costs.pop("total_cloud_tokens", 0)
        user_cost = self.calculate_user_license_cost(config.internal_users, config.external_users)

        genai_cost = ZERO
        if config.include_genai and config.genai_model_pack_size:
            pack = next(
                (p for p in settings.genai_model_packs if p.size == config.genai_model_pack_size),
                None,
            )
            if pack is not None:
                genai_cost += pack.price_per_year
                tokens += pack.cloud_tokens

        if config.include_genai_knowledge_base:
            genai_cost += settings.genai_knowledge_base_price_per_year
            tokens += settings.genai_knowledge_base_tokens

        services_cost = settings.customer_enablement_price if config.include_customer_enablement else ZERO

        # Volume discount covers platform and user licenses only
        discountable = costs["platform_license_cost"] + user_cost
        discount_amount = discountable * settings.volume_discount_percent / 100

        result = MendixPricingResult(
            category=category,
            user_license_cost=user_cost,
            genai_cost=genai_cost,
            services_cost=services_cost,
            discount_amount=discount_amount,
            discount_percent=settings.volume_discount_percent,
            total_cloud_tokens=tokens,
            **costs,
        )

        logger.debug(
            "Calculated Mendix cost",
            category=category.value,
            deployment=result.deployment_type_name,
            total_per_year=str(result.total_per_year),
        )
        return result
