"""
OutSystems pricing calculator for OutSystems 11 (O11) and OutSystems
Developer Cloud (ODC).

Licenses are sold in Application Object (AO) packs. On O11 most add-ons are
priced per AO pack, users are billed through volume bands, and self-managed
installations on Azure or AWS also carry front-end VM costs. ODC has its own
base and AO pack prices, flat user packs and no O11 add-ons.
"""

import math
from decimal import Decimal
from typing import List, Optional, Tuple

import structlog

from ..models.outsystems import (
    FEATURE_DISPLAY_NAMES,
    OutSystemsAwsInstanceType,
    OutSystemsAzureInstanceType,
    OutSystemsCloudProvider,
    OutSystemsCostLineItem,
    OutSystemsDeploymentConfig,
    OutSystemsDeploymentType,
    OutSystemsEdition,
    OutSystemsFeature,
    OutSystemsPlatform,
    OutSystemsPricingResult,
    OutSystemsPricingSettings,
    OutSystemsSuccessPlan,
    OutSystemsUserTier,
)
from .data_loader import load_outsystems_pricing

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")

# Used when an instance type is missing from the price book
DEFAULT_AZURE_HOURLY = Decimal("0.169")
DEFAULT_AWS_HOURLY = Decimal("0.192")
DEFAULT_AZURE_SPECS = (4, 8)
DEFAULT_AWS_SPECS = (4, 16)

SENTRY_INCLUDES_HA_WARNING = "Sentry already includes High Availability. HA add-on will be ignored."
ODC_CLOUD_HOSTED_WARNING = "ODC is cloud hosted. Self-managed deployment settings will be ignored."


def cloud_only_warning(feature: OutSystemsFeature) -> str:
    return (
        f"{FEATURE_DISPLAY_NAMES[feature]} is a Cloud-only feature. "
        "It will be ignored for self-managed deployments."
    )


def self_managed_only_warning(feature: OutSystemsFeature) -> str:
    return (
        f"{FEATURE_DISPLAY_NAMES[feature]} is a Self-Managed-only feature. "
        "It will be ignored for cloud deployments."
    )


def odc_unavailable_warning(add_on: str) -> str:
    return f"{add_on} is an OutSystems 11 add-on. It will be ignored for ODC."


def _money(amount: Decimal) -> str:
    return f"${amount:,.0f}"


class OutSystemsPricingCalculator:
    """Annual OutSystems quote from a deployment configuration"""

    def __init__(self, settings: Optional[OutSystemsPricingSettings] = None):
        self.settings = settings or load_outsystems_pricing()

    # Licensing building blocks

    def calculate_ao_pack_count(self, total_aos: int) -> int:
        """AO packs needed, never fewer than one"""
        if total_aos <= 0:
            return 1
        return math.ceil(total_aos / self.settings.ao_pack_size)

    def calculate_ao_pack_scaled_cost(self, rate: Decimal, ao_packs: int) -> Decimal:
        return rate * ao_packs

    def calculate_tiered_user_cost(
        self, total_users: int, included_users: int, tiers: List[OutSystemsUserTier]
    ) -> Decimal:
        """Bill users beyond ``included_users`` through volume bands.

        Users are numbered from ``included_users + 1``; each band bills the
        users that fall inside it in whole packs.
        """
        remaining = max(0, total_users - included_users)
        if remaining == 0:
            return ZERO

        total = ZERO
        current = included_users + 1
        for tier in sorted(tiers, key=lambda t: t.min_users):
            if remaining <= 0:
                break
            start = max(current, tier.min_users)
            end = current + remaining - 1
            if not tier.is_unbounded:
                end = min(end, tier.max_users)
            if start > end:
                continue
            users = end - start + 1
            total += math.ceil(users / tier.pack_size) * tier.price_per_pack
            remaining -= users
            current = end + 1

        if remaining > 0:
            logger.debug("Users beyond the last price band are not billed", unbilled=remaining)
        return total

    def calculate_internal_users_cost(self, internal_users: int, included_users: int) -> Decimal:
        settings = self.settings
        if settings.internal_user_tiers:
            return self.calculate_tiered_user_cost(
                internal_users, included_users, settings.internal_user_tiers
            )
        additional = max(0, internal_users - included_users)
        packs = math.ceil(additional / settings.internal_user_pack_size)
        return packs * settings.additional_internal_user_pack_price

    def calculate_external_users_cost(self, external_users: int) -> Decimal:
        settings = self.settings
        if external_users <= 0:
            return ZERO
        if settings.external_user_tiers:
            return self.calculate_tiered_user_cost(external_users, 0, settings.external_user_tiers)
        packs = math.ceil(external_users / settings.external_user_pack_size)
        return packs * settings.external_user_pack_per_year

    def calculate_odc_internal_users_cost(self, internal_users: int) -> Decimal:
        """ODC bills internal users past the included ones in flat packs"""
        settings = self.settings
        additional = max(0, internal_users - settings.odc_internal_users_included)
        packs = math.ceil(additional / settings.internal_user_pack_size)
        return packs * settings.odc_internal_user_pack_price

    def calculate_odc_external_users_cost(self, external_users: int) -> Decimal:
        settings = self.settings
        if external_users <= 0:
            return ZERO
        packs = math.ceil(external_users / settings.external_user_pack_size)
        return packs * settings.odc_external_user_pack_price

    def calculate_success_plan_cost(self, plan: OutSystemsSuccessPlan) -> Decimal:
        plan = OutSystemsSuccessPlan(plan)
        if plan == OutSystemsSuccessPlan.ESSENTIAL:
            return self.settings.essential_success_plan_price
        if plan == OutSystemsSuccessPlan.PREMIER:
            return self.settings.premier_success_plan_price
        return ZERO

    # Infrastructure

    def _azure_vm(self, instance_type) -> Tuple[Decimal, int, int]:
        spec = self.settings.azure_vm_pricing.get(OutSystemsAzureInstanceType(instance_type))
        if spec is None:
            return (DEFAULT_AZURE_HOURLY,) + DEFAULT_AZURE_SPECS
        return spec.hourly_price, spec.vcpu, spec.ram_gb

    def _aws_vm(self, instance_type) -> Tuple[Decimal, int, int]:
        spec = self.settings.aws_vm_pricing.get(OutSystemsAwsInstanceType(instance_type))
        if spec is None:
            return (DEFAULT_AWS_HOURLY,) + DEFAULT_AWS_SPECS
        return spec.hourly_price, spec.vcpu, spec.ram_gb

    def get_azure_monthly_vm_cost(self, instance_type: OutSystemsAzureInstanceType, servers: int) -> Decimal:
        hourly, _, _ = self._azure_vm(instance_type)
        return hourly * self.settings.hours_per_month * servers

    def get_aws_monthly_vm_cost(self, instance_type: OutSystemsAwsInstanceType, servers: int) -> Decimal:
        hourly, _, _ = self._aws_vm(instance_type)
        return hourly * self.settings.hours_per_month * servers

    def recommend_azure_instance(self, cores: int, ram_gb: int) -> OutSystemsAzureInstanceType:
        if ram_gb <= 8 and cores <= 4:
            return OutSystemsAzureInstanceType.F4S_V2
        if ram_gb <= 16 and cores <= 4:
            return OutSystemsAzureInstanceType.D4S_V3
        if ram_gb <= 32 and cores <= 8:
            return OutSystemsAzureInstanceType.D8S_V3
        return OutSystemsAzureInstanceType.D16S_V3

    def recommend_aws_instance(self, cores: int, ram_gb: int) -> OutSystemsAwsInstanceType:
        if ram_gb <= 8 and cores <= 2:
            return OutSystemsAwsInstanceType.M5_LARGE
        if ram_gb <= 16 and cores <= 4:
            return OutSystemsAwsInstanceType.M5_XLARGE
        return OutSystemsAwsInstanceType.M5_2XLARGE

    def _vm_costs(self, config: OutSystemsDeploymentConfig) -> dict:
        provider = OutSystemsCloudProvider(config.cloud_provider)
        if not config.is_self_managed or provider == OutSystemsCloudProvider.ON_PREMISES:
            return {}

        servers = config.total_environments * config.front_end_servers_per_environment
        if provider == OutSystemsCloudProvider.AZURE:
            instance = OutSystemsAzureInstanceType(config.azure_instance_type)
            hourly, vcpu, ram = self._azure_vm(instance)
        else:
            instance = OutSystemsAwsInstanceType(config.aws_instance_type)
            hourly, vcpu, ram = self._aws_vm(instance)

        return {
            "total_vm_count": servers,
            "monthly_vm_cost": hourly * self.settings.hours_per_month * servers,
            "vm_details": f"{servers}× {provider.value} {instance.value} ({vcpu} vCPU, {ram} GB)",
        }

    # Feature rules

    def is_feature_available(self, feature: OutSystemsFeature, deployment_type) -> bool:
        if OutSystemsDeploymentType(deployment_type) == OutSystemsDeploymentType.SELF_MANAGED:
            return not self.settings.is_cloud_only_feature(feature)
        return not self.settings.is_self_managed_only_feature(feature)

    def get_validation_warnings(self, config: OutSystemsDeploymentConfig) -> List[str]:
        if config.is_odc:
            warnings = [odc_unavailable_warning(name) for name in config.requested_o11_add_ons()]
            if config.deployment_type == OutSystemsDeploymentType.SELF_MANAGED:
                warnings.append(ODC_CLOUD_HOSTED_WARNING)
            return warnings

        warnings = []
        for feature in config.requested_features():
            if self.is_feature_available(feature, config.deployment_type):
                continue
            if config.is_self_managed:
                warnings.append(cloud_only_warning(feature))
            else:
                warnings.append(self_managed_only_warning(feature))

        if config.include_sentry and config.include_ha:
            warnings.append(SENTRY_INCLUDES_HA_WARNING)
        return warnings

    # Quote

    def _odc_user_costs(self, config, ao_packs: int) -> Tuple[Decimal, str, list]:
        settings = self.settings

        if config.uses_unlimited_users:
            rate = settings.odc_unlimited_users_per_ao_pack
            cost = rate * ao_packs
            name = f"Unlimited Users ({ao_packs}×{_money(rate)})"
            return cost, f"Unlimited users across {ao_packs} AO pack(s)", [(name, cost)]

        included = settings.odc_internal_users_included
        lines = []

        internal_cost = self.calculate_odc_internal_users_cost(config.internal_users)
        if internal_cost > 0:
            additional = config.internal_users - included
            packs = math.ceil(additional / settings.internal_user_pack_size)
            lines.append((f"Internal Users (+{additional} users, {packs} pack(s))", internal_cost))

        external_cost = self.calculate_odc_external_users_cost(config.external_users)
        if external_cost > 0:
            packs = math.ceil(config.external_users / settings.external_user_pack_size)
            lines.append((
                f"External Users ({config.external_users} users, {packs} pack(s))",
                external_cost,
            ))

        details = (
            f"{config.internal_users} internal ({included} included), "
            f"{config.external_users} external"
        )
        return internal_cost + external_cost, details, lines

    def _user_costs(self, config, edition_pricing, ao_packs: int) -> Tuple[Decimal, str, list]:
        settings = self.settings

        if config.is_odc:
            return self._odc_user_costs(config, ao_packs)

        if config.uses_unlimited_users:
            cost = settings.unlimited_users_per_ao_pack * ao_packs
            name = f"Unlimited Users ({ao_packs}×{_money(settings.unlimited_users_per_ao_pack)})"
            return cost, f"Unlimited users across {ao_packs} AO pack(s)", [(name, cost)]

        included = edition_pricing.internal_users_included
        lines = []

        internal_cost = self.calculate_internal_users_cost(config.internal_users, included)
        additional_internal = max(0, config.internal_users - included)
        if internal_cost > 0:
            lines.append((f"Internal Users (+{additional_internal} tiered)", internal_cost))

        external_cost = self.calculate_external_users_cost(config.external_users)
        if external_cost > 0:
            lines.append((f"External Users ({config.external_users} tiered)", external_cost))

        details = (
            f"{config.internal_users} internal ({included} included), "
            f"{config.external_users} external"
        )
        return internal_cost + external_cost, details, lines

    def _add_on_costs(self, config: OutSystemsDeploymentConfig, ao_packs: int) -> dict:
        settings = self.settings

        def allowed(feature):
            return self.is_feature_available(feature, config.deployment_type)

        def per_pack(rate):
            return self.calculate_ao_pack_scaled_cost(rate, ao_packs)

        costs = {}
        if config.app_shield_users > 0:
            costs["app_shield_cost"] = config.app_shield_users * settings.app_shield_per_user
        if config.is_odc:
            return costs

        if config.include_24x7_premium_support:
            costs["support_24x7_premium_cost"] = per_pack(settings.support_24x7_premium_per_ao_pack)
        if config.include_non_production_env:
            costs["non_production_env_cost"] = per_pack(settings.non_production_env_per_ao_pack)
        if config.include_load_test_env and allowed(OutSystemsFeature.LOAD_TEST_ENV):
            costs["load_test_env_cost"] = per_pack(settings.load_test_env_per_ao_pack)
        if config.include_environment_pack:
            costs["environment_pack_cost"] = per_pack(settings.environment_pack_per_ao_pack)

        # Sentry bundles high availability
        sentry = config.include_sentry and allowed(OutSystemsFeature.SENTRY)
        if sentry:
            costs["sentry_cost"] = per_pack(settings.sentry_per_ao_pack)
        elif config.include_ha and allowed(OutSystemsFeature.HIGH_AVAILABILITY):
            costs["ha_cost"] = per_pack(settings.high_availability_per_ao_pack)

        if config.include_dr and allowed(OutSystemsFeature.DISASTER_RECOVERY):
            costs["dr_cost"] = per_pack(settings.disaster_recovery_per_ao_pack)
        if config.include_log_streaming and allowed(OutSystemsFeature.LOG_STREAMING):
            costs["log_streaming_cost"] = settings.log_streaming_price
        if config.include_database_replica and allowed(OutSystemsFeature.DATABASE_REPLICA):
            costs["database_replica_cost"] = settings.database_replica_price
        return costs

    def _service_costs(self, config: OutSystemsDeploymentConfig) -> dict:
        settings = self.settings
        return {
            "success_plan_cost": self.calculate_success_plan_cost(config.success_plan),
            "training_cost": (
                config.dedicated_group_sessions * settings.dedicated_group_session_price
                + config.public_sessions * settings.public_session_price
            ),
            "expert_days_cost": config.expert_days * settings.expert_day_price,
        }

    def _deployment_type_name(self, config: OutSystemsDeploymentConfig) -> str:
        if config.is_odc:
            return "OutSystems Developer Cloud"
        if not config.is_self_managed:
            return "OutSystems Cloud"
        provider = OutSystemsCloudProvider(config.cloud_provider)
        if provider == OutSystemsCloudProvider.ON_PREMISES:
            return "OutSystems Self-Managed (On-Premises)"
        return f"OutSystems Self-Managed ({provider.value})"

    def calculate_cost(self, config: OutSystemsDeploymentConfig) -> OutSystemsPricingResult:
        settings = self.settings
        edition = OutSystemsEdition(config.edition)
        edition_pricing = settings.get_edition(edition)

        platform = OutSystemsPlatform(config.platform)

        if config.is_odc:
            base_price = settings.odc_platform_base_price
            ao_pack_price = settings.odc_ao_pack_price
            base_name = "Platform Base (ODC)"
        else:
            base_price = edition_pricing.base_price
            ao_pack_price = settings.additional_ao_pack_price
            base_name = f"{edition.value} Edition"

        ao_packs = self.calculate_ao_pack_count(config.total_application_objects)
        additional_packs = max(0, ao_packs - 1)
        additional_aos_cost = additional_packs * ao_pack_price

        user_cost, user_details, user_lines = self._user_costs(config, edition_pricing, ao_packs)
        add_ons = self._add_on_costs(config, ao_packs)
        services = self._service_costs(config)
        vms = self._vm_costs(config)

        license_lines = [(base_name, base_price)]
        if additional_packs:
            license_lines.append((
                f"Additional AO Packs ({additional_packs}×{_money(ao_pack_price)})",
                additional_aos_cost,
            ))
        license_lines.extend(user_lines)

        discount_amount = ZERO
        discount_description = None
        discount = config.discount
        if discount is not None and discount.value > 0:
            discount_amount = discount.calculate_discount(
                base_price + additional_aos_cost + user_cost,
                sum(add_ons.values(), ZERO),
                sum(services.values(), ZERO),
            )
            discount_description = discount.describe()

        result = OutSystemsPricingResult(
            platform=platform,
            edition=edition,
            deployment_type=(
                OutSystemsDeploymentType.CLOUD if config.is_odc else config.deployment_type
            ),
            deployment_type_name=self._deployment_type_name(config),
            cloud_provider=config.cloud_provider,
            total_aos=config.total_application_objects,
            ao_pack_count=ao_packs,
            included_aos=edition_pricing.aos_included,
            additional_ao_packs=additional_packs,
            edition_base_cost=base_price,
            additional_aos_cost=additional_aos_cost,
            user_license_cost=user_cost,
            user_license_details=user_details,
            discount_amount=discount_amount,
            discount_description=discount_description,
            environment_details=(
                f"{config.production_environments} production + "
                f"{config.non_production_environments} non-production"
            ),
            warnings=self.get_validation_warnings(config),
            line_items=self._line_items(
                license_lines, add_ons, services, vms, discount_amount, discount_description
            ),
            **add_ons,
            **services,
            **vms,
        )

        logger.debug(
            "Calculated OutSystems cost",
            platform=platform.value,
            edition=edition.value,
            deployment=result.deployment_type_name,
            ao_packs=ao_packs,
            total_per_year=str(result.total_per_year),
        )
        return result

    def _line_items(
        self, license_lines, add_ons: dict, services: dict, vms: dict,
        discount_amount: Decimal = ZERO, discount_description: Optional[str] = None,
    ):
        items = [
            OutSystemsCostLineItem(category="License", name=name, amount=amount)
            for name, amount in license_lines
        ]

        add_on_names = {
            "support_24x7_premium_cost": "Support 24x7 Premium",
            "non_production_env_cost": "Non-Production Environment",
            "load_test_env_cost": "Load Test Environment",
            "environment_pack_cost": "Environment Pack",
            "sentry_cost": "Sentry (incl. HA)",
            "ha_cost": "High Availability",
            "dr_cost": "Disaster Recovery",
            "log_streaming_cost": "Log Streaming",
            "database_replica_cost": "Database Replica",
            "app_shield_cost": "AppShield",
        }
        cloud_only = {
            "load_test_env_cost", "sentry_cost", "ha_cost",
            "log_streaming_cost", "database_replica_cost",
        }
        for key, amount in add_ons.items():
            items.append(OutSystemsCostLineItem(
                category="Add-On",
                name=add_on_names[key],
                amount=amount,
                is_cloud_only=key in cloud_only,
            ))

        service_names = {
            "success_plan_cost": "Success Plan",
            "training_cost": "Training",
            "expert_days_cost": "Expert Days",
        }
        for key, amount in services.items():
            if amount > 0:
                items.append(OutSystemsCostLineItem(
                    category="Service", name=service_names[key], amount=amount
                ))

        if vms and vms["monthly_vm_cost"] > 0:
            monthly = vms["monthly_vm_cost"]
            items.append(OutSystemsCostLineItem(
                category="Infrastructure",
                name=vms["vm_details"],
                description=f"{_money(monthly)}/month",
                amount=monthly * 12,
                quantity=vms["total_vm_count"],
            ))

        if discount_amount > 0:
            items.append(OutSystemsCostLineItem(
                category="Discount",
                name=discount_description or "Discount",
                amount=-discount_amount,
            ))
        return items
