"""
OutSystems low-code platform pricing models.

Price tables, including the banded user tiers, are loaded from
``infra_pricing/data/outsystems_pricing.yaml``.
"""

from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

ZERO = Decimal("0")


class OutSystemsPlatform(str, Enum):
    """OutSystems 11 or OutSystems Developer Cloud"""
    O11 = "O11"
    ODC = "ODC"


class OutSystemsEdition(str, Enum):
    STANDARD = "Standard"
    ENTERPRISE = "Enterprise"


class OutSystemsDeploymentType(str, Enum):
    CLOUD = "Cloud"
    SELF_MANAGED = "SelfManaged"


class OutSystemsCloudProvider(str, Enum):
    """Where a self-managed installation runs"""
    ON_PREMISES = "OnPremises"
    AZURE = "Azure"
    AWS = "AWS"


class OutSystemsAzureInstanceType(str, Enum):
    F4S_V2 = "F4s_v2"
    D4S_V3 = "D4s_v3"
    D8S_V3 = "D8s_v3"
    D16S_V3 = "D16s_v3"


class OutSystemsAwsInstanceType(str, Enum):
    M5_LARGE = "M5Large"
    M5_XLARGE = "M5XLarge"
    M5_2XLARGE = "M52XLarge"


class OutSystemsUserLicenseType(str, Enum):
    NAMED = "Named"
    CONCURRENT = "Concurrent"
    EXTERNAL = "External"
    UNLIMITED = "Unlimited"


class OutSystemsSuccessPlan(str, Enum):
    NONE = "None"
    ESSENTIAL = "Essential"
    PREMIER = "Premier"


class OutSystemsFeature(str, Enum):
    """Add-ons restricted to one deployment type"""
    HIGH_AVAILABILITY = "HighAvailability"
    SENTRY = "Sentry"
    LOAD_TEST_ENV = "LoadTestEnv"
    LOG_STREAMING = "LogStreaming"
    DATABASE_REPLICA = "DatabaseReplica"
    DISASTER_RECOVERY = "DisasterRecovery"


class OutSystemsDiscountType(str, Enum):
    PERCENTAGE = "Percentage"
    FIXED_AMOUNT = "FixedAmount"


class OutSystemsDiscountScope(str, Enum):
    TOTAL = "Total"
    LICENSE_ONLY = "LicenseOnly"
    ADD_ONS_ONLY = "AddOnsOnly"
    SERVICES_ONLY = "ServicesOnly"


FEATURE_DISPLAY_NAMES = {
    OutSystemsFeature.HIGH_AVAILABILITY: "High Availability",
    OutSystemsFeature.SENTRY: "Sentry",
    OutSystemsFeature.LOAD_TEST_ENV: "Load Testing Environment",
    OutSystemsFeature.LOG_STREAMING: "Log Streaming",
    OutSystemsFeature.DATABASE_REPLICA: "Database Replica",
    OutSystemsFeature.DISASTER_RECOVERY: "Disaster Recovery",
}


class OutSystemsUserTier(BaseModel):
    """Price band for users numbered ``min_users`` to ``max_users``.

    ``max_users == -1`` marks the open-ended last band.
    """

    min_users: int = Field(..., ge=1)
    max_users: int
    price_per_pack: Decimal = Field(..., ge=0)
    pack_size: int = Field(..., ge=1)

    class Config:
        frozen = True

    @field_validator("max_users")
    @classmethod
    def max_not_below_min(cls, v, values):
        if v != -1 and "min_users" in values.data and v < values.data["min_users"]:
            raise ValueError("max_users must be -1 or >= min_users")
        return v

    @property
    def is_unbounded(self) -> bool:
        return self.max_users == -1


class OutSystemsEditionPricing(BaseModel):
    base_price: Decimal = Field(..., ge=0)
    aos_included: int = Field(..., ge=0)
    internal_users_included: int = Field(..., ge=0)

    class Config:
        frozen = True


class OutSystemsVmSpec(BaseModel):
    hourly_price: Decimal = Field(..., ge=0)
    vcpu: int
    ram_gb: int

    class Config:
        frozen = True


class OutSystemsPricingSettings(BaseModel):
    """Complete OutSystems price book"""

    editions: Dict[OutSystemsEdition, OutSystemsEditionPricing]

    ao_pack_size: int = Field(..., ge=1)
    additional_ao_pack_price: Decimal

    internal_user_pack_size: int = Field(..., ge=1)
    additional_internal_user_pack_price: Decimal
    external_user_pack_size: int = Field(..., ge=1)
    external_user_pack_per_year: Decimal
    internal_user_tiers: List[OutSystemsUserTier] = Field(default_factory=list)
    external_user_tiers: List[OutSystemsUserTier] = Field(default_factory=list)
    unlimited_users_per_ao_pack: Decimal

    # OutSystems Developer Cloud
    odc_platform_base_price: Decimal = Decimal("30250")
    odc_ao_pack_price: Decimal = Decimal("18150")
    odc_internal_users_included: int = Field(default=100, ge=0)
    odc_internal_user_pack_price: Decimal = Decimal("6050")
    odc_external_user_pack_price: Decimal = Decimal("6050")
    odc_unlimited_users_per_ao_pack: Decimal = Decimal("60500")

    # Add-ons scaled by AO pack count
    support_24x7_premium_per_ao_pack: Decimal
    non_production_env_per_ao_pack: Decimal
    load_test_env_per_ao_pack: Decimal
    environment_pack_per_ao_pack: Decimal
    high_availability_per_ao_pack: Decimal
    sentry_per_ao_pack: Decimal
    disaster_recovery_per_ao_pack: Decimal

    # Flat add-ons
    log_streaming_price: Decimal
    database_replica_price: Decimal
    app_shield_per_user: Decimal

    # Services
    essential_success_plan_price: Decimal
    premier_success_plan_price: Decimal
    dedicated_group_session_price: Decimal
    public_session_price: Decimal
    expert_day_price: Decimal

    # Self-managed infrastructure
    azure_vm_pricing: Dict[OutSystemsAzureInstanceType, OutSystemsVmSpec]
    aws_vm_pricing: Dict[OutSystemsAwsInstanceType, OutSystemsVmSpec]
    hours_per_month: int = 730

    cloud_only_features: List[OutSystemsFeature] = Field(default_factory=list)
    self_managed_only_features: List[OutSystemsFeature] = Field(default_factory=list)

    class Config:
        frozen = True

    def get_edition(self, edition: OutSystemsEdition) -> OutSystemsEditionPricing:
        edition = OutSystemsEdition(edition)
        return self.editions.get(edition) or self.editions[OutSystemsEdition.STANDARD]

    def is_cloud_only_feature(self, feature: OutSystemsFeature) -> bool:
        return OutSystemsFeature(feature) in self.cloud_only_features

    def is_self_managed_only_feature(self, feature: OutSystemsFeature) -> bool:
        return OutSystemsFeature(feature) in self.self_managed_only_features


class OutSystemsDiscount(BaseModel):
    """Negotiated discount on part of an OutSystems quote"""

    type: OutSystemsDiscountType = OutSystemsDiscountType.PERCENTAGE
    scope: OutSystemsDiscountScope = OutSystemsDiscountScope.TOTAL
    value: Decimal = Field(default=ZERO, ge=0)
    notes: Optional[str] = None

    class Config:
        frozen = True

    def calculate_discount(
        self, license_subtotal: Decimal, add_ons_subtotal: Decimal, services_subtotal: Decimal
    ) -> Decimal:
        """Amount taken off the subtotals in scope, never more than their sum"""
        scope = OutSystemsDiscountScope(self.scope)
        if scope == OutSystemsDiscountScope.LICENSE_ONLY:
            base = license_subtotal
        elif scope == OutSystemsDiscountScope.ADD_ONS_ONLY:
            base = add_ons_subtotal
        elif scope == OutSystemsDiscountScope.SERVICES_ONLY:
            base = services_subtotal
        else:
            base = license_subtotal + add_ons_subtotal + services_subtotal

        if OutSystemsDiscountType(self.type) == OutSystemsDiscountType.PERCENTAGE:
            return base * min(self.value, Decimal("100")) / 100
        return min(self.value, base)

    def describe(self) -> str:
        scope = OutSystemsDiscountScope(self.scope).value
        if OutSystemsDiscountType(self.type) == OutSystemsDiscountType.PERCENTAGE:
            description = f"{self.value}% discount on {scope}"
        else:
            description = f"${self.value:,.0f} discount on {scope}"
        if self.notes:
            description += f" ({self.notes})"
        return description


class OutSystemsDeploymentConfig(BaseModel):
    """Deployment choices for an OutSystems quote"""

    platform: OutSystemsPlatform = OutSystemsPlatform.O11
    edition: OutSystemsEdition = OutSystemsEdition.STANDARD
    deployment_type: OutSystemsDeploymentType = OutSystemsDeploymentType.CLOUD

    total_application_objects: int = Field(default=150, ge=0)

    # Self-managed infrastructure
    cloud_provider: OutSystemsCloudProvider = OutSystemsCloudProvider.ON_PREMISES
    azure_instance_type: OutSystemsAzureInstanceType = OutSystemsAzureInstanceType.F4S_V2
    aws_instance_type: OutSystemsAwsInstanceType = OutSystemsAwsInstanceType.M5_XLARGE
    front_end_servers_per_environment: int = Field(default=2, ge=0)

    production_environments: int = Field(default=1, ge=0)
    non_production_environments: int = Field(default=3, ge=0)

    # Users
    user_license_type: OutSystemsUserLicenseType = OutSystemsUserLicenseType.NAMED
    internal_users: int = Field(default=100, ge=0)
    external_users: int = Field(default=0, ge=0)
    use_unlimited_users: bool = False

    # Add-ons
    include_24x7_premium_support: bool = False
    include_non_production_env: bool = False
    include_load_test_env: bool = False
    include_environment_pack: bool = False
    include_ha: bool = False
    include_sentry: bool = False
    include_dr: bool = False
    include_log_streaming: bool = False
    include_database_replica: bool = False
    app_shield_users: int = Field(default=0, ge=0)

    # Services
    success_plan: OutSystemsSuccessPlan = OutSystemsSuccessPlan.NONE
    dedicated_group_sessions: int = Field(default=0, ge=0)
    public_sessions: int = Field(default=0, ge=0)
    expert_days: int = Field(default=0, ge=0)

    discount: Optional[OutSystemsDiscount] = None

    @property
    def total_environments(self) -> int:
        return self.production_environments + self.non_production_environments

    @property
    def is_odc(self) -> bool:
        return self.platform == OutSystemsPlatform.ODC

    @property
    def is_self_managed(self) -> bool:
        """ODC is always cloud hosted"""
        return (
            not self.is_odc
            and self.deployment_type == OutSystemsDeploymentType.SELF_MANAGED
        )

    @property
    def uses_unlimited_users(self) -> bool:
        return (
            self.use_unlimited_users
            or self.user_license_type == OutSystemsUserLicenseType.UNLIMITED
        )

    def requested_features(self) -> List[OutSystemsFeature]:
        """Deployment-restricted add-ons switched on in this config"""
        flags = [
            (self.include_ha, OutSystemsFeature.HIGH_AVAILABILITY),
            (self.include_sentry, OutSystemsFeature.SENTRY),
            (self.include_load_test_env, OutSystemsFeature.LOAD_TEST_ENV),
            (self.include_log_streaming, OutSystemsFeature.LOG_STREAMING),
            (self.include_database_replica, OutSystemsFeature.DATABASE_REPLICA),
            (self.include_dr, OutSystemsFeature.DISASTER_RECOVERY),
        ]
        return [feature for enabled, feature in flags if enabled]

    def requested_o11_add_ons(self) -> List[str]:
        """O11 add-ons switched on in this config, by display name"""
        flags = [
            (self.include_24x7_premium_support, "Support 24x7 Premium"),
            (self.include_non_production_env, "Non-Production Environment"),
            (self.include_load_test_env, "Load Test Environment"),
            (self.include_environment_pack, "Environment Pack"),
            (self.include_ha, "High Availability"),
            (self.include_sentry, "Sentry"),
            (self.include_dr, "Disaster Recovery"),
            (self.include_log_streaming, "Log Streaming"),
            (self.include_database_replica, "Database Replica"),
        ]
        return [name for enabled, name in flags if enabled]


class OutSystemsCostLineItem(BaseModel):
    category: str
    name: str
    description: Optional[str] = None
    amount: Decimal = ZERO
    quantity: int = 1
    is_cloud_only: bool = False
    is_included: bool = False

    class Config:
        frozen = True


class OutSystemsPricingResult(BaseModel):
    """Annual OutSystems cost breakdown"""

    platform: OutSystemsPlatform = OutSystemsPlatform.O11
    edition: OutSystemsEdition
    deployment_type: OutSystemsDeploymentType
    deployment_type_name: str = ""
    cloud_provider: OutSystemsCloudProvider = OutSystemsCloudProvider.ON_PREMISES

    total_aos: int = 0
    ao_pack_count: int = 1
    included_aos: int = 0
    additional_ao_packs: int = 0

    edition_base_cost: Decimal = ZERO
    additional_aos_cost: Decimal = ZERO
    user_license_cost: Decimal = ZERO
    user_license_details: Optional[str] = None

    support_24x7_premium_cost: Decimal = ZERO
    non_production_env_cost: Decimal = ZERO
    load_test_env_cost: Decimal = ZERO
    environment_pack_cost: Decimal = ZERO
    ha_cost: Decimal = ZERO
    sentry_cost: Decimal = ZERO
    dr_cost: Decimal = ZERO
    log_streaming_cost: Decimal = ZERO
    database_replica_cost: Decimal = ZERO
    app_shield_cost: Decimal = ZERO

    monthly_vm_cost: Decimal = ZERO
    total_vm_count: int = 0
    vm_details: Optional[str] = None

    success_plan_cost: Decimal = ZERO
    training_cost: Decimal = ZERO
    expert_days_cost: Decimal = ZERO

    discount_amount: Decimal = ZERO
    discount_description: Optional[str] = None

    environment_details: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)
    line_items: List[OutSystemsCostLineItem] = Field(default_factory=list)

    class Config:
        frozen = True
        use_enum_values = True

    @property
    def license_subtotal(self) -> Decimal:
        return self.edition_base_cost + self.additional_aos_cost + self.user_license_cost

    @property
    def add_ons_subtotal(self) -> Decimal:
        return (
            self.support_24x7_premium_cost
            + self.non_production_env_cost
            + self.load_test_env_cost
            + self.environment_pack_cost
            + self.ha_cost
            + self.sentry_cost
            + self.dr_cost
            + self.log_streaming_cost
            + self.database_replica_cost
            + self.app_shield_cost
        )

    @property
    def annual_vm_cost(self) -> Decimal:
        return self.monthly_vm_cost * 12

    @property
    def infrastructure_subtotal(self) -> Decimal:
        return self.annual_vm_cost

    @property
    def services_subtotal(self) -> Decimal:
        return self.success_plan_cost + self.training_cost + self.expert_days_cost

    @property
    def total_per_year(self) -> Decimal:
        return (
            self.license_subtotal
            + self.add_ons_subtotal
            + self.infrastructure_subtotal
            + self.services_subtotal
            - self.discount_amount
        )

    @property
    def total_per_month(self) -> Decimal:
        return self.total_per_year / 12

    @property
    def total_three_year(self) -> Decimal:
        return self.total_per_year * 3

    @property
    def total_five_year(self) -> Decimal:
        return self.total_per_year * 5
