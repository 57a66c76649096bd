"""
Mendix low-code platform pricing models.

Price tables are loaded from ``infra_pricing/data/mendix_pricing.yaml``;
these models only describe their shape.
"""

from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

ZERO = Decimal("0")


class MendixDeploymentCategory(str, Enum):
    CLOUD = "Cloud"
    PRIVATE_CLOUD = "PrivateCloud"
    OTHER = "Other"


class MendixCloudType(str, Enum):
    SAAS = "SaaS"
    DEDICATED = "Dedicated"


class MendixPrivateCloudProvider(str, Enum):
    """Private cloud targets; only some are officially supported"""
    AZURE = "Azure"
    EKS = "EKS"
    AKS = "AKS"
    GKE = "GKE"
    OPENSHIFT = "OpenShift"
    GENERIC_K8S = "GenericK8s"
    RANCHER = "Rancher"
    K3S = "K3s"
    DOCKER = "Docker"


class MendixOtherDeployment(str, Enum):
    SERVER = "Server"
    STACKIT = "StackIT"
    SAP_BTP = "SapBtp"


class MendixResourcePackTier(str, Enum):
    STANDARD = "Standard"
    PREMIUM = "Premium"
    PREMIUM_PLUS = "PremiumPlus"


class MendixResourcePackSize(str, Enum):
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"  # Premium Plus only
    TWO_XL = "2XL"
    THREE_XL = "3XL"
    FOUR_XL = "4XL"
    FOUR_XL_5XLDB = "4XL-5XLDB"


class MendixResourcePackSpec(BaseModel):
    """One purchasable Mendix Cloud resource pack"""

    size: MendixResourcePackSize
    display_name: str
    mx_memory_gb: Decimal
    mx_vcpu: Decimal
    db_memory_gb: Decimal
    db_vcpu: Decimal
    db_storage_gb: Decimal
    file_storage_gb: Decimal
    price_per_year: Decimal = Field(..., ge=0)
    cloud_tokens: int = Field(..., ge=0)
    uptime_sla: Decimal
    has_fallback: bool = False
    has_multi_region_failover: bool = False

    class Config:
        frozen = True


class MendixK8sEnvironmentTier(BaseModel):
    """Per-environment price band for Mendix on Kubernetes.

    ``max_environments == -1`` marks the open-ended last band.
    """

    min_environments: int
    max_environments: int
    price_per_environment: Decimal = Field(..., ge=0)
    description: str = ""

    class Config:
        frozen = True


class MendixGenAIModelPack(BaseModel):
    size: str
    claude_tokens_in_per_month: int
    claude_tokens_out_per_month: int
    cohere_tokens_in_per_month: int
    price_per_year: Decimal = Field(..., ge=0)
    cloud_tokens: int = Field(..., ge=0)

    class Config:
        frozen = True


class MendixPricingSettings(BaseModel):
    """Complete Mendix price book"""

    resource_packs: Dict[MendixResourcePackTier, List[MendixResourcePackSpec]]

    cloud_token_price: Decimal
    additional_file_storage_per_100gb: Decimal
    additional_database_storage_per_100gb: Decimal

    cloud_dedicated_price_per_year: Decimal

    # Private cloud on Azure
    azure_base_price_per_year: Decimal
    azure_base_environments_included: int
    azure_additional_environment_price: Decimal
    azure_additional_environment_tokens: int

    # Private cloud on Kubernetes
    k8s_base_price_per_year: Decimal
    k8s_base_environments_included: int
    k8s_environment_tiers: List[MendixK8sEnvironmentTier]

    server_per_app_price_per_year: Decimal
    server_unlimited_apps_price_per_year: Decimal
    stackit_per_app_price_per_year: Decimal
    stackit_unlimited_apps_price_per_year: Decimal
    sap_btp_per_app_price_per_year: Decimal
    sap_btp_unlimited_apps_price_per_year: Decimal

    genai_model_packs: List[MendixGenAIModelPack]
    genai_knowledge_base_price_per_year: Decimal
    genai_knowledge_base_tokens: int
    genai_knowledge_base_disk_gb: Decimal

    platform_premium_unlimited_per_year: Decimal
    internal_users_per_100_per_year: Decimal
    external_users_per_250k_per_year: Decimal
    volume_discount_percent: Decimal = Field(..., ge=0, lt=100)
    customer_enablement_price: Decimal

    class Config:
        frozen = True


class MendixDeploymentConfig(BaseModel):
    """Deployment choices for a Mendix quote"""

    category: MendixDeploymentCategory = MendixDeploymentCategory.CLOUD

    # Cloud
    cloud_type: MendixCloudType = MendixCloudType.SAAS
    resource_pack_tier: Optional[MendixResourcePackTier] = None
    resource_pack_size: Optional[MendixResourcePackSize] = None
    resource_pack_quantity: int = Field(default=1, ge=1)

    # Private cloud
    private_cloud_provider: Optional[MendixPrivateCloudProvider] = None
    number_of_environments: int = Field(default=3, ge=0)

    # Other
    other_deployment: Optional[MendixOtherDeployment] = None
    is_unlimited_apps: bool = True
    number_of_apps: int = Field(default=1, ge=0)

    # Users
    internal_users: int = Field(default=100, ge=0)
    external_users: int = Field(default=0, ge=0)

    # Add-ons
    include_genai: bool = False
    genai_model_pack_size: Optional[str] = None
    include_genai_knowledge_base: bool = False
    include_customer_enablement: bool = False

    additional_file_storage_gb: int = Field(default=0, ge=0)
    additional_database_storage_gb: int = Field(default=0, ge=0)


class MendixPricingResult(BaseModel):
    """Annual Mendix cost breakdown"""

    category: MendixDeploymentCategory
    deployment_type_name: str = ""

    platform_license_cost: Decimal = ZERO
    user_license_cost: Decimal = ZERO
    deployment_fee_cost: Decimal = ZERO
    environment_cost: Decimal = ZERO
    storage_cost: Decimal = ZERO
    genai_cost: Decimal = ZERO
    services_cost: Decimal = ZERO

    discount_amount: Decimal = ZERO
    discount_percent: Decimal = ZERO

    total_cloud_tokens: int = 0
    resource_pack_details: Optional[str] = None
    environment_details: Optional[str] = None

    class Config:
        frozen = True
        use_enum_values = True

    @property
    def total_per_year(self) -> Decimal:
        return (
            self.platform_license_cost
            + self.user_license_cost
            + self.deployment_fee_cost
            + self.environment_cost
            + self.storage_cost
            + self.genai_cost
            + self.services_cost
            - self.discount_amount
        )

    @property
    def total_per_month(self) -> Decimal:
        return self.total_per_year / 12

    @property
    def total_three_year(self) -> Decimal:
        return self.total_per_year * 3
