"""
Core data models for the infrastructure pricing engine.

This module provides a centralized import point for all model classes:

- types: Core enums and discriminators
- pricing: Cloud provider pricing records
- licensing: Kubernetes distribution licensing records
- mendix / outsystems: Low-code platform price books, configs and results
- api_models: HTTP request/response models
"""

# Core types and enums
from .types import (
    CloudProvider,
    PricingType,
    Currency,
    CostCategory,
    SupportLevel,
    SupportTier,
    LicensingModel,
    TanzuEdition,
    RancherEdition,
    Rke2Edition,
    CharmedEdition,
    Distribution,
)

# Cloud pricing
from .pricing import (
    HOURS_PER_MONTH,
    HOURS_PER_YEAR,
    ComputePricing,
    StoragePricing,
    NetworkPricing,
    LicensePricing,
    SupportPricing,
    RegionInfo,
    ProviderPricing,
)

# Licensing
from .licensing import LicensingInput, LicensingCost, SupportTierInfo

# Low-code platforms
from .mendix import (
    MendixDeploymentCategory,
    MendixCloudType,
    MendixPrivateCloudProvider,
    MendixOtherDeployment,
    MendixResourcePackTier,
    MendixResourcePackSize,
    MendixResourcePackSpec,
    MendixK8sEnvironmentTier,
    MendixGenAIModelPack,
    MendixPricingSettings,
    MendixDeploymentConfig,
    MendixPricingResult,
)
from .outsystems import (
    OutSystemsPlatform,
    OutSystemsEdition,
    OutSystemsDeploymentType,
    OutSystemsCloudProvider,
    OutSystemsAzureInstanceType,
    OutSystemsAwsInstanceType,
    OutSystemsUserLicenseType,
    OutSystemsSuccessPlan,
    OutSystemsFeature,
    OutSystemsDiscountType,
    OutSystemsDiscountScope,
    OutSystemsDiscount,
    OutSystemsUserTier,
    OutSystemsEditionPricing,
    OutSystemsVmSpec,
    OutSystemsPricingSettings,
    OutSystemsDeploymentConfig,
    OutSystemsCostLineItem,
    OutSystemsPricingResult,
)

__all__ = [
    # Types
    "CloudProvider",
    "PricingType",
    "Currency",
    "CostCategory",
    "SupportLevel",
    "SupportTier",
    "LicensingModel",
    "TanzuEdition",
    "RancherEdition",
    "Rke2Edition",
    "CharmedEdition",
    "Distribution",

    # Cloud pricing
    "HOURS_PER_MONTH",
    "HOURS_PER_YEAR",
    "ComputePricing",
    "StoragePricing",
    "NetworkPricing",
    "LicensePricing",
    "SupportPricing",
    "RegionInfo",
    "ProviderPricing",

    # Licensing
    "LicensingInput",
    "LicensingCost",
    "SupportTierInfo",

    # Mendix
    "MendixDeploymentCategory",
    "MendixCloudType",
    "MendixPrivateCloudProvider",
    "MendixOtherDeployment",
    "MendixResourcePackTier",
    "MendixResourcePackSize",
    "MendixResourcePackSpec",
    "MendixK8sEnvironmentTier",
    "MendixGenAIModelPack",
    "MendixPricingSettings",
    "MendixDeploymentConfig",
    "MendixPricingResult",

    # OutSystems
    "OutSystemsPlatform",
    "OutSystemsEdition",
    "OutSystemsDeploymentType",
    "OutSystemsCloudProvider",
    "OutSystemsAzureInstanceType",
    "OutSystemsAwsInstanceType",
    "OutSystemsUserLicenseType",
    "OutSystemsSuccessPlan",
    "OutSystemsFeature",
    "OutSystemsDiscountType",
    "OutSystemsDiscountScope",
    "OutSystemsDiscount",
    "OutSystemsUserTier",
    "OutSystemsEditionPricing",
    "OutSystemsVmSpec",
    "OutSystemsPricingSettings",
    "OutSystemsDeploymentConfig",
    "OutSystemsCostLineItem",
    "OutSystemsPricingResult",
]
