"""
Core types and enums for the infrastructure pricing engine.
"""

from enum import Enum


class CloudProvider(str, Enum):
    """Supported cloud providers and managed OpenShift aliases"""
    AWS = "AWS"
    AZURE = "Azure"
    GCP = "GCP"
    OCI = "OCI"
    IBM = "IBM"
    ALIBABA = "Alibaba"
    TENCENT = "Tencent"
    HUAWEI = "Huawei"

    # Managed OpenShift variants
    ROSA = "ROSA"  # AWS
    ARO = "ARO"  # Azure
    OSD = "OSD"  # GCP
    ROKS = "ROKS"  # IBM

    DIGITALOCEAN = "DigitalOcean"
    LINODE = "Linode"
    VULTR = "Vultr"
    HETZNER = "Hetzner"
    OVH = "OVH"
    SCALEWAY = "Scaleway"
    CIVO = "Civo"
    EXOSCALE = "Exoscale"

    ON_PREM = "OnPrem"
    MANUAL = "Manual"

    @classmethod
    def managed_openshift_variants(cls):
        """Aliases that price as OpenShift on top of another provider"""
        return [cls.ROSA, cls.ARO, cls.OSD, cls.ROKS]

    @property
    def is_managed_openshift(self) -> bool:
        return self in CloudProvider.managed_openshift_variants()


class PricingType(str, Enum):
    """Pricing purchase options"""
    ON_DEMAND = "OnDemand"
    RESERVED_1_YEAR = "Reserved1Year"
    RESERVED_3_YEAR = "Reserved3Year"
    SPOT = "Spot"


class Currency(str, Enum):
    """Supported currencies"""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    AUD = "AUD"
    CAD = "CAD"
    JPY = "JPY"


class CostCategory(str, Enum):
    """Cost breakdown categories"""
    COMPUTE = "Compute"
    STORAGE = "Storage"
    NETWORK = "Network"
    LICENSE = "License"
    SUPPORT = "Support"
    DATA_CENTER = "DataCenter"
    LABOR = "Labor"


class SupportLevel(str, Enum):
    """Cloud provider support plans"""
    NONE = "None"
    BASIC = "Basic"
    DEVELOPER = "Developer"
    BUSINESS = "Business"
    ENTERPRISE = "Enterprise"


class SupportTier(str, Enum):
    """Vendor support tiers for Kubernetes distributions"""
    COMMUNITY = "Community"
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"
    ENTERPRISE = "Enterprise"


class LicensingModel(str, Enum):
    """How a distribution bills its license"""
    OPEN_SOURCE = "OpenSource"
    PER_NODE = "PerNode"
    PER_CORE = "PerCore"
    PER_SOCKET = "PerSocket"
    PER_WORKER_NODE = "PerWorkerNode"
    FLAT_RATE = "FlatRate"
    USAGE_BASED = "UsageBased"


class TanzuEdition(str, Enum):
    STANDARD = "Standard"
    ADVANCED = "Advanced"
    ENTERPRISE = "Enterprise"


class RancherEdition(str, Enum):
    COMMUNITY = "Community"
    PRIME = "Prime"
    GOVERNMENT = "Government"


class Rke2Edition(str, Enum):
    COMMUNITY = "Community"
    PRIME = "Prime"
    GOVERNMENT = "Government"


class CharmedEdition(str, Enum):
    FREE = "Free"
    PRO = "Pro"
    PRO_SUPPORT = "ProSupport"


class Distribution(str, Enum):
    """Kubernetes distributions, grouped by where they run"""

    # On-premises
    OPENSHIFT = "OpenShift"
    KUBERNETES = "Kubernetes"
    RANCHER = "Rancher"
    RKE2 = "RKE2"
    K3S = "K3s"
    MICROK8S = "MicroK8s"
    CHARMED = "Charmed"
    TANZU = "Tanzu"

    # OpenShift cloud variants
    OPENSHIFT_ROSA = "OpenShiftROSA"
    OPENSHIFT_ARO = "OpenShiftARO"
    OPENSHIFT_DEDICATED = "OpenShiftDedicated"
    OPENSHIFT_IBM = "OpenShiftIBM"

    # Rancher / SUSE cloud variants
    RANCHER_HOSTED = "RancherHosted"
    RANCHER_EKS = "RancherEKS"
    RANCHER_AKS = "RancherAKS"
    RANCHER_GKE = "RancherGKE"

    # Tanzu cloud variants
    TANZU_CLOUD = "TanzuCloud"
    TANZU_AWS = "TanzuAWS"
    TANZU_AZURE = "TanzuAzure"
    TANZU_GCP = "TanzuGCP"

    # Canonical cloud variants
    CHARMED_AWS = "CharmedAWS"
    CHARMED_AZURE = "CharmedAzure"
    CHARMED_GCP = "CharmedGCP"
    MICROK8S_AWS = "MicroK8sAWS"
    MICROK8S_AZURE = "MicroK8sAzure"
    MICROK8S_GCP = "MicroK8sGCP"

    # K3s / RKE2 cloud variants
    K3S_AWS = "K3sAWS"
    K3S_AZURE = "K3sAzure"
    K3S_GCP = "K3sGCP"
    RKE2_AWS = "RKE2AWS"
    RKE2_AZURE = "RKE2Azure"
    RKE2_GCP = "RKE2GCP"

    # Managed Kubernetes services
    EKS = "EKS"
    AKS = "AKS"
    GKE = "GKE"
    OKE = "OKE"
    IKS = "IKS"
    ACK = "ACK"
    TKE = "TKE"
    CCE = "CCE"
    DOKS = "DOKS"
    LKE = "LKE"
    VKE = "VKE"
    HETZNER_K8S = "HetznerK8s"
    OVH_KUBERNETES = "OVHKubernetes"
    SCALEWAY_KAPSULE = "ScalewayKapsule"
