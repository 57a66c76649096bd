"""
Static region catalogs per cloud provider.
"""

from typing import Dict, List, Tuple

from ..models.pricing import RegionInfo
from ..models.types import CloudProvider

# (code, display name, location, preferred)
_RegionRow = Tuple[str, str, str, bool]

_CATALOG: Dict[CloudProvider, List[_RegionRow]] = {
    CloudProvider.AWS: [
        ("us-east-1", "US East (N. Virginia)", "Virginia, USA", True),
        ("us-east-2", "US East (Ohio)", "Ohio, USA", False),
        ("us-west-1", "US West (N. California)", "California, USA", False),
        ("us-west-2", "US West (Oregon)", "Oregon, USA", True),
        ("eu-west-1", "Europe (Ireland)", "Ireland", True),
        ("eu-west-2", "Europe (London)", "UK", False),
        ("eu-west-3", "Europe (Paris)", "France", False),
        ("eu-central-1", "Europe (Frankfurt)", "Germany", True),
        ("ap-southeast-1", "Asia Pacific (Singapore)", "Singapore", False),
        ("ap-southeast-2", "Asia Pacific (Sydney)", "Australia", False),
        ("ap-northeast-1", "Asia Pacific (Tokyo)", "Japan", False),
        ("ap-south-1", "Asia Pacific (Mumbai)", "India", False),
        ("me-south-1", "Middle East (Bahrain)", "Bahrain", False),
        ("me-central-1", "Middle East (UAE)", "UAE", False),
    ],
    CloudProvider.AZURE: [
        ("eastus", "East US", "Virginia, USA", True),
        ("eastus2", "East US 2", "Virginia, USA", False),
        ("westus", "West US", "California, USA", False),
        ("westus2", "West US 2", "Washington, USA", True),
        ("westeurope", "West Europe", "Netherlands", True),
        ("northeurope", "North Europe", "Ireland", False),
        ("uksouth", "UK South", "UK", False),
        ("germanywestcentral", "Germany West Central", "Germany", False),
        ("southeastasia", "Southeast Asia", "Singapore", False),
        ("australiaeast", "Australia East", "Australia", False),
        ("japaneast", "Japan East", "Japan", False),
        ("centralindia", "Central India", "India", False),
        ("uaenorth", "UAE North", "UAE", False),
    ],
    CloudProvider.GCP: [
        ("us-central1", "Iowa", "Iowa, USA", True),
        ("us-east1", "South Carolina", "South Carolina, USA", False),
        ("us-east4", "Northern Virginia", "Virginia, USA", False),
        ("us-west1", "Oregon", "Oregon, USA", True),
        ("europe-west1", "Belgium", "Belgium", True),
        ("europe-west2", "London", "UK", False),
        ("europe-west3", "Frankfurt", "Germany", False),
        ("asia-southeast1", "Singapore", "Singapore", False),
        ("australia-southeast1", "Sydney", "Australia", False),
        ("asia-northeast1", "Tokyo", "Japan", False),
        ("asia-south1", "Mumbai", "India", False),
        ("me-west1", "Tel Aviv", "Israel", False),
    ],
    CloudProvider.OCI: [
        ("us-ashburn-1", "US East (Ashburn)", "Virginia, USA", True),
        ("us-phoenix-1", "US West (Phoenix)", "Arizona, USA", False),
        ("uk-london-1", "UK South (London)", "UK", True),
        ("eu-frankfurt-1", "Germany Central (Frankfurt)", "Germany", False),
        ("eu-amsterdam-1", "Netherlands Northwest (Amsterdam)", "Netherlands", False),
        ("ap-sydney-1", "Australia East (Sydney)", "Australia", False),
        ("ap-tokyo-1", "Japan East (Tokyo)", "Japan", False),
        ("ap-mumbai-1", "India West (Mumbai)", "India", False),
        ("me-dubai-1", "UAE East (Dubai)", "UAE", False),
        ("me-jeddah-1", "Saudi Arabia West (Jeddah)", "Saudi Arabia", False),
    ],
    CloudProvider.IBM: [
        ("us-south", "Dallas", "Texas, USA", True),
        ("us-east", "Washington DC", "Virginia, USA", False),
        ("eu-de", "Frankfurt", "Germany", True),
        ("eu-gb", "London", "UK", False),
        ("jp-tok", "Tokyo", "Japan", False),
        ("au-syd", "Sydney", "Australia", False),
    ],
    CloudProvider.ALIBABA: [
        ("cn-hangzhou", "China (Hangzhou)", "China", True),
        ("cn-shanghai", "China (Shanghai)", "China", False),
        ("ap-southeast-1", "Singapore", "Singapore", True),
        ("us-west-1", "US (Silicon Valley)", "California, USA", False),
        ("eu-central-1", "Germany (Frankfurt)", "Germany", False),
        ("me-east-1", "UAE (Dubai)", "UAE", False),
    ],
    CloudProvider.DIGITALOCEAN: [
        ("nyc1", "New York 1", "New York, USA", True),
        ("nyc3", "New York 3", "New York, USA", False),
        ("sfo3", "San Francisco 3", "California, USA", True),
        ("ams3", "Amsterdam 3", "Netherlands", False),
        ("lon1", "London 1", "UK", True),
        ("fra1", "Frankfurt 1", "Germany", False),
        ("sgp1", "Singapore 1", "Singapore", False),
        ("blr1", "Bangalore 1", "India", False),
        ("syd1", "Sydney 1", "Australia", False),
    ],
    CloudProvider.LINODE: [
        ("us-east", "Newark, NJ", "New Jersey, USA", True),
        ("us-central", "Dallas, TX", "Texas, USA", False),
        ("us-west", "Fremont, CA", "California, USA", True),
        ("eu-west", "London, UK", "UK", True),
        ("eu-central", "Frankfurt, DE", "Germany", False),
        ("ap-south", "Singapore", "Singapore", False),
        ("ap-northeast", "Tokyo, JP", "Japan", False),
        ("ap-southeast", "Sydney, AU", "Australia", False),
    ],
    CloudProvider.VULTR: [
        ("ewr", "New Jersey", "New Jersey, USA", True),
        ("dfw", "Dallas", "Texas, USA", False),
        ("lax", "Los Angeles", "California, USA", True),
        ("lhr", "London", "UK", True),
        ("fra", "Frankfurt", "Germany", False),
        ("ams", "Amsterdam", "Netherlands", False),
        ("sgp", "Singapore", "Singapore", False),
        ("nrt", "Tokyo", "Japan", False),
        ("syd", "Sydney", "Australia", False),
    ],
    CloudProvider.HETZNER: [
        ("fsn1", "Falkenstein", "Germany", True),
        ("nbg1", "Nuremberg", "Germany", False),
        ("hel1", "Helsinki", "Finland", True),
        ("ash", "Ashburn", "Virginia, USA", False),
    ],
    CloudProvider.CIVO: [
        ("lon1", "London", "UK", True),
        ("nyc1", "New York", "New York, USA", True),
        ("fra1", "Frankfurt", "Germany", False),
        ("phx1", "Phoenix", "Arizona, USA", False),
    ],
    CloudProvider.EXOSCALE: [
        ("ch-gva-2", "Geneva", "Switzerland", True),
        ("ch-dk-2", "Zurich", "Switzerland", False),
        ("de-fra-1", "Frankfurt", "Germany", True),
        ("de-muc-1", "Munich", "Germany", False),
        ("at-vie-1", "Vienna", "Austria", False),
        ("bg-sof-1", "Sofia", "Bulgaria", False),
    ],
    CloudProvider.ON_PREM: [
        ("On-Premises", "On-Premises Data Center", "", True),
    ],
}

# Region catalogs borrowed by managed OpenShift aliases
_ALIASES = {
    CloudProvider.ROSA: CloudProvider.AWS,
    CloudProvider.ARO: CloudProvider.AZURE,
    CloudProvider.OSD: CloudProvider.GCP,
    CloudProvider.ROKS: CloudProvider.IBM,
}

GENERIC_REGION_CODE = "default"


def _build(provider: CloudProvider, rows: List[_RegionRow]) -> List[RegionInfo]:
    return [
        RegionInfo(
            code=code,
            display_name=name,
            provider=provider,
            location=location,
            is_preferred=preferred,
        )
        for code, name, location, preferred in rows
    ]


_REGIONS: Dict[CloudProvider, List[RegionInfo]] = {
    provider: _build(provider, rows) for provider, rows in _CATALOG.items()
}


def generic_regions(provider: CloudProvider) -> List[RegionInfo]:
    """Placeholder catalog for providers without a curated region list"""
    return _build(
        provider, [(GENERIC_REGION_CODE, "Default Region", "Default", True)]
    )


def provider_regions(provider: CloudProvider) -> List[RegionInfo]:
    """Catalog a provider strategy exposes through ``get_available_regions``"""
    provider = CloudProvider(provider)
    if provider in _REGIONS:
        return list(_REGIONS[provider])
    return generic_regions(provider)


def get_regions(provider: CloudProvider) -> List[RegionInfo]:
    """Regions offered for a provider as seen by a sizing wizard.

    Managed OpenShift aliases borrow their host cloud's catalog and
    on-premises has no selectable region.
    """
    provider = CloudProvider(provider)
    provider = _ALIASES.get(provider, provider)
    if provider == CloudProvider.ON_PREM:
        return []
    if provider in _REGIONS:
        return list(_REGIONS[provider])
    return generic_regions(provider)


def get_preferred_regions(provider: CloudProvider) -> List[RegionInfo]:
    return [region for region in get_regions(provider) if region.is_preferred]
