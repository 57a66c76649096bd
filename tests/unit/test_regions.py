"""
Unit tests for the region catalog.
"""

from infra_pricing.models import CloudProvider
from infra_pricing.services.regions import (
    GENERIC_REGION_CODE,
    get_preferred_regions,
    get_regions,
    provider_regions,
)


class TestRegionCatalog:
    """Test region lookups."""

    def test_aws_catalog(self):
        codes = [region.code for region in get_regions(CloudProvider.AWS)]
        assert "us-east-1" in codes
        assert all(region.provider == "AWS" for region in get_regions(CloudProvider.AWS))

    def test_managed_openshift_borrows_host_catalog(self):
        rosa = [region.code for region in get_regions(CloudProvider.ROSA)]
        aws = [region.code for region in get_regions(CloudProvider.AWS)]
        assert rosa == aws

        aro = [region.code for region in get_regions(CloudProvider.ARO)]
        assert aro == [region.code for region in get_regions(CloudProvider.AZURE)]

    def test_on_prem_has_no_selectable_region(self):
        assert get_regions(CloudProvider.ON_PREM) == []

    def test_on_prem_strategy_catalog(self):
        regions = provider_regions(CloudProvider.ON_PREM)
        assert [region.code for region in regions] == ["On-Premises"]

    def test_generic_catalog_for_uncurated_provider(self):
        regions = get_regions(CloudProvider.SCALEWAY)
        assert len(regions) == 1
        assert regions[0].code == GENERIC_REGION_CODE
        assert regions[0].is_preferred

    def test_preferred_regions_subset(self):
        preferred = get_preferred_regions(CloudProvider.AZURE)
        assert preferred
        assert all(region.is_preferred for region in preferred)
        assert len(preferred) <= len(get_regions(CloudProvider.AZURE))

    def test_catalog_copies_are_independent(self):
        regions = get_regions(CloudProvider.GCP)
        regions.clear()
        assert get_regions(CloudProvider.GCP)
