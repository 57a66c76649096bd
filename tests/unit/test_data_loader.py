"""
Unit tests for pricing table loading.
"""

import json
from decimal import Decimal

import pytest
import yaml

from infra_pricing.exceptions import DataError
from infra_pricing.services.data_loader import (
    DATA_DIR,
    MENDIX_PRICING_FILE,
    OUTSYSTEMS_PRICING_FILE,
    load_mendix_pricing,
    load_outsystems_pricing,
    load_pricing_table,
    parse_mendix_pricing,
    parse_outsystems_pricing,
)


@pytest.fixture
def outsystems_table():
    with open(DATA_DIR / OUTSYSTEMS_PRICING_FILE) as f:
        return yaml.safe_load(f)


class TestLoadPricingTable:
    """Test raw table parsing."""

    def test_yaml_mapping(self):
        assert load_pricing_table("a: 1\nb: two\n") == {"a": 1, "b": "two"}

    def test_json_mapping(self):
        assert load_pricing_table('{"a": 1}', "JSON") == {"a": 1}

    def test_malformed_yaml(self):
        with pytest.raises(DataError) as exc_info:
            load_pricing_table("a: [1, 2", "yaml", "broken.yaml")
        assert exc_info.value.source == "broken.yaml"
        assert "Malformed YAML" in str(exc_info.value)

    def test_malformed_json(self):
        with pytest.raises(DataError, match="Malformed JSON"):
            load_pricing_table("{not json", "json")

    def test_top_level_must_be_mapping(self):
        with pytest.raises(DataError, match="mapping"):
            load_pricing_table("- 1\n- 2\n")

    def test_empty_document_rejected(self):
        with pytest.raises(DataError):
            load_pricing_table("")

    def test_unsupported_format(self):
        with pytest.raises(DataError, match="Unsupported pricing table format"):
            load_pricing_table("a = 1", "toml")


class TestBundledTables:
    """The shipped price books load and validate."""

    def test_mendix_table(self):
        settings = load_mendix_pricing()
        assert settings.platform_premium_unlimited_per_year == Decimal("65400")
        assert len(settings.k8s_environment_tiers) == 4
        assert settings.azure_additional_environment_price == Decimal("722.40")

    def test_outsystems_table(self):
        settings = load_outsystems_pricing()
        assert settings.ao_pack_size == 150
        assert settings.app_shield_per_user == Decimal("16.50")
        assert settings.internal_user_tiers[-1].is_unbounded
        assert len(settings.external_user_tiers) == 1
        assert settings.odc_ao_pack_price == Decimal("18150")

    def test_explicit_path(self):
        settings = load_mendix_pricing(DATA_DIR / MENDIX_PRICING_FILE)
        assert settings.volume_discount_percent == Decimal("10")


class TestLoadFailures:
    """Every load failure surfaces as DataError."""

    def test_missing_file(self, temp_dir):
        with pytest.raises(DataError, match="Cannot read pricing table"):
            load_outsystems_pricing(temp_dir / "missing.yaml")

    def test_invalid_table(self, temp_dir, outsystems_table):
        del outsystems_table["editions"]
        path = temp_dir / "outsystems.yaml"
        path.write_text(yaml.dump(outsystems_table))

        with pytest.raises(DataError, match="Invalid OutSystemsPricingSettings"):
            load_outsystems_pricing(path)

    def test_json_file_by_suffix(self, temp_dir, outsystems_table):
        path = temp_dir / "outsystems.json"
        path.write_text(json.dumps(outsystems_table))

        settings = load_outsystems_pricing(path)
        assert settings.sentry_per_ao_pack == Decimal("24200")


class TestSettingsStoreText:
    """Test parsing price books held as text."""

    def test_parse_outsystems_json(self, outsystems_table):
        outsystems_table["expert_day_price"] = 3000
        settings = parse_outsystems_pricing(json.dumps(outsystems_table))
        assert settings.expert_day_price == Decimal("3000")

    def test_parse_mendix_yaml(self):
        text = (DATA_DIR / MENDIX_PRICING_FILE).read_text()
        settings = parse_mendix_pricing(text, fmt="yaml")
        assert settings.customer_enablement_price == Decimal("45000")

    def test_parse_failure_source(self):
        with pytest.raises(DataError) as exc_info:
            parse_mendix_pricing('{"cloud_token_price": "51.60"}')
        assert exc_info.value.source == "settings"
