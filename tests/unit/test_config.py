"""
Unit tests for engine configuration.
"""

from pathlib import Path

import pytest
import yaml

from infra_pricing.exceptions import ConfigurationError, DataError
from infra_pricing.services.config import ENGINE_CONFIG_FILE, ConfigManager, EngineConfig
from infra_pricing.services.data_loader import DATA_DIR, MENDIX_PRICING_FILE


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.default_currency == "USD"
        assert config.cache_enabled
        assert config.cache_ttl_seconds == 300
        assert config.log_level == "INFO"

    def test_log_settings_normalised(self):
        config = EngineConfig(log_level="debug", log_format="JSON")
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            EngineConfig(log_level="LOUD")

    def test_negative_ttl(self):
        with pytest.raises(ValueError):
            EngineConfig(cache_ttl_seconds=-5)


class TestConfigManager:
    """Test loading engine.yaml."""

    def test_creates_default_file(self, temp_dir):
        config_dir = temp_dir / "fresh"
        manager = ConfigManager(str(config_dir))

        assert (config_dir / ENGINE_CONFIG_FILE).exists()
        assert manager.engine_config.cache_ttl_seconds == 300

        with open(config_dir / ENGINE_CONFIG_FILE) as f:
            assert yaml.safe_load(f)["log_format"] == "auto"

    def test_loads_existing_file(self, sample_config_dir):
        config = ConfigManager(str(sample_config_dir)).engine_config

        assert config.cache_ttl_seconds == 60
        assert config.log_level == "WARNING"
        assert config.log_format == "json"

    def test_environment_overrides(self, sample_config_dir, monkeypatch):
        monkeypatch.setenv("PRICING_CACHE_TTL", "5")
        monkeypatch.setenv("PRICING_CACHE_ENABLED", "off")
        monkeypatch.setenv("PRICING_CACHE_MAX_ENTRIES", "64")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = ConfigManager(str(sample_config_dir)).engine_config

        assert config.cache_ttl_seconds == 5
        assert config.cache_max_entries == 64
        assert not config.cache_enabled
        assert config.log_level == "DEBUG"

    def test_empty_override_ignored(self, sample_config_dir, monkeypatch):
        monkeypatch.setenv("PRICING_CACHE_TTL", "")
        assert ConfigManager(str(sample_config_dir)).engine_config.cache_ttl_seconds == 60

    def test_malformed_yaml(self, sample_config_dir):
        (sample_config_dir / ENGINE_CONFIG_FILE).write_text("cache_ttl_seconds: [1,\n")
        with pytest.raises(ConfigurationError, match="Malformed"):
            ConfigManager(str(sample_config_dir))

    def test_non_mapping(self, sample_config_dir):
        (sample_config_dir / ENGINE_CONFIG_FILE).write_text("- one\n- two\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigManager(str(sample_config_dir))

    def test_invalid_value(self, sample_config_dir):
        (sample_config_dir / ENGINE_CONFIG_FILE).write_text("log_level: LOUD\n")
        with pytest.raises(ConfigurationError, match="Invalid engine configuration"):
            ConfigManager(str(sample_config_dir))


class TestServiceFactories:
    """Test services built from the configuration."""

    def test_pricing_service_uses_cache_settings(self, sample_config_dir):
        service = ConfigManager(str(sample_config_dir)).create_pricing_service()

        assert service.enabled
        assert service.cache.ttl_seconds == 60
        assert service.cache.max_entries == 1024

    def test_relative_pricing_file_resolves_against_config_dir(self, sample_config_dir):
        table = (DATA_DIR / MENDIX_PRICING_FILE).read_text()
        (sample_config_dir / "custom_mendix.yaml").write_text(
            table.replace("customer_enablement_price: 45000", "customer_enablement_price: 50000")
        )
        with open(sample_config_dir / ENGINE_CONFIG_FILE, "w") as f:
            yaml.dump({"mendix_pricing_file": "custom_mendix.yaml"}, f)

        calculator = ConfigManager(str(sample_config_dir)).create_mendix_calculator()
        assert calculator.settings.customer_enablement_price == 50000

    def test_missing_pricing_file(self, sample_config_dir, monkeypatch):
        monkeypatch.setenv("OUTSYSTEMS_PRICING_FILE", str(Path(sample_config_dir) / "nope.yaml"))

        manager = ConfigManager(str(sample_config_dir))
        with pytest.raises(DataError):
            manager.create_outsystems_calculator()

    def test_default_calculators(self, sample_config_dir):
        manager = ConfigManager(str(sample_config_dir))
        assert manager.create_outsystems_calculator().settings.ao_pack_size == 150
