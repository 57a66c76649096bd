"""
Pytest configuration and shared fixtures for the Infrastructure Pricing Engine.
"""

import tempfile
from pathlib import Path

import pytest
import yaml

from infra_pricing.services.config import ENV_OVERRIDES
from infra_pricing.services.mendix import MendixPricingCalculator
from infra_pricing.services.outsystems import OutSystemsPricingCalculator
from infra_pricing.services.registry import PricingRegistry


def pytest_configure(config):
    for marker in ("functional", "integration", "cli", "api"):
        config.addinivalue_line("markers", marker)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep engine overrides from the developer's shell out of the tests."""
    for env_var in ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_dir(temp_dir):
    """Create a configuration directory with an engine.yaml."""
    config_dir = temp_dir / "config"
    config_dir.mkdir(parents=True, exist_ok=True)

    engine_config = {
        "default_currency": "USD",
        "cache_enabled": True,
        "cache_ttl_seconds": 60,
        "log_level": "WARNING",
        "log_format": "json",
        "mendix_pricing_file": None,
        "outsystems_pricing_file": None,
    }
    with open(config_dir / "engine.yaml", "w") as f:
        yaml.dump(engine_config, f)

    return config_dir


@pytest.fixture
def registry():
    """A fresh pricing registry."""
    return PricingRegistry()


@pytest.fixture(scope="session")
def mendix_calculator():
    """Mendix calculator backed by the bundled price book."""
    return MendixPricingCalculator()


@pytest.fixture(scope="session")
def outsystems_calculator():
    """OutSystems calculator backed by the bundled price book."""
    return OutSystemsPricingCalculator()
