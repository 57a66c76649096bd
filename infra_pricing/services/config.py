"""
Configuration management for the pricing engine.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..exceptions import ConfigurationError
from ..models.types import Currency
from .cache import CachedPricingService, PricingCache
from .data_loader import load_mendix_pricing, load_outsystems_pricing
from .mendix import MendixPricingCalculator
from .outsystems import OutSystemsPricingCalculator
from .registry import get_registry

logger = structlog.get_logger(__name__)

ENGINE_CONFIG_FILE = "engine.yaml"

# Environment variable -> EngineConfig field
ENV_OVERRIDES = {
    "PRICING_CACHE_TTL": "cache_ttl_seconds",
    "PRICING_CACHE_ENABLED": "cache_enabled",
    "PRICING_CACHE_MAX_ENTRIES": "cache_max_entries",
    "MENDIX_PRICING_FILE": "mendix_pricing_file",
    "OUTSYSTEMS_PRICING_FILE": "outsystems_pricing_file",
    "LOG_LEVEL": "log_level",
    "LOG_FORMAT": "log_format",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("auto", "json", "human")


class EngineConfig(BaseModel):
    """Engine-wide settings"""

    default_currency: Currency = Currency.USD
    mendix_pricing_file: Optional[str] = None
    outsystems_pricing_file: Optional[str] = None
    cache_enabled: bool = True
    cache_ttl_seconds: int = Field(default=300, ge=0)
    cache_max_entries: int = Field(default=1024, ge=1)
    log_level: str = "INFO"
    log_format: str = "auto"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v.lower() not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v.lower()


def _default_engine_config() -> Dict[str, Any]:
    return {
        "default_currency": Currency.USD.value,
        "mendix_pricing_file": None,
        "outsystems_pricing_file": None,
        "cache_enabled": True,
        "cache_ttl_seconds": 300,
        "cache_max_entries": 1024,
        "log_level": "INFO",
        "log_format": "auto",
    }


class ConfigManager:
    """Loads engine configuration and builds the services it describes"""

    def __init__(self, config_dir: str = "config"):
        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        # Load environment variables
        load_dotenv()

        self.engine_config = self._load_engine_config()

    @property
    def config_file(self) -> Path:
        return self.config_dir / ENGINE_CONFIG_FILE

    def _load_engine_config(self) -> EngineConfig:
        """Read engine.yaml, creating it with defaults on first use"""
        config_file = self.config_file

        if not config_file.exists():
            config_data = _default_engine_config()
            with open(config_file, "w") as f:
                yaml.dump(config_data, f, default_flow_style=False)
            logger.debug("Created default engine configuration", path=str(config_file))
        else:
            try:
                with open(config_file, "r") as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Malformed engine configuration {config_file}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"Engine configuration {config_file} must be a mapping")

        config_data = self._apply_env_overrides(dict(config_data))

        try:
            return EngineConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid engine configuration: {e}") from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        for env_var, field in ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if value is None or value == "":
                continue
            if field == "cache_enabled":
                value = value.strip().lower() in ("1", "true", "yes", "on")
            config_data[field] = value
            logger.debug("Engine setting overridden from environment", setting=field, env=env_var)
        return config_data

    def _resolve_path(self, path: Optional[str]) -> Optional[Path]:
        if not path:
            return None
        path = Path(path)
        return path if path.is_absolute() else self.config_dir / path

    def create_mendix_calculator(self) -> MendixPricingCalculator:
        path = self._resolve_path(self.engine_config.mendix_pricing_file)
        return MendixPricingCalculator(load_mendix_pricing(path))

    def create_outsystems_calculator(self) -> OutSystemsPricingCalculator:
        path = self._resolve_path(self.engine_config.outsystems_pricing_file)
        return OutSystemsPricingCalculator(load_outsystems_pricing(path))

    def create_pricing_service(self) -> CachedPricingService:
        config = self.engine_config
        return CachedPricingService(
            registry=get_registry(),
            cache=PricingCache(
                ttl_seconds=config.cache_ttl_seconds, max_entries=config.cache_max_entries
            ),
            enabled=config.cache_enabled,
        )
