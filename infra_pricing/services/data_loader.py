"""
Loading of low-code platform price tables.

Tables ship as YAML files in ``infra_pricing/data`` and can be replaced by
an explicit path or by raw JSON/YAML text from a settings store. Every
failure is reported as ``DataError`` so callers can show "pricing data
unavailable" instead of crashing.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import structlog
import yaml
from pydantic import BaseModel, ValidationError

from ..exceptions import DataError
from ..models.mendix import MendixPricingSettings
from ..models.outsystems import OutSystemsPricingSettings

logger = structlog.get_logger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

MENDIX_PRICING_FILE = "mendix_pricing.yaml"
OUTSYSTEMS_PRICING_FILE = "outsystems_pricing.yaml"

SettingsT = TypeVar("SettingsT", bound=BaseModel)


def _format_for(path: Path) -> str:
    return "json" if path.suffix.lower() == ".json" else "yaml"


def load_pricing_table(text: str, fmt: str = "yaml", source: str = None) -> Dict[str, Any]:
    """Parse a raw JSON or YAML pricing table into a mapping"""
    fmt = fmt.lower()
    try:
        if fmt == "json":
            data = json.loads(text)
        elif fmt in ("yaml", "yml"):
            data = yaml.safe_load(text)
        else:
            raise DataError(f"Unsupported pricing table format: {fmt}", source)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error("Failed to parse pricing table", source=source, format=fmt, error=str(e))
        raise DataError(f"Malformed {fmt.upper()} pricing table: {e}", source) from e

    if not isinstance(data, dict):
        logger.error("Pricing table is not a mapping", source=source, format=fmt)
        raise DataError("Pricing table must be a mapping at the top level", source)

    return data


def _validate(model: Type[SettingsT], data: Dict[str, Any], source: str) -> SettingsT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(
            "Pricing table failed validation",
            source=source,
            model=model.__name__,
            errors=e.error_count(),
        )
        raise DataError(f"Invalid {model.__name__}: {e}", source) from e


def _load(model: Type[SettingsT], path: Union[str, Path]) -> SettingsT:
    path = Path(path)
    source = str(path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Pricing table not readable", source=source, error=str(e))
        raise DataError(f"Cannot read pricing table: {e.strerror or e}", source) from e

    data = load_pricing_table(text, _format_for(path), source)
    settings = _validate(model, data, source)

    logger.debug("Loaded pricing table", source=source, model=model.__name__)
    return settings


def load_mendix_pricing(path: Optional[Union[str, Path]] = None) -> MendixPricingSettings:
    """Mendix price book from ``path`` or the bundled table"""
    return _load(MendixPricingSettings, path or DATA_DIR / MENDIX_PRICING_FILE)


def load_outsystems_pricing(
    path: Optional[Union[str, Path]] = None,
) -> OutSystemsPricingSettings:
    """OutSystems price book from ``path`` or the bundled table"""
    return _load(OutSystemsPricingSettings, path or DATA_DIR / OUTSYSTEMS_PRICING_FILE)


def parse_mendix_pricing(text: str, fmt: str = "json") -> MendixPricingSettings:
    """Mendix price book from settings-store text"""
    return _validate(MendixPricingSettings, load_pricing_table(text, fmt, "settings"), "settings")


def parse_outsystems_pricing(text: str, fmt: str = "json") -> OutSystemsPricingSettings:
    """OutSystems price book from settings-store text"""
    return _validate(
        OutSystemsPricingSettings, load_pricing_table(text, fmt, "settings"), "settings"
    )
