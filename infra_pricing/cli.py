"""
Command line interface for the infrastructure pricing engine.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .exceptions import PricingEngineError
from .models.api_models import LicensingResponse, MendixQuoteResponse, OutSystemsQuoteResponse
from .models.licensing import LicensingInput
from .models.mendix import MendixDeploymentConfig
from .models.outsystems import OutSystemsDeploymentConfig
from .models.pricing import HOURS_PER_MONTH
from .models.types import CloudProvider, SupportTier
from .services.config import ConfigManager
from .services.data_loader import load_pricing_table
from .services.regions import get_preferred_regions, get_regions
from .services.registry import MANAGED_OPENSHIFT_HOSTS
from .utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


class PricingApp:
    """Main application class"""

    def __init__(self, config_dir: str = "config"):
        self.config_manager = ConfigManager(config_dir)
        self.pricing_service = self.config_manager.create_pricing_service()
        self.registry = self.pricing_service.registry

        logger.debug("Application initialized", config_dir=config_dir)

    def list_providers(self) -> Dict[str, Any]:
        return {
            "providers": [
                {
                    "provider": pricing.provider.value,
                    "default_region": pricing.default_region,
                    "pricing_source": pricing.pricing_source,
                }
                for pricing in self.registry.get_all_cloud_providers()
            ],
            "managed_openshift": {
                alias.value: host.value for alias, host in MANAGED_OPENSHIFT_HOSTS.items()
            },
        }

    def list_regions(self, provider: str, preferred_only: bool = False) -> Dict[str, Any]:
        # Validates the provider name
        self.registry.get_cloud_provider_pricing(provider)
        provider = CloudProvider(provider)
        regions = get_preferred_regions(provider) if preferred_only else get_regions(provider)
        return {
            "provider": provider.value,
            "regions": [region.model_dump(mode="json") for region in regions],
        }

    def cloud_pricing(
        self,
        provider: str,
        region: Optional[str] = None,
        cpu: Optional[int] = None,
        ram: Optional[int] = None,
        storage: int = 0,
        instance: Optional[str] = None,
    ) -> Dict[str, Any]:
        strategy = self.registry.get_cloud_provider_pricing(provider)
        resolved_region = region or strategy.default_region

        if instance:
            hourly = strategy.get_instance_price(instance, region)
            return {
                "provider": provider,
                "region": resolved_region,
                "instance_type": instance,
                "hourly": str(hourly),
                "monthly": str(hourly * HOURS_PER_MONTH),
            }

        if cpu is not None or ram is not None:
            monthly = strategy.calculate_monthly_cost(cpu or 0, ram or 0, storage, region)
            return {
                "provider": provider,
                "region": resolved_region,
                "cpu_cores": cpu or 0,
                "ram_gb": ram or 0,
                "storage_gb": storage,
                "monthly": str(monthly),
                "annual": str(monthly * 12),
            }

        return self.pricing_service.get_pricing(provider, region).model_dump(mode="json")

    def licensing_cost(self, distribution: str, licensing_input: LicensingInput) -> Dict[str, Any]:
        licensing = self.registry.get_distribution_licensing(distribution)
        cost = self.pricing_service.calculate_licensing_cost(distribution, licensing_input)
        return LicensingResponse.from_cost(licensing, cost).model_dump(mode="json")

    def mendix_quote(self, config_file: str) -> Dict[str, Any]:
        config = MendixDeploymentConfig.model_validate(_read_config_file(config_file))
        result = self.config_manager.create_mendix_calculator().calculate_cost(config)
        return MendixQuoteResponse.from_result(result).model_dump(mode="json")

    def outsystems_quote(self, config_file: str) -> Dict[str, Any]:
        config = OutSystemsDeploymentConfig.model_validate(_read_config_file(config_file))
        result = self.config_manager.create_outsystems_calculator().calculate_cost(config)
        return OutSystemsQuoteResponse.from_result(result).model_dump(mode="json")


def _read_config_file(path: str) -> Dict[str, Any]:
    """Deployment config from a YAML or JSON file"""
    config_path = Path(path)
    fmt = "json" if config_path.suffix.lower() == ".json" else "yaml"
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise PricingEngineError(f"Cannot read deployment config {path}: {e.strerror or e}") from e
    return load_pricing_table(text, fmt, str(config_path))


def _print_json(data: Dict[str, Any]) -> None:
    print(json.dumps(data, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Infrastructure Pricing Engine - cloud, Kubernetes licensing and low-code costs",
        prog="infra-pricing",
    )
    parser.add_argument("--config-dir", default="config", help="Configuration directory")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (defaults to the engine configuration)",
    )
    parser.add_argument(
        "--log-format",
        choices=["auto", "json", "human"],
        default=None,
        help="Log output format (auto=detect based on terminal)",
    )

    subparsers = parser.add_subparsers(dest="mode", help="Operation mode")

    subparsers.add_parser("providers", help="List cloud providers and default regions")

    regions_parser = subparsers.add_parser("regions", help="List regions for a provider")
    regions_parser.add_argument("provider", help="Cloud provider, e.g. AWS or ROSA")
    regions_parser.add_argument(
        "--preferred", action="store_true", help="Only show preferred regions"
    )

    cloud_parser = subparsers.add_parser("cloud", help="Provider pricing or a monthly estimate")
    cloud_parser.add_argument("provider", help="Cloud provider")
    cloud_parser.add_argument("--region", help="Region code (provider default if omitted)")
    cloud_parser.add_argument("--cpu", type=int, help="vCPU count for a monthly estimate")
    cloud_parser.add_argument("--ram", type=int, help="RAM in GB for a monthly estimate")
    cloud_parser.add_argument("--storage", type=int, default=0, help="SSD storage in GB")
    cloud_parser.add_argument("--instance", help="Instance type to price")

    license_parser = subparsers.add_parser("license", help="Distribution licensing cost")
    license_parser.add_argument("distribution", help="Kubernetes distribution, e.g. OpenShift")
    license_parser.add_argument("--nodes", type=int, default=0, help="Total node count")
    license_parser.add_argument("--cores", type=int, default=0, help="Total licensed cores")
    license_parser.add_argument("--sockets", type=int, default=0, help="Total sockets")
    license_parser.add_argument("--workers", type=int, default=0, help="Worker node count")
    license_parser.add_argument(
        "--tier",
        choices=[tier.value for tier in SupportTier],
        default=SupportTier.STANDARD.value,
        help="Support tier",
    )
    license_parser.add_argument("--years", type=int, default=1, help="Contract length in years")
    license_parser.add_argument(
        "--managed", action="store_true", help="Price as a managed service"
    )

    mendix_parser = subparsers.add_parser("mendix", help="Mendix quote from a deployment config")
    mendix_parser.add_argument("config_file", help="YAML or JSON deployment config")

    outsystems_parser = subparsers.add_parser(
        "outsystems", help="OutSystems quote from a deployment config"
    )
    outsystems_parser.add_argument("config_file", help="YAML or JSON deployment config")

    server_parser = subparsers.add_parser("serve", help="Start API server")
    server_parser.add_argument("--host", default="0.0.0.0", help="Server host")
    server_parser.add_argument("--port", type=int, default=8000, help="Server port")
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload (development)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.mode is None:
        parser.print_help()
        return 0

    # Keep startup logs off stdout until the engine config is read
    configure_logging(
        level=args.log_level or "WARNING", format_type=args.log_format or "auto", component="cli"
    )

    try:
        app = PricingApp(args.config_dir)
    except PricingEngineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine_config = app.config_manager.engine_config
    log_level = args.log_level or engine_config.log_level
    log_format = args.log_format or engine_config.log_format
    configure_logging(level=log_level, format_type=log_format, component="cli")

    try:
        if args.mode == "serve":
            from .api import run_server

            run_server(
                host=args.host,
                port=args.port,
                log_level=log_level,
                config_dir=args.config_dir,
                reload=args.reload,
                log_format=log_format,
            )
            return 0

        if args.mode == "providers":
            output = app.list_providers()
        elif args.mode == "regions":
            output = app.list_regions(args.provider, args.preferred)
        elif args.mode == "cloud":
            output = app.cloud_pricing(
                args.provider,
                region=args.region,
                cpu=args.cpu,
                ram=args.ram,
                storage=args.storage,
                instance=args.instance,
            )
        elif args.mode == "license":
            licensing_input = LicensingInput(
                node_count=args.nodes,
                total_cores=args.cores,
                total_sockets=args.sockets,
                worker_node_count=args.workers,
                support_tier=args.tier,
                contract_years=args.years,
                is_managed_service=args.managed,
            )
            output = app.licensing_cost(args.distribution, licensing_input)
        elif args.mode == "mendix":
            output = app.mendix_quote(args.config_file)
        else:
            output = app.outsystems_quote(args.config_file)

    except ValidationError as e:
        logger.error("Invalid input", mode=args.mode, errors=e.error_count())
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except PricingEngineError as e:
        logger.error("Pricing failed", mode=args.mode, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_json(output)
    return 0
