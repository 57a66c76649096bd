"""
FastAPI application exposing the pricing engine over HTTP.
"""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .exceptions import ConfigurationError, DataError
from .models.api_models import (
    APIError,
    HealthResponse,
    LicensingResponse,
    MendixQuoteResponse,
    OutSystemsQuoteResponse,
    ProviderSummary,
    ProvidersResponse,
    RegionsResponse,
)
from .models.licensing import LicensingInput
from .models.mendix import MendixDeploymentConfig
from .models.outsystems import OutSystemsDeploymentConfig
from .models.types import CloudProvider
from .services.config import ConfigManager
from .services.regions import get_regions
from .services.registry import MANAGED_OPENSHIFT_HOSTS
from .utils.logging import configure_logging, get_logger

logger = get_logger(__name__)
app_state = {}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for structured request/response logging"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()
        request.state.request_id = request_id

        logger.debug(
            "Request started",
            method=request.method,
            path=str(request.url.path),
            request_id=request_id,
        )

        response = await call_next(request)

        logger.info(
            "Request completed",
            method=request.method,
            path=str(request.url.path),
            status_code=response.status_code,
            process_time=round(time.time() - start_time, 4),
            request_id=request_id,
        )
        response.headers["X-Request-ID"] = request_id
        return response


def _config_manager() -> ConfigManager:
    config_manager = app_state.get("config_manager")
    if config_manager is None:
        config_manager = ConfigManager(app_state.get("config_dir", "config"))
        app_state["config_manager"] = config_manager
    return config_manager


def _pricing_service():
    service = app_state.get("pricing_service")
    if service is None:
        service = _config_manager().create_pricing_service()
        app_state["pricing_service"] = service
    return service


def _mendix_calculator():
    # Loaded on first use so a broken price book only fails its own routes
    calculator = app_state.get("mendix_calculator")
    if calculator is None:
        calculator = _config_manager().create_mendix_calculator()
        app_state["mendix_calculator"] = calculator
    return calculator


def _outsystems_calculator():
    calculator = app_state.get("outsystems_calculator")
    if calculator is None:
        calculator = _config_manager().create_outsystems_calculator()
        app_state["outsystems_calculator"] = calculator
    return calculator


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Infrastructure Pricing API")
    config_manager = _config_manager()
    logger.info(
        "Application initialized",
        config_dir=str(config_manager.config_dir),
        cache_enabled=config_manager.engine_config.cache_enabled,
    )
    yield
    logger.info("Shutting down Infrastructure Pricing API")


app = FastAPI(
    title="Infrastructure Pricing API",
    description="Cloud, Kubernetes licensing and low-code platform cost estimates",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, error: str, code: str, details=None) -> JSONResponse:
    error_response = APIError(error=error, code=code, details=details)
    return JSONResponse(status_code=status_code, content=error_response.model_dump(mode="json"))


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with structured response"""
    return _error_response(
        exc.status_code, exc.detail, f"HTTP_{exc.status_code}", {"status_code": exc.status_code}
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    return _error_response(400, str(exc), "CONFIGURATION_ERROR")


@app.exception_handler(DataError)
async def data_error_handler(request: Request, exc: DataError):
    logger.error("Pricing data unavailable", error=str(exc), source=exc.source)
    return _error_response(
        503, "Pricing data unavailable", "DATA_UNAVAILABLE", {"reason": str(exc)}
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle ValueError exceptions"""
    return _error_response(400, str(exc), "VALIDATION_ERROR", {"type": "ValueError"})


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check"""
    components = {
        "config": "loaded" if "config_manager" in app_state else "not_initialized",
        "cache": "enabled" if _pricing_service().enabled else "disabled",
    }
    return HealthResponse(status="healthy", components=components)


@app.get("/providers", response_model=ProvidersResponse)
async def list_providers():
    registry = _pricing_service().registry
    providers = [
        ProviderSummary(
            provider=pricing.provider.value,
            default_region=pricing.default_region,
            pricing_source=pricing.pricing_source,
            region_count=len(get_regions(pricing.provider)),
        )
        for pricing in registry.get_all_cloud_providers()
    ]
    return ProvidersResponse(
        providers=providers,
        managed_openshift={
            alias.value: host.value for alias, host in MANAGED_OPENSHIFT_HOSTS.items()
        },
    )


@app.get("/providers/{provider}/pricing")
async def get_provider_pricing(provider: str, region: Optional[str] = None):
    pricing = _pricing_service().get_pricing(provider, region)
    return pricing.model_dump(mode="json")


@app.get("/providers/{provider}/regions", response_model=RegionsResponse)
async def get_provider_regions(provider: str):
    if not _pricing_service().registry.is_provider_supported(provider):
        raise ConfigurationError(f"Unknown cloud provider: {provider}")
    return RegionsResponse(provider=provider, regions=get_regions(CloudProvider(provider)))


@app.post("/licensing/{distribution}", response_model=LicensingResponse)
async def calculate_licensing(distribution: str, licensing_input: LicensingInput):
    service = _pricing_service()
    licensing = service.registry.get_distribution_licensing(distribution)
    cost = service.calculate_licensing_cost(distribution, licensing_input)
    return LicensingResponse.from_cost(licensing, cost)


@app.post("/lowcode/mendix", response_model=MendixQuoteResponse)
async def calculate_mendix(config: MendixDeploymentConfig):
    result = _mendix_calculator().calculate_cost(config)
    return MendixQuoteResponse.from_result(result)


@app.post("/lowcode/outsystems", response_model=OutSystemsQuoteResponse)
async def calculate_outsystems(config: OutSystemsDeploymentConfig):
    result = _outsystems_calculator().calculate_cost(config)
    return OutSystemsQuoteResponse.from_result(result)


def run_server(
    host: str = "0.0.0.0",
    port: int = 8000,
    log_level: str = "info",
    config_dir: str = "config",
    reload: bool = False,
    log_format: str = "auto",
):
    """Run the FastAPI server"""
    configure_logging(level=log_level, format_type=log_format, component="api")

    logger.info(
        "Starting Infrastructure Pricing API server",
        host=host,
        port=port,
        config_dir=config_dir,
        reload=reload,
    )

    app_state.update({"config_dir": config_dir})

    uvicorn.run(
        "infra_pricing.api:app",
        host=host,
        port=port,
        log_level=log_level.lower(),
        access_log=False,
        reload=reload,
    )


if __name__ == "__main__":
    run_server(reload=True)
