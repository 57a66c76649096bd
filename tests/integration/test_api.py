"""
Integration tests for the FastAPI application.
Tests the HTTP surface with real request/response cycles.
"""

from decimal import Decimal

import pytest
import yaml
from fastapi.testclient import TestClient

from infra_pricing.api import app, app_state


@pytest.fixture
def test_client(sample_config_dir):
    """Client against a fresh application state rooted at a temp config dir."""
    app_state.clear()
    app_state["config_dir"] = str(sample_config_dir)
    with TestClient(app) as client:
        yield client
    app_state.clear()


@pytest.mark.integration
@pytest.mark.api
class TestHealthAndProviders:
    """Test discovery endpoints."""

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"]["cache"] == "enabled"
        assert "timestamp" in data
        assert "X-Request-ID" in response.headers

    def test_providers(self, test_client):
        data = test_client.get("/providers").json()

        providers = {p["provider"]: p for p in data["providers"]}
        assert len(providers) == 17
        assert providers["AWS"]["default_region"] == "us-east-1"
        assert providers["OnPrem"]["region_count"] == 0
        assert data["managed_openshift"] == {
            "ROSA": "AWS",
            "ARO": "Azure",
            "OSD": "GCP",
            "ROKS": "IBM",
        }

    def test_provider_pricing(self, test_client):
        response = test_client.get("/providers/ROSA/pricing", params={"region": "eu-west-1"})

        assert response.status_code == 200
        data = response.json()
        assert data["provider"] == "ROSA"
        assert data["region"] == "eu-west-1"
        assert Decimal(data["compute"]["openshift_service_fee_per_worker_hour"]) == Decimal("0.171")
        assert Decimal(data["licenses"]["openshift_per_node_year"]) == 0

    def test_provider_regions(self, test_client):
        data = test_client.get("/providers/Azure/regions").json()

        assert data["provider"] == "Azure"
        assert any(region["code"] == "westeurope" for region in data["regions"])

    @pytest.mark.parametrize("path", ["/providers/Mars/pricing", "/providers/Mars/regions"])
    def test_unknown_provider(self, test_client, path):
        response = test_client.get(path)

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "CONFIGURATION_ERROR"
        assert "Mars" in data["error"]


@pytest.mark.integration
@pytest.mark.api
class TestCalculations:
    """Test pricing endpoints."""

    def test_licensing(self, test_client):
        response = test_client.post(
            "/licensing/OpenShift",
            json={"node_count": 10, "support_tier": "Premium", "contract_years": 3},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["vendor"] == "Red Hat"
        assert Decimal(data["cost"]["base_license_per_year"]) == Decimal("22500")
        assert Decimal(data["cost"]["discount_percent"]) == Decimal("10")

    def test_licensing_unknown_distribution(self, test_client):
        response = test_client.post("/licensing/Borg", json={"node_count": 3})
        assert response.status_code == 400

    def test_licensing_invalid_body(self, test_client):
        response = test_client.post("/licensing/OpenShift", json={"support_tier": "Gold"})
        assert response.status_code == 422

    def test_mendix_quote(self, test_client):
        response = test_client.post(
            "/lowcode/mendix",
            json={"resource_pack_tier": "Standard", "resource_pack_size": "M"},
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["total_per_year"]) == Decimal("97644")
        assert data["result"]["total_cloud_tokens"] == 40

    def test_outsystems_quote(self, test_client):
        response = test_client.post(
            "/lowcode/outsystems",
            json={
                "deployment_type": "SelfManaged",
                "cloud_provider": "Azure",
                "azure_instance_type": "D4s_v3",
                "include_ha": True,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["result"]["total_vm_count"] == 8
        assert Decimal(data["infrastructure_subtotal"]) == Decimal("13455.36")
        assert data["result"]["warnings"]


@pytest.mark.integration
@pytest.mark.api
class TestPricingDataUnavailable:
    def test_broken_price_book(self, sample_config_dir, temp_dir):
        broken = temp_dir / "broken.yaml"
        broken.write_text("editions: [\n")
        with open(sample_config_dir / "engine.yaml", "w") as f:
            yaml.dump({"outsystems_pricing_file": str(broken)}, f)

        app_state.clear()
        app_state["config_dir"] = str(sample_config_dir)
        with TestClient(app) as client:
            response = client.post("/lowcode/outsystems", json={})
            assert response.status_code == 503
            assert response.json()["error"] == "Pricing data unavailable"
            assert response.json()["code"] == "DATA_UNAVAILABLE"

            # Other routes keep working
            assert client.post("/lowcode/mendix", json={}).status_code == 200
        app_state.clear()


@pytest.mark.integration
@pytest.mark.api
class TestOutSystemsPlatformAndDiscount:
    def test_odc_quote_with_discount(self, test_client):
        response = test_client.post(
            "/lowcode/outsystems",
            json={
                "platform": "ODC",
                "total_application_objects": 300,
                "discount": {"type": "FixedAmount", "scope": "Total", "value": 1000},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["result"]["platform"] == "ODC"
        assert Decimal(data["license_subtotal"]) == Decimal("48400")
        assert Decimal(data["result"]["discount_amount"]) == Decimal("1000")
        assert Decimal(data["total_per_year"]) == Decimal("47400")

    def test_invalid_platform(self, test_client):
        response = test_client.post("/lowcode/outsystems", json={"platform": "O12"})
        assert response.status_code == 422
