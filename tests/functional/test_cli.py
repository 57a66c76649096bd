"""
CLI workflow tests run through ``main`` with captured output.
"""

import json
from decimal import Decimal

import pytest
import structlog

from infra_pricing.cli import build_parser, main


@pytest.fixture(autouse=True)
def reset_logging():
    """configure_logging binds the captured stderr; drop it after each test."""
    yield
    structlog.reset_defaults()


def run_cli(capsys, config_dir, *args):
    code = main(["--config-dir", str(config_dir), *args])
    captured = capsys.readouterr()
    return code, captured


def run_json(capsys, config_dir, *args):
    code, captured = run_cli(capsys, config_dir, *args)
    assert code == 0, captured.err
    return json.loads(captured.out)


@pytest.mark.functional
@pytest.mark.cli
class TestCliCommands:
    """Test each subcommand."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage:" in capsys.readouterr().out.lower()

    def test_providers(self, capsys, sample_config_dir):
        data = run_json(capsys, sample_config_dir, "providers")

        assert len(data["providers"]) == 17
        assert data["managed_openshift"]["ROSA"] == "AWS"

    def test_regions_for_alias(self, capsys, sample_config_dir):
        data = run_json(capsys, sample_config_dir, "regions", "ARO", "--preferred")

        assert data["provider"] == "ARO"
        assert len(data["regions"]) == 3

    def test_cloud_pricing_bundle(self, capsys, sample_config_dir):
        data = run_json(capsys, sample_config_dir, "cloud", "GCP", "--region", "europe-west1")

        assert data["provider"] == "GCP"
        assert data["region"] == "europe-west1"

    def test_cloud_monthly_estimate(self, capsys, sample_config_dir):
        data = run_json(
            capsys, sample_config_dir, "cloud", "AWS", "--cpu", "4", "--ram", "16", "--storage", "100"
        )

        assert Decimal(data["monthly"]) == Decimal("291.24")
        assert Decimal(data["annual"]) == Decimal("3494.88")

    def test_cloud_instance_price(self, capsys, sample_config_dir):
        data = run_json(capsys, sample_config_dir, "cloud", "AWS", "--instance", "m6i.large")

        assert Decimal(data["hourly"]) == Decimal("0.096")
        assert Decimal(data["monthly"]) == Decimal("70.08")

    def test_license(self, capsys, sample_config_dir):
        data = run_json(
            capsys, sample_config_dir, "license", "OpenShift", "--nodes", "10", "--tier", "Premium"
        )

        assert data["display_name"] == "OpenShift Container Platform"
        assert Decimal(data["total_per_year"]) == Decimal("32500")

    def test_mendix_quote(self, capsys, sample_config_dir, temp_dir):
        config_file = temp_dir / "mendix.json"
        config_file.write_text(json.dumps({
            "resource_pack_tier": "Standard",
            "resource_pack_size": "M",
        }))

        data = run_json(capsys, sample_config_dir, "mendix", str(config_file))
        assert Decimal(data["total_per_year"]) == Decimal("97644")

    def test_outsystems_quote(self, capsys, sample_config_dir, temp_dir):
        config_file = temp_dir / "outsystems.yaml"
        config_file.write_text("total_application_objects: 450\n")

        data = run_json(capsys, sample_config_dir, "outsystems", str(config_file))

        assert data["result"]["ao_pack_count"] == 3
        assert Decimal(data["total_per_year"]) == Decimal("108900")


@pytest.mark.functional
@pytest.mark.cli
class TestCliErrors:
    """Test exit codes for bad input."""

    def test_unknown_provider(self, capsys, sample_config_dir):
        code, captured = run_cli(capsys, sample_config_dir, "cloud", "Mars")

        assert code == 1
        assert "Unknown cloud provider" in captured.err
        assert captured.out == ""

    def test_unknown_distribution(self, capsys, sample_config_dir):
        code, _ = run_cli(capsys, sample_config_dir, "license", "Borg")
        assert code == 1

    def test_missing_deployment_config(self, capsys, sample_config_dir, temp_dir):
        code, captured = run_cli(capsys, sample_config_dir, "mendix", str(temp_dir / "nope.yaml"))

        assert code == 1
        assert "Cannot read deployment config" in captured.err

    def test_invalid_deployment_config(self, capsys, sample_config_dir, temp_dir):
        config_file = temp_dir / "mendix.yaml"
        config_file.write_text("number_of_environments: -1\n")

        code, _ = run_cli(capsys, sample_config_dir, "mendix", str(config_file))
        assert code == 2

    def test_broken_engine_config(self, capsys, sample_config_dir):
        (sample_config_dir / "engine.yaml").write_text("log_level: LOUD\n")

        code, captured = run_cli(capsys, sample_config_dir, "providers")
        assert code == 1
        assert "Invalid engine configuration" in captured.err

    def test_invalid_tier_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["license", "OpenShift", "--tier", "Gold"])
