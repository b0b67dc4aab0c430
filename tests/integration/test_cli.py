"""Integration tests for the balustrade CLI.

These tests verify the CLI commands work end-to-end, including:
- calculate from options and from project files
- Console formats and file exports
- Order submission with --submit
- spacing, solve and catalog lookups
- Exit codes and error messages
"""

import json
from pathlib import Path

import pytest
from pytest_httpx import HTTPXMock
from typer.testing import CliRunner

from balustrade.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

ORDER_API_URL = "http://orders.test/api"
ORDER_ENDPOINT = f"{ORDER_API_URL}/shopify/create-order"

SP12_ARGS = ["calculate", "-k", "sp12", "-s", "3000", "-t", "12", "-h", "1100", "-z", "VH"]


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestCalculateCommand:
    """Tests for the calculate command."""

    def test_text_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, SP12_ARGS)

        assert result.exit_code == 0
        assert "ORDER LIST - SP12" in result.output
        assert "Panels: 2" in result.output
        assert "Total spigots: 6" in result.output
        assert "SP12-SS" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, [*SP12_ARGS, "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["calc_key"] == "sp12"
        assert data["all_panels_mm"] == [1480.0, 1480.0]
        assert data["order_items"][0]["code"] == "SP12-SS"

    def test_csv_output(self, runner: CliRunner) -> None:
        result = runner.invoke(app, [*SP12_ARGS, "--format", "csv"])

        assert result.exit_code == 0
        assert result.output.startswith("Code,Description,Quantity")
        assert "SP12-SS" in result.output

    def test_invalid_console_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, [*SP12_ARGS, "--format", "pdf"])

        assert result.exit_code == 1
        assert "--format must be one of" in result.output

    def test_missing_required_options(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-k", "sp12"])

        assert result.exit_code == 1
        assert "--calc-key and --side are required" in result.output

    def test_calculation_error(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "-k", "sd75", "-s", "3000", "-h", "1100"])

        assert result.exit_code == 1
        assert "Error: No compliance data for sd75" in result.output

    def test_gate_option(self, runner: CliRunner) -> None:
        result = runner.invoke(app, [*SP12_ARGS, "--gate", "0"])

        assert result.exit_code == 0
        assert "Gates: 1" in result.output
        assert "ASC90" in result.output
        assert "PL180GG" in result.output

    def test_gate_side_out_of_range(self, runner: CliRunner) -> None:
        result = runner.invoke(app, [*SP12_ARGS, "--gate", "3"])

        assert result.exit_code == 1
        assert "gate side 3 is out of range" in result.output

    def test_multiple_sides(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [*SP12_ARGS, "-s", "2000", "--shape", "corner", "--format", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_run_mm"] == 5000.0
        assert len(data["sides"]) == 2

    def test_from_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["calculate", "--config", str(FIXTURES_PATH / "valid_minimal.json")],
        )

        assert result.exit_code == 0
        assert "Total spigots: 6" in result.output

    def test_config_overridden_by_options(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "--config",
                str(FIXTURES_PATH / "valid_minimal.json"),
                "--spigots",
                "2",
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["all_panels_mm"] == [980.0, 980.0, 980.0]

    def test_config_load_error(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["calculate", "--config", str(FIXTURES_PATH / "unknown_field.json")],
        )

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_export_files(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                *SP12_ARGS,
                "--output-formats",
                "order-csv,order-json",
                "--output-dir",
                str(tmp_path),
                "--project-name",
                "deck",
            ],
        )

        assert result.exit_code == 0
        assert "Exported files:" in result.output
        assert (tmp_path / "deck_order-csv.csv").exists()
        data = json.loads((tmp_path / "deck_order-json.json").read_text())
        assert data["items"][0] == {"code": "SP12-SS", "description": "SP12 Side Fix Post", "quantity": 6}

    def test_unknown_export_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [*SP12_ARGS, "--output-formats", "stl", "--output-dir", str(tmp_path)],
        )

        assert result.exit_code == 1
        assert "Unknown formats: stl" in result.output


class TestSubmitOrder:
    """Tests for calculate --submit."""

    def test_submit_success(self, runner: CliRunner, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=ORDER_ENDPOINT,
            method="POST",
            json={
                "success": True,
                "message": "Order created",
                "data": {"id": 1001, "invoice_url": "https://shop.test/invoices/1001"},
            },
        )

        result = runner.invoke(
            app,
            [*SP12_ARGS, "--submit", "--order-api-url", ORDER_API_URL, "--token", "secret"],
        )

        assert result.exit_code == 0
        assert "Order created" in result.output
        assert "Invoice: https://shop.test/invoices/1001" in result.output

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer secret"
        assert json.loads(request.read()) == {"items": [{"code": "SP12-SS", "quantity": 6}]}

    def test_submit_failure(self, runner: CliRunner, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=ORDER_ENDPOINT,
            method="POST",
            status_code=500,
            json={"success": False, "message": "Shop unavailable"},
        )

        result = runner.invoke(app, [*SP12_ARGS, "--submit", "--order-api-url", ORDER_API_URL])

        assert result.exit_code == 1
        assert "Order submission failed: Shop unavailable" in result.output


class TestExportCommand:
    """Tests for the export command."""

    def test_export_config_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["export", str(FIXTURES_PATH / "valid_full.json"), "-o", str(tmp_path)],
        )

        assert result.exit_code == 0
        assert (tmp_path / "deck_order-csv.csv").exists()
        layout = json.loads((tmp_path / "deck_layout-json.json").read_text())
        assert layout["total_gates"] == 1
        assert len(layout["sides"]) == 2

    def test_export_format_option(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                str(FIXTURES_PATH / "valid_minimal.json"),
                "-f",
                "order-text",
                "-o",
                str(tmp_path),
                "--project-name",
                "run",
            ],
        )

        assert result.exit_code == 0
        assert (tmp_path / "run_order-text.txt").exists()

    def test_export_without_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["export", str(FIXTURES_PATH / "valid_minimal.json"), "-o", str(tmp_path)],
        )

        assert result.exit_code == 1
        assert "no export formats given" in result.output

    def test_export_failed_calculation(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["export", str(FIXTURES_PATH / "no_compliance.json"), "-f", "order-csv", "-o", str(tmp_path)],
        )

        assert result.exit_code == 1
        assert "No compliance data" in result.output
        assert list(tmp_path.iterdir()) == []


class TestSpacingCommand:
    """Tests for the spacing command."""

    def test_lookup(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["spacing", "sp12", "-t", "12", "-h", "1100", "-z", "VH"])

        assert result.exit_code == 0
        assert "Calculator:       sp12" in result.output
        assert "Internal spacing: 800mm" in result.output
        assert "Edge spacing:     250mm" in result.output

    def test_clamped_lookup(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["spacing", "pf150", "-t", "12", "-h", "1100", "-z", "EH"])

        assert result.exit_code == 0
        assert "Internal spacing: 300mm" in result.output
        assert "spacing reduced" in result.output

    def test_no_data(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["spacing", "sd75", "-t", "12", "-h", "1100", "-z", "L"])

        assert result.exit_code == 1
        assert "No compliance data for sd75" in result.output

    def test_not_engineered(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["spacing", "sd50", "-t", "12", "-h", "1200", "-z", "VH", "--fence-type", "pool"],
        )

        assert result.exit_code == 1
        assert "Combination not engineered" in result.output

    def test_unknown_calculator(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["spacing", "sp99", "-t", "12", "-h", "1100", "-z", "VH"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestSolveCommand:
    """Tests for the solve command."""

    def test_solve(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["solve", "3000"])

        assert result.exit_code == 0
        assert "Panels: 2 x [1480, 1480] mm" in result.output
        assert "Gap:    13.3333mm" in result.output
        assert "Length: 3000mm" in result.output

    def test_infeasible(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["solve", "100"])

        assert result.exit_code == 1
        assert "Layout not achievable for 100mm" in result.output

    def test_invalid_gap_bounds(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["solve", "3000", "--gap-min", "40", "--gap-max", "20"])

        assert result.exit_code == 1
        assert "Minimum gap cannot exceed maximum gap" in result.output


class TestCatalogCommand:
    """Tests for the catalog command."""

    def test_list(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["catalog"])

        assert result.exit_code == 0
        assert "sp12" in result.output
        assert "smartlock_top" in result.output
        assert "vortex" in result.output

    def test_detail(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["catalog", "sp12"])

        assert result.exit_code == 0
        assert "Calculator:  sp12 (spigots)" in result.output
        assert "Finishes:" in result.output

    def test_unknown(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["catalog", "sp99"])

        assert result.exit_code == 1
        assert "Unknown calculator" in result.output
