"""Unit tests for the exporter framework and registered exporters.

These tests verify:
- Registry lookups and registration
- ExportManager file naming and failure handling
- Order text, CSV and JSON rendering
- Full layout JSON rendering
"""

import csv
import io
import json
from pathlib import Path
from typing import Iterator

import pytest

from balustrade.application.commands import CalculateLayoutCommand
from balustrade.application.dtos import CalculationInput, CalculationResult
from balustrade.domain.value_objects import GateSpec
from balustrade.infrastructure.exporters import (
    ExportError,
    ExporterRegistry,
    ExportManager,
    LayoutJsonExporter,
    OrderCsvExporter,
    OrderJsonExporter,
    OrderTextExporter,
    TextExporter,
    result_to_dict,
)
from balustrade.infrastructure.exporters.order import format_quantity


@pytest.fixture
def sp12_result(calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput) -> CalculationResult:
    """Two 1480mm SP12 panels with six spigots."""
    return calculate_command.execute(sp12_input)


@pytest.fixture
def restore_registry() -> Iterator[None]:
    """Restore the exporter registry after a test registers formats."""
    saved = dict(ExporterRegistry._exporters)
    yield
    ExporterRegistry._exporters.clear()
    ExporterRegistry._exporters.update(saved)


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_builtin_formats(self) -> None:
        formats = ExporterRegistry.available_formats()

        assert {"order-text", "order-csv", "order-json", "layout-json"} <= set(formats)
        assert formats == sorted(formats)

    def test_get(self) -> None:
        assert ExporterRegistry.get("order-csv") is OrderCsvExporter
        assert ExporterRegistry.is_registered("layout-json")

    def test_get_unknown(self) -> None:
        with pytest.raises(KeyError, match="No exporter registered for format 'pdf'"):
            ExporterRegistry.get("pdf")

    def test_register(self, restore_registry: None) -> None:
        @ExporterRegistry.register("shout")
        class ShoutExporter(TextExporter):
            format_name = "shout"
            file_extension = "txt"

            def export_string(self, result: CalculationResult) -> str:
                return result.calc_key.upper()

        assert ExporterRegistry.get("shout") is ShoutExporter
        assert ShoutExporter().export_string(CalculationResult(calc_key="sp12")) == "SP12"

    def test_clear(self, restore_registry: None) -> None:
        ExporterRegistry.clear()

        assert ExporterRegistry.available_formats() == []


class TestExportManager:
    """Tests for ExportManager."""

    def test_export_all(self, tmp_path: Path, sp12_result: CalculationResult) -> None:
        manager = ExportManager(tmp_path / "out")

        paths = manager.export_all(["order-csv", "layout-json"], sp12_result, project_name="deck")

        assert paths["order-csv"] == tmp_path / "out" / "deck_order-csv.csv"
        assert paths["layout-json"] == tmp_path / "out" / "deck_layout-json.json"
        assert paths["order-csv"].read_text(encoding="utf-8").startswith("Code,Description,Quantity")
        assert json.loads(paths["layout-json"].read_text(encoding="utf-8"))["calc_key"] == "sp12"

    def test_unknown_format_writes_nothing(self, tmp_path: Path, sp12_result: CalculationResult) -> None:
        manager = ExportManager(tmp_path / "out")

        with pytest.raises(KeyError):
            manager.export_all(["order-csv", "pdf"], sp12_result)

        assert not (tmp_path / "out").exists()

    def test_failed_calculation_rejected(self, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path)

        with pytest.raises(ExportError, match="Cannot export a failed calculation"):
            manager.export_all(["order-csv"], CalculationResult(errors=["No compliance data"]))

    def test_export_single(self, tmp_path: Path, sp12_result: CalculationResult) -> None:
        path = ExportManager(tmp_path).export_single("order-text", sp12_result)

        assert path.name == "balustrade_order-text.txt"
        assert "ORDER LIST - SP12" in path.read_text(encoding="utf-8")


class TestOrderExporters:
    """Tests for the order list exporters."""

    def test_format_quantity(self) -> None:
        assert format_quantity(6.0) == "6"
        assert format_quantity(2.5) == "2.5"

    def test_text(self, sp12_result: CalculationResult) -> None:
        text = OrderTextExporter().export_string(sp12_result)
        lines = text.splitlines()

        assert lines[1] == "ORDER LIST - SP12"
        assert "Total run: 3000mm" in lines
        assert "Panels: 2" in lines
        assert "  2 × @1480.00 mm (3 spigots each)" in lines
        assert "Total spigots: 6" in lines
        assert "  SP12-SS       6  SP12 Side Fix Post" in lines
        assert "NOTES" not in lines

    def test_text_with_gate_and_notes(
        self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput
    ) -> None:
        sp12_input.side_gates = [GateSpec()]
        result = calculate_command.execute(sp12_input)

        lines = OrderTextExporter().export_string(result).splitlines()

        assert "Gates: 1" in lines
        assert "NOTES" in lines

    def test_text_without_items(self) -> None:
        text = OrderTextExporter().export_string(CalculationResult(calc_key="sp12"))

        assert "  (No items)" in text.splitlines()

    def test_csv(self, sp12_result: CalculationResult) -> None:
        rows = list(csv.reader(io.StringIO(OrderCsvExporter().export_string(sp12_result))))

        assert rows == [
            ["Code", "Description", "Quantity"],
            ["SP12-SS", "SP12 Side Fix Post", "6"],
        ]

    def test_order_json(self, sp12_result: CalculationResult) -> None:
        data = json.loads(OrderJsonExporter().export_string(sp12_result))

        assert data == {
            "calc_key": "sp12",
            "items": [{"code": "SP12-SS", "description": "SP12 Side Fix Post", "quantity": 6.0}],
        }


class TestLayoutJsonExporter:
    """Tests for the full result exporter."""

    def test_result_to_dict(self, sp12_result: CalculationResult) -> None:
        data = result_to_dict(sp12_result)

        assert data["calc_key"] == "sp12"
        assert data["total_run_mm"] == 3000
        assert data["spacing"]["internal_spacing_mm"] == 800
        assert data["spacing"]["row"]["zone"] == "VH"
        assert data["sides"][0]["layout"]["panel_widths_mm"] == [1480.0, 1480.0]
        assert data["sides"][0]["layout"]["panel_count"] == 2
        assert data["sides"][0]["gate"] is None
        assert data["total_panels"] == 2
        assert data["total_fixings"] == 6
        assert data["fixing_label"] == "spigot"
        assert data["panel_groups"] == [
            {"count": 2, "width_mm": 1480.0, "fixings_each": 3, "fixing_positions_mm": [250.0, 740.0, 1230.0]}
        ]
        assert data["errors"] == []

    def test_gate_offsets_serialized(
        self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput
    ) -> None:
        sp12_input.side_gates = [GateSpec()]
        data = result_to_dict(calculate_command.execute(sp12_input))
        gate = data["sides"][0]["gate"]

        assert gate["panel_boundary_index"] == 0
        assert gate["offsets"]["hinge_to_glass"] is False
        assert gate["offsets"]["segments"][0] == {
            "kind": "hinge_gap",
            "start_mm": 0.0,
            "width_mm": 7.0,
            "panel_index": None,
        }

    def test_failed_result(self) -> None:
        data = result_to_dict(CalculationResult(calc_key="sd75", errors=["No compliance data"]))

        assert data["spacing"] is None
        assert data["sides"] == []
        assert data["errors"] == ["No compliance data"]

    def test_export_string_is_json(self, sp12_result: CalculationResult) -> None:
        text = LayoutJsonExporter(indent=4).export_string(sp12_result)

        assert json.loads(text) == result_to_dict(sp12_result)
        assert '\n    "calc_key"' in text
