"""Order list exporters.

Renders the aggregated order list of a calculation as text, CSV or JSON.
The JSON form matches the order submission payload (code and quantity per
line) with descriptions added.
"""

from __future__ import annotations

import csv
import io
import json
from typing import TYPE_CHECKING, Any, ClassVar

from balustrade.infrastructure.exporters.base import ExporterRegistry, TextExporter

if TYPE_CHECKING:
    from balustrade.application.dtos import CalculationResult
    from balustrade.domain.value_objects import OrderItem


def format_quantity(quantity: float) -> str:
    """Format a quantity without trailing zeros (4, 2.5)."""
    return f"{quantity:g}"


def order_items_to_dicts(items: list[OrderItem]) -> list[dict[str, Any]]:
    return [{"code": item.code, "description": item.description, "quantity": item.quantity} for item in items]


@ExporterRegistry.register("order-text")
class OrderTextExporter(TextExporter):
    """Human-readable order list with a layout summary header."""

    format_name: ClassVar[str] = "order-text"
    file_extension: ClassVar[str] = "txt"

    def export_string(self, result: CalculationResult) -> str:
        lines: list[str] = []
        lines.append("=" * 60)
        lines.append(f"ORDER LIST - {result.calc_key.upper()}")
        lines.append("=" * 60)
        lines.append(f"Total run: {result.total_run_mm:g}mm")
        lines.append(f"Panels: {result.total_panels}")
        if result.panels_summary:
            for summary_line in result.panels_summary.splitlines():
                lines.append(f"  {summary_line}")
        lines.append(f"Total {result.fixing_label}s: {result.total_fixings}")
        if result.total_gates:
            lines.append(f"Gates: {result.total_gates}")
        lines.append("")

        lines.append("ITEMS")
        lines.append("-" * 40)
        if result.order_items:
            code_width = max(len(item.code) for item in result.order_items)
            for item in result.order_items:
                lines.append(
                    f"  {item.code:<{code_width}}  {format_quantity(item.quantity):>6}  {item.description}"
                )
        else:
            lines.append("  (No items)")

        if result.notes:
            lines.append("")
            lines.append("NOTES")
            lines.append("-" * 40)
            for note in result.notes:
                lines.append(f"  * {note}")

        lines.append("")
        return "\n".join(lines)


@ExporterRegistry.register("order-csv")
class OrderCsvExporter(TextExporter):
    """Order list as CSV with Code, Description and Quantity columns."""

    format_name: ClassVar[str] = "order-csv"
    file_extension: ClassVar[str] = "csv"

    def export_string(self, result: CalculationResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["Code", "Description", "Quantity"])
        for item in result.order_items:
            writer.writerow([item.code, item.description, format_quantity(item.quantity)])
        return output.getvalue()


@ExporterRegistry.register("order-json")
class OrderJsonExporter(TextExporter):
    """Order list as JSON: {"calc_key": ..., "items": [{code, description, quantity}]}."""

    format_name: ClassVar[str] = "order-json"
    file_extension: ClassVar[str] = "json"

    def export_string(self, result: CalculationResult) -> str:
        data = {
            "calc_key": result.calc_key,
            "items": order_items_to_dicts(result.order_items),
        }
        return json.dumps(data, indent=2)
