"""Exporter framework for calculation results.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- order-text: Human-readable order list with a layout summary
- order-csv: Order list as CSV (Code, Description, Quantity)
- order-json: Order list as JSON
- layout-json: Complete calculation result

Usage:
    from balustrade.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    manager = ExportManager(output_dir=Path("./output"))
    paths = manager.export_all(["order-csv", "layout-json"], result, project_name="deck")
"""

from balustrade.infrastructure.exporters.base import (
    Exporter,
    ExportError,
    ExporterRegistry,
    ExportManager,
    TextExporter,
)
from balustrade.infrastructure.exporters.layout import LayoutJsonExporter, result_to_dict
from balustrade.infrastructure.exporters.order import (
    OrderCsvExporter,
    OrderJsonExporter,
    OrderTextExporter,
    order_items_to_dicts,
)

__all__ = [
    "Exporter",
    "ExportError",
    "ExporterRegistry",
    "ExportManager",
    "TextExporter",
    "LayoutJsonExporter",
    "OrderCsvExporter",
    "OrderJsonExporter",
    "OrderTextExporter",
    "order_items_to_dicts",
    "result_to_dict",
]
