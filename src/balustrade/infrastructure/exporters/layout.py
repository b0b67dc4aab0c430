"""Full calculation result exporter (layout-json)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, ClassVar

from balustrade.infrastructure.exporters.base import ExporterRegistry, TextExporter
from balustrade.infrastructure.exporters.order import order_items_to_dicts

if TYPE_CHECKING:
    from balustrade.application.dtos import CalculationResult
    from balustrade.domain.value_objects import GateOffsets, GateSpec, PanelLayout, ResolvedSpacing


def spacing_to_dict(spacing: ResolvedSpacing | None) -> dict[str, Any] | None:
    if spacing is None:
        return None
    return {
        "calc_key": spacing.calc_key,
        "internal_spacing_mm": spacing.internal_spacing_mm,
        "edge_spacing_mm": spacing.edge_spacing_mm,
        "exact_band": spacing.exact_band,
        "clamped": spacing.clamped,
        "row": {
            "structural_system": spacing.row.structural_system.value,
            "thickness_mm": spacing.row.thickness_mm,
            "height_min_mm": spacing.row.height_min_mm,
            "height_max_mm": spacing.row.height_max_mm,
            "zone": spacing.row.zone.value,
            "internal_spacing_mm": spacing.row.internal_spacing_mm,
            "edge_spacing_mm": spacing.row.edge_spacing_mm,
        },
    }


def layout_to_dict(layout: PanelLayout | None) -> dict[str, Any] | None:
    if layout is None:
        return None
    return {
        "panel_widths_mm": list(layout.panel_widths_mm),
        "gap_mm": layout.gap_mm,
        "adjusted_length_mm": layout.adjusted_length_mm,
        "panel_count": layout.panel_count,
    }


def gate_to_dict(gate: GateSpec | None, offsets: GateOffsets | None) -> dict[str, Any] | None:
    if gate is None:
        return None
    data: dict[str, Any] = {
        "enabled": gate.enabled,
        "panel_boundary_index": gate.panel_boundary_index,
        "hinge_on_left": gate.hinge_on_left,
        "leaf_width_mm": gate.leaf_width_mm,
    }
    if offsets is not None:
        data["offsets"] = {
            "hinge_to_glass": offsets.hinge_to_glass,
            "latch_to_glass": offsets.latch_to_glass,
            "omit_leading_gap": offsets.omit_leading_gap,
            "gate_start_mm": offsets.gate_start_mm,
            "footprint_mm": offsets.footprint_mm,
            "total_length_mm": offsets.total_length_mm,
            "segments": [
                {
                    "kind": segment.kind.value,
                    "start_mm": segment.start_mm,
                    "width_mm": segment.width_mm,
                    "panel_index": segment.panel_index,
                }
                for segment in offsets.segments
            ],
        }
    return data


def result_to_dict(result: CalculationResult) -> dict[str, Any]:
    """Convert a calculation result to a JSON-serializable dictionary."""
    sides = []
    for index, run in enumerate(result.side_runs_mm):
        layout = result.side_layouts[index] if index < len(result.side_layouts) else None
        gate = result.side_gates[index] if index < len(result.side_gates) else None
        offsets = result.side_gate_offsets[index] if index < len(result.side_gate_offsets) else None
        sides.append(
            {
                "run_mm": run,
                "layout": layout_to_dict(layout),
                "gate": gate_to_dict(gate, offsets),
            }
        )

    return {
        "calc_key": result.calc_key,
        "total_run_mm": result.total_run_mm,
        "spacing": spacing_to_dict(result.spacing),
        "sides": sides,
        "all_panels_mm": list(result.all_panels_mm),
        "total_panels": result.total_panels,
        "panels_summary": result.panels_summary,
        "panel_groups": [
            {
                "count": group.count,
                "width_mm": group.width_mm,
                "fixings_each": group.fixings_each,
                "fixing_positions_mm": list(group.positions_mm),
            }
            for group in result.panel_groups
        ],
        "total_fixings": result.total_fixings,
        "fixing_label": result.fixing_label,
        "total_gates": result.total_gates,
        "gate_leaf_width_mm": result.gate_leaf_width_mm,
        "order_items": order_items_to_dicts(result.order_items),
        "notes": list(result.notes),
        "errors": list(result.errors),
    }


@ExporterRegistry.register("layout-json")
class LayoutJsonExporter(TextExporter):
    """Complete calculation result: spacing, per-side layouts, gates and order list."""

    format_name: ClassVar[str] = "layout-json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export_string(self, result: CalculationResult) -> str:
        return json.dumps(result_to_dict(result), indent=self.indent)
