"""Application commands (use cases) for balustrade calculation."""

from __future__ import annotations

from typing import Callable

from balustrade.domain import (
    HardwareFamily,
    PanelLayout,
    ResolvedSpacing,
    StructuralSystem,
    aggregate_panels,
    apply_gate,
    build_order_list,
    resolve_spacing,
    solve_panel_layout,
)
from balustrade.domain.services import get_strategy
from balustrade.domain.services.fixings import DOUBLE_DISC_CALCULATORS
from balustrade.domain.services.gate_geometry import clamp_leaf_width, resize_gate
from balustrade.domain.value_objects import DEFAULT_GATE_LEAF_WIDTH_MM

from .dtos import CalculationInput, CalculationResult

# Families whose fixing count depends on spacing, so a per-panel cap applies
_CAPPED_FAMILIES = frozenset({HardwareFamily.SPIGOTS, HardwareFamily.STANDOFFS})

# Tolerance when comparing a gated side against its run
_LENGTH_TOLERANCE_MM = 1e-6


class CalculateLayoutCommand:
    """Command to calculate a compliant panel layout and its order list.

    Runs compliance lookup, per-side panel solving, gate placement, panel
    aggregation and order list building in that order. Engine failures are
    reported as result errors rather than raised.
    """

    def __init__(
        self,
        spacing_resolver: Callable[..., ResolvedSpacing | None] | None = None,
        panel_solver: Callable[..., PanelLayout | None] | None = None,
        order_list_builder: Callable[..., list] | None = None,
    ) -> None:
        self.spacing_resolver = spacing_resolver or resolve_spacing
        self.panel_solver = panel_solver or solve_panel_layout
        self.order_list_builder = order_list_builder or build_order_list

    def execute(self, calculation_input: CalculationInput) -> CalculationResult:
        """Execute the calculation.

        Args:
            calculation_input: Run geometry, glass parameters and options.

        Returns:
            CalculationResult with layouts, gates, panel summary and order
            items, or with errors when the input is invalid, no certified
            spacing exists, or a side cannot be laid out.
        """
        errors = calculation_input.validate()
        if errors:
            return CalculationResult(calc_key=calculation_input.calc_key, errors=errors)

        calc_key = calculation_input.calc_key.strip().lower()
        family = get_strategy(calc_key).family
        system = StructuralSystem.from_fence_type(calculation_input.fence_type)
        side_runs = [float(length) for length in calculation_input.side_lengths_mm]
        result = CalculationResult(
            calc_key=calc_key,
            total_run_mm=sum(side_runs),
            side_runs_mm=side_runs,
        )

        spacing = self.spacing_resolver(
            calc_key,
            system,
            calculation_input.glass_thickness_mm,
            calculation_input.glass_height_mm,
            calculation_input.wind_zone,
            calculation_input.fixing_type,
        )
        description = (
            f"{calc_key} {system.value}, {calculation_input.glass_thickness_mm:g}mm glass, "
            f"{calculation_input.glass_height_mm:g}mm high, zone {calculation_input.wind_zone.upper()}"
        )
        if spacing is None:
            result.errors.append(f"No compliance data for {description}")
            return result
        if not spacing.is_permitted:
            result.spacing = spacing
            result.errors.append(f"Combination not engineered: {description}")
            return result

        result.spacing = spacing
        if not spacing.exact_band:
            result.notes.append(
                f"Height {calculation_input.glass_height_mm:g}mm is outside the certified bands; "
                f"using nearest band {spacing.row.height_min_mm:g}-{spacing.row.height_max_mm:g}mm"
            )
        if spacing.clamped:
            result.notes.append(
                f"Spacing reduced for this zone/fixing: internal {spacing.internal_spacing_mm:g}mm, "
                f"edge {spacing.edge_spacing_mm:g}mm"
            )

        fixing_cap = self._fixing_cap(calculation_input, family)
        for index, run in enumerate(side_runs):
            if run <= 0:
                result.side_layouts.append(None)
                continue
            layout = self.panel_solver(
                run,
                calculation_input.gap_min_mm,
                calculation_input.gap_max_mm,
                calculation_input.max_panel_width_mm,
                calculation_input.panel_step_mm,
                spacing=spacing,
                max_fixings_per_panel=fixing_cap,
                min_panel_width_mm=calculation_input.min_panel_width_mm,
            )
            if layout is None:
                result.errors.append(
                    f"Layout not achievable for side {index + 1} ({run:g}mm) with gaps "
                    f"{calculation_input.gap_min_mm:g}-{calculation_input.gap_max_mm:g}mm"
                )
            result.side_layouts.append(layout)
        if result.errors:
            return result

        result.all_panels_mm = [
            width for layout in result.side_layouts if layout is not None for width in layout.panel_widths_mm
        ]

        self._place_gates(calculation_input, result)

        aggregate = aggregate_panels(
            result.all_panels_mm,
            family,
            spacing,
            calculation_input.spigot_mode,
            calc_key=calc_key,
        )
        result.panels_summary = aggregate.summary
        result.panel_groups = list(aggregate.groups)
        result.total_fixings = aggregate.total_fixings
        result.fixing_label = aggregate.fixing_label
        if calc_key in DOUBLE_DISC_CALCULATORS:
            result.notes.append("Two discs are fitted at every fixing position; totals count discs")

        result.order_items = self.order_list_builder(calc_key, calculation_input, result)
        return result

    def _fixing_cap(self, calculation_input: CalculationInput, family: HardwareFamily) -> int | None:
        if family not in _CAPPED_FAMILIES:
            return None
        forced = calculation_input.spigot_mode.forced if family is HardwareFamily.SPIGOTS else None
        caps = [cap for cap in (calculation_input.max_fixings_per_panel, forced) if cap is not None]
        return min(caps) if caps else None

    def _place_gates(self, calculation_input: CalculationInput, result: CalculationResult) -> None:
        """Apply each side's gate to its layout, recording specs and offsets."""
        leaf_override = calculation_input.gate_leaf_width_mm
        result.gate_leaf_width_mm = clamp_leaf_width(
            leaf_override if leaf_override is not None else DEFAULT_GATE_LEAF_WIDTH_MM
        )

        for index, layout in enumerate(result.side_layouts):
            gate = calculation_input.side_gates[index] if index < len(calculation_input.side_gates) else None
            if gate is None or not gate.enabled or layout is None:
                result.side_gates.append(gate if layout is not None else None)
                result.side_gate_offsets.append(None)
                continue
            if leaf_override is not None:
                gate = resize_gate(gate, leaf_override)
            gate, offsets = apply_gate(layout, gate)
            result.side_gates.append(gate)
            result.side_gate_offsets.append(offsets)
            if offsets.total_length_mm > layout.adjusted_length_mm + _LENGTH_TOLERANCE_MM:
                result.notes.append(
                    f"Gate on side {index + 1} extends the side to {offsets.total_length_mm:.1f}mm "
                    f"(run {layout.adjusted_length_mm:g}mm)"
                )
