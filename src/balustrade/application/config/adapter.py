"""Adapter to convert BalustradeConfiguration into the calculation DTO.

The configuration schema nests layout, solver and output sections; the
CalculateLayoutCommand works from a flat CalculationInput with one gate slot
per side.
"""

from balustrade.application.config.schema import BalustradeConfiguration, GateConfig
from balustrade.application.dtos import CalculationInput
from balustrade.domain.value_objects import DEFAULT_GATE_LEAF_WIDTH_MM, GateSpec


def config_to_gate_spec(gate: GateConfig) -> GateSpec:
    """Convert one gate configuration to a domain GateSpec."""
    return GateSpec(
        enabled=gate.enabled,
        panel_boundary_index=gate.boundary,
        hinge_on_left=gate.hinge_on_left,
        leaf_width_mm=gate.leaf_width_mm if gate.leaf_width_mm is not None else DEFAULT_GATE_LEAF_WIDTH_MM,
    )


def config_to_side_gates(config: BalustradeConfiguration) -> list[GateSpec | None]:
    """Lay the configured gates out as one optional GateSpec per side."""
    side_gates: list[GateSpec | None] = [None] * len(config.layout.side_lengths_mm)
    for gate in config.layout.gates:
        side_gates[gate.side] = config_to_gate_spec(gate)
    return side_gates


def config_to_input(config: BalustradeConfiguration) -> CalculationInput:
    """Convert a BalustradeConfiguration to a CalculationInput.

    Args:
        config: A validated BalustradeConfiguration instance

    Returns:
        CalculationInput ready for CalculateLayoutCommand

    Example:
        >>> config = load_config(Path("deck.json"))
        >>> result = CalculateLayoutCommand().execute(config_to_input(config))
    """
    layout = config.layout
    solver = config.solver
    return CalculationInput(
        calc_key=layout.calc_key,
        side_lengths_mm=list(layout.side_lengths_mm),
        shape=layout.shape.value,
        fence_type=layout.fence_type,
        glass_thickness_mm=layout.glass_thickness_mm,
        glass_height_mm=layout.glass_height_mm,
        wind_zone=layout.wind_zone.value,
        fixing_type=layout.fixing_type,
        finish=layout.finish,
        handrail=layout.handrail,
        disc_head=layout.disc_head,
        spigots_per_panel=layout.spigots_per_panel.value,
        side_gates=config_to_side_gates(config),
        gate_leaf_width_mm=layout.gate_leaf_width_mm,
        gap_min_mm=solver.gap_min_mm,
        gap_max_mm=solver.gap_max_mm,
        max_panel_width_mm=solver.max_panel_width_mm,
        panel_step_mm=solver.panel_step_mm,
        min_panel_width_mm=solver.min_panel_width_mm,
        max_fixings_per_panel=solver.max_fixings_per_panel,
    )
