"""Domain services for balustrade layout and ordering.

This package provides the calculation engines:
- Compliance lookup against PS1 spacing tables
- Panel layout solving per side
- Gate placement and hinge/latch classification
- Fixing-point counting and panel aggregation
- Order list derivation
"""

from .compliance import SPACING_STRATEGIES, SpacingStrategy, find_row, get_strategy, resolve_spacing
from .fixings import aggregate_panels, fixings_for_panel, spigot_positions
from .gate_geometry import (
    apply_gate,
    classify_gate,
    clamp_leaf_width,
    flip_gate,
    move_gate,
    reclamp_gate,
    resize_gate,
    spigots_for_panel,
    tally_gate_hardware,
)
from .order_list import (
    OrderContext,
    build_order_list,
    describe,
    normalize_finish,
    normalize_fixing,
    normalize_handrail,
    push_item,
)
from .panel_solver import PANEL_COUNT_CEILING, solve_panel_layout

__all__ = [
    # Compliance
    "SPACING_STRATEGIES",
    "SpacingStrategy",
    "find_row",
    "get_strategy",
    "resolve_spacing",
    # Panel solver
    "PANEL_COUNT_CEILING",
    "solve_panel_layout",
    # Gate geometry
    "apply_gate",
    "classify_gate",
    "clamp_leaf_width",
    "flip_gate",
    "move_gate",
    "reclamp_gate",
    "resize_gate",
    "spigots_for_panel",
    "tally_gate_hardware",
    # Fixings
    "aggregate_panels",
    "fixings_for_panel",
    "spigot_positions",
    # Ordering
    "OrderContext",
    "build_order_list",
    "describe",
    "normalize_finish",
    "normalize_fixing",
    "normalize_handrail",
    "push_item",
]
