"""Domain layer - value objects, reference data and calculation engines."""

from .services import (
    aggregate_panels,
    apply_gate,
    build_order_list,
    resolve_spacing,
    solve_panel_layout,
    spigots_for_panel,
)
from .value_objects import (
    FinishCode,
    GateOffsets,
    GateSpec,
    HardwareFamily,
    OrderItem,
    PanelAggregate,
    PanelGroup,
    PanelLayout,
    ResolvedSpacing,
    Shape,
    SpacingRow,
    SpigotsPerPanel,
    StructuralSystem,
    WindZone,
)

__all__ = [
    "FinishCode",
    "GateOffsets",
    "GateSpec",
    "HardwareFamily",
    "OrderItem",
    "PanelAggregate",
    "PanelGroup",
    "PanelLayout",
    "ResolvedSpacing",
    "Shape",
    "SpacingRow",
    "SpigotsPerPanel",
    "StructuralSystem",
    "WindZone",
    "aggregate_panels",
    "apply_gate",
    "build_order_list",
    "resolve_spacing",
    "solve_panel_layout",
    "spigots_for_panel",
]
