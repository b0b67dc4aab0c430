"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from balustrade.domain import (
    GateOffsets,
    GateSpec,
    OrderItem,
    PanelLayout,
    PanelGroup,
    ResolvedSpacing,
    Shape,
    SpigotsPerPanel,
    WindZone,
)
from balustrade.domain.services import SPACING_STRATEGIES
from balustrade.domain.value_objects import DEFAULT_GATE_LEAF_WIDTH_MM

# Side count each fixed shape requires
SHAPE_SIDE_COUNTS = {
    Shape.INLINE: 1,
    Shape.CORNER: 2,
    Shape.U: 3,
    Shape.ENCLOSED: 4,
}


@dataclass
class CalculationInput:
    """Input DTO for a balustrade calculation.

    Attributes:
        calc_key: Hardware calculator, e.g. "sp12".
        side_lengths_mm: Length of each side of the run.
        shape: Plan shape (inline, corner, u, enclosed, custom).
        fence_type: Free-text fence type; anything mentioning "pool" is a
            pool fence.
        glass_thickness_mm: Glass thickness.
        glass_height_mm: Glass height.
        wind_zone: Wind zone code (L, M, H, VH, EH).
        fixing_type: Fixing description, e.g. "Concrete".
        finish: Hardware finish, e.g. "SSS" or "Black".
        handrail: Handrail code, or None / "none" for no handrail.
        disc_head: Disc head or clamp variant for standoff systems.
        spigots_per_panel: "auto", "2" or "3".
        side_gates: Optional gate per side, aligned with side_lengths_mm.
        gate_leaf_width_mm: Leaf width applied to every enabled gate; None
            keeps each gate's own width.
        gap_min_mm: Smallest gap between panels.
        gap_max_mm: Largest gap between panels.
        max_panel_width_mm: Widest panel allowed.
        panel_step_mm: Panel width increment (0 searches in 1mm steps).
        min_panel_width_mm: Narrowest panel allowed.
        max_fixings_per_panel: Optional cap on fixings per panel.
    """

    calc_key: str
    side_lengths_mm: list[float]
    shape: str = "inline"
    fence_type: str = "balustrade"
    glass_thickness_mm: float = 12.0
    glass_height_mm: float = 1000.0
    wind_zone: str = "L"
    fixing_type: str | None = None
    finish: str | None = None
    handrail: str | None = None
    disc_head: str | None = None
    spigots_per_panel: str = "auto"
    side_gates: list[GateSpec | None] = field(default_factory=list)
    gate_leaf_width_mm: float | None = None
    gap_min_mm: float = 10.0
    gap_max_mm: float = 30.0
    max_panel_width_mm: float = 1500.0
    panel_step_mm: float = 10.0
    min_panel_width_mm: float = 200.0
    max_fixings_per_panel: int | None = None

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []

        if self.calc_key.strip().lower() not in SPACING_STRATEGIES:
            errors.append(f"Unknown calculator: '{self.calc_key}'")

        valid_shapes = [s.value for s in Shape]
        if self.shape not in valid_shapes:
            errors.append(f"Shape must be one of: {', '.join(valid_shapes)}")
        elif Shape(self.shape) in SHAPE_SIDE_COUNTS:
            expected = SHAPE_SIDE_COUNTS[Shape(self.shape)]
            if len(self.side_lengths_mm) != expected:
                errors.append(f"Shape '{self.shape}' requires {expected} side length(s)")

        if not self.side_lengths_mm:
            errors.append("At least one side length is required")
        elif any(length < 0 for length in self.side_lengths_mm):
            errors.append("Side lengths cannot be negative")
        elif not any(length > 0 for length in self.side_lengths_mm):
            errors.append("At least one side length must be positive")

        if self.glass_thickness_mm <= 0:
            errors.append("Glass thickness must be positive")
        if self.glass_height_mm <= 0:
            errors.append("Glass height must be positive")

        valid_zones = [z.value for z in WindZone]
        if str(self.wind_zone).strip().upper() not in valid_zones:
            errors.append(f"Wind zone must be one of: {', '.join(valid_zones)}")

        valid_modes = [m.value for m in SpigotsPerPanel]
        if self.spigots_per_panel not in valid_modes:
            errors.append(f"Spigots per panel must be one of: {', '.join(valid_modes)}")

        if len(self.side_gates) > len(self.side_lengths_mm):
            errors.append("More gates than sides")

        if self.gap_min_mm < 0:
            errors.append("Minimum gap cannot be negative")
        if self.gap_min_mm > self.gap_max_mm:
            errors.append("Minimum gap cannot exceed maximum gap")
        if self.max_panel_width_mm <= 0:
            errors.append("Max panel width must be positive")
        if self.panel_step_mm < 0:
            errors.append("Panel step cannot be negative")
        if self.min_panel_width_mm <= 0:
            errors.append("Min panel width must be positive")
        elif self.min_panel_width_mm > self.max_panel_width_mm:
            errors.append("Min panel width cannot exceed max panel width")
        if self.max_fixings_per_panel is not None and self.max_fixings_per_panel < 2:
            errors.append("Max fixings per panel must be at least 2")

        return errors

    @property
    def spigot_mode(self) -> SpigotsPerPanel:
        return SpigotsPerPanel(self.spigots_per_panel)


@dataclass
class CalculationResult:
    """Output DTO containing the calculated layout and order list.

    Attributes:
        calc_key: Calculator the result was produced for.
        total_run_mm: Sum of all side lengths.
        side_runs_mm: Length of each side.
        spacing: Resolved PS1 spacing.
        side_layouts: Solved layout per side (None for zero-length sides).
        all_panels_mm: Every panel width across all sides.
        panels_summary: Grouped panel summary, one line per width.
        panel_groups: Panels grouped by width with fixing offsets.
        total_fixings: Total fixing points (discs for double-disc standoffs).
        fixing_label: Noun for the fixing type ("spigot", "post", ...).
        side_gates: Re-clamped gate per side.
        side_gate_offsets: Derived gate offsets per side.
        gate_leaf_width_mm: Leaf width applied to enabled gates.
        order_items: Aggregated order list.
        notes: Informational messages about the calculation.
        errors: Error messages if the calculation failed.
    """

    calc_key: str = ""
    total_run_mm: float = 0.0
    side_runs_mm: list[float] = field(default_factory=list)
    spacing: ResolvedSpacing | None = None
    side_layouts: list[PanelLayout | None] = field(default_factory=list)
    all_panels_mm: list[float] = field(default_factory=list)
    panels_summary: str = ""
    panel_groups: list[PanelGroup] = field(default_factory=list)
    total_fixings: int = 0
    fixing_label: str = "spigot"
    side_gates: list[GateSpec | None] = field(default_factory=list)
    side_gate_offsets: list[GateOffsets | None] = field(default_factory=list)
    gate_leaf_width_mm: float = DEFAULT_GATE_LEAF_WIDTH_MM
    order_items: list[OrderItem] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the calculation completed successfully."""
        return len(self.errors) == 0

    @property
    def total_panels(self) -> int:
        return len(self.all_panels_mm)

    @property
    def total_gates(self) -> int:
        return sum(1 for gate in self.side_gates if gate is not None and gate.enabled)
