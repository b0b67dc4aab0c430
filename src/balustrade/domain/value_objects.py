"""Value objects for glass balustrade configuration.

All measurements are millimetres. Every value object here is immutable and
created fresh for each calculation pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Glass thickness comparison tolerance (laminated values such as 13.52mm)
THICKNESS_TOLERANCE_MM: float = 0.01

# Table value marking a combination as not permitted
DISALLOWED_SPACING_MM: float = 999.0

# Narrowest glass panel the solver will propose
MIN_PANEL_WIDTH_MM: float = 200.0

# Gate leaf limits
DEFAULT_GATE_LEAF_WIDTH_MM: float = 890.0
MIN_GATE_LEAF_WIDTH_MM: float = 350.0
MAX_GATE_LEAF_WIDTH_MM: float = 1000.0


class StructuralSystem(str, Enum):
    """Structural use of a glass run, as certified in PS1 tables."""

    BALUSTRADE = "balustrade"
    POOL = "pool"

    @classmethod
    def from_fence_type(cls, fence_type: str | None) -> StructuralSystem:
        """Derive the structural system from a free-text fence type.

        Any fence type mentioning "pool" is a pool fence; everything else
        (including missing values) is treated as a balustrade.
        """
        if fence_type and "pool" in fence_type.lower():
            return cls.POOL
        return cls.BALUSTRADE


class WindZone(str, Enum):
    """Wind load category: low through extra high."""

    L = "L"
    M = "M"
    H = "H"
    VH = "VH"
    EH = "EH"

    @classmethod
    def parse(cls, raw: str | WindZone) -> WindZone:
        """Parse a zone code case-insensitively.

        Raises:
            ValueError: If the code is not a known wind zone.
        """
        if isinstance(raw, WindZone):
            return raw
        return cls(str(raw).strip().upper())


class HardwareFamily(str, Enum):
    """Hardware family a calculator belongs to."""

    SPIGOTS = "spigots"
    STANDOFFS = "standoffs"
    CHANNEL = "channel"
    POSTS = "posts"


class Shape(str, Enum):
    """Plan shape of the balustrade run."""

    INLINE = "inline"
    CORNER = "corner"
    U = "u"
    ENCLOSED = "enclosed"
    CUSTOM = "custom"

    @property
    def corner_count(self) -> int:
        """Number of 90 degree corners in the shape."""
        return {Shape.CORNER: 1, Shape.U: 2, Shape.ENCLOSED: 4}.get(self, 0)


class FinishCode(str, Enum):
    """Canonical hardware finish codes used in product codes.

    Attributes:
        SS: Satin stainless
        PS: Polished stainless
        BK: Black
        PC: Powdercoat (supplied stainless, coated as a surcharge)
        MILL: Mill finish aluminium
    """

    SS = "SS"
    PS = "PS"
    BK = "BK"
    PC = "PC"
    MILL = "MILL"


class SpigotsPerPanel(str, Enum):
    """Fixing count mode per panel."""

    AUTO = "auto"
    TWO = "2"
    THREE = "3"

    @property
    def forced(self) -> int | None:
        """Forced fixing count, or None in auto mode."""
        if self is SpigotsPerPanel.AUTO:
            return None
        return int(self.value)


class SegmentKind(str, Enum):
    """Kinds of segment along a side elevation."""

    GAP = "gap"
    PANEL = "panel"
    HINGE_GAP = "hinge_gap"
    GATE_LEAF = "gate_leaf"
    LATCH_GAP = "latch_gap"


@dataclass(frozen=True)
class SpacingRow:
    """One row of a PS1 spacing table.

    Attributes:
        structural_system: Balustrade or pool fence.
        thickness_mm: Glass thickness the row is certified for.
        height_min_mm: Lower bound of the height band (inclusive).
        height_max_mm: Upper bound of the height band (inclusive).
        zone: Wind zone.
        internal_spacing_mm: Maximum distance between adjacent fixings.
        edge_spacing_mm: Maximum distance from a panel edge to its nearest fixing.
    """

    structural_system: StructuralSystem
    thickness_mm: float
    height_min_mm: float
    height_max_mm: float
    zone: WindZone
    internal_spacing_mm: float
    edge_spacing_mm: float

    @property
    def midpoint_mm(self) -> float:
        """Midpoint of the height band."""
        return (self.height_min_mm + self.height_max_mm) / 2

    def contains_height(self, height_mm: float) -> bool:
        """Check whether the height band contains the given height."""
        return self.height_min_mm <= height_mm <= self.height_max_mm

    def matches(
        self,
        structural_system: StructuralSystem,
        thickness_mm: float,
        zone: WindZone,
    ) -> bool:
        """Check the row key, ignoring the height band."""
        return (
            self.structural_system == structural_system
            and abs(self.thickness_mm - thickness_mm) < THICKNESS_TOLERANCE_MM
            and self.zone == zone
        )


@dataclass(frozen=True)
class ResolvedSpacing:
    """Spacing chosen for one calculation.

    Holds the selected table row alongside the effective spacing values, which
    may be lower than the row's after family clamp rules.

    Attributes:
        calc_key: Calculator the spacing was resolved for.
        row: The selected table row.
        internal_spacing_mm: Effective internal spacing.
        edge_spacing_mm: Effective edge spacing.
        exact_band: False when the row was chosen by nearest-midpoint fallback.
    """

    calc_key: str
    row: SpacingRow
    internal_spacing_mm: float
    edge_spacing_mm: float
    exact_band: bool = True

    @property
    def clamped(self) -> bool:
        """True when a clamp rule changed the row's values."""
        return (
            self.internal_spacing_mm != self.row.internal_spacing_mm
            or self.edge_spacing_mm != self.row.edge_spacing_mm
        )

    @property
    def is_permitted(self) -> bool:
        """False when the table marks the combination as not permitted."""
        return self.row.internal_spacing_mm != DISALLOWED_SPACING_MM


@dataclass(frozen=True)
class PanelLayout:
    """Uniform-gap panel arrangement along one side."""

    panel_widths_mm: tuple[float, ...]
    gap_mm: float
    adjusted_length_mm: float

    def __post_init__(self) -> None:
        if self.gap_mm < 0:
            raise ValueError("Gap must be non-negative")
        if any(width <= 0 for width in self.panel_widths_mm):
            raise ValueError("Panel widths must be positive")

    @property
    def panel_count(self) -> int:
        return len(self.panel_widths_mm)

    @property
    def balance_error(self) -> float:
        """Difference between the reconstructed length and the adjusted length."""
        rebuilt = sum(self.panel_widths_mm) + self.gap_mm * (self.panel_count + 1)
        return abs(rebuilt - self.adjusted_length_mm)


@dataclass(frozen=True)
class GateSpec:
    """Gate placed on one side of the run.

    Attributes:
        enabled: Whether the gate is active.
        panel_boundary_index: Boundary the gate sits at, 0 (left end) to
            panel count (right end).
        hinge_on_left: Hinge side of the leaf.
        leaf_width_mm: Gate leaf width.
    """

    enabled: bool = True
    panel_boundary_index: int = 0
    hinge_on_left: bool = True
    leaf_width_mm: float = DEFAULT_GATE_LEAF_WIDTH_MM


@dataclass(frozen=True)
class GateSegment:
    """A positioned segment along a side elevation."""

    kind: SegmentKind
    start_mm: float
    width_mm: float
    panel_index: int | None = None

    @property
    def end_mm(self) -> float:
        return self.start_mm + self.width_mm


@dataclass(frozen=True)
class GateOffsets:
    """Derived placement of a gate within a side.

    Attributes:
        segments: Gaps, panels and gate pieces in left-to-right order.
        hinge_to_glass: Hinge fixes to a neighbouring panel (else to a wall).
        latch_to_glass: Latch fixes to a neighbouring panel (else to a wall).
        omit_leading_gap: The gate replaces the leading gap of the side.
        gate_start_mm: Offset of the first gate segment from the side start.
        footprint_mm: Hinge gap + leaf + latch gap.
    """

    segments: tuple[GateSegment, ...]
    hinge_to_glass: bool
    latch_to_glass: bool
    omit_leading_gap: bool
    gate_start_mm: float
    footprint_mm: float

    @property
    def total_length_mm(self) -> float:
        """Length of the side including the gate."""
        if not self.segments:
            return 0.0
        return self.segments[-1].end_mm


@dataclass(frozen=True)
class GateHardwareTally:
    """Counts of gate hinge and latch fixings across all sides."""

    total_gates: int = 0
    hinge_glass: int = 0
    hinge_wall: int = 0
    latch_glass: int = 0
    latch_wall: int = 0


@dataclass(frozen=True)
class OrderItem:
    """A coded order line.

    Attributes:
        code: Product code, unique within an order list.
        description: Human-readable description derived from the code.
        quantity: Quantity rounded to two decimals.
    """

    code: str
    description: str
    quantity: float


@dataclass(frozen=True)
class PanelGroup:
    """Panels sharing one width (to two decimals)."""

    count: int
    width_mm: float
    fixings_each: int | None
    positions_mm: tuple[float, ...] = ()


@dataclass(frozen=True)
class PanelAggregate:
    """Grouped panel summary across all sides."""

    groups: tuple[PanelGroup, ...]
    total_fixings: int
    total_panels: int
    fixing_label: str = "spigot"

    @property
    def summary_lines(self) -> list[str]:
        lines = []
        for group in self.groups:
            line = f"{group.count} × @{group.width_mm:.2f} mm"
            if group.fixings_each is not None:
                noun = self.fixing_label if group.fixings_each == 1 else f"{self.fixing_label}s"
                line += f" ({group.fixings_each} {noun} each)"
            lines.append(line)
        return lines

    @property
    def summary(self) -> str:
        return "\n".join(self.summary_lines)
