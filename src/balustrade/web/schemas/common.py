"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from balustrade.domain.value_objects import MAX_GATE_LEAF_WIDTH_MM, MIN_GATE_LEAF_WIDTH_MM


class GateSchema(BaseModel):
    """Gate placement on one side."""

    side: int = Field(..., ge=0, description="Zero-based side index")
    boundary: int = Field(default=0, ge=0, description="Panel boundary (0 = left end)")
    hinge_on_left: bool = Field(default=True, description="Hinge on the left of the leaf")
    leaf_width_mm: float | None = Field(
        default=None,
        ge=MIN_GATE_LEAF_WIDTH_MM,
        le=MAX_GATE_LEAF_WIDTH_MM,
        description="Gate leaf width in mm",
    )
    enabled: bool = Field(default=True, description="Whether the gate is active")


class SpacingRowSchema(BaseModel):
    """PS1 table row the spacing was taken from."""

    structural_system: str = Field(..., description="balustrade or pool")
    thickness_mm: float = Field(..., description="Glass thickness in mm")
    height_min_mm: float = Field(..., description="Band lower bound in mm")
    height_max_mm: float = Field(..., description="Band upper bound in mm")
    zone: str = Field(..., description="Wind zone")
    internal_spacing_mm: float = Field(..., description="Tabled internal spacing in mm")
    edge_spacing_mm: float = Field(..., description="Tabled edge spacing in mm")


class SpacingSchema(BaseModel):
    """Resolved fixing spacing."""

    calc_key: str = Field(..., description="Calculator key")
    internal_spacing_mm: float = Field(..., description="Maximum spacing between fixings in mm")
    edge_spacing_mm: float = Field(..., description="Maximum fixing distance from a panel edge in mm")
    exact_band: bool = Field(..., description="False when the nearest band was used")
    clamped: bool = Field(..., description="True when zone or fixing rules reduced the spacing")
    row: SpacingRowSchema = Field(..., description="Source table row")


class PanelLayoutSchema(BaseModel):
    """Solved panel layout for one run."""

    panel_widths_mm: list[float] = Field(..., description="Panel widths in mm, left to right")
    gap_mm: float = Field(..., description="Gap between and around panels in mm")
    adjusted_length_mm: float = Field(..., description="Panels plus gaps in mm")
    panel_count: int = Field(..., description="Number of panels")


class GateSegmentSchema(BaseModel):
    """Positioned segment along a side elevation."""

    kind: str = Field(..., description="gap, panel, hinge_gap, gate_leaf or latch_gap")
    start_mm: float = Field(..., description="Offset from the side start in mm")
    width_mm: float = Field(..., description="Segment width in mm")
    panel_index: int | None = Field(default=None, description="Panel index for panel segments")


class GateOffsetsSchema(BaseModel):
    """Derived gate placement."""

    hinge_to_glass: bool = Field(..., description="Hinge fixes to glass (else wall)")
    latch_to_glass: bool = Field(..., description="Latch fixes to glass (else wall)")
    omit_leading_gap: bool = Field(..., description="Gate replaces the side's leading gap")
    gate_start_mm: float = Field(..., description="Offset of the gate from the side start in mm")
    footprint_mm: float = Field(..., description="Hinge gap + leaf + latch gap in mm")
    total_length_mm: float = Field(..., description="Side length including the gate in mm")
    segments: list[GateSegmentSchema] = Field(default_factory=list, description="Elevation segments")


class SideGateSchema(BaseModel):
    """Gate as placed on a side."""

    enabled: bool = Field(..., description="Whether the gate is active")
    panel_boundary_index: int = Field(..., description="Boundary the gate sits at")
    hinge_on_left: bool = Field(..., description="Hinge on the left of the leaf")
    leaf_width_mm: float = Field(..., description="Leaf width in mm")
    offsets: GateOffsetsSchema | None = Field(default=None, description="Derived placement")


class SideSchema(BaseModel):
    """One side of the run."""

    run_mm: float = Field(..., description="Side length in mm")
    layout: PanelLayoutSchema | None = Field(default=None, description="Solved layout")
    gate: SideGateSchema | None = Field(default=None, description="Gate on this side")


class OrderItemSchema(BaseModel):
    """Order list line."""

    code: str = Field(..., description="Product code")
    description: str = Field(..., description="Product description")
    quantity: float = Field(..., description="Quantity")
