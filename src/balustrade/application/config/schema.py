"""Pydantic configuration schema models for balustrade projects.

This module defines the configuration schema for JSON-based project files.
It uses Pydantic v2 for validation and serialization.

The Shape, WindZone and SpigotsPerPanel enums are reused from the domain layer
to ensure consistency and avoid duplication.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from balustrade.application.dtos import SHAPE_SIDE_COUNTS
from balustrade.domain.services import SPACING_STRATEGIES
from balustrade.domain.value_objects import (
    MAX_GATE_LEAF_WIDTH_MM,
    MIN_GATE_LEAF_WIDTH_MM,
    Shape,
    SpigotsPerPanel,
    WindZone,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with layout, solver and output sections
# Version 1.1: Added per-side gates and global gate leaf width
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class GateConfig(BaseModel):
    """Configuration for a gate on one side of the run.

    Attributes:
        side: Zero-based index of the side the gate is on.
        boundary: Panel boundary the gate sits at (0 = left end).
        hinge_on_left: Whether the hinge is on the left of the leaf.
        leaf_width_mm: Leaf width; falls back to the layout-wide width.
        enabled: Whether the gate is active.
    """

    model_config = ConfigDict(extra="forbid")

    side: int = Field(..., ge=0, description="Zero-based side index")
    boundary: int = Field(default=0, ge=0, description="Panel boundary index")
    hinge_on_left: bool = True
    leaf_width_mm: float | None = Field(
        default=None,
        ge=MIN_GATE_LEAF_WIDTH_MM,
        le=MAX_GATE_LEAF_WIDTH_MM,
        description="Gate leaf width in mm",
    )
    enabled: bool = True


class LayoutConfig(BaseModel):
    """Run geometry, glass parameters and hardware options.

    Attributes:
        calc_key: Hardware calculator (e.g., "sp12", "sd50", "vortex").
        shape: Plan shape of the run.
        side_lengths_mm: Length of each side in mm.
        fence_type: Balustrade or pool fence.
        glass_thickness_mm: Glass thickness in mm.
        glass_height_mm: Glass height in mm.
        wind_zone: Wind zone code.
        fixing_type: Fixing substrate description.
        finish: Hardware finish.
        handrail: Handrail code, or None for no handrail.
        disc_head: Disc head or clamp variant for standoff systems.
        spigots_per_panel: Fixing count mode per panel.
        gates: Gates placed on the run.
        gate_leaf_width_mm: Leaf width applied to every gate.
    """

    model_config = ConfigDict(extra="forbid")

    calc_key: str = Field(..., min_length=1)
    shape: Shape = Shape.INLINE
    side_lengths_mm: list[float] = Field(..., min_length=1)
    fence_type: str = "balustrade"
    glass_thickness_mm: float = Field(..., gt=0)
    glass_height_mm: float = Field(..., gt=0)
    wind_zone: WindZone
    fixing_type: str | None = None
    finish: str | None = None
    handrail: str | None = None
    disc_head: str | None = None
    spigots_per_panel: SpigotsPerPanel = SpigotsPerPanel.AUTO
    gates: list[GateConfig] = Field(default_factory=list)
    gate_leaf_width_mm: float | None = Field(
        default=None,
        ge=MIN_GATE_LEAF_WIDTH_MM,
        le=MAX_GATE_LEAF_WIDTH_MM,
    )

    @field_validator("calc_key")
    @classmethod
    def validate_calc_key(cls, v: str) -> str:
        """Normalize the calculator key and check it is known."""
        key = v.strip().lower()
        if key not in SPACING_STRATEGIES:
            raise ValueError(f"Unknown calculator '{v}'. Available: {', '.join(sorted(SPACING_STRATEGIES))}")
        return key

    @field_validator("wind_zone", mode="before")
    @classmethod
    def normalize_wind_zone(cls, v: Any) -> Any:
        """Accept lower-case zone codes."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("spigots_per_panel", mode="before")
    @classmethod
    def normalize_spigots_per_panel(cls, v: Any) -> Any:
        """Accept integer fixing counts (2, 3) as well as strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("side_lengths_mm")
    @classmethod
    def validate_side_lengths(cls, v: list[float]) -> list[float]:
        """Validate side lengths are non-negative with at least one positive."""
        if any(length < 0 for length in v):
            raise ValueError("Side lengths cannot be negative")
        if not any(length > 0 for length in v):
            raise ValueError("At least one side length must be positive")
        return v

    @model_validator(mode="after")
    def validate_sides_and_gates(self) -> "LayoutConfig":
        """Check side count against the shape and gate side indices."""
        expected = SHAPE_SIDE_COUNTS.get(self.shape)
        if expected is not None and len(self.side_lengths_mm) != expected:
            raise ValueError(
                f"Shape '{self.shape.value}' requires {expected} side length(s), got {len(self.side_lengths_mm)}"
            )
        seen: set[int] = set()
        for gate in self.gates:
            if gate.side >= len(self.side_lengths_mm):
                raise ValueError(f"Gate side {gate.side} is out of range")
            if gate.side in seen:
                raise ValueError(f"Only one gate per side is supported (side {gate.side})")
            seen.add(gate.side)
        return self


class SolverConfig(BaseModel):
    """Panel solver bounds.

    Attributes:
        gap_min_mm: Smallest gap between panels.
        gap_max_mm: Largest gap between panels.
        max_panel_width_mm: Widest panel allowed.
        panel_step_mm: Panel width increment (0 searches in 1mm steps).
        min_panel_width_mm: Narrowest panel allowed.
        max_fixings_per_panel: Optional cap on fixings per panel.
    """

    model_config = ConfigDict(extra="forbid")

    gap_min_mm: float = Field(default=10.0, ge=0)
    gap_max_mm: float = Field(default=30.0, ge=0)
    max_panel_width_mm: float = Field(default=1500.0, gt=0)
    panel_step_mm: float = Field(default=10.0, ge=0)
    min_panel_width_mm: float = Field(default=200.0, gt=0)
    max_fixings_per_panel: int | None = Field(default=None, ge=2)

    @model_validator(mode="after")
    def validate_bounds(self) -> "SolverConfig":
        """Validate that minimums do not exceed maximums."""
        if self.gap_min_mm > self.gap_max_mm:
            raise ValueError("gap_min_mm cannot exceed gap_max_mm")
        if self.min_panel_width_mm > self.max_panel_width_mm:
            raise ValueError("min_panel_width_mm cannot exceed max_panel_width_mm")
        return self


class OutputConfig(BaseModel):
    """Configuration for output formats and file paths.

    Attributes:
        formats: Export formats to generate (e.g., "order-csv", "layout-json").
        output_dir: Directory for output files.
        project_name: Base name for output files.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=list, description="List of output formats to generate")
    output_dir: str | None = Field(default=None, description="Directory for output files")
    project_name: str = Field(default="balustrade", description="Base name for output files")


class BalustradeConfiguration(BaseModel):
    """Root configuration model for balustrade projects.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        layout: Run geometry and hardware options
        solver: Panel solver bounds
        output: Output format configuration

    Example:
        >>> config = BalustradeConfiguration(
        ...     schema_version="1.0",
        ...     layout=LayoutConfig(
        ...         calc_key="sp12",
        ...         side_lengths_mm=[3000],
        ...         glass_thickness_mm=12,
        ...         glass_height_mm=1100,
        ...         wind_zone="VH",
        ...     ),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    layout: LayoutConfig
    solver: SolverConfig = Field(default_factory=SolverConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
