"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from balustrade.web.schemas.common import GateSchema


class CalculateRequest(BaseModel):
    """Request for calculating a balustrade layout."""

    calc_key: str = Field(..., min_length=1, description="Hardware calculator, e.g. sp12")
    side_lengths_mm: list[float] = Field(..., min_length=1, description="Length of each side in mm")
    shape: str = Field(default="inline", description="inline, corner, u, enclosed or custom")
    fence_type: str = Field(default="balustrade", description="Fence type (balustrade or pool)")
    glass_thickness_mm: float = Field(default=12.0, gt=0, description="Glass thickness in mm")
    glass_height_mm: float = Field(default=1000.0, gt=0, description="Glass height in mm")
    wind_zone: str = Field(default="L", description="Wind zone: L, M, H, VH, EH")
    fixing_type: str | None = Field(default=None, description="Fixing type, e.g. Concrete")
    finish: str | None = Field(default=None, description="Hardware finish")
    handrail: str | None = Field(default=None, description="Handrail code")
    disc_head: str | None = Field(default=None, description="Disc head or clamp variant")
    spigots_per_panel: str = Field(default="auto", description="auto, 2 or 3")
    gates: list[GateSchema] = Field(default_factory=list, description="Gates on the run")
    gate_leaf_width_mm: float | None = Field(default=None, description="Leaf width for every gate in mm")
    gap_min_mm: float = Field(default=10.0, ge=0, description="Smallest gap in mm")
    gap_max_mm: float = Field(default=30.0, ge=0, description="Largest gap in mm")
    max_panel_width_mm: float = Field(default=1500.0, gt=0, description="Widest panel in mm")
    panel_step_mm: float = Field(default=10.0, ge=0, description="Panel width increment in mm")
    min_panel_width_mm: float = Field(default=200.0, gt=0, description="Narrowest panel in mm")
    max_fixings_per_panel: int | None = Field(default=None, ge=2, description="Cap on fixings per panel")


class ConfigRequest(BaseModel):
    """Request carrying a full project configuration."""

    config: dict[str, Any] = Field(..., description="Project configuration JSON")


class SpacingRequest(BaseModel):
    """Request for a certified spacing lookup."""

    calc_key: str = Field(..., min_length=1, description="Hardware calculator")
    glass_thickness_mm: float = Field(..., gt=0, description="Glass thickness in mm")
    glass_height_mm: float = Field(..., gt=0, description="Glass height in mm")
    wind_zone: str = Field(..., description="Wind zone: L, M, H, VH, EH")
    fence_type: str = Field(default="balustrade", description="Fence type (balustrade or pool)")
    fixing_type: str | None = Field(default=None, description="Fixing type")


class SolveRequest(BaseModel):
    """Request for solving a single run."""

    run_mm: float = Field(..., gt=0, description="Run length in mm")
    gap_min_mm: float = Field(default=10.0, ge=0, description="Smallest gap in mm")
    gap_max_mm: float = Field(default=30.0, ge=0, description="Largest gap in mm")
    max_panel_width_mm: float = Field(default=1500.0, gt=0, description="Widest panel in mm")
    panel_step_mm: float = Field(default=10.0, ge=0, description="Panel width increment in mm")
    min_panel_width_mm: float = Field(default=200.0, gt=0, description="Narrowest panel in mm")
