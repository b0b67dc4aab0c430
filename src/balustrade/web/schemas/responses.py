"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from balustrade.web.schemas.common import OrderItemSchema, SideSchema, SpacingSchema


class CalculationResponse(BaseModel):
    """Response for a layout calculation."""

    calc_key: str = Field(..., description="Calculator key")
    total_run_mm: float = Field(..., description="Sum of side lengths in mm")
    spacing: SpacingSchema | None = Field(default=None, description="Resolved spacing")
    sides: list[SideSchema] = Field(default_factory=list, description="Per-side layouts and gates")
    all_panels_mm: list[float] = Field(default_factory=list, description="Every panel width in mm")
    total_panels: int = Field(..., description="Number of panels")
    panels_summary: str = Field(default="", description="Grouped panel summary")
    panel_groups: list[dict[str, Any]] = Field(
        default_factory=list, description="Panels grouped by width with fixing offsets in mm"
    )
    total_fixings: int = Field(..., description="Total fixing points")
    fixing_label: str = Field(..., description="Fixing noun (spigot, standoff, post, channel)")
    total_gates: int = Field(..., description="Number of enabled gates")
    gate_leaf_width_mm: float = Field(..., description="Leaf width applied to gates in mm")
    order_items: list[OrderItemSchema] = Field(default_factory=list, description="Order list")
    notes: list[str] = Field(default_factory=list, description="Informational notes")
    errors: list[str] = Field(default_factory=list, description="Error messages")


class ValidationResultSchema(BaseModel):
    """Response for project validation."""

    is_valid: bool = Field(..., description="Whether the project is valid")
    errors: list[dict[str, Any]] = Field(default_factory=list, description="Validation errors")
    warnings: list[dict[str, Any]] = Field(default_factory=list, description="Validation warnings")


class OptionSchema(BaseModel):
    """Selectable option with its label."""

    value: str = Field(..., description="Option value")
    label: str = Field(..., description="Display label")


class CalculatorSummarySchema(BaseModel):
    """Calculator entry in the catalog listing."""

    calc_key: str = Field(..., description="Calculator key")
    family: str = Field(..., description="Hardware family")


class CatalogListSchema(BaseModel):
    """Response for the catalog listing."""

    calculators: list[CalculatorSummarySchema] = Field(..., description="Available calculators")


class CalculatorSchema(BaseModel):
    """Options offered by one calculator."""

    calc_key: str = Field(..., description="Calculator key")
    family: str = Field(..., description="Hardware family")
    fence_types: list[OptionSchema] = Field(..., description="Fence types")
    wind_zones: list[str] = Field(..., description="Wind zones")
    glass_heights: list[int] = Field(..., description="Glass heights in mm")
    glass_thicknesses: list[float] = Field(..., description="Glass thicknesses in mm")
    handrails: list[OptionSchema] = Field(..., description="Handrails")
    finishes: list[str] = Field(..., description="Finishes")
    fixing_types: list[str] = Field(..., description="Fixing types")
    head_options: list[OptionSchema] = Field(default_factory=list, description="Disc head or clamp options")


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
