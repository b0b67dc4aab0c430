"""Pydantic schemas for the REST API."""

from balustrade.web.schemas.common import (
    GateOffsetsSchema,
    GateSchema,
    GateSegmentSchema,
    OrderItemSchema,
    PanelLayoutSchema,
    SideGateSchema,
    SideSchema,
    SpacingRowSchema,
    SpacingSchema,
)
from balustrade.web.schemas.requests import (
    CalculateRequest,
    ConfigRequest,
    SolveRequest,
    SpacingRequest,
)
from balustrade.web.schemas.responses import (
    CalculationResponse,
    CalculatorSchema,
    CalculatorSummarySchema,
    CatalogListSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    OptionSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "GateOffsetsSchema",
    "GateSchema",
    "GateSegmentSchema",
    "OrderItemSchema",
    "PanelLayoutSchema",
    "SideGateSchema",
    "SideSchema",
    "SpacingRowSchema",
    "SpacingSchema",
    # Requests
    "CalculateRequest",
    "ConfigRequest",
    "SolveRequest",
    "SpacingRequest",
    # Responses
    "CalculationResponse",
    "CalculatorSchema",
    "CalculatorSummarySchema",
    "CatalogListSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "OptionSchema",
    "ValidationResultSchema",
]
