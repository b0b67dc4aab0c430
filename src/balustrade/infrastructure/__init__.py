"""Infrastructure layer - exporters and the order service client."""

from .exporters import (
    ExportError,
    ExporterRegistry,
    ExportManager,
    result_to_dict,
)
from .ordering import (
    CreateOrderResponse,
    OrderSubmissionClient,
    OrderSubmissionError,
    submit_order_sync,
)

__all__ = [
    "CreateOrderResponse",
    "ExportError",
    "ExporterRegistry",
    "ExportManager",
    "OrderSubmissionClient",
    "OrderSubmissionError",
    "result_to_dict",
    "submit_order_sync",
]
