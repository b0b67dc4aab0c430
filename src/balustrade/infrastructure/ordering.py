"""Order submission client.

Submits an order list to the storefront order service, which creates a
draft order and returns its invoice link.

Classes:
    OrderSubmissionClient: Async client for the create-order endpoint
    CreateOrderResponse: Parsed service response
    OrderSubmissionError: Raised when the service rejects or cannot take an order
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

import httpx
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from balustrade.domain.value_objects import OrderItem

logger = logging.getLogger(__name__)

DEFAULT_ORDER_API_URL = "http://localhost:5000/api"
CREATE_ORDER_PATH = "/shopify/create-order"
DEFAULT_FAILURE_MESSAGE = "Failed to create order"


class OrderSubmissionError(Exception):
    """Raised when an order cannot be submitted.

    Attributes:
        message: Server-provided message, or a description of the failure.
        status_code: HTTP status of the response, None for network errors.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CreatedOrder(BaseModel):
    """Draft order details returned by the service."""

    model_config = ConfigDict(extra="ignore")

    id: int | str | None = None
    name: str | None = None
    invoice_url: str | None = None
    order_id: int | str | None = None
    total_price: str | None = None


class CreateOrderResponse(BaseModel):
    """Response body of the create-order endpoint."""

    model_config = ConfigDict(extra="ignore")

    success: bool
    message: str = ""
    data: CreatedOrder | None = None
    error: str | None = None


def _quantity(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value


def order_payload(items: Iterable[OrderItem]) -> dict[str, Any]:
    """Build the request body: {"items": [{"code": ..., "quantity": ...}]}."""
    return {"items": [{"code": item.code, "quantity": _quantity(item.quantity)} for item in items]}


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_FAILURE_MESSAGE
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return DEFAULT_FAILURE_MESSAGE


class OrderSubmissionClient:
    """Async client for the order service.

    Attributes:
        base_url: Base URL of the order API (default: http://localhost:5000/api)
        token: Bearer token sent in the Authorization header
        timeout: Request timeout in seconds (default: 10.0)

    Example:
        >>> client = OrderSubmissionClient(token="...")
        >>> response = await client.create_order(result.order_items)
        >>> print(response.data.invoice_url)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_ORDER_API_URL,
        token: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{CREATE_ORDER_PATH}"

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def create_order(self, items: Iterable[OrderItem]) -> CreateOrderResponse:
        """Submit order items and return the service response.

        Args:
            items: Order lines; only code and quantity are sent.

        Returns:
            Parsed CreateOrderResponse for any 2xx response.

        Raises:
            OrderSubmissionError: If the list is empty, the service is
                unreachable, the response is not 2xx, or the body cannot be
                parsed.
        """
        payload = order_payload(items)
        if not payload["items"]:
            raise OrderSubmissionError("Order list is empty")

        logger.info(f"Submitting {len(payload['items'])} order line(s) to {self.endpoint}")
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.endpoint,
                    json=payload,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
        except httpx.TimeoutException as e:
            raise OrderSubmissionError(f"Timed out contacting order service at {self.base_url}") from e
        except httpx.RequestError as e:
            raise OrderSubmissionError(f"Could not reach order service at {self.base_url}: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning(f"Order service returned status {response.status_code}: {message}")
            raise OrderSubmissionError(message, status_code=response.status_code)

        try:
            parsed = CreateOrderResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise OrderSubmissionError(
                f"Unexpected response from order service: {e}",
                status_code=response.status_code,
            ) from e

        if parsed.data is not None:
            logger.debug(f"Created order {parsed.data.name} ({parsed.data.id})")
        return parsed


def submit_order_sync(
    items: Iterable[OrderItem],
    base_url: str = DEFAULT_ORDER_API_URL,
    token: str | None = None,
    timeout: float = 10.0,
) -> CreateOrderResponse:
    """Synchronous wrapper around OrderSubmissionClient.create_order for CLI use."""
    client = OrderSubmissionClient(base_url=base_url, token=token, timeout=timeout)
    return asyncio.run(client.create_order(list(items)))
