"""Orders – incoming requests, commands and the order-placed event."""
from __future__ import annotations

from typing import Any, Self

from orderpay.application.events import Event, EventName, OrderEventData
from orderpay.application.listing import ListQuery
from orderpay.application.validation import validate_input
from orderpay.kernel.types import Outcome

ORDER_FIELDS: tuple[str, ...] = (
    "orderId",
    "orderStatus",
    "sku",
    "units",
    "price",
    "userId",
    "createdAt",
    "updatedAt",
)


def order_key(order_id: str) -> dict[str, str]:
    return {"pk": f"ORDERS#ORDER_ID#{order_id}", "sk": f"ORDER_ID#{order_id}"}


class IncomingPlaceOrderRequest(OrderEventData):
    """Validated body of a place-order request."""

    @classmethod
    def validate_and_build(cls, request_input: Any) -> Outcome[Self]:
        return validate_input(cls, request_input)


class OrderPlacedEvent(Event):
    EVENT_NAME = EventName.ORDER_PLACED_EVENT


class IncomingListOrdersRequest(ListQuery):
    pass


class ListOrdersCommand(ListQuery):
    pass


__all__ = [
    "IncomingListOrdersRequest",
    "IncomingPlaceOrderRequest",
    "ListOrdersCommand",
    "ORDER_FIELDS",
    "OrderPlacedEvent",
    "order_key",
]
