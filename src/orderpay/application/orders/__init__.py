"""Orders – place-order and list-orders use cases."""
from orderpay.application.orders.model import (
    ORDER_FIELDS,
    IncomingListOrdersRequest,
    IncomingPlaceOrderRequest,
    ListOrdersCommand,
    OrderPlacedEvent,
    order_key,
)
from orderpay.application.orders.services import ListOrdersService, PlaceOrderService

__all__ = [
    "IncomingListOrdersRequest",
    "IncomingPlaceOrderRequest",
    "ListOrdersCommand",
    "ListOrdersService",
    "ORDER_FIELDS",
    "OrderPlacedEvent",
    "PlaceOrderService",
    "order_key",
]
