"""Orders – PlaceOrderService and ListOrdersService."""
from __future__ import annotations

from typing import Any

from orderpay.application.events import EventRecorder
from orderpay.application.listing import ItemLister
from orderpay.application.orders.model import (
    IncomingListOrdersRequest,
    IncomingPlaceOrderRequest,
    ListOrdersCommand,
    OrderPlacedEvent,
)
from orderpay.kernel.errors import FailureKind
from orderpay.kernel.time import Clock
from orderpay.kernel.types import Outcome, is_failure_of_kind, make_failure, make_success
from orderpay.observability.logging import get_logger

_log = get_logger(__name__)


class PlaceOrderService:
    """Raise ``ORDER_PLACED_EVENT`` for a validated request.

    Placing the same order twice is not an error: a duplicate event outcome
    is reported as success with the request data.
    """

    def __init__(self, event_recorder: EventRecorder, clock: Clock | None = None) -> None:
        self._recorder = event_recorder
        self._clock = clock

    async def place_order(self, request: IncomingPlaceOrderRequest) -> Outcome[dict[str, Any]]:
        if not isinstance(request, IncomingPlaceOrderRequest):
            return make_failure(
                FailureKind.INVALID_ARGUMENTS,
                f"Expected IncomingPlaceOrderRequest but got {request!r}",
                False,
            )

        event_result = OrderPlacedEvent.validate_and_build(request, clock=self._clock)
        if event_result.is_failure():
            return event_result

        raised = await self._recorder.raise_event(event_result.value)
        if raised.is_success() or is_failure_of_kind(raised, FailureKind.DUPLICATE_EVENT_RAISED):
            _log.info("place_order.success", order_id=request.order_id, outcome=raised)
            return make_success(request.dump())

        _log.error("place_order.failure", order_id=request.order_id, outcome=raised)
        return raised


class ListOrdersService:
    def __init__(self, lister: ItemLister) -> None:
        self._lister = lister

    async def list_orders(self, request: IncomingListOrdersRequest) -> Outcome[dict[str, Any]]:
        if not isinstance(request, IncomingListOrdersRequest):
            return make_failure(
                FailureKind.INVALID_ARGUMENTS,
                f"Expected IncomingListOrdersRequest but got {request!r}",
                False,
            )

        command_result = ListOrdersCommand.validate_and_build(request.query_data)
        if command_result.is_failure():
            return command_result

        listed = await self._lister.list_items(command_result.value)
        if listed.is_failure():
            return listed
        return make_success({"orders": listed.value})


__all__ = ["ListOrdersService", "PlaceOrderService"]
