"""Payments – incoming stock-allocated event and outgoing payment events."""
from __future__ import annotations

from typing import Any, Literal, Self

from pydantic import Field

from orderpay.application.events import Event, EventName, OrderEventData
from orderpay.application.validation import Schema, ValidTimestamp, invalid_arguments, validate_input
from orderpay.kernel.store.marshalling import unmarshall
from orderpay.kernel.time import Clock
from orderpay.kernel.types import Outcome, make_success


class OrderPaymentAcceptedEvent(Event):
    EVENT_NAME = EventName.ORDER_PAYMENT_ACCEPTED_EVENT


class OrderPaymentRejectedEvent(Event):
    EVENT_NAME = EventName.ORDER_PAYMENT_REJECTED_EVENT


class _StockAllocatedRecord(Schema):
    event_name: Literal["ORDER_STOCK_ALLOCATED_EVENT"] = Field(alias="eventName")
    event_data: OrderEventData = Field(alias="eventData")
    created_at: ValidTimestamp = Field(alias="createdAt")
    updated_at: ValidTimestamp = Field(alias="updatedAt")


class IncomingOrderStockAllocatedEvent(Event):
    """``ORDER_STOCK_ALLOCATED_EVENT`` read from an event-bus envelope.

    The event record arrives as a DynamoDB stream image under
    ``detail.dynamodb.NewImage`` and keeps its original timestamps.
    """

    EVENT_NAME = EventName.ORDER_STOCK_ALLOCATED_EVENT

    @classmethod
    def validate_and_build(cls, event_input: Any, *, clock: Clock | None = None) -> Outcome[Self]:  # noqa: ARG003
        try:
            image = event_input["detail"]["dynamodb"]["NewImage"]
            record = unmarshall(image)
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            return invalid_arguments(f"Expected an event-bus envelope with a stream image: {exc!r}")

        record_result = validate_input(_StockAllocatedRecord, record)
        if record_result.is_failure():
            return record_result

        parsed = record_result.value
        return make_success(cls(cls.EVENT_NAME, parsed.event_data, parsed.created_at, parsed.updated_at))


__all__ = ["IncomingOrderStockAllocatedEvent", "OrderPaymentAcceptedEvent", "OrderPaymentRejectedEvent"]
