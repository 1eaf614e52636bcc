"""Application events – event names, payload schema and the Event base."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, ClassVar, Self

from pydantic import Field

from orderpay.application.validation import (
    Schema,
    ValidOrderId,
    ValidPrice,
    ValidSku,
    ValidUnits,
    ValidUserId,
    validate_input,
)
from orderpay.kernel.time import Clock, iso_timestamp
from orderpay.kernel.types import Outcome, make_success


class EventName(str, Enum):
    ORDER_PLACED_EVENT = "ORDER_PLACED_EVENT"
    ORDER_STOCK_ALLOCATED_EVENT = "ORDER_STOCK_ALLOCATED_EVENT"
    ORDER_PAYMENT_ACCEPTED_EVENT = "ORDER_PAYMENT_ACCEPTED_EVENT"
    ORDER_PAYMENT_REJECTED_EVENT = "ORDER_PAYMENT_REJECTED_EVENT"


class OrderEventData(Schema):
    """Payload shared by every order-scoped event."""

    order_id: ValidOrderId = Field(alias="orderId")
    sku: ValidSku
    units: ValidUnits
    price: ValidPrice
    user_id: ValidUserId = Field(alias="userId")


@dataclasses.dataclass(frozen=True)
class Event:
    """An immutable event record, unique per (subject id, event name)."""

    EVENT_NAME: ClassVar[EventName]

    event_name: EventName
    event_data: OrderEventData
    created_at: str
    updated_at: str

    @property
    def subject_id(self) -> str:
        return self.event_data.order_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "eventName": self.event_name.value,
            "eventData": self.event_data.dump(),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def validate_and_build(cls, event_input: Any, *, clock: Clock | None = None) -> Outcome[Self]:
        """Validate ``{orderId, sku, units, price, userId}`` and stamp ``createdAt``/``updatedAt``."""
        data_result = validate_input(OrderEventData, event_input)
        if data_result.is_failure():
            return data_result
        now = iso_timestamp(clock)
        return make_success(cls(cls.EVENT_NAME, data_result.value, now, now))


__all__ = ["Event", "EventName", "OrderEventData"]
