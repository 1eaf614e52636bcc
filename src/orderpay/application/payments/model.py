"""Payments – payment status, the persisted payment record and its key."""
from __future__ import annotations

from enum import Enum

from pydantic import Field

from orderpay.application.validation import (
    Schema,
    ValidOrderId,
    ValidPaymentId,
    ValidPaymentRetries,
    ValidPrice,
    ValidSku,
    ValidTimestamp,
    ValidUnits,
    ValidUserId,
)


class PaymentStatus(str, Enum):
    PAYMENT_ACCEPTED = "PAYMENT_ACCEPTED"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    PAYMENT_REJECTED = "PAYMENT_REJECTED"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_PAYMENT_STATUSES


TERMINAL_PAYMENT_STATUSES: frozenset[PaymentStatus] = frozenset(
    {PaymentStatus.PAYMENT_ACCEPTED, PaymentStatus.PAYMENT_REJECTED}
)

PAYMENT_FIELDS: tuple[str, ...] = (
    "orderId",
    "sku",
    "units",
    "price",
    "userId",
    "createdAt",
    "updatedAt",
    "paymentId",
    "paymentStatus",
    "paymentRetries",
)

MISSING_PAYMENT_ID_PREFIX = "ERROR:ORDER_ID:"


def payment_key(order_id: str) -> dict[str, str]:
    return {"pk": f"PAYMENTS#ORDER_ID#{order_id}", "sk": f"ORDER_ID#{order_id}#PAYMENT"}


def missing_payment_id(order_id: str) -> str:
    """Sentinel payment id recorded when the gateway returned none."""
    return f"{MISSING_PAYMENT_ID_PREFIX}{order_id}"


class OrderPaymentData(Schema):
    """The payment aggregate stored once per order."""

    order_id: ValidOrderId = Field(alias="orderId")
    sku: ValidSku
    units: ValidUnits
    price: ValidPrice
    user_id: ValidUserId = Field(alias="userId")
    created_at: ValidTimestamp = Field(alias="createdAt")
    updated_at: ValidTimestamp = Field(alias="updatedAt")
    payment_id: ValidPaymentId = Field(alias="paymentId")
    payment_status: PaymentStatus = Field(alias="paymentStatus")
    payment_retries: ValidPaymentRetries = Field(alias="paymentRetries")


class NewOrderPaymentFields(Schema):
    """Fields of one payment attempt; ``paymentId`` may be missing."""

    order_id: ValidOrderId = Field(alias="orderId")
    sku: ValidSku
    units: ValidUnits
    price: ValidPrice
    user_id: ValidUserId = Field(alias="userId")
    payment_id: ValidPaymentId | None = Field(default=None, alias="paymentId")
    payment_status: PaymentStatus = Field(alias="paymentStatus")


__all__ = [
    "MISSING_PAYMENT_ID_PREFIX",
    "NewOrderPaymentFields",
    "OrderPaymentData",
    "PAYMENT_FIELDS",
    "PaymentStatus",
    "TERMINAL_PAYMENT_STATUSES",
    "missing_payment_id",
    "payment_key",
]
