"""Payments – command objects.

Every command is built only through ``validate_and_build``, which returns
``Success(command)`` or a Failure. Malformed input is always a non-transient
``InvalidArgumentsError``; a terminal existing payment is a non-transient
``PaymentAlreadyAcceptedError`` / ``PaymentAlreadyRejectedError``.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Self

from pydantic import Field

from orderpay.application.events import OrderEventData
from orderpay.application.listing import ListQuery
from orderpay.application.payments.model import (
    NewOrderPaymentFields,
    OrderPaymentData,
    PaymentStatus,
    missing_payment_id,
)
from orderpay.application.validation import Schema, ValidOrderId, invalid_arguments, validate_input
from orderpay.kernel.errors import FailureKind
from orderpay.kernel.time import Clock, iso_timestamp
from orderpay.kernel.types import Failure, Outcome, make_failure, make_success


def terminal_status_failure(status: PaymentStatus | None, action: str) -> Failure | None:
    """Failure for an attempt on a payment whose *status* is already final."""
    if status is PaymentStatus.PAYMENT_REJECTED:
        return make_failure(
            FailureKind.PAYMENT_ALREADY_REJECTED, f"Cannot {action} an already rejected payment.", False
        )
    if status is PaymentStatus.PAYMENT_ACCEPTED:
        return make_failure(
            FailureKind.PAYMENT_ALREADY_ACCEPTED, f"Cannot {action} an already accepted payment.", False
        )
    return None


# ---------------------------------------------------------------------------
# GetOrderPaymentCommand
# ---------------------------------------------------------------------------


class OrderIdData(Schema):
    order_id: ValidOrderId = Field(alias="orderId")


@dataclasses.dataclass(frozen=True)
class GetOrderPaymentCommand:
    command_data: OrderIdData
    options: dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def validate_and_build(cls, command_input: Any) -> Outcome[Self]:
        data_result = validate_input(OrderIdData, command_input)
        if data_result.is_failure():
            return data_result
        return make_success(cls(command_data=data_result.value))


# ---------------------------------------------------------------------------
# SubmitOrderPaymentCommand
# ---------------------------------------------------------------------------


class SubmitOrderPaymentInput(OrderEventData):
    existing_payment_status: PaymentStatus | None = Field(default=None, alias="existingPaymentStatus")


@dataclasses.dataclass(frozen=True)
class SubmitOrderPaymentCommand:
    """A payment ready to be sent to the gateway."""

    command_data: OrderEventData
    options: dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def validate_and_build(cls, command_input: Any) -> Outcome[Self]:
        input_result = validate_input(SubmitOrderPaymentInput, command_input)
        if input_result.is_failure():
            return input_result

        submit_input = input_result.value
        terminal = terminal_status_failure(submit_input.existing_payment_status, "submit")
        if terminal is not None:
            return terminal

        command_data = OrderEventData.model_validate(submit_input.model_dump(exclude={"existing_payment_status"}))
        return make_success(cls(command_data=command_data))


# ---------------------------------------------------------------------------
# RecordOrderPaymentCommand
# ---------------------------------------------------------------------------


class RecordOrderPaymentInput(Schema):
    existing_order_payment_data: OrderPaymentData | None = Field(default=None, alias="existingOrderPaymentData")
    new_order_payment_fields: NewOrderPaymentFields = Field(alias="newOrderPaymentFields")


@dataclasses.dataclass(frozen=True)
class RecordOrderPaymentCommand:
    """The next payment record, computed from the caller's view of the current one.

    The terminal-status check here is an early exit over a possibly stale
    view; the recorder's storage guard is the authoritative one.
    """

    command_data: OrderPaymentData
    options: dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def validate_and_build(cls, command_input: Any, *, clock: Clock | None = None) -> Outcome[Self]:
        input_result = validate_input(RecordOrderPaymentInput, command_input)
        if input_result.is_failure():
            return input_result

        existing = input_result.value.existing_order_payment_data
        new_fields = input_result.value.new_order_payment_fields
        if existing is not None and existing.order_id != new_fields.order_id:
            return invalid_arguments(
                f"existingOrderPaymentData.orderId {existing.order_id!r} does not match "
                f"newOrderPaymentFields.orderId {new_fields.order_id!r}"
            )

        next_result = cls.compute_next_record(existing, new_fields, now=iso_timestamp(clock))
        if next_result.is_failure():
            return next_result
        return make_success(cls(command_data=next_result.value))

    @staticmethod
    def compute_next_record(
        existing: OrderPaymentData | None,
        new_fields: NewOrderPaymentFields,
        *,
        now: str,
    ) -> Outcome[OrderPaymentData]:
        payment_id = new_fields.payment_id or missing_payment_id(new_fields.order_id)

        if existing is None:
            return make_success(
                OrderPaymentData(
                    order_id=new_fields.order_id,
                    sku=new_fields.sku,
                    units=new_fields.units,
                    price=new_fields.price,
                    user_id=new_fields.user_id,
                    created_at=now,
                    updated_at=now,
                    payment_id=payment_id,
                    payment_status=new_fields.payment_status,
                    payment_retries=0,
                )
            )

        terminal = terminal_status_failure(existing.payment_status, "record")
        if terminal is not None:
            return terminal

        return make_success(
            existing.model_copy(
                update={
                    "updated_at": now,
                    "payment_id": payment_id,
                    "payment_status": new_fields.payment_status,
                    "payment_retries": existing.payment_retries + 1,
                }
            )
        )


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


class IncomingListOrderPaymentsRequest(ListQuery):
    pass


class ListOrderPaymentsCommand(ListQuery):
    pass


__all__ = [
    "GetOrderPaymentCommand",
    "IncomingListOrderPaymentsRequest",
    "ListOrderPaymentsCommand",
    "OrderIdData",
    "RecordOrderPaymentCommand",
    "SubmitOrderPaymentCommand",
    "terminal_status_failure",
]
