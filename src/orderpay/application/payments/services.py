"""Payments – ProcessOrderPaymentService and ListOrderPaymentsService."""
from __future__ import annotations

import dataclasses
from typing import Any

from orderpay.application.events import Event, EventRecorder
from orderpay.application.listing import ItemLister
from orderpay.application.payments.commands import (
    GetOrderPaymentCommand,
    IncomingListOrderPaymentsRequest,
    ListOrderPaymentsCommand,
    RecordOrderPaymentCommand,
    SubmitOrderPaymentCommand,
)
from orderpay.application.payments.events import (
    IncomingOrderStockAllocatedEvent,
    OrderPaymentAcceptedEvent,
    OrderPaymentRejectedEvent,
)
from orderpay.application.payments.gateway import SubmitOrderPaymentClient
from orderpay.application.payments.model import OrderPaymentData, PaymentStatus
from orderpay.application.payments.recorder import OrderPaymentRecorder
from orderpay.kernel.errors import FailureKind
from orderpay.kernel.time import Clock
from orderpay.kernel.types import Failure, Outcome, is_failure_of_kind, make_failure, make_success
from orderpay.observability.logging import get_logger

_log = get_logger(__name__)

_SETTLED_STATUS_BY_KIND = {
    FailureKind.PAYMENT_ALREADY_ACCEPTED: PaymentStatus.PAYMENT_ACCEPTED,
    FailureKind.PAYMENT_ALREADY_REJECTED: PaymentStatus.PAYMENT_REJECTED,
}


@dataclasses.dataclass(frozen=True)
class _PaymentAttempt:
    payment_id: str | None
    payment_status: PaymentStatus
    failure: Failure | None = None


class ProcessOrderPaymentService:
    """Take one allocated order through payment.

    1. Read the current payment record (if any).
    2. Decide the attempt's status: the existing status if it is already
       final, rejected once ``max_payment_retries`` is reached, otherwise
       the gateway's answer (``PAYMENT_FAILED`` when the gateway fails).
    3. Record the attempt. A payment found final by either guard layer is
       not an error: the order's outcome is already settled, and the stored
       final status replaces the attempt's.
    4. Raise the event for the settled status, or return a transient
       ``PaymentFailedError`` so the message is delivered again.
    """

    def __init__(
        self,
        payment_recorder: OrderPaymentRecorder,
        submit_client: SubmitOrderPaymentClient,
        event_recorder: EventRecorder,
        *,
        max_payment_retries: int = 3,
        clock: Clock | None = None,
    ) -> None:
        self._payments = payment_recorder
        self._submit_client = submit_client
        self._events = event_recorder
        self._max_retries = max_payment_retries
        self._clock = clock

    async def process_order_payment(self, event: IncomingOrderStockAllocatedEvent) -> Outcome[None]:
        if not isinstance(event, IncomingOrderStockAllocatedEvent):
            return make_failure(
                FailureKind.INVALID_ARGUMENTS,
                f"Expected IncomingOrderStockAllocatedEvent but got {event!r}",
                False,
            )
        log = _log.bind(operation="process_order_payment", order_id=event.subject_id)

        existing_result = await self._get_order_payment(event)
        if existing_result.is_failure():
            log.error("process_order_payment.failure", step="get", outcome=existing_result)
            return existing_result
        existing = existing_result.value

        attempt_result = await self._submit_order_payment(event, existing)
        if attempt_result.is_failure():
            log.error("process_order_payment.failure", step="submit", outcome=attempt_result)
            return attempt_result
        attempt = attempt_result.value

        recorded = await self._record_order_payment(event, existing, attempt)
        if recorded.is_failure():
            log.error("process_order_payment.failure", step="record", outcome=recorded)
            return recorded
        settled_status = recorded.value

        if settled_status is PaymentStatus.PAYMENT_ACCEPTED:
            raised = await self._raise(OrderPaymentAcceptedEvent, event)
        elif settled_status is PaymentStatus.PAYMENT_REJECTED:
            raised = await self._raise(OrderPaymentRejectedEvent, event)
        else:
            raised = attempt.failure
            if not is_failure_of_kind(raised, FailureKind.PAYMENT_FAILED):
                raised = make_failure(FailureKind.PAYMENT_FAILED, "Unexpected payment error", True)

        log.info("process_order_payment.exit", payment_status=settled_status.value, outcome=raised)
        return raised

    async def _get_order_payment(self, event: Event) -> Outcome[OrderPaymentData | None]:
        command_result = GetOrderPaymentCommand.validate_and_build({"orderId": event.subject_id})
        if command_result.is_failure():
            return command_result
        return await self._payments.get_order_payment(command_result.value)

    async def _submit_order_payment(
        self,
        event: IncomingOrderStockAllocatedEvent,
        existing: OrderPaymentData | None,
    ) -> Outcome[_PaymentAttempt]:
        if existing is not None and existing.payment_status in _SETTLED_STATUS_BY_KIND.values():
            return make_success(_PaymentAttempt(existing.payment_id, existing.payment_status))
        if existing is not None and existing.payment_retries >= self._max_retries:
            return make_success(_PaymentAttempt(existing.payment_id, PaymentStatus.PAYMENT_REJECTED))

        command_result = SubmitOrderPaymentCommand.validate_and_build(
            {
                **event.event_data.dump(),
                "existingPaymentStatus": existing.payment_status.value if existing is not None else None,
            }
        )
        if command_result.is_failure():
            return command_result

        submitted = await self._submit_client.submit_order_payment(command_result.value)
        if is_failure_of_kind(submitted, FailureKind.PAYMENT_FAILED):
            payment_id = existing.payment_id if existing is not None else None
            return make_success(_PaymentAttempt(payment_id, PaymentStatus.PAYMENT_FAILED, submitted))
        if submitted.is_failure():
            return submitted
        return make_success(_PaymentAttempt(submitted.value.payment_id, submitted.value.payment_status))

    async def _record_order_payment(
        self,
        event: IncomingOrderStockAllocatedEvent,
        existing: OrderPaymentData | None,
        attempt: _PaymentAttempt,
    ) -> Outcome[PaymentStatus]:
        """Record *attempt* and return the payment status that now stands."""
        command_input: dict[str, Any] = {
            "existingOrderPaymentData": existing.dump() if existing is not None else None,
            "newOrderPaymentFields": {
                **event.event_data.dump(),
                "paymentId": attempt.payment_id,
                "paymentStatus": attempt.payment_status.value,
            },
        }
        command_result = RecordOrderPaymentCommand.validate_and_build(command_input, clock=self._clock)
        if is_failure_of_kind(command_result, *_SETTLED_STATUS_BY_KIND):
            return make_success(_SETTLED_STATUS_BY_KIND[command_result.kind])
        if command_result.is_failure():
            return command_result

        recorded = await self._payments.record_order_payment(command_result.value)
        # The storage guard saw a final status the in-memory view missed.
        if is_failure_of_kind(recorded, *_SETTLED_STATUS_BY_KIND):
            return make_success(_SETTLED_STATUS_BY_KIND[recorded.kind])
        if recorded.is_failure():
            return recorded
        return make_success(attempt.payment_status)

    async def _raise(self, event_cls: type[Event], event: IncomingOrderStockAllocatedEvent) -> Outcome[None]:
        built = event_cls.validate_and_build(event.event_data, clock=self._clock)
        if built.is_failure():
            return built
        return await self._events.raise_event(built.value)


class ListOrderPaymentsService:
    def __init__(self, lister: ItemLister) -> None:
        self._lister = lister

    async def list_order_payments(self, request: IncomingListOrderPaymentsRequest) -> Outcome[dict[str, Any]]:
        if not isinstance(request, IncomingListOrderPaymentsRequest):
            return make_failure(
                FailureKind.INVALID_ARGUMENTS,
                f"Expected IncomingListOrderPaymentsRequest but got {request!r}",
                False,
            )

        command_result = ListOrderPaymentsCommand.validate_and_build(request.query_data)
        if command_result.is_failure():
            return command_result

        listed = await self._lister.list_items(command_result.value)
        if listed.is_failure():
            return listed
        return make_success({"orderPayments": listed.value})


__all__ = ["ListOrderPaymentsService", "ProcessOrderPaymentService"]
