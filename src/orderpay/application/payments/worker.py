"""Payments – ProcessOrderPaymentWorker (stock-allocated events → payment pipeline)."""
from __future__ import annotations

from typing import Any

from orderpay.application.batch import BatchConsumer, BatchResponse
from orderpay.application.payments.events import IncomingOrderStockAllocatedEvent
from orderpay.application.payments.services import ProcessOrderPaymentService
from orderpay.kernel.types import Outcome


class ProcessOrderPaymentWorker:
    """Queue worker: validate each stock-allocated event, then process its payment."""

    def __init__(self, service: ProcessOrderPaymentService) -> None:
        self._service = service
        self._consumer = BatchConsumer(self.handle, name="process_order_payment")

    async def handle(self, body: Any) -> Outcome[None]:
        event_result = IncomingOrderStockAllocatedEvent.validate_and_build(body)
        if event_result.is_failure():
            return event_result
        return await self._service.process_order_payment(event_result.value)

    async def process_order_payments(self, batch: Any) -> BatchResponse:
        return await self._consumer.process_batch(batch)


__all__ = ["ProcessOrderPaymentWorker"]
