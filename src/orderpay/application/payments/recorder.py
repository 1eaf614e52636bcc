"""Payments – OrderPaymentRecorder (read and guarded state transition)."""
from __future__ import annotations

from pydantic import ValidationError

from orderpay.application.payments.commands import (
    GetOrderPaymentCommand,
    RecordOrderPaymentCommand,
    terminal_status_failure,
)
from orderpay.application.payments.model import (
    PAYMENT_FIELDS,
    OrderPaymentData,
    PaymentStatus,
    TERMINAL_PAYMENT_STATUSES,
    payment_key,
)
from orderpay.kernel.errors import FailureKind
from orderpay.kernel.store import AttributeNotIn, DocumentStore, Item, Rejected
from orderpay.kernel.types import Outcome, make_failure, make_success
from orderpay.observability.logging import get_logger

_log = get_logger(__name__)


class OrderPaymentRecorder:
    """Reads and writes the per-order payment record.

    ``record_order_payment`` is a single conditional update that only
    proceeds while the *stored* status is not terminal, so two concurrent
    attempts can never both commit over a non-terminal record. On rejection
    the previously stored item decides which ``PaymentAlready*Error`` is
    reported.
    """

    _GUARD = AttributeNotIn("paymentStatus", tuple(s.value for s in sorted(TERMINAL_PAYMENT_STATUSES)))

    def __init__(self, store: DocumentStore, table_name: str) -> None:
        self._store = store
        self._table = table_name

    async def get_order_payment(self, command: GetOrderPaymentCommand) -> Outcome[OrderPaymentData | None]:
        if not isinstance(command, GetOrderPaymentCommand):
            return make_failure(FailureKind.INVALID_ARGUMENTS, f"Expected GetOrderPaymentCommand but got {command!r}", False)

        order_id = command.command_data.order_id
        try:
            item = await self._store.get(self._table, payment_key(order_id))
        except Exception as exc:  # noqa: BLE001
            result = make_failure(FailureKind.UNRECOGNIZED, exc, True)
            _log.error("get_order_payment.failure", order_id=order_id, outcome=result)
            return result

        if item is None:
            return make_success(None)
        try:
            return make_success(OrderPaymentData.model_validate({f: item.get(f) for f in PAYMENT_FIELDS}))
        except ValidationError as exc:
            result = make_failure(FailureKind.UNRECOGNIZED, exc, False)
            _log.error("get_order_payment.corrupt_record", order_id=order_id, outcome=result)
            return result

    def build_update(self, command: RecordOrderPaymentCommand) -> tuple[Item, Item, Item]:
        """Return ``(key, values, values_if_absent)`` for the conditional update."""
        data = command.command_data
        stored = data.dump()
        created_at = stored.pop("createdAt")
        values: Item = {
            "_tn": "PAYMENTS#PAYMENT",
            "_sn": "PAYMENTS",
            **stored,
            "gsi1pk": "PAYMENTS#PAYMENT",
            "gsi1sk": f"CREATED_AT#{created_at}",
        }
        return payment_key(data.order_id), values, {"createdAt": created_at}

    async def record_order_payment(self, command: RecordOrderPaymentCommand) -> Outcome[OrderPaymentData]:
        if not isinstance(command, RecordOrderPaymentCommand):
            return make_failure(
                FailureKind.INVALID_ARGUMENTS, f"Expected RecordOrderPaymentCommand but got {command!r}", False
            )

        key, values, values_if_absent = self.build_update(command)
        log = _log.bind(operation="record_order_payment", order_id=command.command_data.order_id)
        try:
            written = await self._store.update(
                self._table,
                key,
                values,
                values_if_absent=values_if_absent,
                condition=self._GUARD,
            )
        except Exception as exc:  # noqa: BLE001
            result = make_failure(FailureKind.UNRECOGNIZED, exc, True)
            log.error("record_order_payment.failure", outcome=result)
            return result

        if isinstance(written, Rejected):
            result = self._classify_rejection(written)
            log.info("record_order_payment.rejected", outcome=result)
            return result

        log.info("record_order_payment.success", payment_status=command.command_data.payment_status.value)
        return make_success(command.command_data)

    def _classify_rejection(self, rejected: Rejected) -> Outcome[OrderPaymentData]:
        previous_status = (rejected.previous_item or {}).get("paymentStatus")
        try:
            status = PaymentStatus(previous_status)
        except ValueError:
            status = None
        failure = terminal_status_failure(status, "record")
        if failure is not None:
            return failure
        return make_failure(
            FailureKind.UNRECOGNIZED,
            f"Conditional update rejected with stored paymentStatus {previous_status!r}",
            True,
        )


__all__ = ["OrderPaymentRecorder"]
