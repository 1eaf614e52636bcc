"""Payments – payment gateway port and the client that classifies its answers."""
from __future__ import annotations

import abc
import dataclasses
from enum import Enum

from orderpay.application.payments.commands import SubmitOrderPaymentCommand
from orderpay.application.payments.model import PaymentStatus
from orderpay.kernel.errors import FailureKind
from orderpay.kernel.types import Outcome, make_failure, make_success
from orderpay.observability.logging import get_logger

_log = get_logger(__name__)


class GatewayStatus(str, Enum):
    SDK_PAYMENT_ACCEPTED = "SDK_PAYMENT_ACCEPTED"
    SDK_PAYMENT_REJECTED = "SDK_PAYMENT_REJECTED"


@dataclasses.dataclass(frozen=True)
class GatewayRequest:
    order_id: str
    sku: str
    units: int
    price: float
    user_id: str


@dataclasses.dataclass(frozen=True)
class GatewayResponse:
    payment_id: str
    status: GatewayStatus


@dataclasses.dataclass(frozen=True)
class SubmittedPayment:
    payment_id: str | None
    payment_status: PaymentStatus


class PaymentGateway(abc.ABC):
    """Port: external payment gateway. ``send`` may raise on any failure."""

    @abc.abstractmethod
    async def send(self, request: GatewayRequest) -> GatewayResponse: ...


_STATUS_MAP = {
    GatewayStatus.SDK_PAYMENT_ACCEPTED: PaymentStatus.PAYMENT_ACCEPTED,
    GatewayStatus.SDK_PAYMENT_REJECTED: PaymentStatus.PAYMENT_REJECTED,
}


class SubmitOrderPaymentClient:
    """Submit a payment; anything but a clear accept/reject is a transient PaymentFailedError."""

    def __init__(self, gateway: PaymentGateway) -> None:
        self._gateway = gateway

    async def submit_order_payment(self, command: SubmitOrderPaymentCommand) -> Outcome[SubmittedPayment]:
        if not isinstance(command, SubmitOrderPaymentCommand):
            return make_failure(
                FailureKind.INVALID_ARGUMENTS, f"Expected SubmitOrderPaymentCommand but got {command!r}", False
            )

        data = command.command_data
        request = GatewayRequest(data.order_id, data.sku, data.units, data.price, data.user_id)
        try:
            response = await self._gateway.send(request)
        except Exception as exc:  # noqa: BLE001
            result = make_failure(FailureKind.PAYMENT_FAILED, exc, True)
            _log.info("submit_order_payment.failed", order_id=data.order_id, outcome=result)
            return result

        status = _STATUS_MAP.get(getattr(response, "status", None))
        if status is None:
            return make_failure(
                FailureKind.PAYMENT_FAILED, f"Expected a gateway response but got {response!r}", True
            )
        return make_success(SubmittedPayment(response.payment_id, status))


__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "GatewayStatus",
    "PaymentGateway",
    "SubmitOrderPaymentClient",
    "SubmittedPayment",
]
