"""Gateway adapter – SimulatedPaymentGateway.

A stand-in for a real payment provider: it rejects malformed or
out-of-range payments, accepts roughly 30% of the rest and raises for the
remainder, which exercises the retry path end to end.
"""
from __future__ import annotations

import hashlib
import random
from typing import Callable

from orderpay.application.payments.gateway import GatewayRequest, GatewayResponse, GatewayStatus, PaymentGateway
from orderpay.kernel.errors import PaymentGatewayError

MAX_PRICE = 100_000
ACCEPT_RATE = 0.3


def generate_payment_id(order_id: str | None) -> str:
    digest = hashlib.md5((order_id or "").encode("utf-8")).hexdigest()  # noqa: S324
    return digest[:6].upper()


def _is_well_formed(request: object) -> bool:
    if not isinstance(request, GatewayRequest):
        return False
    return (
        isinstance(request.order_id, str)
        and isinstance(request.sku, str)
        and isinstance(request.units, (int, float))
        and not isinstance(request.units, bool)
        and isinstance(request.price, (int, float))
        and not isinstance(request.price, bool)
        and isinstance(request.user_id, str)
    )


class SimulatedPaymentGateway(PaymentGateway):
    def __init__(self, rng: Callable[[], float] = random.random) -> None:
        self._rng = rng

    async def send(self, request: GatewayRequest) -> GatewayResponse:
        order_id = getattr(request, "order_id", None)
        if not _is_well_formed(request):
            return GatewayResponse(generate_payment_id(order_id), GatewayStatus.SDK_PAYMENT_REJECTED)

        if request.price <= 0 or request.price >= MAX_PRICE:
            return GatewayResponse(generate_payment_id(order_id), GatewayStatus.SDK_PAYMENT_REJECTED)

        if self._rng() < ACCEPT_RATE:
            return GatewayResponse(generate_payment_id(order_id), GatewayStatus.SDK_PAYMENT_ACCEPTED)

        raise PaymentGatewayError("Payment failed because the payment gateway is shaky")


__all__ = ["SimulatedPaymentGateway", "generate_payment_id"]
