"""Infrastructure errors – store and external service failures."""

from __future__ import annotations

from typing import Any

from orderpay.kernel.errors.base import BaseError
from orderpay.kernel.errors.kinds import FailureKind


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"
    transient = True


class UnrecognizedError(InfrastructureError):
    """Any failure no other error class classifies."""

    default_code = "unrecognized_error"
    kind = FailureKind.UNRECOGNIZED


class StoreError(InfrastructureError):
    """A document store call failed (connection, throttling, timeout, …)."""

    default_code = "store_error"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.operation = operation


class PaymentGatewayError(InfrastructureError):
    """The payment gateway raised instead of answering."""

    default_code = "payment_gateway_error"
    kind = FailureKind.PAYMENT_FAILED


__all__ = [
    "InfrastructureError",
    "PaymentGatewayError",
    "StoreError",
    "UnrecognizedError",
]
