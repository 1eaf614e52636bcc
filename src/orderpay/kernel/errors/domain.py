"""Domain errors – invalid input and payment/event business rules."""

from __future__ import annotations

from typing import Any, ClassVar

from orderpay.kernel.errors.base import BaseError
from orderpay.kernel.errors.kinds import FailureKind


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class InvalidOperationError(DomainError):
    """An operation was invoked on a value that does not support it."""

    default_code = "invalid_operation"
    kind = FailureKind.INVALID_OPERATION


class InvalidArgumentsError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "invalid_arguments"
    kind = FailureKind.INVALID_ARGUMENTS

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class PaymentAlreadyFinalError(DomainError):
    """The payment already reached a terminal status and cannot change."""

    default_code = "payment_already_final"


class PaymentAlreadyAcceptedError(PaymentAlreadyFinalError):
    default_code = "payment_already_accepted"
    kind = FailureKind.PAYMENT_ALREADY_ACCEPTED


class PaymentAlreadyRejectedError(PaymentAlreadyFinalError):
    default_code = "payment_already_rejected"
    kind = FailureKind.PAYMENT_ALREADY_REJECTED


class PaymentFailedError(DomainError):
    """The payment gateway could not settle the payment this time."""

    default_code = "payment_failed"
    kind = FailureKind.PAYMENT_FAILED
    transient = True


class DuplicateEventRaisedError(DomainError):
    """The event was already recorded; re-delivery is a no-op."""

    default_code = "duplicate_event_raised"
    kind = FailureKind.DUPLICATE_EVENT_RAISED
    redundant: ClassVar[bool] = True


__all__ = [
    "DomainError",
    "DuplicateEventRaisedError",
    "InvalidArgumentsError",
    "InvalidOperationError",
    "PaymentAlreadyAcceptedError",
    "PaymentAlreadyFinalError",
    "PaymentAlreadyRejectedError",
    "PaymentFailedError",
]
