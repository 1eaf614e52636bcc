"""Kernel errors – closed set of failure kinds carried by a Failure outcome."""
from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Failure tag shared by every orderpay operation."""

    INVALID_OPERATION = "InvalidOperationError"
    INVALID_ARGUMENTS = "InvalidArgumentsError"
    UNRECOGNIZED = "UnrecognizedError"
    DUPLICATE_EVENT_RAISED = "DuplicateEventRaisedError"
    PAYMENT_FAILED = "PaymentFailedError"
    PAYMENT_ALREADY_ACCEPTED = "PaymentAlreadyAcceptedError"
    PAYMENT_ALREADY_REJECTED = "PaymentAlreadyRejectedError"

    def __str__(self) -> str:
        return self.value


__all__ = ["FailureKind"]
