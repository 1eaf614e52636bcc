"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                    (domain.py)
    │   ├── InvalidOperationError
    │   ├── InvalidArgumentsError
    │   ├── PaymentAlreadyFinalError
    │   │   ├── PaymentAlreadyAcceptedError
    │   │   └── PaymentAlreadyRejectedError
    │   ├── PaymentFailedError         (transient)
    │   └── DuplicateEventRaisedError  (redundant)
    └── InfrastructureError            (infrastructure.py, transient)
        ├── UnrecognizedError
        ├── StoreError
        └── PaymentGatewayError
"""

from orderpay.kernel.errors.base import BaseError
from orderpay.kernel.errors.domain import (
    DomainError,
    DuplicateEventRaisedError,
    InvalidArgumentsError,
    InvalidOperationError,
    PaymentAlreadyAcceptedError,
    PaymentAlreadyFinalError,
    PaymentAlreadyRejectedError,
    PaymentFailedError,
)
from orderpay.kernel.errors.infrastructure import (
    InfrastructureError,
    PaymentGatewayError,
    StoreError,
    UnrecognizedError,
)
from orderpay.kernel.errors.kinds import FailureKind

ERRORS_BY_KIND: dict[FailureKind, type[BaseError]] = {
    FailureKind.INVALID_OPERATION: InvalidOperationError,
    FailureKind.INVALID_ARGUMENTS: InvalidArgumentsError,
    FailureKind.UNRECOGNIZED: UnrecognizedError,
    FailureKind.DUPLICATE_EVENT_RAISED: DuplicateEventRaisedError,
    FailureKind.PAYMENT_FAILED: PaymentFailedError,
    FailureKind.PAYMENT_ALREADY_ACCEPTED: PaymentAlreadyAcceptedError,
    FailureKind.PAYMENT_ALREADY_REJECTED: PaymentAlreadyRejectedError,
}

__all__ = [
    "BaseError",
    "DomainError",
    "DuplicateEventRaisedError",
    "ERRORS_BY_KIND",
    "FailureKind",
    "InfrastructureError",
    "InvalidArgumentsError",
    "InvalidOperationError",
    "PaymentAlreadyAcceptedError",
    "PaymentAlreadyFinalError",
    "PaymentAlreadyRejectedError",
    "PaymentFailedError",
    "PaymentGatewayError",
    "StoreError",
    "UnrecognizedError",
]
