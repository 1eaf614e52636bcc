"""Application validation – value validators and schema helpers."""
from orderpay.application.validation.validators import (
    Schema,
    SortDirection,
    ValidLimit,
    ValidOrderId,
    ValidPaymentId,
    ValidPaymentRetries,
    ValidPrice,
    ValidSku,
    ValidSortDirection,
    ValidTimestamp,
    ValidUnits,
    ValidUserId,
    invalid_arguments,
    validate_input,
)

__all__ = [
    "Schema",
    "SortDirection",
    "ValidLimit",
    "ValidOrderId",
    "ValidPaymentId",
    "ValidPaymentRetries",
    "ValidPrice",
    "ValidSku",
    "ValidSortDirection",
    "ValidTimestamp",
    "ValidUnits",
    "ValidUserId",
    "invalid_arguments",
    "validate_input",
]
