"""Kernel types – the Outcome model."""
from orderpay.kernel.errors import FailureKind
from orderpay.kernel.types.result import (
    Failure,
    Outcome,
    Success,
    get_success_value_or_throw,
    is_failure,
    is_failure_of_kind,
    is_failure_transient,
    is_success,
    make_failure,
    make_success,
)

__all__ = [
    "Failure",
    "FailureKind",
    "Outcome",
    "Success",
    "get_success_value_or_throw",
    "is_failure",
    "is_failure_of_kind",
    "is_failure_transient",
    "is_success",
    "make_failure",
    "make_success",
]
