"""Application validation – per-field value validators.

Each validator is a pydantic ``Annotated`` type. They are total: any input,
including ``None``, booleans for integers or numbers for strings, either
parses or raises :class:`pydantic.ValidationError`.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError

from orderpay.kernel.errors import FailureKind, InvalidArgumentsError
from orderpay.kernel.types import Failure, Outcome, make_failure, make_success

M = TypeVar("M", bound=BaseModel)

_ValidId = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=4)]

ValidOrderId = _ValidId
ValidSku = _ValidId
ValidUserId = _ValidId
ValidPaymentId = _ValidId
ValidTimestamp = _ValidId
ValidUnits = Annotated[int, Field(strict=True, ge=1)]
ValidPrice = Annotated[float, Field(strict=True, ge=0)]
ValidPaymentRetries = Annotated[int, Field(strict=True, ge=0)]
ValidLimit = Annotated[int, Field(strict=True, ge=1, le=1000)]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


ValidSortDirection = SortDirection


class Schema(BaseModel):
    """Base for input schemas: camelCase aliases, frozen, extra keys ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def dump(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


def invalid_arguments(message: str, exc: ValidationError | None = None) -> Failure:
    errors = [
        {"loc": ".".join(str(p) for p in e["loc"]), "msg": e["msg"], "type": e["type"]}
        for e in (exc.errors() if exc is not None else [])
    ]
    error = InvalidArgumentsError(f"[{FailureKind.INVALID_ARGUMENTS}]: {message}", errors=errors, cause=exc)
    return make_failure(FailureKind.INVALID_ARGUMENTS, error, False)


def validate_input(schema: type[M], data: Any) -> Outcome[M]:
    """Parse *data* with *schema*; any rejection is a non-transient InvalidArgumentsError."""
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    if not isinstance(data, dict):
        return invalid_arguments(f"Expected a mapping for {schema.__name__} but got {type(data).__name__}")
    try:
        return make_success(schema.model_validate(data))
    except ValidationError as exc:
        return invalid_arguments(f"{schema.__name__} failed validation", exc)


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
