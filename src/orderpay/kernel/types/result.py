"""Outcome[T] – Success and Failure variants plus module-level helpers.

Every orderpay operation returns an Outcome instead of raising for expected
failure paths. A Failure carries exactly one :class:`FailureKind` and the
transience flag chosen by its producer; consumers never infer it later.
"""

from __future__ import annotations

from typing import Any, Generic, NoReturn, TypeVar

from orderpay.kernel.errors import ERRORS_BY_KIND, BaseError, FailureKind, InvalidOperationError, UnrecognizedError

T = TypeVar("T")

_UNRECOGNIZED_MESSAGE = f"[{FailureKind.UNRECOGNIZED}]: Unrecognized error"


class Success(Generic[T]):
    """Successful outcome variant."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


class Failure:
    """Failed outcome variant: one kind, one error, one transience flag."""

    __slots__ = ("_kind", "_error", "_transient")

    def __init__(self, kind: FailureKind, error: BaseException, transient: bool) -> None:
        self._kind = kind
        self._error = error
        self._transient = transient

    @property
    def kind(self) -> FailureKind:
        return self._kind

    @property
    def error(self) -> BaseException:
        return self._error

    @property
    def transient(self) -> bool:
        return self._transient

    @property
    def do_not_retry(self) -> bool:
        return not self._transient

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def is_of_kind(self, *kinds: FailureKind | str) -> bool:
        return any(self._kind.value == str(kind) for kind in kinds)

    def unwrap(self) -> NoReturn:
        raise InvalidOperationError(
            "Result could not be asserted to be a Success",
            detail={"kind": self._kind.value},
            cause=self._error,
        )

    def __repr__(self) -> str:
        return f"Failure(kind={self._kind.value!r}, transient={self._transient!r}, error={self._error!r})"


type Outcome[T] = Success[T] | Failure


def make_success(value: T = None) -> Success[T]:  # type: ignore[assignment]
    return Success(value)


def make_failure(kind: FailureKind | str, error: Any, transient: bool) -> Failure:
    """Build a Failure, coercing *error* into an exception.

    Exceptions are kept as-is; a message string becomes an instance of the
    error class registered for *kind*; anything else becomes a generic
    :class:`UnrecognizedError`.
    """
    failure_kind = FailureKind(kind)
    if isinstance(error, BaseException):
        exc: BaseException = error
    elif isinstance(error, str):
        error_cls: type[BaseError] = ERRORS_BY_KIND.get(failure_kind, UnrecognizedError)
        exc = error_cls(f"[{failure_kind}]: {error}")
    else:
        exc = UnrecognizedError(_UNRECOGNIZED_MESSAGE)
    return Failure(failure_kind, exc, transient)


def is_success(result: object) -> bool:
    return isinstance(result, Success)


def is_failure(result: object) -> bool:
    return isinstance(result, Failure)


def is_failure_of_kind(result: object, *kinds: FailureKind | str) -> bool:
    return isinstance(result, Failure) and result.is_of_kind(*kinds)


def is_failure_transient(result: object) -> bool:
    return isinstance(result, Failure) and result.transient


def get_success_value_or_throw(result: Outcome[T]) -> T:
    """Return the wrapped value; raise :class:`InvalidOperationError` on a Failure."""
    return result.unwrap()


__all__ = [
    "Failure",
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
