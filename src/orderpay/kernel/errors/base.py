"""Root error class for the orderpay error hierarchy."""

from __future__ import annotations

import json
from typing import Any, ClassVar

from orderpay.kernel.errors.kinds import FailureKind


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.

    ``kind`` ties the class to a :class:`FailureKind` and ``transient`` is the
    retry signal used when the error is wrapped in a Failure outcome.
    """

    default_code: str = "base_error"
    kind: ClassVar[FailureKind] = FailureKind.UNRECOGNIZED
    transient: ClassVar[bool] = False

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def do_not_retry(self) -> bool:
        return not self.transient

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging / HTTP responses)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "kind": self.kind.value,
            "message": self.message,
            "transient": self.transient,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
