"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from orderpay.kernel.types import Failure, Success


class OutcomeProcessor:
    """structlog processor that flattens an ``outcome=`` key into log fields.

    A :class:`Success` becomes ``outcome="success"``; a :class:`Failure`
    becomes ``outcome="failure"`` plus ``failure_kind``, ``transient`` and
    ``error``.

    Usage::

        structlog.configure(processors=[OutcomeProcessor(), ...])
        log.info("record_order_payment.exit", outcome=result)
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        outcome = event_dict.get("outcome")
        if isinstance(outcome, Failure):
            event_dict["outcome"] = "failure"
            event_dict.setdefault("failure_kind", outcome.kind.value)
            event_dict.setdefault("transient", outcome.transient)
            event_dict.setdefault("error", getattr(outcome.error, "message", str(outcome.error)))
        elif isinstance(outcome, Success):
            event_dict["outcome"] = "success"
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["OutcomeProcessor", "get_logger"]
