"""Batch – BatchConsumer with per-item retry reporting.

Each record of a queue batch is processed on its own. Only records whose
outcome is a *transient* Failure are reported back in
``batchItemFailures``; everything else (success, non-transient failures,
redundant re-deliveries) is acknowledged and leaves the queue.
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any, Awaitable, Callable, Mapping

import structlog

from orderpay.application.validation import invalid_arguments
from orderpay.kernel.errors import FailureKind
from orderpay.kernel.types import Outcome, is_failure_transient, make_failure
from orderpay.observability.logging import get_logger

_log = get_logger(__name__)

RecordHandler = Callable[[Any], Awaitable[Outcome[Any]]]


@dataclasses.dataclass(frozen=True)
class BatchItemFailure:
    item_identifier: str

    def to_dict(self) -> dict[str, str]:
        return {"itemIdentifier": self.item_identifier}


@dataclasses.dataclass
class BatchResponse:
    batch_item_failures: list[BatchItemFailure] = dataclasses.field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"batchItemFailures": [f.to_dict() for f in self.batch_item_failures]}


class BatchConsumer:
    """Drive *handler* over an SQS-shaped batch ``{"Records": [{"messageId", "body"}]}``.

    *handler* receives the JSON-decoded body and returns an Outcome. A
    handler that raises is treated as a transient failure for that record
    only; the rest of the batch still runs.
    """

    def __init__(self, handler: RecordHandler, *, name: str = "batch") -> None:
        self._handler = handler
        self._name = name

    async def process_batch(self, batch: Any) -> BatchResponse:
        response = BatchResponse()
        records = batch.get("Records") if isinstance(batch, Mapping) else None
        if not isinstance(records, list):
            _log.error("process_batch.invalid_batch", consumer=self._name, batch_type=type(batch).__name__)
            return response

        reported: set[str] = set()
        for record in records:
            message_id = record.get("messageId") if isinstance(record, Mapping) else None
            with structlog.contextvars.bound_contextvars(consumer=self._name, message_id=message_id):
                outcome = await self._process_record(record)
                if not is_failure_transient(outcome):
                    continue
                if not isinstance(message_id, str):
                    _log.error("process_batch.unidentified_failure", outcome=outcome)
                    continue
                if message_id not in reported:
                    reported.add(message_id)
                    response.batch_item_failures.append(BatchItemFailure(message_id))
                    _log.info("process_batch.retry", outcome=outcome)

        return response

    async def _process_record(self, record: Any) -> Outcome[Any]:
        body = record.get("body") if isinstance(record, Mapping) else None
        try:
            parsed = json.loads(body)
        except (TypeError, ValueError) as exc:
            return invalid_arguments(f"Record body is not valid JSON: {exc}")

        try:
            return await self._handler(parsed)
        except Exception as exc:  # noqa: BLE001
            result = make_failure(FailureKind.UNRECOGNIZED, exc, True)
            _log.exception("process_record.unhandled", outcome=result)
            return result


__all__ = ["BatchConsumer", "BatchItemFailure", "BatchResponse", "RecordHandler"]
