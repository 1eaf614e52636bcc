"""Application events – EventRecorder (exactly-once event insertion)."""
from __future__ import annotations

from orderpay.application.events.model import Event
from orderpay.kernel.errors import DuplicateEventRaisedError, FailureKind
from orderpay.kernel.store import AttributeNotExists, DocumentStore, Item, Rejected
from orderpay.kernel.types import Outcome, make_failure, make_success
from orderpay.observability.logging import get_logger

_log = get_logger(__name__)


def event_key(event: Event) -> Item:
    return {
        "pk": f"EVENTS#ORDER_ID#{event.subject_id}",
        "sk": f"EVENT#{event.event_name.value}",
    }


class EventRecorder:
    """Append-only event store writer.

    Every event is written under the key ``(subject id, event name)`` guarded
    by "insert only if absent", so re-delivering the same event produces a
    non-transient ``DuplicateEventRaisedError`` outcome instead of a second
    record.
    """

    _GUARD = AttributeNotExists("pk") & AttributeNotExists("sk")

    def __init__(self, store: DocumentStore, table_name: str) -> None:
        self._store = store
        self._table = table_name

    def build_item(self, event: Event) -> Item:
        return {
            **event_key(event),
            "_tn": "EVENTS#EVENT",
            "_sn": "EVENTS",
            **event.to_dict(),
            "gsi1pk": "EVENTS#EVENT",
            "gsi1sk": f"CREATED_AT#{event.created_at}",
        }

    async def raise_event(self, event: Event) -> Outcome[None]:
        log = _log.bind(operation="raise_event", table=self._table)
        if not isinstance(event, Event):
            return make_failure(FailureKind.INVALID_ARGUMENTS, f"Expected Event but got {event!r}", False)

        item = self.build_item(event)
        log = log.bind(event_name=event.event_name.value, order_id=event.subject_id)
        try:
            written = await self._store.put(self._table, item, condition=self._GUARD)
        except Exception as exc:  # noqa: BLE001
            result = make_failure(FailureKind.UNRECOGNIZED, exc, True)
            log.error("raise_event.failure", outcome=result)
            return result

        if isinstance(written, Rejected):
            error = DuplicateEventRaisedError(
                f"[{FailureKind.DUPLICATE_EVENT_RAISED}]: {event.event_name.value} already raised for {event.subject_id}",
                detail=event_key(event),
            )
            result = make_failure(FailureKind.DUPLICATE_EVENT_RAISED, error, False)
            log.info("raise_event.duplicate", outcome=result)
            return result

        log.info("raise_event.success")
        return make_success(None)


__all__ = ["EventRecorder", "event_key"]
