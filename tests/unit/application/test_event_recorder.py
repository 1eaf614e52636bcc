"""Unit tests for the idempotent EventRecorder."""

from __future__ import annotations

import asyncio
from typing import Any

from orderpay.application.events import EventRecorder
from orderpay.application.orders import OrderPlacedEvent
from orderpay.application.payments import OrderPaymentAcceptedEvent
from orderpay.kernel.errors import DuplicateEventRaisedError, FailureKind, StoreError
from orderpay.testing.fakes import InMemoryDocumentStore

TABLE = "event-store"


def _event(order_data: dict[str, Any], clock: Any, cls: type = OrderPlacedEvent) -> Any:
    return cls.validate_and_build(order_data, clock=clock).value


class TestEventBuild:
    def test_stamps_created_and_updated_at(self, order_data: dict[str, Any], clock: Any) -> None:
        event = _event(order_data, clock)
        assert event.created_at == event.updated_at == "2026-01-01T12:00:00.000Z"
        assert event.event_name.value == "ORDER_PLACED_EVENT"
        assert event.subject_id == "ORDER0001"

    def test_invalid_data_is_invalid_arguments(self, order_data: dict[str, Any]) -> None:
        result = OrderPlacedEvent.validate_and_build({**order_data, "price": "free"})
        assert result.is_failure()
        assert result.kind is FailureKind.INVALID_ARGUMENTS


class TestEventRecorder:
    def test_build_item_layout(self, store: InMemoryDocumentStore, order_data: dict[str, Any], clock: Any) -> None:
        item = EventRecorder(store, TABLE).build_item(_event(order_data, clock))
        assert item == {
            "pk": "EVENTS#ORDER_ID#ORDER0001",
            "sk": "EVENT#ORDER_PLACED_EVENT",
            "_tn": "EVENTS#EVENT",
            "_sn": "EVENTS",
            "eventName": "ORDER_PLACED_EVENT",
            "eventData": order_data,
            "createdAt": "2026-01-01T12:00:00.000Z",
            "updatedAt": "2026-01-01T12:00:00.000Z",
            "gsi1pk": "EVENTS#EVENT",
            "gsi1sk": "CREATED_AT#2026-01-01T12:00:00.000Z",
        }

    def test_first_raise_succeeds(self, store: InMemoryDocumentStore, order_data: dict[str, Any], clock: Any) -> None:
        result = asyncio.run(EventRecorder(store, TABLE).raise_event(_event(order_data, clock)))
        assert result.is_success()
        assert len(store.items(TABLE)) == 1

    def test_second_raise_is_non_transient_duplicate(
        self, store: InMemoryDocumentStore, order_data: dict[str, Any], clock: Any
    ) -> None:
        recorder = EventRecorder(store, TABLE)
        event = _event(order_data, clock)
        asyncio.run(recorder.raise_event(event))
        clock.advance(seconds=5)
        result = asyncio.run(recorder.raise_event(_event(order_data, clock)))
        assert result.is_failure()
        assert result.kind is FailureKind.DUPLICATE_EVENT_RAISED
        assert result.transient is False
        assert isinstance(result.error, DuplicateEventRaisedError)
        stored = store.items(TABLE)
        assert len(stored) == 1
        assert stored[0]["createdAt"] == "2026-01-01T12:00:00.000Z"

    def test_different_event_names_are_separate_records(
        self, store: InMemoryDocumentStore, order_data: dict[str, Any], clock: Any
    ) -> None:
        recorder = EventRecorder(store, TABLE)
        asyncio.run(recorder.raise_event(_event(order_data, clock)))
        result = asyncio.run(recorder.raise_event(_event(order_data, clock, OrderPaymentAcceptedEvent)))
        assert result.is_success()
        assert len(store.items(TABLE)) == 2

    def test_store_error_is_transient_unrecognized(
        self, store: InMemoryDocumentStore, order_data: dict[str, Any], clock: Any
    ) -> None:
        store.fail_next()
        result = asyncio.run(EventRecorder(store, TABLE).raise_event(_event(order_data, clock)))
        assert result.is_failure()
        assert result.kind is FailureKind.UNRECOGNIZED
        assert result.transient is True
        assert isinstance(result.error, StoreError)
        assert store.items(TABLE) == []

    def test_non_event_is_invalid_arguments(self, store: InMemoryDocumentStore, order_data: dict[str, Any]) -> None:
        result = asyncio.run(EventRecorder(store, TABLE).raise_event(order_data))  # type: ignore[arg-type]
        assert result.is_failure()
        assert result.kind is FailureKind.INVALID_ARGUMENTS
        assert result.transient is False
