"""Shared fixtures for the orderpay unit tests."""
from __future__ import annotations

import json
from typing import Any, Callable

import pytest

from orderpay.kernel.store.marshalling import marshall
from orderpay.testing.fakes import FakeClock, InMemoryDocumentStore

NOW = "2026-01-01T12:00:00.000Z"


@pytest.fixture()
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture()
def clock() -> Any:
    return FakeClock()


@pytest.fixture()
def order_data() -> dict[str, Any]:
    return {"orderId": "ORDER0001", "sku": "SKU0001", "units": 2, "price": 10.5, "userId": "USER0001"}


@pytest.fixture()
def stock_allocated_envelope(order_data: dict[str, Any]) -> Callable[..., dict[str, Any]]:
    """Build an event-bus envelope carrying a marshalled stock-allocated event record."""

    def build(**data_overrides: Any) -> dict[str, Any]:
        record = {
            "pk": f"EVENTS#ORDER_ID#{order_data['orderId']}",
            "sk": "EVENT#ORDER_STOCK_ALLOCATED_EVENT",
            "eventName": "ORDER_STOCK_ALLOCATED_EVENT",
            "eventData": {**order_data, **data_overrides},
            "createdAt": "2025-12-31T23:59:59.000Z",
            "updatedAt": "2025-12-31T23:59:59.000Z",
        }
        return {"detail": {"dynamodb": {"NewImage": marshall(record)}}}

    return build


@pytest.fixture()
def sqs_record() -> Callable[[str, Any], dict[str, Any]]:
    def build(message_id: str, body: Any) -> dict[str, Any]:
        return {"messageId": message_id, "body": body if isinstance(body, str) else json.dumps(body)}

    return build
