"""Unit tests for DynamoDbDocumentStore request building (client stubbed)."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from orderpay.adapters.dynamodb import DynamoDbConfig, DynamoDbDocumentStore
from orderpay.kernel.errors import StoreError
from orderpay.kernel.store import Applied, AttributeNotExists, AttributeNotIn, Rejected
from orderpay.kernel.store.marshalling import marshall


class _StubClient:
    """Async-context client that records calls and replays scripted answers."""

    def __init__(self, answers: dict[str, Any]) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._answers = answers

    async def __aenter__(self) -> _StubClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None

    def __getattr__(self, operation: str) -> Any:
        async def call(**kwargs: Any) -> Any:
            self.calls.append((operation, kwargs))
            answer = self._answers.get(operation, {})
            if isinstance(answer, BaseException):
                raise answer
            if isinstance(answer, list):
                return answer.pop(0)
            return answer

        return call


def _store(monkeypatch: pytest.MonkeyPatch, answers: dict[str, Any]) -> tuple[DynamoDbDocumentStore, _StubClient]:
    client = _StubClient(answers)
    store = DynamoDbDocumentStore(DynamoDbConfig(region_name="eu-west-1"))
    monkeypatch.setattr(store, "_client", lambda: client)
    return store, client


def _condition_failed(item: dict[str, Any] | None) -> ClientError:
    response: dict[str, Any] = {"Error": {"Code": "ConditionalCheckFailedException", "Message": "failed"}}
    if item is not None:
        response["Item"] = marshall(item)
    return ClientError(response, "UpdateItem")


class TestPut:
    def test_conditional_put(self, monkeypatch: pytest.MonkeyPatch) -> None:
        store, client = _store(monkeypatch, {})
        guard = AttributeNotExists("pk") & AttributeNotExists("sk")
        result = asyncio.run(store.put("event-store", {"pk": "A", "sk": "B", "price": 1.5}, condition=guard))
        assert isinstance(result, Applied)
        [(operation, kwargs)] = client.calls
        assert operation == "put_item"
        assert kwargs["ConditionExpression"] == "(attribute_not_exists(#pk)) AND (attribute_not_exists(#sk))"
        assert kwargs["ExpressionAttributeNames"] == {"#pk": "pk", "#sk": "sk"}
        assert kwargs["Item"]["price"] == {"N": "1.5"}
        assert kwargs["ReturnValuesOnConditionCheckFailure"] == "ALL_OLD"

    def test_condition_failure_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        existing = {"pk": "A", "sk": "B"}
        store, _ = _store(monkeypatch, {"put_item": _condition_failed(existing)})
        result = asyncio.run(store.put("t", {"pk": "A", "sk": "B"}, condition=AttributeNotExists("pk")))
        assert result == Rejected(existing)

    def test_other_client_error_raises_store_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        error = ClientError({"Error": {"Code": "ProvisionedThroughputExceededException"}}, "PutItem")
        store, _ = _store(monkeypatch, {"put_item": error})
        with pytest.raises(StoreError) as info:
            asyncio.run(store.put("t", {"pk": "A", "sk": "B"}))
        assert info.value.operation == "put"


class TestUpdate:
    def test_update_expression(self, monkeypatch: pytest.MonkeyPatch) -> None:
        attributes = marshall({"pk": "A", "sk": "B", "paymentStatus": "PAYMENT_FAILED", "createdAt": "T0"})
        store, client = _store(monkeypatch, {"update_item": {"Attributes": attributes}})
        result = asyncio.run(
            store.update(
                "payments",
                {"pk": "A", "sk": "B"},
                {"pk": "A", "paymentStatus": "PAYMENT_FAILED"},
                values_if_absent={"createdAt": "T0"},
                condition=AttributeNotIn("paymentStatus", ("PAYMENT_ACCEPTED", "PAYMENT_REJECTED")),
            )
        )
        assert isinstance(result, Applied)
        assert result.item["createdAt"] == "T0"
        [(_, kwargs)] = client.calls
        assert kwargs["UpdateExpression"] == "SET #paymentStatus = :v0, #createdAt = if_not_exists(#createdAt, :v1)"
        assert kwargs["ConditionExpression"] == "NOT (#paymentStatus IN (:v2, :v3))"
        assert kwargs["ExpressionAttributeValues"][":v2"] == {"S": "PAYMENT_ACCEPTED"}
        assert kwargs["Key"] == {"pk": {"S": "A"}, "sk": {"S": "B"}}

    def test_rejection_carries_previous_item(self, monkeypatch: pytest.MonkeyPatch) -> None:
        previous = {"pk": "A", "sk": "B", "paymentStatus": "PAYMENT_ACCEPTED", "paymentRetries": 2}
        store, _ = _store(monkeypatch, {"update_item": _condition_failed(previous)})
        result = asyncio.run(store.update("payments", {"pk": "A", "sk": "B"}, {"paymentStatus": "PAYMENT_FAILED"}))
        assert isinstance(result, Rejected)
        assert result.previous_item == previous


class TestReads:
    def test_get_missing_item(self, monkeypatch: pytest.MonkeyPatch) -> None:
        store, _ = _store(monkeypatch, {"get_item": {}})
        assert asyncio.run(store.get("t", {"pk": "A", "sk": "B"})) is None

    def test_get_converts_numbers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        store, _ = _store(monkeypatch, {"get_item": {"Item": marshall({"pk": "A", "units": 2})}})
        assert asyncio.run(store.get("t", {"pk": "A", "sk": "B"})) == {"pk": "A", "units": 2}

    def test_query_on_index(self, monkeypatch: pytest.MonkeyPatch) -> None:
        page = {"Items": [marshall({"orderId": "ORDER0001"})], "LastEvaluatedKey": {"pk": {"S": "x"}}}
        store, client = _store(monkeypatch, {"query": [page]})
        items = asyncio.run(
            store.query("orders", {"gsi1pk": "ORDERS#ORDER"}, index_name="idx", sort_ascending=False, limit=1)
        )
        assert items == [{"orderId": "ORDER0001"}]
        [(_, kwargs)] = client.calls
        assert kwargs["IndexName"] == "idx"
        assert kwargs["ScanIndexForward"] is False
        assert kwargs["Limit"] == 1
        assert kwargs["KeyConditionExpression"] == "#gsi1pk = :v0"

    def test_query_follows_pages_without_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pages = [
            {"Items": [marshall({"n": 1})], "LastEvaluatedKey": {"pk": {"S": "x"}}},
            {"Items": [marshall({"n": 2})]},
        ]
        store, client = _store(monkeypatch, {"query": pages})
        assert asyncio.run(store.query("t", {"pk": "A"})) == [{"n": 1}, {"n": 2}]
        assert client.calls[1][1]["ExclusiveStartKey"] == {"pk": {"S": "x"}}

    def test_connection_error_raises_store_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        store, _ = _store(monkeypatch, {"get_item": EndpointConnectionError(endpoint_url="http://localhost:8000")})
        with pytest.raises(StoreError):
            asyncio.run(store.get("t", {"pk": "A", "sk": "B"}))
