"""DynamoDB adapter – DynamoDbDocumentStore (requires 'aiobotocore' extra)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from orderpay.kernel.errors import StoreError
from orderpay.kernel.store import Applied, Condition, DocumentStore, ExpressionContext, Item, Rejected, WriteResult
from orderpay.kernel.store.marshalling import marshall, unmarshall
from orderpay.observability.logging import get_logger

__all__ = ["DynamoDbConfig", "DynamoDbDocumentStore"]

_log = get_logger(__name__)

_CONDITION_FAILED = "ConditionalCheckFailedException"


def _require_aiobotocore() -> Any:  # pragma: no cover
    try:
        import aiobotocore.session  # noqa: PLC0415
        return aiobotocore.session
    except ImportError as exc:
        raise ImportError(
            "aiobotocore is required for the DynamoDB document store. "
            "Install it with: pip install 'orderpay[dynamodb]'"
        ) from exc


@dataclass
class DynamoDbConfig:
    region_name: str = "us-east-1"
    endpoint_url: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None


def _expression_kwargs(ctx: ExpressionContext) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if ctx.names:
        kwargs["ExpressionAttributeNames"] = dict(ctx.names)
    if ctx.values:
        kwargs["ExpressionAttributeValues"] = marshall(ctx.values)
    return kwargs


def _is_condition_failure(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") == _CONDITION_FAILED


def _previous_item(exc: ClientError) -> Item | None:
    image = exc.response.get("Item")
    return unmarshall(image) if image else None


class DynamoDbDocumentStore(DocumentStore):
    """DocumentStore backed by DynamoDB through ``aiobotocore``.

    Guards are rendered into ``ConditionExpression``; a failed guard comes back
    as :class:`Rejected` carrying the item DynamoDB returns with
    ``ReturnValuesOnConditionCheckFailure=ALL_OLD``.
    """

    def __init__(self, config: DynamoDbConfig, *, key_attributes: tuple[str, str] = ("pk", "sk")) -> None:
        self._config = config
        self._key_attributes = key_attributes

    def _client(self) -> Any:  # pragma: no cover
        session_mod = _require_aiobotocore()
        session = session_mod.get_session()
        kwargs: dict[str, Any] = {"region_name": self._config.region_name}
        if self._config.endpoint_url:
            kwargs["endpoint_url"] = self._config.endpoint_url
        if self._config.aws_access_key_id:
            kwargs["aws_access_key_id"] = self._config.aws_access_key_id
            kwargs["aws_secret_access_key"] = self._config.aws_secret_access_key
        return session.create_client("dynamodb", **kwargs)

    async def put(self, table: str, item: Item, *, condition: Condition | None = None) -> WriteResult:  # pragma: no cover
        ctx = ExpressionContext()
        kwargs: dict[str, Any] = {"TableName": table, "Item": marshall(item)}
        if condition is not None:
            kwargs["ConditionExpression"] = condition.render(ctx)
            kwargs["ReturnValuesOnConditionCheckFailure"] = "ALL_OLD"
        kwargs.update(_expression_kwargs(ctx))
        try:
            async with self._client() as client:
                await client.put_item(**kwargs)
        except ClientError as exc:
            if _is_condition_failure(exc):
                return Rejected(_previous_item(exc))
            raise StoreError(str(exc), operation="put", cause=exc) from exc
        except BotoCoreError as exc:
            raise StoreError(str(exc), operation="put", cause=exc) from exc
        return Applied(dict(item))

    async def update(
        self,
        table: str,
        key: Item,
        values: Item,
        *,
        values_if_absent: Item | None = None,
        condition: Condition | None = None,
    ) -> WriteResult:  # pragma: no cover
        ctx = ExpressionContext()
        assignments = [
            f"{ctx.name(name)} = {ctx.value(value)}"
            for name, value in values.items()
            if name not in self._key_attributes
        ]
        for name, value in (values_if_absent or {}).items():
            placeholder = ctx.name(name)
            assignments.append(f"{placeholder} = if_not_exists({placeholder}, {ctx.value(value)})")

        kwargs: dict[str, Any] = {
            "TableName": table,
            "Key": marshall(key),
            "UpdateExpression": "SET " + ", ".join(assignments),
            "ReturnValues": "ALL_NEW",
        }
        if condition is not None:
            kwargs["ConditionExpression"] = condition.render(ctx)
            kwargs["ReturnValuesOnConditionCheckFailure"] = "ALL_OLD"
        kwargs.update(_expression_kwargs(ctx))
        try:
            async with self._client() as client:
                response = await client.update_item(**kwargs)
        except ClientError as exc:
            if _is_condition_failure(exc):
                return Rejected(_previous_item(exc))
            raise StoreError(str(exc), operation="update", cause=exc) from exc
        except BotoCoreError as exc:
            raise StoreError(str(exc), operation="update", cause=exc) from exc
        return Applied(unmarshall(response.get("Attributes", {})))

    async def get(self, table: str, key: Item) -> Item | None:  # pragma: no cover
        try:
            async with self._client() as client:
                response = await client.get_item(TableName=table, Key=marshall(key))
        except (ClientError, BotoCoreError) as exc:
            raise StoreError(str(exc), operation="get", cause=exc) from exc
        image = response.get("Item")
        return unmarshall(image) if image else None

    async def query(
        self,
        table: str,
        key_condition: Item,
        *,
        index_name: str | None = None,
        sort_ascending: bool = True,
        limit: int | None = None,
    ) -> list[Item]:  # pragma: no cover
        ctx = ExpressionContext()
        expression = " AND ".join(f"{ctx.name(name)} = {ctx.value(value)}" for name, value in key_condition.items())
        kwargs: dict[str, Any] = {
            "TableName": table,
            "KeyConditionExpression": expression,
            "ScanIndexForward": sort_ascending,
        }
        if index_name:
            kwargs["IndexName"] = index_name
        if limit is not None:
            kwargs["Limit"] = limit
        kwargs.update(_expression_kwargs(ctx))

        items: list[Item] = []
        try:
            async with self._client() as client:
                while True:
                    response = await client.query(**kwargs)
                    items.extend(unmarshall(image) for image in response.get("Items", []))
                    last_key = response.get("LastEvaluatedKey")
                    if not last_key or (limit is not None and len(items) >= limit):
                        break
                    kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as exc:
            raise StoreError(str(exc), operation="query", cause=exc) from exc
        _log.debug("dynamodb.query", table=table, index_name=index_name, count=len(items))
        return items[:limit] if limit is not None else items
