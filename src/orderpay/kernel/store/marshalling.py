"""Kernel store – DynamoDB attribute-value (un)marshalling.

Numbers come back from DynamoDB as :class:`~decimal.Decimal`; they are
converted to ``int`` when integral and ``float`` otherwise so that strict
validators see plain Python numbers.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

_deserializer = TypeDeserializer()
_serializer = TypeSerializer()


def to_python(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, Mapping):
        return {k: to_python(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_python(v) for v in value]
    return value


def to_dynamo(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, Mapping):
        return {k: to_dynamo(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_dynamo(v) for v in value]
    return value


def unmarshall(image: Mapping[str, Any]) -> dict[str, Any]:
    """``{"orderId": {"S": "..."}}`` → ``{"orderId": "..."}``."""
    return {k: to_python(_deserializer.deserialize(v)) for k, v in image.items()}


def marshall(item: Mapping[str, Any]) -> dict[str, Any]:
    return {k: _serializer.serialize(to_dynamo(v)) for k, v in item.items()}


__all__ = ["marshall", "to_dynamo", "to_python", "unmarshall"]
