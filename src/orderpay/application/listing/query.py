"""Application listing – list query objects shared by orders and payments."""
from __future__ import annotations

import dataclasses
from typing import Any, Self

from pydantic import Field

from orderpay.application.validation import (
    Schema,
    SortDirection,
    ValidLimit,
    ValidOrderId,
    ValidSortDirection,
    validate_input,
)
from orderpay.kernel.types import Outcome, make_success


class ListQueryData(Schema):
    """``{orderId?, sortDirection?, limit?}``; ``None`` counts as omitted."""

    order_id: ValidOrderId | None = Field(default=None, alias="orderId")
    sort_direction: ValidSortDirection | None = Field(default=None, alias="sortDirection")
    limit: ValidLimit | None = None


@dataclasses.dataclass(frozen=True)
class ListQuery:
    query_data: ListQueryData
    options: dict[str, Any] = dataclasses.field(default_factory=dict)

    @property
    def sort_ascending(self) -> bool:
        return (self.query_data.sort_direction or SortDirection.ASC) is SortDirection.ASC

    @classmethod
    def validate_and_build(cls, query_input: Any) -> Outcome[Self]:
        data_result = validate_input(ListQueryData, query_input)
        if data_result.is_failure():
            return data_result
        return make_success(cls(query_data=data_result.value))


__all__ = ["ListQuery", "ListQueryData"]
