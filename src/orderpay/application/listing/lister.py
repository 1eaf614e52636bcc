"""Application listing – ItemLister (key lookup or creation-time index scan)."""
from __future__ import annotations

from typing import Callable, Sequence

from orderpay.application.listing.query import ListQuery
from orderpay.application.validation import invalid_arguments
from orderpay.kernel.errors import FailureKind
from orderpay.kernel.store import DocumentStore, Item
from orderpay.kernel.types import Outcome, make_failure, make_success
from orderpay.observability.logging import get_logger

_log = get_logger(__name__)


class ItemLister:
    """Query one table either by a single order's key or by its listing index.

    With an ``orderId`` the query is an exact ``pk``/``sk`` match; otherwise
    it reads the ``gsi1pk = index_partition`` partition of *index_name*,
    sorted by creation time (ascending unless asked otherwise) and capped at
    *default_limit* items when no limit is given. A requested limit above
    *max_limit* is invalid.
    """

    def __init__(
        self,
        store: DocumentStore,
        table_name: str,
        *,
        key_for: Callable[[str], Item],
        index_name: str,
        index_partition: str,
        fields: Sequence[str],
        default_limit: int = 50,
        max_limit: int = 1000,
    ) -> None:
        self._store = store
        self._table = table_name
        self._key_for = key_for
        self._index_name = index_name
        self._index_partition = index_partition
        self._fields = tuple(fields)
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def list_items(self, query: ListQuery) -> Outcome[list[Item]]:
        if not isinstance(query, ListQuery):
            return make_failure(FailureKind.INVALID_ARGUMENTS, f"Expected ListQuery but got {query!r}", False)

        data = query.query_data
        if data.limit is not None and data.limit > self._max_limit:
            return invalid_arguments(f"limit must be at most {self._max_limit} but got {data.limit}")

        try:
            if data.order_id:
                items = await self._store.query(self._table, self._key_for(data.order_id))
            else:
                items = await self._store.query(
                    self._table,
                    {"gsi1pk": self._index_partition},
                    index_name=self._index_name,
                    sort_ascending=query.sort_ascending,
                    limit=data.limit or self._default_limit,
                )
        except Exception as exc:  # noqa: BLE001
            result = make_failure(FailureKind.UNRECOGNIZED, exc, True)
            _log.error("list_items.failure", table=self._table, outcome=result)
            return result

        return make_success([self._project(item) for item in items])

    def _project(self, item: Item) -> Item:
        return {field: item.get(field) for field in self._fields}


__all__ = ["ItemLister"]
