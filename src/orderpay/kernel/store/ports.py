"""Kernel store – document store port and the tagged write result."""
from __future__ import annotations

import abc
import dataclasses
from typing import Any

from orderpay.kernel.store.conditions import Condition

Item = dict[str, Any]


@dataclasses.dataclass(frozen=True)
class Applied:
    """The write went through; ``item`` is the stored item after the write."""

    item: Item


@dataclasses.dataclass(frozen=True)
class Rejected:
    """The guard condition failed; ``previous_item`` is what is stored now."""

    previous_item: Item | None


type WriteResult = Applied | Rejected


class DocumentStore(abc.ABC):
    """Port: single-key conditional key-value document store.

    Guard failures are reported as :class:`Rejected`, never raised. Transport
    failures raise :class:`~orderpay.kernel.errors.StoreError`.
    """

    @abc.abstractmethod
    async def put(self, table: str, item: Item, *, condition: Condition | None = None) -> WriteResult: ...

    @abc.abstractmethod
    async def update(
        self,
        table: str,
        key: Item,
        values: Item,
        *,
        values_if_absent: Item | None = None,
        condition: Condition | None = None,
    ) -> WriteResult:
        """Set *values* (and *values_if_absent* only where not yet stored) on *key*."""

    @abc.abstractmethod
    async def get(self, table: str, key: Item) -> Item | None: ...

    @abc.abstractmethod
    async def query(
        self,
        table: str,
        key_condition: Item,
        *,
        index_name: str | None = None,
        sort_ascending: bool = True,
        limit: int | None = None,
    ) -> list[Item]:
        """Return items whose key attributes equal *key_condition*, ordered by sort key."""


__all__ = ["Applied", "DocumentStore", "Item", "Rejected", "WriteResult"]
