"""Kernel store – document store port, guard conditions, marshalling."""
from orderpay.kernel.store.conditions import (
    And,
    AttributeNotExists,
    AttributeNotIn,
    Condition,
    ExpressionContext,
    Or,
)
from orderpay.kernel.store.ports import Applied, DocumentStore, Item, Rejected, WriteResult

__all__ = [
    "And",
    "Applied",
    "AttributeNotExists",
    "AttributeNotIn",
    "Condition",
    "DocumentStore",
    "ExpressionContext",
    "Item",
    "Or",
    "Rejected",
    "WriteResult",
]
