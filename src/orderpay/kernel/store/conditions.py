"""Kernel store – guard conditions for single-key conditional writes.

A condition is evaluated against the *currently stored* item (``None`` when
the key is absent). Store adapters either evaluate it in-process or render it
into the engine's expression language through :class:`ExpressionContext`.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Any, Mapping


class ExpressionContext:
    """Collects attribute-name and attribute-value placeholders while rendering."""

    def __init__(self) -> None:
        self.names: dict[str, str] = {}
        self.values: dict[str, Any] = {}

    def name(self, attribute: str) -> str:
        placeholder = f"#{attribute.lstrip('_')}"
        self.names[placeholder] = attribute
        return placeholder

    def value(self, value: Any) -> str:
        placeholder = f":v{len(self.values)}"
        self.values[placeholder] = value
        return placeholder


class Condition(abc.ABC):
    """Port: predicate over the stored item."""

    @abc.abstractmethod
    def evaluate(self, item: Mapping[str, Any] | None) -> bool: ...

    @abc.abstractmethod
    def render(self, ctx: ExpressionContext) -> str: ...

    def __and__(self, other: Condition) -> Condition:
        return And((self, other))

    def __or__(self, other: Condition) -> Condition:
        return Or((self, other))


@dataclasses.dataclass(frozen=True)
class AttributeNotExists(Condition):
    attribute: str

    def evaluate(self, item: Mapping[str, Any] | None) -> bool:
        return item is None or self.attribute not in item

    def render(self, ctx: ExpressionContext) -> str:
        return f"attribute_not_exists({ctx.name(self.attribute)})"


@dataclasses.dataclass(frozen=True)
class AttributeNotIn(Condition):
    """True when the attribute is missing or holds none of *values*."""

    attribute: str
    values: tuple[Any, ...]

    def evaluate(self, item: Mapping[str, Any] | None) -> bool:
        if item is None or self.attribute not in item:
            return True
        return item[self.attribute] not in self.values

    def render(self, ctx: ExpressionContext) -> str:
        placeholders = ", ".join(ctx.value(v) for v in self.values)
        return f"NOT ({ctx.name(self.attribute)} IN ({placeholders}))"


@dataclasses.dataclass(frozen=True)
class And(Condition):
    conditions: tuple[Condition, ...]

    def evaluate(self, item: Mapping[str, Any] | None) -> bool:
        return all(c.evaluate(item) for c in self.conditions)

    def render(self, ctx: ExpressionContext) -> str:
        return " AND ".join(f"({c.render(ctx)})" for c in self.conditions)


@dataclasses.dataclass(frozen=True)
class Or(Condition):
    conditions: tuple[Condition, ...]

    def evaluate(self, item: Mapping[str, Any] | None) -> bool:
        return any(c.evaluate(item) for c in self.conditions)

    def render(self, ctx: ExpressionContext) -> str:
        return " OR ".join(f"({c.render(ctx)})" for c in self.conditions)


__all__ = [
    "And",
    "AttributeNotExists",
    "AttributeNotIn",
    "Condition",
    "ExpressionContext",
    "Or",
]
