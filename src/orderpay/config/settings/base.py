"""Config settings – Settings base class with the checks shared by service settings."""
from __future__ import annotations

import dataclasses
import typing

from orderpay.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base for settings dataclasses loaded from ``<_prefix>_<FIELD>`` variables.

    Subclasses list the string fields that may not be blank (table and index
    names, for instance) in ``_non_blank``; those are checked before the
    subclass's own ``_validate`` hook runs.
    """

    _prefix: typing.ClassVar[str] = ""
    _non_blank: typing.ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        for name in self._non_blank:
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidSettingValueError(name, value, "must not be blank")
        self._validate()

    def _validate(self) -> None:
        """Cross-field checks; raise :class:`InvalidSettingValueError`."""

    def _require_between(self, name: str, low: int, high: int) -> None:
        value = getattr(self, name)
        if not low <= value <= high:
            raise InvalidSettingValueError(name, value, f"must be between {low} and {high}")


__all__ = ["Settings"]
