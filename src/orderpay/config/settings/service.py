"""Config settings – ServiceSettings for the order and payment services."""
from __future__ import annotations

import dataclasses
import typing

from orderpay.config.settings.base import Settings
from orderpay.config.validation import InvalidSettingValueError

# Highest limit a list request may carry at all; max_list_limit narrows it.
LIST_LIMIT_CEILING = 1000


@dataclasses.dataclass
class ServiceSettings(Settings):
    """Table names, list limits and retry cap.

    Loaded once at start-up (``ORDERPAY_*`` variables) and handed to each
    component's constructor by :mod:`orderpay.bootstrap`.
    """

    _prefix: typing.ClassVar[str] = "ORDERPAY"
    _non_blank: typing.ClassVar[tuple[str, ...]] = (
        "orders_table_name",
        "payments_table_name",
        "event_store_table_name",
        "list_index_name",
    )

    orders_table_name: str = "orders"
    payments_table_name: str = "payments"
    event_store_table_name: str = "event-store"
    list_index_name: str = "gsi1pk-gsi1sk-index"
    max_payment_retries: int = 3
    default_list_limit: int = 50
    max_list_limit: int = 1000
    aws_region: str = "us-east-1"
    dynamodb_endpoint_url: str | None = None
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.max_payment_retries < 0:
            raise InvalidSettingValueError("max_payment_retries", self.max_payment_retries, "must be >= 0")
        self._require_between("max_list_limit", 1, LIST_LIMIT_CEILING)
        self._require_between("default_list_limit", 1, self.max_list_limit)


__all__ = ["ServiceSettings"]
