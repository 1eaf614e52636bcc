"""Observability – structured logging helpers."""
from orderpay.observability.logging.factory import JsonLoggerFactory
from orderpay.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from orderpay.observability.logging.processors import OutcomeProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "OutcomeProcessor",
    "SensitiveFieldsFilter",
    "get_logger",
]
