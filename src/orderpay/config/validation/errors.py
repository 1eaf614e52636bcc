"""Config validation – errors raised while loading ``ORDERPAY_*`` settings.

They are raised at start-up, before any component is built, so they never
travel inside a Failure outcome.
"""
from __future__ import annotations

from orderpay.kernel.errors import BaseError


class ConfigError(BaseError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """*value* was read for *setting_name* but cannot be used (bad type, out of range, blank)."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
