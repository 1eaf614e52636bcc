"""Config settings – 12-factor env-based configuration."""
from orderpay.config.settings.base import Settings
from orderpay.config.settings.factory import SettingsFactory
from orderpay.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from orderpay.config.settings.service import ServiceSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ServiceSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
