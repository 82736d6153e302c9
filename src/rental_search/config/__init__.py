"""Config – settings dataclasses, loaders and validation errors."""
from rental_search.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from rental_search.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
