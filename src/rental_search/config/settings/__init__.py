"""Config settings – 12-factor env-based configuration."""
from rental_search.config.settings.base import Settings
from rental_search.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
