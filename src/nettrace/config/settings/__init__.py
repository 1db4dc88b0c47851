"""Config settings – 12-factor env-based configuration."""
from nettrace.config.settings.base import Settings
from nettrace.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
