"""Config – 12-factor settings and loaders."""

from nettrace.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from nettrace.config.validation import (
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
