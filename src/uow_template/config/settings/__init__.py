"""Config settings – 12-factor env-based configuration."""
from uow_template.config.settings.base import Settings, UowSettings
from uow_template.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader", "UowSettings"]
