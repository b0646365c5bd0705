"""Config settings – 12-factor env-based configuration."""
from hrm_access.config.settings.access import AccessSettings
from hrm_access.config.settings.base import Settings
from hrm_access.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["AccessSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
