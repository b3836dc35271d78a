"""Plugin settings management.

This package provides:
- PluginSettings: The persisted configuration schema and its defaults
- SettingsModel: The single source of truth that applies mutations,
  persists them and notifies listeners
"""

from cardbg.settings.model import SettingsListener, SettingsModel
from cardbg.settings.user import EmbedTarget, PluginSettings

__all__ = ["EmbedTarget", "PluginSettings", "SettingsListener", "SettingsModel"]
