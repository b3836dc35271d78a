"""Settings panel state."""

from cardbg.ui.panel import SettingsPanel, ToggleField

__all__ = ["SettingsPanel", "ToggleField"]
