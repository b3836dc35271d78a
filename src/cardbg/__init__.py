"""Canvas card background remover.

Keeps a small set of settings (master switch, apply-to-all, selected embed
categories) and turns them into the stylesheet rules that make matching
canvas cards transparent.
"""

from cardbg.common.enums import ALL_CATEGORIES, EmbedCategory
from cardbg.plugin import CardBackgroundPlugin
from cardbg.settings import PluginSettings, SettingsModel
from cardbg.style import StyleResolver, StyleTarget, resolve

__all__ = [
    "ALL_CATEGORIES",
    "CardBackgroundPlugin",
    "EmbedCategory",
    "PluginSettings",
    "SettingsModel",
    "StyleResolver",
    "StyleTarget",
    "resolve",
]
