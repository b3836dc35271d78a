"""Settings model: load, mutate, persist and notify."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Final

from cardbg.common.enums import EmbedCategory
from cardbg.settings.user import EmbedTarget, PluginSettings
from cardbg.store.errors import PersistenceError
from cardbg.store.protocols import SettingsStore

logger: Final = logging.getLogger(__name__)

SettingsListener = Callable[[PluginSettings], None]


class SettingsModel:
    """Single source of truth for the plugin configuration.

    Every mutation that changes something is committed: the settings are
    written to the store and then every listener is called with the new
    state. A failed write is logged and otherwise ignored, so the in-memory
    settings always reflect the latest intent and listeners still run.

    Mutations that would not change anything return False and commit
    nothing.
    """

    def __init__(
        self,
        store: SettingsStore,
        listeners: list[SettingsListener] | None = None,
    ) -> None:
        self.store = store
        self._listeners: list[SettingsListener] = list(listeners or [])
        self._settings = PluginSettings.defaults()

    @property
    def settings(self) -> PluginSettings:
        return self._settings

    def add_listener(self, listener: SettingsListener) -> None:
        self._listeners.append(listener)

    def load(self) -> PluginSettings:
        """Read stored settings and overlay them onto the defaults.

        Nothing stored or an unreadable store leaves the defaults in place.
        An invalid stored value only resets its own key. Loading neither
        persists nor notifies.
        """
        try:
            stored = self.store.read()
        except PersistenceError as exc:
            logger.warning("Could not read stored settings, using defaults: %s", exc)
            stored = None

        self._settings = PluginSettings.merged(stored)
        return self._settings

    # ---- mutations ----
    def set_feature_enabled(self, enabled: bool) -> bool:
        if self._settings.enabled == enabled:
            return False
        self._settings.enabled = enabled
        self.commit()
        return True

    def set_apply_to_all(self, apply_all: bool) -> bool:
        if self._settings.apply_all_embed == apply_all:
            return False
        self._settings.apply_all_embed = apply_all
        self.commit()
        return True

    def set_target_selected(self, category: EmbedCategory, selected: bool) -> bool:
        """Add or remove a category from the explicit selection.

        Args:
            category: Category to toggle
            selected: Desired membership

        Returns:
            True if the selection changed and was committed
        """
        index = self._settings.index_of(category)
        if selected and index < 0:
            self._settings.targets.append(EmbedTarget.of(category))
        elif not selected and index >= 0:
            del self._settings.targets[index]
        else:
            return False
        self.commit()
        return True

    def commit(self) -> None:
        """Persist the current settings, then notify listeners."""
        try:
            self.store.write(self._settings.to_data())
        except Exception:
            logger.exception("Failed to persist settings")

        for listener in self._listeners:
            listener(self._settings)
