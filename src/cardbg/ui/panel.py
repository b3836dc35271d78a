"""Settings panel model.

The host renders the widgets; this module owns their state (value,
enabled, visible) and turns user input into SettingsModel mutations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final, Optional

from cardbg.common.enums import ALL_CATEGORIES, EmbedCategory
from cardbg.settings.model import SettingsModel
from cardbg.settings.user import PluginSettings

logger: Final = logging.getLogger(__name__)

ENABLED_FIELD = "Enabled"
APPLY_ALL_FIELD = "Apply to All Cards"


@dataclass
class ToggleField:
    """One row of the settings panel.

    Headings and notes have no ``on_change`` and never carry a value.
    """

    name: str
    description: str = ""
    value: bool = False
    disabled: bool = False
    visible: bool = True
    on_change: Optional[Callable[[bool], object]] = field(default=None, repr=False)
    _saved_visible: Optional[bool] = field(default=None, repr=False)

    @property
    def is_toggle(self) -> bool:
        return self.on_change is not None

    @property
    def suppressed(self) -> bool:
        return self._saved_visible is not None

    def suppress(self) -> None:
        """Disable and hide the field, remembering whether it was visible."""
        if not self.suppressed:
            self._saved_visible = self.visible
        self.disabled = True
        self.visible = False

    def restore(self) -> None:
        """Re-enable the field and bring back the visibility it had."""
        self.disabled = False
        if self._saved_visible is not None:
            self.visible = self._saved_visible
            self._saved_visible = None

    def toggle(self, value: bool) -> None:
        if self.on_change is None:
            raise TypeError(f"{self.name!r} is not a toggle")
        if self.disabled:
            logger.debug("Ignoring input on disabled field %r", self.name)
            return
        self.value = value
        self.on_change(value)


class SettingsPanel:
    """Settings tab for the card background remover.

    Per-category toggles only matter while "Apply to All Cards" is off;
    while it is on they are disabled and hidden. The selection behind them
    is left untouched, so switching apply-to-all off shows the previous
    selection again.
    """

    def __init__(self, model: SettingsModel):
        self.model = model
        self.fields: list[ToggleField] = []
        self.target_fields: dict[EmbedCategory, ToggleField] = {}

    def display(self) -> list[ToggleField]:
        """Rebuild every field from the current settings."""
        settings = self.model.settings
        self.fields = [
            ToggleField("Settings"),
            ToggleField(
                ENABLED_FIELD,
                "Toggle enables of plugin feature",
                value=settings.enabled,
                on_change=self.model.set_feature_enabled,
            ),
            ToggleField("Cards"),
            ToggleField(
                APPLY_ALL_FIELD,
                value=settings.apply_all_embed,
                on_change=self._on_apply_all_change,
            ),
        ]

        self.target_fields = {}
        for category in ALL_CATEGORIES:
            target_field = ToggleField(
                category.display,
                value=settings.has_target(category),
                on_change=self._target_handler(category),
            )
            self.target_fields[category] = target_field
            self.fields.append(target_field)

        self.refresh_target_fields()

        self.fields.append(
            ToggleField(
                "How to change the label's visibility",
                "Change it in the Settings > Canvas > Display Card Label",
            )
        )
        return self.fields

    def sync(self, settings: PluginSettings) -> None:
        """Bring field values in line with settings changed elsewhere.

        Registered as a SettingsModel listener so host commands show up in
        an open panel. Does nothing before the first display().
        """
        if not self.fields:
            return
        self.field(ENABLED_FIELD).value = settings.enabled
        self.field(APPLY_ALL_FIELD).value = settings.apply_all_embed
        for category, target_field in self.target_fields.items():
            target_field.value = settings.has_target(category)
        self.refresh_target_fields()

    def refresh_target_fields(self) -> None:
        if self.model.settings.apply_all_embed:
            for target_field in self.target_fields.values():
                target_field.suppress()
        else:
            for target_field in self.target_fields.values():
                target_field.restore()

    def field(self, name: str) -> ToggleField:
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        raise KeyError(name)

    def toggle(self, name: str, value: bool) -> None:
        """Simulate the user flipping the toggle called ``name``."""
        self.field(name).toggle(value)

    def _on_apply_all_change(self, value: bool) -> None:
        self.model.set_apply_to_all(value)
        self.refresh_target_fields()

    def _target_handler(self, category: EmbedCategory) -> Callable[[bool], None]:
        def handler(value: bool) -> None:
            self.model.set_target_selected(category, value)

        return handler
