"""Clear-then-apply protocol around the style sink."""

from __future__ import annotations

import logging
from typing import Final

from cardbg.settings.user import PluginSettings
from cardbg.style.protocols import StyleSink
from cardbg.style.targets import StyleTarget, resolve, resolve_state

logger: Final = logging.getLogger(__name__)


class StyleResolver:
    """Keep the style sink in line with the settings.

    ``apply`` always deactivates everything before activating the resolved
    set, so switching between settings never leaves a previous target
    active. The instance is callable, which lets it be registered directly
    as a SettingsModel listener.
    """

    def __init__(self, sink: StyleSink):
        self.sink = sink
        self.active: frozenset[StyleTarget] = frozenset()

    def clear(self) -> None:
        self.sink.deactivate_all()
        self.active = frozenset()

    def apply(self, settings: PluginSettings) -> frozenset[StyleTarget]:
        """Clear the sink, then activate the targets resolved from settings.

        Args:
            settings: Current plugin settings

        Returns:
            The set of targets now active
        """
        self.clear()
        targets = resolve(settings)
        self.sink.activate(targets)
        self.active = targets
        logger.debug(
            "Applied %s style: %s",
            resolve_state(settings).value,
            sorted(target.name for target in targets),
        )
        return targets

    def __call__(self, settings: PluginSettings) -> None:
        self.apply(settings)
