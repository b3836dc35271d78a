# filepath: src/cardbg/plugin.py
"""Host lifecycle for the canvas card background remover."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from cardbg.constants import DISABLE_COMMAND_ID, ENABLE_COMMAND_ID
from cardbg.settings.model import SettingsModel
from cardbg.settings.user import PluginSettings
from cardbg.store.file import FileSettingsStore
from cardbg.store.protocols import SettingsStore
from cardbg.style.protocols import StyleSink
from cardbg.style.render import StylesheetSink
from cardbg.style.resolver import StyleResolver
from cardbg.style.targets import StyleTarget
from cardbg.ui.panel import SettingsPanel

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """A command the host lists in its command palette."""

    id: str
    name: str
    callback: Callable[[], object]


class CardBackgroundPlugin:
    """Main controller wiring settings, style and settings panel together.

    The host calls ``onload`` once at start-up and ``onunload`` at shutdown.
    In between every committed settings change is persisted and then
    re-applied to the style sink by the resolver, which is registered as a
    settings listener.

    Examples:
        plugin = CardBackgroundPlugin(MemoryStore(), RecordingStyleSink())
        plugin.onload()
        plugin.run_command("canvas-sub-styler-disable")
    """

    def __init__(
        self,
        store: SettingsStore | None = None,
        sink: StyleSink | None = None,
        debug: bool = False,
    ):
        """Initialize the plugin.

        Args:
            store: Settings persistence (default: data file located from the environment)
            sink: Style container (default: a stylesheet element)
            debug: Enable debug logging
        """
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

        self.store = store or FileSettingsStore.from_env()
        self.sink = sink or StylesheetSink()
        self.model = SettingsModel(self.store)
        self.resolver = StyleResolver(self.sink)
        self.model.add_listener(self.resolver)
        self.panel = SettingsPanel(self.model)
        self.model.add_listener(self.panel.sync)
        self.commands: dict[str, Command] = {}

    @property
    def settings(self) -> PluginSettings:
        return self.model.settings

    @property
    def active_targets(self) -> frozenset[StyleTarget]:
        return self.resolver.active

    def onload(self) -> None:
        self.model.load()
        self.panel.display()
        self.resolver.apply(self.model.settings)

        self.add_command(ENABLE_COMMAND_ID, "Turn on", lambda: self.model.set_feature_enabled(True))
        self.add_command(
            DISABLE_COMMAND_ID, "Turn off", lambda: self.model.set_feature_enabled(False)
        )
        logger.info("Card background remover loaded")

    def onunload(self) -> None:
        self.resolver.clear()
        logger.info("Card background remover unloaded")

    def add_command(self, command_id: str, name: str, callback: Callable[[], object]) -> None:
        self.commands[command_id] = Command(command_id, name, callback)

    def run_command(self, command_id: str) -> None:
        """Run a registered command.

        Raises:
            KeyError: If no command has that id
        """
        try:
            command = self.commands[command_id]
        except KeyError:
            raise KeyError(f"Unknown command: {command_id}") from None
        logger.debug("Running command %s (%s)", command.id, command.name)
        command.callback()
