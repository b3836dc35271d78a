# src/cardbg/style/protocols.py
from __future__ import annotations

from collections.abc import Set
from typing import Protocol, runtime_checkable

from cardbg.style.targets import EVERY_TARGET, StyleTarget


@runtime_checkable
class StyleSink(Protocol):
    """Protocol defining the interface for the global style container.

    The sink is the one place where treatments become visible (a stylesheet
    element, a class list). Only the StyleResolver writes to it, always as a
    deactivate_all/activate pair.
    """

    def deactivate_all(self) -> None:
        """Remove every possible treatment (EVERY_TARGET) from the container."""
        ...

    def activate(self, targets: Set[StyleTarget]) -> None:
        """Make exactly ``targets`` active, replacing whatever was active.

        Callers always run deactivate_all first, so the replacement never
        has anything left to drop.

        Args:
            targets: Style targets to switch on
        """
        ...


class RecordingStyleSink:
    """Mock implementation of StyleSink for testing.

    Tracks the currently active targets and records each call in order.
    A missing deactivate_all shows up in ``calls``, not in ``active``.
    """

    def __init__(self):
        self.active: set[StyleTarget] = set()
        self.calls: list[tuple[str, frozenset[StyleTarget]]] = []

    def deactivate_all(self) -> None:
        self.active.difference_update(EVERY_TARGET)
        self.calls.append(("deactivate_all", EVERY_TARGET))

    def activate(self, targets: Set[StyleTarget]) -> None:
        self.active = set(targets)
        self.calls.append(("activate", frozenset(targets)))

    def is_active(self, target: StyleTarget) -> bool:
        return target in self.active

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.calls = []
