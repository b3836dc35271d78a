# src/cardbg/store/protocols.py
from __future__ import annotations

import copy
from typing import Any, Protocol, runtime_checkable

from cardbg.store.errors import StoreReadError, StoreWriteError


@runtime_checkable
class SettingsStore(Protocol):
    """Protocol defining the interface for settings persistence.

    Implementations store one flat mapping and replace it as a whole on
    every write, so a partially written state is never read back.
    """

    def read(self) -> dict[str, Any] | None:
        """Return the stored mapping, or None if nothing has been stored.

        Raises:
            StoreReadError: If stored data exists but cannot be read
        """
        ...

    def write(self, data: dict[str, Any]) -> None:
        """Replace the stored mapping.

        Args:
            data: JSON-compatible settings mapping

        Raises:
            StoreWriteError: If the data could not be written
        """
        ...


class MemoryStore:
    """In-memory implementation of SettingsStore for testing."""

    def __init__(self, data: dict[str, Any] | None = None):
        self.data: dict[str, Any] | None = copy.deepcopy(data)
        self.write_calls: list[dict[str, Any]] = []

    def read(self) -> dict[str, Any] | None:
        return copy.deepcopy(self.data)

    def write(self, data: dict[str, Any]) -> None:
        """Record the write and keep a detached copy as the stored state."""
        self.write_calls.append(copy.deepcopy(data))
        self.data = copy.deepcopy(data)

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.write_calls = []


class FailingStore(MemoryStore):
    """Store mock that can simulate read and write failures."""

    def __init__(
        self,
        data: dict[str, Any] | None = None,
        fail_on_methods: list[str] | None = None,
    ):
        """Initialize with optional methods that should fail.

        Args:
            data: Initially stored mapping
            fail_on_methods: List of method names that should raise exceptions
        """
        super().__init__(data)
        self.fail_on_methods = fail_on_methods if fail_on_methods is not None else ["write"]

    def read(self) -> dict[str, Any] | None:
        if "read" in self.fail_on_methods:
            raise StoreReadError("Simulated read failure")
        return super().read()

    def write(self, data: dict[str, Any]) -> None:
        """Either record the write or raise, based on configuration."""
        if "write" in self.fail_on_methods:
            raise StoreWriteError("Simulated write failure")
        super().write(data)
