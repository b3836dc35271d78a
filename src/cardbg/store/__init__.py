"""Persistence of the plugin data file."""

from cardbg.store.errors import PersistenceError, StoreReadError, StoreWriteError
from cardbg.store.file import FileSettingsStore
from cardbg.store.protocols import FailingStore, MemoryStore, SettingsStore

__all__ = [
    "FailingStore",
    "FileSettingsStore",
    "MemoryStore",
    "PersistenceError",
    "SettingsStore",
    "StoreReadError",
    "StoreWriteError",
]
