import pytest

from cardbg.settings.model import SettingsModel
from cardbg.store.protocols import MemoryStore
from cardbg.style.protocols import RecordingStyleSink
from cardbg.style.resolver import StyleResolver


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def sink() -> RecordingStyleSink:
    return RecordingStyleSink()


@pytest.fixture
def model(memory_store: MemoryStore, sink: RecordingStyleSink) -> SettingsModel:
    """Loaded model with the resolver wired as its only listener."""
    settings_model = SettingsModel(memory_store, listeners=[StyleResolver(sink)])
    settings_model.load()
    return settings_model
