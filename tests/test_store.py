import json
from pathlib import Path

import pytest
import yaml

from cardbg.constants import DATA_FILE_ENV
from cardbg.settings.user import PluginSettings
from cardbg.store.errors import StoreReadError, StoreWriteError
from cardbg.store.file import FileSettingsStore

SAMPLE = {
    "isEnabled": False,
    "applyAllEmbed": True,
    "targets": [{"type": "markdown-embed", "display": "Markdown"}],
}


def test_missing_file_reads_as_nothing_stored(tmp_path: Path) -> None:
    assert FileSettingsStore(tmp_path / "data.json").read() is None


def test_empty_json_file_reads_as_nothing_stored(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("")
    assert FileSettingsStore(path).read() is None


def test_json_write_creates_parent_dirs(tmp_path: Path) -> None:
    path = tmp_path / "plugin" / "data.json"
    store = FileSettingsStore(path)
    store.write(SAMPLE)
    assert json.loads(path.read_text()) == SAMPLE
    assert store.read() == SAMPLE


@pytest.mark.parametrize("name", ["data.yaml", "data.YML"])
def test_yaml_format_follows_suffix(tmp_path: Path, name: str) -> None:
    path = tmp_path / name
    store = FileSettingsStore(path)
    assert store.is_yaml is True
    store.write(SAMPLE)
    assert yaml.safe_load(path.read_text()) == SAMPLE
    assert store.read() == SAMPLE


def test_settings_round_trip_through_file(tmp_path: Path) -> None:
    store = FileSettingsStore(tmp_path / "data.json")
    settings = PluginSettings.merged(SAMPLE)
    store.write(settings.to_data())
    assert PluginSettings.merged(store.read()) == settings


@pytest.mark.parametrize(
    "name, content",
    [
        ("data.json", "{not json"),
        ("data.json", "[1, 2, 3]"),
        ("data.yaml", "targets: [1, 2"),
        ("data.yaml", "- just\n- a list\n"),
    ],
)
def test_unreadable_content_raises(tmp_path: Path, name: str, content: str) -> None:
    path = tmp_path / name
    path.write_text(content)
    with pytest.raises(StoreReadError) as excinfo:
        FileSettingsStore(path).read()
    assert excinfo.value.path == path


def test_directory_in_place_of_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.mkdir()
    with pytest.raises(StoreReadError) as excinfo:
        FileSettingsStore(path).read()
    assert isinstance(excinfo.value.original_error, OSError)


def test_write_failure_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    with pytest.raises(StoreWriteError):
        FileSettingsStore(blocker / "data.json").write(SAMPLE)


def test_from_env_uses_environment_variable(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "custom.yaml"
    monkeypatch.setenv(DATA_FILE_ENV, str(path))
    assert FileSettingsStore.from_env().path == path


def test_from_env_picks_first_existing_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    first, second = tmp_path / "a.json", tmp_path / "b.yaml"
    second.write_text("applyAllEmbed: true\n")
    monkeypatch.delenv(DATA_FILE_ENV, raising=False)
    monkeypatch.setattr("cardbg.store.file.DEFAULT_DATA_PATHS", [first, second])
    assert FileSettingsStore.from_env().path == second


def test_from_env_falls_back_to_first_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    first, second = tmp_path / "a.json", tmp_path / "b.yaml"
    monkeypatch.delenv(DATA_FILE_ENV, raising=False)
    monkeypatch.setattr("cardbg.store.file.DEFAULT_DATA_PATHS", [first, second])
    assert FileSettingsStore.from_env().path == first
