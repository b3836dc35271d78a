"""Settings store backed by a JSON or YAML data file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml
from dotenv import load_dotenv

from cardbg.constants import DATA_FILE_ENV, DEFAULT_DATA_PATHS
from cardbg.store.errors import StoreReadError, StoreWriteError
from cardbg.utils.file import ensure_directory_exists

logger: Final = logging.getLogger(__name__)

YAML_SUFFIXES: Final = (".yaml", ".yml")


class FileSettingsStore:
    """Persist settings as a single data file.

    The format follows the file suffix: ``.yaml``/``.yml`` files are written
    with PyYAML, anything else as JSON (the host's ``data.json``). Every
    write replaces the whole file.
    """

    def __init__(self, path: Path):
        self.path = path

    @property
    def is_yaml(self) -> bool:
        return self.path.suffix.lower() in YAML_SUFFIXES

    @classmethod
    def from_env(cls) -> FileSettingsStore:
        """Locate the data file.

        Checks the CARDBG_DATA_FILE environment variable (a ``.env`` file is
        honoured), then the default search paths. When none exists the first
        default path is used and created on first write.
        """
        load_dotenv()
        env_path = os.environ.get(DATA_FILE_ENV)
        if env_path:
            return cls(Path(env_path).expanduser())

        for default_path in DEFAULT_DATA_PATHS:
            if default_path.exists():
                return cls(default_path)
        return cls(DEFAULT_DATA_PATHS[0])

    def read(self) -> dict[str, Any] | None:
        if not self.path.exists():
            logger.debug("No stored settings at %s", self.path)
            return None

        try:
            raw = self.path.read_text(encoding="utf-8")
            if self.is_yaml:
                data = yaml.safe_load(raw)
            else:
                # Empty file counts as nothing stored
                data = json.loads(raw) if raw.strip() else None
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise StoreReadError("Unable to read settings", self.path, exc) from exc

        if data is None:
            return None
        if not isinstance(data, dict):
            raise StoreReadError(
                f"Expected a mapping, got {type(data).__name__}", self.path
            )
        return data

    def write(self, data: dict[str, Any]) -> None:
        if self.is_yaml:
            text = yaml.safe_dump(data, sort_keys=False)
        else:
            text = json.dumps(data, indent=2)

        try:
            ensure_directory_exists(self.path.parent)
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StoreWriteError("Unable to write settings", self.path, exc) from exc
        logger.debug("Settings written to %s", self.path)
