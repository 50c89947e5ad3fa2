"""Durable settings store.

Holds the API key in memory and mirrors it to a JSON file on every change.
The store must be opened before use and closed when the app shuts down;
there is no module-level instance.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

API_KEY_FIELD = "gemini-api-key"


class SettingsClosedError(RuntimeError):
    """Raised when the store is used before open() or after close()."""


class StoredSettings(BaseModel):
    """On-disk layout of the settings file."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(default="", alias=API_KEY_FIELD)


class SettingsStore:
    """File-backed settings with an explicit open/close lifecycle.

    Example:
        with SettingsStore(path) as store:
            store.save_api_key("AIza...")
            print(store.has_api_key)
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._settings: StoredSettings | None = None

    @property
    def path(self) -> Path:
        """Location of the settings file."""
        return self._path

    @property
    def is_open(self) -> bool:
        return self._settings is not None

    def open(self) -> "SettingsStore":
        """Load settings from disk. A missing or unreadable file yields defaults."""
        self._settings = self._read()
        return self

    def close(self) -> None:
        """Drop the in-memory copy. Everything was already written on change."""
        self._settings = None

    def __enter__(self) -> "SettingsStore":
        return self.open()

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def _require_open(self) -> StoredSettings:
        if self._settings is None:
            raise SettingsClosedError("Settings store is not open")
        return self._settings

    @property
    def api_key(self) -> str:
        """The saved API key, or an empty string."""
        return self._require_open().api_key

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def save_api_key(self, api_key: str) -> None:
        """Overwrite the saved key and persist it.

        Raises:
            ValueError: If the key is blank
        """
        current = self._require_open()
        cleaned = api_key.strip()
        if not cleaned:
            raise ValueError("API key must not be empty")
        self._settings = current.model_copy(update={"api_key": cleaned})
        self._write(self._settings)

    def clear_api_key(self) -> None:
        """Erase the saved key and persist the change."""
        current = self._require_open()
        self._settings = current.model_copy(update={"api_key": ""})
        self._write(self._settings)

    def _read(self) -> StoredSettings:
        if not self._path.exists():
            return StoredSettings()
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return StoredSettings.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError):
            # Corrupt file: start fresh, the next write replaces it
            return StoredSettings()

    def _write(self, settings: StoredSettings) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = settings.model_dump_json(by_alias=True, indent=2)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".settings-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
