"""File-backed implementation of KeyValueStorage.

Each key is one file, ``<directory>/<key>.json``, holding the raw value
exactly as the store's adapter produced it.
"""

from __future__ import annotations

import re
from pathlib import Path

from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.repository.key_value_storage import KeyValueStorage

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


class JsonFileStorage(KeyValueStorage):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    # --- KeyValueStorage interface --------------------------------------------

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path.write_text(value + "\n", encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc

    def remove(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot remove {path}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValidationError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"
