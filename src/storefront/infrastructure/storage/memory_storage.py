"""In-process KeyValueStorage. Nothing survives a restart."""

from __future__ import annotations

from storefront.domain.repository.key_value_storage import KeyValueStorage


class MemoryStorage(KeyValueStorage):

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)
