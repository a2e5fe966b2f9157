"""Abstract durable key-value medium.

Stores persist one text blob per key. Anything that can map a string key
to a string value and keep it across restarts can back them: a directory
of files, Redis, or a plain dict when durability is not wanted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if never written.

        Raises StorageError if the medium cannot be read.
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Write ``value`` under ``key``, replacing any previous value.

        Raises StorageError if the medium cannot be written.
        """

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``. Removing a missing key is not an error."""
