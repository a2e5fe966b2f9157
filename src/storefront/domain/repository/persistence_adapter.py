"""Abstract persistence contract a store binds to.

An adapter is bound to a single key and knows how to turn a store's
state into a durable blob and back. It never raises: a state that cannot
be read comes back as None, a state that cannot be written is logged
and dropped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

S = TypeVar("S")


class PersistenceAdapter(ABC, Generic[S]):

    @abstractmethod
    def load(self) -> S | None:
        """Return the persisted state, or None if absent or unreadable."""

    @abstractmethod
    def save(self, state: S) -> None:
        """Write the whole state through to the durable medium."""

    @abstractmethod
    def clear(self) -> None:
        """Forget any persisted state."""
