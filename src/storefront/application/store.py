"""Generic write-through state store.

A store owns one immutable state value (a tuple of frozen records).
Every mutation computes a new state, swaps it in, and writes the whole
state through its persistence adapter before returning. Reads are served
from memory only.

Lifecycle: construct, then call ``initialize()`` once to rehydrate from
the adapter. The composition root does both before handing the store to
any caller.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from storefront.domain.exceptions import StoreNotInitializedError
from storefront.domain.repository.persistence_adapter import PersistenceAdapter

logger = logging.getLogger(__name__)

S = TypeVar("S")


class Store(Generic[S]):

    def __init__(self, adapter: PersistenceAdapter[S], empty: S) -> None:
        self._adapter = adapter
        self._empty = empty
        self._state: S = empty
        self._initialized = False

    def initialize(self) -> None:
        """Rehydrate from the adapter. Calling it again does nothing."""
        if self._initialized:
            return
        loaded = self._adapter.load()
        if loaded is None:
            logger.info(f"{type(self).__name__}: no persisted state, starting empty")
            self._state = self._empty
        else:
            self._state = loaded
        self._initialized = True

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def state(self) -> S:
        self._require_initialized()
        return self._state

    # --- Internal helpers -----------------------------------------------------

    def _commit(self, new_state: S) -> None:
        self._require_initialized()
        self._state = new_state
        try:
            self._adapter.save(new_state)
        except Exception:
            # in-memory state stays authoritative for the session
            logger.exception(f"{type(self).__name__}: failed to persist state")

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise StoreNotInitializedError(
                f"{type(self).__name__} used before initialize()"
            )
