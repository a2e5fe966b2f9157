"""PersistenceAdapter over a KeyValueStorage.

Each store's state lives under one key as a JSON envelope::

    {"state": <codec payload>, "version": 1}

Loading is fail-open. A missing, unparsable or undecodable blob, or a
storage read that fails, comes back as None so the store starts empty
instead of blocking startup. Older blobs are upgraded one version at a
time through ``migrations``; a blob whose version has no path to the
current one is discarded.

Saving never raises either. If the state cannot be encoded or written,
the failure is logged and the in-memory store carries on.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Generic, TypeVar

from storefront.domain.exceptions import DomainException, StorageError
from storefront.domain.repository.key_value_storage import KeyValueStorage
from storefront.domain.repository.persistence_adapter import PersistenceAdapter
from storefront.infrastructure.persistence.codec import DecodeError, StateCodec

logger = logging.getLogger(__name__)

S = TypeVar("S")

Migration = Callable[[dict[str, Any]], dict[str, Any]]


class StorageAdapter(PersistenceAdapter[S], Generic[S]):

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str,
        codec: StateCodec[S],
        version: int = 1,
        migrations: dict[int, Migration] | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._codec = codec
        self._version = version
        self._migrations = migrations or {}

    @property
    def key(self) -> str:
        return self._key

    # --- PersistenceAdapter interface -----------------------------------------

    def load(self) -> S | None:
        try:
            blob = self._storage.get(self._key)
        except (StorageError, DomainException) as exc:
            logger.error(f"Could not read '{self._key}': {exc}")
            return None
        if blob is None:
            return None

        try:
            envelope = json.loads(blob)
            payload = self._upgrade(envelope)
            if payload is None:
                return None
            return self._codec.decode(payload)
        except (
            DecodeError,
            DomainException,
            ValueError,
            KeyError,
            TypeError,
            RecursionError,
        ) as exc:
            logger.error(f"Discarding unreadable state under '{self._key}': {exc}")
            return None

    def save(self, state: S) -> None:
        try:
            blob = json.dumps({"state": self._codec.encode(state), "version": self._version})
            self._storage.set(self._key, blob)
        except (StorageError, DomainException, TypeError, ValueError):
            logger.exception(f"Could not persist state under '{self._key}'")

    def clear(self) -> None:
        try:
            self._storage.remove(self._key)
        except (StorageError, DomainException):
            logger.exception(f"Could not remove state under '{self._key}'")

    # --- Versioning -----------------------------------------------------------

    def _upgrade(self, envelope: Any) -> dict[str, Any] | None:
        if not isinstance(envelope, dict) or not isinstance(envelope.get("state"), dict):
            raise DecodeError("Stored blob is not a state envelope")
        version = envelope.get("version", 0)
        if isinstance(version, bool) or not isinstance(version, int):
            raise DecodeError(f"Invalid state version: {version!r}")

        payload = envelope["state"]
        while version < self._version:
            migrate = self._migrations.get(version)
            if migrate is None:
                break
            payload = migrate(payload)
            version += 1

        if version != self._version:
            logger.warning(
                f"State under '{self._key}' has version {envelope.get('version', 0)}, "
                f"expected {self._version}; discarding it"
            )
            self.clear()
            return None
        return payload
