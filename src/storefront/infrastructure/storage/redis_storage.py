"""Redis-backed implementation of KeyValueStorage.

Values are stored as plain Redis strings under ``<prefix><key>``, e.g.
``storefront:cart-storage``. With a ``ttl`` every write resets the
key's expiry, so state nobody touches for that long is dropped by Redis
itself, the same way abandoned carts expire server-side.
"""

from __future__ import annotations

import logging

import redis

from storefront.domain.exceptions import StorageError
from storefront.domain.repository.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)


class RedisStorage(KeyValueStorage):

    KEY_PREFIX = "storefront:"

    def __init__(
        self,
        client: redis.Redis,
        prefix: str = KEY_PREFIX,
        ttl: int | None = None,
    ) -> None:
        # client must be created with decode_responses=True
        self.redis = client
        self._prefix = prefix
        self._ttl = ttl

    def get(self, key: str) -> str | None:
        try:
            return self.redis.get(self._prefix + key)
        except redis.RedisError as exc:
            raise StorageError(f"Redis read of '{key}' failed: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self.redis.set(self._prefix + key, value, ex=self._ttl)
        except redis.RedisError as exc:
            raise StorageError(f"Redis write of '{key}' failed: {exc}") from exc
        logger.debug(f"Stored {len(value)} bytes under {self._prefix}{key}")

    def remove(self, key: str) -> None:
        try:
            self.redis.delete(self._prefix + key)
        except redis.RedisError as exc:
            raise StorageError(f"Redis delete of '{key}' failed: {exc}") from exc
