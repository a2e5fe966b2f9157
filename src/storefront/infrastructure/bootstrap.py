"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Stores handed out from here are already rehydrated; callers receive the
instance and pass it along instead of reaching for a global.
"""

from __future__ import annotations

import redis

from storefront.application.cart_store import CART_STORAGE_KEY, CartStore
from storefront.application.reservation_store import (
    RESERVATION_STORAGE_KEY,
    ReservationStore,
)
from storefront.domain.repository.key_value_storage import KeyValueStorage
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.cart_codec import (
    CART_MIGRATIONS,
    CART_STATE_VERSION,
    CartCodec,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.reservation_codec import (
    RESERVATION_MIGRATIONS,
    RESERVATION_STATE_VERSION,
    ReservationCodec,
)
from storefront.infrastructure.persistence.storage_adapter import StorageAdapter
from storefront.infrastructure.storage.json_file_storage import JsonFileStorage
from storefront.infrastructure.storage.memory_storage import MemoryStorage
from storefront.infrastructure.storage.redis_storage import RedisStorage


def settings() -> Settings:
    return Settings()


def key_value_storage(config: Settings) -> KeyValueStorage:
    if config.storage_backend == "memory":
        return MemoryStorage()
    if config.storage_backend == "redis":
        client = redis.Redis(
            host=config.redis_host,
            port=config.redis_port,
            db=config.redis_db,
            decode_responses=True,
        )
        return RedisStorage(client, ttl=config.redis_ttl)
    return JsonFileStorage(config.data_dir / "state")


def product_repository(config: Settings) -> JsonProductRepository:
    return JsonProductRepository(config.data_dir / "products.json")


def cart_store(config: Settings, storage: KeyValueStorage | None = None) -> CartStore:
    adapter = StorageAdapter(
        storage if storage is not None else key_value_storage(config),
        CART_STORAGE_KEY,
        CartCodec(),
        version=CART_STATE_VERSION,
        migrations=CART_MIGRATIONS,
    )
    store = CartStore(adapter)
    store.initialize()
    return store


def reservation_store(
    config: Settings, storage: KeyValueStorage | None = None
) -> ReservationStore:
    adapter = StorageAdapter(
        storage if storage is not None else key_value_storage(config),
        RESERVATION_STORAGE_KEY,
        ReservationCodec(),
        version=RESERVATION_STATE_VERSION,
        migrations=RESERVATION_MIGRATIONS,
    )
    store = ReservationStore(
        adapter, strict_transitions=config.strict_reservation_transitions
    )
    store.initialize()
    return store
