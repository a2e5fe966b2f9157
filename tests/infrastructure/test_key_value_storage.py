"""Tests for the key-value storage media: JSON files, memory and Redis."""

import pytest

from storefront.domain.exceptions import StorageError, ValidationError
from storefront.infrastructure.storage.json_file_storage import JsonFileStorage
from storefront.infrastructure.storage.memory_storage import MemoryStorage
from storefront.infrastructure.storage.redis_storage import RedisStorage
from tests.fakes import FakeRedis


class TestJsonFileStorage:

    def test_missing_key_reads_none(self, tmp_path):
        assert JsonFileStorage(tmp_path).get("cart-storage") is None

    def test_set_then_get(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "state")
        storage.set("cart-storage", '{"state": {}}')

        assert (tmp_path / "state" / "cart-storage.json").exists()
        assert storage.get("cart-storage").strip() == '{"state": {}}'

    def test_overwrite(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        storage.set("k", "one")
        storage.set("k", "two")
        assert storage.get("k").strip() == "two"

    def test_remove_is_idempotent(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        storage.set("k", "v")
        storage.remove("k")
        storage.remove("k")
        assert storage.get("k") is None

    @pytest.mark.parametrize("key", ["../escape", "", "a/b", ".hidden"])
    def test_unsafe_keys_rejected(self, tmp_path, key):
        with pytest.raises(ValidationError):
            JsonFileStorage(tmp_path).get(key)

    def test_non_utf8_file_is_a_storage_error(self, tmp_path):
        (tmp_path / "k.json").write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(StorageError, match="Cannot read"):
            JsonFileStorage(tmp_path).get("k")

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(StorageError):
            JsonFileStorage(blocker / "state").set("k", "v")


class TestMemoryStorage:

    def test_initial_values_are_copied(self):
        initial = {"k": "v"}
        storage = MemoryStorage(initial)
        storage.set("k", "w")
        assert initial == {"k": "v"}
        assert storage.get("k") == "w"

    def test_remove_missing(self):
        MemoryStorage().remove("nothing")


class TestRedisStorage:

    def test_keys_are_prefixed(self):
        client = FakeRedis()
        RedisStorage(client).set("cart-storage", "blob")
        assert client.values == {"storefront:cart-storage": "blob"}

    def test_get_and_remove(self):
        storage = RedisStorage(FakeRedis(), prefix="shop:")
        storage.set("k", "v")
        assert storage.get("k") == "v"
        storage.remove("k")
        assert storage.get("k") is None

    def test_ttl_applied_on_every_write(self):
        client = FakeRedis()
        RedisStorage(client, ttl=3600).set("k", "v")
        assert client.expiry["storefront:k"] == 3600

    def test_no_ttl_by_default(self):
        client = FakeRedis()
        RedisStorage(client).set("k", "v")
        assert client.expiry["storefront:k"] is None

    @pytest.mark.parametrize("operation,args", [
        ("get", ("k",)),
        ("set", ("k", "v")),
        ("remove", ("k",)),
    ])
    def test_connection_errors_become_storage_errors(self, operation, args):
        storage = RedisStorage(FakeRedis(fail=True))
        with pytest.raises(StorageError, match="Redis"):
            getattr(storage, operation)(*args)
