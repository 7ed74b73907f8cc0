"""
Factory tests for SimpleMemoryStore.

The factory turns settings into a ready-to-use store; no singleton is involved,
so every call hands back a fresh instance.
"""

from common.config.settings import StoreSettings
from simplememorystore.core import Store
from simplememorystore.factory import create_store


def test_create_store_uses_id_start():
    store = create_store(StoreSettings(id_start=41))
    assert isinstance(store, Store)
    assert store.insert("tweets", {"message": "hi"})["id"] == 42


def test_create_store_can_seed_default_data():
    store = create_store(StoreSettings(seed_default_data=True))
    assert store.count("tweets") == 2
    assert store.count("users") == 2
    assert store.last_id == 104


def test_create_store_loads_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SMS_ID_START", "900")
    monkeypatch.delenv("SMS_SEED_DEFAULT_DATA", raising=False)
    store = create_store()
    assert store.types() == []
    assert store.insert("users", {"name": "Ada"})["id"] == 901


def test_each_call_returns_a_new_store():
    settings = StoreSettings()
    first = create_store(settings)
    second = create_store(settings)
    first.insert("tweets", {"message": "only here"})
    assert first is not second
    assert second.select("tweets") is None
