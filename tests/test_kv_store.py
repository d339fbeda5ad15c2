from __future__ import annotations

from pathlib import Path

import pytest

from ledwall_core.kv_store import MemoryKeyValueStore, SqliteKeyValueStore, StoreError


def test_sqlite_store_set_get_overwrite_remove(tmp_path: Path) -> None:
    store = SqliteKeyValueStore(tmp_path / "kv.sqlite")
    assert store.get("a") is None

    store.set("a", "1")
    store.set("b", "2")
    assert store.get("a") == "1"

    store.set("a", "one")
    assert store.get("a") == "one"
    assert store.keys() == ["a", "b"]

    store.remove("a")
    store.remove("missing")
    assert store.get("a") is None
    assert store.keys() == ["b"]


def test_sqlite_store_persists_between_instances(tmp_path: Path) -> None:
    db_path = tmp_path / "kv.sqlite"
    SqliteKeyValueStore(db_path).set("k", "v")
    assert SqliteKeyValueStore(db_path).get("k") == "v"


def test_sqlite_store_unopenable_path_raises_store_error(tmp_path: Path) -> None:
    store = SqliteKeyValueStore(tmp_path / "missing_dir" / "kv.sqlite")
    with pytest.raises(StoreError):
        store.get("k")
    with pytest.raises(StoreError):
        store.set("k", "v")


def test_memory_store_availability_flags() -> None:
    store = MemoryKeyValueStore({"k": "v"})
    assert store.get("k") == "v"

    store.read_only = True
    assert store.get("k") == "v"
    with pytest.raises(StoreError):
        store.set("k", "w")
    with pytest.raises(StoreError):
        store.remove("k")

    store.available = False
    with pytest.raises(StoreError):
        store.get("k")
