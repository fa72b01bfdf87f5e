# tests/test_kv_store.py

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from todo_repository.core.errors import ErrorKind, RepositoryError
from todo_repository.storage.kv_store import MemoryKeyValueStore, SQLiteKeyValueStore


@pytest.fixture(params=["memory", "sqlite"])
def any_store(request, tmp_path: Path):
    if request.param == "memory":
        return MemoryKeyValueStore()
    return SQLiteKeyValueStore(tmp_path / "kv.sqlite3")


def test_set_get_overwrite_delete(any_store) -> None:
    assert any_store.get("a") is None

    any_store.set("a", b"one")
    assert any_store.get("a") == b"one"

    any_store.set("a", b"two")
    assert any_store.get("a") == b"two"

    any_store.delete("a")
    assert any_store.get("a") is None

    # deleting a missing key is a no-op
    any_store.delete("a")


def test_enumerate_returns_all_pairs(any_store) -> None:
    any_store.set("todo-task-1", b"x")
    any_store.set("other", b"y")
    assert sorted(any_store.enumerate()) == [("other", b"y"), ("todo-task-1", b"x")]
    assert any_store.count() == 2


def test_sqlite_store_persists_across_instances(tmp_path: Path) -> None:
    db = tmp_path / "kv.sqlite3"
    SQLiteKeyValueStore(db).set("k", b"\x00\x01binary")
    assert SQLiteKeyValueStore(db).get("k") == b"\x00\x01binary"


def test_sqlite_store_unavailable(tmp_path: Path) -> None:
    # a directory where the database file should be
    db = tmp_path / "dir.sqlite3"
    db.mkdir()
    with pytest.raises(RepositoryError) as err:
        SQLiteKeyValueStore(db)
    assert err.value.kind is ErrorKind.STORAGE_UNAVAILABLE


def test_memory_store_count_during_concurrent_writes() -> None:
    store = MemoryKeyValueStore()
    seen: list[int] = []

    def writer(n: int) -> None:
        for i in range(200):
            store.set(f"k{n}-{i}", b"v")

    def reader() -> None:
        for _ in range(200):
            seen.append(store.count())

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    threads.append(threading.Thread(target=reader))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.count() == 800
    assert seen == sorted(seen)
