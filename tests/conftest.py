# tests/conftest.py

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_repository.logging_setup import PACKAGE_LOGGER
from todo_repository.service.task_service import TaskService
from todo_repository.storage.kv_store import MemoryKeyValueStore, SQLiteKeyValueStore
from todo_repository.tasks.task_models import DomainTask, StoredTask
from todo_repository.tasks.task_repository import KeyValueTaskRepository

T0 = datetime(2023, 11, 3, 10, 10, tzinfo=timezone.utc)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We use a SimpleNamespace rather than the real config so tests do not
    depend on the developer's environment or .env file.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        store_db_path=tmp_path / "store.sqlite3",
        in_memory=False,
        key_prefix="todo-task-",
        strict_list=False,
        mint_ids=False,
    )


@pytest.fixture()
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def sqlite_store(tmp_path: Path) -> SQLiteKeyValueStore:
    return SQLiteKeyValueStore(tmp_path / "store.sqlite3")


@pytest.fixture()
def repo(store: MemoryKeyValueStore) -> KeyValueTaskRepository:
    return KeyValueTaskRepository(store)


@pytest.fixture()
def service(repo: KeyValueTaskRepository) -> TaskService:
    return TaskService(repo)


@pytest.fixture()
def stored_task() -> StoredTask:
    return StoredTask(
        id="t1",
        avatar="",
        username="hsimpson",
        title="Do groceries",
        description="Go to the supermarket and buy whatever Marge requests",
        date=T0,
        is_complete=False,
    )


@pytest.fixture()
def domain_task() -> DomainTask:
    return DomainTask(
        id="t1",
        avatar="",
        username="hsimpson",
        title="Do groceries",
        date=T0,
        description="Go to the supermarket and buy whatever Marge requests",
        is_completed=False,
    )


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root and package loggers back the way pytest left them."""
    root = logging.getLogger()
    pkg = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers = list(root.handlers)
    saved_root_level = root.level
    saved_pkg_level = pkg.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in saved_handlers:
            h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_root_level)
    pkg.setLevel(saved_pkg_level)
    logging.captureWarnings(False)
