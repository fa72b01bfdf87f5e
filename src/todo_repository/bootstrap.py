# src/todo_repository/bootstrap.py

"""
Composition root.

- loads settings once,
- ensures the local (gitignored) data directory exists,
- applies the configured log level to the package logger,
- wires store -> repository -> service.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import Settings, get_settings
from .core.ports import KeyValueStore
from .logging_setup import level_from_name, set_package_level, setup_logging
from .service.task_service import TaskService
from .storage.kv_store import MemoryKeyValueStore, SQLiteKeyValueStore
from .tasks.task_repository import KeyValueTaskRepository

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> Path:
    """Install console + file logging under settings.data_dir at settings.log_level."""
    level = level_from_name(settings.log_level)
    log_file = setup_logging(log_dir=settings.data_dir, console_level=level, file_level=level)
    set_package_level(level)
    logger.info("Logging to %s level=%s", log_file, logging.getLevelName(level))
    return log_file


def create_store(settings: Settings) -> KeyValueStore:
    if settings.in_memory:
        logger.info("Using in-memory key-value store (nothing is persisted)")
        return MemoryKeyValueStore()
    settings.store_db_path.parent.mkdir(parents=True, exist_ok=True)
    return SQLiteKeyValueStore(settings.store_db_path)


def create_task_service(
    settings: Settings | None = None,
    *,
    store: KeyValueStore | None = None,
) -> TaskService:
    """Build a ready-to-use TaskService. Pass store to reuse an existing one."""
    settings = settings or get_settings()
    set_package_level(settings.log_level)
    store = store if store is not None else create_store(settings)

    repository = KeyValueTaskRepository(
        store,
        key_prefix=settings.key_prefix,
        strict_list=settings.strict_list,
    )
    logger.info(
        "%s task service ready prefix=%s strict_list=%s mint_ids=%s",
        settings.app_name,
        settings.key_prefix,
        settings.strict_list,
        settings.mint_ids,
    )
    return TaskService(repository, mint_ids=settings.mint_ids)
