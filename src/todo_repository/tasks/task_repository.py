# src/todo_repository/tasks/task_repository.py

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace

from ..core.errors import DecodingError, EncodingError, RepositoryError
from ..core.ports import KeyValueStore
from . import task_codec
from .task_models import StoredTask

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "todo-task-"


@dataclass(slots=True)
class TaskListing:
    """Outcome of a full scan: decoded tasks plus the keys that failed to decode."""

    tasks: list[StoredTask] = field(default_factory=list)
    skipped_keys: list[str] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.skipped_keys)


class KeyValueTaskRepository:
    """
    Task CRUD over a key-value store.

    Each task lives at key_prefix + id as one codec blob.

    Notes:
    - get() tells "absent" (NOT_FOUND) apart from "corrupt" (DECODING_FAILED).
    - list() matches keys by prefix and skips corrupt entries unless strict_list.
    - update()/edit() is read-modify-write under a per-repository lock;
      other processes writing the same store can still interleave (last write wins).
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        strict_list: bool = False,
    ) -> None:
        if not key_prefix:
            raise ValueError("key_prefix is required")
        self._store = store
        self._key_prefix = key_prefix
        self._strict_list = bool(strict_list)
        self._write_lock = threading.RLock()

    @property
    def key_prefix(self) -> str:
        return self._key_prefix

    def key_for(self, task_id: str) -> str:
        return f"{self._key_prefix}{task_id}"

    # ---- low-level helpers ----

    @staticmethod
    def _require_id(task_id: str) -> str:
        if not task_id or not str(task_id).strip():
            raise ValueError("task id is required")
        return str(task_id)

    def _load(self, key: str) -> StoredTask:
        blob = self._store.get(key)
        if blob is None:
            logger.debug("Task not found key=%s", key)
            raise RepositoryError.not_found(key)
        try:
            return task_codec.decode(blob)
        except DecodingError as exc:
            logger.warning("Unable to decode task key=%s: %s", key, exc)
            raise RepositoryError.decoding_failed(key, exc) from exc

    def _save(self, record: StoredTask) -> None:
        key = self.key_for(record.id)
        try:
            blob = task_codec.encode(record)
        except EncodingError as exc:
            logger.warning("Unable to encode task key=%s: %s", key, exc)
            raise RepositoryError.encoding_failed(key, exc) from exc
        self._store.set(key, blob)

    # ---- public API ----

    def get(self, task_id: str) -> StoredTask:
        return self._load(self.key_for(self._require_id(task_id)))

    def list_report(self) -> TaskListing:
        listing = TaskListing()
        for key, blob in self._store.enumerate():
            if not key.startswith(self._key_prefix):
                continue
            try:
                listing.tasks.append(task_codec.decode(blob))
            except DecodingError as exc:
                if self._strict_list:
                    raise RepositoryError.decoding_failed(key, exc) from exc
                logger.warning("Skipping undecodable task key=%s: %s", key, exc)
                listing.skipped_keys.append(key)

        if listing.skipped:
            logger.warning(
                "Task listing skipped %s corrupt entr%s (returned %s)",
                listing.skipped,
                "y" if listing.skipped == 1 else "ies",
                len(listing.tasks),
            )
        return listing

    def list(self) -> list[StoredTask]:
        return self.list_report().tasks

    def add(self, item: StoredTask) -> StoredTask:
        self._require_id(item.id)
        self._save(item)
        logger.debug("Task added id=%s complete=%s", item.id, item.is_complete)
        return item

    def update(self, item: StoredTask) -> StoredTask:
        key = self.key_for(self._require_id(item.id))
        with self._write_lock:
            current = self._load(key)
            updated = replace(
                current,
                avatar=item.avatar,
                username=item.username,
                title=item.title,
                description=item.description,
                date=item.date,
                is_complete=item.is_complete,
            )
            self._save(updated)
        logger.debug("Task updated id=%s complete=%s", updated.id, updated.is_complete)
        return updated

    def edit(self, item: StoredTask) -> bool:
        self.update(item)
        return True

    def delete_by_id(self, task_id: str) -> bool:
        key = self.key_for(self._require_id(task_id))
        self._store.delete(key)
        logger.debug("Task deleted key=%s", key)
        return True

    def delete(self, item: StoredTask) -> bool:
        return self.delete_by_id(item.id)
