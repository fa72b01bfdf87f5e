# src/todo_repository/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the repository and the service.

Both layers depend on Protocols instead of concrete implementations,
so the store can be SQLite, a dict, or anything else with the same shape.
"""

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """String-keyed store of opaque byte blobs."""

    def get(self, key: str) -> bytes | None: ...
    def set(self, key: str, value: bytes) -> None: ...

    # Removing an absent key must be a no-op.
    def delete(self, key: str) -> None: ...

    def enumerate(self) -> list[tuple[str, bytes]]: ...


class TaskRepository(Protocol):
    # Lookup
    def get(self, task_id: str) -> Any: ...
    def list(self) -> list[Any]: ...

    # Writes
    def add(self, item: Any) -> Any: ...
    def edit(self, item: Any) -> bool: ...
    def update(self, item: Any) -> Any: ...
    def delete(self, item: Any) -> bool: ...
