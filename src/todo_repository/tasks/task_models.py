# src/todo_repository/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


def new_task_id() -> str:
    """Fresh unique task identifier (UUID text form)."""
    return str(uuid.uuid4())


@dataclass(slots=True)
class StoredTask:
    """
    Storage-shaped task record.

    Field names are the in-memory ones; the codec owns the wire names
    (avatar -> avatarUrl, is_complete -> isCompleted).
    """

    id: str
    avatar: str
    username: str
    title: str
    description: str
    date: datetime
    is_complete: bool = False


@dataclass(frozen=True, slots=True)
class DomainTask:
    """Public, caller-facing task record."""

    id: str
    avatar: str
    username: str
    title: str
    date: datetime
    description: str
    is_completed: bool = False

    @classmethod
    def create(
        cls,
        *,
        title: str,
        username: str,
        description: str = "",
        avatar: str = "",
        date: datetime | None = None,
        task_id: str | None = None,
    ) -> DomainTask:
        return cls(
            id=task_id or new_task_id(),
            avatar=avatar,
            username=username,
            title=title,
            date=date or datetime.now(timezone.utc),
            description=description,
            is_completed=False,
        )
