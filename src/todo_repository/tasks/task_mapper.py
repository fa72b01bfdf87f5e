# src/todo_repository/tasks/task_mapper.py

from __future__ import annotations

from .task_models import DomainTask, StoredTask


def to_stored(task: DomainTask) -> StoredTask:
    return StoredTask(
        id=task.id,
        avatar=task.avatar,
        username=task.username,
        title=task.title,
        description=task.description,
        date=task.date,
        is_complete=task.is_completed,
    )


def to_domain(record: StoredTask) -> DomainTask:
    return DomainTask(
        id=record.id,
        avatar=record.avatar,
        username=record.username,
        title=record.title,
        date=record.date,
        description=record.description,
        is_completed=record.is_complete,
    )
