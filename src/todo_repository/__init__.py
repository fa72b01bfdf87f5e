"""
Local persistence for to-do tasks.

Components:
- storage/kv_store.py: key-value store adapters (SQLite, in-memory)
- tasks/task_codec.py: JSON wire codec for stored tasks
- tasks/task_repository.py: task CRUD over a key-value store
- tasks/task_mapper.py: stored <-> domain task mapping
- service/task_service.py: facade with callback and awaitable forms
"""

from .core.errors import DecodingError, EncodingError, ErrorKind, RepositoryError
from .core.result import Failure, Success
from .service.task_service import TaskService
from .tasks.task_models import DomainTask, StoredTask, new_task_id
from .tasks.task_repository import KeyValueTaskRepository, TaskListing

__all__ = [
    "DecodingError",
    "DomainTask",
    "EncodingError",
    "ErrorKind",
    "Failure",
    "KeyValueTaskRepository",
    "RepositoryError",
    "StoredTask",
    "Success",
    "TaskListing",
    "TaskService",
    "new_task_id",
]
