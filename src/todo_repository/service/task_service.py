# src/todo_repository/service/task_service.py

from __future__ import annotations

"""
Task service facade.

Every operation exists in two calling conventions:
- callback form: op(..., completion) -> None, completion gets one Result
- awaitable form: await op_async(...) -> value, raises RepositoryError

The callback form is the only implementation. Each *_async method calls it
once through _await_completion and forwards its single resolution.

All operations resolve against the local key-value store.
"""

import asyncio
import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from typing import Any, TypeVar

from ..core.errors import RepositoryError
from ..core.ports import TaskRepository
from ..core.result import Completion, Failure, Result, Success
from ..tasks.task_mapper import to_domain, to_stored
from ..tasks.task_models import DomainTask, new_task_id

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskService:
    def __init__(self, repository: TaskRepository, *, mint_ids: bool = False) -> None:
        self._repository = repository
        self._mint_ids = bool(mint_ids)

    @property
    def repository(self) -> TaskRepository:
        return self._repository

    # ---- plumbing ----

    @staticmethod
    def _run(completion: Completion[T], op: Callable[[], T], *, name: str) -> None:
        """Run op and hand its outcome to completion exactly once."""
        result: Result[Any]
        try:
            result = Success(op())
        except RepositoryError as exc:
            logger.debug("%s failed kind=%s key=%s", name, exc.kind.value, exc.key)
            result = Failure(exc)
        except (ValueError, TypeError, AttributeError) as exc:
            # Caller handed in something that is not a usable task.
            logger.warning("%s rejected invalid input: %s", name, exc)
            result = Failure(RepositoryError.invalid_record(exc))
        except Exception as exc:
            logger.exception("%s failed unexpectedly", name)
            result = Failure(RepositoryError.storage_unavailable(exc))
        completion(result)

    @staticmethod
    async def _await_completion(start: Callable[[Completion[Any]], None]) -> Any:
        """
        Bridge a callback-form call into an awaitable.

        The future is settled by the first resolution only; completions
        arriving from another thread are marshalled onto the loop.
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[Any] = loop.create_future()
        loop_thread = threading.get_ident()

        def settle(result: Result[Any]) -> None:
            if future.cancelled():
                return
            if future.done():
                logger.warning("Completion resolved more than once; ignoring %r", result)
                return
            if isinstance(result, Success):
                future.set_result(result.value)
            else:
                future.set_exception(result.error)

        def completion(result: Result[Any]) -> None:
            if threading.get_ident() == loop_thread:
                settle(result)
            else:
                loop.call_soon_threadsafe(settle, result)

        start(completion)
        return await future

    # ---- callback form ----

    def get_one(self, task_id: str, completion: Completion[DomainTask]) -> None:
        self._run(completion, lambda: to_domain(self._repository.get(task_id)), name="get_one")

    def get_all(self, completion: Completion[list[DomainTask]]) -> None:
        self._run(
            completion,
            lambda: [to_domain(r) for r in self._repository.list()],
            name="get_all",
        )

    def _add(self, task: DomainTask) -> DomainTask:
        if self._mint_ids:
            task = replace(task, id=new_task_id())
        return to_domain(self._repository.add(to_stored(task)))

    def _update(self, task: DomainTask) -> DomainTask:
        return to_domain(self._repository.update(to_stored(task)))

    def new(self, task: DomainTask, completion: Completion[DomainTask]) -> None:
        self._run(completion, lambda: self._add(task), name="new")

    def update(self, task: DomainTask, completion: Completion[DomainTask]) -> None:
        self._run(completion, lambda: self._update(task), name="update")

    def delete(self, task: DomainTask, completion: Completion[bool]) -> None:
        self._run(completion, lambda: self._repository.delete(to_stored(task)), name="delete")

    def complete_task(self, task: DomainTask, completion: Completion[DomainTask]) -> None:
        """Mark task as completed. Completing an already-completed task rewrites the same data."""
        self._run(
            completion,
            lambda: self._update(replace(task, is_completed=True)),
            name="complete_task",
        )

    # ---- awaitable form ----

    async def get_one_async(self, task_id: str) -> DomainTask:
        return await self._await_completion(lambda done: self.get_one(task_id, done))

    async def get_all_async(self) -> list[DomainTask]:
        return await self._await_completion(self.get_all)

    async def new_async(self, task: DomainTask) -> DomainTask:
        return await self._await_completion(lambda done: self.new(task, done))

    async def update_async(self, task: DomainTask) -> DomainTask:
        return await self._await_completion(lambda done: self.update(task, done))

    async def delete_async(self, task: DomainTask) -> bool:
        return await self._await_completion(lambda done: self.delete(task, done))

    async def complete_task_async(self, task: DomainTask) -> DomainTask:
        return await self._await_completion(lambda done: self.complete_task(task, done))
