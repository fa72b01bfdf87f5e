# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from todo_repository.core.errors import RepositoryError
from todo_repository.core.result import Completion, Failure, Success
from todo_repository.storage.kv_store import MemoryKeyValueStore


class BrokenKeyValueStore(MemoryKeyValueStore):
    """Store whose every call fails like an unreachable database."""

    def __init__(self, cause: Exception | None = None) -> None:
        super().__init__()
        self.cause = cause or OSError("disk unplugged")

    def get(self, key: str) -> bytes | None:
        raise RepositoryError.storage_unavailable(self.cause, key=key)

    def set(self, key: str, value: bytes) -> None:
        raise RepositoryError.storage_unavailable(self.cause, key=key)

    def delete(self, key: str) -> None:
        raise RepositoryError.storage_unavailable(self.cause, key=key)

    def enumerate(self) -> list[tuple[str, bytes]]:
        raise RepositoryError.storage_unavailable(self.cause)


class ExplodingKeyValueStore(MemoryKeyValueStore):
    """Store that raises a non-repository exception (a bug, not an outage)."""

    def get(self, key: str) -> bytes | None:
        raise RuntimeError("boom")


@dataclass(slots=True)
class CompletionRecorder:
    """Collects every Result a completion callback receives."""

    results: list = field(default_factory=list)

    def __call__(self, result) -> None:
        self.results.append(result)

    @property
    def single(self):
        assert len(self.results) == 1, f"expected exactly one resolution, got {len(self.results)}"
        return self.results[0]


class DoubleResolvingService:
    """Callback-form op that resolves twice: first success wins."""

    def __init__(self, first, second) -> None:
        self.first = first
        self.second = second

    def op(self, completion: Completion) -> None:
        completion(Success(self.first))
        completion(Failure(self.second) if isinstance(self.second, RepositoryError) else Success(self.second))
