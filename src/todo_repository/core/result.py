# src/todo_repository/core/result.py

from __future__ import annotations

"""
Result values handed to completion callbacks.

A completion receives exactly one of:
- Success(value)
- Failure(error)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from .errors import RepositoryError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    error: RepositoryError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result: TypeAlias = Success[T] | Failure
Completion: TypeAlias = Callable[[Result[T]], None]
