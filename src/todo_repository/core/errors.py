# src/todo_repository/core/errors.py

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """
    What went wrong in a repository operation.

    Notes:
    - NOT_FOUND means "no value at this key" and nothing else.
    - A value that exists but cannot be decoded is DECODING_FAILED.
    """

    NOT_FOUND = "not_found"
    DECODING_FAILED = "decoding_failed"
    ENCODING_FAILED = "encoding_failed"
    STORAGE_UNAVAILABLE = "storage_unavailable"
    INVALID_RECORD = "invalid_record"


class EncodingError(ValueError):
    """Raised by the codec when a record cannot be serialized."""


class DecodingError(ValueError):
    """Raised by the codec when a blob is malformed or has the wrong shape."""


class RepositoryError(Exception):
    def __init__(self, kind: ErrorKind, message: str = "", *, key: str | None = None) -> None:
        self.kind = kind
        self.key = key
        self.message = message or kind.value
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"RepositoryError(kind={self.kind.value!r}, key={self.key!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RepositoryError):
            return NotImplemented
        return self.kind == other.kind and self.key == other.key

    def __hash__(self) -> int:
        return hash((self.kind, self.key))

    @classmethod
    def not_found(cls, key: str) -> RepositoryError:
        return cls(ErrorKind.NOT_FOUND, f"no record at key {key!r}", key=key)

    @classmethod
    def decoding_failed(cls, key: str, cause: BaseException) -> RepositoryError:
        return cls(ErrorKind.DECODING_FAILED, f"unable to decode {key!r}: {cause}", key=key)

    @classmethod
    def encoding_failed(cls, key: str, cause: BaseException) -> RepositoryError:
        return cls(ErrorKind.ENCODING_FAILED, f"unable to encode {key!r}: {cause}", key=key)

    @classmethod
    def storage_unavailable(cls, cause: BaseException, *, key: str | None = None) -> RepositoryError:
        return cls(ErrorKind.STORAGE_UNAVAILABLE, f"store failed: {cause}", key=key)

    @classmethod
    def invalid_record(cls, cause: BaseException) -> RepositoryError:
        return cls(ErrorKind.INVALID_RECORD, str(cause) or "invalid record")
