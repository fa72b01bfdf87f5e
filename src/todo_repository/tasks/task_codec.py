# src/todo_repository/tasks/task_codec.py

from __future__ import annotations

"""
JSON codec for stored tasks.

Wire shape (one UTF-8 JSON object per key):
  {"id", "avatarUrl", "username", "title", "description", "date", "isCompleted"}

There is no schema version: any change to this shape is a breaking change.
"""

import json
from datetime import datetime
from typing import Any

from ..core.errors import DecodingError, EncodingError
from .task_models import StoredTask

# in-memory name -> wire name
FIELD_TO_WIRE: dict[str, str] = {
    "id": "id",
    "avatar": "avatarUrl",
    "username": "username",
    "title": "title",
    "description": "description",
    "date": "date",
    "is_complete": "isCompleted",
}

_STRING_FIELDS = ("id", "avatar", "username", "title", "description")


def to_wire(record: StoredTask) -> dict[str, Any]:
    return {
        FIELD_TO_WIRE["id"]: record.id,
        FIELD_TO_WIRE["avatar"]: record.avatar,
        FIELD_TO_WIRE["username"]: record.username,
        FIELD_TO_WIRE["title"]: record.title,
        FIELD_TO_WIRE["description"]: record.description,
        FIELD_TO_WIRE["date"]: record.date.isoformat(),
        FIELD_TO_WIRE["is_complete"]: bool(record.is_complete),
    }


def from_wire(obj: Any) -> StoredTask:
    if not isinstance(obj, dict):
        raise DecodingError(f"expected JSON object, got {type(obj).__name__}")

    values: dict[str, Any] = {}
    for name in _STRING_FIELDS:
        wire = FIELD_TO_WIRE[name]
        if wire not in obj:
            raise DecodingError(f"missing field {wire!r}")
        if not isinstance(obj[wire], str):
            raise DecodingError(f"field {wire!r} must be a string")
        values[name] = obj[wire]

    raw_date = obj.get(FIELD_TO_WIRE["date"])
    if not isinstance(raw_date, str):
        raise DecodingError("field 'date' must be an ISO-8601 string")
    try:
        values["date"] = datetime.fromisoformat(raw_date)
    except ValueError as exc:
        raise DecodingError(f"bad date {raw_date!r}") from exc

    # Creation default when the flag was never written.
    done = obj.get(FIELD_TO_WIRE["is_complete"], False)
    if not isinstance(done, bool):
        raise DecodingError("field 'isCompleted' must be a boolean")
    values["is_complete"] = done

    return StoredTask(**values)


def encode(record: StoredTask) -> bytes:
    try:
        return json.dumps(to_wire(record), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError, AttributeError) as exc:
        raise EncodingError(f"cannot encode task {getattr(record, 'id', None)!r}: {exc}") from exc


def decode(blob: bytes) -> StoredTask:
    try:
        obj = json.loads(bytes(blob).decode("utf-8"))
    except (TypeError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodingError(f"malformed task blob: {exc}") from exc
    return from_wire(obj)
