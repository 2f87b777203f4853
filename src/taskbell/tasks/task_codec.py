# src/taskbell/tasks/task_codec.py

"""
Snapshot wire format.

A snapshot is a UTF-8 JSON array; each element is one task:

    {
      "id": "5b0c...",
      "title": "...",
      "details": "...",
      "startDate": "2026-10-16T09:30:00+02:00",
      "endDate": "2026-10-16T10:00:00+02:00",
      "isCompleted": false,
      "isFavorite": false,
      "priority": "High",
      "category": "Work"
    }

Decoding is all-or-nothing: one malformed element rejects the whole snapshot.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from .task_models import Category, Priority, Task


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "details": task.details,
        "startDate": task.start_date.isoformat(),
        "endDate": task.end_date.isoformat(),
        "isCompleted": task.is_completed,
        "isFavorite": task.is_favorite,
        "priority": task.priority.value,
        "category": task.category.value,
    }


def _require(raw: dict[str, Any], key: str, kind: type) -> Any:
    if key not in raw:
        raise KeyError(f"missing field {key!r}")
    val = raw[key]
    if not isinstance(val, kind):
        raise TypeError(f"field {key!r} must be {kind.__name__}, got {type(val).__name__}")
    return val


def task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise TypeError(f"task entry must be an object, got {type(raw).__name__}")

    task_id = _require(raw, "id", str)
    if not task_id:
        raise ValueError("task id is empty")

    return Task(
        id=task_id,
        title=_require(raw, "title", str),
        details=_require(raw, "details", str),
        start_date=datetime.fromisoformat(_require(raw, "startDate", str)),
        end_date=datetime.fromisoformat(_require(raw, "endDate", str)),
        is_completed=_require(raw, "isCompleted", bool),
        is_favorite=_require(raw, "isFavorite", bool),
        priority=Priority(_require(raw, "priority", str)),
        category=Category(_require(raw, "category", str)),
    )


def encode_tasks(tasks: Iterable[Task]) -> bytes:
    payload = [task_to_dict(t) for t in tasks]
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def decode_tasks(blob: bytes) -> list[Task]:
    """
    Decode a snapshot blob.

    Raises ValueError / KeyError / TypeError on any malformed input,
    including duplicate ids.
    """
    data = json.loads(blob.decode("utf-8"))
    if not isinstance(data, list):
        raise TypeError(f"snapshot must be a JSON array, got {type(data).__name__}")

    tasks = [task_from_dict(item) for item in data]

    seen: set[str] = set()
    for t in tasks:
        if t.id in seen:
            raise ValueError(f"duplicate task id {t.id!r}")
        seen.add(t.id)
    return tasks
