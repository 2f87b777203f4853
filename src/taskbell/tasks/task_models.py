# src/taskbell/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class Priority(StrEnum):
    """
    Task priority.

    The value is the stable identifier written to the snapshot.
    Human-readable text is resolved in labels.py.
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Category(StrEnum):
    WORK = "Work"
    HOME = "Home"
    LEARNING = "Learning"
    ENTERTAINMENT = "Entertainment"


def new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(slots=True)
class Task:
    """
    A single to-do entry.

    Notes:
    - id is assigned once at creation and never changes.
    - is_completed and is_favorite are independent flags; all four
      combinations are valid.
    - end_date is not checked against start_date.
    """

    title: str
    details: str
    start_date: datetime
    end_date: datetime
    priority: Priority
    category: Category

    is_completed: bool = False
    is_favorite: bool = False
    id: str = field(default_factory=new_task_id)
