# src/taskbell/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..reminders.reminder_scheduler import LocalReminderScheduler
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything a front-end needs, passed explicitly (no module globals).

    settings is kept as Any so tests can use a SimpleNamespace.
    """

    settings: Any
    store: TaskStore
    scheduler: LocalReminderScheduler
    label_locale: str = "en"
