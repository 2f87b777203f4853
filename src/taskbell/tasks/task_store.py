# src/taskbell/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime

from ..core.errors import PersistenceReadError, PersistenceWriteError
from ..core.ports import ReminderScheduler
from ..reminders.reminder_models import reminder_fire_at
from ..storage.snapshot import LoadResult, SaveResult, SnapshotRepository
from .task_models import Category, Priority, Task, new_task_id

logger = logging.getLogger(__name__)


def _start_key(task: Task) -> float:
    # Real point in time; naive values are read as local time.
    return task.start_date.timestamp()


class TaskStore:
    """
    Authoritative ordered task collection.

    - The list is kept sorted by start_date (stable: ties keep creation order).
    - Every mutating call writes the full snapshot exactly once.
    - create() asks the reminder scheduler for exactly one reminder.

    Failures never reach the caller: a corrupt or missing snapshot loads as an
    empty list, write failures are logged and remembered in last_save_error,
    scheduler exceptions are logged and the task is kept.

    Thread-safety:
    - one RLock guards the collection; mutation + resort + save happen under it
    - readers get copies, never the live Task objects
    """

    def __init__(self, repository: SnapshotRepository, scheduler: ReminderScheduler) -> None:
        self._repo = repository
        self._scheduler = scheduler
        self._lock = threading.RLock()
        self._tasks: list[Task] = []

        self.last_load_error: PersistenceReadError | None = None
        self.last_save_error: PersistenceWriteError | None = None

        self.load()
        logger.info("TaskStore ready key=%s total=%s", self._repo.key, len(self._tasks))

    # ---- persistence ----

    def load(self) -> LoadResult:
        """(Re)hydrate from the snapshot. Never raises."""
        result = self._repo.load()
        with self._lock:
            self._tasks = sorted(result.tasks, key=_start_key)
            self.last_load_error = result.error
        if result.error is not None:
            logger.warning("Task snapshot unusable, starting empty: %s", result.error)
        return result

    def _save(self) -> SaveResult:
        # Caller holds self._lock.
        result = self._repo.save(self._tasks)
        self.last_save_error = result.error
        return result

    # ---- reads ----

    def tasks(self) -> list[Task]:
        """Ordered snapshot of the collection (copies)."""
        with self._lock:
            return [replace(t) for t in self._tasks]

    def get(self, task_id: str) -> Task | None:
        with self._lock:
            task = self._find(task_id)
            return replace(task) if task is not None else None

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _find(self, task_id: str) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    # ---- mutations ----

    def create(
        self,
        title: str,
        details: str,
        start_date: datetime,
        end_date: datetime,
        priority: Priority,
        category: Category,
    ) -> Task:
        task = Task(
            title=title,
            details=details,
            start_date=start_date,
            end_date=end_date,
            priority=Priority(priority),
            category=Category(category),
        )

        with self._lock:
            while self._find(task.id) is not None:
                task = replace(task, id=new_task_id())
            self._tasks.append(task)
            self._tasks.sort(key=_start_key)
            self._save()
            created = replace(task)

        logger.debug(
            "Task created id=%s start=%s priority=%s category=%s",
            created.id,
            created.start_date.isoformat(),
            created.priority.value,
            created.category.value,
        )

        try:
            self._scheduler.schedule(
                created.id,
                created.title,
                created.details,
                reminder_fire_at(created.start_date),
            )
        except Exception:
            logger.exception("Reminder scheduling failed task_id=%s", created.id)

        return created

    def toggle_completion(self, task_id: str) -> Task | None:
        return self._toggle(task_id, "is_completed")

    def toggle_favorite(self, task_id: str) -> Task | None:
        return self._toggle(task_id, "is_favorite")

    def _toggle(self, task_id: str, flag: str) -> Task | None:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                logger.debug("Toggle %s ignored: unknown task id=%s", flag, task_id)
                return None
            setattr(task, flag, not getattr(task, flag))
            self._save()
            updated = replace(task)

        logger.debug("Task %s -> %s=%s", task_id, flag, getattr(updated, flag))
        return updated
