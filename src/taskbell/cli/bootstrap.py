# src/taskbell/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (blob store, snapshot repo,
  reminder scheduler, task store),
- re-arms in-memory reminders for stored tasks after a restart.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..config import get_settings
from ..core.state import AppState
from ..reminders.reminder_models import reminder_fire_at
from ..reminders.reminder_scheduler import LocalReminderScheduler
from ..storage.blob_store import SqliteBlobStore
from ..storage.snapshot import SnapshotRepository
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    scheduler = LocalReminderScheduler(max_pending=settings.reminder_max_pending)
    repository = SnapshotRepository(
        SqliteBlobStore(settings.tasks_db_path),
        key=settings.storage_key,
    )
    store = TaskStore(repository, scheduler)

    return AppState(
        settings=settings,
        store=store,
        scheduler=scheduler,
        label_locale=settings.label_locale,
    )


def rearm_reminders(state: AppState, *, now: datetime | None = None) -> int:
    """
    Re-schedule reminders for stored tasks that start later than now.

    Pending reminders live only in process memory, so a restart would
    otherwise forget them. Completed tasks are skipped. Returns how many
    reminders were requested.
    """
    if now is None:
        now = datetime.now()
    cutoff = now.replace(second=0, microsecond=0)

    count = 0
    for task in state.store.tasks():
        if task.is_completed:
            continue
        fire_at = reminder_fire_at(task.start_date)
        if fire_at < cutoff:
            continue
        state.scheduler.schedule(task.id, task.title, task.details, fire_at)
        count += 1

    logger.info("Re-armed %d reminder(s) from stored tasks.", count)
    return count
