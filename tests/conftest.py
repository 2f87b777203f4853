# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbell.core.state import AppState
from taskbell.reminders.reminder_scheduler import LocalReminderScheduler
from taskbell.storage.snapshot import SnapshotRepository
from taskbell.tasks.task_store import TaskStore

from .fakes import CountingBlobStore, RecordingScheduler

STORAGE_KEY = "task_list"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="taskbell-test",
        log_level="DEBUG",
        console_enabled=False,
        reminders_enabled=False,
        label_locale="en",
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
        storage_key=STORAGE_KEY,
        reminder_poll_seconds=0.5,
        reminder_max_pending=64,
    )


@pytest.fixture()
def blobs() -> CountingBlobStore:
    return CountingBlobStore()


@pytest.fixture()
def repo(blobs: CountingBlobStore) -> SnapshotRepository:
    return SnapshotRepository(blobs, key=STORAGE_KEY)


@pytest.fixture()
def scheduler() -> RecordingScheduler:
    return RecordingScheduler()


@pytest.fixture()
def store(repo: SnapshotRepository, scheduler: RecordingScheduler) -> TaskStore:
    return TaskStore(repo, scheduler)


@pytest.fixture()
def state(settings: SimpleNamespace, repo: SnapshotRepository) -> AppState:
    """
    AppState wired with an in-memory blob store and a real local scheduler
    whose clock is pinned, so "now" never drifts during a test.
    """
    local = LocalReminderScheduler(clock=lambda: datetime(2026, 10, 16, 8, 0))
    return AppState(
        settings=settings,
        store=TaskStore(repo, local),
        scheduler=local,
        label_locale="en",
    )
