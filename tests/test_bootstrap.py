# tests/test_bootstrap.py

from __future__ import annotations

from datetime import datetime, timedelta

from taskbell.cli.bootstrap import create_initial_state, rearm_reminders
from taskbell.tasks.task_models import Category, Priority

NOW = datetime(2026, 10, 16, 12, 0)


def test_create_initial_state_persists_to_sqlite(settings) -> None:
    state = create_initial_state(settings=settings)
    assert state.store.tasks() == []

    task = state.store.create(
        "water plants", "", NOW + timedelta(days=400), NOW, Priority.LOW, Category.HOME
    )
    assert settings.tasks_db_path.exists()

    reopened = create_initial_state(settings=settings)
    assert reopened.store.tasks() == [task]
    assert reopened.scheduler.pending() == []


def test_rearm_schedules_only_future_open_tasks(settings) -> None:
    state = create_initial_state(settings=settings)
    far = datetime.now() + timedelta(days=30)

    future = state.store.create("future", "", far, far, Priority.HIGH, Category.WORK)
    done = state.store.create("done", "", far, far, Priority.HIGH, Category.WORK)
    state.store.toggle_completion(done.id)
    state.store.create("past", "", datetime(2001, 1, 1), datetime(2001, 1, 1), Priority.LOW, Category.HOME)

    reopened = create_initial_state(settings=settings)
    assert rearm_reminders(reopened) == 1
    assert [r.task_id for r in reopened.scheduler.pending()] == [future.id]
