# src/taskbell/core/errors.py

from __future__ import annotations


class TaskbellError(Exception):
    """Base class for errors raised inside taskbell."""


class PersistenceError(TaskbellError):
    pass


class PersistenceReadError(PersistenceError):
    """Snapshot could not be read or decoded."""


class PersistenceWriteError(PersistenceError):
    """Snapshot could not be encoded or written."""


class SchedulingError(TaskbellError):
    """A reminder request was rejected by the scheduler."""

    def __init__(self, task_id: str, reason: str) -> None:
        super().__init__(f"reminder for task {task_id} rejected: {reason}")
        self.task_id = task_id
        self.reason = reason
