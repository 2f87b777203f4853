# src/taskbell/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete implementations.
This keeps storage and reminder delivery swappable and makes testing easier.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Awaitable, Protocol

if TYPE_CHECKING:
    from ..reminders.reminder_models import Reminder


class BlobStore(Protocol):
    """Key-value boundary holding the task snapshot."""

    def get(self, key: str) -> bytes | None: ...
    def put(self, key: str, value: bytes) -> None: ...


class ReminderScheduler(Protocol):
    """
    One-shot local reminders keyed by task id.

    Contract:
    - fire-and-forget: must not block the caller on delivery
    - scheduling the same task_id again replaces the pending reminder
    - rejections are reported through the implementation's own side channel
    """

    def schedule(self, task_id: str, title: str, body: str, fire_at: datetime) -> None: ...


class ReminderNotifier(Protocol):
    """Delivery side: how a due reminder reaches the user."""

    def notify(self, reminder: Reminder) -> Awaitable[None]: ...
