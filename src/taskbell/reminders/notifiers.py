# src/taskbell/reminders/notifiers.py

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import TextIO

from .reminder_models import Reminder

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleNotifier:
    """Prints due reminders to the terminal."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    async def notify(self, reminder: Reminder) -> None:
        out = self._stream or sys.stdout
        line = f"[{_ts_local()}] [REMINDER] {reminder.title}"
        if reminder.body:
            line += f" - {reminder.body}"
        print(line, file=out, flush=True)


class LogNotifier:
    """Headless delivery: writes reminders to the log."""

    async def notify(self, reminder: Reminder) -> None:
        logger.info(
            "Reminder task_id=%s title=%r body=%r fire_at=%s",
            reminder.task_id,
            reminder.title,
            reminder.body,
            reminder.fire_at.isoformat(),
        )
