# src/taskbell/reminders/reminder_scheduler.py

from __future__ import annotations

"""
Local reminder scheduler.

Two halves:
- LocalReminderScheduler keeps pending one-shot reminders keyed by task id.
  schedule() only records the request; it never blocks on delivery.
- run_reminder_loop() is a small polling loop that pops due reminders and
  hands them to an injected notifier port.

Nothing repeats: a reminder is delivered at most once, then forgotten.
"""

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from ..core.errors import SchedulingError
from ..core.ports import ReminderNotifier
from .reminder_models import Reminder, local_wall_time

logger = logging.getLogger(__name__)

SchedulingErrorHandler = Callable[[str, SchedulingError], None]

DEFAULT_MAX_PENDING = 64
DEFAULT_STALE_AFTER = timedelta(minutes=1)


def log_scheduling_error(task_id: str, error: SchedulingError) -> None:
    logger.warning("Reminder not scheduled task_id=%s: %s", task_id, error.reason)


class LocalReminderScheduler:
    """
    In-process ReminderScheduler.

    Rejected requests (closed scheduler, capacity reached for a new id,
    fire time already stale) go to on_error instead of raising.
    """

    def __init__(
        self,
        *,
        max_pending: int = DEFAULT_MAX_PENDING,
        stale_after: timedelta = DEFAULT_STALE_AFTER,
        on_error: SchedulingErrorHandler | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._pending: dict[str, Reminder] = {}
        self._lock = threading.Lock()
        self._max_pending = max(1, int(max_pending))
        self._stale_after = stale_after
        self._on_error = on_error or log_scheduling_error
        self._clock = clock
        self._closed = False

    def _reject(self, task_id: str, reason: str) -> None:
        err = SchedulingError(task_id, reason)
        try:
            self._on_error(task_id, err)
        except Exception:
            logger.exception("Scheduling error handler failed task_id=%s", task_id)

    def schedule(self, task_id: str, title: str, body: str, fire_at: datetime) -> None:
        now = self._clock()
        when = local_wall_time(fire_at)

        reason: str | None = None
        replaced = False
        with self._lock:
            if self._closed:
                reason = "scheduler is closed"
            elif when < now - self._stale_after:
                reason = f"fire time {when.isoformat()} is in the past"
            elif task_id not in self._pending and len(self._pending) >= self._max_pending:
                reason = f"pending limit reached ({self._max_pending})"
            else:
                replaced = task_id in self._pending
                self._pending[task_id] = Reminder(
                    task_id=task_id,
                    title=title,
                    body=body,
                    fire_at=when,
                    scheduled_at=now,
                )

        if reason is not None:
            self._reject(task_id, reason)
            return

        logger.debug(
            "Reminder %s task_id=%s fire_at=%s",
            "replaced" if replaced else "scheduled",
            task_id,
            when.isoformat(),
        )

    def cancel(self, task_id: str) -> bool:
        with self._lock:
            return self._pending.pop(task_id, None) is not None

    def pending(self) -> list[Reminder]:
        with self._lock:
            items = list(self._pending.values())
        items.sort(key=lambda r: (r.fire_at, r.scheduled_at))
        return items

    def due(self, now: datetime | None = None) -> list[Reminder]:
        """Remove and return reminders whose fire time has come, earliest first."""
        if now is None:
            now = self._clock()
        with self._lock:
            ready = [r for r in self._pending.values() if r.fire_at <= now]
            for r in ready:
                del self._pending[r.task_id]
        ready.sort(key=lambda r: (r.fire_at, r.scheduled_at))
        return ready

    def close(self) -> None:
        with self._lock:
            self._closed = True
            dropped = len(self._pending)
            self._pending.clear()
        logger.info("Reminder scheduler closed (dropped=%d).", dropped)


async def run_reminder_loop(
        scheduler: LocalReminderScheduler,
        notifier: ReminderNotifier,
        *,
        interval_seconds: float = 15.0,
        stop_event: asyncio.Event | None = None,
) -> None:
    """
    Simple polling loop.

    Every interval_seconds:
    - pop due reminders from the scheduler
    - await notifier.notify(reminder) for each
      On failure the reminder is logged and dropped (no retry).

    To stop the loop, cancel the coroutine/task or set stop_event.
    """
    sleep_s = max(0.5, float(interval_seconds))

    while stop_event is None or not stop_event.is_set():
        try:
            ready = scheduler.due()
        except Exception:
            logger.exception("Reminder due() failed")
            ready = []

        for reminder in ready:
            try:
                await notifier.notify(reminder)
                logger.info("Reminder delivered task_id=%s", reminder.task_id)
            except Exception:
                logger.exception("Reminder delivery failed task_id=%s", reminder.task_id)

        if stop_event is None:
            await asyncio.sleep(sleep_s)
        else:
            with contextlib.suppress(asyncio.TimeoutError):
                await asyncio.wait_for(stop_event.wait(), timeout=sleep_s)


@dataclass
class ReminderBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except Exception:
            logger.debug("Failed to signal reminder loop stop.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_reminders_in_background(
    scheduler: LocalReminderScheduler,
    notifier: ReminderNotifier,
    *,
    interval_seconds: float = 15.0,
) -> ReminderBackgroundRunner | None:
    """
    Run the reminder loop on its own event loop in a daemon thread,
    so a blocking console REPL can run in the main thread.
    """
    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(
                run_reminder_loop(
                    scheduler,
                    notifier,
                    interval_seconds=interval_seconds,
                    stop_event=stop_event,
                )
            )
        finally:
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="taskbell-reminders", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Reminder thread did not initialize properly.")
        return None

    logger.info("Reminder background thread started.")
    return ReminderBackgroundRunner(thread=t, loop=loop, stop_event=stop_event)
