# src/taskbell/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then starts:
- the reminder loop in a background thread (optional),
- the console REPL in the main thread (optional).
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state, rearm_reminders
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..reminders.notifiers import ConsoleNotifier
from ..reminders.reminder_scheduler import ReminderBackgroundRunner, start_reminders_in_background

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    runner: ReminderBackgroundRunner | None = None
    if settings.reminders_enabled:
        rearm_reminders(state)
        runner = start_reminders_in_background(
            state.scheduler,
            ConsoleNotifier(),
            interval_seconds=settings.reminder_poll_seconds,
        )

    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
        if not settings.console_enabled:
            signal.signal(signal.SIGINT, _handle_signal)
    except (ValueError, OSError):
        # Not on the main thread, or platform without SIGTERM.
        logger.debug("Signal handlers not installed.", exc_info=True)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled. Delivering reminders only. Press Ctrl+C to stop.")
            stop_main.wait()
    finally:
        if runner is not None:
            runner.stop()
            runner.join(timeout=10.0)
        state.scheduler.close()
        logger.info("Bye.")


if __name__ == "__main__":
    main()
