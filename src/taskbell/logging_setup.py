# src/taskbell/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskbell.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console REPL readable while the reminder thread runs.

    - taskbell logs pass, except the reminder loop (WARNING+ only; the
      delivered reminder itself is already printed by the notifier)
    - captured warnings and third-party loggers: ERROR+ only
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name.startswith("taskbell."):
            if name.startswith("taskbell.reminders."):
                return record.levelno >= logging.WARNING
            return True

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskbell",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure the root logger for the taskbell CLI.

    - stderr: filtered, at console_level (TASKBELL_LOG_LEVEL)
    - <log_dir>/taskbell.log: everything at file_level, including store
      writes and reminder scheduling decisions

    Call once from main() before the store is built. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # main() may be called more than once in one process (tests, REPL restarts).
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    logfile = logging.FileHandler(str(log_file), encoding="utf-8")
    logfile.setLevel(file_level)
    logfile.setFormatter(fmt)
    root.addHandler(logfile)

    logging.captureWarnings(True)
    return log_file
