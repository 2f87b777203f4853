# src/taskbell/reminders/reminder_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


def local_wall_time(dt: datetime) -> datetime:
    """
    Naive local wall-clock time for dt.

    Aware datetimes are converted to the local zone first; naive ones are
    already taken as local time.
    """
    if dt.tzinfo is not None:
        return dt.astimezone().replace(tzinfo=None)
    return dt


def reminder_fire_at(start_date: datetime) -> datetime:
    """Year/month/day/hour/minute of start_date in the local calendar (seconds dropped)."""
    return local_wall_time(start_date).replace(second=0, microsecond=0)


@dataclass(slots=True, frozen=True)
class Reminder:
    task_id: str
    title: str
    body: str
    fire_at: datetime
    scheduled_at: datetime
