# src/taskbell/cli/timeparse.py

from __future__ import annotations

import datetime as dt
import re

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
_REL_RE = re.compile(r"^\+(\d+)\s*([mhd])$", re.IGNORECASE)

_REL_UNITS = {"m": "minutes", "h": "hours", "d": "days"}


def parse_hhmm(s: str) -> tuple[int, int]:
    m = _HHMM_RE.match(s.strip())
    if not m:
        raise ValueError(f"Invalid HH:MM: {s!r}")
    hh = int(m.group(1))
    mm = int(m.group(2))
    if not (0 <= hh <= 23 and 0 <= mm <= 59):
        raise ValueError(f"Invalid HH:MM: {s!r}")
    return hh, mm


def parse_when(s: str, *, now: dt.datetime | None = None) -> dt.datetime:
    """
    Parse a user-entered local time.

    Accepts:
      - "now"
      - relative offsets: "+30m", "+2h", "+1d"
      - "HH:MM" (today)
      - ISO dates/datetimes: "2026-10-16", "2026-10-16 09:30", "2026-10-16T09:30"
    Returns a naive local datetime.
    """
    if now is None:
        now = dt.datetime.now()
    ss = (s or "").strip()
    if not ss:
        raise ValueError("empty time")

    if ss.lower() == "now":
        return now.replace(microsecond=0)

    m = _REL_RE.match(ss)
    if m:
        unit = _REL_UNITS[m.group(2).lower()]
        return (now + dt.timedelta(**{unit: int(m.group(1))})).replace(microsecond=0)

    if _HHMM_RE.match(ss):
        hh, mm = parse_hhmm(ss)
        return now.replace(hour=hh, minute=mm, second=0, microsecond=0)

    try:
        return dt.datetime.fromisoformat(ss)
    except ValueError:
        raise ValueError(f"Invalid time: {s!r}") from None
