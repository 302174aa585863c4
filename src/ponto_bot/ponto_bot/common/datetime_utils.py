from __future__ import annotations

import re
from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional

_BR_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def now_utc() -> datetime:
    """Current instant, timezone-aware.

    Note: Wrapped so services can take it as an injectable clock.
    """
    return datetime.now(timezone.utc)


def to_local(instant: datetime, tz: tzinfo) -> datetime:
    """Convert an instant to the reference timezone (naive values are UTC)."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(tz)


def to_utc(instant: datetime) -> datetime:
    """Same instant in UTC (naive values are UTC).

    Note: Subtracting two datetimes that share a tzinfo ignores their offsets,
    so durations must be taken between UTC values.
    """
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def local_date(instant: datetime, tz: tzinfo) -> date:
    return to_local(instant, tz).date()


def local_midnight(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def parse_br_date(value: str) -> Optional[date]:
    """Parse DD/MM/YYYY strictly; None for malformed or impossible dates."""
    match = _BR_DATE_RE.match(value.strip())
    if not match:
        return None
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_br_date(day: date) -> str:
    return f"{day.day:02d}/{day.month:02d}/{day.year:04d}"


def format_clock_time(instant: datetime, tz: tzinfo) -> str:
    local = to_local(instant, tz)
    return f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"


def format_minutes(minutes: int) -> str:
    """Render whole minutes as e.g. "8h e 5min"."""
    return f"{minutes // 60}h e {minutes % 60}min"
