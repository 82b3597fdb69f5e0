from __future__ import annotations
import calendar as pycal
import time as _systime
from datetime import date, datetime, timezone

from .types import MonthYear

ONE_DAY_MS = 86_400_000
ONE_MINUTE_MS = 60_000
THAI_TIMEZONE_OFFSET_MS = 7 * 60 * 60 * 1000
BUDDHIST_ERA_OFFSET = 543


def now_ms() -> int:
    """Wall clock read, epoch milliseconds. Called on every use of "now"."""
    return _systime.time_ns() // 1_000_000

def local_utc_offset_ms() -> int:
    """Current local UTC offset in ms (positive east of Greenwich)."""
    offset = datetime.now().astimezone().utcoffset()
    return int(offset.total_seconds() * 1000) if offset is not None else 0

def to_local_datetime(ms: int) -> datetime:
    """Epoch milliseconds -> naive local datetime (millisecond precision)."""
    seconds, millis = divmod(ms, 1000)
    return datetime.fromtimestamp(seconds).replace(microsecond=millis * 1000)

def to_utc_datetime(ms: int) -> datetime:
    seconds, millis = divmod(ms, 1000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=millis * 1000)

def from_datetime(dt: datetime) -> int:
    """
    datetime -> epoch milliseconds.
    Naive values are read as local time; aware values keep their own offset.
    """
    whole = int(dt.replace(microsecond=0).timestamp())
    return whole * 1000 + dt.microsecond // 1000

def from_date(d: date) -> int:
    """Local midnight of d, in epoch milliseconds."""
    return from_datetime(datetime(d.year, d.month, d.day))

def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, and not by 100 unless also by 400."""
    return pycal.isleap(year)

def days_in_month(year: int, month: int) -> int:
    return pycal.monthrange(year, month)[1]

def first_weekday_of_month(year: int, month: int) -> int:
    """Weekday of day 1, 0=Sun..6=Sat."""
    # monthrange convention: 0=Mon..6=Sun
    return (pycal.monthrange(year, month)[0] + 1) % 7

def to_buddhist_era(year: int) -> int:
    return year + BUDDHIST_ERA_OFFSET

def days_to_milliseconds(days: float = 1) -> float:
    return days * ONE_DAY_MS

def previous_month_year(month: int, year: int) -> MonthYear:
    if month - 1 < 1:
        return MonthYear(month=12, year=year - 1)
    return MonthYear(month=month - 1, year=year)

def next_month_year(month: int, year: int) -> MonthYear:
    if month + 1 > 12:
        return MonthYear(month=1, year=year + 1)
    return MonthYear(month=month + 1, year=year)

def current_year() -> int:
    return to_local_datetime(now_ms()).year

def current_month() -> int:
    """Current local month, 1..12."""
    return to_local_datetime(now_ms()).month
