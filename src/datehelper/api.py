from __future__ import annotations

from typing import Any, Optional, Sequence

from .core import time as _time
from .core.engine import DateHelper, delta_minutes, triple_and_time_to_datetime
from .core.text import parse_iso_date, parse_time_string
from .core.errors import FormatError
from .core.types import DateHelperConfig, TimeOfDay
from .core.time import (
    current_month,
    current_year,
    days_to_milliseconds,
    next_month_year,
    previous_month_year,
)

__all__ = [
    "now",
    "from_triple_and_time",
    "delta_minutes",
    "is_in_given_date",
    "is_same_calendar_day",
    "is_same_time_of_day",
    "is_same_time_string",
    "is_same_date_triple",
    "days_to_milliseconds",
    "triple_and_time_to_datetime",
    "is_time_of_day_past_for_date",
    "build_with_fixed_offset",
    "from_nullable_triple",
    "previous_month_year",
    "next_month_year",
    "current_year",
    "current_month",
]

def now(config: Optional[DateHelperConfig] = None, **options: Any) -> DateHelper:
    return DateHelper.now(config, **options)

def from_triple_and_time(
    triple: Sequence[int],
    time: Optional[TimeOfDay] = None,
    config: Optional[DateHelperConfig] = None,
    **options: Any,
) -> DateHelper:
    return DateHelper.from_triple_and_time(triple, time, config, **options)

def is_in_given_date(date: str, instance: DateHelper) -> bool:
    """True if instance falls on the local calendar day given as strict YYYY-MM-DD."""
    try:
        triple = parse_iso_date(date)
    except FormatError as e:
        raise FormatError(e.detail, "is_in_given_date") from e
    return tuple(triple) == tuple(instance.to_date_triple())

def is_same_calendar_day(a: DateHelper, b: DateHelper) -> bool:
    return a.is_same_day(b)

def is_same_time_of_day(a: DateHelper, b: DateHelper) -> bool:
    """Same local hour, minute and second; the date is ignored."""
    da, db = a.to_datetime(), b.to_datetime()
    return (da.hour, da.minute, da.second) == (db.hour, db.minute, db.second)

def is_same_time_string(t1: str, t2: str) -> bool:
    """
    Compare two "H:M" strings by value: "9:05", "09:05" and "9:5" are equal.
    Raises FormatError when either side is not an in-range H:M time.
    """
    try:
        return parse_time_string(t1, loose=True) == parse_time_string(t2, loose=True)
    except FormatError as e:
        raise FormatError(e.detail, "is_same_time_string") from e

def is_same_date_triple(a: Sequence[int], b: Sequence[int]) -> bool:
    return tuple(a) == tuple(b)

def is_time_of_day_past_for_date(time: TimeOfDay, date: Optional[DateHelper] = None) -> bool:
    """
    Place `time` on the calendar day of `date` (default: today) and report
    whether that moment has already passed. Minute precision.
    """
    context = date if date is not None else DateHelper(_time.now_ms())
    moment = triple_and_time_to_datetime(context.to_date_triple(), time)
    return _time.from_datetime(moment) < _time.now_ms()

def build_with_fixed_offset(date_string: str, offset_ms: int = _time.THAI_TIMEZONE_OFFSET_MS) -> DateHelper:
    return DateHelper.with_fixed_offset(date_string, offset_ms)

def from_nullable_triple(triple: Optional[Sequence[int]]) -> Optional[DateHelper]:
    return DateHelper.from_nullable_triple(triple)
