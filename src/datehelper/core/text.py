from __future__ import annotations
import re
from typing import Any, Union

from .errors import FormatError
from .types import DateTriple, TimeOfDay

_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)
_LOOSE_TIME_RE = re.compile(r"(\d{1,2}):(\d{1,2})", re.ASCII)
_ISO_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return None

def pad_two_digits(value: Union[int, str]) -> Union[str, Any]:
    """
    "0"-prefix single-digit values: 5 -> "05", "7" -> "07", 12 -> "12".
    The text is prefixed as given, so "07" -> "007" and 5.5 -> "05.5".
    Non-numeric input is returned untouched.
    """
    num = _as_number(value)
    if num is None:
        return value
    if 0 <= num < 10:
        return f"0{value}"
    return str(value)

def parse_time_string(text: str, *, loose: bool = False) -> TimeOfDay:
    """
    Parse a 24-hour "H:MM" / "HH:MM" string.
    loose=True also accepts a single-digit minute ("9:5").
    """
    pattern = _LOOSE_TIME_RE if loose else _TIME_RE
    m = pattern.fullmatch(text) if isinstance(text, str) else None
    if m is None:
        raise FormatError(f"expected H:MM or HH:MM, got {text!r}", "parse_time_string")
    hour, minute = int(m.group(1)), int(m.group(2))
    if not 0 <= hour <= 23:
        raise FormatError(f"hour {hour} outside 0..23 in {text!r}", "parse_time_string")
    if not 0 <= minute <= 59:
        raise FormatError(f"minute {minute} outside 0..59 in {text!r}", "parse_time_string")
    return TimeOfDay(hour=hour, minute=minute)

def format_time_of_day(time: TimeOfDay) -> str:
    hour = time.hour if time.hour is not None else 0
    minute = time.minute if time.minute is not None else 0
    return f"{pad_two_digits(hour)}:{pad_two_digits(minute)}"

def parse_iso_date(text: str) -> DateTriple:
    """Strict YYYY-MM-DD (exact field widths). Field ranges are not checked."""
    m = _ISO_DATE_RE.fullmatch(text) if isinstance(text, str) else None
    if m is None:
        raise FormatError(f"invalid date {text!r}, must be YYYY-MM-DD", "parse_iso_date")
    return DateTriple(int(m.group(1)), int(m.group(2)), int(m.group(3)))
