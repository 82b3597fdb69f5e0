from __future__ import annotations
import logging
import math
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Optional, Sequence, Union

from dateutil import parser as dateutil_parser

from . import time as _time
from .errors import InvalidInputError
from .text import pad_two_digits
from .types import DateHelperConfig, DateTriple, TimeOfDay
from ..locales.registry import LocalizationTable, get_locale

logger = logging.getLogger(__name__)

DateInput = Union[None, int, float, str, datetime, date]

# Same bound as an ECMAScript Date: +-100,000,000 days around the epoch.
MAX_ABS_MS = 8_640_000_000_000_000


def _resolve_ms(value: DateInput) -> int:
    if value is None:
        return _time.now_ms()
    if isinstance(value, bool):
        raise TypeError("DateHelper does not accept bool values")
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise InvalidInputError(f"Invalid date string or number provided: {value!r}")
        return int(value)
    if isinstance(value, datetime):
        return _time.from_datetime(value)
    if isinstance(value, date):
        return _time.from_date(value)
    if isinstance(value, str):
        try:
            return int(float(value))
        except (ValueError, OverflowError):
            pass
        try:
            parsed = dateutil_parser.parse(value)
        except (ValueError, OverflowError) as e:
            raise InvalidInputError(f"Invalid date string or number provided: {value!r}") from e
        return _time.from_datetime(parsed)
    raise TypeError(f"Unsupported DateHelper input type: {type(value).__name__}")


class DateHelper:
    """
    A single instant (epoch milliseconds) plus display options.

    Every calendar field is read through the host's local timezone. Instances
    never change after construction; derived values come back as new objects.
    """

    def __init__(self, value: DateInput = None, config: Optional[DateHelperConfig] = None, **options: Any):
        config = config if config is not None else DateHelperConfig()
        if options:
            config = replace(config, **options)
        self.config = config
        self._locale: LocalizationTable = get_locale(config.language)

        ms = _resolve_ms(value)
        if config.is_utc:
            # Offset in force now, not the one at the target instant.
            offset = _time.local_utc_offset_ms()
            logger.debug("is_utc: shifting %d by current local offset %d ms", ms, offset)
            ms += offset
        if abs(ms) > MAX_ABS_MS:
            raise InvalidInputError(f"Instant out of range: {ms} ms")
        try:
            self._dt = _time.to_local_datetime(ms)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidInputError(f"Instant out of range: {ms} ms") from e
        self._ms = ms

    def __repr__(self) -> str:
        return f"DateHelper({self._dt.isoformat(timespec='milliseconds')!r}, config={self.config!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateHelper):
            return NotImplemented
        return self._ms == other._ms and self.config == other.config

    def __hash__(self) -> int:
        return hash((self._ms, self.config))

    # ---------------------------------------------------------
    # Constructors
    # ---------------------------------------------------------

    @classmethod
    def now(cls, config: Optional[DateHelperConfig] = None, **options: Any) -> "DateHelper":
        return cls(None, config, **options)

    @classmethod
    def from_triple_and_time(
        cls,
        triple: Sequence[int],
        time: Optional[TimeOfDay] = None,
        config: Optional[DateHelperConfig] = None,
        **options: Any,
    ) -> "DateHelper":
        """Local-time instant for a (year, month, day) triple and optional HH:MM."""
        dt = triple_and_time_to_datetime(triple, time if time is not None else TimeOfDay())
        return cls(_time.from_datetime(dt), config, **options)

    @classmethod
    def with_fixed_offset(cls, date_string: str, offset_ms: int = _time.THAI_TIMEZONE_OFFSET_MS) -> "DateHelper":
        """Parse date_string and shift it by a fixed offset (default +7h)."""
        return cls(cls(date_string).to_epoch_ms() + offset_ms)

    @classmethod
    def from_nullable_triple(cls, triple: Optional[Sequence[int]]) -> Optional["DateHelper"]:
        if triple is None:
            return None
        return cls("-".join(str(x) for x in triple))

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def to_date_triple(self) -> DateTriple:
        return DateTriple(self._dt.year, self._dt.month, self._dt.day)

    def to_time_of_day(self) -> TimeOfDay:
        return TimeOfDay(hour=self._dt.hour, minute=self._dt.minute)

    def to_epoch_ms(self) -> int:
        return self._ms

    def to_datetime(self) -> datetime:
        """Naive local datetime for this instant."""
        return self._dt

    def to_iso_date(self) -> str:
        """YYYY-MM-DD from local date parts (no UTC day shift)."""
        y, m, d = self.to_date_triple()
        return f"{y:04d}-{m:02d}-{d:02d}"

    def to_iso8601_string(self) -> str:
        """UTC timestamp, e.g. 2024-02-29T17:00:00.000Z."""
        u = _time.to_utc_datetime(self._ms)
        return f"{u:%Y-%m-%dT%H:%M:%S}.{u.microsecond // 1000:03d}Z"

    def join_date_triple(self) -> str:
        return "-".join(str(x) for x in self.to_date_triple())

    # ---------------------------------------------------------
    # Years and names
    # ---------------------------------------------------------

    def get_gregorian_year(self) -> int:
        return self._dt.year

    def get_buddhist_era_year(self) -> int:
        return _time.to_buddhist_era(self._dt.year)

    def get_era_year(self) -> int:
        if self.config.use_buddhist_era:
            return self.get_buddhist_era_year()
        return self.get_gregorian_year()

    def get_month_name(self) -> str:
        names = self._locale.months_abbr if self.config.use_short_text else self._locale.months
        return names[self._dt.month - 1]

    def get_weekday_name(self) -> str:
        names = self._locale.weekdays_abbr if self.config.use_short_text else self._locale.weekdays
        # isoweekday: 1=Mon..7=Sun
        return names[self._dt.isoweekday() % 7]

    # ---------------------------------------------------------
    # Display
    # ---------------------------------------------------------

    def get_display_date(self) -> str:
        """Padded day, month name, era year: "01 March 2024" or "01 มีนาคม 2567"."""
        year = self.get_era_year()
        year_text = pad_two_digits(year % 100) if self.config.use_short_text else str(year)
        return f"{pad_two_digits(self._dt.day)} {self.get_month_name()} {year_text}"

    def get_display_time(self) -> str:
        hour = self._dt.hour
        if self.config.use_12_hour_format:
            period = "PM" if hour >= 12 else "AM"
            hour = hour % 12 or 12
        out = f"{pad_two_digits(hour)}:{pad_two_digits(self._dt.minute)}"
        if self.config.show_seconds:
            out += f":{pad_two_digits(self._dt.second)}"
        if self.config.use_12_hour_format:
            out += f" {period}"
        return out

    def get_display_date_and_time(self) -> str:
        return " ".join([self.get_display_date(), self.get_display_time()])

    def get_relative_time_description(self) -> str:
        delta = delta_minutes(DateHelper(_time.now_ms()), self)
        phrases = self._locale.relative

        if delta < 1:
            return phrases.just_now
        if delta < 60:
            return phrases.minute(delta)
        if delta < 1440:
            return phrases.hour(delta // 60)
        if delta < 43200:
            return phrases.day(delta // 1440)
        return self.get_display_date()

    # ---------------------------------------------------------
    # Month layout
    # ---------------------------------------------------------

    def get_days_in_month(self) -> int:
        return _time.days_in_month(self._dt.year, self._dt.month)

    def get_first_weekday_of_month(self) -> int:
        """Weekday of the 1st of this month, 0=Sunday."""
        return _time.first_weekday_of_month(self._dt.year, self._dt.month)

    # ---------------------------------------------------------
    # Comparisons
    # ---------------------------------------------------------

    def is_same_month(self, other: "DateHelper") -> bool:
        return self._dt.year == other._dt.year and self._dt.month == other._dt.month

    def is_same_day(self, other: "DateHelper") -> bool:
        return self.is_same_month(other) and self._dt.day == other._dt.day

    def is_today(self) -> bool:
        return self.is_same_day(DateHelper(_time.now_ms()))

    def is_before(self, other: Optional["DateHelper"] = None) -> bool:
        """Strictly earlier than other (default: now)."""
        reference = other.to_epoch_ms() if other is not None else _time.now_ms()
        return reference - self._ms > 0

    def is_past_day(self) -> bool:
        return not self.is_today() and self.is_before()

    def is_yesterday(self) -> bool:
        return self.is_same_day(DateHelper(_time.now_ms() - _time.ONE_DAY_MS))

    def is_day_before(self, other: "DateHelper") -> bool:
        if self.is_same_day(other):
            return False
        return self._ms < other._ms

    def is_day_after(self, other: "DateHelper") -> bool:
        if self.is_same_day(other):
            return False
        return self._ms > other._ms

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def previous_day(self) -> "DateHelper":
        """Exactly 24h earlier (fixed duration, not DST-aware)."""
        return DateHelper(self._ms - _time.ONE_DAY_MS, replace(self.config, is_utc=False))


def delta_minutes(a: DateHelper, b: DateHelper) -> int:
    """a - b in whole minutes, halves rounded away from zero."""
    delta_ms = a.to_epoch_ms() - b.to_epoch_ms()
    whole = (abs(delta_ms) + _time.ONE_MINUTE_MS // 2) // _time.ONE_MINUTE_MS
    return whole if delta_ms >= 0 else -whole


def triple_and_time_to_datetime(triple: Sequence[int], time: TimeOfDay) -> datetime:
    year, month, day = triple
    hour = time.hour if time.hour is not None else 0
    minute = time.minute if time.minute is not None else 0
    return datetime(year, month, day, hour, minute)
