"""datehelper public API.

Keep this surface small: users should mostly interact with DateHelper and
the functions re-exported here.
"""

# Register the standard locales on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    now,
    from_triple_and_time,
    delta_minutes,
    is_in_given_date,
    is_same_calendar_day,
    is_same_time_of_day,
    is_same_time_string,
    is_same_date_triple,
    days_to_milliseconds,
    triple_and_time_to_datetime,
    is_time_of_day_past_for_date,
    build_with_fixed_offset,
    from_nullable_triple,
    previous_month_year,
    next_month_year,
    current_year,
    current_month,
)
from .core.engine import DateHelper
from .core.errors import DateHelperError, FormatError, InvalidInputError
from .core.text import pad_two_digits, parse_time_string, format_time_of_day, parse_iso_date
from .core.time import ONE_DAY_MS, THAI_TIMEZONE_OFFSET_MS
from .core.types import DateHelperConfig, DateTriple, MonthYear, TimeOfDay
from .locales.registry import LocalizationTable, RelativePhrases, get_locale, list_locales, register_locale

__all__ = [
    "DateHelper",
    "DateHelperConfig",
    "DateTriple",
    "TimeOfDay",
    "MonthYear",
    "DateHelperError",
    "FormatError",
    "InvalidInputError",
    "LocalizationTable",
    "RelativePhrases",
    "get_locale",
    "list_locales",
    "register_locale",
    "ONE_DAY_MS",
    "THAI_TIMEZONE_OFFSET_MS",
    "pad_two_digits",
    "parse_time_string",
    "format_time_of_day",
    "parse_iso_date",
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
