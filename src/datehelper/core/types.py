from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, NamedTuple, Optional

SupportedLanguage = Literal["en", "th"]

class DateTriple(NamedTuple):
    year: int
    month: int  # 1..12
    day: int    # 1..31

@dataclass(frozen=True)
class TimeOfDay:
    hour: Optional[int] = None
    minute: Optional[int] = None

@dataclass(frozen=True)
class MonthYear:
    month: int
    year: int

@dataclass(frozen=True)
class DateHelperConfig:
    """
    Display and construction options bound to a DateHelper.

    use_short_text switches month/weekday names to their abbreviated form
    ("Jan", "Sun") and shortens the display year to two digits.
    """
    language: SupportedLanguage = "en"
    is_utc: bool = False
    use_short_text: bool = False
    use_buddhist_era: bool = False
    use_12_hour_format: bool = False
    show_seconds: bool = False
