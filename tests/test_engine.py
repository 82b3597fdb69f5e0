# tests/test_engine.py

import time
from datetime import date, datetime
from unittest.mock import patch

import pytest

from datehelper import DateHelper, DateTriple, InvalidInputError, TimeOfDay
from datehelper.core import time as dh_time

EPOCH_2024_03_01_UTC = 1_709_251_200_000


def local_ms(*args) -> int:
    return dh_time.from_datetime(datetime(*args))


# ---------------------------------------------------------
# Construction
# ---------------------------------------------------------

def test_construct_from_milliseconds():
    assert DateHelper(0).to_epoch_ms() == 0
    assert DateHelper(1234.9).to_epoch_ms() == 1234
    assert DateHelper("86400000").to_epoch_ms() == 86_400_000

def test_construct_from_strings():
    assert DateHelper("2024-03-01T00:00:00Z").to_epoch_ms() == EPOCH_2024_03_01_UTC
    assert DateHelper("2024-03-01T07:00:00+07:00").to_epoch_ms() == EPOCH_2024_03_01_UTC
    # naive strings are local time
    assert DateHelper("2024-03-01 08:15").to_epoch_ms() == local_ms(2024, 3, 1, 8, 15)

def test_construct_from_datetime_and_date():
    assert DateHelper(datetime(2024, 3, 1, 8, 15)).to_epoch_ms() == local_ms(2024, 3, 1, 8, 15)
    assert DateHelper(date(2024, 3, 1)).to_epoch_ms() == local_ms(2024, 3, 1)

def test_construct_without_value_reads_clock(frozen_now):
    assert DateHelper().to_epoch_ms() == frozen_now
    assert DateHelper.now(language="th").config.language == "th"

@pytest.mark.parametrize(
    "value",
    ["banana", "", float("nan"), "99999999999999999999", 10**20, 1e20, 8_640_000_000_000_001, -8_640_000_000_000_001],
)
def test_invalid_input(value):
    with pytest.raises(InvalidInputError):
        DateHelper(value)

def test_invalid_input_types():
    with pytest.raises(TypeError):
        DateHelper(True)
    with pytest.raises(TypeError):
        DateHelper([2024, 3, 1])

def test_unknown_language():
    with pytest.raises(KeyError):
        DateHelper(0, language="fr")

def test_is_utc_adds_the_current_local_offset():
    with patch("datehelper.core.time.local_utc_offset_ms") as mock:
        mock.return_value = dh_time.THAI_TIMEZONE_OFFSET_MS
        dh = DateHelper(EPOCH_2024_03_01_UTC, is_utc=True)
    assert dh.to_epoch_ms() == EPOCH_2024_03_01_UTC + 25_200_000
    assert mock.call_count == 1

    # the offset in force now applies to historical instants too
    with patch("datehelper.core.time.local_utc_offset_ms") as mock:
        mock.return_value = dh_time.THAI_TIMEZONE_OFFSET_MS
        assert DateHelper(0, is_utc=True).to_epoch_ms() == 25_200_000

# ---------------------------------------------------------
# Conversions
# ---------------------------------------------------------

def test_triple_round_trip():
    for triple in [(2024, 2, 29), (2023, 12, 31), (1999, 1, 1), (2000, 2, 29), (2024, 6, 15)]:
        assert DateHelper.from_triple_and_time(triple).to_date_triple() == triple

def test_from_triple_and_time():
    dh = DateHelper.from_triple_and_time(DateTriple(2024, 3, 1), TimeOfDay(hour=18, minute=30))
    assert dh.to_epoch_ms() == local_ms(2024, 3, 1, 18, 30)
    assert dh.to_time_of_day() == TimeOfDay(hour=18, minute=30)
    assert DateHelper.from_triple_and_time((2024, 3, 1), TimeOfDay(hour=9)).to_time_of_day() == TimeOfDay(9, 0)

def test_round_trip_drops_seconds():
    e = DateHelper(datetime(2024, 6, 15, 9, 41, 27, 500000))
    rebuilt = DateHelper.from_triple_and_time(e.to_date_triple(), e.to_time_of_day())
    assert rebuilt.to_epoch_ms() == local_ms(2024, 6, 15, 9, 41)
    assert e.to_epoch_ms() - rebuilt.to_epoch_ms() == 27_500

def test_iso_strings():
    late = DateHelper(datetime(2024, 3, 1, 23, 30))
    assert late.to_iso_date() == "2024-03-01"
    assert DateHelper(0).to_iso8601_string() == "1970-01-01T00:00:00.000Z"
    assert DateHelper(EPOCH_2024_03_01_UTC + 1234).to_iso8601_string() == "2024-03-01T00:00:01.234Z"

def test_join_date_triple_and_datetime():
    dh = DateHelper(datetime(2024, 3, 1, 6, 7, 8))
    assert dh.join_date_triple() == "2024-3-1"
    assert dh.to_datetime() == datetime(2024, 3, 1, 6, 7, 8)

def test_equality_and_repr():
    a = DateHelper(EPOCH_2024_03_01_UTC)
    assert a == DateHelper(EPOCH_2024_03_01_UTC)
    assert a != DateHelper(EPOCH_2024_03_01_UTC, language="th")
    assert len({a, DateHelper(EPOCH_2024_03_01_UTC)}) == 1
    assert repr(a).startswith("DateHelper(")

def test_with_fixed_offset_and_nullable_triple():
    shifted = DateHelper.with_fixed_offset("2024-03-01T00:00:00Z")
    assert shifted.to_epoch_ms() == EPOCH_2024_03_01_UTC + 7 * 3_600_000
    assert DateHelper.with_fixed_offset("2024-03-01T00:00:00Z", 0).to_epoch_ms() == EPOCH_2024_03_01_UTC
    assert DateHelper.from_nullable_triple(None) is None
    assert DateHelper.from_nullable_triple((2024, 3, 1)).to_date_triple() == (2024, 3, 1)

# ---------------------------------------------------------
# Arithmetic and comparisons
# ---------------------------------------------------------

def test_previous_day_is_a_fixed_duration():
    e = DateHelper(datetime(2024, 6, 15, 10, 0), language="th")
    once = e.previous_day()
    twice = once.previous_day()
    assert once.to_epoch_ms() == e.to_epoch_ms() - 86_400_000
    assert twice.to_epoch_ms() == e.to_epoch_ms() - 2 * 86_400_000
    assert once.config == e.config

@pytest.fixture
def new_york_tz(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()

def test_previous_day_across_spring_forward_skips_a_calendar_day(new_york_tz):
    # 2024-03-10 is only 23 hours long in New York
    e = DateHelper(datetime(2024, 3, 11, 0, 30))
    prev = e.previous_day()
    assert prev.to_epoch_ms() == e.to_epoch_ms() - 86_400_000
    assert prev.to_datetime() == datetime(2024, 3, 9, 23, 30)

def test_previous_day_does_not_reapply_utc_shift():
    with patch("datehelper.core.time.local_utc_offset_ms") as mock:
        mock.return_value = 3_600_000
        e = DateHelper(EPOCH_2024_03_01_UTC, is_utc=True)
        assert e.previous_day().to_epoch_ms() == e.to_epoch_ms() - 86_400_000

def test_same_month_and_day():
    morning = DateHelper(datetime(2024, 6, 15, 8, 0))
    evening = DateHelper(datetime(2024, 6, 15, 20, 0))
    other_day = DateHelper(datetime(2024, 6, 1, 8, 0))
    other_year = DateHelper(datetime(2023, 6, 15, 8, 0))
    assert morning.is_same_day(evening)
    assert morning.is_same_month(other_day)
    assert not morning.is_same_day(other_day)
    assert not morning.is_same_month(other_year)

def test_day_before_and_after_ignore_time_on_same_day():
    morning = DateHelper(datetime(2024, 6, 15, 8, 0))
    evening = DateHelper(datetime(2024, 6, 15, 20, 0))
    day_before = DateHelper(datetime(2024, 6, 14, 23, 59))
    assert not morning.is_day_before(evening)
    assert not evening.is_day_after(morning)
    assert day_before.is_day_before(morning)
    assert morning.is_day_after(day_before)
    assert not morning.is_day_before(day_before)

def test_clock_relative_predicates(frozen_now):
    earlier_today = DateHelper(datetime(2024, 6, 15, 0, 5))
    later_today = DateHelper(datetime(2024, 6, 15, 13, 0))
    yesterday = DateHelper(datetime(2024, 6, 14, 23, 0))
    two_days_ago = DateHelper(datetime(2024, 6, 13, 12, 0))

    assert earlier_today.is_today() and later_today.is_today()
    assert not yesterday.is_today()

    assert earlier_today.is_before()
    assert not later_today.is_before()
    assert not DateHelper(frozen_now).is_before()
    assert yesterday.is_before(earlier_today)

    assert yesterday.is_past_day()
    assert not earlier_today.is_past_day()

    assert yesterday.is_yesterday()
    assert not two_days_ago.is_yesterday()
    assert not earlier_today.is_yesterday()

# ---------------------------------------------------------
# Relative time
# ---------------------------------------------------------

@pytest.mark.parametrize(
    "minutes_ago, expected",
    [
        (0, "Just now"),
        (-30, "Just now"),
        (1, "1 minute ago"),
        (59, "59 minutes ago"),
        (60, "1 hour ago"),
        (119, "1 hour ago"),
        (120, "2 hours ago"),
        (1439, "23 hours ago"),
        (1440, "1 day ago"),
        (2880, "2 days ago"),
        (43199, "29 days ago"),
    ],
)
def test_relative_time_english(frozen_now, minutes_ago, expected):
    assert DateHelper(frozen_now - minutes_ago * 60_000).get_relative_time_description() == expected

def test_relative_time_thai(frozen_now):
    def rel(minutes):
        return DateHelper(frozen_now - minutes * 60_000, language="th").get_relative_time_description()

    assert rel(0) == "เมื่อสักครู่"
    assert rel(1) == "1 นาทีที่แล้ว"
    assert rel(5) == "5 นาทีที่แล้ว"
    assert rel(180) == "3 ชั่วโมงที่แล้ว"
    assert rel(1440) == "1 วันที่ผ่านมา"

def test_relative_time_falls_back_to_display_date(frozen_now):
    old = DateHelper(frozen_now - 43200 * 60_000)
    assert old.get_relative_time_description() == old.get_display_date()
    assert old.get_relative_time_description() == "16 May 2024"
