import calendar
from datetime import date, datetime, timedelta

import pytest

from adfblocks.amigatime import (
    AmigaStamp,
    amiga_to_datetime,
    current_amiga_time,
    datetime_to_amiga,
    days_to_date,
    is_leap,
)


@pytest.mark.parametrize("year", [1900, 1978, 1996, 1997, 2000, 2024, 2100])
def test_is_leap_matches_calendar(year):
    assert is_leap(year) == calendar.isleap(year)


def test_day_zero_is_epoch():
    assert days_to_date(0) == date(1978, 1, 1)


def test_documented_example_day():
    assert days_to_date(6988) == date(1997, 2, 18)


def test_negative_days_rejected():
    with pytest.raises(ValueError):
        days_to_date(-1)


def test_epoch_stamp_converts_to_epoch():
    assert amiga_to_datetime(0, 0, 0) == datetime(1978, 1, 1)


def test_one_second_is_fifty_ticks():
    stamp = datetime_to_amiga(datetime(1978, 1, 1, 0, 0, 1))
    assert stamp.ticks == 50


@pytest.mark.parametrize(
    "moment",
    [
        datetime(1978, 1, 1, 0, 0, 0),
        datetime(1997, 2, 18, 13, 45, 12),
        datetime(2000, 3, 1, 0, 0, 0),
        datetime(2024, 2, 29, 23, 59, 59),
    ],
)
def test_round_trip(moment):
    stamp = datetime_to_amiga(moment)
    assert amiga_to_datetime(*stamp) == moment
    assert days_to_date(stamp.days) == moment.date()


def test_stamp_fields_within_day_limits():
    stamp = datetime_to_amiga(datetime(2010, 6, 15, 23, 59, 59))
    assert 0 <= stamp.minutes < 24 * 60
    assert 0 <= stamp.ticks < 60 * 50


def test_microseconds_dropped():
    moment = datetime(2001, 5, 5, 10, 20, 30, 999999)
    stamp = datetime_to_amiga(moment)
    assert amiga_to_datetime(*stamp) == moment.replace(microsecond=0)


def test_consecutive_days_differ_by_one():
    first = datetime_to_amiga(datetime(1999, 12, 31, 12, 0))
    second = datetime_to_amiga(datetime(2000, 1, 1, 12, 0))
    assert second.days - first.days == 1
    assert second.minutes == first.minutes


def test_before_epoch_rejected():
    with pytest.raises(ValueError):
        datetime_to_amiga(datetime(1977, 12, 31))


def test_stamp_unpacks_by_field():
    stamp = AmigaStamp(days=3, minutes=4, ticks=5)
    days, minutes, ticks = stamp
    assert (days, minutes, ticks) == (stamp.days, stamp.minutes, stamp.ticks)


def test_current_time_is_now():
    before = datetime.now().replace(microsecond=0)
    stamp = current_amiga_time()
    after = datetime.now()
    converted = amiga_to_datetime(*stamp)
    assert before - timedelta(seconds=1) <= converted <= after