"""Conversion between Amiga date stamps (days, minutes, ticks) and datetimes."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import NamedTuple

EPOCH = datetime(1978, 1, 1)
TICKS_PER_SECOND = 50


class AmigaStamp(NamedTuple):
    """Days since 1978-01-01, minutes past midnight and 1/50 s ticks."""

    days: int
    minutes: int
    ticks: int


def is_leap(year: int) -> bool:
    """True when ``year`` is a Gregorian leap year."""
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def days_to_date(days: int) -> date:
    """Return the calendar date ``days`` days after 1978-01-01."""
    if days < 0:
        raise ValueError(f"day count must not be negative: {days}")
    return EPOCH.date() + timedelta(days=days)


def datetime_to_amiga(moment: datetime) -> AmigaStamp:
    """Convert the wall-clock fields of ``moment`` into an Amiga date stamp.

    Fractions of a second are dropped.
    """
    if moment.year < EPOCH.year:
        raise ValueError(f"dates before {EPOCH.year} cannot be stored: {moment}")
    days = (moment.date() - EPOCH.date()).days
    minutes = moment.hour * 60 + moment.minute
    ticks = moment.second * TICKS_PER_SECOND
    return AmigaStamp(days, minutes, ticks)


def amiga_to_datetime(days: int, minutes: int, ticks: int) -> datetime:
    """Convert an Amiga date stamp into a naive datetime."""
    return EPOCH + timedelta(
        days=days,
        minutes=minutes,
        milliseconds=ticks * (1000 // TICKS_PER_SECOND),
    )


def current_amiga_time() -> AmigaStamp:
    """Return the current local time as an Amiga date stamp."""
    return datetime_to_amiga(datetime.now())