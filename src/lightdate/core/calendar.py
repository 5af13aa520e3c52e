"""Proleptic Gregorian calendar rules.

Leap-year oracle, date validation, weekday congruence and Julian day
number conversion. Everything here is a pure function over plain ints.
"""

from enum import IntEnum
from typing import Tuple


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def next(self) -> "Weekday":
        return Weekday(self % 7 + 1)

    def previous(self) -> "Weekday":
        return Weekday((self - 2) % 7 + 1)


_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})

# Days before the first of each month in a common year, index 0 unused.
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: every 4th year, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    raise ValueError(f"month must be 1-12, got {month}")


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check whether (year, month, day) names a real calendar day.

    Negative years and months outside 1..12 are rejected outright; the day
    must fall within the month's length, with February taking 29 days only
    in leap years.
    """
    if year < 0:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def day_of_year(year: int, month: int, day: int) -> int:
    """1-based ordinal of the day within its year."""
    result = _DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def weekday_from_sunday_index(index: int) -> Weekday:
    """Map the 0=Sunday..6=Saturday convention onto Weekday."""
    return Weekday(index) if index else Weekday.SUNDAY


def weekday_to_sunday_index(weekday: Weekday) -> int:
    return int(weekday) % 7


def compute_weekday(year: int, month: int, day: int) -> Weekday:
    """Derive the weekday with a closed-form congruence.

    January and February take their century corrections from the previous
    year. The raw result counts from Sunday=0.

    Args:
        year: Gregorian year.
        month: Month number 1-12.
        day: Day of month.
    """
    z = year - 1 if month < 3 else year
    w = (
        day
        + 23 * month // 9
        + 4
        + year
        + z // 4
        - z // 100
        + z // 400
        - (2 if month >= 3 else 0)
    ) % 7
    return weekday_from_sunday_index(w)


def to_julian_day(year: int, month: int, day: int) -> int:
    """Julian day number at noon of the given Gregorian date."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def from_julian_day(jdn: int) -> Tuple[int, int, int]:
    """Inverse of to_julian_day, returning (year, month, day)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day
