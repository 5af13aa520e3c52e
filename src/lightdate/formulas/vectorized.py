"""NumPy versions of the calendar rules for bulk date columns.

Each function mirrors its scalar counterpart in `lightdate.core.calendar`
element-wise. Inputs are broadcast against each other.
"""

from typing import Tuple

import numpy as np

_MONTH_LENGTHS = np.array([0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31])


def is_leap_year_array(years) -> np.ndarray:
    y = np.asarray(years, dtype=np.int64)
    return (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))


def days_in_month_array(years, months) -> np.ndarray:
    y, m = np.broadcast_arrays(
        np.asarray(years, dtype=np.int64), np.asarray(months, dtype=np.int64)
    )
    safe_m = np.clip(m, 0, 12)
    lengths = _MONTH_LENGTHS[safe_m]
    lengths = np.where((m == 2) & is_leap_year_array(y), 29, lengths)
    return np.where((m >= 1) & (m <= 12), lengths, 0)


def is_valid_date_array(years, months, days) -> np.ndarray:
    y, m, d = np.broadcast_arrays(
        np.asarray(years, dtype=np.int64),
        np.asarray(months, dtype=np.int64),
        np.asarray(days, dtype=np.int64),
    )
    return (y >= 0) & (m >= 1) & (m <= 12) & (d >= 1) & (d <= days_in_month_array(y, m))


def weekday_array(years, months, days) -> np.ndarray:
    """Weekday numbers, 1=Monday .. 7=Sunday."""
    y, m, d = np.broadcast_arrays(
        np.asarray(years, dtype=np.int64),
        np.asarray(months, dtype=np.int64),
        np.asarray(days, dtype=np.int64),
    )
    z = np.where(m < 3, y - 1, y)
    w = (
        d
        + (23 * m) // 9
        + 4
        + y
        + z // 4
        - z // 100
        + z // 400
        - np.where(m >= 3, 2, 0)
    ) % 7
    return np.where(w == 0, 7, w)


def julian_day_array(years, months, days) -> np.ndarray:
    y, m, d = np.broadcast_arrays(
        np.asarray(years, dtype=np.int64),
        np.asarray(months, dtype=np.int64),
        np.asarray(days, dtype=np.int64),
    )
    a = (14 - m) // 12
    yy = y + 4800 - a
    mm = m + 12 * a - 3
    return d + (153 * mm + 2) // 5 + 365 * yy + yy // 4 - yy // 100 + yy // 400 - 32045


def from_julian_day_array(jdn) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split Julian day numbers into (years, months, days) arrays."""
    j = np.asarray(jdn, dtype=np.int64)
    a = j + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    days = e - (153 * m + 2) // 5 + 1
    months = m + 3 - 12 * (m // 10)
    years = 100 * b + d - 4800 + m // 10
    return years, months, days
