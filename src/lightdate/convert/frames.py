"""pandas interop: Timestamps, DatetimeIndex and inclusive date ranges."""

from typing import Iterable, List

import numpy as np
import pandas as pd

from lightdate.core.date import Date
from lightdate.formulas.vectorized import from_julian_day_array


def to_timestamp(d: Date) -> pd.Timestamp:
    """Naive Timestamp at midnight of the date."""
    return pd.Timestamp(year=d.year, month=int(d.month), day=d.day)


def from_timestamp(ts: pd.Timestamp) -> Date:
    """Calendar date of a Timestamp; any time-of-day is dropped."""
    ts = pd.Timestamp(ts)
    return Date(ts.year, ts.month, ts.day)


def to_datetime_index(dates: Iterable[Date], name: str = "date") -> pd.DatetimeIndex:
    return pd.DatetimeIndex([to_timestamp(d) for d in dates], name=name)


def from_datetime_index(index: pd.DatetimeIndex) -> List[Date]:
    index = pd.DatetimeIndex(index)
    if index.hasnans:
        raise ValueError("DatetimeIndex contains NaT")
    return [
        Date(int(y), int(m), int(d))
        for y, m, d in zip(index.year, index.month, index.day)
    ]


def date_range(start: Date, end: Date) -> List[Date]:
    """Every date from start to end inclusive; empty when end precedes start."""
    jdns = np.arange(start.julian_day, end.julian_day + 1, dtype=np.int64)
    years, months, days = from_julian_day_array(jdns)
    return [Date(int(y), int(m), int(d)) for y, m, d in zip(years, months, days)]
