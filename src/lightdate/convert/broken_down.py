"""Broken-down time structures.

`BrokenDownTime` follows the C `struct tm` conventions: years counted from
1900, zero-based months, weekdays counted from Sunday=0 and zero-based day
of year. Python's own `time.struct_time` uses full years, 1-based months,
Monday=0 weekdays and 1-based day of year; helpers here translate between
the two.
"""

import time
from dataclasses import dataclass
from typing import Optional

from lightdate.core.calendar import (
    compute_weekday,
    day_of_year,
    weekday_to_sunday_index,
)

TM_YEAR_BASE = 1900


@dataclass
class BrokenDownTime:
    tm_year: int
    tm_mon: int
    tm_mday: int
    tm_wday: Optional[int] = None
    tm_yday: Optional[int] = None
    tm_hour: int = 0
    tm_min: int = 0
    tm_sec: int = 0
    tm_isdst: int = -1

    @property
    def year(self) -> int:
        return self.tm_year + TM_YEAR_BASE

    @property
    def month(self) -> int:
        return self.tm_mon + 1

    @property
    def has_weekday(self) -> bool:
        return self.tm_wday is not None and 0 <= self.tm_wday <= 6


def from_struct_time(st: time.struct_time) -> BrokenDownTime:
    return BrokenDownTime(
        tm_year=st.tm_year - TM_YEAR_BASE,
        tm_mon=st.tm_mon - 1,
        tm_mday=st.tm_mday,
        tm_wday=(st.tm_wday + 1) % 7,
        tm_yday=st.tm_yday - 1,
        tm_hour=st.tm_hour,
        tm_min=st.tm_min,
        tm_sec=st.tm_sec,
        tm_isdst=st.tm_isdst,
    )


def to_struct_time(bdt: BrokenDownTime) -> time.struct_time:
    """Convert to `time.struct_time`, deriving missing weekday/yday fields."""
    wday = bdt.tm_wday
    if not bdt.has_weekday:
        wday = weekday_to_sunday_index(compute_weekday(bdt.year, bdt.month, bdt.tm_mday))
    yday = bdt.tm_yday
    if yday is None:
        yday = day_of_year(bdt.year, bdt.month, bdt.tm_mday) - 1
    return time.struct_time(
        (
            bdt.year,
            bdt.month,
            bdt.tm_mday,
            bdt.tm_hour,
            bdt.tm_min,
            bdt.tm_sec,
            (wday - 1) % 7,
            yday + 1,
            bdt.tm_isdst,
        )
    )
