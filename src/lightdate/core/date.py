"""Calendar date value type.

A Date always holds a valid proleptic Gregorian (year, month, day). The
weekday is derived on access, so it can never go stale after a setter call.
Multi-day arithmetic goes through Julian day numbers.
"""

import datetime
import time
from typing import Callable, Dict, Optional, Tuple

from lightdate.convert.broken_down import BrokenDownTime, TM_YEAR_BASE
from lightdate.core.calendar import (
    Month,
    Weekday,
    compute_weekday,
    day_of_year as ordinal_in_year,
    from_julian_day,
    is_valid_date,
    to_julian_day,
    weekday_from_sunday_index,
    weekday_to_sunday_index,
)
from lightdate.core.clock import Clock, get_default_clock
from lightdate.core.errors import InvalidDate
from lightdate.core.logger import get_logger

logger = get_logger("core.date")


def _lexicographic_less(lhs: "Date", rhs: "Date") -> bool:
    return lhs.as_tuple() < rhs.as_tuple()


def _legacy_less(lhs: "Date", rhs: "Date") -> bool:
    # Field-wise OR; not a total order (2019-01-05 < 2018-02-01 holds).
    return lhs.year < rhs.year or lhs.month < rhs.month or lhs.day < rhs.day


_ORDERINGS: Dict[str, Callable[["Date", "Date"], bool]] = {
    "lexicographic": _lexicographic_less,
    "legacy": _legacy_less,
}
_ordering_mode = "lexicographic"


def set_ordering_mode(mode: str) -> None:
    """Select how Date instances compare: 'lexicographic' or 'legacy'."""
    global _ordering_mode
    if mode not in _ORDERINGS:
        raise ValueError(
            f"ordering mode must be one of {sorted(_ORDERINGS)}, got {mode!r}"
        )
    if mode != _ordering_mode:
        logger.info(f"Date ordering mode: {_ordering_mode} -> {mode}")
    _ordering_mode = mode


def get_ordering_mode() -> str:
    return _ordering_mode


def _less(lhs: "Date", rhs: "Date") -> bool:
    return _ORDERINGS[_ordering_mode](lhs, rhs)


class Date:
    """A valid calendar date.

    Construction and setters raise InvalidDate rather than produce an
    impossible date; a failed setter leaves the instance untouched.

    Examples:
        >>> d = Date(2017, Month.DECEMBER, 31)
        >>> d.increment()
        Date(2018, 1, 1)
        >>> d.weekday
        <Weekday.MONDAY: 1>
    """

    __slots__ = ("_year", "_month", "_day")

    # Mutable through setters, so not hashable.
    __hash__ = None

    def __init__(self, year: int, month: int, day: int):
        if not is_valid_date(year, month, day):
            logger.debug(f"Rejected date {year}-{int(month)}-{day}")
            raise InvalidDate(year, month, day)
        self._year = int(year)
        self._month = Month(month)
        self._day = int(day)

    # ── alternate constructors ───────────────────────────────────────────

    @classmethod
    def from_wall_clock(cls, timestamp: float) -> "Date":
        """Local calendar date of a POSIX timestamp."""
        local = time.localtime(timestamp)
        return cls(local.tm_year, local.tm_mon, local.tm_mday)

    @classmethod
    def today(cls, clock: Optional[Clock] = None) -> "Date":
        clock = clock or get_default_clock()
        return cls.from_wall_clock(clock.now())

    @classmethod
    def from_broken_down(cls, components: BrokenDownTime) -> "Date":
        """Build from a `struct tm` style record.

        A supplied weekday is not trusted: the weekday is always derived
        from the date, and a disagreeing value is reported.
        """
        result = cls(components.year, components.month, components.tm_mday)
        if components.has_weekday:
            supplied = weekday_from_sunday_index(components.tm_wday)
            if supplied != result.weekday:
                logger.warning(
                    f"Ignoring tm_wday={components.tm_wday} ({supplied.name}) "
                    f"for {result}, which is a {result.weekday.name}"
                )
        return result

    @classmethod
    def from_struct_time(cls, st: time.struct_time) -> "Date":
        return cls(st.tm_year, st.tm_mon, st.tm_mday)

    @classmethod
    def from_pydate(cls, d: datetime.date) -> "Date":
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_julian_day(cls, jdn: int) -> "Date":
        return cls(*from_julian_day(jdn))

    # ── fields ───────────────────────────────────────────────────────────

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        self.set_year(value)

    @property
    def month(self) -> Month:
        return self._month

    @month.setter
    def month(self, value: int) -> None:
        self.set_month(value)

    @property
    def day(self) -> int:
        return self._day

    @day.setter
    def day(self, value: int) -> None:
        self.set_day(value)

    @property
    def weekday(self) -> Weekday:
        return compute_weekday(self._year, self._month, self._day)

    @property
    def julian_day(self) -> int:
        return to_julian_day(self._year, self._month, self._day)

    @property
    def day_of_year(self) -> int:
        return ordinal_in_year(self._year, self._month, self._day)

    def set_year(self, year: int) -> None:
        if not is_valid_date(year, self._month, self._day):
            raise InvalidDate(year, self._month, self._day, field="year")
        self._year = int(year)

    def set_month(self, month: int) -> None:
        if not is_valid_date(self._year, month, self._day):
            raise InvalidDate(self._year, month, self._day, field="month")
        self._month = Month(month)

    def set_day(self, day: int) -> None:
        if not is_valid_date(self._year, self._month, day):
            raise InvalidDate(self._year, self._month, day, field="day")
        self._day = int(day)

    def as_tuple(self) -> Tuple[int, int, int]:
        return self._year, int(self._month), self._day

    def copy(self) -> "Date":
        return Date(self._year, self._month, self._day)

    __copy__ = copy

    def _assign(self, other: "Date") -> None:
        self._year, self._month, self._day = other._year, other._month, other._day

    # ── stepping ─────────────────────────────────────────────────────────

    def increment(self) -> "Date":
        """Advance one day in place and return self."""
        y, m, d = self._year, int(self._month), self._day
        if is_valid_date(y, m, d + 1):
            d += 1
        elif is_valid_date(y, m + 1, 1):
            m, d = m + 1, 1
        else:
            y, m, d = y + 1, 1, 1
        self._year, self._month, self._day = y, Month(m), d
        return self

    def post_increment(self) -> "Date":
        """Advance one day in place and return the value before the step."""
        before = self.copy()
        self.increment()
        return before

    def decrement(self) -> "Date":
        self._assign(self.subtract_days(1))
        return self

    def post_decrement(self) -> "Date":
        before = self.copy()
        self.decrement()
        return before

    def next_day(self) -> "Date":
        return self.copy().increment()

    def previous_day(self) -> "Date":
        return self.subtract_days(1)

    # ── day-count arithmetic ─────────────────────────────────────────────

    def add_days(self, n: int) -> "Date":
        """New date `n` days later (earlier for negative `n`).

        Raises:
            InvalidDate: If the result falls before year 0.
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"day count must be an int, got {type(n).__name__}")
        return Date.from_julian_day(self.julian_day + n)

    def subtract_days(self, n: int) -> "Date":
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"day count must be an int, got {type(n).__name__}")
        return self.add_days(-n)

    def __add__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_days(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Date):
            return date_difference(self, other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.subtract_days(other)
        return NotImplemented

    def __iadd__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            self._assign(self.add_days(other))
            return self
        return NotImplemented

    def __isub__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            self._assign(self.subtract_days(other))
            return self
        return NotImplemented

    # ── comparison ───────────────────────────────────────────────────────

    def __eq__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return _less(self, other)

    def __gt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return _less(other, self)

    def __le__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return not _less(other, self)

    def __ge__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return not _less(self, other)

    # ── conversion & rendering ───────────────────────────────────────────

    def to_broken_down(self) -> BrokenDownTime:
        return BrokenDownTime(
            tm_year=self._year - TM_YEAR_BASE,
            tm_mon=int(self._month) - 1,
            tm_mday=self._day,
            tm_wday=weekday_to_sunday_index(self.weekday),
            tm_yday=self.day_of_year - 1,
        )

    def to_struct_time(self) -> time.struct_time:
        return time.struct_time(
            (
                self._year,
                int(self._month),
                self._day,
                0,
                0,
                0,
                int(self.weekday) - 1,
                self.day_of_year,
                -1,
            )
        )

    def to_pydate(self) -> datetime.date:
        return datetime.date(self._year, int(self._month), self._day)

    def to_timestamp(self) -> float:
        """POSIX timestamp of local midnight at the start of this date."""
        return time.mktime(self.to_struct_time())

    def isoformat(self) -> str:
        return f"{self._year:04d}-{int(self._month):02d}-{self._day:02d}"

    __str__ = isoformat

    def __repr__(self) -> str:
        return f"Date({self._year}, {int(self._month)}, {self._day})"


def date_difference(a: Date, b: Date) -> int:
    """Whole days between two dates, regardless of order."""
    return abs(a.julian_day - b.julian_day)
