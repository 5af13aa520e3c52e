"""Explicit result wrapper for callers that prefer not to catch InvalidDate."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from lightdate.convert.broken_down import BrokenDownTime
from lightdate.core.date import Date
from lightdate.core.errors import InvalidDate


class StatusCode(IntEnum):
    SUCCESS = 0
    ERROR = 2


@dataclass(frozen=True)
class DateResult:
    """Either a Date or the InvalidDate that prevented building one."""

    status_code: StatusCode
    data: Optional[Date] = None
    error: Optional[InvalidDate] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code == StatusCode.SUCCESS

    @classmethod
    def success(cls, data: Date) -> "DateResult":
        return cls(status_code=StatusCode.SUCCESS, data=data)

    @classmethod
    def failure(cls, error: InvalidDate) -> "DateResult":
        return cls(status_code=StatusCode.ERROR, error=error, message=str(error))

    def unwrap(self) -> Date:
        if self.error is not None:
            raise self.error
        return self.data

    def to_dict(self) -> dict:
        return {
            "status_code": self.status_code.value,
            "data": str(self.data) if self.data is not None else None,
            "rejected": list(self.error.triple) if self.error is not None else None,
            "message": self.message,
        }


def try_date(year: int, month: int, day: int) -> DateResult:
    try:
        return DateResult.success(Date(year, month, day))
    except InvalidDate as e:
        return DateResult.failure(e)


def try_from_broken_down(components: BrokenDownTime) -> DateResult:
    try:
        return DateResult.success(Date.from_broken_down(components))
    except InvalidDate as e:
        return DateResult.failure(e)
