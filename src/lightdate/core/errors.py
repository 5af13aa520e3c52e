"""Error kinds raised by lightdate."""

from typing import Optional, Tuple


class InvalidDate(ValueError):
    """A (year, month, day) triple failed calendar validation.

    `field` is None when a whole date was being constructed, otherwise the
    name of the setter that was rejected ("year", "month" or "day").
    """

    def __init__(self, year: int, month: int, day: int, field: Optional[str] = None):
        self.year = year
        self.month = int(month)
        self.day = day
        self.field = field
        if field is None:
            message = f"Invalid date constructed: {year}-{self.month}-{day}"
        else:
            message = f"Invalid {field} set: {year}-{self.month}-{day}"
        super().__init__(message)

    @property
    def triple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def __reduce__(self):
        return type(self), (self.year, self.month, self.day, self.field)
