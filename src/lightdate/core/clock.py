"""Clock providers used when a Date is read off the wall clock."""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    @abstractmethod
    def now(self) -> float:
        """Current POSIX timestamp in seconds."""


class SystemClock(Clock):
    def now(self) -> float:
        return time.time()


class FixedClock(Clock):
    """Always reports the same instant. Useful for deterministic tests."""

    def __init__(self, timestamp: float):
        self._timestamp = float(timestamp)

    def now(self) -> float:
        return self._timestamp

    def advance(self, seconds: float) -> None:
        self._timestamp += seconds


_default_clock: Clock = SystemClock()


def get_default_clock() -> Clock:
    return _default_clock


def set_default_clock(clock: Clock) -> None:
    global _default_clock
    _default_clock = clock
