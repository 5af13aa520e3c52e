"""Shared test fixtures for lightdate tests."""

import time

import pytest

from lightdate.core.calendar import Month
from lightdate.core.clock import FixedClock
from lightdate.core.date import Date, set_ordering_mode


@pytest.fixture(autouse=True)
def reset_ordering_mode():
    """Ordering mode is process-wide; restore the default after each test."""
    yield
    set_ordering_mode("lexicographic")


@pytest.fixture
def new_year_2018() -> Date:
    """2018-01-01, a Monday."""
    return Date(2018, Month.JANUARY, 1)


@pytest.fixture
def leap_day_2004() -> Date:
    return Date(2004, Month.FEBRUARY, 29)


@pytest.fixture
def local_noon_clock() -> FixedClock:
    """Clock pinned to local noon on 2018-01-01, far from any midnight."""
    timestamp = time.mktime((2018, 1, 1, 12, 0, 0, 0, 0, -1))
    return FixedClock(timestamp)


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("date:\n  ordering: legacy\nlogging:\n  level: DEBUG\n")
    return path
