"""End-to-end: settings file -> clock -> dates -> arithmetic -> pandas."""

from pathlib import Path

import pandas as pd
from lightdate.convert.frames import date_range, to_datetime_index
from lightdate.core.calendar import Weekday
from lightdate.core.config import DateSettings, apply_settings, load_settings
from lightdate.core.date import Date, date_difference, get_ordering_mode
from lightdate.core.response import try_date

_SETTINGS = Path(__file__).parent.parent / "config" / "settings.yaml"


def test_shipped_settings_load():
    settings = load_settings(str(_SETTINGS))
    assert settings == DateSettings()
    apply_settings(settings)
    assert get_ordering_mode() == "lexicographic"


def test_month_schedule_from_clock(local_noon_clock):
    start = Date.today(clock=local_noon_clock)
    end = start + 30
    days = date_range(start, end)
    assert len(days) == date_difference(start, end) + 1
    mondays = [d for d in days if d.weekday == Weekday.MONDAY]
    assert [str(d) for d in mondays] == [
        "2018-01-01",
        "2018-01-08",
        "2018-01-15",
        "2018-01-22",
        "2018-01-29",
    ]
    frame = pd.DataFrame({"weekday": [int(d.weekday) for d in days]},
                         index=to_datetime_index(days))
    assert (frame["weekday"].to_numpy() == frame.index.dayofweek.to_numpy() + 1).all()


def test_user_input_validation():
    requested = [(2018, 2, 28), (2018, 2, 29), (2016, 2, 29), (2018, 6, 31)]
    results = [try_date(*triple) for triple in requested]
    accepted = [r.unwrap() for r in results if r.ok]
    rejected = [r.error.triple for r in results if not r.ok]
    assert accepted == [Date(2018, 2, 28), Date(2016, 2, 29)]
    assert rejected == [(2018, 2, 29), (2018, 6, 31)]
