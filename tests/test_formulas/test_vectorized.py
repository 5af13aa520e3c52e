"""Tests for vectorized calendar formulas."""

import numpy as np
from lightdate.core.calendar import compute_weekday, is_valid_date, to_julian_day
from lightdate.formulas.vectorized import (
    days_in_month_array,
    from_julian_day_array,
    is_leap_year_array,
    is_valid_date_array,
    julian_day_array,
    weekday_array,
)


class TestVectorizedCalendar:
    def test_leap_years(self):
        years = np.array([2000, 1900, 2004, 2018])
        np.testing.assert_array_equal(
            is_leap_year_array(years), [True, False, True, False]
        )

    def test_days_in_month(self):
        result = days_in_month_array([2016, 2017, 2017, 2017], [2, 2, 4, 13])
        np.testing.assert_array_equal(result, [29, 28, 30, 0])

    def test_validity_matches_scalar(self):
        triples = [
            (2018, 2, 29),
            (2016, 2, 29),
            (2018, 4, 31),
            (2018, 13, 1),
            (-1, 1, 1),
            (2018, 1, 0),
            (2018, 12, 31),
        ]
        years, months, days = map(np.array, zip(*triples))
        expected = [is_valid_date(*t) for t in triples]
        np.testing.assert_array_equal(is_valid_date_array(years, months, days), expected)

    def test_weekday_matches_scalar(self):
        jdns = np.arange(to_julian_day(1999, 12, 1), to_julian_day(2001, 3, 1))
        years, months, days = from_julian_day_array(jdns)
        expected = [
            int(compute_weekday(int(y), int(m), int(d)))
            for y, m, d in zip(years, months, days)
        ]
        np.testing.assert_array_equal(weekday_array(years, months, days), expected)

    def test_julian_day_round_trip(self):
        jdns = np.arange(2451500, 2452500)
        years, months, days = from_julian_day_array(jdns)
        np.testing.assert_array_equal(julian_day_array(years, months, days), jdns)

    def test_broadcasts_scalar_year(self):
        result = weekday_array(2018, np.array([1, 2, 3]), 1)
        # 2018-01-01 Monday, 2018-02-01 Thursday, 2018-03-01 Thursday
        np.testing.assert_array_equal(result, [1, 4, 4])
