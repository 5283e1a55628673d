# tests/test_time.py

import pytest
from datetime import date, datetime, timedelta, timezone

from salat.core import time as st


def test_known_epochs():
    # J2000.0 is 2000-01-01 12:00 TT
    assert st.julian_date(2000, 1, 1, 12) == 2451545.0
    # Unix epoch
    assert st.julian_date(1970, 1, 1) == 2440587.5
    # Gregorian reform, first Gregorian day
    assert st.julian_date(1582, 10, 15) == 2299160.5


def test_january_february_shift():
    # consecutive civil days stay consecutive across the Jan/Feb -> previous-year shift
    assert st.julian_date(2024, 3, 1) - st.julian_date(2024, 2, 29) == 1.0
    assert st.julian_date(2024, 1, 1) - st.julian_date(2023, 12, 31) == 1.0
    assert st.julian_date(2023, 3, 1) - st.julian_date(2023, 2, 28) == 1.0


def test_time_of_day_fraction():
    base = st.julian_date(2024, 3, 15)
    assert base == 2460384.5
    assert st.julian_date(2024, 3, 15, 6) == pytest.approx(base + 0.25)
    assert st.julian_date(2024, 3, 15, 18, 30, 36) == pytest.approx(base + (18 + 30 / 60 + 36 / 3600) / 24)


def test_julian_date_of_date_and_datetime():
    assert st.julian_date_of(date(2024, 3, 15)) == 2460384.5
    dt = datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)
    assert st.julian_date_of(dt) == 2460385.0


@pytest.mark.parametrize("h, expected", [(0.0, 0.0), (23.5, 23.5), (24.0, 0.0), (25.25, 1.25), (-0.5, 23.5), (-24.75, 23.25)])
def test_wrap_hours(h, expected):
    assert st.wrap_hours(h) == pytest.approx(expected)


def test_split_hours_truncates():
    assert st.split_hours(4.5) == (4, 30, 0)
    assert st.split_hours(12.0) == (12, 0, 0)
    # 18:05:55.68 -> seconds are truncated, not rounded
    assert st.split_hours(18.0988) == (18, 5, 55)


def test_at_hours_anchors_on_local_midnight():
    t = st.at_hours(date(2024, 3, 15), 7.0, 4.5)
    assert t == datetime(2024, 3, 15, 4, 30, tzinfo=timezone(timedelta(hours=7)))
    assert t.utcoffset() == timedelta(hours=7)


def test_fractional_offsets():
    assert st.utc_offset_hours(datetime(2024, 1, 1, tzinfo=st.fixed_offset(5.5))) == 5.5
    assert st.utc_offset_hours(datetime(2024, 1, 1, tzinfo=st.fixed_offset(-3.5))) == -3.5
    assert st.utc_offset_hours(datetime(2024, 1, 1)) == 0.0
