from __future__ import annotations
from datetime import date, datetime, time, timedelta, timezone
import math
from typing import Tuple

JD_J2000 = 2451545.0


def julian_date(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> float:
    """Proleptic Gregorian civil date and clock time -> continuous Julian Date."""
    if month <= 2:
        year -= 1
        month += 12

    a = math.floor(year / 100.0)
    b = 2 - a + math.floor(a / 4.0)

    jd = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5
    jd += (hour + minute / 60.0 + second / 3600.0) / 24.0
    return jd


def julian_date_of(d: date) -> float:
    """Julian Date of a ``date`` (midnight) or of a ``datetime``'s wall clock."""
    if isinstance(d, datetime):
        return julian_date(d.year, d.month, d.day, d.hour, d.minute, d.second)
    return julian_date(d.year, d.month, d.day)


def wrap_hours(h: float) -> float:
    """Wrap fractional hours to [0,24)."""
    y = math.fmod(h, 24.0)
    if y < 0:
        y += 24.0
    return y


def split_hours(h: float) -> Tuple[int, int, int]:
    """Truncating split of fractional hours into (hour, minute, second)."""
    hh = int(h)
    m = int((h - hh) * 60.0)
    s = int(((h - hh) * 60.0 - m) * 60.0)
    return hh, m, s


def fixed_offset(hours: float) -> timezone:
    return timezone(timedelta(hours=hours))


def utc_offset_hours(dt: datetime) -> float:
    """UTC offset of an aware datetime, in hours (0 for naive values)."""
    off = dt.utcoffset()
    if off is None:
        return 0.0
    return off.total_seconds() / 3600.0


def local_midnight(d: date, utc_offset: float) -> datetime:
    return datetime.combine(d, time(0, 0), tzinfo=fixed_offset(utc_offset))


def at_hours(d: date, utc_offset: float, h: float) -> datetime:
    """Anchor fractional hours ``h`` on local midnight of ``d``."""
    hh, m, s = split_hours(h)
    return local_midnight(d, utc_offset) + timedelta(hours=hh, minutes=m, seconds=s)
