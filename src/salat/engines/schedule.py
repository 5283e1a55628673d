from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict

from ..core.time import at_hours, julian_date_of, wrap_hours
from ..core.types import Coordinate, MethodParams, Schedule
from ..reference.solar import SolarPosition, solar_position
from .solver import SUNSET_ANGLE, asr_angle, isha_after_maghrib, prayer_time_hours, solar_noon_hours

logger = logging.getLogger(__name__)

# Imsak precedes Subuh by a fixed margin.
IMSAK_OFFSET = timedelta(minutes=10)


@dataclass(frozen=True)
class DayHours:
    """Fractional local hours of one day's events, before anchoring to a date."""
    subuh: float
    sunrise: float
    dzuhur: float
    ashar: float
    maghrib: float
    isya: float


def _civil_date(d: date) -> date:
    return d.date() if isinstance(d, datetime) else d


def solve_day(sun: SolarPosition, utc_offset: float, coord: Coordinate, params: MethodParams) -> DayHours:
    """Run the solver for every event of the day. Raises InvalidGeometryError."""
    lat, lon = coord.latitude, coord.longitude
    decl, eot = sun.declination_deg, sun.eq_of_time_min

    subuh = prayer_time_hours(-params.fajr_angle, lat, decl, eot, utc_offset, lon, True)
    sunrise = prayer_time_hours(SUNSET_ANGLE, lat, decl, eot, utc_offset, lon, True)
    dzuhur = wrap_hours(solar_noon_hours(utc_offset, lon, eot))
    ashar = prayer_time_hours(asr_angle(lat, decl), lat, decl, eot, utc_offset, lon, False)
    maghrib = prayer_time_hours(SUNSET_ANGLE, lat, decl, eot, utc_offset, lon, False)

    if params.isha_by_interval:
        isya = isha_after_maghrib(maghrib, params.isha_interval)
    else:
        isya = prayer_time_hours(-params.isha_angle, lat, decl, eot, utc_offset, lon, False)

    return DayHours(subuh=subuh, sunrise=sunrise, dzuhur=dzuhur, ashar=ashar, maghrib=maghrib, isya=isya)


def build_schedule(day: date, utc_offset: float, coord: Coordinate, params: MethodParams) -> Schedule:
    """
    Prayer times for the civil date ``day`` at a fixed UTC offset (hours).

    The solar position is evaluated once, at local midnight of ``day``.
    """
    d = _civil_date(day)
    sun = solar_position(julian_date_of(d))
    hours = solve_day(sun, utc_offset, coord, params)

    subuh = at_hours(d, utc_offset, hours.subuh)
    schedule = Schedule(
        date=d,
        utc_offset=utc_offset,
        imsak=subuh - IMSAK_OFFSET,
        subuh=subuh,
        dzuhur=at_hours(d, utc_offset, hours.dzuhur),
        ashar=at_hours(d, utc_offset, hours.ashar),
        maghrib=at_hours(d, utc_offset, hours.maghrib),
        isya=at_hours(d, utc_offset, hours.isya),
    )
    logger.debug("Schedule for %s at (%s, %s): %s", d, coord.latitude, coord.longitude, schedule.to_dict())
    return schedule


def explain_day(day: date, utc_offset: float, coord: Coordinate, params: MethodParams) -> Dict[str, Any]:
    """Intermediate quantities behind a schedule, for debugging."""
    d = _civil_date(day)
    jd = julian_date_of(d)
    sun = solar_position(jd)
    out: Dict[str, Any] = {
        "date": d.isoformat(),
        "utc_offset": utc_offset,
        "latitude": coord.latitude,
        "longitude": coord.longitude,
        "params": asdict(params),
        "jd": jd,
        "declination_deg": sun.declination_deg,
        "eq_of_time_min": sun.eq_of_time_min,
        "asr_angle_deg": asr_angle(coord.latitude, sun.declination_deg),
    }
    out["hours"] = asdict(solve_day(sun, utc_offset, coord, params))
    return out
