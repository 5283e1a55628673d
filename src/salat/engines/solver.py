"""
salat.engines.solver
--------------------
Hour-angle solver: clock time (fractional hours, local civil offset) at which
the sun crosses a given altitude on either side of solar noon.

Negative angles are depressions below the horizon (Fajr, sunset, Isha);
the Asr altitude is positive and derived from the shadow-length rule.
"""

from __future__ import annotations

import logging
import math

from ..core.errors import InvalidGeometryError
from ..core.time import wrap_hours
from ..reference.solar import cos_deg, sin_deg, tan_deg

logger = logging.getLogger(__name__)

# Apparent sunset/sunrise altitude: refraction plus solar semi-diameter.
SUNSET_ANGLE = -0.833

# Shafi'i rule: shadow equals object length plus the noon shadow.
ASR_SHADOW_FACTOR = 1.0


def solar_noon_hours(utc_offset: float, longitude: float, eq_of_time: float) -> float:
    return 12.0 + utc_offset - longitude / 15.0 - eq_of_time / 60.0


def hour_angle_hours(angle: float, latitude: float, declination: float) -> float:
    """
    Half-arc (hours) between solar noon and the sun's crossing of ``angle``.

    cos H = (sin a - sin phi sin delta) / (cos phi cos delta)
    """
    cos_H = (sin_deg(angle) - sin_deg(latitude) * sin_deg(declination)) / (
        cos_deg(latitude) * cos_deg(declination)
    )

    if not (-1.0 <= cos_H <= 1.0):
        logger.debug(
            "No crossing of %.3f deg: lat=%.4f decl=%.4f cosH=%.6f", angle, latitude, declination, cos_H
        )
        raise InvalidGeometryError(angle, latitude, declination, cos_H)

    return math.degrees(math.acos(cos_H)) / 15.0


def prayer_time_hours(
    angle: float,
    latitude: float,
    declination: float,
    eq_of_time: float,
    utc_offset: float,
    longitude: float,
    before_noon: bool,
) -> float:
    """Local clock time in [0,24) of the sun crossing ``angle`` before or after noon."""
    noon = solar_noon_hours(utc_offset, longitude, eq_of_time)
    H = hour_angle_hours(angle, latitude, declination)

    if before_noon:
        t = noon - H
    else:
        t = noon + H
    return wrap_hours(t)


def asr_angle(latitude: float, declination: float, shadow_factor: float = ASR_SHADOW_FACTOR) -> float:
    """Sun altitude (degrees) at which a shadow is ``shadow_factor`` lengths plus the noon shadow."""
    return math.degrees(math.atan(1.0 / (shadow_factor + tan_deg(abs(latitude - declination)))))


def isha_after_maghrib(maghrib_hours: float, interval_minutes: float) -> float:
    return wrap_hours(maghrib_hours + interval_minutes / 60.0)
