# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from math import fmod

from ..core.time import JD_J2000


# Earth's orbital eccentricity (J2000), weight of the equation-of-centre terms.
ORBIT_ECCENTRICITY = 0.016709


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


def sin_deg(x: float) -> float:
    return math.sin(math.radians(x))


def cos_deg(x: float) -> float:
    return math.cos(math.radians(x))


def tan_deg(x: float) -> float:
    return math.tan(math.radians(x))


@dataclass(frozen=True)
class SolarPosition:
    """Apparent solar declination (degrees) and equation of time (minutes)."""
    declination_deg: float
    eq_of_time_min: float


@dataclass(frozen=True)
class SolarElements:
    """Intermediate low-precision elements, all in degrees."""
    g_deg: float    # mean anomaly
    q_deg: float    # mean longitude
    L_deg: float    # apparent ecliptic longitude
    eps_deg: float  # obliquity of the ecliptic


def solar_elements(jd: float) -> SolarElements:
    D = jd - JD_J2000

    g = wrap_deg(357.529 + 0.98560028 * D)
    q = wrap_deg(280.459 + 0.98564736 * D)
    L = wrap_deg(q + 1.915 * sin_deg(g) + 0.020 * sin_deg(2.0 * g))
    e = 23.439 - 0.00000036 * D

    return SolarElements(g_deg=g, q_deg=q, L_deg=L, eps_deg=e)


def solar_declination_deg(L_deg: float, eps_deg: float) -> float:
    return math.degrees(math.asin(sin_deg(eps_deg) * sin_deg(L_deg)))


def equation_of_time_minutes(el: SolarElements, ecc: float = ORBIT_ECCENTRICITY) -> float:
    """
    Equation of time (apparent minus mean solar time) in minutes.

    Truncated series in the mean longitude q and mean anomaly g, with
    y = tan^2(eps/2). Accurate to well under a minute around the present era.
    """
    y = tan_deg(el.eps_deg / 2.0) ** 2
    q2 = math.radians(2.0 * el.q_deg)
    g = math.radians(el.g_deg)

    E = (
        y * math.sin(q2)
        - 2.0 * ecc * math.sin(g)
        + 4.0 * ecc * y * math.sin(g) * math.cos(q2)
        - 0.5 * y * y * math.sin(2.0 * q2)
        - 1.25 * ecc * ecc * math.sin(2.0 * g)
    )
    return 4.0 * math.degrees(E)


def solar_position(jd: float) -> SolarPosition:
    """Declination and equation of time at Julian Date ``jd``."""
    el = solar_elements(jd)
    return SolarPosition(
        declination_deg=solar_declination_deg(el.L_deg, el.eps_deg),
        eq_of_time_min=equation_of_time_minutes(el),
    )
