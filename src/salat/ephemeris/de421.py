#ephemeris/de421.py
from __future__ import annotations

import math
from dataclasses import dataclass

from . import require_ephemeris


def wrap180(deg: float) -> float:
    return (deg + 180.0) % 360.0 - 180.0


@dataclass
class DE421Sun:
    """
    Apparent geocentric sun from JPL DE421 via skyfield.

    Requires optional deps:
      pip install "salat[ephemeris]"
    The kernel (~17 MB) is downloaded into ``directory`` on first use.
    """
    ts: object
    earth: object
    sun: object
    greenwich: object

    @classmethod
    def load(cls, directory: str = ".") -> "DE421Sun":
        require_ephemeris()
        from skyfield.api import Loader, wgs84  # type: ignore

        loader = Loader(directory)
        eph = loader("de421.bsp")
        earth = eph["earth"]
        return cls(
            ts=loader.timescale(),
            earth=earth,
            sun=eph["sun"],
            greenwich=earth + wgs84.latlon(0.0, 0.0),
        )

    def declination_deg(self, jd_ut: float) -> float:
        t = self.ts.ut1_jd(jd_ut)
        _, dec, _ = self.earth.at(t).observe(self.sun).apparent().radec(epoch="date")
        return float(dec.degrees)

    def eq_of_time_min(self, jd_ut: float) -> float:
        """Apparent minus mean solar time at Greenwich, minutes."""
        t = self.ts.ut1_jd(jd_ut)
        ha, _, _ = self.greenwich.at(t).observe(self.sun).apparent().hadec()
        ut_hours = math.fmod(jd_ut - 0.5, 1.0) * 24.0
        return 4.0 * wrap180(15.0 * (ha.hours - (ut_hours - 12.0)))
