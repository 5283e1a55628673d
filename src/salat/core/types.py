from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Dict, Iterator, Tuple

from .time import fixed_offset


class CalculationMethod(str, Enum):
    MWL = "MWL"          # Muslim World League
    ISNA = "ISNA"        # Islamic Society of North America
    EGYPT = "Egypt"      # Egyptian General Authority of Survey
    MAKKAH = "Makkah"    # Umm al-Qura University, Makkah
    KARACHI = "Karachi"  # University of Islamic Sciences, Karachi
    TEHRAN = "Tehran"    # Institute of Geophysics, University of Tehran
    KEMENAG = "Kemenag"  # Kementerian Agama Republik Indonesia
    JAKIM = "JAKIM"      # Jabatan Kemajuan Islam Malaysia


class Prayer(str, Enum):
    """The six schedule boundaries, in cyclic order."""
    IMSAK = "Imsak"
    SUBUH = "Subuh"
    DZUHUR = "Dzuhur"
    ASHAR = "Ashar"
    MAGHRIB = "Maghrib"
    ISYA = "Isya"


PRAYER_ORDER: Tuple[Prayer, ...] = tuple(Prayer)


@dataclass(frozen=True)
class Coordinate:
    latitude: float   # degrees, positive north
    longitude: float  # degrees, positive east


@dataclass(frozen=True)
class MethodParams:
    """Twilight parameters of a calculation method.

    Isha uses ``isha_interval`` minutes after Maghrib when it is positive,
    otherwise the ``isha_angle`` depression.
    """
    fajr_angle: float
    isha_angle: float
    isha_interval: float = 0.0

    @property
    def isha_by_interval(self) -> bool:
        return self.isha_interval > 0


@dataclass(frozen=True)
class Schedule:
    """One civil day of prayer times, all in the fixed offset ``utc_offset`` (hours)."""
    date: date
    utc_offset: float
    imsak: datetime
    subuh: datetime
    dzuhur: datetime
    ashar: datetime
    maghrib: datetime
    isya: datetime

    @property
    def tzinfo(self) -> timezone:
        return fixed_offset(self.utc_offset)

    def get(self, prayer: Prayer | str) -> datetime:
        return getattr(self, Prayer(prayer).name.lower())

    def items(self) -> Iterator[Tuple[Prayer, datetime]]:
        for p in PRAYER_ORDER:
            yield p, self.get(p)

    def to_dict(self) -> Dict[str, str]:
        out = {"date": self.date.isoformat(), "utc_offset": f"{self.utc_offset:+g}"}
        for p, t in self.items():
            out[p.value] = t.isoformat()
        return out


@dataclass(frozen=True)
class NextPrayer:
    prayer: Prayer
    time: datetime
    next_day: bool = False  # True when wrapped to the first boundary of the following day
