from __future__ import annotations

from typing import Dict

from ..core.types import CalculationMethod, MethodParams


# ============================================================
# TWILIGHT PARAMETERS
# ============================================================

# Fajr/Isha depression angles (degrees) and fixed Isha interval (minutes).
METHOD_PARAMS: Dict[str, MethodParams] = {
    CalculationMethod.MWL.value:     MethodParams(fajr_angle=18.0, isha_angle=17.0),
    CalculationMethod.ISNA.value:    MethodParams(fajr_angle=15.0, isha_angle=15.0),
    CalculationMethod.EGYPT.value:   MethodParams(fajr_angle=19.5, isha_angle=17.5),
    CalculationMethod.MAKKAH.value:  MethodParams(fajr_angle=18.5, isha_angle=0.0, isha_interval=90.0),
    CalculationMethod.KARACHI.value: MethodParams(fajr_angle=18.0, isha_angle=18.0),
    CalculationMethod.TEHRAN.value:  MethodParams(fajr_angle=17.7, isha_angle=14.0),
    CalculationMethod.KEMENAG.value: MethodParams(fajr_angle=20.0, isha_angle=18.0),
    CalculationMethod.JAKIM.value:   MethodParams(fajr_angle=20.0, isha_angle=18.0),
}

# Used for any name not in the table; a misspelt method silently gets these.
DEFAULT_PARAMS = MethodParams(fajr_angle=18.0, isha_angle=17.0)


def standard_methods() -> Dict[str, MethodParams]:
    return dict(METHOD_PARAMS)