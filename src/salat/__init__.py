"""salat public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    compute_schedule,
    schedule_for,
    explain,
    active_period,
    next_period,
    period_progress,
    parameters_for,
    list_methods,
    method_info,
    register_method,
    symbol_for,
)
from .core.errors import SalatError, InvalidGeometryError, MethodExistsError
from .core.time import julian_date
from .core.types import CalculationMethod, Coordinate, MethodParams, NextPrayer, Prayer, Schedule
from .reference.solar import solar_position

__all__ = [
    "compute_schedule",
    "schedule_for",
    "explain",
    "active_period",
    "next_period",
    "period_progress",
    "parameters_for",
    "list_methods",
    "method_info",
    "register_method",
    "symbol_for",
    "SalatError",
    "InvalidGeometryError",
    "MethodExistsError",
    "julian_date",
    "solar_position",
    "CalculationMethod",
    "Coordinate",
    "MethodParams",
    "NextPrayer",
    "Prayer",
    "Schedule",
]
