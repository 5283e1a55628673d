from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .core.registry import MethodName, MethodRegistry
from .core.time import utc_offset_hours
from .core.types import Coordinate, MethodParams, NextPrayer, Prayer, Schedule
from .engines import windows
from .engines.schedule import build_schedule, explain_day

DEFAULT_METHOD = "MWL"
_registry: Optional[MethodRegistry] = None

def set_registry(reg: MethodRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> MethodRegistry:
    if _registry is None:
        raise RuntimeError("Method registry not initialized")
    return _registry

# ============================================================
# Calculation methods
# ============================================================

def parameters_for(method: MethodName) -> MethodParams:
    """Twilight parameters of ``method``. Unknown names get the default (18, 17, no interval)."""
    return _reg().get(method)

def list_methods() -> List[str]:
    return _reg().list()

def method_info(method: MethodName) -> Dict[str, Any]:
    params = parameters_for(method)
    return {"name": str(getattr(method, "value", method)), "known": method in _reg(), **asdict(params)}

def register_method(name: str, params: MethodParams, *, overwrite: bool = False) -> None:
    _reg().register(name, params, overwrite=overwrite)

# ============================================================
# Schedules
# ============================================================

def compute_schedule(
    d: date,
    utc_offset: float,
    coordinate: Coordinate,
    method: MethodName = DEFAULT_METHOD,
) -> Schedule:
    """
    The six prayer times of civil date ``d`` at a fixed UTC offset (hours).

    Raises InvalidGeometryError when one of the events does not occur
    (high latitudes near the solstices).
    """
    return build_schedule(d, utc_offset, coordinate, parameters_for(method))

def schedule_for(moment: datetime, coordinate: Coordinate, method: MethodName = DEFAULT_METHOD) -> Schedule:
    """
    Schedule of the civil day containing ``moment``, in its UTC offset.

    A naive ``moment`` has no offset and is taken as UTC (offset 0).
    """
    return compute_schedule(moment.date(), utc_offset_hours(moment), coordinate, method)

def explain(d: date, utc_offset: float, coordinate: Coordinate, method: MethodName = DEFAULT_METHOD) -> Dict[str, Any]:
    out = explain_day(d, utc_offset, coordinate, parameters_for(method))
    out["method"] = method_info(method)
    return out

def active_period(now: datetime, schedule: Schedule) -> Optional[Prayer]:
    return windows.active_period(now, schedule)

def next_period(now: datetime, schedule: Schedule) -> NextPrayer:
    return windows.next_period(now, schedule)

def period_progress(now: datetime, schedule: Schedule) -> float:
    return windows.period_progress(now, schedule)

# ============================================================
# Presentation
# ============================================================

SYMBOLS: Dict[str, str] = {
    Prayer.IMSAK.value: "🌙",
    Prayer.SUBUH.value: "🌅",
    Prayer.DZUHUR.value: "☀️",
    Prayer.ASHAR.value: "🌤️",
    Prayer.MAGHRIB.value: "🌇",
    Prayer.ISYA.value: "✨",
}

def symbol_for(name: Prayer | str) -> str:
    key = name.value if isinstance(name, Prayer) else str(name)
    return SYMBOLS.get(key, "")
