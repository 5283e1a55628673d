"""
salat.engines.windows
---------------------
Classifies an instant against a day's schedule.

The six boundaries form a cyclic sequence Imsak -> Subuh -> Dzuhur -> Ashar
-> Maghrib -> Isya -> (Imsak + 24h). Each half-open interval [start, end) is
named after its starting boundary. Between local midnight and Imsak no
period is active.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from ..core.time import local_midnight
from ..core.types import NextPrayer, Prayer, Schedule

Boundary = Tuple[Prayer, datetime]


def boundaries(schedule: Schedule) -> List[Boundary]:
    """Ordered (prayer, start) pairs in cyclic order."""
    return list(schedule.items())


def _localize(now: datetime, schedule: Schedule) -> datetime:
    # naive instants are read as wall-clock time in the schedule's offset
    if now.tzinfo is None:
        return now.replace(tzinfo=schedule.tzinfo)
    return now.astimezone(schedule.tzinfo)


def periods(schedule: Schedule) -> List[Tuple[Prayer, datetime, datetime]]:
    bs = boundaries(schedule)
    ends = [t for _, t in bs[1:]] + [schedule.imsak + timedelta(days=1)]
    return [(p, start, end) for (p, start), end in zip(bs, ends)]


def active_period(now: datetime, schedule: Schedule) -> Optional[Prayer]:
    """Prayer whose interval contains ``now``, or None before Imsak."""
    now = _localize(now, schedule)
    for prayer, start, end in periods(schedule):
        if start <= now < end:
            return prayer
    return None


def next_period(now: datetime, schedule: Schedule) -> NextPrayer:
    """
    First boundary strictly after ``now``.

    Once every boundary has passed, the earliest one is re-anchored on the
    calendar day after ``now`` and flagged ``next_day``.
    """
    now = _localize(now, schedule)
    ordered = sorted(boundaries(schedule), key=lambda b: b[1])

    for prayer, t in ordered:
        if t > now:
            return NextPrayer(prayer=prayer, time=t)

    first, t0 = ordered[0]
    tomorrow = (now + timedelta(days=1)).date()
    t_next = datetime.combine(tomorrow, t0.timetz())
    return NextPrayer(prayer=first, time=t_next, next_day=True)


def period_progress(now: datetime, schedule: Schedule) -> float:
    """Fraction in [0,1] of the way from the previous boundary to the next one."""
    now = _localize(now, schedule)
    nxt = next_period(now, schedule)

    started = [t for _, t in boundaries(schedule) if t <= now]
    prev = max(started) if started else local_midnight(now.date(), schedule.utc_offset)

    span = (nxt.time - prev).total_seconds()
    if span <= 0:
        return 0.0
    frac = (now - prev).total_seconds() / span
    return min(1.0, max(0.0, frac))
