from __future__ import annotations

from datetime import date, timedelta
import argparse
from typing import Iterator, List, Optional, Tuple

import salat
from salat.core.types import Schedule


def iter_days(year: int) -> Iterator[date]:
    d = date(year, 1, 1)
    while d.year == year:
        yield d
        d += timedelta(days=1)


def year_schedules(
    year: int, utc_offset: float, coord: salat.Coordinate, method: str
) -> List[Tuple[date, Optional[Schedule]]]:
    """One row per day; None where the sun does not reach a required altitude."""
    rows: List[Tuple[date, Optional[Schedule]]] = []
    for d in iter_days(year):
        try:
            rows.append((d, salat.compute_schedule(d, utc_offset, coord, method)))
        except salat.InvalidGeometryError:
            rows.append((d, None))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a year of prayer times for one location.")
    p.add_argument("--year", type=int, default=date.today().year)
    p.add_argument("--lat", type=float, required=True)
    p.add_argument("--lon", type=float, required=True)
    p.add_argument("--tz", type=float, required=True, help="UTC offset in hours")
    p.add_argument("--method", default="MWL")
    p.add_argument("--every", type=int, default=1, help="Print every N-th day (default: 1)")
    args = p.parse_args(argv)

    coord = salat.Coordinate(args.lat, args.lon)
    names = [pr.value for pr in salat.Prayer]
    print("date       " + " ".join(f"{n:>8}" for n in names))

    missing = 0
    for i, (d, sched) in enumerate(year_schedules(args.year, args.tz, coord, args.method)):
        if sched is None:
            missing += 1
        if i % max(1, args.every):
            continue
        if sched is None:
            print(f"{d.isoformat()} " + " ".join(f"{'--':>8}" for _ in names))
            continue
        print(f"{d.isoformat()} " + " ".join(f"{t:%H:%M:%S}".rjust(8) for _, t in sched.items()))

    if missing:
        print(f"\n{missing} day(s) without a complete schedule (high-latitude geometry).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
