#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

import salat
from salat.core.time import local_midnight
from salat.diagnostics.annual_table import year_schedules


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "salat[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "salat[diagnostics]"') from e


def clock_hours(np, rows, prayer: salat.Prayer):
    """Local clock hours of ``prayer`` per day; NaN where no schedule exists."""
    y = np.full(len(rows), np.nan, dtype=float)
    for i, (d, sched) in enumerate(rows):
        if sched is None:
            continue
        t = sched.get(prayer)
        # measured from the schedule's own midnight, so a wrapped Imsak goes slightly negative
        y[i] = (t - local_midnight(d, sched.utc_offset)).total_seconds() / 3600.0
    return y


COLORS = {
    salat.Prayer.IMSAK: "0.55",
    salat.Prayer.SUBUH: "tab:blue",
    salat.Prayer.DZUHUR: "tab:orange",
    salat.Prayer.ASHAR: "tab:olive",
    salat.Prayer.MAGHRIB: "tab:red",
    salat.Prayer.ISYA: "tab:purple",
}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot a year of prayer times for one location.")
    p.add_argument("--year", type=int, default=date.today().year)
    p.add_argument("--lat", type=float, required=True)
    p.add_argument("--lon", type=float, required=True)
    p.add_argument("--tz", type=float, required=True, help="UTC offset in hours")
    p.add_argument("--method", default="MWL")
    p.add_argument("--outbase", default="annual_times", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    coord = salat.Coordinate(args.lat, args.lon)
    rows = year_schedules(args.year, args.tz, coord, args.method)
    x = np.arange(1, len(rows) + 1)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    for prayer in salat.Prayer:
        ax.plot(x, clock_hours(np, rows, prayer), color=COLORS[prayer], linewidth=1.4, label=prayer.value)

    ax.set_xlabel("Day of year")
    ax.set_ylabel(f"Local clock time (UTC{args.tz:+g}, hours)")
    ax.set_ylim(0, 24)
    ax.set_yticks(range(0, 25, 3))
    ax.set_title(f"Prayer times {args.year}  ({args.lat:.3f}, {args.lon:.3f})  {args.method}")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
