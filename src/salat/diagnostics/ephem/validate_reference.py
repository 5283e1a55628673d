#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from salat.core.time import julian_date
from salat.ephemeris.de421 import DE421Sun
from salat.reference.solar import solar_position


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


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the low-precision solar model against DE421.")
    p.add_argument("--year-start", type=int, default=1950)
    p.add_argument("--year-end", type=int, default=2050)
    p.add_argument("--step-days", type=int, default=7)
    p.add_argument("--ephem-dir", default=".", help="Where de421.bsp is cached")
    p.add_argument("--out-png", default="solar_validation.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    print("Loading DE421 Ephemeris...")
    ref = DE421Sun.load(args.ephem_dir)

    # DE421 covers 1900-2050
    jd_start = max(julian_date(args.year_start, 1, 1), julian_date(1900, 1, 2))
    jd_end = min(julian_date(args.year_end, 1, 1), julian_date(2050, 1, 1))
    if jd_start > jd_end:
        raise ValueError("Requested range is outside the DE421 span [1900, 2050]")

    jds = np.arange(jd_start, jd_end, args.step_days)
    years = 2000 + (jds - 2451545.0) / 365.25

    print(f"Validating {len(jds)} points from {years[0]:.0f} to {years[-1]:.0f}...")

    err_decl = []
    err_eot = []
    for jd in jds:
        sp = solar_position(float(jd))
        err_decl.append((sp.declination_deg - ref.declination_deg(float(jd))) * 3600.0)
        err_eot.append((sp.eq_of_time_min - ref.eq_of_time_min(float(jd))) * 60.0)

    err_decl = np.asarray(err_decl)
    err_eot = np.asarray(err_eot)
    print(f"Declination residual: max |d| = {np.max(np.abs(err_decl)):.1f} arcsec, rms = {np.sqrt(np.mean(err_decl ** 2)):.1f}")
    print(f"EOT residual        : max |d| = {np.max(np.abs(err_eot)):.1f} s, rms = {np.sqrt(np.mean(err_eot ** 2)):.1f}")

    fig, axs = plt.subplots(2, 1, figsize=(12, 7), sharex=True)

    axs[0].scatter(years, err_decl, s=1, alpha=0.5, color="orange")
    axs[0].set_title("Solar Declination Error (Model - DE421)")
    axs[0].set_ylabel("Error (arcsec)")
    axs[0].grid(True, alpha=0.3)

    axs[1].scatter(years, err_eot, s=1, alpha=0.5, color="blue")
    axs[1].set_title("Equation of Time Error (Model - DE421)")
    axs[1].set_ylabel("Error (s)")
    axs[1].set_xlabel("Year")
    axs[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(args.out_png, dpi=200)
    print(f"Saved: {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
