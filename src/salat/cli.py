from __future__ import annotations

import argparse
from datetime import date, datetime
import importlib
import inspect
import json
import logging
import sys


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _system_offset_hours() -> float:
    off = datetime.now().astimezone().utcoffset()
    return off.total_seconds() / 3600.0 if off is not None else 0.0


def _fmt_offset(h: float) -> str:
    sign = "+" if h >= 0 else "-"
    mins = int(round(abs(h) * 60))
    return f"UTC{sign}{mins // 60:02d}:{mins % 60:02d}"


def _fmt_remaining(seconds: float) -> str:
    s = int(seconds)
    h, rem = divmod(s, 3600)
    m, s = divmod(rem, 60)
    if h == 0:
        return f"{m}m {s:02d}s"
    return f"{h}h {m:02d}m {s:02d}s"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _location_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("--lat", type=float, required=True, help="Latitude in degrees (positive north)")
    p.add_argument("--lon", type=float, required=True, help="Longitude in degrees (positive east)")
    p.add_argument("--tz", type=float, default=None, help="UTC offset in hours (default: system offset)")
    p.add_argument("--method", default="MWL", help="Calculation method (see `salat methods`)")
    return p


def _at_moment(s: str | None, tz_hours: float) -> datetime:
    from salat.core.time import fixed_offset

    tz = fixed_offset(tz_hours)
    if s is None:
        return datetime.now(tz)
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    return dt


def cmd_show(argv: list[str]) -> int:
    import salat
    from salat.core.time import fixed_offset

    p = _location_parser("salat show", "Print the prayer times of one day.")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--json", action="store_true", help="Print the schedule as JSON")
    args = p.parse_args(argv)

    tz = args.tz if args.tz is not None else _system_offset_hours()
    d = _parse_ymd(args.date) if args.date else datetime.now(fixed_offset(tz)).date()
    coord = salat.Coordinate(args.lat, args.lon)

    sched = salat.compute_schedule(d, tz, coord, args.method)

    if args.json:
        print(json.dumps(sched.to_dict(), ensure_ascii=False))
        return 0

    print(f"Prayer times for {d.isoformat()} ({_fmt_offset(tz)})")
    print(f"  lat = {args.lat:.6f}, lon = {args.lon:.6f}, method = {args.method}")
    print()
    for prayer, t in sched.items():
        print(f"  {salat.symbol_for(prayer)}  {prayer.value:<8} {t:%H:%M:%S}")
    return 0


def _now_and_schedule(argv: list[str], prog: str, description: str):
    import salat

    p = _location_parser(prog, description)
    p.add_argument("--at", default=None, help="ISO datetime to classify (default: now)")
    args = p.parse_args(argv)

    tz = args.tz if args.tz is not None else _system_offset_hours()
    now = _at_moment(args.at, tz)
    sched = salat.schedule_for(now, salat.Coordinate(args.lat, args.lon), args.method)
    return now, sched


def cmd_now(argv: list[str]) -> int:
    import salat

    now, sched = _now_and_schedule(argv, "salat now", "Show the active prayer period and the next one.")
    active = salat.active_period(now, sched)
    nxt = salat.next_period(now, sched)

    print(f"Time: {now:%Y-%m-%d %H:%M:%S}")
    if active is not None:
        started = sched.get(active)
        print(f"Active: {salat.symbol_for(active)} {active.value} since {started:%H:%M} "
              f"({_fmt_remaining((now - started).total_seconds())} ago)")
    else:
        print("Active: none")
    label = f"{nxt.prayer.value} (tomorrow)" if nxt.next_day else nxt.prayer.value
    print(f"Next:   {salat.symbol_for(nxt.prayer)} {label} at {nxt.time:%H:%M} "
          f"(in {_fmt_remaining((nxt.time - now).total_seconds())})")
    print(f"Progress: {100.0 * salat.period_progress(now, sched):.1f}%")
    return 0


def cmd_next(argv: list[str]) -> int:
    import salat

    now, sched = _now_and_schedule(argv, "salat next", "Show the next prayer time and the time remaining.")
    nxt = salat.next_period(now, sched)
    label = f"{nxt.prayer.value} (tomorrow)" if nxt.next_day else nxt.prayer.value
    print(f"{label} {nxt.time:%H:%M} in {_fmt_remaining((nxt.time - now).total_seconds())}")
    return 0


def cmd_methods(argv: list[str]) -> int:
    import salat

    p = argparse.ArgumentParser(prog="salat methods", description="List calculation methods.")
    p.parse_args(argv)

    print(f"{'method':<10} {'fajr':>6} {'isha':>6} {'interval':>9}")
    for name in salat.list_methods():
        mp = salat.parameters_for(name)
        interval = f"{mp.isha_interval:g} min" if mp.isha_by_interval else "-"
        isha = "-" if mp.isha_by_interval else f"{mp.isha_angle:g}"
        print(f"{name:<10} {mp.fajr_angle:>6g} {isha:>6} {interval:>9}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    import salat
    from salat.core.time import fixed_offset, split_hours

    p = _location_parser("salat solar", "Print solar position and intermediate quantities for a date.")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (default: today)")
    args = p.parse_args(argv)

    tz = args.tz if args.tz is not None else _system_offset_hours()
    d = _parse_ymd(args.date) if args.date else datetime.now(fixed_offset(tz)).date()
    info = salat.explain(d, tz, salat.Coordinate(args.lat, args.lon), args.method)

    def fmt_time(h: float) -> str:
        hh, mm, ss = split_hours(h)
        return f"{hh:02d}:{mm:02d}:{ss:02d}"

    print("Time Input:")
    print(f"  date = {info['date']}  ({_fmt_offset(tz)})")
    print(f"  JD   = {info['jd']:.6f}")
    print()
    print("Solar Position:")
    print(f"  Declination      (deg) = {info['declination_deg']:.6f}")
    print(f"  Equation of Time (min) = {info['eq_of_time_min']:.4f}")
    print(f"  Asr altitude     (deg) = {info['asr_angle_deg']:.6f}")
    print()
    print("Events (local clock):")
    for name, h in info["hours"].items():
        print(f"  {name:<8} {h:9.5f} h  {fmt_time(h)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="salat", description="Prayer time calculator CLI.")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("show", help="Print the prayer times of one day")
    sub.add_parser("now", help="Show the active prayer period and the next one")
    sub.add_parser("next", help="Show the next prayer time")
    sub.add_parser("methods", help="List calculation methods")
    sub.add_parser("solar", help="Print solar position and intermediate quantities")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument("tool", choices=["annual-table", "annual-plot"], help="Which diagnostic to run")

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-ref"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    from salat.core.errors import InvalidGeometryError

    commands = {
        "show": cmd_show,
        "now": cmd_now,
        "next": cmd_next,
        "methods": cmd_methods,
        "solar": cmd_solar,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "annual-table": "salat.diagnostics.annual_table",
                "annual-plot": "salat.diagnostics.annual_plot",
            }
            return _run_module_main(tool_map[args.tool], rest)

        if args.cmd == "ephem":
            tool_map = {
                "validate-ref": "salat.diagnostics.ephem.validate_reference",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except InvalidGeometryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
