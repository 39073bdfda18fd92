from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from pprint import pprint

from .core.errors import HijricalError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str):
    from .core.types import GregorianMoment

    y, m, d = map(int, s.split("-"))
    return GregorianMoment(y, m, d)


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


def cmd_to_hijri(argv: list[str]) -> int:
    import hijrical

    p = argparse.ArgumentParser(prog="hijrical to-hijri", description="Gregorian -> Hijri (arithmetic)")
    p.add_argument("date", help="YYYY-MM-DD (civil calendar)")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--check", action="store_true", help="Validate against the tabular month lengths")
    args = p.parse_args(argv)

    g = _parse_ymd(args.date)
    h = hijrical.gregorian_to_hijri(g)
    if args.check:
        hijrical.validate_tabular(h)
    print(h)
    if args.debug:
        pprint(hijrical.explain(g), sort_dicts=False)
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import hijrical

    p = argparse.ArgumentParser(prog="hijrical to-gregorian", description="Hijri -> Gregorian (Umm al-Qura)")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    g = hijrical.hijri_to_gregorian(hijrical.HijriMoment(args.year, args.month, args.day))
    print(g)
    print(f"{g.year:04d}-{g.month:02d}-{g.day:02d}  {g.weekday.name.capitalize()}")
    return 0


def cmd_month_length(argv: list[str]) -> int:
    import hijrical

    p = argparse.ArgumentParser(prog="hijrical month-length", description="Tabular Hijri month length")
    p.add_argument("month", type=int)
    p.add_argument("--leap", action="store_true")
    args = p.parse_args(argv)

    print(hijrical.hijri_month_length(args.month, args.leap))
    return 0


def cmd_leap_year(argv: list[str]) -> int:
    import hijrical

    p = argparse.ArgumentParser(prog="hijrical leap-year", description="Tabular Hijri leap-year rule")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    print(hijrical.is_hijri_leap_year(args.year))
    return 0


def cmd_index_info(argv: list[str]) -> int:
    import hijrical

    argparse.ArgumentParser(prog="hijrical index-info", description="Show the active Umm al-Qura index").parse_args(argv)
    index = hijrical.get_index()
    (y0, m0), (y1, m1) = index.hijri_range
    print(f"source: {index.source}")
    print(f"months: {len(index)}  index {index.min_index}..{index.max_index}  ({y0}/{m0} .. {y1}/{m1})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `hijrical YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return _dispatch(cmd_to_hijri, argv)

    p = argparse.ArgumentParser(prog="hijrical", description="Gregorian <-> Hijri calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log table loading to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-hijri", help="Gregorian -> Hijri (arithmetic approximation)")
    sub.add_parser("to-gregorian", help="Hijri -> Gregorian (Umm al-Qura table)")
    sub.add_parser("month-length", help="Tabular month length")
    sub.add_parser("leap-year", help="Tabular leap-year rule")
    sub.add_parser("index-info", help="Show the active Umm al-Qura index")
    sub.add_parser("update-table", help="Write the Umm al-Qura index CSV cache")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "pretty-month", "drift-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.DEBUG)

    if args.cmd == "to-hijri":
        return _dispatch(cmd_to_hijri, rest)

    if args.cmd == "to-gregorian":
        return _dispatch(cmd_to_gregorian, rest)

    if args.cmd == "month-length":
        return _dispatch(cmd_month_length, rest)

    if args.cmd == "leap-year":
        return _dispatch(cmd_leap_year, rest)

    if args.cmd == "index-info":
        return _dispatch(cmd_index_info, rest)

    if args.cmd == "update-table":
        return _run_module_main("hijrical.reference.update_ummalqura_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "hijrical.diagnostics.round_trip",
            "pretty-month": "hijrical.diagnostics.pretty_month",
            "drift-scatter": "hijrical.diagnostics.drift_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def _dispatch(fn, argv: list[str]) -> int:
    try:
        return fn(argv)
    except HijricalError as e:
        print(f"hijrical: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
