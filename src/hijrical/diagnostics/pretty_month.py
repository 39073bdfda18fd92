from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import hijrical
from hijrical.core.time import jdn_to_civil, weekday_from_jdn
from hijrical.core.types import GregorianMoment, HijriMonth
from hijrical.engines.table import HijriToGregorianConverter


def dow_header() -> str:
    # Hijri week: Saturday first
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> Tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: List[List[Tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def hijri_month_calendar(Y: int, M: int, *, arithmetic: bool = False) -> None:
    table = HijriToGregorianConverter(hijrical.get_index())
    jdn0 = table.month_start_jdn(Y, M)
    n = table.month_length(Y, M) or 30

    days = []
    for k in range(n):
        y, m, d = jdn_to_civil(jdn0 + k)
        bot = f"{m:02d}-{d:02d}"
        if arithmetic:
            h = hijrical.gregorian_to_hijri(GregorianMoment(y, m, d))
            bot = f"{h.day:02d}"
        days.append((f"{k + 1:2d}", bot))

    weeks: List[List[Tuple[str, str]]] = []
    wk: List[Tuple[str, str]] = []
    pad = (weekday_from_jdn(jdn0) + 1) % 7  # Saturday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    first = "-".join(f"{v:02d}" for v in jdn_to_civil(jdn0))
    last = "-".join(f"{v:02d}" for v in jdn_to_civil(jdn0 + n - 1))
    title = f"Umm al-Qura {HijriMonth(M).name} {Y}  ({first} .. {last})"
    print_grid(title, weeks)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Hijri (Umm al-Qura) month as a weekly grid with paired Gregorian dates."
    )
    p.add_argument("year", type=int, nargs="?", default=1445)
    p.add_argument("month", type=int, nargs="?", default=9)
    p.add_argument("--arithmetic", action="store_true",
                   help="Show the arithmetic day label instead of the Gregorian date.")
    args = p.parse_args(argv)

    hijri_month_calendar(args.year, args.month, arithmetic=args.arithmetic)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
