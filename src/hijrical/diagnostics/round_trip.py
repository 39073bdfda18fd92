from __future__ import annotations

import argparse
import random
from collections import Counter
from datetime import date, timedelta
from typing import List, Optional

import hijrical
from hijrical.core.time import civil_to_jdn
from hijrical.engines.interfaces import HijriToGregorianProtocol
from hijrical.engines.table import HijriToGregorianConverter


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def drift_days(d0: date, table: HijriToGregorianProtocol) -> int:
    """
    JDN of the arithmetic Hijri label read back through the table, minus the
    JDN of d0. The label's day may not exist in the Umm al-Qura month, so the
    day is counted from the month start instead of being validated.
    """
    h = hijrical.from_datetime(d0)
    back = table.month_start_jdn(h.year, int(h.month)) + h.day - 1
    return back - civil_to_jdn(d0.year, d0.month, d0.day)


def roundtrip_test(
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    tolerance: int,
    max_failures: int,
) -> int:
    random.seed(seed)
    table = HijriToGregorianConverter(hijrical.get_index())
    hist: Counter = Counter()
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        delta = drift_days(d0, table)
        hist[delta] += 1
        if abs(delta) > tolerance:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("hijri:", hijrical.from_datetime(d0))
            print("delta (days):", delta)
            if failures >= max_failures:
                break

    print(f"\nN={sum(hist.values())}  seed={seed}  range={start}..{end}")
    for k in sorted(hist):
        print(f"  {k:+d} days: {hist[k]}")
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Gregorian -> Hijri (arithmetic) -> Gregorian (Umm al-Qura) drift histogram."
    )
    p.add_argument("--n", type=int, default=5000)
    p.add_argument("--start", default="2000-01-01")
    p.add_argument("--end", default="2070-12-31")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--tolerance", type=int, default=2, help="Allowed |drift| in days.")
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    failures = roundtrip_test(
        args.n, parse_date(args.start), parse_date(args.end), args.seed,
        tolerance=args.tolerance, max_failures=args.max_failures,
    )
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
