#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import hijrical
from hijrical.core.time import jdn_to_civil
from hijrical.core.types import GregorianMoment
from hijrical.engines.interfaces import HijriToGregorianProtocol
from hijrical.engines.table import HijriToGregorianConverter


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "hijrical[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "hijrical[diagnostics]"') from e


def month_start_drift(table: HijriToGregorianProtocol, Y: int, M: int, *, search: int = 3) -> Optional[int]:
    """
    Days by which the arithmetic calendar's 1st of (Y, M) trails the
    Umm al-Qura 1st of (Y, M). None if they are more than `search` days apart.
    """
    jdn0 = table.month_start_jdn(Y, M)
    for k in sorted(range(-search, search + 1), key=abs):
        g = GregorianMoment(*jdn_to_civil(jdn0 + k))
        h = hijrical.gregorian_to_hijri(g)
        if h.date_tuple() == (Y, M, 1):
            return k
    return None


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    table = HijriToGregorianConverter(hijrical.get_index())
    xs: List[float] = []
    ys: List[float] = []
    for Y in range(start_year, end_year + 1):
        for M in range(1, 13):
            k = month_start_drift(table, Y, M)
            if k is None:
                continue
            xs.append(Y + (M - 1) / 12.0)
            ys.append(float(k))
    return np.asarray(xs), np.asarray(ys)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of arithmetic vs Umm al-Qura month starts.")
    p.add_argument("--from-year", type=int, default=None, help="First Hijri year (default: table start)")
    p.add_argument("--to-year", type=int, default=None, help="Last Hijri year (default: table end)")
    p.add_argument("--outbase", default="hijri_drift_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    (y0, _), (y1, _) = hijrical.get_index().hijri_range
    start = args.from_year if args.from_year is not None else y0
    end = args.to_year if args.to_year is not None else y1 - 1

    x, y = build_series(np, start, end)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=10, c="tab:blue", linewidths=0.0, alpha=0.35)
    ax.set_xlabel("Hijri year")
    ax.set_ylabel("Arithmetic 1st minus Umm al-Qura 1st (days)")
    ax.set_title("Tabular approximation drift against the Umm al-Qura calendar")

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
