#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .ummalqura import ENV_TABLE, default_cache_path, index_from_hijri_converter, read_index_csv, write_index_csv

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Write the Umm al-Qura month index as CSV (month_index,day_offset).")
    p.add_argument("--out", default=None, help="Output CSV path (default: ~/.cache/hijrical/ummalqura.csv)")
    p.add_argument("--force", action="store_true", help="Overwrite an existing file.")
    p.add_argument("--check", metavar="CSV", default=None,
                   help="Only validate an existing CSV and print its coverage.")
    args = p.parse_args(argv)

    if args.check:
        index = read_index_csv(args.check)
        (y0, m0), (y1, m1) = index.hijri_range
        print(f"{args.check}: {len(index)} months, index {index.min_index}..{index.max_index}  ({y0}/{m0} .. {y1}/{m1})")
        return 0

    out = Path(args.out) if args.out else default_cache_path()
    if out.exists() and not args.force:
        print(f"{out} exists; use --force to overwrite")
        return 1

    print("Building index from hijri-converter ...")
    index = index_from_hijri_converter()
    (y0, m0), (y1, m1) = index.hijri_range
    print(f"Months: {len(index)}   ({y0}/{m0} .. {y1}/{m1}, index {index.min_index}..{index.max_index})")

    write_index_csv(index, out)
    logger.info("wrote Umm al-Qura index to %s", out)
    print(f"Wrote: {out}")

    if args.out:
        print("\nTo make hijrical use this file automatically, set:")
        print(f'  export {ENV_TABLE}="{out}"')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
