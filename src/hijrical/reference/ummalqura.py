from __future__ import annotations

"""
hijrical.reference.ummalqura

Umm al-Qura month index: elapsed Hijri month -> cumulative day offset.

The Umm al-Qura calendar is the observed/adjusted Hijri calendar used in Saudi
Arabia. Its month lengths are data, not arithmetic, so the table has to come
from outside:

- a CSV file (`month_index,day_offset`), e.g. written by
  `python -m hijrical.reference.update_ummalqura_table`;
- the month starts shipped with the `hijri-converter` package (1343..1500 AH).

Index convention
----------------
    index = (year - 1) * 12 + (month - 1) - epoch_offset
    JDN   = day + day_offset[index] + 2_400_000

so `day_offset` is the JDN of the first day of the month minus 2_400_001.
"""

import csv
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from ..core.errors import IndexUnavailableError, OutOfRangeError

logger = logging.getLogger(__name__)

# Month index 0 is 1 Mouharram 1356 AH.
EPOCH_OFFSET = 16260

# Rebases a day offset (modified-JDN style) to a JDN.
CIVIL_OFFSET = 2_400_000

ENV_TABLE = "HIJRICAL_UMMALQURA_TABLE"
CSV_FIELDS = ("month_index", "day_offset")


def month_index(year: int, month: int, epoch_offset: int = EPOCH_OFFSET) -> int:
    return (year - 1) * 12 + (month - 1) - epoch_offset


# ---------------------------------------------------------------------------
# Table model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UmmAlQuraIndex:
    """
    Read-only month index over consecutive month indices
    [min_index, min_index + len(offsets) - 1].

    `end_offset`, when known, is the offset of the month just past the
    coverage; it only serves to give the length of the last covered month.
    """
    offsets: Tuple[int, ...]
    min_index: int = 0
    epoch_offset: int = EPOCH_OFFSET
    end_offset: Optional[int] = None
    source: str = "memory"

    def __post_init__(self) -> None:
        if not self.offsets:
            raise ValueError("Umm al-Qura index is empty")
        for i in range(1, len(self.offsets)):
            if self.offsets[i] < self.offsets[i - 1]:
                raise ValueError(f"day offsets decrease at month index {self.min_index + i}")
        if self.end_offset is not None and self.end_offset < self.offsets[-1]:
            raise ValueError("end offset precedes the last month")

    def __len__(self) -> int:
        return len(self.offsets)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        """
        Iterate over (month_index, day_offset) pairs.
        """
        return iter(zip(range(self.min_index, self.max_index + 1), self.offsets))

    @property
    def max_index(self) -> int:
        return self.min_index + len(self.offsets) - 1

    @property
    def range(self) -> Tuple[int, int]:
        return (self.min_index, self.max_index)

    def covers(self, index: int) -> bool:
        return self.min_index <= index <= self.max_index

    def day_offset(self, index: int) -> int:
        if not self.covers(index):
            raise OutOfRangeError(
                f"month index {index} out of Umm al-Qura range [{self.min_index}, {self.max_index}]"
            )
        return self.offsets[index - self.min_index]

    def month_length(self, index: int) -> Optional[int]:
        """Days in the month at `index`, or None for the last month when no end offset is known."""
        start = self.day_offset(index)
        if index < self.max_index:
            return self.offsets[index + 1 - self.min_index] - start
        if self.end_offset is not None:
            return self.end_offset - start
        return None

    def label(self, index: int) -> Tuple[int, int]:
        """(year, month) of a month index."""
        k = index + self.epoch_offset
        return k // 12 + 1, k % 12 + 1

    @property
    def hijri_range(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return (self.label(self.min_index), self.label(self.max_index))


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

def _read_csv_index(rows: Iterable[dict], *, source: str) -> UmmAlQuraIndex:
    idx: list[int] = []
    off: list[int] = []
    for r in rows:
        idx.append(int(r["month_index"]))
        off.append(int(r["day_offset"]))
    if not idx:
        raise ValueError(f"{source}: no rows")
    # month indices must be consecutive
    for i in range(1, len(idx)):
        if idx[i] != idx[i - 1] + 1:
            raise ValueError(f"{source}: month index jumps from {idx[i - 1]} to {idx[i]}")
    return UmmAlQuraIndex(tuple(off), min_index=idx[0], source=source)


def read_index_csv(path: os.PathLike | str) -> UmmAlQuraIndex:
    p = Path(path).expanduser()
    with p.open("r", encoding="utf-8", newline="") as f:
        return _read_csv_index(csv.DictReader(f), source=str(p))


def write_index_csv(index: UmmAlQuraIndex, path: os.PathLike | str) -> Path:
    p = Path(path).expanduser()
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_FIELDS)
        for i, off in index:
            w.writerow((i, off))
    return p


def index_from_month_starts(
    first_year: int,
    first_month: int,
    starts_jdn: Iterable[int],
    *,
    end_jdn: Optional[int] = None,
    epoch_offset: int = EPOCH_OFFSET,
    source: str = "memory",
) -> UmmAlQuraIndex:
    """Build an index from the JDNs of consecutive month starts."""
    offsets = tuple(j - CIVIL_OFFSET - 1 for j in starts_jdn)
    end = end_jdn - CIVIL_OFFSET - 1 if end_jdn is not None else None
    return UmmAlQuraIndex(
        offsets,
        min_index=month_index(first_year, first_month, epoch_offset),
        epoch_offset=epoch_offset,
        end_offset=end,
        source=source,
    )


def index_from_hijri_converter() -> UmmAlQuraIndex:
    """Umm al-Qura month starts as published by the `hijri-converter` package."""
    try:
        from hijri_converter import ummalqura
        from hijri_converter.convert import Hijri
    except ImportError as e:
        raise IndexUnavailableError('Umm al-Qura data requires: pip install "hijri-converter"') from e

    (y0, _, _), (y1, _, _) = ummalqura.HIJRI_RANGE
    starts = [Hijri(y, m, 1).to_julian() for y in range(y0, y1 + 1) for m in range(1, 13)]
    last = Hijri(y1, 12, 1)
    end_jdn = last.to_julian() + last.month_length()
    return index_from_month_starts(y0, 1, starts, end_jdn=end_jdn, source="hijri-converter")


def default_cache_path() -> Path:
    xdg = os.environ.get("XDG_CACHE_HOME", "").strip()
    cache_dir = (Path(xdg).expanduser() / "hijrical") if xdg else (Path.home() / ".cache" / "hijrical")
    return cache_dir / "ummalqura.csv"


@lru_cache(maxsize=1)
def load_default_index() -> UmmAlQuraIndex:
    """
    Load the process-wide Umm al-Qura index (once).

    Search order:
      1) HIJRICAL_UMMALQURA_TABLE environment variable (path to CSV)
      2) user cache (~/.cache/hijrical/ummalqura.csv or $XDG_CACHE_HOME/hijrical/...)
      3) hijri-converter package data
    """
    # 1) explicit override: a broken file is an error, not a reason to look elsewhere
    p = os.environ.get(ENV_TABLE, "").strip()
    if p:
        index = read_index_csv(p)
        logger.debug("Umm al-Qura index loaded from %s (%s)", p, index.range)
        return index

    # 2) user cache
    cache_path = default_cache_path()
    if cache_path.is_file():
        try:
            index = read_index_csv(cache_path)
        except (OSError, ValueError, KeyError) as e:
            logger.warning("ignoring unreadable Umm al-Qura cache %s: %s", cache_path, e)
        else:
            logger.debug("Umm al-Qura index loaded from cache %s (%s)", cache_path, index.range)
            return index

    # 3) package data
    index = index_from_hijri_converter()
    logger.debug("Umm al-Qura index built from hijri-converter (%s)", index.range)
    return index
