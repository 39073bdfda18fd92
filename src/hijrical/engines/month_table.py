"""
hijrical.engines.month_table
----------------------------
Static Hijri month-length table and the tabular leap-year rule.

This is the arithmetic (tabular) view of the calendar. It is used to validate
dates produced by the arithmetic converter; the Umm al-Qura path takes its
month lengths from the authoritative index instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from ..core.errors import InvalidDayError, InvalidMonthError
from ..core.types import HijriMonth


@dataclass(frozen=True)
class MonthTableEntry:
    month: HijriMonth
    short_days: int
    leap_days: int
    cumulative_offset: int  # days before the month in a common year

    def __post_init__(self) -> None:
        if self.short_days not in (29, 30) or self.leap_days not in (29, 30):
            raise ValueError("month lengths must be 29 or 30")
        if self.leap_days < self.short_days:
            raise ValueError("leap length must not be shorter than the common length")

    def length(self, is_leap: bool) -> int:
        return self.leap_days if is_leap else self.short_days


@dataclass(frozen=True)
class MonthTable:
    entries: Tuple[MonthTableEntry, ...]

    def __post_init__(self) -> None:
        if len(self.entries) != 12:
            raise ValueError("a month table has exactly 12 entries")
        offset = 0
        for i, e in enumerate(self.entries, start=1):
            if int(e.month) != i:
                raise ValueError(f"entry {i} is for month {int(e.month)}")
            if e.cumulative_offset != offset:
                raise ValueError(f"cumulative offset of month {i} should be {offset}")
            offset += e.short_days

    def __iter__(self) -> Iterator[MonthTableEntry]:
        return iter(self.entries)

    def entry(self, month: int) -> MonthTableEntry:
        if not (1 <= month <= 12):
            raise InvalidMonthError(f"month must be in 1..12, got {month}")
        return self.entries[month - 1]

    def length(self, month: int, is_leap: bool) -> int:
        return self.entry(month).length(is_leap)

    def cumulative_offset_before_month(self, month: int, is_leap: bool = False) -> int:
        e = self.entry(month)
        if not is_leap:
            return e.cumulative_offset
        return sum(x.length(True) for x in self.entries[: month - 1])

    def year_length(self, is_leap: bool) -> int:
        return sum(e.length(is_leap) for e in self.entries)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Tabular rule: 11 leap years in each 30-year cycle."""
        return (11 * year + 14) % 30 < 11

    def validate(self, year: int, month: int, day: int) -> None:
        n = self.length(month, self.is_leap_year(year))
        if not (1 <= day <= n):
            raise InvalidDayError(f"day must be in 1..{n} for {year}/{month} (tabular), got {day}")


def build_month_table(lengths: Sequence[Tuple[int, int]]) -> MonthTable:
    """Build a table from (short_days, leap_days) pairs, filling in the cumulative offsets."""
    entries = []
    offset = 0
    for month, (short, leap) in zip(HijriMonth, lengths):
        entries.append(MonthTableEntry(month, short, leap, offset))
        offset += short
    return MonthTable(tuple(entries))


# (short_days, leap_days); Ramadan and Dhou al-Hijja gain a day in leap years.
MONTH_TABLE = build_month_table((
    (30, 30),  # Mouharram
    (29, 29),  # Safar
    (30, 30),  # Rabia al-Awal
    (29, 29),  # Rabia ath-Thani
    (30, 30),  # Joumada al-Oula
    (29, 29),  # Joumada ath-Thania
    (30, 30),  # Rajab
    (29, 29),  # Chaabane
    (29, 30),  # Ramadan
    (29, 29),  # Chawwal
    (30, 30),  # Dhou al-Qida
    (29, 30),  # Dhou al-Hijja
))
