"""
hijrical.engines.table
----------------------
Hijri -> Gregorian through the Umm al-Qura month index.

Month lengths of the observed calendar are not arithmetic, so the JDN of a
Hijri date is read from the index, then reduced to a civil date.
"""

from __future__ import annotations

from typing import Optional

from ..core.errors import InvalidDayError, OutOfRangeError
from ..core.time import jdn_to_civil
from ..core.types import GregorianMoment, HijriMoment
from ..reference.ummalqura import CIVIL_OFFSET
from .interfaces import MonthIndexProtocol


class HijriToGregorianConverter:
    def __init__(self, index: MonthIndexProtocol):
        self.index = index

    def month_index(self, year: int, month: int) -> int:
        return (year - 1) * 12 + (month - 1) - self.index.epoch_offset

    def _checked_index(self, year: int, month: int) -> int:
        i = self.month_index(year, month)
        # Check coverage before touching the table.
        if not self.index.covers(i):
            raise OutOfRangeError(
                f"{year}/{month} (month index {i}) is outside the Umm al-Qura table "
                f"[{self.index.min_index}, {self.index.max_index}]"
            )
        return i

    def month_length(self, year: int, month: int) -> Optional[int]:
        return self.index.month_length(self._checked_index(year, month))

    def month_start_jdn(self, year: int, month: int) -> int:
        return 1 + self.index.day_offset(self._checked_index(year, month)) + CIVIL_OFFSET

    def to_jdn(self, year: int, month: int, day: int) -> int:
        i = self._checked_index(year, month)
        n = self.index.month_length(i) or 30
        if not (1 <= day <= n):
            raise InvalidDayError(f"day must be in 1..{n} for {year}/{month} (Umm al-Qura), got {day}")
        return day + self.index.day_offset(i) + CIVIL_OFFSET

    def convert(self, moment: HijriMoment) -> GregorianMoment:
        jdn = self.to_jdn(moment.year, int(moment.month), moment.day)
        year, month, day = jdn_to_civil(jdn)
        return GregorianMoment(
            year=year,
            month=month,
            day=day,
            hour=moment.hour,
            minute=moment.minute,
            second=moment.second,
            nanosecond=moment.nanosecond,
            tzinfo=moment.tzinfo,
        )
