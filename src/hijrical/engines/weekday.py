from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.types import GregorianWeekday, HijriWeekday


@dataclass(frozen=True)
class WeekdayMap:
    """Constant rotation between the Sunday-based and the Saturday-based week."""
    table: Tuple[HijriWeekday, ...]  # indexed by GregorianWeekday

    def __post_init__(self) -> None:
        if sorted(int(w) for w in self.table) != list(range(7)):
            raise ValueError("weekday table must be a permutation of 0..6")

    def to_hijri(self, wd: int) -> HijriWeekday:
        return self.table[GregorianWeekday(wd)]

    def to_gregorian(self, wd: int) -> GregorianWeekday:
        return GregorianWeekday(self.table.index(HijriWeekday(wd)))

    @property
    def rotation(self) -> int:
        """k such that hijri = (gregorian + k) mod 7."""
        return (int(self.table[0]) - int(GregorianWeekday.SUNDAY)) % 7


WEEKDAY_MAP = WeekdayMap((
    HijriWeekday.ALAHAD,       # Sunday
    HijriWeekday.ALITHNAYN,    # Monday
    HijriWeekday.ALTHOLATHAE,  # Tuesday
    HijriWeekday.ALALRBIAE,    # Wednesday
    HijriWeekday.ALHAMISS,     # Thursday
    HijriWeekday.ALJOMOAA,     # Friday
    HijriWeekday.ALSABT,       # Saturday
))
