from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo as TZInfo
from enum import IntEnum
from typing import Optional, Tuple, Union

from .errors import InvalidDayError, InvalidMonthError, InvalidTimeError, InvalidYearError, OutOfRangeError
from .time import civil_to_jdn, days_in_civil_month, in_reform_gap, weekday_from_jdn


class HijriMonth(IntEnum):
    MOUHARRAM = 1
    SAFAR = 2
    RABIA_AL_AWAL = 3
    RABIA_ATH_THANI = 4
    JOUMADA_AL_OULA = 5
    JOUMADA_ATH_THANIA = 6
    RAJAB = 7
    CHAABANE = 8
    RAMADAN = 9
    CHAWWAL = 10
    DHOU_AL_QIDA = 11
    DHOU_AL_HIJJA = 12


class HijriWeekday(IntEnum):
    """Hijri week, starting on Saturday."""
    ALSABT = 0
    ALAHAD = 1
    ALITHNAYN = 2
    ALTHOLATHAE = 3
    ALALRBIAE = 4
    ALHAMISS = 5
    ALJOMOAA = 6


class GregorianWeekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def _check_month(month: int) -> None:
    if not (1 <= month <= 12):
        raise InvalidMonthError(f"month must be in 1..12, got {month}")


def _check_clock(hour: int, minute: int, second: int, nanosecond: int) -> None:
    if not (0 <= hour <= 23):
        raise InvalidTimeError(f"hour must be in 0..23, got {hour}")
    if not (0 <= minute <= 59):
        raise InvalidTimeError(f"minute must be in 0..59, got {minute}")
    if not (0 <= second <= 59):
        raise InvalidTimeError(f"second must be in 0..59, got {second}")
    if not (0 <= nanosecond <= 999_999_999):
        raise InvalidTimeError(f"nanosecond must be in 0..999999999, got {nanosecond}")


@dataclass(frozen=True)
class GregorianMoment:
    """
    A moment in the civil calendar (Julian before the 1582 reform, Gregorian after).

    `year` uses the historical numbering: there is no year 0 and -1 is 1 BC.
    `tzinfo` is carried along untouched; conversions never look at it.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    tzinfo: Optional[TZInfo] = None

    def __post_init__(self) -> None:
        if self.year == 0:
            raise InvalidYearError("there is no year 0 in the civil calendar (use -1 for 1 BC)")
        _check_month(self.month)
        n = days_in_civil_month(self.year, self.month)
        if not (1 <= self.day <= n):
            raise InvalidDayError(f"day must be in 1..{n} for {self.year}-{self.month:02d}, got {self.day}")
        if in_reform_gap(self.year, self.month, self.day):
            raise InvalidDayError(f"1582-10-{self.day:02d} does not exist (calendar reform gap)")
        _check_clock(self.hour, self.minute, self.second, self.nanosecond)

    @property
    def jdn(self) -> int:
        return civil_to_jdn(self.year, self.month, self.day)

    @property
    def weekday(self) -> GregorianWeekday:
        return GregorianWeekday(weekday_from_jdn(self.jdn))

    def date_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def clock(self) -> Tuple[int, int, int]:
        return self.hour, self.minute, self.second

    @classmethod
    def from_datetime(cls, d: Union[date, datetime], *, nanosecond: Optional[int] = None) -> "GregorianMoment":
        """
        Copy the fields of a `date`/`datetime`.

        Python dates are proleptic Gregorian; fields are copied as they are,
        so dates before the reform are read as Julian calendar dates.
        """
        if isinstance(d, datetime):
            ns = d.microsecond * 1000 if nanosecond is None else nanosecond
            return cls(d.year, d.month, d.day, d.hour, d.minute, d.second, ns, d.tzinfo)
        return cls(d.year, d.month, d.day, nanosecond=nanosecond or 0)

    def to_datetime(self) -> datetime:
        """Field-wise copy into a `datetime` (sub-microsecond digits are dropped)."""
        if not (1 <= self.year <= 9999):
            raise OutOfRangeError(f"year {self.year} is outside the datetime range 1..9999")
        return datetime(
            self.year, self.month, self.day,
            self.hour, self.minute, self.second, self.nanosecond // 1000,
            tzinfo=self.tzinfo,
        )


@dataclass(frozen=True)
class HijriMoment:
    """
    A moment in the Hijri calendar.

    Only the generic bounds (month 1..12, day 1..30) are checked here; the
    month length depends on the calendar scheme and is checked by the
    converters or by `validate_tabular`. Years below 1 only come out of the
    arithmetic converter for dates before the Hijra.

    `weekday` is filled by the converters and is None for hand-built moments.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    tzinfo: Optional[TZInfo] = None
    weekday: Optional[HijriWeekday] = None

    def __post_init__(self) -> None:
        _check_month(self.month)
        if not (1 <= self.day <= 30):
            raise InvalidDayError(f"day must be in 1..30, got {self.day}")
        _check_clock(self.hour, self.minute, self.second, self.nanosecond)
        object.__setattr__(self, "month", HijriMonth(self.month))
        if self.weekday is not None:
            object.__setattr__(self, "weekday", HijriWeekday(self.weekday))

    def date_tuple(self) -> Tuple[int, int, int]:
        return self.year, int(self.month), self.day

    def clock(self) -> Tuple[int, int, int]:
        return self.hour, self.minute, self.second
