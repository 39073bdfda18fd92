"""
hijrical.core.time
------------------
Civil calendar <-> Julian Day Number arithmetic shared by both converters.

The civil calendar is Julian up to 1582-10-04 and Gregorian from 1582-10-15;
the ten days in between never existed. Years use the historical numbering
(no year 0: year -1 is 1 BC). Internally the formulas work on astronomical
years, where 1 BC is year 0.

The formulas are the classic floating-point ones (Meeus, Astronomical
Algorithms, ch. 7) with an explicit floor at every step, so results match the
reference float64 implementation bit for bit.
"""

from __future__ import annotations

import math
from typing import Tuple

# Last JDN of the Julian calendar (1582-10-04).
REFORM_JDN = 2299160

# JDN 0 is a Monday; with Sunday=0 the weekday of a JDN is (jdn + 1) mod 7.
_WEEKDAY_SHIFT = 1


def astronomical_year(year: int) -> int:
    """Historical year (no year 0) -> astronomical year (1 BC = 0)."""
    return year + 1 if year < 0 else year


def historical_year(year: int) -> int:
    """Astronomical year -> historical year (no year 0)."""
    return year - 1 if year <= 0 else year


def is_civil_leap_year(year: int) -> bool:
    """Julian rule up to 1582, Gregorian rule afterwards."""
    y = astronomical_year(year)
    if y <= 1582:
        return y % 4 == 0
    return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0


_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_civil_month(year: int, month: int) -> int:
    if month == 2 and is_civil_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def in_reform_gap(year: int, month: int, day: int) -> bool:
    """True for 1582-10-05 .. 1582-10-14, which do not exist."""
    return year == 1582 and month == 10 and 5 <= day <= 14


def reform_correction(y: int, m: int, day: int) -> int:
    """
    Julian -> Gregorian correction term for a *normalized* (y, m)
    (January and February already moved to months 13/14 of y - 1).
    """
    if y == 1582:
        if m > 10 or (m == 10 and day > 4):
            return -10
        return 0
    if y < 1583:
        return 0
    a = y // 100
    return 2 - a + a // 4


def civil_to_jdn(year: int, month: int, day: int) -> int:
    """Civil date -> JDN."""
    y = astronomical_year(year)
    m = month
    if m < 3:
        y -= 1
        m += 12

    b = reform_correction(y, m, day)
    jd = math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524
    return int(jd)


def jdn_to_civil(jdn: int) -> Tuple[int, int, int]:
    """
    JDN -> civil date (year, month, day).

    The century correction is applied only after the reform, so every JDN
    maps onto an existing civil day.
    """
    if jdn > REFORM_JDN:
        a = math.floor((jdn - 1867216.25) / 36524.25)
        a = jdn + 1 + a - a // 4
    else:
        a = jdn
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 13 if e > 13.5 else e - 1
    year = c - 4716 if month > 2.5 else c - 4715
    if year <= 0:
        # astronomical year 0 is 1 BC
        year -= 1
    return int(year), int(month), int(day)


def weekday_from_jdn(jdn: int) -> int:
    """Weekday of a JDN, Sunday=0 .. Saturday=6."""
    return (jdn + _WEEKDAY_SHIFT) % 7
