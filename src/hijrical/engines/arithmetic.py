"""
hijrical.engines.arithmetic
---------------------------
Gregorian -> Hijri by JDN arithmetic (the "Kuwaiti" tabular approximation).

The result approximates the observed calendar to about one day; it is not the
Umm al-Qura calendar. All steps are float64 with an explicit floor, as in the
reference algorithm.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..core.time import astronomical_year, civil_to_jdn, jdn_to_civil, reform_correction
from ..core.types import GregorianMoment, HijriMoment
from .weekday import WEEKDAY_MAP, WeekdayMap


@dataclass(frozen=True)
class ArithmeticParams:
    # Origin of the year count: this JDN is the last day (12/30) of year -1,
    # year 0 starts the day after and 1 Mouharram 1 AH falls on epoch_jdn + 355.
    epoch_jdn: int = 1948084

    # 30 tabular years = 360 lunar months
    cycle_years: int = 30
    cycle_days: int = 10631

    # drift of the mean lunar month away from 29.5 days
    shift: float = 8.01 / 60.0

    month_bias: float = 28.5001
    month_days: float = 29.5
    month_start_slope: float = 29.5001

    def __post_init__(self) -> None:
        if self.cycle_years <= 0 or self.cycle_days <= 0:
            raise ValueError("cycle length must be positive")
        if self.month_days <= 0:
            raise ValueError("month_days must be positive")

    @property
    def year_days(self) -> float:
        """Mean tabular year, 10631/30 days."""
        return self.cycle_days / self.cycle_years


DEFAULT_ARITHMETIC_PARAMS = ArithmeticParams()


class GregorianToHijriConverter:
    """Total function: every civil date gets a Hijri label, none raises."""

    def __init__(self, params: ArithmeticParams = DEFAULT_ARITHMETIC_PARAMS, weekdays: WeekdayMap = WEEKDAY_MAP):
        self.p = params
        self.weekdays = weekdays

    # ---------------------------------------------------------
    # Core arithmetic
    # ---------------------------------------------------------

    def _split(self, jdn: int) -> Dict[str, int]:
        p = self.p
        z = jdn - p.epoch_jdn
        cyc = math.floor(z / p.cycle_days)
        z = z - p.cycle_days * cyc
        j = math.floor((z - p.shift) / p.year_days)
        year = p.cycle_years * cyc + j
        z = z - math.floor(j * p.year_days + p.shift)

        month = math.floor((z + p.month_bias) / p.month_days)
        if month == 13:
            # rounding guard at the end of the year
            month = 12
        day = z - math.floor(p.month_start_slope * month - 29)
        return {"cycle": cyc, "year_in_cycle": j, "day_of_year": z, "year": year, "month": month, "day": day}

    def hijri_from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        s = self._split(jdn)
        return s["year"], s["month"], s["day"]

    def convert(self, moment: GregorianMoment) -> HijriMoment:
        year, month, day = self.hijri_from_jdn(moment.jdn)
        return HijriMoment(
            year=year,
            month=month,
            day=day,
            hour=moment.hour,
            minute=moment.minute,
            second=moment.second,
            nanosecond=moment.nanosecond,
            tzinfo=moment.tzinfo,
            weekday=self.weekdays.to_hijri(moment.weekday),
        )

    # ---------------------------------------------------------
    # Diagnostics
    # ---------------------------------------------------------

    def explain(self, moment: GregorianMoment) -> Dict[str, Any]:
        """
        Intermediate values. `civil_date` is the JDN reduced back to the civil
        calendar (the second reform correction); it never feeds the Hijri
        fields.
        """
        y = astronomical_year(moment.year)
        m = moment.month
        if m < 3:
            y, m = y - 1, m + 12
        jdn = civil_to_jdn(moment.year, moment.month, moment.day)
        s = self._split(jdn)
        return {
            "input": moment.date_tuple(),
            "normalized": (y, m),
            "correction": reform_correction(y, m, moment.day),
            "jdn": jdn,
            "civil_date": jdn_to_civil(jdn),
            "elapsed_days": jdn - self.p.epoch_jdn,
            **s,
        }
