# tests/test_time.py

import random
from datetime import date

import pytest

from hijrical.core import time as ct
from hijrical.core.errors import InvalidDayError, InvalidTimeError, InvalidYearError, OutOfRangeError
from hijrical.core.types import GregorianMoment, GregorianWeekday


def test_matches_proleptic_ordinal_after_reform():
    random.seed(42)
    for _ in range(5000):
        d = date.fromordinal(random.randint(date(1583, 1, 1).toordinal(), date(9999, 12, 31).toordinal()))
        assert ct.civil_to_jdn(d.year, d.month, d.day) == d.toordinal() + 1721425


def test_known_jdns():
    assert ct.civil_to_jdn(2000, 1, 1) == 2451545
    assert ct.civil_to_jdn(2024, 3, 11) == 2460381
    # first day of the Hijri era, Julian calendar
    assert ct.civil_to_jdn(622, 7, 15) == 1948439
    assert ct.civil_to_jdn(-1, 1, 1) == 1721058
    assert ct.civil_to_jdn(-4713, 1, 1) == 0


def test_reform_boundary_is_contiguous():
    assert ct.civil_to_jdn(1582, 10, 4) == ct.REFORM_JDN
    assert ct.civil_to_jdn(1582, 10, 15) == ct.REFORM_JDN + 1
    assert ct.jdn_to_civil(ct.REFORM_JDN) == (1582, 10, 4)
    assert ct.jdn_to_civil(ct.REFORM_JDN + 1) == (1582, 10, 15)


def test_reform_correction():
    assert ct.reform_correction(1582, 10, 4) == 0
    assert ct.reform_correction(1582, 10, 15) == -10
    assert ct.reform_correction(1582, 13, 1) == -10
    assert ct.reform_correction(1500, 3, 1) == 0
    assert ct.reform_correction(2024, 3, 11) == -13


def test_jdn_civil_roundtrip():
    random.seed(7)
    for _ in range(10000):
        jdn = random.randint(0, 3_000_000)
        y, m, d = ct.jdn_to_civil(jdn)
        assert y != 0
        assert ct.civil_to_jdn(y, m, d) == jdn


def test_jdn_is_monotonic_across_eras():
    prev = None
    for year in (-100, -1, 1, 2, 1581, 1582, 1583, 2024):
        for month in range(1, 13):
            if (year, month) == (1582, 10):
                days = [1, 4, 15, 31]
            else:
                days = [1, ct.days_in_civil_month(year, month)]
            for day in days:
                jdn = ct.civil_to_jdn(year, month, day)
                if prev is not None:
                    assert jdn > prev
                prev = jdn
    # 1 BC is followed directly by AD 1
    assert ct.civil_to_jdn(1, 1, 1) == ct.civil_to_jdn(-1, 12, 31) + 1


def test_leap_rules():
    assert ct.is_civil_leap_year(1500)  # Julian
    assert not ct.is_civil_leap_year(1700)
    assert ct.is_civil_leap_year(2000)
    assert ct.is_civil_leap_year(-1)  # astronomical year 0
    assert ct.days_in_civil_month(1500, 2) == 29
    assert ct.days_in_civil_month(1900, 2) == 28


def test_weekday():
    assert ct.weekday_from_jdn(ct.civil_to_jdn(2024, 3, 11)) == GregorianWeekday.MONDAY
    assert ct.weekday_from_jdn(ct.REFORM_JDN) == GregorianWeekday.THURSDAY
    assert ct.weekday_from_jdn(ct.REFORM_JDN + 1) == GregorianWeekday.FRIDAY


def test_gregorian_moment_validation():
    GregorianMoment(1500, 2, 29)
    GregorianMoment(1582, 10, 4)
    with pytest.raises(InvalidYearError):
        GregorianMoment(0, 1, 1)
    with pytest.raises(InvalidDayError):
        GregorianMoment(1582, 10, 10)
    with pytest.raises(InvalidDayError):
        GregorianMoment(1900, 2, 29)
    with pytest.raises(InvalidTimeError):
        GregorianMoment(2024, 1, 1, hour=24)
    with pytest.raises(InvalidTimeError):
        GregorianMoment(2024, 1, 1, nanosecond=10**9)
    with pytest.raises(ValueError):
        GregorianMoment(2024, 13, 1)


def test_gregorian_moment_datetime_bridge():
    g = GregorianMoment(2024, 3, 11, 8, 30, 15, 123_456_789)
    dt = g.to_datetime()
    assert (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, dt.microsecond) == (2024, 3, 11, 8, 30, 15, 123456)
    assert GregorianMoment.from_datetime(dt).nanosecond == 123_456_000
    assert GregorianMoment.from_datetime(date(2024, 3, 11)).jdn == 2460381
    with pytest.raises(OutOfRangeError):
        GregorianMoment(-1, 1, 1).to_datetime()
