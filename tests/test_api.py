# tests/test_api.py

from datetime import datetime, timedelta, timezone

import pytest

import hijrical
from hijrical import GregorianMoment, HijriMoment
from hijrical.core.errors import (
    HijricalError,
    InvalidDayError,
    InvalidMonthError,
    InvalidYearError,
    MissingZoneReferenceError,
)

UTC = timezone.utc
RAMADAN_1_1445 = 1710115200  # 2024-03-11T00:00:00Z


def _arith(y, m, d):
    return hijrical.gregorian_to_hijri(GregorianMoment(y, m, d)).date_tuple()


def test_errors_are_value_errors():
    assert issubclass(InvalidDayError, ValueError)
    assert issubclass(InvalidDayError, HijricalError)
    assert issubclass(hijrical.OutOfRangeError, LookupError)
    with pytest.raises(InvalidMonthError):
        HijriMoment(1445, 13, 1)
    with pytest.raises(InvalidDayError):
        HijriMoment(1445, 1, 31)


def test_hijri_moment_coerces_enums():
    h = HijriMoment(1445, 9, 1, weekday=2)
    assert h.month is hijrical.HijriMonth.RAMADAN
    assert h.weekday is hijrical.HijriWeekday.ALITHNAYN
    assert HijriMoment(1445, 9, 1).weekday is None


def test_hijri_date_requires_zone():
    with pytest.raises(MissingZoneReferenceError):
        hijrical.hijri_date(1445, 9, 1, tz=None)
    with pytest.raises(InvalidYearError):
        hijrical.hijri_date(0, 9, 1, tz=UTC)
    h = hijrical.hijri_date(1445, 9, 1, 6, tz=UTC)
    assert h.tzinfo is UTC
    assert h.hour == 6


def test_from_timestamp():
    with pytest.raises(MissingZoneReferenceError):
        hijrical.from_timestamp(RAMADAN_1_1445)

    h = hijrical.from_timestamp(RAMADAN_1_1445, tz=UTC)
    assert h.date_tuple() == (1445, 9, 2)
    assert h.clock() == (0, 0, 0)

    h = hijrical.from_timestamp(RAMADAN_1_1445, 250, tz=timezone(timedelta(hours=-5)))
    assert h.date_tuple() == (1445, 9, 1)
    assert h.clock() == (19, 0, 0)
    assert h.nanosecond == 250

    h = hijrical.from_timestamp(RAMADAN_1_1445, 1_500_000_000, tz=UTC)
    assert h.clock() == (0, 0, 1)
    assert h.nanosecond == 500_000_000


def test_to_timestamp(ramadan_1445):
    h = HijriMoment(1445, 9, 1, tzinfo=UTC)
    assert hijrical.to_timestamp(h, index=ramadan_1445) == RAMADAN_1_1445
    with pytest.raises(MissingZoneReferenceError):
        hijrical.to_timestamp(HijriMoment(1445, 9, 1), index=ramadan_1445)


def test_to_datetime(ramadan_1445):
    dt = hijrical.to_datetime(HijriMoment(1445, 9, 1, 12, tzinfo=UTC), index=ramadan_1445)
    assert dt == datetime(2024, 3, 11, 12, tzinfo=UTC)


def test_add(ramadan_1445):
    h = HijriMoment(1445, 9, 1, 23, 0, 0, 123_456_789, tzinfo=UTC)
    out = hijrical.add(h, timedelta(hours=2), index=ramadan_1445)
    assert out.date_tuple() == _arith(2024, 3, 12)
    assert out.clock() == (1, 0, 0)
    assert out.nanosecond == 123_456_789
    assert out.tzinfo is UTC


def test_add_is_elapsed_time_in_fixed_offset(ramadan_1445):
    tz = timezone(timedelta(hours=3))
    h = HijriMoment(1445, 9, 1, 22, tzinfo=tz)
    out = hijrical.add(h, timedelta(hours=-24), index=ramadan_1445)
    assert out.date_tuple() == _arith(2024, 3, 10)
    assert out.hour == 22


def test_add_date(ramadan_1445):
    h = HijriMoment(1445, 9, 1, tzinfo=UTC)
    assert hijrical.add_date(h, months=1, index=ramadan_1445).date_tuple() == _arith(2024, 4, 11)
    assert hijrical.add_date(h, years=-1, index=ramadan_1445).date_tuple() == _arith(2023, 3, 11)
    assert hijrical.add_date(h, months=10, index=ramadan_1445).date_tuple() == _arith(2025, 1, 11)
    assert hijrical.add_date(h, days=-11, index=ramadan_1445).date_tuple() == _arith(2024, 2, 29)

    # month overflow rolls into the following month
    h = HijriMoment(1445, 8, 19, tzinfo=UTC)  # 2024-02-29
    assert hijrical.add_date(h, years=1, index=ramadan_1445).date_tuple() == _arith(2025, 3, 1)


def test_yesterday_and_tomorrow(active_index):
    h = HijriMoment(1445, 9, 1, 8, tzinfo=UTC)
    assert hijrical.tomorrow(h).date_tuple() == _arith(2024, 3, 12)
    assert hijrical.yesterday(h).date_tuple() == _arith(2024, 3, 10)
    assert hijrical.tomorrow(h).hour == 8
