from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Dict, Optional, Union

from .core.errors import InvalidYearError, MissingZoneReferenceError
from .core.types import GregorianMoment, GregorianWeekday, HijriMoment, HijriWeekday
from .engines.arithmetic import GregorianToHijriConverter
from .engines.interfaces import GregorianToHijriProtocol, HijriToGregorianProtocol
from .engines.month_table import MONTH_TABLE
from .engines.table import HijriToGregorianConverter
from .engines.weekday import WEEKDAY_MAP
from .reference.ummalqura import UmmAlQuraIndex, load_default_index

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_arithmetic: GregorianToHijriProtocol = GregorianToHijriConverter()
_index: Optional[UmmAlQuraIndex] = None


def set_index(index: Optional[UmmAlQuraIndex]) -> None:
    """Replace the process-wide Umm al-Qura index (None restores the default)."""
    global _index
    _index = index


def get_index() -> UmmAlQuraIndex:
    if _index is None:
        return load_default_index()
    return _index


def _table(index: Optional[UmmAlQuraIndex]) -> HijriToGregorianProtocol:
    return HijriToGregorianConverter(index if index is not None else get_index())

# ============================================================
# Core conversions
# ============================================================

def gregorian_to_hijri(moment: GregorianMoment) -> HijriMoment:
    """Arithmetic approximation; never raises."""
    return _arithmetic.convert(moment)


def hijri_to_gregorian(moment: HijriMoment, *, index: Optional[UmmAlQuraIndex] = None) -> GregorianMoment:
    """Umm al-Qura conversion; raises OutOfRangeError outside the table."""
    return _table(index).convert(moment)


def explain(moment: GregorianMoment) -> Dict[str, Any]:
    return _arithmetic.explain(moment)


def hijri_month_length(month: int, is_leap_year: bool) -> int:
    return MONTH_TABLE.length(month, is_leap_year)


def is_hijri_leap_year(year: int) -> bool:
    return MONTH_TABLE.is_leap_year(year)


def validate_tabular(moment: HijriMoment) -> HijriMoment:
    """Check a Hijri date against the tabular month lengths; returns it unchanged."""
    MONTH_TABLE.validate(moment.year, int(moment.month), moment.day)
    return moment


def weekday_of(wd: GregorianWeekday) -> HijriWeekday:
    return WEEKDAY_MAP.to_hijri(wd)


def gregorian_weekday_of(wd: HijriWeekday) -> GregorianWeekday:
    return WEEKDAY_MAP.to_gregorian(wd)

# ============================================================
# datetime conveniences
# ============================================================

def from_datetime(d: Union[date, datetime]) -> HijriMoment:
    return gregorian_to_hijri(GregorianMoment.from_datetime(d))


def to_datetime(moment: HijriMoment, *, index: Optional[UmmAlQuraIndex] = None) -> datetime:
    return hijri_to_gregorian(moment, index=index).to_datetime()


def hijri_date(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
    *,
    tz: Optional[tzinfo],
) -> HijriMoment:
    if tz is None:
        raise MissingZoneReferenceError("a tzinfo is required to build a Hijri date")
    if year < 1:
        raise InvalidYearError(f"Hijri year must be >= 1, got {year}")
    return HijriMoment(year, month, day, hour, minute, second, nanosecond, tz)


def from_timestamp(seconds: int, nanoseconds: int = 0, tz: Optional[tzinfo] = None) -> HijriMoment:
    """Unix time (seconds + nanoseconds since 1970-01-01 UTC) in zone `tz`."""
    if tz is None:
        raise MissingZoneReferenceError("a tzinfo is required to convert a Unix timestamp")
    s, ns = divmod(nanoseconds, 1_000_000_000)
    dt = (_UNIX_EPOCH + timedelta(seconds=seconds + s)).astimezone(tz)
    return gregorian_to_hijri(GregorianMoment.from_datetime(dt, nanosecond=ns))


def to_timestamp(moment: HijriMoment, *, index: Optional[UmmAlQuraIndex] = None) -> int:
    """Whole seconds since 1970-01-01 UTC."""
    if moment.tzinfo is None:
        raise MissingZoneReferenceError("a tzinfo is required to compute a Unix timestamp")
    return (to_datetime(moment, index=index) - _UNIX_EPOCH) // timedelta(seconds=1)


def _shifted(moment: HijriMoment, dt: datetime) -> HijriMoment:
    # datetime stops at microseconds; keep the nanosecond digits below that
    ns = dt.microsecond * 1000 + moment.nanosecond % 1000
    return gregorian_to_hijri(GregorianMoment.from_datetime(dt, nanosecond=ns))


def add(moment: HijriMoment, delta: timedelta, *, index: Optional[UmmAlQuraIndex] = None) -> HijriMoment:
    """Shift by an absolute duration (elapsed time, not wall-clock time)."""
    dt = to_datetime(moment, index=index)
    if dt.tzinfo is None:
        return _shifted(moment, dt + delta)
    return _shifted(moment, (dt.astimezone(timezone.utc) + delta).astimezone(dt.tzinfo))


def add_date(
    moment: HijriMoment,
    years: int = 0,
    months: int = 0,
    days: int = 0,
    *,
    index: Optional[UmmAlQuraIndex] = None,
) -> HijriMoment:
    """
    Shift the Gregorian date by years/months/days, normalizing overflow the
    way calendar arithmetic does (Jan 31 + 1 month = Mar 2 or 3).
    """
    dt = to_datetime(moment, index=index)
    y, m0 = divmod(dt.month - 1 + months, 12)
    base = dt.replace(year=dt.year + years + y, month=m0 + 1, day=1)
    return _shifted(moment, base + timedelta(days=dt.day - 1 + days))


def yesterday(moment: HijriMoment, *, index: Optional[UmmAlQuraIndex] = None) -> HijriMoment:
    return add_date(moment, days=-1, index=index)


def tomorrow(moment: HijriMoment, *, index: Optional[UmmAlQuraIndex] = None) -> HijriMoment:
    return add_date(moment, days=1, index=index)
