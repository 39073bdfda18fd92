"""hijrical public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    gregorian_to_hijri,
    hijri_to_gregorian,
    explain,
    hijri_month_length,
    is_hijri_leap_year,
    validate_tabular,
    weekday_of,
    gregorian_weekday_of,
    get_index,
    set_index,
    from_datetime,
    to_datetime,
    hijri_date,
    from_timestamp,
    to_timestamp,
    add,
    add_date,
    yesterday,
    tomorrow,
)
from .core.errors import (
    HijricalError,
    InvalidDateError,
    InvalidYearError,
    InvalidMonthError,
    InvalidDayError,
    InvalidTimeError,
    OutOfRangeError,
    MissingZoneReferenceError,
    IndexUnavailableError,
)
from .core.types import GregorianMoment, HijriMoment, HijriMonth, HijriWeekday, GregorianWeekday
from .reference.ummalqura import UmmAlQuraIndex, load_default_index

__version__ = "0.1.0"

__all__ = [
    "gregorian_to_hijri",
    "hijri_to_gregorian",
    "explain",
    "hijri_month_length",
    "is_hijri_leap_year",
    "validate_tabular",
    "weekday_of",
    "gregorian_weekday_of",
    "get_index",
    "set_index",
    "load_default_index",
    "from_datetime",
    "to_datetime",
    "hijri_date",
    "from_timestamp",
    "to_timestamp",
    "add",
    "add_date",
    "yesterday",
    "tomorrow",
    "GregorianMoment",
    "HijriMoment",
    "HijriMonth",
    "HijriWeekday",
    "GregorianWeekday",
    "UmmAlQuraIndex",
    "HijricalError",
    "InvalidDateError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "InvalidTimeError",
    "OutOfRangeError",
    "MissingZoneReferenceError",
    "IndexUnavailableError",
]
