class HijricalError(Exception):
    """Base error."""

class InvalidDateError(HijricalError, ValueError):
    """A calendar field is outside the range allowed for its calendar."""

class InvalidYearError(InvalidDateError):
    """Year 0 in the civil calendar, or a Hijri year below 1 where one is required."""

class InvalidMonthError(InvalidDateError):
    """Month outside 1..12."""

class InvalidDayError(InvalidDateError):
    """Day outside the length of its month."""

class InvalidTimeError(InvalidDateError):
    """Hour, minute, second or nanosecond outside its range."""

class OutOfRangeError(HijricalError, LookupError):
    """Raised when a Hijri month falls outside the Umm al-Qura index coverage."""

class MissingZoneReferenceError(HijricalError, ValueError):
    """Raised when an operation needs a tzinfo and none was given."""

class IndexUnavailableError(HijricalError, RuntimeError):
    """Raised when no Umm al-Qura table source can be found."""
