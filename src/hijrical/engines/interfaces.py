"""
hijrical.engines.interfaces
---------------------------
Boundaries between the two conversion pipelines and the table they consume.

The arithmetic (Gregorian -> Hijri) and the table-driven (Hijri -> Gregorian)
converters model different calendars that share a name; they are kept apart
and are not inverses of each other.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable

from ..core.types import GregorianMoment, HijriMoment


class MonthIndexProtocol(Protocol):
    """
    Read-only elapsed-month -> day-offset table with a declared coverage.
    Implemented by `hijrical.reference.ummalqura.UmmAlQuraIndex`.
    """
    @property
    def epoch_offset(self) -> int:
        """Elapsed-month count of the table's month index 0."""
        ...

    @property
    def min_index(self) -> int: ...

    @property
    def max_index(self) -> int: ...

    def covers(self, index: int) -> bool: ...

    def day_offset(self, index: int) -> int:
        """Cumulative day offset; only defined where `covers(index)`."""
        ...

    def month_length(self, index: int) -> Optional[int]:
        """Length of the month at `index` if the table knows it."""
        ...


@runtime_checkable
class GregorianToHijriProtocol(Protocol):
    def hijri_from_jdn(self, jdn: int) -> Tuple[int, int, int]: ...

    def convert(self, moment: GregorianMoment) -> HijriMoment: ...

    def explain(self, moment: GregorianMoment) -> Dict[str, Any]: ...


@runtime_checkable
class HijriToGregorianProtocol(Protocol):
    def month_length(self, year: int, month: int) -> Optional[int]: ...

    def month_start_jdn(self, year: int, month: int) -> int: ...

    def to_jdn(self, year: int, month: int, day: int) -> int: ...

    def convert(self, moment: HijriMoment) -> GregorianMoment: ...
