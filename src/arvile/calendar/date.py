from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np

from . import rules
from .convert import gregorian_ordinals
from .months import month_symbol as _month_symbol


@runtime_checkable
class GregorianDay(Protocol):
    """
    The only two things the Arvile calendar needs from a Gregorian date.

    Adapt any date library by exposing these, as methods or as plain int
    attributes; ``datetime.date`` and ``numpy.datetime64`` are understood
    directly.  Wrapping an ArvileDate wraps its Gregorian date instead.
    """

    def year(self) -> int: ...

    def day_of_year(self) -> int: ...


_NATIVE = (_dt.date, np.datetime64)


def _read(member: Any) -> int:
    # Foreign types may expose year / day_of_year as plain attributes.
    return int(member() if callable(member) else member)


@dataclass(frozen=True, repr=False)
class ArvileDate:
    """
    Immutable Arvile view of a Gregorian date.

    Only the wrapped date is stored; month, day and text are derived on
    every call.
    """

    gregorian_date: Any

    def __post_init__(self) -> None:
        if isinstance(self.gregorian_date, ArvileDate):
            object.__setattr__(self, "gregorian_date", self.gregorian_date.gregorian_date)
        if not isinstance(self.gregorian_date, (*_NATIVE, GregorianDay)):
            raise TypeError(
                "Expected datetime.date, numpy.datetime64 or an object with "
                f"year() and day_of_year(); got {type(self.gregorian_date).__name__}."
            )

    # ── conversion in / out ──────────────────────────────────────────────

    @classmethod
    def from_gregorian(cls, gregorian_date: Any) -> ArvileDate:
        return cls(gregorian_date)

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> ArvileDate:
        return cls(_dt.date(year, month, day))

    def into_gregorian(self) -> Any:
        return self.gregorian_date

    # ── Gregorian capability ─────────────────────────────────────────────

    def _ordinal(self) -> tuple[int, int]:
        d = self.gregorian_date
        if isinstance(d, _dt.date):
            return d.year, d.timetuple().tm_yday
        if isinstance(d, np.datetime64):
            return gregorian_ordinals(d)
        return _read(d.year), _read(d.day_of_year)

    @property
    def year(self) -> int:
        return self._ordinal()[0]

    @property
    def day_of_year(self) -> int:
        return self._ordinal()[1]

    # ── Arvile fields ────────────────────────────────────────────────────

    def day_of_month(self) -> int:
        """Raw 1..14 day; the leap-day swap is applied only by to_string()."""
        return rules.day_of_month(self.day_of_year)

    def month_index(self) -> int:
        return rules.month_index(self.day_of_year)

    def month_symbol(self) -> str:
        return _month_symbol(self.month_index())

    def is_leap_year(self) -> bool:
        return rules.is_leap_year(self.year)

    def to_string(self) -> str:
        year, n = self._ordinal()
        return rules.format_arvile(
            year, _month_symbol(rules.month_index(n)), rules.display_day(year, n)
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"ArvileDate(gregorian_date={self.gregorian_date!r}, "
            f"arvile={self.to_string()!r})"
        )
