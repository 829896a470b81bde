# src/arvile/calendar/__init__.py
"""
arvile.calendar
~~~~~~~~~~~~~~~

Gregorian → Arvile date conversion.  The Arvile year is 26 months of exactly
14 days (``A``..``Z``) followed by a ``+`` block holding the year day (day
365) or, in leap years, the two days 365 and 366.

Basic usage::

    import datetime
    from arvile.calendar import ArvileDate

    d = ArvileDate(datetime.date(2001, 2, 18))
    d.month_symbol()          # → 'D'
    d.day_of_month()          # → 7
    str(d)                    # → '01D07'
    d.into_gregorian()        # → datetime.date(2001, 2, 18)

Any object with ``year()`` and ``day_of_year()`` methods can be wrapped as
well (see GregorianDay).

NumPy ``datetime64`` arrays are converted in bulk::

    import numpy as np
    from arvile.calendar import to_arvile

    to_arvile(np.array(["2020-12-30", "2020-12-31"], dtype="datetime64[D]"))
    # → array(['20+02', '20+01'], dtype='<U5')

Public API
----------
ArvileDate        Immutable Arvile view of a Gregorian date.
GregorianDay      Protocol for foreign date types.
to_arvile         Bulk conversion to ``YYMDD`` strings.
arvile_fields     Bulk conversion to per-field arrays.
ArvileError       Base exception for all Arvile calendar errors.
MonthIndexError   Month index outside 1..27.
"""

from __future__ import annotations

from arvile.calendar._exceptions import ArvileError, MonthIndexError
from arvile.calendar.convert import arvile_fields, gregorian_ordinals, to_arvile
from arvile.calendar.date import ArvileDate, GregorianDay
from arvile.calendar.months import (
    MONTH_COUNT,
    MONTH_LENGTH,
    MONTH_SYMBOLS,
    YEAR_DAY_INDEX,
    month_symbol,
)
from arvile.calendar.rules import (
    day_of_month,
    display_day,
    format_arvile,
    is_leap_year,
    month_index,
)

__all__ = [
    "ArvileDate",
    "GregorianDay",
    "ArvileError",
    "MonthIndexError",
    "arvile_fields",
    "gregorian_ordinals",
    "to_arvile",
    "MONTH_COUNT",
    "MONTH_LENGTH",
    "MONTH_SYMBOLS",
    "YEAR_DAY_INDEX",
    "month_symbol",
    "day_of_month",
    "display_day",
    "format_arvile",
    "is_leap_year",
    "month_index",
]
