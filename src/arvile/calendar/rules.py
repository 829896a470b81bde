"""
Day-of-year arithmetic of the Arvile calendar.

Every rule accepts a scalar or anything NumPy can turn into an integer array.
Scalars come back as plain ``int``/``bool``, arrays as arrays of the
broadcast shape.  Day-of-year ordinals are 1-based and are not range
checked: anything outside 1..366 is the caller's calendar library's fault.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .months import MONTH_LENGTH, YEAR_DAY_INDEX

IntLike = Union[int, "np.ndarray"]


def _as_int_array(value: IntLike) -> np.ndarray:
    return np.atleast_1d(np.asarray(value, dtype=np.int64))


def _unwrap(result: np.ndarray, scalar: bool, cast: type = int):
    return cast(result.flat[0]) if scalar else result


def day_of_month(day_of_year: IntLike) -> IntLike:
    """Cyclic day within a 14-day month, 1..14."""
    scalar = np.ndim(day_of_year) == 0
    n = _as_int_array(day_of_year)
    r = n % MONTH_LENGTH
    return _unwrap(np.where(r == 0, MONTH_LENGTH, r), scalar)


def month_index(day_of_year: IntLike) -> IntLike:
    """
    Month of the year, 1..26, or ``YEAR_DAY_INDEX`` (27) for the day(s)
    following the 26th month.
    """
    scalar = np.ndim(day_of_year) == 0
    n = _as_int_array(day_of_year)
    r = ((n % MONTH_LENGTH) + MONTH_LENGTH) % MONTH_LENGTH
    result = np.where(r == 0, n // MONTH_LENGTH, (n - r) // MONTH_LENGTH + 1)
    return _unwrap(result, scalar)


def is_leap_year(year: IntLike) -> bool | np.ndarray:
    scalar = np.ndim(year) == 0
    y = _as_int_array(year)
    leap = (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))
    return _unwrap(leap, scalar, bool)


def display_day(year: IntLike, day_of_year: IntLike) -> IntLike:
    """
    Day-of-month as it appears in the formatted date.

    Identical to :func:`day_of_month` except in the two-day year-day block
    of a leap year, where day 365 shows as 2 and day 366 as 1.
    """
    scalar = np.ndim(year) == 0 and np.ndim(day_of_year) == 0
    y, n = np.broadcast_arrays(_as_int_array(year), _as_int_array(day_of_year))

    raw = day_of_month(n)
    swap = (month_index(n) == YEAR_DAY_INDEX) & is_leap_year(y)
    return _unwrap(np.where(swap, 3 - raw, raw), scalar)


def format_arvile(year: IntLike, symbol, day: IntLike) -> str | np.ndarray:
    """
    Render ``YYMDD``.

    The year is cut to the last two characters of its decimal text, so
    1901 and 2001 both render as ``01``.  Arrays of years, symbols and days
    broadcast to a ``<U5`` array.
    """
    if np.ndim(year) == 0 and np.ndim(symbol) == 0 and np.ndim(day) == 0:
        yy = f"{int(year):02d}"[-2:]
        return f"{yy}{symbol}{int(day):02d}"

    y, d = np.broadcast_arrays(_as_int_array(year), _as_int_array(day))
    # Last two characters of the zero-padded text: "-5" keeps its sign.
    yy = np.char.zfill((np.abs(y) % 100).astype(str), 2)
    yy = np.where((y < 0) & (y > -10), np.char.add("-", (-y).astype(str)), yy)
    dd = np.char.zfill(d.astype(str), 2)
    return np.char.add(np.char.add(yy, np.asarray(symbol, dtype=str)), dd).astype("<U5")
