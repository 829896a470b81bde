"""
Vectorised Gregorian → Arvile conversion over ``datetime64`` arrays.

Anything ``np.asarray(..., dtype="datetime64[D]")`` accepts can be passed:
datetime64 arrays, lists of ``datetime.date`` or ISO date strings.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from ._exceptions import ArvileError
from .months import month_symbol
from .rules import day_of_month, display_day, format_arvile, month_index

logger = logging.getLogger(__name__)

_EPOCH_YEAR = 1970


def _as_days(dates: Any) -> np.ndarray:
    days = np.asarray(dates, dtype="datetime64[D]")
    nat = np.isnat(days)
    if nat.any():
        logger.debug("Rejecting %d NaT value(s) out of %d", int(nat.sum()), nat.size)
        raise ArvileError("Cannot convert NaT to an Arvile date.")
    return days


def gregorian_ordinals(dates: Any) -> tuple[Any, Any]:
    """
    Year and 1-based day-of-year of each date.

    Returns a pair of ints for a scalar date, a pair of int64 arrays
    otherwise.
    """
    scalar = np.ndim(dates) == 0
    days = _as_days(dates)

    year_start = days.astype("datetime64[Y]")
    years = year_start.astype(np.int64) + _EPOCH_YEAR
    ordinals = (days - year_start.astype("datetime64[D]")).astype(np.int64) + 1

    if scalar:
        return int(years), int(ordinals)
    return years, ordinals


def arvile_fields(dates: Any) -> dict[str, np.ndarray]:
    years, ordinals = gregorian_ordinals(np.atleast_1d(_as_days(dates)))
    logger.debug("Computing Arvile fields for %d date(s)", years.size)

    months = month_index(ordinals)
    return {
        "year": years,
        "day_of_year": ordinals,
        "month_index": months,
        "month_symbol": month_symbol(months),
        "day_of_month": day_of_month(ordinals),
        "display_day": display_day(years, ordinals),
    }


def to_arvile(dates: Any) -> str | np.ndarray:
    """Formatted ``YYMDD`` strings, shaped like ``dates``."""
    scalar = np.ndim(dates) == 0
    shape = np.shape(dates)
    f = arvile_fields(dates)

    text = format_arvile(f["year"], f["month_symbol"], f["display_day"])
    return str(text.flat[0]) if scalar else text.reshape(shape)
