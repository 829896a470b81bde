from __future__ import annotations

import string
from typing import Final, Union

import numpy as np

from ._exceptions import MonthIndexError

IndexLike = Union[int, "np.ndarray"]

MONTH_LENGTH: Final[int] = 14
MONTH_COUNT: Final[int] = 26

# Days after the last full month: one in common years, two in leap years.
YEAR_DAY_INDEX: Final[int] = MONTH_COUNT + 1
YEAR_DAY_SYMBOL: Final[str] = "+"

MONTH_SYMBOLS: Final[tuple[str, ...]] = (
    *string.ascii_uppercase[:MONTH_COUNT],
    YEAR_DAY_SYMBOL,
)

_NP_SYMBOLS: Final[np.ndarray] = np.array(MONTH_SYMBOLS, dtype="<U1")


def month_symbol(index: IndexLike) -> str | np.ndarray:
    """
    Symbol of an Arvile month: ``1 -> 'A'`` ... ``26 -> 'Z'``, ``27 -> '+'``.

    Integer arrays are mapped element-wise and return a ``<U1`` array of the
    same shape.  Any index outside ``1..27``, or not an integer, raises
    MonthIndexError.
    """
    arr = np.asarray(index)
    if arr.ndim == 0:
        if arr.dtype.kind not in "iu" or not 1 <= int(arr) <= YEAR_DAY_INDEX:
            raise MonthIndexError(index)
        return MONTH_SYMBOLS[int(arr) - 1]

    if arr.size and arr.dtype.kind not in "iu":
        raise MonthIndexError(arr.flat[0])
    idx = arr.astype(np.int64)
    bad = (idx < 1) | (idx > YEAR_DAY_INDEX)
    if bad.any():
        raise MonthIndexError(int(idx[bad].flat[0]))
    return _NP_SYMBOLS[idx - 1]
