"""Year-quarter (CCYYQ) date codes.

A year-quarter code packs a calendar quarter into one integer,
``10 * year + quarter``, so 2003-Q3 is ``20033``. All dates exchanged with
the series store use this form.
"""

from datetime import date, datetime
from typing import List, Sequence, Union

from ..config.constants import MIN_YEAR, MAX_YEAR, QUARTER_START_MONTHS
from ..utils.exceptions import InvalidDateError, QuarterPreconditionError


def _split(yrqtr: int):
    yr = yrqtr // 10
    return yr, yrqtr - 10 * yr


def to_yrqtr(dt: Union[date, datetime]) -> int:
    """Convert a calendar date to a CCYYQ code."""
    qtr = 1 + (dt.month - 1) // 3
    return 10 * dt.year + qtr


def is_valid_yrqtr(yrqtr: int) -> bool:
    """Check that a code has a year in range and a quarter in 1..4."""
    yr, qtr = _split(yrqtr)
    return MIN_YEAR <= yr <= MAX_YEAR and 1 <= qtr <= 4


def to_date(yrqtr: int) -> date:
    """
    Convert a CCYYQ code to the first day of the quarter.
    
    Parameters
    ----------
    yrqtr : int
        Year-quarter code
        
    Returns
    -------
    date
        First day of the first month of the quarter
        
    Raises
    ------
    InvalidDateError
        If the year or quarter is out of range
    """
    if not is_valid_yrqtr(yrqtr):
        raise InvalidDateError(f"Illegal date conversion: {yrqtr}")
    
    yr, qtr = _split(yrqtr)
    return date(yr, QUARTER_START_MONTHS[qtr - 1], 1)


def qtr_diff(dt0: int, dt1: int) -> int:
    """
    Number of quarters between two CCYYQ codes.
    
    The earlier code is always treated as the start, so the result is
    never negative and ``qtr_diff(a, b) == qtr_diff(b, a)``.
    """
    if dt1 < dt0:
        dt0, dt1 = dt1, dt0
    
    yr0, qtr0 = _split(dt0)
    yr1, qtr1 = _split(dt1)
    
    return 4 * (yr1 - yr0) + qtr1 - qtr0


def next_qtr(yrqtr: int) -> int:
    """
    Advance a CCYYQ code by one quarter.
    
    Raises
    ------
    QuarterPreconditionError
        If ``yrqtr`` is not a valid code. Validate first.
    """
    if not is_valid_yrqtr(yrqtr):
        raise QuarterPreconditionError(f"Illegal date: {yrqtr}")
    
    yr, qtr = _split(yrqtr)
    qtr += 1
    if qtr == 5:
        qtr = 1
        yr += 1
    
    return 10 * yr + qtr


def qtrs_ok(dates: Sequence[int]) -> bool:
    """Check that dates step forward exactly one quarter at a time."""
    for prev, cur in zip(dates[:-1], dates[1:]):
        prev, cur = int(prev), int(cur)
        if not is_valid_yrqtr(prev) or next_qtr(prev) != cur:
            return False
    
    return True


def qtr_range(start: int, n: int) -> List[int]:
    """Return ``n`` consecutive quarters beginning at ``start``."""
    if n <= 0:
        return []

    dates = [start]
    while len(dates) < n:
        dates.append(next_qtr(dates[-1]))

    return dates
