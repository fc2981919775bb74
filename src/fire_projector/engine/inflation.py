from datetime import date

import numpy as np
import pandas as pd


def adjust_for_inflation(value, months, annual_inflation_rate: float):
    """Express `value`, dated `months` from now, in today's money. `months` may be an array."""
    return value / np.power(1 + annual_inflation_rate / 100, months / 12)


def deflator_series(total_months: int, annual_inflation_rate: float):
    """(total_months+1,) vector with deflator[i] = 1 / (1+infl)^(i/12); deflator[0] == 1."""
    months = np.arange(total_months + 1, dtype=float)
    return adjust_for_inflation(1.0, months, annual_inflation_rate)


def add_months(start: date, months: int) -> date:
    # DateOffset clamps to month end: Jan 31 + 1 month -> Feb 28/29
    return (pd.Timestamp(start) + pd.DateOffset(months=int(months))).date()


def month_diff(start: date, end: date, exact: bool = False):
    """
    Calendar months from `start` to `end`.
    Truncated toward zero unless `exact`, in which case the partial month is
    added as the elapsed fraction of that month's days.
    """
    if end < start:
        return -month_diff(end, start, exact=exact)

    whole = (end.year - start.year) * 12 + (end.month - start.month)
    anchor = add_months(start, whole)
    if anchor > end:
        whole -= 1
        anchor = add_months(start, whole)
    if not exact:
        return whole

    nxt = add_months(start, whole + 1)
    return whole + (end - anchor).days / (nxt - anchor).days


def horizon(initial_date: date, current_date: date, years) -> tuple:
    """
    Returns (total_months, progress_month).
    total_months covers the nominal horizon and is stretched to reach the
    current-observation date when that lies beyond it.
    """
    end = add_months(initial_date, int(years * 12))
    total_months = month_diff(initial_date, end)
    progress_month = month_diff(initial_date, current_date)
    if progress_month > total_months:
        total_months = progress_month
    return total_months, progress_month
