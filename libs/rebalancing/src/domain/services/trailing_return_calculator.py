"""Trailing Return Calculator

Reduces a monthly price series to a single trailing total return:
    (last close / first close) - 1
over a window of `lookback_months + 1` months ending on the as-of date.
"""

from datetime import date

import numpy as np
import pandas as pd

from libs.shared.src.dtos.market.monthly_price_dto import MonthlyPriceDTO
from libs.shared.src.errors.insufficient_data_error import InsufficientDataError


def lookback_window(as_of: date, lookback_months: int) -> tuple[date, date]:
    """
    Date window to request from the price provider

    One extra month is requested so that dropping the current
    (partial) month still leaves `lookback_months` of history.

    Args:
        as_of: Window end date
        lookback_months: Lookback period in months

    Returns:
        tuple: (start_date, end_date)
    """
    start = pd.Timestamp(as_of) - pd.DateOffset(months=lookback_months + 1)
    return start.date(), as_of


def extract_closes(samples: list[MonthlyPriceDTO]) -> list[float]:
    """Adjusted close per sample (fallback close), non-numeric samples dropped"""
    closes = []
    for sample in samples:
        for value in (sample.get("adj_close"), sample.get("close")):
            if _is_number(value):
                closes.append(float(value))
                break
    return closes


def trailing_return(
    ticker: str, closes: list[float], skip_current_month: bool = True
) -> float:
    """
    Total return over the retained closes

    Args:
        ticker: Ticker, used in the error message
        closes: Chronological closes
        skip_current_month: Drop the most recent (possibly partial) month

    Returns:
        float: Fractional return (0.08 = +8%)

    Raises:
        InsufficientDataError: Fewer than 2 closes remain
    """
    if skip_current_month:
        closes = closes[:-1]

    if len(closes) < 2:
        raise InsufficientDataError(ticker, len(closes))

    return closes[-1] / closes[0] - 1


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
        return False
    return bool(np.isfinite(value))
