"""Taxable Rebalance Window DTO"""

from typing import TypedDict


class TaxableWindowDTO(TypedDict):
    """Annual taxable account rebalance window

    Open during the first `window_days` days of `month`
    """

    month: int  # 1-12
    window_days: int  # 1-31
