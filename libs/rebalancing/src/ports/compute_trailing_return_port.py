"""
ComputeTrailingReturnPort - Driving Port

實作者: ComputeTrailingReturnQuery
"""

from datetime import date
from typing import Protocol

from libs.shared.src.constants.dual_momentum_defaults import (
    LOOKBACK_MONTHS,
    SKIP_CURRENT_MONTH,
)


class ComputeTrailingReturnPort(Protocol):
    """Trailing total return of a single ticker"""

    def execute(
        self,
        ticker: str,
        lookback_months: int = LOOKBACK_MONTHS,
        skip_current_month: bool = SKIP_CURRENT_MONTH,
        as_of: date | None = None,
    ) -> float:
        """計算回看期間總報酬 (0.08 = +8%)"""
        ...
