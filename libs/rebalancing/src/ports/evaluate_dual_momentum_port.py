"""
EvaluateDualMomentumPort - Driving Port

實作者: EvaluateDualMomentumQuery
"""

from datetime import date
from typing import Protocol

from libs.shared.src.dtos.rebalancing.momentum_result_dto import MomentumResultDTO


class EvaluateDualMomentumPort(Protocol):
    """Relative + absolute momentum decision"""

    async def execute(self, as_of: date | None = None) -> MomentumResultDTO:
        """評估雙動能訊號"""
        ...
