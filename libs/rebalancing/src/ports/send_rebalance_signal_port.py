"""
SendRebalanceSignalPort - Driving Port

實作者: SendRebalanceSignalCommand
"""

from datetime import date
from typing import Protocol

from libs.shared.src.dtos.rebalancing.rebalance_signal_result_dto import (
    RebalanceSignalResultDTO,
)


class SendRebalanceSignalPort(Protocol):
    """Evaluate and email the rebalance signal"""

    async def execute(
        self, as_of: date | None = None, dry_run: bool = False
    ) -> RebalanceSignalResultDTO:
        """評估訊號並發送 Email"""
        ...
