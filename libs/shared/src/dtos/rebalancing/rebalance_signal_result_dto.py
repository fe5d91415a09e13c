"""Rebalance Signal Result DTO"""

from typing import TypedDict

from libs.shared.src.dtos.rebalancing.momentum_result_dto import MomentumResultDTO


class RebalanceSignalResultDTO(TypedDict):
    """Outcome of a rebalance signal run"""

    result: MomentumResultDTO
    taxable_window_open: bool
    dry_run: bool
    subjects: list[str]  # Subjects of the emails actually sent
