"""Momentum Result DTO"""

from typing import TypedDict

from libs.shared.src.dtos.rebalancing.dual_momentum_config_dto import (
    DualMomentumAssetsDTO,
)


class MomentumResultDTO(TypedDict):
    """Dual momentum evaluation result

    Built once per run and never mutated afterwards
    """

    as_of: str  # YYYY-MM-DD format
    lookback_months: int
    assets: DualMomentumAssetsDTO
    us_return: float
    intl_return: float
    risk_free_return: float
    nominal_leader: str  # US | INTL, before the absolute filter
    winner: str | None  # US | INTL, None when the absolute filter fails
    absolute_filter_passed: bool
    recommendation: str
    report: str
