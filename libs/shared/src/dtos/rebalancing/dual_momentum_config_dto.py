"""Dual Momentum Configuration DTO"""

from typing import TypedDict


class DualMomentumAssetsDTO(TypedDict):
    """Tickers used by the strategy"""

    us: str
    intl: str
    bonds: str
    risk_free: str


class DualMomentumConfigDTO(TypedDict):
    """Validated strategy configuration"""

    assets: DualMomentumAssetsDTO
    lookback_months: int
    skip_current_month: bool
