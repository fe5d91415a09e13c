"""計算回看總報酬 Query

實作 ComputeTrailingReturnPort Driving Port
"""

import logging
from datetime import date

from injector import inject

from libs.rebalancing.src.domain.services.trailing_return_calculator import (
    extract_closes,
    lookback_window,
    trailing_return,
)
from libs.rebalancing.src.ports.compute_trailing_return_port import (
    ComputeTrailingReturnPort,
)
from libs.rebalancing.src.ports.monthly_price_provider_port import (
    MonthlyPriceProviderPort,
)
from libs.shared.src.constants.dual_momentum_defaults import (
    LOOKBACK_MONTHS,
    SKIP_CURRENT_MONTH,
)
from libs.shared.src.errors.missing_configuration_error import (
    MissingConfigurationError,
)


class ComputeTrailingReturnQuery(ComputeTrailingReturnPort):
    """計算單一代碼的回看總報酬

    Stateless: every call fetches fresh monthly history
    """

    @inject
    def __init__(self, price_provider: MonthlyPriceProviderPort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._price_provider = price_provider

    def execute(
        self,
        ticker: str,
        lookback_months: int = LOOKBACK_MONTHS,
        skip_current_month: bool = SKIP_CURRENT_MONTH,
        as_of: date | None = None,
    ) -> float:
        """
        計算回看總報酬

        Args:
            ticker: 代碼
            lookback_months: 回看月數
            skip_current_month: 是否略過當月 (可能未完成)
            as_of: 計算基準日 (預設今天)

        Returns:
            float: 總報酬 (0.08 = +8%)

        Raises:
            MissingConfigurationError: 參數無效
            InsufficientDataError: 可用收盤價少於 2 筆
            PriceProviderError: 資料來源失敗
        """
        if not ticker or not ticker.strip():
            raise MissingConfigurationError("ticker", "must not be empty")
        if (
            isinstance(lookback_months, bool)
            or not isinstance(lookback_months, int)
            or lookback_months <= 0
        ):
            raise MissingConfigurationError(
                "lookback_months", f"must be a positive integer, got {lookback_months!r}"
            )

        as_of = as_of or date.today()
        start_date, end_date = lookback_window(as_of, lookback_months)

        samples = self._price_provider.fetch_monthly_history(
            ticker, start_date, end_date
        )
        closes = extract_closes(samples)
        result = trailing_return(ticker, closes, skip_current_month)

        self._logger.info(
            f"{ticker} {lookback_months}m return {result:.4f} "
            f"({len(closes)} monthly closes, {start_date} ~ {end_date})"
        )
        return result
