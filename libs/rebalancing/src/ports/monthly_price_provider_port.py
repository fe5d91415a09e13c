"""
MonthlyPriceProviderPort - Driven Port

實作者: MonthlyPriceYahooAdapter, MonthlyPriceFakeAdapter
"""

from datetime import date
from typing import Protocol

from libs.shared.src.dtos.market.monthly_price_dto import MonthlyPriceDTO


class MonthlyPriceProviderPort(Protocol):
    """Monthly price history provider"""

    def fetch_monthly_history(
        self, ticker: str, start_date: date, end_date: date
    ) -> list[MonthlyPriceDTO]:
        """取得月線價格資料

        Args:
            ticker: 代碼
            start_date: 起始日 (含)
            end_date: 結束日

        Returns:
            list[MonthlyPriceDTO]: 依時間排序的月資料

        Raises:
            PriceProviderError: 資料來源失敗
        """
        ...
