"""Yahoo Finance Monthly Price Adapter

直接使用 yfinance SDK，實作 MonthlyPriceProviderPort
"""

import logging
from datetime import date, timedelta

import pandas as pd
import yfinance as yf

from libs.rebalancing.src.ports.monthly_price_provider_port import (
    MonthlyPriceProviderPort,
)
from libs.shared.src.constants.yfinance_settings import (
    YFINANCE_ADJ_CLOSE_COLUMN,
    YFINANCE_CLOSE_COLUMN,
    YFINANCE_MONTHLY_INTERVAL,
)
from libs.shared.src.dtos.market.monthly_price_dto import MonthlyPriceDTO
from libs.shared.src.errors.price_provider_error import PriceProviderError


class MonthlyPriceYahooAdapter(MonthlyPriceProviderPort):
    """Monthly Price Adapter using Yahoo Finance

    Downloads unadjusted bars so both Adj Close and Close are available.
    end_date is inclusive.
    No retry: a failed download raises PriceProviderError.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)

    def fetch_monthly_history(
        self, ticker: str, start_date: date, end_date: date
    ) -> list[MonthlyPriceDTO]:
        """取得月線價格資料"""
        try:
            df = yf.Ticker(ticker).history(
                start=start_date,
                end=end_date + timedelta(days=1),  # yfinance end 不含當日
                interval=YFINANCE_MONTHLY_INTERVAL,
                auto_adjust=False,
                actions=False,
                raise_errors=True,
            )
        except Exception as e:
            raise PriceProviderError(ticker, str(e)) from e

        if df is None or df.empty:
            self._logger.warning(f"{ticker}: no monthly bars {start_date} ~ {end_date}")
            return []

        result = []
        for idx, row in df.sort_index().iterrows():
            result.append(
                {
                    "date": idx.strftime("%Y-%m-%d"),
                    "adj_close": self._to_float(row.get(YFINANCE_ADJ_CLOSE_COLUMN)),
                    "close": self._to_float(row.get(YFINANCE_CLOSE_COLUMN)),
                }
            )
        return result

    @staticmethod
    def _to_float(value: object) -> float | None:
        if value is None or pd.isna(value):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None
