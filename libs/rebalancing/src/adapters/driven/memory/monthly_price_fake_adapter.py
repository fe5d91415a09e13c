"""月線價格 Fake Adapter"""

from datetime import date

import pandas as pd

from libs.rebalancing.src.ports.monthly_price_provider_port import (
    MonthlyPriceProviderPort,
)
from libs.shared.src.dtos.market.monthly_price_dto import MonthlyPriceDTO


class MonthlyPriceFakeAdapter(MonthlyPriceProviderPort):
    """月線價格 Fake 實作"""

    def __init__(self) -> None:
        self._history: dict[str, list[MonthlyPriceDTO]] = {}
        self._errors: dict[str, Exception] = {}
        self.requests: list[tuple[str, date, date]] = []

    def fetch_monthly_history(
        self, ticker: str, start_date: date, end_date: date
    ) -> list[MonthlyPriceDTO]:
        self.requests.append((ticker, start_date, end_date))
        if ticker in self._errors:
            raise self._errors[ticker]
        return list(self._history.get(ticker, []))

    # Setters for testing
    def set_history(self, ticker: str, samples: list[MonthlyPriceDTO]) -> None:
        self._history[ticker] = samples

    def set_closes(
        self, ticker: str, closes: list[float | None], first_month: str = "2024-09-01"
    ) -> None:
        """Monthly samples with the same adjusted and raw close"""
        months = pd.date_range(first_month, periods=len(closes), freq="MS")
        self._history[ticker] = [
            {"date": month.strftime("%Y-%m-%d"), "adj_close": close, "close": close}
            for month, close in zip(months, closes)
        ]

    def set_error(self, ticker: str, error: Exception) -> None:
        self._errors[ticker] = error
