"""EvaluateDualMomentumQuery 單元測試"""

from datetime import date

import pytest

from libs.rebalancing.src.adapters.driven.memory.monthly_price_fake_adapter import (
    MonthlyPriceFakeAdapter,
)
from libs.rebalancing.src.application.queries.compute_trailing_return import (
    ComputeTrailingReturnQuery,
)
from libs.rebalancing.src.application.queries.evaluate_dual_momentum import (
    EvaluateDualMomentumQuery,
)
from libs.shared.src.errors.insufficient_data_error import InsufficientDataError
from libs.shared.src.errors.price_provider_error import PriceProviderError

AS_OF = date(2025, 10, 16)
CONFIG = {
    "assets": {"us": "VOO", "intl": "VXUS", "bonds": "BND", "risk_free": "BIL"},
    "lookback_months": 12,
    "skip_current_month": True,
}


class FakeTrailingReturn:
    """ComputeTrailingReturnPort Fake: 固定報酬或錯誤"""

    def __init__(self, returns: dict) -> None:
        self._returns = returns
        self.calls: list[tuple] = []

    def execute(self, ticker, lookback_months=12, skip_current_month=True, as_of=None):
        self.calls.append((ticker, lookback_months, skip_current_month, as_of))
        value = self._returns[ticker]
        if isinstance(value, Exception):
            raise value
        return value


class TestEvaluateDualMomentumQuery:
    """雙動能評估 Query 測試"""

    @pytest.mark.asyncio
    async def test_scenario_us_passes(self) -> None:
        fake = FakeTrailingReturn({"VOO": 0.10, "VXUS": 0.04, "BIL": 0.03})
        query = EvaluateDualMomentumQuery(trailing_return=fake, config=CONFIG)

        result = await query.execute(as_of=AS_OF)

        assert result["winner"] == "US"
        assert result["absolute_filter_passed"] is True
        assert "Allocate 100% to US (VOO)" in result["recommendation"]

    @pytest.mark.asyncio
    async def test_scenario_move_to_bonds(self) -> None:
        fake = FakeTrailingReturn({"VOO": 0.02, "VXUS": 0.01, "BIL": 0.05})
        query = EvaluateDualMomentumQuery(trailing_return=fake, config=CONFIG)

        result = await query.execute(as_of=AS_OF)

        assert result["winner"] is None
        assert result["absolute_filter_passed"] is False
        assert "Move to Bonds (BND)" in result["recommendation"]
        assert "US 12m 2.00%" in result["recommendation"]

    @pytest.mark.asyncio
    async def test_all_three_tickers_use_same_configuration(self) -> None:
        fake = FakeTrailingReturn({"VOO": 0.10, "VXUS": 0.04, "BIL": 0.03})
        query = EvaluateDualMomentumQuery(trailing_return=fake, config=CONFIG)

        await query.execute(as_of=AS_OF)

        assert sorted(fake.calls) == [
            ("BIL", 12, True, AS_OF),
            ("VOO", 12, True, AS_OF),
            ("VXUS", 12, True, AS_OF),
        ]

    @pytest.mark.asyncio
    async def test_any_failure_aborts_evaluation(self) -> None:
        """任一報酬失敗，整體失敗，無部分結果"""
        fake = FakeTrailingReturn(
            {"VOO": 0.10, "VXUS": InsufficientDataError("VXUS", 1), "BIL": 0.03}
        )
        query = EvaluateDualMomentumQuery(trailing_return=fake, config=CONFIG)

        with pytest.raises(InsufficientDataError):
            await query.execute(as_of=AS_OF)

    @pytest.mark.asyncio
    async def test_end_to_end_with_price_provider(self) -> None:
        provider = MonthlyPriceFakeAdapter()
        provider.set_closes("VOO", [100.0, 105.0, 112.0, 200.0])
        provider.set_closes("VXUS", [50.0, 51.0, 52.0, 10.0])
        provider.set_closes("BIL", [90.0, 90.5, 91.8, 91.9])
        query = EvaluateDualMomentumQuery(
            trailing_return=ComputeTrailingReturnQuery(price_provider=provider),
            config=CONFIG,
        )

        result = await query.execute(as_of=AS_OF)

        assert result["us_return"] == pytest.approx(0.12)
        assert result["intl_return"] == pytest.approx(0.04)
        assert result["risk_free_return"] == pytest.approx(0.02)
        assert result["winner"] == "US"
        assert "US (VOO) 12m: 12.00%" in result["report"]

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self) -> None:
        provider = MonthlyPriceFakeAdapter()
        provider.set_closes("VOO", [100.0, 105.0, 112.0])
        provider.set_closes("VXUS", [50.0, 51.0, 52.0])
        provider.set_error("BIL", PriceProviderError("BIL", "HTTP 429"))
        query = EvaluateDualMomentumQuery(
            trailing_return=ComputeTrailingReturnQuery(price_provider=provider),
            config=CONFIG,
        )

        with pytest.raises(PriceProviderError, match="HTTP 429"):
            await query.execute(as_of=AS_OF)
