"""Rebalancing DI 組態測試"""

from datetime import date

import pytest
from injector import Injector, Module, provider, singleton

from libs.rebalancing.src.adapters.driven.memory.monthly_price_fake_adapter import (
    MonthlyPriceFakeAdapter,
)
from libs.rebalancing.src.adapters.driven.memory.notification_gateway_fake_adapter import (
    NotificationGatewayFakeAdapter,
)
from libs.rebalancing.src.application.commands.send_rebalance_signal import (
    SendRebalanceSignalCommand,
)
from libs.rebalancing.src.lifespan import RebalancingModule
from libs.rebalancing.src.ports.monthly_price_provider_port import (
    MonthlyPriceProviderPort,
)
from libs.rebalancing.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)
from libs.rebalancing.src.ports.send_rebalance_signal_port import (
    SendRebalanceSignalPort,
)
from libs.shared.src.errors.missing_configuration_error import (
    MissingConfigurationError,
)


class FakeDrivenModule(Module):
    """以 Fake 覆蓋 Driven Ports"""

    def __init__(
        self,
        prices: MonthlyPriceFakeAdapter,
        gateway: NotificationGatewayFakeAdapter,
    ) -> None:
        self._prices = prices
        self._gateway = gateway

    @singleton
    @provider
    def provide_price_provider(self) -> MonthlyPriceProviderPort:
        return self._prices

    @singleton
    @provider
    def provide_notification_gateway(self) -> NotificationGatewayPort:
        return self._gateway


class TestRebalancingModule:
    """RebalancingModule 測試"""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in (
            "DUAL_MOMENTUM_US_TICKER",
            "DUAL_MOMENTUM_INTL_TICKER",
            "DUAL_MOMENTUM_BOND_TICKER",
            "DUAL_MOMENTUM_RISK_FREE_TICKER",
            "DUAL_MOMENTUM_LOOKBACK_MONTHS",
            "DUAL_MOMENTUM_SKIP_CURRENT_MONTH",
        ):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("TAXABLE_REBALANCE_MONTH", "9")
        monkeypatch.setenv("TAXABLE_REBALANCE_WINDOW_DAYS", "3")

    def _injector(self, prices, gateway) -> Injector:
        return Injector([RebalancingModule(), FakeDrivenModule(prices, gateway)])

    def test_resolves_send_rebalance_signal(self) -> None:
        injector = self._injector(
            MonthlyPriceFakeAdapter(), NotificationGatewayFakeAdapter()
        )

        command = injector.get(SendRebalanceSignalPort)

        assert isinstance(command, SendRebalanceSignalCommand)

    @pytest.mark.asyncio
    async def test_full_run_sends_both_emails(self) -> None:
        prices = MonthlyPriceFakeAdapter()
        prices.set_closes("VOO", [100.0, 101.0, 99.0, 150.0])
        prices.set_closes("VXUS", [100.0, 104.0, 108.0, 50.0])
        prices.set_closes("BIL", [100.0, 100.2, 100.4, 100.5])
        gateway = NotificationGatewayFakeAdapter()
        command = self._injector(prices, gateway).get(SendRebalanceSignalPort)

        outcome = await command.execute(as_of=date(2025, 9, 2))

        assert outcome["result"]["winner"] == "INTL"
        assert len(gateway.get_sent_messages()) == 2
        assert "Allocate 100% to INTL (VXUS)" in gateway.get_sent_messages()[0]["body"]

    def test_invalid_lookback_fails_on_resolution(self, monkeypatch) -> None:
        monkeypatch.setenv("DUAL_MOMENTUM_LOOKBACK_MONTHS", "zero")
        prices = MonthlyPriceFakeAdapter()
        injector = self._injector(prices, NotificationGatewayFakeAdapter())

        with pytest.raises(MissingConfigurationError):
            injector.get(SendRebalanceSignalPort)

        assert prices.requests == []
