"""
Rebalancing Context 生命週期管理

遵循 P&A 架構：Driving Port → Application Service → Driven Port
NotificationGatewayPort 由 Apps 層提供
"""

from injector import Injector, Module, provider, singleton

# Driving Ports
from libs.rebalancing.src.ports.compute_trailing_return_port import (
    ComputeTrailingReturnPort,
)
from libs.rebalancing.src.ports.evaluate_dual_momentum_port import (
    EvaluateDualMomentumPort,
)
from libs.rebalancing.src.ports.send_rebalance_signal_port import (
    SendRebalanceSignalPort,
)

# Driven Ports
from libs.rebalancing.src.ports.monthly_price_provider_port import (
    MonthlyPriceProviderPort,
)
from libs.rebalancing.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)

# Application Services
from libs.rebalancing.src.application.queries.compute_trailing_return import (
    ComputeTrailingReturnQuery,
)
from libs.rebalancing.src.application.queries.evaluate_dual_momentum import (
    EvaluateDualMomentumQuery,
)
from libs.rebalancing.src.application.commands.send_rebalance_signal import (
    SendRebalanceSignalCommand,
)

# Driven Adapters
from libs.rebalancing.src.adapters.driven.yahoo.monthly_price_yahoo_adapter import (
    MonthlyPriceYahooAdapter,
)

from libs.rebalancing.src.config import load_dual_momentum_config, load_taxable_window
from libs.shared.src.dtos.rebalancing.dual_momentum_config_dto import (
    DualMomentumConfigDTO,
)
from libs.shared.src.dtos.rebalancing.taxable_window_dto import TaxableWindowDTO


class RebalancingModule(Module):
    """Rebalancing 依賴注入模組"""

    @singleton
    @provider
    def provide_config(self) -> DualMomentumConfigDTO:
        return load_dual_momentum_config()

    @singleton
    @provider
    def provide_taxable_window(self) -> TaxableWindowDTO:
        return load_taxable_window()

    @singleton
    @provider
    def provide_price_provider(self) -> MonthlyPriceProviderPort:
        return MonthlyPriceYahooAdapter()

    @singleton
    @provider
    def provide_compute_trailing_return(
        self, price_provider: MonthlyPriceProviderPort
    ) -> ComputeTrailingReturnPort:
        return ComputeTrailingReturnQuery(price_provider=price_provider)

    @singleton
    @provider
    def provide_evaluate_dual_momentum(
        self,
        trailing_return: ComputeTrailingReturnPort,
        config: DualMomentumConfigDTO,
    ) -> EvaluateDualMomentumPort:
        return EvaluateDualMomentumQuery(trailing_return=trailing_return, config=config)

    @singleton
    @provider
    def provide_send_rebalance_signal(
        self,
        evaluate: EvaluateDualMomentumPort,
        notification_gateway: NotificationGatewayPort,
        taxable_window: TaxableWindowDTO,
    ) -> SendRebalanceSignalPort:
        return SendRebalanceSignalCommand(
            evaluate=evaluate,
            notification_gateway=notification_gateway,
            taxable_window=taxable_window,
        )


# Alias for libs composition
configure = RebalancingModule()
