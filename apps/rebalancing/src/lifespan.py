"""Rebalancing App 生命週期管理

Apps 層的 DI 配置，組合 libs 的能力
"""

import logging
from injector import Injector, Module, provider, singleton

from libs.rebalancing.src.lifespan import RebalancingModule
from libs.rebalancing.src.config import load_email_config
from libs.rebalancing.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)
from libs.rebalancing.src.adapters.driven.gmail.gmail_notification_adapter import (
    GmailNotificationAdapter,
)


class RebalancingAppModule(Module):
    """Rebalancing App DI 配置，補齊 Email 通知閘道"""

    @singleton
    @provider
    def provide_notification_gateway(self) -> NotificationGatewayPort:
        return GmailNotificationAdapter(load_email_config())


_injector: Injector | None = None


def startup() -> Injector:
    """啟動 DI 容器，組合所有必要的 Modules"""
    global _injector

    # 抑制噪音 logger
    logging.getLogger("yfinance").setLevel(logging.CRITICAL)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    _injector = Injector([RebalancingModule(), RebalancingAppModule()])
    return _injector


def shutdown() -> None:
    """關閉並釋放資源"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """取得 DI 容器，若未初始化則自動啟動"""
    global _injector
    if _injector is None:
        startup()
    return _injector
