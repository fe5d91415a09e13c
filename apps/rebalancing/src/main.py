"""Rebalancing CLI 入口

dual-momentum run | signal | window

fire 會在目前設定的 event loop 上執行 async 指令，
因此進入 fire 之前先建立 loop。任何 DomainError 都在此統一記錄並以 exit 1 結束。
"""

import asyncio
import inspect
import logging
import sys

import fire

from apps.rebalancing.src.lifespan import get_injector, shutdown, startup
from apps.rebalancing.src.adapters.driving.cli.rebalancing_controller import (
    RebalancingController,
)
from libs.shared.src.errors.domain_error import DomainError

logger = logging.getLogger("dual-momentum")


def main() -> None:
    startup()

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    try:
        controller = RebalancingController(get_injector())
        result = fire.Fire(controller)
        if inspect.iscoroutine(result):
            loop.run_until_complete(result)
    except DomainError as e:
        logger.error(f"Error running strategy: [{e.code}] {e.message}")
        sys.exit(1)
    finally:
        loop.close()
        asyncio.set_event_loop(None)
        shutdown()


if __name__ == "__main__":
    main()
