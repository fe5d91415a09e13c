"""評估雙動能 Query

實作 EvaluateDualMomentumPort Driving Port
"""

import asyncio
import logging
from datetime import date

from injector import inject

from libs.rebalancing.src.domain.services.momentum_decision import (
    decide_dual_momentum,
)
from libs.rebalancing.src.ports.compute_trailing_return_port import (
    ComputeTrailingReturnPort,
)
from libs.rebalancing.src.ports.evaluate_dual_momentum_port import (
    EvaluateDualMomentumPort,
)
from libs.shared.src.dtos.rebalancing.dual_momentum_config_dto import (
    DualMomentumConfigDTO,
)
from libs.shared.src.dtos.rebalancing.momentum_result_dto import MomentumResultDTO


class EvaluateDualMomentumQuery(EvaluateDualMomentumPort):
    """評估雙動能訊號

    1. 相對動能: US vs INTL
    2. 絕對動能: 勝出者 vs 無風險利率
    3. 未通過絕對動能 → 債券

    Any failing return aborts the whole evaluation.
    """

    @inject
    def __init__(
        self,
        trailing_return: ComputeTrailingReturnPort,
        config: DualMomentumConfigDTO,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._trailing_return = trailing_return
        self._config = config

    async def execute(self, as_of: date | None = None) -> MomentumResultDTO:
        """
        評估雙動能訊號

        Args:
            as_of: 計算基準日 (預設今天)

        Returns:
            MomentumResultDTO: 決策與報告
        """
        as_of = as_of or date.today()
        assets = self._config["assets"]
        lookback_months = self._config["lookback_months"]
        skip_current_month = self._config["skip_current_month"]

        # 三個報酬互相獨立，平行取得
        loop = asyncio.get_running_loop()
        tasks = [
            loop.run_in_executor(
                None,
                self._trailing_return.execute,
                ticker,
                lookback_months,
                skip_current_month,
                as_of,
            )
            for ticker in (assets["us"], assets["intl"], assets["risk_free"])
        ]
        us_return, intl_return, risk_free_return = await asyncio.gather(*tasks)

        result = decide_dual_momentum(
            us_return,
            intl_return,
            risk_free_return,
            assets=assets,
            as_of=as_of,
            lookback_months=lookback_months,
        )
        self._logger.info(
            f"Leader {result['nominal_leader']}, "
            f"absolute filter {'passed' if result['absolute_filter_passed'] else 'failed'}"
        )
        return result
