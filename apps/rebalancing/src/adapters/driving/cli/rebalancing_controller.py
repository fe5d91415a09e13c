"""Rebalancing CLI Controller

Driving Adapter: 將 CLI 指令轉換為 Use Case 調用
DomainError 交由 main 統一處理 (exit 1)
"""

import logging
from datetime import date, datetime

from injector import Injector

from libs.rebalancing.src.domain.services.taxable_window import is_in_taxable_window
from libs.rebalancing.src.ports.evaluate_dual_momentum_port import (
    EvaluateDualMomentumPort,
)
from libs.rebalancing.src.ports.send_rebalance_signal_port import (
    SendRebalanceSignalPort,
)
from libs.shared.src.dtos.rebalancing.taxable_window_dto import TaxableWindowDTO
from libs.shared.src.errors.missing_configuration_error import (
    MissingConfigurationError,
)


class RebalancingController:
    """雙動能再平衡 CLI 控制器"""

    def __init__(self, injector: Injector) -> None:
        self._injector = injector
        self._logger = logging.getLogger(self.__class__.__name__)

    async def run(self, dry_run: bool = False, as_of: str | None = None) -> None:
        """評估雙動能訊號並發送 Email (async)

        Args:
            dry_run: 只評估，不發送 Email (仍會檢查 Email 設定)
            as_of: 計算基準日 (YYYY-MM-DD 或 YYYYMMDD，預設今天)
        """
        target = parse_date(as_of, "as_of")
        use_case = self._injector.get(SendRebalanceSignalPort)
        outcome = await use_case.execute(as_of=target, dry_run=dry_run)

        print(outcome["result"]["report"])
        for subject in outcome["subjects"]:
            print(f"📧 {subject}")

    async def signal(self, as_of: str | None = None) -> None:
        """只評估並列印報告，不需 Email 設定 (async)

        Args:
            as_of: 計算基準日 (YYYY-MM-DD 或 YYYYMMDD，預設今天)
        """
        target = parse_date(as_of, "as_of")
        query = self._injector.get(EvaluateDualMomentumPort)
        result = await query.execute(as_of=target)

        print(result["report"])

    def window(self, date: str | None = None) -> None:
        """顯示年度應稅帳戶再平衡窗口是否開啟

        Args:
            date: 日期 (YYYY-MM-DD 或 YYYYMMDD，預設今天)
        """
        target = parse_date(date, "date") or datetime.now().date()
        taxable_window = self._injector.get(TaxableWindowDTO)
        state = "open" if is_in_taxable_window(target, taxable_window) else "closed"
        print(
            f"{target.isoformat()}: taxable window {state} "
            f"(month {taxable_window['month']}, first {taxable_window['window_days']} days)"
        )


def parse_date(value: str | int | None, field: str = "date") -> date | None:
    """YYYY-MM-DD or YYYYMMDD, None passes through

    Raises:
        MissingConfigurationError: value is not a recognised date
    """
    if value is None:
        return None
    text = str(value).strip()  # fire 會將純數字自動轉為 int
    for fmt in ("%Y-%m-%d", "%Y%m%d"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise MissingConfigurationError(field, f"unrecognised date: {value!r}")
