"""發送再平衡訊號 Command

實作 SendRebalanceSignalPort Driving Port
"""

import logging
from datetime import date

from injector import inject

from libs.rebalancing.src.domain.services.rebalance_report import (
    build_subject,
    render_email_body,
    render_taxable_email_body,
)
from libs.rebalancing.src.domain.services.taxable_window import is_in_taxable_window
from libs.rebalancing.src.ports.evaluate_dual_momentum_port import (
    EvaluateDualMomentumPort,
)
from libs.rebalancing.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)
from libs.rebalancing.src.ports.send_rebalance_signal_port import (
    SendRebalanceSignalPort,
)
from libs.shared.src.constants.dual_momentum_defaults import TAXABLE_SUBJECT_PREFIX
from libs.shared.src.dtos.rebalancing.rebalance_signal_result_dto import (
    RebalanceSignalResultDTO,
)
from libs.shared.src.dtos.rebalancing.taxable_window_dto import TaxableWindowDTO
from libs.shared.src.errors.notification_delivery_error import (
    NotificationDeliveryError,
)


class SendRebalanceSignalCommand(SendRebalanceSignalPort):
    """
    發送再平衡訊號

    - 每次執行: 發送一般再平衡 Email
    - 年度應稅帳戶窗口內: 額外發送提醒 Email
    - 評估失敗: 不發送任何 Email
    """

    @inject
    def __init__(
        self,
        evaluate: EvaluateDualMomentumPort,
        notification_gateway: NotificationGatewayPort,
        taxable_window: TaxableWindowDTO,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._evaluate = evaluate
        self._gateway = notification_gateway
        self._taxable_window = taxable_window

    async def execute(
        self, as_of: date | None = None, dry_run: bool = False
    ) -> RebalanceSignalResultDTO:
        """
        評估訊號並發送 Email

        Args:
            as_of: 計算基準日 (預設今天)
            dry_run: 只評估與記錄，不發送

        Returns:
            RebalanceSignalResultDTO: 執行結果

        Raises:
            NotificationDeliveryError: Email 發送失敗
        """
        as_of = as_of or date.today()
        result = await self._evaluate.execute(as_of=as_of)

        for line in result["report"].splitlines():
            self._logger.info(line)

        window_open = is_in_taxable_window(as_of, self._taxable_window)
        messages = [(build_subject(as_of), render_email_body(result))]
        if window_open:
            messages.append(
                (
                    build_subject(as_of, prefix=TAXABLE_SUBJECT_PREFIX),
                    render_taxable_email_body(result),
                )
            )

        sent: list[str] = []
        if dry_run:
            self._logger.info(f"Dry run: {len(messages)} email(s) not sent")
        else:
            for subject, body in messages:
                if not self._gateway.send_message(subject, body):
                    raise NotificationDeliveryError(subject)
                sent.append(subject)

        return {
            "result": result,
            "taxable_window_open": window_open,
            "dry_run": dry_run,
            "subjects": sent,
        }
