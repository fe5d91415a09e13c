"""通知閘道 Fake Adapter"""

from datetime import datetime

from libs.rebalancing.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)
from libs.shared.src.dtos.event.notification_message_dto import NotificationMessageDTO


class NotificationGatewayFakeAdapter(NotificationGatewayPort):
    """通知閘道 Fake"""

    def __init__(self) -> None:
        self._sent_messages: list[NotificationMessageDTO] = []
        self._should_fail = False

    def set_should_fail(self, should_fail: bool) -> None:
        self._should_fail = should_fail

    def send_message(self, subject: str, body: str) -> bool:
        if self._should_fail:
            return False
        self._sent_messages.append(
            {
                "subject": subject,
                "body": body,
                "timestamp": datetime.now().isoformat(),
            }
        )
        return True

    def get_sent_messages(self) -> list[NotificationMessageDTO]:
        return self._sent_messages
