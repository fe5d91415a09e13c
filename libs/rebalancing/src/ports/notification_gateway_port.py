"""通知閘道 Port"""

from typing import Protocol


class NotificationGatewayPort(Protocol):
    """通知閘道 Port (Email)"""

    def send_message(self, subject: str, body: str) -> bool:
        """發送純文字訊息

        Args:
            subject: 主旨
            body: 訊息內容

        Returns:
            bool: 是否成功發送
        """
        ...
