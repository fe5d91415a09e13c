"""Notification Delivery Error"""

from libs.shared.src.errors.domain_error import DomainError


class NotificationDeliveryError(DomainError):
    """Raised when the notification gateway reports a failed send"""

    def __init__(self, subject: str) -> None:
        super().__init__(
            f"Notification could not be delivered: {subject}",
            code="NOTIFICATION_DELIVERY_FAILED",
        )
        self.subject = subject
