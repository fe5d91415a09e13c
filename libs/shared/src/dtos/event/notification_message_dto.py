"""Notification Message DTO"""

from typing import TypedDict


class NotificationMessageDTO(TypedDict):
    """Notification message

    Email recorded by the in-memory notification gateway
    """

    subject: str
    body: str
    timestamp: str  # ISO 8601, time the message was recorded
