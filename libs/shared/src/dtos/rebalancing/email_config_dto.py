"""Email Configuration DTO"""

from typing import TypedDict


class EmailConfigDTO(TypedDict):
    """Credentials handed through to the mail transport"""

    sender: str
    password: str
    recipients: list[str]
