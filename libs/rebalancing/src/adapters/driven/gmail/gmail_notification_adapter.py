"""Gmail Notification Adapter

Implements NotificationGatewayPort
Uses Gmail SMTP to send plain-text rebalance emails
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from libs.rebalancing.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)
from libs.shared.src.dtos.rebalancing.email_config_dto import EmailConfigDTO


class GmailNotificationAdapter(NotificationGatewayPort):
    """Gmail Notification Adapter

    Credentials come from EmailConfigDTO (EMAIL_FROM, EMAIL_TO, EMAIL_PASS)
    """

    SMTP_SERVER = "smtp.gmail.com"
    SMTP_PORT = 587

    def __init__(self, config: EmailConfigDTO) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._user = config["sender"]
        self._password = config["password"]
        self._recipients = list(config["recipients"])

    def send_message(self, subject: str, body: str) -> bool:
        """Send plain text message"""
        try:
            msg = MIMEMultipart()
            msg["From"] = self._user
            msg["To"] = ", ".join(self._recipients)
            msg["Subject"] = subject

            msg.attach(MIMEText(body, "plain", "utf-8"))

            with smtplib.SMTP(self.SMTP_SERVER, self.SMTP_PORT) as server:
                server.starttls()
                server.login(self._user, self._password)
                server.sendmail(self._user, self._recipients, msg.as_string())

            self._logger.info(f"Email sent: {subject}")
            return True

        except (smtplib.SMTPException, OSError) as e:
            self._logger.warning(f"Email send failed: {e}")
            return False
