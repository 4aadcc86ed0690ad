"""
Adapter: SMTP email sender.

Opens one connection per message. Upgrades to TLS when the server
offers STARTTLS, and logs in only when credentials are configured.
"""

import logging
import smtplib
from email.message import EmailMessage

from cats_api.domain.email.ports import EmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(EmailSender):
    """Sends plain-text mail from the configured account."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._timeout = timeout

    def build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._username
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)
        return message

    def send(self, to: str, subject: str, body: str) -> None:
        message = self.build_message(to, subject, body)
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
            if self._username:
                smtp.login(self._username, self._password)
            smtp.send_message(message)
        logger.info("Sent email subject=%r via %s:%d", subject, self._host, self._port)
