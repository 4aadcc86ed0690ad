"""
Use case: Email a registration captcha.

Input: email address
Output: None
Side effects: Stores a captcha, sends one email.
Failure cases: Mail transport errors propagate unchanged.
"""

import logging
import secrets
import string

from cats_api.domain.auth.ports import CaptchaStore
from cats_api.domain.email.ports import EmailSender

logger = logging.getLogger(__name__)

CAPTCHA_ALPHABET = string.ascii_lowercase + string.digits
CAPTCHA_LENGTH = 8
CAPTCHA_SUBJECT = "Email Captcha"


def generate_captcha(length: int = CAPTCHA_LENGTH) -> str:
    return "".join(secrets.choice(CAPTCHA_ALPHABET) for _ in range(length))


class SendEmailCaptchaUseCase:
    """Generates a captcha, remembers it, and mails it to the address."""

    def __init__(
        self, captcha_store: CaptchaStore, email_sender: EmailSender, ttl_seconds: int
    ) -> None:
        self._captcha_store = captcha_store
        self._email_sender = email_sender
        self._ttl_seconds = ttl_seconds

    def execute(self, email: str) -> None:
        captcha = generate_captcha()
        self._captcha_store.save(email, captcha, self._ttl_seconds)
        self._email_sender.send(
            email, CAPTCHA_SUBJECT, f"Your email captcha is: {captcha}"
        )
        logger.info("Sent email captcha (ttl=%ds)", self._ttl_seconds)
