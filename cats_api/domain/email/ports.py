"""
Port interfaces for outbound mail.
"""

from abc import ABC, abstractmethod


class EmailSender(ABC):
    """Port for sending plain-text email."""

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> None:
        raise NotImplementedError
