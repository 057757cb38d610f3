import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MailService(Protocol):
    def send(self, subject: str, message: str) -> None:
        ...


class LocalMailService:
    """
    Заглушка почтового сервиса: вместо отправки пишет письмо в лог.
    """

    def __init__(self, mail_to: str, mail_from: str):
        self.mail_to = mail_to
        self.mail_from = mail_from

    def send(self, subject: str, message: str) -> None:
        logger.info(
            "Mail from %s to %s, with LocalMailService. Subject: %s. Message: %s",
            self.mail_from,
            self.mail_to,
            subject,
            message,
        )
