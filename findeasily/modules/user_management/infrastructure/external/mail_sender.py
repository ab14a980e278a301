# 📄 File: findeasily/modules/user_management/infrastructure/external/mail_sender.py
# 🧭 Purpose (Layman Explanation):
# The site's letter writer. It knows how to "send" an email; the default version simply writes
# the email into the log so nothing leaves the machine.
# 🧪 Purpose (Technical Summary):
# MailSender interface plus the default LoggingMailSender used by the user event subscribers.
# 🔗 Dependencies:
# shared.utils.logging, dataclasses, abc
# 🔄 Connected Modules / Calls From:
# user_management.domain.events.handlers, main.py (construction)

from abc import ABC, abstractmethod
from dataclasses import dataclass

from findeasily.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MailMessage:
    to: str
    subject: str
    body: str


class MailSender(ABC):
    """Outbound mail delivery."""

    @abstractmethod
    async def send(self, message: MailMessage) -> None:
        """Deliver a message, raising on failure."""


class LoggingMailSender(MailSender):
    """Writes outgoing mail to the application log instead of delivering it."""

    async def send(self, message: MailMessage) -> None:
        logger.info(
            f"Mail to {message.to}: {message.subject}",
            mail_to=message.to,
            mail_subject=message.subject,
            mail_body=message.body,
        )
