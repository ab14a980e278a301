# 📄 File: findeasily/modules/user_management/domain/events/handlers.py
# 🧭 Purpose (Layman Explanation):
# Handles what happens automatically after account events - sending the welcome email after
# sign-up, emailing a reset link when someone forgot their password, and confirming the change
# once the new password is set.
# 🧪 Purpose (Technical Summary):
# Asynchronous subscribers for UserEvent types, run by the event queue worker outside the
# request/response cycle, and their registration on the EventHandlerRegistry.
# 🔗 Dependencies:
# user_events.py, TokenService, MailSender, shared.events.handlers
# 🔄 Connected Modules / Calls From:
# main.py (registration at startup), shared.events.publisher (queue worker)

import logging
from typing import AsyncContextManager, Callable

from findeasily.shared.events.handlers import EventHandlerRegistry

from ...infrastructure.external.mail_sender import MailMessage, MailSender
from ..services.token_service import TokenService
from .user_events import UserEvent, UserEventType, event_summary

logger = logging.getLogger(__name__)

TokenServiceFactory = Callable[[], AsyncContextManager[TokenService]]


class UserEventSubscribers:
    """
    Mail-sending reactions to user events.

    Args:
        mail_sender: Outbound mail delivery
        token_service_factory: Opens a TokenService bound to a fresh database session
        site_url: Base URL used in mailed links
    """

    def __init__(self, mail_sender: MailSender, token_service_factory: TokenServiceFactory, site_url: str):
        self.mail_sender = mail_sender
        self.token_service_factory = token_service_factory
        self.site_url = site_url.rstrip("/")

    def register(self, registry: EventHandlerRegistry) -> None:
        registry.subscribe(UserEventType.ACCOUNT_CONFIRMATION.value, self.on_account_confirmation)
        registry.subscribe(UserEventType.PASSWORD_RESET_REQUEST.value, self.on_password_reset_request)
        registry.subscribe(UserEventType.PASSWORD_RESET_COMPLETE.value, self.on_password_reset_complete)

    async def on_account_confirmation(self, event: UserEvent) -> None:
        logger.info("Sending account confirmation", extra=event_summary(event))
        await self.mail_sender.send(MailMessage(
            to=event.email,
            subject="Welcome to FindEasily",
            body=(
                "Your FindEasily account has been created.\n\n"
                f"Sign in at {self.site_url}/login to start listing your property."
            ),
        ))

    async def on_password_reset_request(self, event: UserEvent) -> None:
        async with self.token_service_factory() as token_service:
            token = await token_service.create_password_reset_token(event.user_id)

        logger.info("Sending password reset link", extra=event_summary(event))
        await self.mail_sender.send(MailMessage(
            to=event.email,
            subject="Reset your FindEasily password",
            body=(
                "Someone asked to reset the password of your FindEasily account.\n\n"
                f"Open {self.site_url}/password/reset?token={token.value} to choose a new one. "
                f"The link expires in {token_service.expire_hours} hours.\n\n"
                "If it wasn't you, you can ignore this email."
            ),
        ))

    async def on_password_reset_complete(self, event: UserEvent) -> None:
        logger.info("Sending password reset confirmation", extra=event_summary(event))
        await self.mail_sender.send(MailMessage(
            to=event.email,
            subject="Your FindEasily password was changed",
            body=(
                "The password of your FindEasily account has just been reset.\n\n"
                "If you didn't do this, please contact us right away."
            ),
        ))
