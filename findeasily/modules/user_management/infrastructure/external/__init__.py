"""
External service adapters for user management (outbound mail).
"""

from .mail_sender import LoggingMailSender, MailMessage, MailSender

__all__ = ["LoggingMailSender", "MailMessage", "MailSender"]
