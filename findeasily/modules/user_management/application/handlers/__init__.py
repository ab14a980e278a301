"""
User management request handlers.
"""

from .account_handler import AccountRequestHandler
from .registration_handler import (
    RegistrationRequestHandler,
    SESSION_TOKEN_ID_KEY,
    SESSION_USER_ID_KEY,
)

__all__ = [
    "AccountRequestHandler",
    "RegistrationRequestHandler",
    "SESSION_TOKEN_ID_KEY",
    "SESSION_USER_ID_KEY",
]
