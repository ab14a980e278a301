"""
Rate limiting for FindEasily.
Provides the shared slowapi Limiter used on the abuse-prone public endpoints
(sign up, sign in, password reset requests).
"""

import logging

from slowapi import Limiter
from slowapi.util import get_remote_address

from ..config.settings import get_settings

logger = logging.getLogger(__name__)


def _create_limiter() -> Limiter:
    settings = get_settings()
    if not settings.RATE_LIMIT_ENABLED:
        logger.info("Rate limiting disabled")
    # in-memory storage, limits are per process
    return Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


limiter = _create_limiter()


# Limits are read when a request is checked so they follow the active settings
def signup_limit() -> str:
    return get_settings().SIGNUP_RATE_LIMIT


def login_limit() -> str:
    return get_settings().LOGIN_RATE_LIMIT


def password_reset_limit() -> str:
    return get_settings().PASSWORD_RESET_RATE_LIMIT
