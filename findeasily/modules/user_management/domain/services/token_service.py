# 📄 File: findeasily/modules/user_management/domain/services/token_service.py
# 🧭 Purpose (Layman Explanation):
# Hands out, checks and throws away the one-time codes used to reset a forgotten password.
# 🧪 Purpose (Technical Summary):
# Domain service over TokenRepository: password reset token issuing, lookup with expiry check,
# and single or per-user invalidation.
# 🔗 Dependencies:
# Token domain model, TokenRepository
# 🔄 Connected Modules / Calls From:
# Registration handler (reset page and reset submit), password reset request subscriber

import logging
from typing import Optional

from ..models.token import Token, TokenType
from ..repositories.token_repository import TokenRepository

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and invalidates single-use tokens."""

    def __init__(self, token_repository: TokenRepository, expire_hours: int = 24):
        self.token_repository = token_repository
        self.expire_hours = expire_hours

    async def create_password_reset_token(self, user_id: str) -> Token:
        token = await self.token_repository.create(
            Token.password_reset(user_id, expires_in_hours=self.expire_hours)
        )
        logger.info(f"Issued password reset token {token.id} for user {user_id}")
        return token

    async def get_valid_token(self, value: str, token_type: TokenType = TokenType.PASSWORD_RESET) -> Optional[Token]:
        """
        Look up a token by its value.

        Returns:
            The token, or None when it is unknown or expired
        """
        if not value:
            return None
        token = await self.token_repository.get_by_value(value, token_type)
        if token is None:
            return None
        if token.is_expired():
            logger.debug(f"Token {token.id} of user {token.user_id} has expired")
            return None
        return token

    async def get_by_id(self, token_id: int) -> Optional[Token]:
        return await self.token_repository.get_by_id(token_id)

    async def delete_by_id(self, token_id: int) -> bool:
        return await self.token_repository.delete_by_id(token_id)

    async def delete_all_for_user(self, user_id: str, token_type: TokenType = TokenType.PASSWORD_RESET) -> int:
        deleted = await self.token_repository.delete_by_user_id(user_id, token_type)
        logger.debug(f"Deleted {deleted} {token_type.value} tokens of user {user_id}")
        return deleted
