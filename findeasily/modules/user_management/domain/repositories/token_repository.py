# 📄 File: findeasily/modules/user_management/domain/repositories/token_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how password reset codes are saved, looked up and thrown away
# 🧪 Purpose (Technical Summary):
# Repository interface for Token entities
# 🔗 Dependencies:
# Domain models (Token, TokenType), typing, abc
# 🔄 Connected Modules / Calls From:
# token_service.py, infrastructure implementation, test fakes

from abc import ABC, abstractmethod
from typing import Optional

from ..models.token import Token, TokenType


class TokenRepository(ABC):
    """Repository interface for Token entity data access operations."""

    @abstractmethod
    async def create(self, token: Token) -> Token:
        """Persist a token, returning it with its generated id."""

    @abstractmethod
    async def get_by_id(self, token_id: int) -> Optional[Token]:
        pass

    @abstractmethod
    async def get_by_value(self, value: str, token_type: TokenType) -> Optional[Token]:
        pass

    @abstractmethod
    async def delete_by_id(self, token_id: int) -> bool:
        """True if a token was deleted."""

    @abstractmethod
    async def delete_by_user_id(self, user_id: str, token_type: TokenType) -> int:
        """Delete every token of one type for a user, returning the count."""
