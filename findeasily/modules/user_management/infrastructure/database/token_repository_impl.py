# 📄 File: findeasily/modules/user_management/infrastructure/database/token_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds and deletes the password reset codes in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of the TokenRepository interface.
#
# 🔗 Dependencies:
# - user_management.domain.repositories.token_repository (interface)
# - user_management.infrastructure.database.models (TokenModel)
#
# 🔄 Connected Modules / Calls From:
# - user_management.presentation.dependencies, password reset request subscriber (via main.py)

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from findeasily.modules.user_management.domain.models.token import Token, TokenType
from findeasily.modules.user_management.domain.repositories.token_repository import TokenRepository
from findeasily.modules.user_management.infrastructure.database.models import TokenModel
from findeasily.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class SQLAlchemyTokenRepository(TokenRepository):
    """SQLAlchemy implementation of the TokenRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, token: Token) -> Token:
        try:
            model = TokenModel(
                user_id=token.user_id,
                value=token.value,
                type=token.type.value,
                expires_at=token.expires_at,
                created_at=token.created_at,
            )
            self._session.add(model)
            await self._session.commit()
            return self._model_to_domain(model)
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error creating token for user {token.user_id}: {str(e)}")
            raise RepositoryError(f"Failed to create token: {str(e)}", operation="create", entity_type="token") from e

    async def get_by_id(self, token_id: int) -> Optional[Token]:
        model = await self._session.get(TokenModel, token_id)
        return self._model_to_domain(model) if model else None

    async def get_by_value(self, value: str, token_type: TokenType) -> Optional[Token]:
        stmt = select(TokenModel).where(
            TokenModel.value == value,
            TokenModel.type == token_type.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def delete_by_id(self, token_id: int) -> bool:
        try:
            result = await self._session.execute(delete(TokenModel).where(TokenModel.id == token_id))
            await self._session.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error deleting token {token_id}: {str(e)}")
            raise RepositoryError(f"Failed to delete token: {str(e)}", operation="delete", entity_type="token") from e

    async def delete_by_user_id(self, user_id: str, token_type: TokenType) -> int:
        try:
            result = await self._session.execute(
                delete(TokenModel).where(
                    TokenModel.user_id == user_id,
                    TokenModel.type == token_type.value,
                )
            )
            await self._session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error deleting tokens of user {user_id}: {str(e)}")
            raise RepositoryError(f"Failed to delete tokens: {str(e)}", operation="delete", entity_type="token") from e

    @staticmethod
    def _model_to_domain(model: TokenModel) -> Token:
        return Token(
            id=model.id,
            user_id=model.user_id,
            value=model.value,
            type=TokenType(model.type),
            expires_at=model.expires_at,
            created_at=model.created_at,
        )
