# 📄 File: findeasily/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for user accounts, like creating new users, finding
# existing ones, changing passwords and saving profile details.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of the UserRepository interface with domain/model mapping.
# Writes commit immediately; unique violations are rolled back and raised as
# DuplicateResourceError, other database failures as RepositoryError.
#
# 🔗 Dependencies:
# - user_management.domain.repositories.user_repository (interface)
# - user_management.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - user_management.presentation.dependencies (per-request construction)

"""
User Repository Implementation

Provides the concrete implementation of the UserRepository interface using
SQLAlchemy and maps between domain User/UserExt entities and their models.
"""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from findeasily.modules.user_management.domain.models.user import Role, User, UserExt
from findeasily.modules.user_management.domain.repositories.user_repository import UserRepository
from findeasily.modules.user_management.infrastructure.database.models import UserExtModel, UserModel
from findeasily.shared.core.exceptions import DuplicateResourceError, RepositoryError

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the user repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Raises:
            DuplicateResourceError: If user with email already exists
            RepositoryError: For other database errors
        """
        try:
            user_model = self._domain_to_model(user)
            self._session.add(user_model)
            await self._session.commit()

            logger.info(f"Created user with ID: {user_model.id}")
            return self._model_to_domain(user_model)

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"User creation failed - email already exists: {user.email}")
            raise DuplicateResourceError(
                "Email already exists",
                resource_type="user",
                field="email",
                value=user.email
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during user creation: {str(e)}")
            raise RepositoryError(f"Failed to create user: {str(e)}", operation="create", entity_type="user") from e

    async def get_by_id(self, user_id: str) -> Optional[User]:
        try:
            user_model = await self._session.get(UserModel, str(user_id))
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {str(e)}")
            raise RepositoryError(f"Failed to retrieve user: {str(e)}", operation="get", entity_type="user") from e

        if user_model is None:
            logger.debug(f"User not found: {user_id}")
            return None
        return self._model_to_domain(user_model)

    async def get_by_email(self, email: str) -> Optional[User]:
        try:
            stmt = select(UserModel).where(UserModel.email == email.lower())
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user by email {email}: {str(e)}")
            raise RepositoryError(f"Failed to retrieve user by email: {str(e)}", operation="get", entity_type="user") from e

        if user_model is None:
            logger.debug(f"User not found by email: {email}")
            return None
        return self._model_to_domain(user_model)

    async def update(self, user: User) -> bool:
        try:
            user_model = await self._session.get(UserModel, user.id)
            if user_model is None:
                return False

            user_model.email = user.email
            user_model.password_hash = user.password_hash
            user_model.role = user.role.value
            await self._session.commit()

            logger.info(f"Updated user: {user.id}")
            return True

        except IntegrityError as e:
            await self._session.rollback()
            raise DuplicateResourceError(
                "Email already exists",
                resource_type="user",
                field="email",
                value=user.email
            ) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating user {user.id}: {str(e)}")
            raise RepositoryError(f"Failed to update user: {str(e)}", operation="update", entity_type="user") from e

    async def update_password_hash(self, user_id: str, password_hash: str) -> bool:
        try:
            stmt = (
                update(UserModel)
                .where(UserModel.id == user_id)
                .values(password_hash=password_hash)
            )
            result = await self._session.execute(stmt)
            await self._session.commit()
            return result.rowcount > 0

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating password of user {user_id}: {str(e)}")
            raise RepositoryError(f"Failed to update password: {str(e)}", operation="update", entity_type="user") from e

    async def list_all(self) -> List[User]:
        try:
            result = await self._session.execute(select(UserModel).order_by(UserModel.created_at, UserModel.email))
            return [self._model_to_domain(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Database error listing users: {str(e)}")
            raise RepositoryError(f"Failed to list users: {str(e)}", operation="list", entity_type="user") from e

    async def get_ext(self, user_id: str) -> Optional[UserExt]:
        try:
            ext_model = await self._session.get(UserExtModel, str(user_id))
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving profile of user {user_id}: {str(e)}")
            raise RepositoryError(f"Failed to retrieve profile: {str(e)}", operation="get", entity_type="user_ext") from e

        if ext_model is None:
            return None
        return UserExt(
            user_id=ext_model.user_id,
            self_introduction=ext_model.self_introduction,
            picture=ext_model.picture,
            updated_at=ext_model.updated_at,
        )

    async def save_ext(self, user_ext: UserExt) -> UserExt:
        try:
            ext_model = await self._session.get(UserExtModel, user_ext.user_id)
            if ext_model is None:
                ext_model = UserExtModel(user_id=user_ext.user_id)
                self._session.add(ext_model)

            ext_model.self_introduction = user_ext.self_introduction
            ext_model.picture = user_ext.picture
            ext_model.updated_at = user_ext.updated_at
            await self._session.commit()

            logger.debug(f"Saved profile of user {user_ext.user_id}")
            return user_ext

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error saving profile of user {user_ext.user_id}: {str(e)}")
            raise RepositoryError(f"Failed to save profile: {str(e)}", operation="save", entity_type="user_ext") from e

    # =========================================================================
    # MAPPING
    # =========================================================================

    @staticmethod
    def _domain_to_model(user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            created_at=user.created_at,
        )

    @staticmethod
    def _model_to_domain(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            role=Role(model.role),
            created_at=model.created_at,
        )
