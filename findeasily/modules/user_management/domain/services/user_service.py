# 📄 File: findeasily/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the business rules for user accounts - creating them, looking them up,
# changing passwords and keeping the short profile bio and picture up to date.
# 🧪 Purpose (Technical Summary):
# Domain service implementing user management operations over the UserRepository, hashing
# passwords through the PasswordEncoder and separating uniqueness conflicts from other
# persistence failures.
# 🔗 Dependencies:
# User domain models, UserRepository, PasswordEncoder, shared exceptions
# 🔄 Connected Modules / Calls From:
# Account and registration request handlers, login, event subscribers

import logging
from datetime import datetime, timezone
from typing import List, Optional

from findeasily.shared.core.exceptions import DuplicateResourceError, RepositoryError
from findeasily.shared.core.security import PasswordEncoder

from ..models.user import Role, User, UserExt
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Domain service for user management business logic.
    """

    def __init__(self, user_repository: UserRepository, password_encoder: PasswordEncoder):
        self.user_repository = user_repository
        self.password_encoder = password_encoder

    # =========================================================================
    # USER CREATION AND LOOKUP
    # =========================================================================

    async def create(self, email: str, password: str, role: Role = Role.USER) -> Optional[User]:
        """
        Create a new user.

        Args:
            email: Email address, normalized to lower case
            password: Plaintext password, hashed before storage
            role: Role of the new account

        Returns:
            User: Created user, or None when persistence failed for a reason
            other than a duplicate email

        Raises:
            DuplicateResourceError: If the email is already taken
        """
        user = User(
            email=email,
            password_hash=self.password_encoder.encode(password),
            role=role,
        )
        try:
            created = await self.user_repository.create(user)
        except DuplicateResourceError:
            raise
        except RepositoryError as e:
            logger.error(f"Failed to create user {user.email}: {e.message}")
            return None

        logger.info(f"Created user {created.id} with role {created.role.value}")
        return created

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None
        return await self.user_repository.get_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        if not email or not email.strip():
            return None
        return await self.user_repository.get_by_email(email.strip().lower())

    async def list_users(self) -> List[User]:
        return await self.user_repository.list_all()

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user when the password matches the stored hash."""
        user = await self.get_user_by_email(email)
        if user is None or not self.password_encoder.matches(password, user.password_hash):
            return None
        return user

    # =========================================================================
    # UPDATES
    # =========================================================================

    async def update_by_id(self, user: User) -> bool:
        """Persist a modified user, True on success."""
        try:
            return await self.user_repository.update(user)
        except RepositoryError as e:
            logger.error(f"Failed to update user {user.id}: {e.message}")
            return False

    async def update_password(self, user_id: str, raw_password: str) -> bool:
        """Hash and store a new password, True on success."""
        try:
            updated = await self.user_repository.update_password_hash(
                user_id, self.password_encoder.encode(raw_password)
            )
        except RepositoryError as e:
            logger.error(f"Failed to update password of user {user_id}: {e.message}")
            return False

        if updated:
            logger.info(f"Password updated for user {user_id}")
        return updated

    async def get_user_ext(self, user_id: str) -> Optional[UserExt]:
        return await self.user_repository.get_ext(user_id)

    async def update_self_intro(
        self,
        user_id: str,
        self_introduction: Optional[str],
        picture: Optional[str] = None
    ) -> UserExt:
        """
        Update the bio and, when given, the stored picture path.

        An existing picture is kept when no new one is supplied.
        """
        user_ext = await self.user_repository.get_ext(user_id) or UserExt(user_id=user_id)
        user_ext.self_introduction = self_introduction
        if picture:
            user_ext.picture = picture
        user_ext.updated_at = datetime.now(timezone.utc)
        return await self.user_repository.save_ext(user_ext)
