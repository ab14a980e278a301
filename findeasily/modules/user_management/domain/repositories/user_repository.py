# 📄 File: findeasily/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find and update user accounts and profiles without
# specifying the actual database technology
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for User and UserExt entities following
# the Repository pattern and dependency inversion principle
# 🔗 Dependencies:
# Domain models (User, UserExt), typing, abc
# 🔄 Connected Modules / Calls From:
# user_service.py, infrastructure implementation, test fakes

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.user import User, UserExt


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Methods return domain entities, not database models
    - Write methods commit their own transaction
    - Uniqueness violations surface as DuplicateResourceError
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Raises:
            DuplicateResourceError: If the email is already taken
            RepositoryError: If database operation fails
        """

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID, None when absent."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address, None when absent."""

    @abstractmethod
    async def update(self, user: User) -> bool:
        """
        Persist changed fields of an existing user.

        Returns:
            True if a row was updated
        """

    @abstractmethod
    async def update_password_hash(self, user_id: str, password_hash: str) -> bool:
        """Replace the stored password hash, True if a row was updated."""

    @abstractmethod
    async def list_all(self) -> List[User]:
        """All users, oldest first."""

    @abstractmethod
    async def get_ext(self, user_id: str) -> Optional[UserExt]:
        """Get the profile extension of a user, None when never saved."""

    @abstractmethod
    async def save_ext(self, user_ext: UserExt) -> UserExt:
        """Insert or update the profile extension of a user."""
