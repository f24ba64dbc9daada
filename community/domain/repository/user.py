"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from community.domain.model.user import User
from community.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Uniqueness of username, email and google_id is owned by the storage
    layer: writes that collide raise UniqueViolationError naming the field.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_google_id(self, google_id: str) -> Optional[User]:
        """Find a user by their linked Google identity.

        Args:
            google_id: Google subject identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The inserted user

        Raises:
            UniqueViolationError: If username, email or google_id is taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update an existing user.

        Args:
            user: The user to update

        Returns:
            The updated user

        Raises:
            UniqueViolationError: If the change collides with another account
        """
        pass
