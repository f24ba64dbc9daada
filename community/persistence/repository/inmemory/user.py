"""In-memory user repository for testing."""

from typing import Optional

from community.domain.error import UniqueViolationError
from community.domain.model.user import User
from community.domain.repository.user import UserRepository
from community.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same unique fields as the database schema.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_google_id(self, google_id: str) -> Optional[User]:
        """Find a user by their linked Google identity."""
        for user in self._users.values():
            if user.google_id == google_id:
                return user
        return None

    async def add(self, user: User) -> User:
        """Insert a new user."""
        self._check_unique(user)
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        """Update an existing user."""
        self._check_unique(user)
        self._users[user.id] = user
        return user

    def _check_unique(self, user: User) -> None:
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.username == user.username:
                raise UniqueViolationError("User", "username")
            if other.email == user.email:
                raise UniqueViolationError("User", "email")
            if user.google_id and other.google_id == user.google_id:
                raise UniqueViolationError("User", "google_id")
