"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.error import UniqueViolationError
from community.domain.model import User
from community.domain.repository import UserRepository
from community.domain.value import UserId
from community.persistence.mappers import (
    row_to_user,
    unique_violation_field,
    user_to_dict,
)
from community.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        stmt = select(users_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        return await self._find_one(users_table.c.email == email)

    async def find_by_google_id(self, google_id: str) -> Optional[User]:
        """Find a user by their linked Google identity."""
        return await self._find_one(users_table.c.google_id == google_id)

    async def add(self, user: User) -> User:
        """Insert a new user.

        The insert runs in a SAVEPOINT so a unique violation leaves the
        request transaction usable for a retry.

        Raises:
            UniqueViolationError: If username, email or google_id is taken
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        await self._execute_guarded(stmt)
        return user

    async def update(self, user: User) -> User:
        """Update an existing user.

        Raises:
            UniqueViolationError: If the change collides with another account
        """
        values = user_to_dict(user)
        values.pop("id")
        values.pop("created_at")
        stmt = users_table.update().where(users_table.c.id == user.id).values(**values)
        await self._execute_guarded(stmt)
        return user

    async def _execute_guarded(self, stmt) -> None:
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            field = unique_violation_field(e)
            if field is None:
                raise
            raise UniqueViolationError("User", field) from e
