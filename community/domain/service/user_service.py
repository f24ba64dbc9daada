"""User domain service (credential store)."""

from uuid import uuid4

import logfire

from community.config import AuthSettings
from community.domain.error import (
    ConflictError,
    NotFoundError,
    UniqueViolationError,
    ValidationError,
)
from community.domain.model import User
from community.domain.model.common import utc_now
from community.domain.repository import UserRepository
from community.domain.value import UserId, Username
from community.util.password import check_password_async, hash_password_async

from .base import Service


class UserService(Service):
    """Domain service for local accounts and password credentials."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (password policy)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self, username: str | None, email: str | None, password: str | None
    ) -> User:
        """Create a password account.

        The password is hashed before it reaches the repository. Uniqueness
        is decided by the insert itself, not by a prior lookup.

        Args:
            username: Desired username
            email: Email address
            password: Plaintext password

        Returns:
            The created user

        Raises:
            ValidationError: If a field is missing or the password is too short
            ConflictError: If the username or email is already in use
        """
        username = (username or "").strip()
        email = (email or "").strip()
        if not username or not email or not password:
            raise ValidationError("Missing required fields.")
        if len(password) < self.auth_settings.password_min_length:
            raise ValidationError(
                f"Password must be at least {self.auth_settings.password_min_length} characters."
            )

        with logfire.span("user_service.register", username=username):
            try:
                user = User(
                    id=UserId(uuid4()),
                    username=Username(username),
                    email=email,
                    password_hash=await hash_password_async(password),
                    google_id=None,
                    created_at=utc_now(),
                    updated_at=utc_now(),
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            try:
                saved = await self.user_repository.add(user)
            except UniqueViolationError as e:
                logfire.warn("Registration conflict", field=e.field)
                raise ConflictError("Username or email already in use.") from e

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def find_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.find_by_email"):
            return await self.user_repository.find_by_email(email.strip())

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if it does not exist."""
        return await self.user_repository.find_by_id(user_id)

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def verify_password(self, user: User, password: str) -> bool:
        """Check a plaintext password against the user's stored hash.

        Google-only accounts have no hash and never match.

        Args:
            user: Account to check
            password: Plaintext password

        Returns:
            True if the password matches
        """
        if not user.has_password or not password:
            return False
        with logfire.span("user_service.verify_password", user_id=str(user.id)):
            return await check_password_async(user.password_hash, password)
