"""External identity linking domain service."""

import random
import re
from uuid import uuid4

import logfire

from community.domain.error import DomainError, UniqueViolationError
from community.domain.model import User
from community.domain.model.common import utc_now
from community.domain.repository import UserRepository
from community.domain.value import ExternalProfile, UserId, Username

from .base import Service

# Attempts at inserting a generated username before giving up
MAX_USERNAME_ATTEMPTS = 20

USERNAME_BASE_LENGTH = 10
FALLBACK_USERNAME_BASE = "user"


class IdentityLinkError(DomainError):
    """Raised when an external identity cannot be resolved to an account."""

    pass


class IdentityLinkService(Service):
    """Resolves an external (Google) profile to exactly one local account.

    Resolution order, first match wins:
    1. account already linked to the external id;
    2. account with the same email, which gets the external id attached;
    3. a new passwordless account with a generated username.
    """

    def __init__(
        self, user_repository: UserRepository, rng: random.Random | None = None
    ) -> None:
        """Initialize identity link service.

        Args:
            user_repository: User repository
            rng: Random source for username suffixes
        """
        self.user_repository = user_repository
        self.rng = rng or random.Random()

    async def link(self, profile: ExternalProfile) -> User:
        """Resolve a provider profile to a local account.

        Args:
            profile: Profile asserted by the provider

        Returns:
            The linked, existing or newly created account

        Raises:
            IdentityLinkError: If no account could be resolved or created
        """
        with logfire.span(
            "identity_link_service.link", external_id=profile.external_id
        ):
            user = await self._find_existing(profile)
            if user:
                return user

            try:
                return await self._create_account(profile)
            except UniqueViolationError as e:
                # A concurrent sign-in claimed the email or external id first
                logfire.warn(
                    "Account creation raced with another sign-in", field=e.field
                )
                user = await self._find_existing(profile)
                if user:
                    return user
                raise IdentityLinkError(
                    f"Could not resolve account for {profile.external_id}"
                ) from e

    async def _find_existing(self, profile: ExternalProfile) -> User | None:
        """Apply the lookup steps (external id, then email)."""
        user = await self.user_repository.find_by_google_id(profile.external_id)
        if user:
            logfire.info("Linked account found", user_id=str(user.id))
            return user

        user = await self.user_repository.find_by_email(profile.email)
        if not user:
            return None

        linked = user.model_copy(
            update={"google_id": profile.external_id, "updated_at": utc_now()}
        )
        saved = await self.user_repository.update(linked)
        logfire.info("External identity linked to existing account", user_id=str(saved.id))
        return saved

    async def _create_account(self, profile: ExternalProfile) -> User:
        """Insert a new passwordless account, re-rolling colliding usernames.

        Raises:
            UniqueViolationError: If the email or external id collides
            IdentityLinkError: If no free username was found
        """
        base = username_base(profile.display_name)

        for attempt in range(MAX_USERNAME_ATTEMPTS):
            # First roll from a narrow range, retries from a wider one
            upper = 1000 if attempt == 0 else 10000
            candidate = f"{base}{self.rng.randrange(upper)}"

            user = User(
                id=UserId(uuid4()),
                username=Username(candidate),
                email=profile.email,
                password_hash=None,
                google_id=profile.external_id,
                created_at=utc_now(),
                updated_at=utc_now(),
            )
            try:
                saved = await self.user_repository.add(user)
            except UniqueViolationError as e:
                if e.field != "username":
                    raise
                logfire.info("Generated username taken", candidate=candidate)
                continue

            logfire.info(
                "Account created from external identity",
                user_id=str(saved.id),
                username=candidate,
            )
            return saved

        logfire.error("Username generation exhausted", base=base)
        raise IdentityLinkError(f"Could not generate a free username from {base!r}")


def username_base(display_name: str) -> str:
    """Derive the username stem from a display name.

    Whitespace is removed and the result truncated.
    """
    base = re.sub(r"\s", "", display_name or "")[:USERNAME_BASE_LENGTH]
    return base or FALLBACK_USERNAME_BASE
