"""Unit tests for IdentityLinkService."""

import random

import pytest

from community.domain.error import UniqueViolationError
from community.domain.model import User
from community.domain.service import IdentityLinkError, IdentityLinkService
from community.domain.service.identity_link_service import (
    MAX_USERNAME_ATTEMPTS,
    username_base,
)
from community.domain.value import ExternalProfile, Username
from community.persistence.repository.inmemory import InMemoryUserRepository
from tests.factories import make_user


class FixedRandom(random.Random):
    """Random source returning a scripted sequence of values."""

    def __init__(self, values: list[int]):
        super().__init__()
        self.values = list(values)
        self.calls: list[int] = []

    def randrange(self, upper):  # type: ignore[override]
        self.calls.append(upper)
        return self.values.pop(0)


def profile(
    external_id: str = "google-123",
    email: str = "carol@gmail.com",
    display_name: str = "Carol Smith",
) -> ExternalProfile:
    return ExternalProfile(
        external_id=external_id, email=email, display_name=display_name
    )


class TestUsernameBase:
    """Tests for username_base()."""

    def test_removes_whitespace_and_truncates(self):
        assert username_base("Carol Ann Smithson") == "CarolAnnSm"

    def test_falls_back_when_empty(self):
        assert username_base("   ") == "user"
        assert username_base("") == "user"


class TestLink:
    """Tests for IdentityLinkService.link()."""

    @pytest.mark.asyncio
    async def test_creates_passwordless_account_for_new_identity(self):
        repo = InMemoryUserRepository()
        service = IdentityLinkService(repo, rng=FixedRandom([42]))

        user = await service.link(profile())

        assert user.username.root == "CarolSmith42"
        assert user.email == "carol@gmail.com"
        assert user.google_id == "google-123"
        assert user.password_hash is None
        assert await repo.find_by_google_id("google-123") == user

    @pytest.mark.asyncio
    async def test_first_suffix_is_drawn_below_one_thousand(self):
        rng = FixedRandom([7])
        service = IdentityLinkService(InMemoryUserRepository(), rng=rng)

        await service.link(profile())

        assert rng.calls == [1000]

    @pytest.mark.asyncio
    async def test_is_idempotent_per_external_id(self):
        """Linking the same identity twice resolves to the same account."""
        repo = InMemoryUserRepository()
        service = IdentityLinkService(repo)

        first = await service.link(profile())
        second = await service.link(profile(display_name="Renamed"))

        assert first.id == second.id

    @pytest.mark.asyncio
    async def test_links_existing_password_account_by_email(self):
        """A password account with the same email gains the Google identity."""
        repo = InMemoryUserRepository()
        existing = make_user("carol", email="carol@gmail.com")
        await repo.add(existing)
        service = IdentityLinkService(repo)

        user = await service.link(profile())

        assert user.id == existing.id
        assert user.google_id == "google-123"
        assert user.password_hash == existing.password_hash
        stored = await repo.find_by_id(existing.id)
        assert stored.google_id == "google-123"

    @pytest.mark.asyncio
    async def test_rerolls_suffix_from_wider_range_on_username_collision(self):
        repo = InMemoryUserRepository()
        await repo.add(make_user("CarolSmith5", email="other@x.com"))
        rng = FixedRandom([5, 1234])
        service = IdentityLinkService(repo, rng=rng)

        user = await service.link(profile())

        assert user.username.root == "CarolSmith1234"
        assert rng.calls == [1000, 10000]

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        repo = InMemoryUserRepository()
        await repo.add(make_user("CarolSmith1", email="other@x.com"))
        service = IdentityLinkService(
            repo, rng=FixedRandom([1] * MAX_USERNAME_ATTEMPTS)
        )

        with pytest.raises(IdentityLinkError):
            await service.link(profile())

    @pytest.mark.asyncio
    async def test_concurrent_creation_resolves_to_winner(self):
        """If another sign-in inserts the same identity first, return that account."""

        class RacingRepository(InMemoryUserRepository):
            def __init__(self):
                super().__init__()
                self.winner: User | None = None

            async def add(self, user: User) -> User:
                if self.winner is None:
                    # Simulate the other request committing between lookup and insert
                    self.winner = user.model_copy(
                        update={"username": Username("winner")}
                    )
                    self._users[self.winner.id] = self.winner
                return await super().add(user)

        repo = RacingRepository()
        service = IdentityLinkService(repo)

        user = await service.link(profile())

        assert user.id == repo.winner.id
        assert len(repo._users) == 1

    @pytest.mark.asyncio
    async def test_non_username_violation_without_match_fails(self):
        """A constraint hit that lookups cannot explain is an error."""

        class BrokenRepository(InMemoryUserRepository):
            async def add(self, user: User) -> User:
                raise UniqueViolationError("User", "email")

        service = IdentityLinkService(BrokenRepository())

        with pytest.raises(IdentityLinkError):
            await service.link(profile())
