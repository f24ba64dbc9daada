"""Test harness for integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
Integration tests assume PostgreSQL is reachable at DATABASE__URL with
migrations applied.
"""

import pytest_asyncio
from fastapi import FastAPI

from community.interface.api.app import create_app
from community.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_register(unit_env):
            service = await unit_env.get(UserService)
            user = await service.register("alice", "alice@x.com", "secret1")
            assert user.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_test_app(unmock: set[Component] | None = None) -> FastAPI:
    """Build an application wired to a fresh test container.

    Mocked persistence is APP-scoped, so state is shared across the requests
    made against one app and discarded with it.
    """
    return create_app(container=build_test_container(unmock=unmock or set()))
