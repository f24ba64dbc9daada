"""Unit tests for the Google sign-in use cases."""

import pytest

from community.application.usecase.auth import (
    GoogleLoginError,
    GoogleLoginRequest,
    GoogleLoginUseCase,
    StartGoogleLoginUseCase,
)
from community.domain.repository import UserRepository
from community.domain.service import JWTService
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestStartGoogleLogin:
    """Tests for StartGoogleLoginUseCase."""

    @pytest.mark.asyncio
    async def test_returns_url_carrying_fresh_state(self, unit_env):
        use_case = await unit_env.get(StartGoogleLoginUseCase)

        first = await use_case.execute()
        second = await use_case.execute()

        assert f"state={first.state}" in first.authorization_url
        assert first.state != second.state


class TestGoogleLogin:
    """Tests for GoogleLoginUseCase."""

    @pytest.mark.asyncio
    async def test_new_google_user_gets_account_and_token(self, unit_env):
        use_case = await unit_env.get(GoogleLoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)

        response = await use_case.execute(
            GoogleLoginRequest(code="ok", state="s1", expected_state="s1")
        )

        assert response.username.startswith("MockGoogle")
        assert jwt_service.verify(response.token).user_id == response.user_id
        user = await user_repo.find_by_google_id("google-mock-123")
        assert user is not None
        assert str(user.id) == response.user_id

    @pytest.mark.asyncio
    async def test_existing_email_account_is_linked(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        existing = await user_repo.add(
            make_user("mockuser", email="mock.user@gmail.com")
        )
        use_case = await unit_env.get(GoogleLoginUseCase)

        response = await use_case.execute(
            GoogleLoginRequest(code="ok", state="s1", expected_state="s1")
        )

        assert response.user_id == str(existing.id)
        assert response.username == "mockuser"

    @pytest.mark.asyncio
    async def test_state_mismatch_fails(self, unit_env):
        use_case = await unit_env.get(GoogleLoginUseCase)

        with pytest.raises(GoogleLoginError):
            await use_case.execute(
                GoogleLoginRequest(code="ok", state="s1", expected_state="s2")
            )

    @pytest.mark.asyncio
    async def test_missing_session_state_fails(self, unit_env):
        use_case = await unit_env.get(GoogleLoginUseCase)

        with pytest.raises(GoogleLoginError):
            await use_case.execute(
                GoogleLoginRequest(code="ok", state="s1", expected_state=None)
            )

    @pytest.mark.asyncio
    async def test_provider_failure_fails(self, unit_env):
        use_case = await unit_env.get(GoogleLoginUseCase)

        with pytest.raises(GoogleLoginError):
            await use_case.execute(
                GoogleLoginRequest(code="fail", state="s1", expected_state="s1")
            )
