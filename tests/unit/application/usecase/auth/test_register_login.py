"""Unit tests for RegisterUseCase and LoginUseCase."""

import pytest

from community.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from community.domain.error import ConflictError, InvalidCredentialsError
from community.domain.repository import UserRepository
from community.domain.service import JWTService
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_success_message(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)

        response = await use_case.execute(
            RegisterRequest(username="alice", email="alice@x.com", password="secret1")
        )

        assert response.message == "Registration successful! You can now log in."
        assert response.username == "alice"

    @pytest.mark.asyncio
    async def test_register_twice_conflicts(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)
        request = RegisterRequest(
            username="alice", email="alice@x.com", password="secret1"
        )
        await use_case.execute(request)

        with pytest.raises(ConflictError):
            await use_case.execute(request)


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_valid_credentials(self, unit_env):
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        await register.execute(
            RegisterRequest(username="alice", email="alice@x.com", password="secret1")
        )

        response = await login.execute(
            LoginRequest(email="alice@x.com", password="secret1")
        )

        assert response.message == "Login successful."
        assert response.username == "alice"
        payload = jwt_service.verify(response.token)
        assert payload.username == "alice"
        assert payload.user_id == response.user_id

    @pytest.mark.asyncio
    async def test_wrong_password_is_rejected(self, unit_env):
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(
            RegisterRequest(username="alice", email="alice@x.com", password="secret1")
        )

        with pytest.raises(InvalidCredentialsError, match="Invalid credentials."):
            await login.execute(LoginRequest(email="alice@x.com", password="wrong!!"))

    @pytest.mark.asyncio
    async def test_unknown_email_is_rejected(self, unit_env):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(email="nobody@x.com", password="secret1"))

    @pytest.mark.asyncio
    async def test_google_only_account_cannot_use_password_login(self, unit_env):
        """Fails the same way as a wrong password."""
        user_repo = await unit_env.get(UserRepository)
        await user_repo.add(
            make_user("carol", email="carol@gmail.com", password_hash=None, google_id="g-1")
        )
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError, match="Invalid credentials."):
            await login.execute(LoginRequest(email="carol@gmail.com", password="secret1"))

    @pytest.mark.asyncio
    async def test_missing_fields_are_rejected(self, unit_env):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(email="alice@x.com"))
