"""Password login use case."""

import logfire
from pydantic import BaseModel

from community.application.usecase.base import BaseUseCase
from community.domain.error import InvalidCredentialsError
from community.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Email/password login request."""

    email: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    """Login response."""

    message: str
    token: str
    user_id: str
    username: str


class LoginUseCase(BaseUseCase):
    """Use case for signing in with an email and password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute password login.

        Unknown email, Google-only account and wrong password all fail the
        same way.

        Args:
            request: Login request

        Returns:
            Login response with a bearer token

        Raises:
            InvalidCredentialsError: If the credentials do not match an account
        """
        if not request.email or not request.password:
            raise InvalidCredentialsError()

        user = await self.user_service.find_by_email(request.email)
        if not user or not await self.user_service.verify_password(
            user, request.password
        ):
            logfire.info("Password login rejected")
            raise InvalidCredentialsError()

        token = self.jwt_service.issue(user)
        return LoginResponse(
            message="Login successful.",
            token=token,
            user_id=str(user.id),
            username=user.username.root,
        )
