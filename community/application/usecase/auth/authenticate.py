"""Authenticate caller use case (auth gateway)."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from community.application.usecase.base import BaseUseCase
from community.domain.error import AuthenticationRequiredError, InvalidTokenError
from community.domain.service import JWTService, UserService
from community.domain.value import UserId
from community.util.jwt import JWTError


class AuthenticateCallerRequest(BaseModel):
    """Credentials carried by a request."""

    bearer_token: str | None = None
    session_user_id: str | None = None


class AuthenticatedCaller(BaseModel):
    """Identity of the caller of a protected operation."""

    user_id: str
    username: str


class AuthenticateCallerUseCase(BaseUseCase):
    """Resolve a bearer token or server session into a caller identity."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize authenticate caller use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service (session lookups)
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(
        self, request: AuthenticateCallerRequest
    ) -> AuthenticatedCaller:
        """Authenticate the caller.

        A presented bearer token is authoritative: if it fails verification
        the session is not consulted.

        Raises:
            InvalidTokenError: If the bearer token is invalid or expired
            AuthenticationRequiredError: If neither credential identifies a user
        """
        if request.bearer_token:
            try:
                payload = self.jwt_service.verify(request.bearer_token)
            except JWTError as e:
                raise InvalidTokenError() from e
            return AuthenticatedCaller(
                user_id=payload.user_id, username=payload.username
            )

        if request.session_user_id:
            try:
                user_id = UserId(UUID(request.session_user_id))
            except ValueError:
                logfire.warn("Malformed session user id")
                raise AuthenticationRequiredError()

            user = await self.user_service.find_by_id(user_id)
            if user:
                return AuthenticatedCaller(
                    user_id=str(user.id), username=user.username.root
                )
            logfire.warn("Session refers to unknown user", user_id=str(user_id))

        raise AuthenticationRequiredError()
