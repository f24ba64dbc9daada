"""Google sign-in use cases."""

import secrets

import logfire
from pydantic import BaseModel

from community.application.usecase.base import BaseUseCase
from community.domain.service import AuthService, IdentityLinkService, JWTService


class StartGoogleLoginResponse(BaseModel):
    """Where to send the browser, and the state to remember for the callback."""

    authorization_url: str
    state: str


class StartGoogleLoginUseCase(BaseUseCase):
    """Use case for starting the Google OAuth redirect flow."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: None = None) -> StartGoogleLoginResponse:
        """Generate a state value and build the consent URL."""
        state = secrets.token_urlsafe(32)
        url = await self.auth_service.initiate_login(state)
        return StartGoogleLoginResponse(authorization_url=url, state=state)


class GoogleLoginRequest(BaseModel):
    """Google OAuth callback parameters."""

    code: str
    state: str
    expected_state: str | None  # State stored in the caller's session


class GoogleLoginResponse(BaseModel):
    """Google login response."""

    token: str
    user_id: str
    username: str


class GoogleLoginError(Exception):
    """Raised when the callback cannot be turned into a signed-in account."""

    pass


class GoogleLoginUseCase(BaseUseCase):
    """Use case for completing Google sign-in."""

    def __init__(
        self,
        auth_service: AuthService,
        identity_link_service: IdentityLinkService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize Google login use case.

        Args:
            auth_service: Authentication domain service (OAuth exchange)
            identity_link_service: Resolves the Google profile to an account
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.identity_link_service = identity_link_service
        self.jwt_service = jwt_service

    async def execute(self, request: GoogleLoginRequest) -> GoogleLoginResponse:
        """Execute the Google callback flow.

        Steps:
        1. Check the returned state against the one stored in the session
        2. Exchange the code for the Google profile
        3. Link the profile to a local account
        4. Issue a bearer token

        Raises:
            GoogleLoginError: On state mismatch or any downstream failure
        """
        if not request.expected_state or not secrets.compare_digest(
            request.state, request.expected_state
        ):
            logfire.warn("OAuth state mismatch")
            raise GoogleLoginError("OAuth state mismatch")

        try:
            profile = await self.auth_service.complete_login(request.code)
            user = await self.identity_link_service.link(profile)
        except Exception as e:
            logfire.error("Google sign-in failed", error=str(e))
            raise GoogleLoginError(str(e)) from e

        token = self.jwt_service.issue(user)
        return GoogleLoginResponse(
            token=token, user_id=str(user.id), username=user.username.root
        )
