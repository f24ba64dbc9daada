"""JWT token domain service."""

import logfire

from community.config import AuthSettings
from community.domain.model import User
from community.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service issuing and verifying bearer credentials."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, user: User) -> str:
        """Create a signed, time-boxed token for a user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.issue", user_id=str(user.id)):
            token = create_token(str(user.id), user.username.root, self.auth_settings)
            logfire.info(
                "JWT token created", user_id=str(user.id), username=user.username.root
            )
            return token

    def verify(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
