"""Authentication domain service."""

import logfire

from community.domain.value import ExternalProfile

from .base import Service


class OAuthClient:
    """Generic OAuth client interface."""

    async def initiate_authorization(self, state: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: Opaque value echoed back on the callback

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str) -> ExternalProfile:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback

        Returns:
            Profile asserted by the provider
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for external (OAuth) sign-in."""

    def __init__(self, oauth_client: OAuthClient) -> None:
        """Initialize auth service.

        Args:
            oauth_client: Provider OAuth client
        """
        self.oauth_client = oauth_client

    async def initiate_login(self, state: str) -> str:
        """Build the provider consent URL.

        Args:
            state: State parameter stored in the caller's session

        Returns:
            Authorization URL to redirect user to
        """
        with logfire.span("auth_service.initiate_login"):
            return await self.oauth_client.initiate_authorization(state)

    async def complete_login(self, code: str) -> ExternalProfile:
        """Exchange the callback code for the provider profile.

        Args:
            code: Authorization code from OAuth callback

        Returns:
            Provider profile
        """
        with logfire.span("auth_service.complete_login"):
            profile = await self.oauth_client.complete_authorization(code)
            logfire.info("OAuth profile received", external_id=profile.external_id)
            return profile
