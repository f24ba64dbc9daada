"""Google OAuth 2.0 client implementation.

Authorization Code flow for a confidential (server-side) client.
"""

from urllib.parse import urlencode

import httpx
import logfire

from community.adapter.error import ProviderError
from community.domain.service.auth_service import OAuthClient
from community.domain.value import ExternalProfile


class GoogleOAuthError(ProviderError):
    """Google OAuth error."""

    pass


class GoogleOAuthClient(OAuthClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client."""

    authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
    token_url = "https://oauth2.googleapis.com/token"
    user_info_url = "https://openidconnect.googleapis.com/v1/userinfo"

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        scopes: list[str],
        timeout: float = 30.0,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Callback URL registered in the Google console
            scopes: Scopes requested on the consent screen
            timeout: HTTP timeout in seconds
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scopes = scopes
        self.timeout = timeout

    async def initiate_authorization(self, state: str) -> str:
        """Build the Google consent URL.

        Args:
            state: State parameter echoed back on the callback

        Returns:
            Authorization URL to redirect user to
        """
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": " ".join(self.scopes),
            "state": state,
        }

        logfire.info(
            "Google OAuth authorization initiated", redirect_uri=self.redirect_uri
        )

        return f"{self.authorize_url}?{urlencode(params)}"

    async def complete_authorization(self, code: str) -> ExternalProfile:
        """Exchange the authorization code and read the user's profile.

        Args:
            code: Authorization code from Google callback

        Returns:
            Profile asserted by Google

        Raises:
            GoogleOAuthError: If any step of the exchange fails
        """
        access_token = await self._exchange_code_for_token(code)
        user_info = await self._get_user_info(access_token)

        if not user_info.get("sub") or not user_info.get("email"):
            raise GoogleOAuthError("Google profile is missing an id or email")

        # Accounts are linked by email; unverified addresses are refused
        if user_info.get("email_verified") in (False, "false"):
            logfire.warn("Google email not verified", external_id=user_info["sub"])
            raise GoogleOAuthError("Google account email is not verified")

        logfire.info("Google OAuth completed", external_id=user_info["sub"])

        return ExternalProfile(
            external_id=user_info["sub"],
            email=user_info["email"],
            display_name=user_info.get("name") or "",
        )

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Raises:
            GoogleOAuthError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.token_url, data=data)
        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Google token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleOAuthError(f"Token exchange failed: {response.status_code}")

        access_token = response.json().get("access_token")
        if not access_token:
            raise GoogleOAuthError("Token response did not include an access token")
        return access_token

    async def _get_user_info(self, access_token: str) -> dict:
        """Get user information from the OpenID Connect userinfo endpoint.

        Raises:
            GoogleOAuthError: If the request fails
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logfire.error("Google user info HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Google user info request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleOAuthError(f"User info request failed: {response.status_code}")

        return response.json()


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    Returns deterministic test data without making real API calls. The
    authorization code "fail" simulates a rejected exchange.
    """

    def __init__(self, profile: ExternalProfile | None = None):
        """Initialize mock client with the profile it will return."""
        self.profile = profile or ExternalProfile(
            external_id="google-mock-123",
            email="mock.user@gmail.com",
            display_name="Mock Google User",
        )

    async def initiate_authorization(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://accounts.google.com/o/oauth2/v2/auth?state={state}&mock=true"

    async def complete_authorization(self, code: str) -> ExternalProfile:
        """Return the configured profile."""
        if code == "fail":
            raise GoogleOAuthError("Mock token exchange failed")
        return self.profile
