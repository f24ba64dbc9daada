"""Google infrastructure providers."""

from dishka import Scope, provide

from community.adapter.google import GoogleOAuthClient, RealGoogleOAuthClient
from community.config import Settings
from community.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self, settings: Settings) -> GoogleOAuthClient:
        """Provide Google OAuth client.

        Returns:
            Google OAuth 2.0 client
        """
        google = settings.auth.google
        return RealGoogleOAuthClient(
            client_id=google.client_id,
            client_secret=google.client_secret,
            redirect_uri=settings.auth.google_callback_url,
            scopes=google.scopes,
        )
