"""Unit tests for the Google OAuth client."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from community.adapter.google import (
    GoogleOAuthError,
    MockGoogleOAuthClient,
    RealGoogleOAuthClient,
)


@pytest.fixture
def client():
    return RealGoogleOAuthClient(
        client_id="client-123",
        client_secret="shh",
        redirect_uri="http://localhost:3000/auth/google/callback",
        scopes=["openid", "profile", "email"],
    )


def route_httpx(monkeypatch, handler):
    """Send every httpx.AsyncClient request through handler."""
    real_client = httpx.AsyncClient

    def factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", factory)


class TestRealGoogleOAuthClient:
    """Tests for RealGoogleOAuthClient."""

    @pytest.mark.asyncio
    async def test_authorization_url(self, client):
        url = await client.initiate_authorization("state-xyz")

        parsed = urlparse(url)
        params = parse_qs(parsed.query)
        assert parsed.netloc == "accounts.google.com"
        assert params["client_id"] == ["client-123"]
        assert params["state"] == ["state-xyz"]
        assert params["response_type"] == ["code"]
        assert params["scope"] == ["openid profile email"]
        assert params["redirect_uri"] == [
            "http://localhost:3000/auth/google/callback"
        ]

    @pytest.mark.asyncio
    async def test_complete_authorization_returns_profile(self, client, monkeypatch):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/token":
                assert b"code=the-code" in request.content
                return httpx.Response(200, json={"access_token": "at-1"})
            assert request.headers["authorization"] == "Bearer at-1"
            return httpx.Response(
                200,
                json={"sub": "1234", "email": "carol@gmail.com", "name": "Carol"},
            )

        route_httpx(monkeypatch, handler)

        profile = await client.complete_authorization("the-code")

        assert profile.external_id == "1234"
        assert profile.email == "carol@gmail.com"
        assert profile.display_name == "Carol"

    @pytest.mark.asyncio
    async def test_token_exchange_failure_raises(self, client, monkeypatch):
        route_httpx(
            monkeypatch, lambda request: httpx.Response(400, json={"error": "bad"})
        )

        with pytest.raises(GoogleOAuthError):
            await client.complete_authorization("the-code")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, client, monkeypatch):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        route_httpx(monkeypatch, handler)

        with pytest.raises(GoogleOAuthError):
            await client.complete_authorization("the-code")

    @pytest.mark.asyncio
    async def test_profile_without_email_raises(self, client, monkeypatch):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/token":
                return httpx.Response(200, json={"access_token": "at-1"})
            return httpx.Response(200, json={"sub": "1234"})

        route_httpx(monkeypatch, handler)

        with pytest.raises(GoogleOAuthError):
            await client.complete_authorization("the-code")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("verified", [False, "false"])
    async def test_unverified_email_raises(self, client, monkeypatch, verified):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/token":
                return httpx.Response(200, json={"access_token": "at-1"})
            return httpx.Response(
                200,
                json={"sub": "1234", "email": "bob@x.com", "email_verified": verified},
            )

        route_httpx(monkeypatch, handler)

        with pytest.raises(GoogleOAuthError, match="not verified"):
            await client.complete_authorization("the-code")


class TestMockGoogleOAuthClient:
    """Tests for MockGoogleOAuthClient."""

    @pytest.mark.asyncio
    async def test_fail_code_raises(self):
        with pytest.raises(GoogleOAuthError):
            await MockGoogleOAuthClient().complete_authorization("fail")
