"""Authentication routes."""

import json
import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from community.application.usecase.auth import (
    GoogleLoginError,
    GoogleLoginRequest,
    GoogleLoginUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
    StartGoogleLoginUseCase,
)
from community.config import Settings
from community.interface.api.gateway import SESSION_USER_KEY

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

OAUTH_STATE_KEY = "oauth_state"


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create a password account.

    Example:
        POST /auth/register
        {"username": "alice", "email": "alice@x.com", "password": "secret1"}
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Sign in with email and password and receive a bearer token."""
    return await login_use_case.execute(request)


@router.get("/google")
async def google_login(
    request: Request,
    start_google_login_use_case: FromDishka[StartGoogleLoginUseCase],
) -> RedirectResponse:
    """Start Google sign-in.

    The generated state is kept in the session and checked on the callback.
    """
    response = await start_google_login_use_case.execute()
    request.session[OAUTH_STATE_KEY] = response.state
    return RedirectResponse(
        url=response.authorization_url, status_code=status.HTTP_302_FOUND
    )


@router.get("/google/callback", response_model=None)
async def google_callback(
    request: Request,
    google_login_use_case: FromDishka[GoogleLoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> HTMLResponse | RedirectResponse:
    """Handle the Google OAuth callback.

    On success the caller gets a server session and a page that hands the
    bearer token to the front-end through localStorage. Any failure
    redirects to the login form.
    """
    expected_state = request.session.pop(OAUTH_STATE_KEY, None)
    failure = RedirectResponse(
        url=settings.auth.login_failure_url, status_code=status.HTTP_302_FOUND
    )

    if error or not code or not state:
        logger.warning(f"Google callback without code (error={error})")
        return failure

    try:
        result = await google_login_use_case.execute(
            GoogleLoginRequest(code=code, state=state, expected_state=expected_state)
        )
    except GoogleLoginError as e:
        logger.warning(f"Google sign-in failed: {e}")
        return failure

    request.session[SESSION_USER_KEY] = result.user_id
    logger.info(f"Google sign-in completed for user {result.user_id}")
    return HTMLResponse(
        content=token_handoff_page(result.token, result.username, settings)
    )


def _js_string(value: str) -> str:
    # Escape "<" so the value cannot close the surrounding script element
    return json.dumps(value).replace("<", "\\u003c")


def token_handoff_page(token: str, username: str, settings: Settings) -> str:
    """Render the page that stores the credential client-side and goes home."""
    return (
        "<!DOCTYPE html><html><head><title>Signing in...</title></head><body>"
        "<script>"
        f"localStorage.setItem({_js_string(settings.auth.token_storage_key)}, "
        f"{_js_string(token)});"
        f"localStorage.setItem({_js_string(settings.auth.username_storage_key)}, "
        f"{_js_string(username)});"
        "window.location.href = '/';"
        "</script></body></html>"
    )
