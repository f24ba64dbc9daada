"""Auth gateway: resolves the caller of a protected route."""

from fastapi import Request

from community.application.usecase.auth import (
    AuthenticateCallerRequest,
    AuthenticateCallerUseCase,
    AuthenticatedCaller,
)

SESSION_USER_KEY = "user_id"


def bearer_token(request: Request) -> str | None:
    """Extract the token from an `Authorization: Bearer <token>` header."""
    header = request.headers.get("authorization")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


async def authenticate(
    request: Request, use_case: AuthenticateCallerUseCase
) -> AuthenticatedCaller:
    """Authenticate the request by bearer token, then by session.

    Raises:
        InvalidTokenError: If a bearer token is present but invalid
        AuthenticationRequiredError: If neither credential identifies a user
    """
    return await use_case.execute(
        AuthenticateCallerRequest(
            bearer_token=bearer_token(request),
            session_user_id=request.session.get(SESSION_USER_KEY),
        )
    )
