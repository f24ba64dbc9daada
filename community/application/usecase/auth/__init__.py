"""Authentication use cases."""

from .authenticate import (
    AuthenticateCallerRequest,
    AuthenticateCallerUseCase,
    AuthenticatedCaller,
)
from .google_login import (
    GoogleLoginError,
    GoogleLoginRequest,
    GoogleLoginResponse,
    GoogleLoginUseCase,
    StartGoogleLoginResponse,
    StartGoogleLoginUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "AuthenticateCallerRequest",
    "AuthenticateCallerUseCase",
    "AuthenticatedCaller",
    "GoogleLoginError",
    "GoogleLoginRequest",
    "GoogleLoginResponse",
    "GoogleLoginUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
    "StartGoogleLoginResponse",
    "StartGoogleLoginUseCase",
]
