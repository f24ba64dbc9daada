"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .base import Service
from .comment_service import CommentService
from .identity_link_service import IdentityLinkError, IdentityLinkService
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentService",
    "IdentityLinkError",
    "IdentityLinkService",
    "JWTService",
    "OAuthClient",
    "PostService",
    "Service",
    "UserService",
]
