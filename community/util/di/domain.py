"""Domain layer DI providers."""

from dishka import Scope, provide

from community.adapter.google import GoogleOAuthClient
from community.config import AuthSettings, DiscussionSettings
from community.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from community.domain.service import (
    AuthService,
    CommentService,
    IdentityLinkService,
    JWTService,
    PostService,
    UserService,
)
from community.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, google_oauth_client: GoogleOAuthClient) -> AuthService:
        """Provide authentication domain service backed by Google."""
        return AuthService(oauth_client=google_oauth_client)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_identity_link_service(
        self, user_repository: UserRepository
    ) -> IdentityLinkService:
        """Provide external identity linking service."""
        return IdentityLinkService(user_repository=user_repository)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, discussion: DiscussionSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, discussion=discussion)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)
