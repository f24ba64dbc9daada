"""Application layer DI providers."""

from dishka import Scope, provide

from community.application.usecase.auth import (
    AuthenticateCallerUseCase,
    GoogleLoginUseCase,
    LoginUseCase,
    RegisterUseCase,
    StartGoogleLoginUseCase,
)
from community.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from community.application.usecase.post import GetActivePostUseCase
from community.domain.service import (
    AuthService,
    CommentService,
    IdentityLinkService,
    JWTService,
    PostService,
    UserService,
)
from community.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, user_service: UserService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide password login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_start_google_login_use_case(
        self, auth_service: AuthService
    ) -> StartGoogleLoginUseCase:
        """Provide Google login start use case."""
        return StartGoogleLoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_google_login_use_case(
        self,
        auth_service: AuthService,
        identity_link_service: IdentityLinkService,
        jwt_service: JWTService,
    ) -> GoogleLoginUseCase:
        """Provide Google login callback use case."""
        return GoogleLoginUseCase(
            auth_service=auth_service,
            identity_link_service=identity_link_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_authenticate_caller_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> AuthenticateCallerUseCase:
        """Provide auth gateway use case."""
        return AuthenticateCallerUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_active_post_use_case(
        self, post_service: PostService
    ) -> GetActivePostUseCase:
        """Provide get active post use case."""
        return GetActivePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)
