"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from community.application.usecase.base import BaseUseCase
from community.domain.error import AuthenticationRequiredError, ValidationError
from community.domain.service import CommentService, PostService, UserService
from community.domain.value import PostId, UserId

MISSING_FIELDS_MESSAGE = "Missing postId or comment content."


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str | None = None  # UUID string
    content: str | None = None
    author_id: str  # User ID from the authenticated caller


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    message: str
    comment_id: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a comment on the discussion post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate required fields
        2. Verify post exists
        3. Load the author to snapshot the current username
        4. Create comment via comment service

        Raises:
            ValidationError: If a field is missing or the post does not exist
            AuthenticationRequiredError: If the caller's account no longer exists
        """
        content = request.content or ""
        if not request.post_id or not content.strip():
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        try:
            post_id = PostId(UUID(request.post_id))
        except ValueError as e:
            raise ValidationError("Invalid postId.") from e

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise ValidationError("Post not found.")

        author = await self.user_service.find_by_id(UserId(UUID(request.author_id)))
        if not author:
            raise AuthenticationRequiredError()

        try:
            comment = await self.comment_service.create_comment(
                post_id=post.id,
                author_id=author.id,
                author_username=author.username,
                content=content,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        return CreateCommentResponse(
            message="Comment posted successfully.", comment_id=str(comment.id)
        )
