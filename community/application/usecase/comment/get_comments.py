"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from community.application.usecase.base import BaseUseCase
from community.domain.error import ValidationError
from community.domain.service import CommentService
from community.domain.value import PostId


class CommentItem(BaseModel):
    """Comment item in response."""

    username: str
    content: str
    date: datetime


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing a post's comments, oldest first."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        An unknown post simply has no comments.

        Raises:
            ValidationError: If the post id is not a UUID
        """
        try:
            post_id = PostId(UUID(request.post_id))
        except ValueError as e:
            raise ValidationError("Invalid post id.") from e

        comments = await self.comment_service.get_comments_for_post(post_id)
        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[
                CommentItem(
                    username=comment.author_username.root,
                    content=comment.content,
                    date=comment.created_at,
                )
                for comment in comments
            ],
        )
