"""Comment domain service."""

from uuid import uuid4

import logfire

from community.domain.model.comment import Comment
from community.domain.model.common import utc_now
from community.domain.repository import CommentRepository
from community.domain.value import CommentId, PostId, UserId, Username

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        author_username: Username,
        content: str,
    ) -> Comment:
        """Create a comment on a post.

        Args:
            post_id: Post ID (must exist)
            author_id: Author user ID (must exist)
            author_username: Author's username, stored as a snapshot
            content: Comment body

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                author_username=author_username,
                content=content,
                created_at=utc_now(),
            )

            saved = await self.comment_repository.add(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                author_username=author_username.root,
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Comments in ascending creation order
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments
