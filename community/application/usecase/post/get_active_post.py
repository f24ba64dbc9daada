"""Get active post use case."""

from datetime import datetime

from pydantic import BaseModel

from community.application.usecase.base import BaseUseCase
from community.domain.service import PostService


class GetActivePostResponse(BaseModel):
    """The discussion post as shown on the front page."""

    id: str
    title: str
    content: str
    author: str
    date: datetime


class GetActivePostUseCase(BaseUseCase):
    """Use case for reading the single discussion post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get active post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: None = None) -> GetActivePostResponse:
        """Return the active post, creating it on first read."""
        post = await self.post_service.get_active_post()
        return GetActivePostResponse(
            id=str(post.id),
            title=post.title,
            content=post.content,
            author=post.author,
            date=post.created_at,
        )
