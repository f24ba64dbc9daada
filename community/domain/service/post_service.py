"""Post domain service."""

from uuid import uuid4

import logfire

from community.config import DiscussionSettings
from community.domain.model.common import utc_now
from community.domain.model.post import Post
from community.domain.repository import PostRepository
from community.domain.value import PostId, Slug

from .base import Service


class PostService(Service):
    """Domain service for the discussion post."""

    def __init__(
        self, post_repository: PostRepository, discussion: DiscussionSettings
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            discussion: Settings describing the active discussion post
        """
        self.post_repository = post_repository
        self.discussion = discussion

    async def get_active_post(self) -> Post:
        """Get the active discussion post, creating it on first use.

        Concurrent first reads converge on a single row because creation is
        an insert-if-absent keyed on the unique slug.

        Returns:
            The active post
        """
        slug = Slug(self.discussion.slug)
        with logfire.span("post_service.get_active_post", slug=slug.root):
            post = await self.post_repository.find_by_slug(slug)
            if post:
                return post

            candidate = Post(
                id=PostId(uuid4()),
                slug=slug,
                title=self.discussion.title,
                content=self.discussion.content,
                author=self.discussion.author,
                created_at=utc_now(),
            )
            post = await self.post_repository.add_if_absent(candidate)
            if post.id == candidate.id:
                logfire.info("Default post created", post_id=str(post.id))
            return post

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post
