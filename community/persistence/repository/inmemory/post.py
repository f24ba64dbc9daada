"""In-memory post repository for testing."""

from typing import Optional

from community.domain.model.post import Post
from community.domain.repository.post import PostRepository
from community.domain.value import PostId, Slug


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by its slug."""
        for post in self._posts.values():
            if post.slug == slug:
                return post
        return None

    async def add_if_absent(self, post: Post) -> Post:
        """Insert a post unless its slug is taken."""
        existing = await self.find_by_slug(post.slug)
        if existing:
            return existing
        self._posts[post.id] = post
        return post
