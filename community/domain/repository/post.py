"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from community.domain.model.post import Post
from community.domain.value import PostId, Slug


class PostRepository(ABC):
    """Repository for Post entity."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by its slug.

        Args:
            slug: The post's unique slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def add_if_absent(self, post: Post) -> Post:
        """Insert a post unless one with the same slug already exists.

        Args:
            post: Candidate post

        Returns:
            The stored post for that slug: the candidate if it was inserted,
            otherwise the row that was already there
        """
        pass
