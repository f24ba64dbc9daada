"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.model import Post
from community.domain.repository import PostRepository
from community.domain.value import PostId, Slug
from community.persistence.mappers import post_to_dict, row_to_post
from community.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by its slug."""
        stmt = select(posts_table).where(posts_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def add_if_absent(self, post: Post) -> Post:
        """Insert a post unless its slug is taken, then return the stored row."""
        stmt = (
            insert(posts_table)
            .values(**post_to_dict(post))
            .on_conflict_do_nothing(index_elements=[posts_table.c.slug])
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_slug(post.slug) or post
