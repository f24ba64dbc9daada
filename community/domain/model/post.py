"""Post entity.

The site serves a single discussion post; its slug marks it as the active one.
"""

from datetime import datetime

from pydantic import Field

from community.domain.model.common import DomainModel, utc_now
from community.domain.value import PostId, Slug


class Post(DomainModel):
    """The discussion topic comments attach to."""

    id: PostId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    author: str = Field(min_length=1, max_length=255)  # Display label, not a user reference
    created_at: datetime = Field(default_factory=utc_now)
