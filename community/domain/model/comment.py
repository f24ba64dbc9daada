"""Comment entity."""

from datetime import datetime

from pydantic import Field

from community.domain.model.common import DomainModel, utc_now
from community.domain.value import CommentId, PostId, UserId, Username


class Comment(DomainModel):
    """Reply to the discussion post.

    author_username is a snapshot taken at write time and is not kept in
    sync with later username changes.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_username: Username
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=utc_now)
