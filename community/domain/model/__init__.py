"""Domain model entities."""

from community.domain.model.comment import Comment
from community.domain.model.post import Post
from community.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
]
