"""Domain value objects."""

from community.domain.value.identifiers import CommentId, PostId, UserId
from community.domain.value.types import ExternalProfile, Slug, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "ExternalProfile",
    "Slug",
    "Username",
]
