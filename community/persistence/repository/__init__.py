"""PostgreSQL repository implementations."""

from community.persistence.repository.comment import PostgresCommentRepository
from community.persistence.repository.post import PostgresPostRepository
from community.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
