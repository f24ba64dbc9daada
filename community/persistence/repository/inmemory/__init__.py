"""In-memory repository implementations for testing."""

from community.persistence.repository.inmemory.comment import (
    InMemoryCommentRepository,
)
from community.persistence.repository.inmemory.post import InMemoryPostRepository
from community.persistence.repository.inmemory.user import InMemoryUserRepository

__all__ = [
    "InMemoryUserRepository",
    "InMemoryPostRepository",
    "InMemoryCommentRepository",
]
