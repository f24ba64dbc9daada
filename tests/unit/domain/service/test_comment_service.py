"""Unit tests for CommentService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from community.domain.model import Comment
from community.domain.model.common import utc_now
from community.domain.service import CommentService
from community.domain.value import CommentId, PostId, UserId, Username
from community.persistence.repository.inmemory import InMemoryCommentRepository


class TestCommentService:
    """Tests for comment creation and listing."""

    @pytest.mark.asyncio
    async def test_create_comment_snapshots_username(self):
        service = CommentService(InMemoryCommentRepository())
        post_id = PostId(uuid4())
        author_id = UserId(uuid4())

        comment = await service.create_comment(
            post_id=post_id,
            author_id=author_id,
            author_username=Username("alice"),
            content="Hello",
        )

        assert comment.post_id == post_id
        assert comment.author_id == author_id
        assert comment.author_username.root == "alice"
        assert comment.content == "Hello"

    @pytest.mark.asyncio
    async def test_comments_are_listed_oldest_first(self):
        repo = InMemoryCommentRepository()
        service = CommentService(repo)
        post_id = PostId(uuid4())
        now = utc_now()

        # Insert out of order
        for offset, text in [(2, "third"), (0, "first"), (1, "second")]:
            await repo.add(
                Comment(
                    id=CommentId(uuid4()),
                    post_id=post_id,
                    author_id=UserId(uuid4()),
                    author_username=Username("alice"),
                    content=text,
                    created_at=now + timedelta(seconds=offset),
                )
            )

        comments = await service.get_comments_for_post(post_id)

        assert [c.content for c in comments] == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_comments_are_scoped_to_post(self):
        service = CommentService(InMemoryCommentRepository())
        post_a, post_b = PostId(uuid4()), PostId(uuid4())

        await service.create_comment(post_a, UserId(uuid4()), Username("a"), "on a")
        await service.create_comment(post_b, UserId(uuid4()), Username("b"), "on b")

        comments = await service.get_comments_for_post(post_a)

        assert [c.content for c in comments] == ["on a"]
