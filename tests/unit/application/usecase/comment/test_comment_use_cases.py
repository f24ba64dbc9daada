"""Unit tests for CreateCommentUseCase and GetCommentsUseCase."""

from uuid import uuid4

import pytest

from community.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from community.domain.error import AuthenticationRequiredError, ValidationError
from community.domain.repository import UserRepository
from community.domain.service import PostService
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_on_active_post(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.add(make_user("alice"))
        post = await (await unit_env.get(PostService)).get_active_post()
        create = await unit_env.get(CreateCommentUseCase)
        list_comments = await unit_env.get(GetCommentsUseCase)

        response = await create.execute(
            CreateCommentRequest(
                post_id=str(post.id), content="Hello", author_id=str(author.id)
            )
        )

        assert response.message == "Comment posted successfully."
        comments = await list_comments.execute(GetCommentsRequest(post_id=str(post.id)))
        assert [(c.username, c.content) for c in comments.comments] == [
            ("alice", "Hello")
        ]

    @pytest.mark.asyncio
    async def test_content_is_stored_as_sent(self, unit_env):
        author = await (await unit_env.get(UserRepository)).add(make_user("alice"))
        post = await (await unit_env.get(PostService)).get_active_post()
        create = await unit_env.get(CreateCommentUseCase)
        list_comments = await unit_env.get(GetCommentsUseCase)

        await create.execute(
            CreateCommentRequest(
                post_id=str(post.id), content="  Hello  ", author_id=str(author.id)
            )
        )

        comments = await list_comments.execute(GetCommentsRequest(post_id=str(post.id)))
        assert [c.content for c in comments.comments] == ["  Hello  "]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "post_id,content",
        [(None, "Hello"), ("some-id", None), ("some-id", "   ")],
    )
    async def test_missing_fields_are_rejected(self, unit_env, post_id, content):
        create = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="Missing postId or comment content."):
            await create.execute(
                CreateCommentRequest(
                    post_id=post_id, content=content, author_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_post_id_is_rejected(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError):
            await create.execute(
                CreateCommentRequest(
                    post_id="not-a-uuid", content="Hello", author_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_post_is_rejected(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.add(make_user("alice"))
        create = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="Post not found."):
            await create.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), content="Hello", author_id=str(author.id)
                )
            )

    @pytest.mark.asyncio
    async def test_deleted_author_requires_authentication(self, unit_env):
        post = await (await unit_env.get(PostService)).get_active_post()
        create = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(AuthenticationRequiredError):
            await create.execute(
                CreateCommentRequest(
                    post_id=str(post.id), content="Hello", author_id=str(uuid4())
                )
            )


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_post_has_no_comments(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(post_id=str(uuid4())))

        assert response.comments == []

    @pytest.mark.asyncio
    async def test_malformed_post_id_is_rejected(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(GetCommentsRequest(post_id="abc"))
