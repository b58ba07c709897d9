"""Unit tests for AddCommentUseCase."""

import pytest

from forum.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from forum.application.usecase.thread import AddThreadRequest, AddThreadUseCase
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import CommentRepository
from tests.harness import create_env_fixture

# Unit test fixture - fresh in-memory repositories
unit_env = create_env_fixture()


async def create_thread(unit_env) -> str:
    add_thread = await unit_env.get(AddThreadUseCase)
    added = await add_thread.execute(
        AddThreadRequest(payload={"title": "T", "body": "B"}, owner="user-123")
    )
    return added.id


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_comment_to_existing_thread(self, unit_env):
        # Arrange
        thread_id = await create_thread(unit_env)
        use_case = await unit_env.get(AddCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        added_comment = await use_case.execute(
            AddCommentRequest(
                payload={"content": "Komentar"},
                thread_id=thread_id,
                owner="user-456",
            )
        )

        # Assert
        assert added_comment.id.startswith("comment-")
        assert added_comment.content == "Komentar"
        assert added_comment.owner == "user-456"

        stored = await comment_repo.get_comment_by_id(added_comment.id)
        assert stored.thread_id == thread_id
        assert stored.is_delete is False

    @pytest.mark.asyncio
    async def test_unknown_thread_fails_before_any_write(self, unit_env):
        """No comment row should exist when the thread is missing."""
        use_case = await unit_env.get(AddCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                AddCommentRequest(
                    payload={"content": "Komentar"},
                    thread_id="thread-404",
                    owner="user-456",
                )
            )

        assert exc_info.value.resource == "thread"
        assert await comment_repo.get_comments_by_thread_id("thread-404") == []

    @pytest.mark.asyncio
    async def test_missing_content_fails_validation(self, unit_env):
        thread_id = await create_thread(unit_env)
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                AddCommentRequest(payload={}, thread_id=thread_id, owner="user-456")
            )

        assert exc_info.value.code == "NEW_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY"

    @pytest.mark.asyncio
    async def test_validation_runs_before_thread_lookup(self, unit_env):
        """A bad payload on a missing thread reports the payload problem."""
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                AddCommentRequest(
                    payload={"content": ["not", "text"]},
                    thread_id="thread-404",
                    owner="user-456",
                )
            )

        assert exc_info.value.code == "NEW_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION"
