"""Unit tests for DeleteReplyUseCase."""

import pytest

from forum.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from forum.application.usecase.reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)
from forum.application.usecase.thread import AddThreadRequest, AddThreadUseCase
from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.repository import ReplyRepository
from tests.harness import create_env_fixture

# Unit test fixture - fresh in-memory repositories
unit_env = create_env_fixture()


async def create_reply(unit_env, owner="user-456") -> tuple[str, str, str]:
    add_thread = await unit_env.get(AddThreadUseCase)
    add_comment = await unit_env.get(AddCommentUseCase)
    add_reply = await unit_env.get(AddReplyUseCase)
    thread = await add_thread.execute(
        AddThreadRequest(payload={"title": "T", "body": "B"}, owner="user-123")
    )
    comment = await add_comment.execute(
        AddCommentRequest(
            payload={"content": "C"}, thread_id=thread.id, owner="user-123"
        )
    )
    reply = await add_reply.execute(
        AddReplyRequest(
            payload={"content": "R"},
            thread_id=thread.id,
            comment_id=comment.id,
            owner=owner,
        )
    )
    return thread.id, comment.id, reply.id


class TestDeleteReplyUseCase:
    """Tests for DeleteReplyUseCase."""

    @pytest.mark.asyncio
    async def test_owner_can_delete(self, unit_env):
        # Arrange
        thread_id, comment_id, reply_id = await create_reply(unit_env)
        use_case = await unit_env.get(DeleteReplyUseCase)
        reply_repo = await unit_env.get(ReplyRepository)

        # Act
        await use_case.execute(
            DeleteReplyRequest(
                thread_id=thread_id,
                comment_id=comment_id,
                reply_id=reply_id,
                user_id="user-456",
            )
        )

        # Assert
        replies = await reply_repo.get_replies_by_comment_id(comment_id)
        assert [r.is_delete for r in replies] == [True]

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected(self, unit_env):
        """The comment owner does not own replies to the comment."""
        thread_id, comment_id, reply_id = await create_reply(unit_env)
        use_case = await unit_env.get(DeleteReplyUseCase)
        reply_repo = await unit_env.get(ReplyRepository)

        with pytest.raises(AuthorizationError):
            await use_case.execute(
                DeleteReplyRequest(
                    thread_id=thread_id,
                    comment_id=comment_id,
                    reply_id=reply_id,
                    user_id="user-123",
                )
            )

        reply = await reply_repo.get_reply_by_id(reply_id)
        assert reply.is_delete is False

    @pytest.mark.asyncio
    async def test_deleting_twice_raises_not_found(self, unit_env):
        thread_id, comment_id, reply_id = await create_reply(unit_env)
        use_case = await unit_env.get(DeleteReplyUseCase)
        request = DeleteReplyRequest(
            thread_id=thread_id,
            comment_id=comment_id,
            reply_id=reply_id,
            user_id="user-456",
        )
        await use_case.execute(request)

        with pytest.raises(NotFoundError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_reply_under_other_comment_raises_not_found(self, unit_env):
        thread_id, _, reply_id = await create_reply(unit_env)
        add_comment = await unit_env.get(AddCommentUseCase)
        other = await add_comment.execute(
            AddCommentRequest(
                payload={"content": "Lain"}, thread_id=thread_id, owner="user-123"
            )
        )
        use_case = await unit_env.get(DeleteReplyUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                DeleteReplyRequest(
                    thread_id=thread_id,
                    comment_id=other.id,
                    reply_id=reply_id,
                    user_id="user-456",
                )
            )

        assert exc_info.value.resource == "reply"

    @pytest.mark.asyncio
    async def test_comment_in_other_thread_raises_not_found(self, unit_env):
        _, comment_id, reply_id = await create_reply(unit_env)
        use_case = await unit_env.get(DeleteReplyUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                DeleteReplyRequest(
                    thread_id="thread-other",
                    comment_id=comment_id,
                    reply_id=reply_id,
                    user_id="user-456",
                )
            )

        assert exc_info.value.resource == "comment"
