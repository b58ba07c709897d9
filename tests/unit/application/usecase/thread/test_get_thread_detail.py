"""Unit tests for GetThreadDetailUseCase."""

import pytest

from forum.application.usecase.thread import (
    GetThreadDetailRequest,
    GetThreadDetailUseCase,
)
from forum.domain.error import NotFoundError
from forum.domain.model import (
    DELETED_COMMENT_CONTENT,
    DELETED_REPLY_CONTENT,
    NewComment,
    NewReply,
    NewThread,
)
from forum.persistence.repository import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
)


@pytest.fixture
def repos(id_generator, clock, ownership_policy):
    return {
        "thread_repository": InMemoryThreadRepository(id_generator, clock),
        "comment_repository": InMemoryCommentRepository(
            id_generator, clock, ownership_policy
        ),
        "reply_repository": InMemoryReplyRepository(
            id_generator, clock, ownership_policy
        ),
        "like_repository": InMemoryLikeRepository(),
    }


@pytest.fixture
def use_case(repos):
    return GetThreadDetailUseCase(**repos)


async def seed_thread(repos) -> str:
    record = await repos["thread_repository"].add_thread(
        NewThread(title="Judul", body="Isi", owner="user-123")
    )
    return record["id"]


async def seed_comment(repos, thread_id, content, owner="user-123") -> str:
    record = await repos["comment_repository"].add_comment(
        NewComment(content=content, owner=owner, thread_id=thread_id)
    )
    return record["id"]


class TestGetThreadDetailUseCase:
    """Tests for GetThreadDetailUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_thread_raises_not_found(self, use_case):
        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadDetailRequest(thread_id="thread-404"))

    @pytest.mark.asyncio
    async def test_thread_without_comments(self, use_case, repos):
        thread_id = await seed_thread(repos)

        detail = await use_case.execute(GetThreadDetailRequest(thread_id=thread_id))

        assert detail.id == thread_id
        assert detail.title == "Judul"
        assert detail.body == "Isi"
        assert detail.owner == "user-123"
        assert detail.comments == ()

    @pytest.mark.asyncio
    async def test_comments_and_replies_in_date_order(self, use_case, repos):
        thread_id = await seed_thread(repos)
        first = await seed_comment(repos, thread_id, "pertama")
        second = await seed_comment(repos, thread_id, "kedua")
        for content in ("balasan 1", "balasan 2"):
            await repos["reply_repository"].add_reply(
                NewReply(content=content, owner="user-456", comment_id=first)
            )

        detail = await use_case.execute(GetThreadDetailRequest(thread_id=thread_id))

        assert [c.id for c in detail.comments] == [first, second]
        assert [r.content for r in detail.comments[0].replies] == [
            "balasan 1",
            "balasan 2",
        ]
        assert detail.comments[1].replies == ()
        assert detail.comments[0].date < detail.comments[1].date

    @pytest.mark.asyncio
    async def test_deleted_comment_is_redacted(self, use_case, repos):
        """Soft-deleted comments stay listed without leaking their content."""
        thread_id = await seed_thread(repos)
        comment_id = await seed_comment(repos, thread_id, "rahasia")
        await repos["comment_repository"].soft_delete_comment(comment_id)

        detail = await use_case.execute(GetThreadDetailRequest(thread_id=thread_id))

        assert len(detail.comments) == 1
        assert detail.comments[0].id == comment_id
        assert detail.comments[0].content == DELETED_COMMENT_CONTENT
        assert "rahasia" not in detail.model_dump_json()

    @pytest.mark.asyncio
    async def test_deleted_reply_is_redacted(self, use_case, repos):
        thread_id = await seed_thread(repos)
        comment_id = await seed_comment(repos, thread_id, "komentar")
        record = await repos["reply_repository"].add_reply(
            NewReply(content="rahasia", owner="user-456", comment_id=comment_id)
        )
        await repos["reply_repository"].soft_delete_reply(record["id"])

        detail = await use_case.execute(GetThreadDetailRequest(thread_id=thread_id))

        assert detail.comments[0].replies[0].content == DELETED_REPLY_CONTENT
        assert detail.comments[0].content == "komentar"

    @pytest.mark.asyncio
    async def test_like_counts_per_comment(self, use_case, repos):
        thread_id = await seed_thread(repos)
        liked = await seed_comment(repos, thread_id, "disukai")
        await seed_comment(repos, thread_id, "biasa")
        await repos["like_repository"].add_like(liked, "user-123")
        await repos["like_repository"].add_like(liked, "user-456")

        detail = await use_case.execute(GetThreadDetailRequest(thread_id=thread_id))

        assert [c.like_count for c in detail.comments] == [2, 0]
