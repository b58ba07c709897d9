"""In-memory reply repository."""

from typing import Any

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.reply import NewReply, Reply
from forum.domain.repository.reply import ReplyRepository
from forum.domain.service.authorization import OwnershipPolicy
from forum.domain.service.generator import Clock, IdGenerator
from forum.domain.value import CommentId, IdPrefix, ReplyId, UserId


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository."""

    def __init__(
        self,
        id_generator: IdGenerator,
        clock: Clock,
        ownership_policy: OwnershipPolicy,
    ) -> None:
        self.id_generator = id_generator
        self.clock = clock
        self.ownership_policy = ownership_policy
        self._replies: dict[ReplyId, Reply] = {}

    async def add_reply(self, new_reply: NewReply) -> dict[str, Any]:
        """Store a reply with a generated ID and creation date."""
        with logfire.span(
            "reply_repository.add_reply",
            comment_id=new_reply.comment_id,
            owner=new_reply.owner,
        ):
            reply = Reply(
                id=self.id_generator.generate(IdPrefix.REPLY),
                comment_id=new_reply.comment_id,
                content=new_reply.content,
                owner=new_reply.owner,
                date=self.clock.now(),
                is_delete=False,
            )
            self._replies[reply.id] = reply
            logfire.info("Reply added", reply_id=reply.id, comment_id=reply.comment_id)
            return {"id": reply.id, "content": reply.content, "owner": reply.owner}

    async def get_reply_by_id(self, reply_id: ReplyId) -> Reply:
        """Get a live reply by ID."""
        reply = self._replies.get(reply_id)
        if reply is None or reply.is_delete:
            logfire.warn("Reply not found or deleted", reply_id=reply_id)
            raise NotFoundError("reply", reply_id)
        return reply

    async def get_replies_by_comment_id(self, comment_id: CommentId) -> list[Reply]:
        """Get all replies to a comment in date order."""
        replies = [r for r in self._replies.values() if r.comment_id == comment_id]
        replies.sort(key=lambda r: r.date)
        return replies

    async def soft_delete_reply(self, reply_id: ReplyId) -> None:
        """Flip the reply's deleted flag."""
        reply = await self.get_reply_by_id(reply_id)
        self._replies[reply_id] = reply.model_copy(update={"is_delete": True})
        logfire.info("Reply soft-deleted", reply_id=reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, owner: UserId) -> None:
        """Check that a reply is owned by the given user."""
        reply = await self.get_reply_by_id(reply_id)
        self.ownership_policy.verify_owner(reply.owner, owner, "reply", reply_id)
