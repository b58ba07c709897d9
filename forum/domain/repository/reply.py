"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from forum.domain.model.reply import NewReply, Reply
from forum.domain.value import CommentId, ReplyId, UserId


class ReplyRepository(ABC):
    """Repository for Reply entity.

    Mirrors CommentRepository, scoped by parent comment instead of thread.
    """

    @abstractmethod
    async def add_reply(self, new_reply: NewReply) -> dict[str, Any]:
        """Persist a new reply.

        Args:
            new_reply: Validated reply payload

        Returns:
            Record with the generated ``id`` plus ``content`` and ``owner``
        """
        pass

    @abstractmethod
    async def get_reply_by_id(self, reply_id: ReplyId) -> Reply:
        """Get a live reply by ID.

        Raises:
            NotFoundError: If the reply does not exist or is soft-deleted
        """
        pass

    @abstractmethod
    async def get_replies_by_comment_id(self, comment_id: CommentId) -> list[Reply]:
        """Get all replies to a comment, soft-deleted ones included.

        Returns:
            Replies ordered by date ascending
        """
        pass

    @abstractmethod
    async def soft_delete_reply(self, reply_id: ReplyId) -> None:
        """Mark a reply as deleted without removing it.

        Raises:
            NotFoundError: If the reply does not exist or is already deleted
        """
        pass

    @abstractmethod
    async def verify_reply_owner(self, reply_id: ReplyId, owner: UserId) -> None:
        """Check that a reply is owned by the given user.

        Raises:
            NotFoundError: If the reply does not exist or is soft-deleted
            AuthorizationError: If the reply belongs to someone else
        """
        pass
