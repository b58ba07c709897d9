"""Reply entities.

Replies hang off a comment and share its lifecycle: owned, soft-deletable.
"""

from datetime import datetime

from forum.domain.model.common import PayloadEntity
from forum.domain.value import CommentId, ReplyId, UserId

DELETED_REPLY_CONTENT = "**balasan telah dihapus**"


class NewReply(PayloadEntity):
    """Payload for replying to a comment."""

    ERROR_PREFIX = "NEW_REPLY"
    REQUIRED = {"content": str, "owner": str, "comment_id": str}

    content: str
    owner: UserId
    comment_id: CommentId


class AddedReply(PayloadEntity):
    """Result of adding a reply."""

    ERROR_PREFIX = "ADDED_REPLY"
    REQUIRED = {"id": str, "content": str, "owner": str}

    id: ReplyId
    content: str
    owner: UserId


class Reply(PayloadEntity):
    """Persisted reply, including soft-deleted ones."""

    ERROR_PREFIX = "REPLY"
    REQUIRED = {
        "id": str,
        "comment_id": str,
        "content": str,
        "owner": str,
        "date": datetime,
    }
    OPTIONAL = {"is_delete": bool}

    id: ReplyId
    comment_id: CommentId
    content: str
    owner: UserId
    date: datetime
    is_delete: bool = False


class ReplyDetail(PayloadEntity):
    """Reply as shown under its comment in a thread detail."""

    ERROR_PREFIX = "REPLY_DETAIL"
    REQUIRED = {"id": str, "owner": str, "date": datetime, "content": str}

    id: ReplyId
    owner: UserId
    date: datetime
    content: str

    @classmethod
    def from_reply(cls, reply: Reply) -> "ReplyDetail":
        """Build the view of a reply, redacting its content if deleted."""
        return cls(
            id=reply.id,
            owner=reply.owner,
            date=reply.date,
            content=DELETED_REPLY_CONTENT if reply.is_delete else reply.content,
        )
