"""Comment entities.

Comments belong to exactly one thread. Deleting a comment only flips
``is_delete``; the row stays so the thread keeps its structure.
"""

from collections.abc import Sequence
from datetime import datetime

from pydantic import Field

from forum.domain.model.common import PayloadEntity
from forum.domain.model.reply import ReplyDetail
from forum.domain.value import CommentId, ThreadId, UserId

DELETED_COMMENT_CONTENT = "**komentar telah dihapus**"


class NewComment(PayloadEntity):
    """Payload for commenting on a thread."""

    ERROR_PREFIX = "NEW_COMMENT"
    REQUIRED = {"content": str, "owner": str, "thread_id": str}

    content: str
    owner: UserId
    thread_id: ThreadId


class AddedComment(PayloadEntity):
    """Result of adding a comment."""

    ERROR_PREFIX = "ADDED_COMMENT"
    REQUIRED = {"id": str, "content": str, "owner": str}

    id: CommentId
    content: str
    owner: UserId


class Comment(PayloadEntity):
    """Persisted comment, including soft-deleted ones."""

    ERROR_PREFIX = "COMMENT"
    REQUIRED = {
        "id": str,
        "thread_id": str,
        "content": str,
        "owner": str,
        "date": datetime,
    }
    OPTIONAL = {"is_delete": bool}

    id: CommentId
    thread_id: ThreadId
    content: str
    owner: UserId
    date: datetime
    is_delete: bool = False


class CommentDetail(PayloadEntity):
    """Comment as shown in a thread detail."""

    ERROR_PREFIX = "COMMENT_DETAIL"
    REQUIRED = {"id": str, "owner": str, "date": datetime, "content": str}
    OPTIONAL = {"like_count": int, "replies": (list, tuple)}

    id: CommentId
    owner: UserId
    date: datetime
    content: str
    like_count: int = Field(default=0, ge=0)
    replies: tuple[ReplyDetail, ...] = ()

    @classmethod
    def from_comment(
        cls,
        comment: Comment,
        replies: Sequence[ReplyDetail],
        like_count: int,
    ) -> "CommentDetail":
        """Build the view of a comment, redacting its content if deleted."""
        return cls(
            id=comment.id,
            owner=comment.owner,
            date=comment.date,
            content=DELETED_COMMENT_CONTENT if comment.is_delete else comment.content,
            like_count=like_count,
            replies=tuple(replies),
        )
