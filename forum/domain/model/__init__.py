"""Domain model entities for the forum."""

from forum.domain.model.comment import (
    DELETED_COMMENT_CONTENT,
    AddedComment,
    Comment,
    CommentDetail,
    NewComment,
)
from forum.domain.model.like import Like
from forum.domain.model.reply import (
    DELETED_REPLY_CONTENT,
    AddedReply,
    NewReply,
    Reply,
    ReplyDetail,
)
from forum.domain.model.thread import AddedThread, NewThread, Thread, ThreadDetail

__all__ = [
    "NewThread",
    "AddedThread",
    "Thread",
    "ThreadDetail",
    "NewComment",
    "AddedComment",
    "Comment",
    "CommentDetail",
    "NewReply",
    "AddedReply",
    "Reply",
    "ReplyDetail",
    "Like",
    "DELETED_COMMENT_CONTENT",
    "DELETED_REPLY_CONTENT",
]
