"""Domain value objects for the forum."""

from forum.domain.value.identifiers import CommentId, ReplyId, ThreadId, UserId
from forum.domain.value.types import IdPrefix, ShapeViolation

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    "ReplyId",
    # Types
    "IdPrefix",
    "ShapeViolation",
]
