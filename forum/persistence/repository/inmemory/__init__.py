"""In-memory repository implementations."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .reply import InMemoryReplyRepository
from .thread import InMemoryThreadRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryReplyRepository",
    "InMemoryThreadRepository",
]
