"""Repository implementations."""

from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
)

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryReplyRepository",
    "InMemoryThreadRepository",
]
