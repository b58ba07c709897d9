"""In-memory like repository."""

from collections.abc import Sequence

import logfire

from forum.domain.model.like import Like
from forum.domain.repository.like import LikeRepository
from forum.domain.value import CommentId, UserId
from forum.persistence.error import IntegrityError


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository."""

    def __init__(self) -> None:
        self._likes: set[Like] = set()

    async def is_liked(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user has liked a comment."""
        return Like(comment_id=comment_id, user_id=user_id) in self._likes

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Record a like.

        Raises:
            IntegrityError: If the like already exists (duplicate)
        """
        like = Like(comment_id=comment_id, user_id=user_id)
        if like in self._likes:
            logfire.warn("Duplicate like attempt", comment_id=comment_id, user_id=user_id)
            raise IntegrityError(f"Duplicate like on {comment_id} by {user_id}")
        self._likes.add(like)
        logfire.info("Like added", comment_id=comment_id, user_id=user_id)

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a like if present."""
        self._likes.discard(Like(comment_id=comment_id, user_id=user_id))
        logfire.info("Like removed", comment_id=comment_id, user_id=user_id)

    async def count_likes(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        return sum(1 for like in self._likes if like.comment_id == comment_id)

    async def count_likes_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes on several comments at once."""
        counts = {comment_id: 0 for comment_id in comment_ids}
        for like in self._likes:
            if like.comment_id in counts:
                counts[like.comment_id] += 1
        return counts
