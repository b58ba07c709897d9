"""Like repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from forum.domain.value import CommentId, UserId


class LikeRepository(ABC):
    """Repository for comment likes.

    At most one like exists per (comment, user) pair.
    """

    @abstractmethod
    async def is_liked(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user has liked a comment."""
        pass

    @abstractmethod
    async def add_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Record a like.

        Raises:
            IntegrityError: If the user already likes the comment
        """
        pass

    @abstractmethod
    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a like. Removing an absent like is a no-op."""
        pass

    @abstractmethod
    async def count_likes(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        pass

    @abstractmethod
    async def count_likes_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes on several comments at once (batch query).

        Args:
            comment_ids: Comment IDs to count

        Returns:
            Mapping of every requested comment ID to its like count
        """
        pass
