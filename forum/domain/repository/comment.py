"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from forum.domain.model.comment import Comment, NewComment
from forum.domain.value import CommentId, ThreadId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Soft-deleted comments count as not found for lookups but are still
    returned when listing a thread's comments.
    """

    @abstractmethod
    async def add_comment(self, new_comment: NewComment) -> dict[str, Any]:
        """Persist a new comment.

        Args:
            new_comment: Validated comment payload

        Returns:
            Record with the generated ``id`` plus ``content`` and ``owner``
        """
        pass

    @abstractmethod
    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a live comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment does not exist or is soft-deleted
        """
        pass

    @abstractmethod
    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> list[Comment]:
        """Get all comments of a thread, soft-deleted ones included.

        Args:
            thread_id: The thread ID

        Returns:
            Comments ordered by date ascending
        """
        pass

    @abstractmethod
    async def soft_delete_comment(self, comment_id: CommentId) -> None:
        """Mark a comment as deleted without removing it.

        Args:
            comment_id: The comment ID

        Raises:
            NotFoundError: If the comment does not exist or is already deleted
        """
        pass

    @abstractmethod
    async def verify_comment_owner(self, comment_id: CommentId, owner: UserId) -> None:
        """Check that a comment is owned by the given user.

        Args:
            comment_id: The comment ID
            owner: The user expected to own the comment

        Raises:
            NotFoundError: If the comment does not exist or is soft-deleted
            AuthorizationError: If the comment belongs to someone else
        """
        pass

    @abstractmethod
    async def verify_comment_in_thread(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Check that a live comment exists under the given thread.

        Args:
            comment_id: The comment ID
            thread_id: The thread the comment must belong to

        Raises:
            NotFoundError: If the comment is missing, soft-deleted or elsewhere
        """
        pass
