"""In-memory comment repository."""

from typing import Any

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.comment import Comment, NewComment
from forum.domain.repository.comment import CommentRepository
from forum.domain.service.authorization import OwnershipPolicy
from forum.domain.service.generator import Clock, IdGenerator
from forum.domain.value import CommentId, IdPrefix, ThreadId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(
        self,
        id_generator: IdGenerator,
        clock: Clock,
        ownership_policy: OwnershipPolicy,
    ) -> None:
        self.id_generator = id_generator
        self.clock = clock
        self.ownership_policy = ownership_policy
        self._comments: dict[CommentId, Comment] = {}

    async def add_comment(self, new_comment: NewComment) -> dict[str, Any]:
        """Store a comment with a generated ID and creation date."""
        with logfire.span(
            "comment_repository.add_comment",
            thread_id=new_comment.thread_id,
            owner=new_comment.owner,
        ):
            comment = Comment(
                id=self.id_generator.generate(IdPrefix.COMMENT),
                thread_id=new_comment.thread_id,
                content=new_comment.content,
                owner=new_comment.owner,
                date=self.clock.now(),
                is_delete=False,
            )
            self._comments[comment.id] = comment
            logfire.info(
                "Comment added", comment_id=comment.id, thread_id=comment.thread_id
            )
            return {"id": comment.id, "content": comment.content, "owner": comment.owner}

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a live comment by ID."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_delete:
            logfire.warn("Comment not found or deleted", comment_id=comment_id)
            raise NotFoundError("comment", comment_id)
        return comment

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> list[Comment]:
        """Get all comments of a thread in date order."""
        comments = [c for c in self._comments.values() if c.thread_id == thread_id]
        comments.sort(key=lambda c: c.date)
        return comments

    async def soft_delete_comment(self, comment_id: CommentId) -> None:
        """Flip the comment's deleted flag."""
        comment = await self.get_comment_by_id(comment_id)
        # Comments are immutable, so store an updated copy
        self._comments[comment_id] = comment.model_copy(update={"is_delete": True})
        logfire.info("Comment soft-deleted", comment_id=comment_id)

    async def verify_comment_owner(self, comment_id: CommentId, owner: UserId) -> None:
        """Check that a comment is owned by the given user."""
        comment = await self.get_comment_by_id(comment_id)
        self.ownership_policy.verify_owner(comment.owner, owner, "comment", comment_id)

    async def verify_comment_in_thread(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Check that a live comment exists under the given thread."""
        comment = await self.get_comment_by_id(comment_id)
        if comment.thread_id != thread_id:
            logfire.warn(
                "Comment does not belong to thread",
                comment_id=comment_id,
                comment_thread_id=comment.thread_id,
                target_thread_id=thread_id,
            )
            raise NotFoundError("comment", comment_id)
