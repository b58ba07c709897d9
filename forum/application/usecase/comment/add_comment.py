"""Add comment use case."""

from typing import Any

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, merge_payload
from forum.domain.model.comment import AddedComment, NewComment
from forum.domain.repository import CommentRepository, ThreadRepository


class AddCommentRequest(BaseModel):
    """Add comment request."""

    payload: Any = None  # Raw request body, not necessarily an object
    thread_id: str  # From the route
    owner: str  # User ID from authenticated user


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a thread."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize add comment use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def execute(self, request: AddCommentRequest) -> AddedComment:
        """Execute add comment flow.

        Steps:
        1. Validate the payload (owner and thread merged in)
        2. Verify the thread exists
        3. Persist the comment

        Args:
            request: Add comment request

        Returns:
            The added comment

        Raises:
            ValidationError: If the payload is missing fields or mistyped
            NotFoundError: If the thread does not exist
        """
        new_comment = NewComment.model_validate(
            merge_payload(
                request.payload, owner=request.owner, thread_id=request.thread_id
            )
        )

        await self.thread_repository.verify_thread_exists(new_comment.thread_id)

        record = await self.comment_repository.add_comment(new_comment)
        return AddedComment.from_record(record)
