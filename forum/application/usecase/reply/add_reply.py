"""Add reply use case."""

from typing import Any

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, merge_payload
from forum.domain.model.reply import AddedReply, NewReply
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import ThreadId


class AddReplyRequest(BaseModel):
    """Add reply request."""

    payload: Any = None  # Raw request body, not necessarily an object
    thread_id: str  # From the route
    comment_id: str  # From the route
    owner: str  # User ID from authenticated user


class AddReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize add reply use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def execute(self, request: AddReplyRequest) -> AddedReply:
        """Execute add reply flow.

        Steps:
        1. Validate the payload (owner and parent comment merged in)
        2. Verify the thread exists
        3. Verify the comment is live and belongs to the thread
        4. Persist the reply

        Args:
            request: Add reply request

        Returns:
            The added reply

        Raises:
            ValidationError: If the payload is missing fields or mistyped
            NotFoundError: If the thread or comment does not exist
        """
        new_reply = NewReply.model_validate(
            merge_payload(
                request.payload, owner=request.owner, comment_id=request.comment_id
            )
        )
        thread_id = ThreadId(request.thread_id)

        await self.thread_repository.verify_thread_exists(thread_id)
        await self.comment_repository.verify_comment_in_thread(
            new_reply.comment_id, thread_id
        )

        record = await self.reply_repository.add_reply(new_reply)
        return AddedReply.from_record(record)
