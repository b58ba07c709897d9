"""Delete reply use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import CommentRepository, ReplyRepository
from forum.domain.service import OwnershipPolicy
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    thread_id: str
    comment_id: str
    reply_id: str
    user_id: str  # Current user ID (must be owner)


class DeleteReplyUseCase(BaseUseCase):
    """Use case for soft-deleting a reply."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        ownership_policy: OwnershipPolicy,
    ) -> None:
        """Initialize delete reply use case.

        Args:
            comment_repository: Comment repository
            reply_repository: Reply repository
            ownership_policy: Ownership authorization policy
        """
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.ownership_policy = ownership_policy

    async def execute(self, request: DeleteReplyRequest) -> None:
        """Execute delete reply flow.

        Args:
            request: Delete reply request

        Raises:
            NotFoundError: If the comment or reply is missing, deleted or misplaced
            AuthorizationError: If the user doesn't own the reply
        """
        comment_id = CommentId(request.comment_id)
        reply_id = ReplyId(request.reply_id)

        # 1. Parent comment must be live and in the thread
        await self.comment_repository.verify_comment_in_thread(
            comment_id, ThreadId(request.thread_id)
        )

        # 2. Retrieve live reply under that comment
        reply = await self.reply_repository.get_reply_by_id(reply_id)
        if reply.comment_id != comment_id:
            raise NotFoundError("reply", request.reply_id)

        # 3. Check authorization (user owns reply)
        self.ownership_policy.verify_owner(
            reply.owner, UserId(request.user_id), "reply", request.reply_id
        )

        # 4. Flip the deleted flag
        await self.reply_repository.soft_delete_reply(reply_id)
