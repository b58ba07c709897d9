"""Delete comment use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import CommentRepository
from forum.domain.service import OwnershipPolicy
from forum.domain.value import CommentId, ThreadId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    thread_id: str
    comment_id: str
    user_id: str  # Current user ID (must be owner)


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        ownership_policy: OwnershipPolicy,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_repository: Comment repository
            ownership_policy: Ownership authorization policy
        """
        self.comment_repository = comment_repository
        self.ownership_policy = ownership_policy

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Deleting an already deleted comment fails like a missing one.

        Args:
            request: Delete comment request

        Raises:
            NotFoundError: If the comment is missing, deleted or in another thread
            AuthorizationError: If the user doesn't own the comment
        """
        comment_id = CommentId(request.comment_id)

        # 1. Retrieve live comment
        comment = await self.comment_repository.get_comment_by_id(comment_id)

        # 2. Validate comment belongs to specified thread
        if comment.thread_id != ThreadId(request.thread_id):
            raise NotFoundError("comment", request.comment_id)

        # 3. Check authorization (user owns comment)
        self.ownership_policy.verify_owner(
            comment.owner, UserId(request.user_id), "comment", request.comment_id
        )

        # 4. Flip the deleted flag
        await self.comment_repository.soft_delete_comment(comment_id)
