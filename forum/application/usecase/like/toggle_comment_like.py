"""Toggle comment like use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import CommentRepository, LikeRepository
from forum.domain.value import CommentId, ThreadId, UserId


class ToggleCommentLikeRequest(BaseModel):
    """Toggle comment like request."""

    comment_id: str
    user_id: str  # User ID from authenticated user
    thread_id: str | None = None  # When given, the comment must belong to it


class ToggleCommentLikeResponse(BaseModel):
    """Toggle comment like response."""

    comment_id: str
    liked: bool  # State after the toggle


class ToggleCommentLikeUseCase(BaseUseCase):
    """Use case for liking a comment, or un-liking it if already liked.

    Callers cannot ask for a particular end state; each call flips it.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
    ) -> None:
        """Initialize toggle comment like use case.

        Args:
            comment_repository: Comment repository
            like_repository: Like repository
        """
        self.comment_repository = comment_repository
        self.like_repository = like_repository

    async def execute(self, request: ToggleCommentLikeRequest) -> ToggleCommentLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle comment like request

        Returns:
            The like state after the toggle

        Raises:
            NotFoundError: If the comment is missing, deleted or in another thread
        """
        comment_id = CommentId(request.comment_id)
        user_id = UserId(request.user_id)

        if request.thread_id is None:
            await self.comment_repository.get_comment_by_id(comment_id)
        else:
            await self.comment_repository.verify_comment_in_thread(
                comment_id, ThreadId(request.thread_id)
            )

        if await self.like_repository.is_liked(comment_id, user_id):
            await self.like_repository.remove_like(comment_id, user_id)
            liked = False
        else:
            await self.like_repository.add_like(comment_id, user_id)
            liked = True

        return ToggleCommentLikeResponse(comment_id=request.comment_id, liked=liked)
