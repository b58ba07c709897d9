"""Get thread detail use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model.comment import CommentDetail
from forum.domain.model.reply import ReplyDetail
from forum.domain.model.thread import ThreadDetail
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import ThreadId


class GetThreadDetailRequest(BaseModel):
    """Get thread detail request."""

    thread_id: str


class GetThreadDetailUseCase(BaseUseCase):
    """Use case for reading a thread with its comments, replies and likes."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
    ) -> None:
        """Initialize get thread detail use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
            like_repository: Like repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.like_repository = like_repository

    async def execute(self, request: GetThreadDetailRequest) -> ThreadDetail:
        """Execute get thread detail flow.

        Steps:
        1. Fetch the thread
        2. Fetch all of its comments, deleted ones included
        3. Fetch each comment's replies, deleted ones included
        4. Count likes for all comments in one batch
        5. Assemble the view, redacting deleted content

        Comments and replies are ordered by date ascending.

        Args:
            request: Get thread detail request

        Returns:
            Thread detail view

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread_id = ThreadId(request.thread_id)

        thread = await self.thread_repository.get_thread_by_id(thread_id)

        comments = sorted(
            await self.comment_repository.get_comments_by_thread_id(thread_id),
            key=lambda c: c.date,
        )

        like_counts = await self.like_repository.count_likes_by_comment_ids(
            [comment.id for comment in comments]
        )

        comment_details = []
        for comment in comments:
            replies = sorted(
                await self.reply_repository.get_replies_by_comment_id(comment.id),
                key=lambda r: r.date,
            )
            comment_details.append(
                CommentDetail.from_comment(
                    comment,
                    replies=[ReplyDetail.from_reply(reply) for reply in replies],
                    like_count=like_counts.get(comment.id, 0),
                )
            )

        return ThreadDetail(
            id=thread.id,
            title=thread.title,
            body=thread.body,
            owner=thread.owner,
            date=thread.date,
            comments=tuple(comment_details),
        )
