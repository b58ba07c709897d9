"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import AddCommentUseCase, DeleteCommentUseCase
from forum.application.usecase.like import ToggleCommentLikeUseCase
from forum.application.usecase.reply import AddReplyUseCase, DeleteReplyUseCase
from forum.application.usecase.thread import AddThreadUseCase, GetThreadDetailUseCase
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.service import OwnershipPolicy
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_add_thread_use_case(
        self, thread_repository: ThreadRepository
    ) -> AddThreadUseCase:
        """Provide add thread use case."""
        return AddThreadUseCase(thread_repository=thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_detail_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
    ) -> GetThreadDetailUseCase:
        """Provide get thread detail use case."""
        return GetThreadDetailUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            like_repository=like_repository,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_repository: CommentRepository,
        ownership_policy: OwnershipPolicy,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_repository=comment_repository,
            ownership_policy=ownership_policy,
        )

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        ownership_policy: OwnershipPolicy,
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            ownership_policy=ownership_policy,
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_comment_like_use_case(
        self,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
    ) -> ToggleCommentLikeUseCase:
        """Provide toggle comment like use case."""
        return ToggleCommentLikeUseCase(
            comment_repository=comment_repository,
            like_repository=like_repository,
        )
