"""Persistence infrastructure providers."""

from dishka import Scope, provide

from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.service import Clock, IdGenerator, OwnershipPolicy
from forum.persistence.repository import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
)
from forum.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Repositories are APP-scoped so every request sees the same store.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_thread_repository(
        self, id_generator: IdGenerator, clock: Clock
    ) -> ThreadRepository:
        """Provide Thread repository."""
        return InMemoryThreadRepository(id_generator=id_generator, clock=clock)

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self,
        id_generator: IdGenerator,
        clock: Clock,
        ownership_policy: OwnershipPolicy,
    ) -> CommentRepository:
        """Provide Comment repository."""
        return InMemoryCommentRepository(
            id_generator=id_generator,
            clock=clock,
            ownership_policy=ownership_policy,
        )

    @provide(scope=Scope.APP)
    def get_reply_repository(
        self,
        id_generator: IdGenerator,
        clock: Clock,
        ownership_policy: OwnershipPolicy,
    ) -> ReplyRepository:
        """Provide Reply repository."""
        return InMemoryReplyRepository(
            id_generator=id_generator,
            clock=clock,
            ownership_policy=ownership_policy,
        )

    @provide(scope=Scope.APP)
    def get_like_repository(self) -> LikeRepository:
        """Provide Like repository."""
        return InMemoryLikeRepository()
