"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.service import Clock, IdGenerator, OwnershipPolicy
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(
        self, id_generator: IdGenerator, clock: Clock
    ) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository(id_generator=id_generator, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self,
        id_generator: IdGenerator,
        clock: Clock,
        ownership_policy: OwnershipPolicy,
    ) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(
            id_generator=id_generator,
            clock=clock,
            ownership_policy=ownership_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(
        self,
        id_generator: IdGenerator,
        clock: Clock,
        ownership_policy: OwnershipPolicy,
    ) -> ReplyRepository:
        """Provide in-memory reply repository."""
        return InMemoryReplyRepository(
            id_generator=id_generator,
            clock=clock,
            ownership_policy=ownership_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository()
